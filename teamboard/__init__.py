"""Teamboard: mention-aware notes, task comments and member notifications."""
