"""Tests for settings loaded from the environment."""

import pytest
from pydantic import ValidationError

from teamboard.config import Settings, get_settings, reset_settings_cache


@pytest.fixture(autouse=True)
def fresh_settings():
    reset_settings_cache()
    yield
    reset_settings_cache()


def test_retention_defaults():
    settings = Settings(_env_file=None)

    assert settings.notification_cleanup_threshold == 100
    assert settings.notification_max_keep == 50
    assert settings.mention_candidate_limit == 8


def test_environment_overrides_are_picked_up_after_reset(monkeypatch):
    monkeypatch.setenv("NOTIFICATION_CLEANUP_THRESHOLD", "10")
    monkeypatch.setenv("NOTIFICATION_MAX_KEEP", "4")

    settings = get_settings()

    assert (settings.notification_cleanup_threshold, settings.notification_max_keep) == (10, 4)


def test_keep_cannot_exceed_threshold(monkeypatch):
    monkeypatch.setenv("NOTIFICATION_CLEANUP_THRESHOLD", "10")
    monkeypatch.setenv("NOTIFICATION_MAX_KEEP", "20")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)
