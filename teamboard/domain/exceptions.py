"""Errors shared across layers."""


class StoreError(RuntimeError):
    """The backing store rejected or failed an operation.

    The content save is the unit of user-visible success; callers may retry.
    """

    retryable = True


__all__ = ["StoreError"]
