"""Adapter layer errors."""


class AdapterError(Exception):
    """Base adapter error."""

    pass
