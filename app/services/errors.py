# app/services/errors.py
"""
Domain errors raised by the vehicle services.
ValidationError messages are safe to show to users; StoreError messages are not.
"""


class ValidationError(Exception):
    """A business rule rejected the vehicle. The message is user-facing."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class StoreError(Exception):
    """Technical persistence failure (connectivity, constraint, bad query)."""
