"""
mechanic_shop/errors.py

Exception types raised by the operation handlers.

Handlers catch `ValueError` (which covers these and pydantic's ValidationError)
together with SQLAlchemyError, print the message and return to the menu.
"""

from __future__ import annotations


class RecordNotFound(ValueError):
    """
    Raised when a lookup the operation depends on comes back empty.

    Args:
        message: What was not found, printed to stderr.
        hint: Optional advice for the operator, printed to stdout.
    """

    def __init__(self, message: str, hint: str | None = None):
        self.message = message
        self.hint = hint
        super().__init__(message)
