"""Validation helpers for catalog and configuration precondition checks."""

from .errors import InvalidArgumentError


def require_positive(value: float, error_msg: str) -> None:
    """Require that a value is greater than zero."""
    if value <= 0:
        raise InvalidArgumentError(error_msg)


def require_not_empty(text: str, error_msg: str) -> None:
    """Require that a string has at least one character."""
    if not text:
        raise InvalidArgumentError(error_msg)
