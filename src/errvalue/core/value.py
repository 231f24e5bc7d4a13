# src/errvalue/core/value.py
"""
The ErrorValue type.

An ErrorValue is plain data: "an error occurred, described by this text".
It is not an exception and is never raised by this module; callers decide
whether to return it, log it, raise something built from it, or drop it.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ErrorValue:
    """Immutable carrier of a single error message.

    The message is stored exactly as given: no trimming, no validation and no
    normalization of embedded newlines or control characters.
    """

    message: str


def new(message: str) -> ErrorValue:
    """Construct an ErrorValue holding ``message`` unchanged. Never fails."""
    return ErrorValue(message)
