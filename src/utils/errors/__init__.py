"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    MediaPayloadError,
    MessageParsingError,
)

__all__ = [
    "MediaPayloadError",
    "MessageParsingError",
]
