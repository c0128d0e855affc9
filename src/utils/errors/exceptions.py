"""Exceções de domínio para falhas recuperáveis de parsing."""

from __future__ import annotations


class MessageParsingError(ValueError):
    """Base para falhas de parsing de mensagens do assistente."""


class MediaPayloadError(MessageParsingError):
    """Payload de bloco de mídia não decodificável ou sem objeto JSON."""
