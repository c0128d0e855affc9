"""Serviços do módulo AI.

Exporta o parser de mensagens do assistente.
"""

from ai.services.message_parser import (
    MessageParser,
    get_message_parser,
    parse_chat_message,
)

__all__ = [
    "MessageParser",
    "get_message_parser",
    "parse_chat_message",
]
