"""Módulo AI do Cancioneiro.

Interpreta respostas do assistente do catálogo:
1. MediaBlockExtractor - blocos JSON cercados com partituras/faixas/recursos
2. InlineTagExtractor - tags [EMBED_SCORE:...] / [EMBED_TRACK:...] (fallback)
3. MessageParser - pipeline que combina os dois e aplica o fallback final
"""

# Config
from ai.config import ChatMediaSettings, get_chat_media_settings

# Models
from ai.models import (
    MediaDescriptor,
    ParsedMessage,
    ResourceRef,
    ScoreRef,
    TrackRef,
)

# Rules
from ai.rules import block_extractor_produced_nothing, fallback_parsed_message

# Services
from ai.services import MessageParser, get_message_parser, parse_chat_message

# Utils
from ai.utils import (
    InlineTagExtractor,
    MediaBlockExtractor,
    is_audio_path,
    is_pdf_url,
)

__all__ = [
    # Config
    "ChatMediaSettings",
    # Utils
    "InlineTagExtractor",
    "MediaBlockExtractor",
    # Models
    "MediaDescriptor",
    # Services
    "MessageParser",
    "ParsedMessage",
    "ResourceRef",
    "ScoreRef",
    "TrackRef",
    # Rules
    "block_extractor_produced_nothing",
    "fallback_parsed_message",
    "get_chat_media_settings",
    "get_message_parser",
    "is_audio_path",
    "is_pdf_url",
    "parse_chat_message",
]
