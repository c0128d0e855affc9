"""Configuração de IA.

Re-exporta settings do parser de mídia do chat.
"""

from ai.config.settings import (
    DEFAULT_BLOCK_CLOSE,
    DEFAULT_BLOCK_OPEN,
    DEFAULT_SCORE_TAG,
    DEFAULT_TRACK_TAG,
    ChatMediaSettings,
    get_chat_media_settings,
)

__all__ = [
    "DEFAULT_BLOCK_CLOSE",
    "DEFAULT_BLOCK_OPEN",
    "DEFAULT_SCORE_TAG",
    "DEFAULT_TRACK_TAG",
    "ChatMediaSettings",
    "get_chat_media_settings",
]
