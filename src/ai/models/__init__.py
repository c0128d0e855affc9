"""Modelos/DTOs para IA.

Re-exporta contratos de mídia embutida nas respostas do assistente.
"""

from ai.models.chat_media import (
    DEFAULT_RESOURCE_KIND,
    DEFAULT_RESOURCE_NAME,
    DEFAULT_SCORE_NAME,
    DEFAULT_TRACK_NAME,
    MediaDescriptor,
    ParsedMessage,
    ResourceRef,
    ScoreRef,
    TrackRef,
)

__all__ = [
    "DEFAULT_RESOURCE_KIND",
    "DEFAULT_RESOURCE_NAME",
    "DEFAULT_SCORE_NAME",
    "DEFAULT_TRACK_NAME",
    "MediaDescriptor",
    "ParsedMessage",
    "ResourceRef",
    "ScoreRef",
    "TrackRef",
]
