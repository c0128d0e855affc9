"""Extração de tags inline de mídia nas respostas do assistente.

Formato compacto, usado quando a resposta não traz bloco JSON:

    Ouça: [EMBED_TRACK:audio/kyrie.mp3:Kyrie] e veja [EMBED_SCORE:kyrie.pdf:Kyrie]

O primeiro campo não contém ":" e o segundo não contém "]".
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from ai.config.settings import ChatMediaSettings, get_chat_media_settings
from ai.models.chat_media import ParsedMessage, ScoreRef, TrackRef

if TYPE_CHECKING:
    from ai.models.chat_media import MediaDescriptor

logger = logging.getLogger(__name__)


def _tag_pattern(tag: str) -> re.Pattern[str]:
    return re.compile(r"\[" + re.escape(tag) + r":([^:]+):([^\]]+)\]")


class InlineTagExtractor:
    """Converte tags [SCORE_TAG:url:nome] e [TRACK_TAG:path:nome] em mídia."""

    def __init__(self, settings: ChatMediaSettings | None = None) -> None:
        self._settings = settings or get_chat_media_settings()
        self._score_pattern = _tag_pattern(self._settings.score_tag)
        self._track_pattern = _tag_pattern(self._settings.track_tag)

    def extract(self, content: str) -> ParsedMessage:
        """Percorre as tags por posição, separando texto literal e mídias."""
        content = content or ""
        tags = sorted(
            [
                *self._score_pattern.finditer(content),
                *self._track_pattern.finditer(content),
            ],
            key=lambda match: match.start(),
        )

        text_segments: list[str] = []
        media: list[MediaDescriptor] = []
        cursor = 0

        for tag in tags:
            # Tag iniciada dentro de outra já consumida
            if tag.start() < cursor:
                continue

            preceding = content[cursor : tag.start()]
            if preceding.strip():
                text_segments.append(preceding)

            media.append(self._media_from_tag(tag))
            cursor = tag.end()

        trailing = content[cursor:]
        if tags and trailing.strip():
            text_segments.append(trailing)

        if media:
            logger.debug(
                "inline_tags_extracted",
                extra={"segments": len(text_segments), "media": len(media)},
            )
        return ParsedMessage(text_segments=text_segments, media=media)

    def _media_from_tag(self, tag: re.Match[str]) -> MediaDescriptor:
        first, name = tag.group(1), tag.group(2)
        if tag.re is self._score_pattern:
            return ScoreRef(url=first, name=name, pages=[first])
        return TrackRef(path=first, name=name)
