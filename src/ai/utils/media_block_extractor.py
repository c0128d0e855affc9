"""Extração de mídia de blocos JSON cercados nas respostas do assistente.

Formato esperado (contrato com o template de prompt):

    Texto introdutório
    ```json
    {"scores": [{"url": "a.pdf", "name": "S1"}], "tracks": [...]}
    ```
    Texto final

Blocos com payload inválido viram texto literal (com delimitadores).
Entradas sem campos obrigatórios são descartadas individualmente.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Any

from ai.config.settings import ChatMediaSettings, get_chat_media_settings
from ai.models.chat_media import ParsedMessage, ResourceRef, ScoreRef, TrackRef
from ai.utils._json_extractor import decode_block_payload, string_list_field, text_field
from config.logging import log_fallback
from utils.errors import MediaPayloadError

if TYPE_CHECKING:
    from ai.models.chat_media import MediaDescriptor

logger = logging.getLogger(__name__)


class MediaBlockExtractor:
    """Separa blocos de mídia e texto literal, na ordem de aparição.

    Sem nenhum bloco na mensagem, retorna resultado vazio: o parser de
    mensagens decide então pelo fallback de tags inline.
    """

    def __init__(self, settings: ChatMediaSettings | None = None) -> None:
        self._settings = settings or get_chat_media_settings()
        self._pattern = re.compile(
            re.escape(self._settings.block_open)
            + r"\r?\n(.*?)"
            + re.escape(self._settings.block_close),
            re.DOTALL,
        )

    def extract(self, content: str) -> ParsedMessage:
        """Extrai segmentos de texto e mídias dos blocos da mensagem."""
        blocks = list(self._pattern.finditer(content or ""))
        if not blocks:
            return ParsedMessage.empty()

        text_segments: list[str] = []
        media: list[MediaDescriptor] = []
        last_index = 0

        for block_index, block in enumerate(blocks):
            _append_text(text_segments, content[last_index : block.start()])

            try:
                data = decode_block_payload(block.group(1))
            except MediaPayloadError as exc:
                logger.info(
                    "media_block_demoted",
                    extra={"block_index": block_index, "error": str(exc)},
                )
                log_fallback(logger, "media_block_extractor", reason="payload_decode_failed")
                text_segments.append(block.group(0))
            else:
                media.extend(self._media_from_payload(data, block_index))

            last_index = block.end()

        _append_text(text_segments, content[last_index:])

        logger.debug(
            "media_blocks_extracted",
            extra={
                "blocks": len(blocks),
                "segments": len(text_segments),
                "media": len(media),
            },
        )
        return ParsedMessage(text_segments=text_segments, media=media)

    def _media_from_payload(
        self,
        data: dict[str, Any],
        block_index: int,
    ) -> list[MediaDescriptor]:
        """Extrai mídias das listas e da forma de objeto único, nessa ordem."""
        media: list[MediaDescriptor] = []
        sections = (
            ("scores", self._score_from_entry),
            ("tracks", self._track_from_entry),
            ("resources", self._resource_from_entry),
        )
        for section, build in sections:
            entries = data.get(section)
            if not isinstance(entries, list):
                continue
            for entry_index, entry in enumerate(entries):
                item = build(entry) if isinstance(entry, dict) else None
                if item is None:
                    logger.debug(
                        "media_entry_skipped",
                        extra={
                            "block_index": block_index,
                            "section": section,
                            "entry_index": entry_index,
                        },
                    )
                    continue
                media.append(item)

        media.extend(self._media_from_root_object(data))
        return media

    def _score_from_entry(self, entry: dict[str, Any]) -> ScoreRef | None:
        url = text_field(entry, "url")
        pages = string_list_field(entry, "pages")
        if url is None and not pages:
            return None
        url = url or pages[0]
        return ScoreRef(
            url=url,
            name=text_field(entry, "name") or self._settings.default_score_name,
            pages=pages or [url],
        )

    def _track_from_entry(self, entry: dict[str, Any]) -> TrackRef | None:
        path = text_field(entry, "path")
        if path is None:
            return None
        return TrackRef(
            path=path,
            name=text_field(entry, "name") or self._settings.default_track_name,
        )

    def _resource_from_entry(self, entry: dict[str, Any]) -> ResourceRef | None:
        url = text_field(entry, "url")
        if url is None:
            return None
        # Na lista, o tipo do recurso vem em "type"
        kind = text_field(entry, "type", "resourceKind", "resource_kind")
        return ResourceRef(
            url=url,
            name=text_field(entry, "name") or self._settings.default_resource_name,
            resource_kind=kind or self._settings.default_resource_kind,
            description=text_field(entry, "description"),
        )

    def _media_from_root_object(self, data: dict[str, Any]) -> list[MediaDescriptor]:
        """Forma de objeto único na raiz do payload (pode coexistir com listas)."""
        media: list[MediaDescriptor] = []
        media_type = data.get("type")
        url = text_field(data, "url")
        name = text_field(data, "name")

        if url and (media_type == "score" or (name and not media_type)):
            media.append(
                ScoreRef(
                    url=url,
                    name=name or self._settings.default_score_name,
                    pages=string_list_field(data, "pages") or [url],
                )
            )

        path = text_field(data, "path")
        if path and media_type == "track":
            media.append(
                TrackRef(path=path, name=name or self._settings.default_track_name)
            )

        if url and media_type == "resource":
            kind = text_field(data, "resourceKind", "resource_kind")
            media.append(
                ResourceRef(
                    url=url,
                    name=name or self._settings.default_resource_name,
                    resource_kind=kind or self._settings.default_resource_kind,
                    description=text_field(data, "description"),
                )
            )

        return media


def _append_text(segments: list[str], text: str) -> None:
    """Adiciona o texto literal como está, exceto se for só espaço."""
    if text.strip():
        segments.append(text)
