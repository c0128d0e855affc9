"""Configurações do parser de mídia do chat.

Os delimitadores de bloco e os nomes das tags inline são um contrato com
o template de prompt do assistente: precisam casar exatamente com o que
o modelo foi instruído a emitir.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from functools import lru_cache

from ai.models.chat_media import (
    DEFAULT_RESOURCE_KIND,
    DEFAULT_RESOURCE_NAME,
    DEFAULT_SCORE_NAME,
    DEFAULT_TRACK_NAME,
)
from config.logging import log_fallback

logger = logging.getLogger(__name__)

DEFAULT_BLOCK_OPEN = "```json"
DEFAULT_BLOCK_CLOSE = "```"
DEFAULT_SCORE_TAG = "EMBED_SCORE"
DEFAULT_TRACK_TAG = "EMBED_TRACK"


@dataclass(frozen=True, slots=True)
class ChatMediaSettings:
    """Contrato de marcação de mídia nas respostas do assistente.

    Atributos:
        block_open: Marcador de abertura do bloco (seguido de quebra de linha)
        block_close: Marcador de fechamento do bloco
        score_tag: Nome da tag inline de partitura ([EMBED_SCORE:url:nome])
        track_tag: Nome da tag inline de faixa ([EMBED_TRACK:path:nome])
        default_score_name: Nome usado quando a partitura vem sem nome
        default_track_name: Nome usado quando a faixa vem sem nome
        default_resource_name: Nome usado quando o recurso vem sem nome
        default_resource_kind: Tipo de recurso quando não informado
    """

    block_open: str = DEFAULT_BLOCK_OPEN
    block_close: str = DEFAULT_BLOCK_CLOSE
    score_tag: str = DEFAULT_SCORE_TAG
    track_tag: str = DEFAULT_TRACK_TAG
    default_score_name: str = DEFAULT_SCORE_NAME
    default_track_name: str = DEFAULT_TRACK_NAME
    default_resource_name: str = DEFAULT_RESOURCE_NAME
    default_resource_kind: str = DEFAULT_RESOURCE_KIND

    def validate(self) -> list[str]:
        """Valida configurações.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []

        if not self.block_open:
            errors.append("CHAT_MEDIA_BLOCK_OPEN não pode ser vazio")
        if not self.block_close:
            errors.append("CHAT_MEDIA_BLOCK_CLOSE não pode ser vazio")

        for env_name, tag in (
            ("CHAT_MEDIA_SCORE_TAG", self.score_tag),
            ("CHAT_MEDIA_TRACK_TAG", self.track_tag),
        ):
            if not _is_valid_tag(tag):
                errors.append(f"{env_name} inválido: {tag!r}")

        if self.score_tag == self.track_tag:
            errors.append("Tags de partitura e faixa precisam ser distintas")

        return errors


def _is_valid_tag(tag: str) -> bool:
    return bool(tag) and ":" not in tag and "]" not in tag


def _with_default_fields(settings: ChatMediaSettings) -> ChatMediaSettings:
    """Substitui pelos valores padrão apenas os campos inválidos."""
    defaults = ChatMediaSettings()
    fixes: dict[str, str] = {}

    if not settings.block_open:
        fixes["block_open"] = defaults.block_open
    if not settings.block_close:
        fixes["block_close"] = defaults.block_close
    if not _is_valid_tag(settings.score_tag):
        fixes["score_tag"] = defaults.score_tag
    if not _is_valid_tag(settings.track_tag):
        fixes["track_tag"] = defaults.track_tag

    fixed = replace(settings, **fixes)
    if fixed.score_tag == fixed.track_tag:
        fixed = replace(fixed, score_tag=defaults.score_tag, track_tag=defaults.track_tag)
    return fixed


def _load_chat_media_from_env() -> ChatMediaSettings:
    """Carrega ChatMediaSettings de variáveis de ambiente.

    Campos inválidos voltam ao padrão, com log dos erros de validate().
    """
    settings = ChatMediaSettings(
        block_open=os.getenv("CHAT_MEDIA_BLOCK_OPEN", DEFAULT_BLOCK_OPEN),
        block_close=os.getenv("CHAT_MEDIA_BLOCK_CLOSE", DEFAULT_BLOCK_CLOSE),
        score_tag=os.getenv("CHAT_MEDIA_SCORE_TAG", DEFAULT_SCORE_TAG),
        track_tag=os.getenv("CHAT_MEDIA_TRACK_TAG", DEFAULT_TRACK_TAG),
    )

    errors = settings.validate()
    if not errors:
        return settings

    logger.warning("chat_media_settings_invalid", extra={"errors": errors})
    log_fallback(logger, "chat_media_settings", reason="invalid_env")
    return _with_default_fields(settings)


@lru_cache(maxsize=1)
def get_chat_media_settings() -> ChatMediaSettings:
    """Retorna instância cacheada de ChatMediaSettings (sempre válida)."""
    return _load_chat_media_from_env()
