"""Settings da busca textual no catálogo (títulos e letras).

A busca é sensível apenas ao conteúdo normalizado; aqui ficam os
parâmetros do localizador de trechos usado para destaque.
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field

from config.logging import log_fallback

logger = logging.getLogger(__name__)

DEFAULT_WINDOW_FACTOR = 2


class SearchSettings(BaseModel):
    """Configurações do localizador de ocorrências."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    window_factor: int = Field(
        default=DEFAULT_WINDOW_FACTOR,
        ge=1,
        description=(
            "Multiplicador do tamanho normalizado da consulta a partir do qual "
            "uma janela candidata é abandonada."
        ),
    )

    def validate_values(self) -> list[str]:
        """Valida configurações.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []
        if self.window_factor < 1:
            errors.append(f"SEARCH_WINDOW_FACTOR deve ser >= 1: {self.window_factor}")
        return errors


def _load_search_from_env() -> SearchSettings:
    """Carrega SearchSettings do ambiente; valor inválido volta ao padrão."""
    raw_factor = os.getenv("SEARCH_WINDOW_FACTOR", str(DEFAULT_WINDOW_FACTOR))
    try:
        factor = int(raw_factor)
    except ValueError:
        errors = [f"SEARCH_WINDOW_FACTOR não é inteiro: {raw_factor!r}"]
    else:
        errors = SearchSettings.model_construct(window_factor=factor).validate_values()

    if errors:
        logger.warning("search_settings_invalid", extra={"errors": errors})
        log_fallback(logger, "search_settings", reason="invalid_env")
        return SearchSettings()

    return SearchSettings(window_factor=factor)


@lru_cache(maxsize=1)
def get_search_settings() -> SearchSettings:
    """Retorna instância cacheada de SearchSettings (nunca levanta)."""
    return _load_search_from_env()


__all__ = ["SearchSettings", "get_search_settings"]
