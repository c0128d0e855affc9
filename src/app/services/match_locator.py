"""Localização de ocorrências de busca insensível a acentos.

Responsabilidade:
- Testar se uma consulta aparece em um campo do catálogo
- Mapear ocorrências de volta para posições do texto original (destaque)

Custo quadrático no tamanho do alvo: adequado para títulos e linhas de
letra. Documentos longos exigem limite de tamanho no chamador.
"""

from __future__ import annotations

import logging
import unicodedata

from app.domain.match_span import MatchSpan
from app.services.text_normalizer import normalize
from config.settings.search import get_search_settings

logger = logging.getLogger(__name__)


def matches(query: str | None, target: str | None) -> bool:
    """Retorna True se a consulta normalizada está contida no alvo normalizado.

    Exemplos:
        >>> matches("gloria", "Glória a Deus")
        True
    """
    if not query or not target:
        return False
    return normalize(query) in normalize(target)


def find_spans(
    query: str | None,
    target: str | None,
    window_factor: int | None = None,
) -> list[MatchSpan]:
    """Encontra ocorrências da consulta e retorna intervalos no texto original.

    Para cada posição inicial, a janela cresce até que sua forma
    normalizada seja igual à consulta normalizada (aceita) ou ultrapasse
    `window_factor` vezes o tamanho da consulta (abandona). Após aceitar,
    a varredura continua a partir do fim do intervalo.

    Posições cujo caractere some na normalização (espaço, pontuação,
    marca combinante isolada) não iniciam janela. Marcas combinantes logo
    após o fim aceito são incorporadas ao intervalo.

    Args:
        query: Consulta digitada pelo usuário
        target: Texto original (título, linha de letra)
        window_factor: Sobrescreve SearchSettings.window_factor

    Returns:
        Intervalos em ordem crescente, sem sobreposição
    """
    if not query or not target:
        return []

    normalized_query = normalize(query)
    if not normalized_query:
        return []

    factor = window_factor or get_search_settings().window_factor
    max_window = len(normalized_query) * factor

    spans: list[MatchSpan] = []
    start = 0
    while start < len(target):
        if not normalize(target[start]):
            start += 1
            continue

        end = _grow_window(target, start, normalized_query, max_window)
        if end is None:
            start += 1
            continue

        spans.append(MatchSpan(start, end))
        start = end

    result = _drop_overlapping(spans)
    logger.debug(
        "search_spans_located",
        extra={"spans": len(result), "target_length": len(target)},
    )
    return result


def _grow_window(
    target: str,
    start: int,
    normalized_query: str,
    max_window: int,
) -> int | None:
    """Retorna o fim da primeira janela que casa a partir de start, ou None."""
    for end in range(start + 1, len(target) + 1):
        window = normalize(target[start:end])
        if window == normalized_query:
            while end < len(target) and unicodedata.combining(target[end]):
                end += 1
            return end
        if len(window) > max_window:
            return None
    return None


def _drop_overlapping(spans: list[MatchSpan]) -> list[MatchSpan]:
    """Descarta intervalos que sobrepõem um já aceito (o primeiro vence)."""
    accepted: list[MatchSpan] = []
    for span in spans:
        if not any(span.overlaps(existing) for existing in accepted):
            accepted.append(span)
    return accepted
