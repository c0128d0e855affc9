"""Normalização de texto para comparação na busca do catálogo.

A forma normalizada serve apenas para comparar ("salvação" casa com
"salvacao", "glória" com "gloria"); nunca é armazenada nem exibida.
"""

from __future__ import annotations

import unicodedata


def normalize(text: str | None) -> str:
    """Normaliza texto para comparação sem acentos e sem pontuação.

    Etapas: minúsculas → decomposição NFD → remoção de marcas combinantes
    → remoção de tudo que não é alfanumérico ou espaço → strip nas pontas.
    Espaços internos são preservados (não colapsa sequências).

    Args:
        text: Texto original (None/vazio retorna "")

    Returns:
        Texto normalizado, idempotente: normalize(normalize(x)) == normalize(x)

    Exemplos:
        >>> normalize("Salvação!")
        'salvacao'

        >>> normalize("  Glória a  Deus ")
        'gloria a  deus'
    """
    if not text:
        return ""

    decomposed = unicodedata.normalize("NFD", text.lower())
    return "".join(
        ch
        for ch in decomposed
        if not unicodedata.combining(ch) and (ch.isalnum() or ch.isspace())
    ).strip()
