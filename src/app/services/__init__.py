"""Serviços de aplicação.

Busca textual no catálogo (sem IO direto): normalização e localização
de ocorrências para destaque.
"""

from app.services.match_locator import find_spans, matches
from app.services.text_normalizer import normalize

__all__ = [
    "find_spans",
    "matches",
    "normalize",
]
