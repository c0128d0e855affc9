"""Agregador de settings do Cancioneiro.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# Search settings
from config.settings.search import (
    SearchSettings,
    get_search_settings,
)

__all__ = [
    # Base
    "BaseSettings",
    "Environment",
    # Search
    "SearchSettings",
    "get_base_settings",
    "get_search_settings",
]
