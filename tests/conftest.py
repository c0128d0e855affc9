"""Configuração do pytest para o projeto Cancioneiro."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Limpa caches de settings para que monkeypatch de env tenha efeito."""
    from ai.config.settings import get_chat_media_settings
    from ai.services.message_parser import get_message_parser
    from config.settings.base.core import get_base_settings
    from config.settings.search import get_search_settings

    caches = (
        get_base_settings,
        get_search_settings,
        get_chat_media_settings,
        get_message_parser,
    )
    for cached in caches:
        cached.cache_clear()
    yield
    for cached in caches:
        cached.cache_clear()
