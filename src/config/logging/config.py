"""Configuração centralizada de logging.

Um único handler de stream com formatter JSON e o filter de contexto
do chat (service, environment, conversation_id).

Uso:
    from config.logging import configure_logging_from_settings, get_logger

    # Na inicialização do processo que consome o parser/busca
    configure_logging_from_settings()

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("media_block_demoted", extra={"block_index": 0})

Logs nunca carregam o conteúdo das mensagens do assistente nem textos do
catálogo, apenas contagens e posições.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import ConversationContextFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

    from config.settings.base import BaseSettings

# Níveis de log válidos
VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

# Nome padrão do serviço
DEFAULT_SERVICE_NAME = "cancioneiro"


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    environment: str = "development",
    conversation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Configura logging JSON estruturado no logger raiz.

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço nos logs.
        environment: Ambiente de execução nos logs.
        conversation_id_getter: Sobrescreve a leitura do id da conversa
            (padrão: escopo definido por conversation_scope).

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(
        ConversationContextFilter(service_name, environment, conversation_id_getter)
    )

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Substituir handlers existentes para evitar duplicação
    root.handlers = [handler]


def configure_logging_from_settings(settings: BaseSettings | None = None) -> None:
    """Configura logging a partir de BaseSettings (env por padrão)."""
    if settings is None:
        from config.settings.base import get_base_settings

        settings = get_base_settings()

    configure_logging(
        level=settings.effective_log_level,
        service_name=settings.service_name,
        environment=settings.environment,
    )


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo especificado."""
    return logging.getLogger(name)


def log_fallback(
    logger: logging.Logger,
    component: str,
    reason: str | None = None,
    elapsed_ms: float | None = None,
) -> None:
    """Log observável de fallback usado (sem conteúdo da mensagem).

    Registra quando um fallback determinístico foi acionado
    (ex: bloco rebaixado para texto, settings inválidas no ambiente).

    Args:
        logger: Logger instance.
        component: Nome do componente (ex: "message_parser").
        reason: Razão do fallback (ex: "payload_decode_failed").
        elapsed_ms: Tempo decorrido em ms (quando aplicável).
    """
    extra: dict[str, object] = {
        "fallback_used": True,
        "component": component,
    }
    if reason:
        extra["reason"] = reason
    if elapsed_ms is not None:
        extra["elapsed_ms"] = elapsed_ms

    logger.info(
        "Fallback applied for %s",
        component,
        extra=extra,
    )
