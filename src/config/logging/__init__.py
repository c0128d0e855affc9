"""Configuração de logging estruturado.

Uso:
    from config.logging import configure_logging, conversation_scope, get_logger

    configure_logging(level="INFO", service_name="cancioneiro")

    logger = get_logger(__name__)
    with conversation_scope("conv-123"):
        logger.info("Operação OK", extra={"segments": 2})

Campos em todo log: timestamp, level, logger, message, service,
environment, conversation_id.
"""

from config.logging.config import (
    configure_logging,
    configure_logging_from_settings,
    get_logger,
    log_fallback,
)
from config.logging.context import conversation_scope, get_conversation_id
from config.logging.filters import ConversationContextFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "ConversationContextFilter",
    "configure_logging",
    "configure_logging_from_settings",
    "conversation_scope",
    "create_json_formatter",
    "get_conversation_id",
    "get_logger",
    "log_fallback",
]
