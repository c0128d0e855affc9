"""Formatter JSON (python-json-logger) com os campos do Cancioneiro."""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Ordem dos campos no JSON emitido
REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "service",
    "environment",
    "conversation_id",
)

FIELD_RENAME_MAP = {
    "asctime": "timestamp",
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria o formatter JSON.

    Exemplo de output:
        {"timestamp": "2026-10-17T10:30:00+0000", "level": "INFO",
         "logger": "ai.services.message_parser",
         "message": "Fallback applied for message_parser",
         "service": "cancioneiro", "environment": "production",
         "conversation_id": "conv-123"}
    """
    return JsonFormatter(
        " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS),
        rename_fields=FIELD_RENAME_MAP,
        datefmt="%Y-%m-%dT%H:%M:%S%z",
    )
