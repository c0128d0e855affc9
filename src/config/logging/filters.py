"""Filter que enriquece cada record com o contexto do chat."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.context import get_conversation_id

if TYPE_CHECKING:
    from collections.abc import Callable


class ConversationContextFilter(logging.Filter):
    """Injeta conversation_id, service e environment nos records.

    `conversation_id` passado via `extra` tem prioridade sobre o do
    contexto; o getter padrão lê o escopo de `conversation_scope`.
    """

    def __init__(
        self,
        service_name: str,
        environment: str = "development",
        conversation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._environment = environment
        self._get_conversation_id = conversation_id_getter or get_conversation_id

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "conversation_id", None):
            record.conversation_id = self._get_conversation_id()
        record.service = self._service_name
        record.environment = self._environment
        return True
