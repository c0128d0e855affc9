"""Contexto de conversa do chat propagado para os logs.

A camada de chat define o id da conversa antes de chamar o parser; todo
log emitido dentro do escopo carrega `conversation_id`. ContextVar mantém
o valor isolado por thread/task.

Uso:
    from config.logging import conversation_scope

    with conversation_scope(conversation.id):
        parsed = parse_chat_message(reply)
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

_conversation_id: ContextVar[str] = ContextVar("conversation_id", default="")


def get_conversation_id() -> str:
    """Retorna o id da conversa atual (string vazia fora de escopo)."""
    return _conversation_id.get()


@contextmanager
def conversation_scope(conversation_id: str) -> Iterator[str]:
    """Define o id da conversa durante o bloco e restaura o anterior ao sair."""
    token = _conversation_id.set(conversation_id)
    try:
        yield conversation_id
    finally:
        _conversation_id.reset(token)
