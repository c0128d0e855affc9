"""Decodificação do payload JSON de blocos de mídia.

O payload vem do modelo de linguagem e pode estar malformado; a falha
é sinalizada com MediaPayloadError para o extrator rebaixar o bloco.
"""

from __future__ import annotations

import json
from typing import Any

from utils.errors import MediaPayloadError


def decode_block_payload(payload: str) -> dict[str, Any]:
    """Decodifica o payload de um bloco como objeto JSON.

    Args:
        payload: Conteúdo entre os delimitadores do bloco

    Returns:
        Dict decodificado

    Raises:
        MediaPayloadError: JSON inválido ou raiz diferente de objeto
    """
    try:
        data = json.loads(payload)
    except (ValueError, RecursionError) as exc:
        raise MediaPayloadError("payload JSON inválido") from exc

    if not isinstance(data, dict):
        raise MediaPayloadError(
            f"payload deve ser objeto JSON, recebido {type(data).__name__}"
        )
    return data


def text_field(data: dict[str, Any], *keys: str) -> str | None:
    """Retorna o primeiro valor string não vazio entre as chaves dadas."""
    for key in keys:
        value = data.get(key)
        if isinstance(value, str) and value:
            return value
    return None


def string_list_field(data: dict[str, Any], key: str) -> list[str]:
    """Retorna a lista de strings não vazias sob a chave (ou lista vazia)."""
    value = data.get(key)
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, str) and item]
