"""Fallbacks determinísticos do parser de mensagens.

Garante resultado previsível quando nada é extraído da resposta do
assistente ou quando o parsing falha de forma inesperada.
"""

from __future__ import annotations

from ai.models.chat_media import ParsedMessage


def block_extractor_produced_nothing(result: ParsedMessage) -> bool:
    """Decide se o fallback de tags inline deve rodar.

    Só dispara quando o extrator de blocos não produziu nenhum segmento
    de texto nem mídia (mensagem sem bloco cercado).
    """
    return not result.text_segments and not result.media


def fallback_parsed_message(content: str | None) -> ParsedMessage:
    """Fallback: a mensagem inteira vira o único segmento de texto.

    Args:
        content: Mensagem original (None vira "")

    Returns:
        ParsedMessage com um segmento e nenhuma mídia
    """
    return ParsedMessage(text_segments=[content or ""], media=[])
