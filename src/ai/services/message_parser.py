"""Parser de respostas do assistente em texto literal e mídias embutidas.

Pipeline explícito:
1. MediaBlockExtractor: blocos JSON cercados
2. InlineTagExtractor: apenas se o passo 1 não produziu nada
3. Fallback: mensagem inteira como único segmento de texto

Nunca levanta exceção para o chamador.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from ai.config.settings import ChatMediaSettings
from ai.models.chat_media import ParsedMessage
from ai.rules.fallbacks import block_extractor_produced_nothing, fallback_parsed_message
from ai.utils.inline_tag_extractor import InlineTagExtractor
from ai.utils.media_block_extractor import MediaBlockExtractor
from config.logging import log_fallback

logger = logging.getLogger(__name__)


class MessageParser:
    """Orquestra os extratores de mídia sobre uma mensagem do assistente.

    Sem estado mutável: uma instância pode ser compartilhada entre
    chamadas concorrentes.

    Exemplo:
        parser = MessageParser()
        parsed = parser.parse("Veja: [EMBED_SCORE:kyrie.pdf:Kyrie]")
        parsed.media  # [ScoreRef(url="kyrie.pdf", name="Kyrie", ...)]
    """

    def __init__(
        self,
        block_extractor: MediaBlockExtractor | None = None,
        tag_extractor: InlineTagExtractor | None = None,
        settings: ChatMediaSettings | None = None,
    ) -> None:
        self._block_extractor = block_extractor or MediaBlockExtractor(settings)
        self._tag_extractor = tag_extractor or InlineTagExtractor(settings)

    def parse(self, content: str | None) -> ParsedMessage:
        """Separa a mensagem em segmentos de texto e mídias, em ordem.

        Args:
            content: Mensagem bruta do assistente

        Returns:
            ParsedMessage; quando não há mídia, text_segments nunca é vazio
        """
        text = content or ""
        try:
            result = self._block_extractor.extract(text)
            if block_extractor_produced_nothing(result):
                result = self._tag_extractor.extract(text)
            if result.is_empty:
                return fallback_parsed_message(text)
            return result
        except Exception as e:
            logger.warning("message_parse_failed", extra={"error": str(e)})
            log_fallback(logger, "message_parser", reason=type(e).__name__)
            return fallback_parsed_message(text)


@lru_cache(maxsize=1)
def get_message_parser() -> MessageParser:
    """Retorna parser padrão (settings do ambiente)."""
    return MessageParser()


def parse_chat_message(content: str | None) -> ParsedMessage:
    """Atalho para get_message_parser().parse(content)."""
    return get_message_parser().parse(content)
