"""Regras determinísticas para IA.

Re-exporta fallbacks e predicados de decisão do parser.
"""

from ai.rules.fallbacks import (
    block_extractor_produced_nothing,
    fallback_parsed_message,
)

__all__ = [
    "block_extractor_produced_nothing",
    "fallback_parsed_message",
]
