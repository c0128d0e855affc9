"""Modelos de domínio compartilhados entre serviços."""

from app.domain.match_span import MatchSpan

__all__ = ["MatchSpan"]
