"""Intervalo de ocorrência de busca no texto original do catálogo.

Usado pela tela de busca para destacar trechos de títulos e letras sem
depender da forma normalizada (que nunca é exibida).
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class MatchSpan:
    """Intervalo semiaberto [start, end) no texto original.

    Atributos:
        start: Índice inicial (inclusivo)
        end: Índice final (exclusivo), sempre maior que start
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Valida invariantes."""
        if self.start < 0 or self.end <= self.start:
            raise ValueError(f"MatchSpan inválido: [{self.start}, {self.end})")

    @property
    def length(self) -> int:
        """Quantidade de caracteres do texto original cobertos."""
        return self.end - self.start

    def overlaps(self, other: MatchSpan) -> bool:
        """Retorna True se os dois intervalos compartilham algum índice."""
        return self.start < other.end and other.start < self.end

    def slice(self, text: str) -> str:
        """Extrai o trecho coberto pelo intervalo."""
        return text[self.start : self.end]
