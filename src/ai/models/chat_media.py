"""Contratos de mídia embutida nas respostas do assistente.

Define o union discriminado (campo `type`) de referências a partituras,
faixas de áudio e recursos externos, além do resultado do parser de
mensagens consumido pela camada de renderização do chat.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_SCORE_NAME = "Score"
DEFAULT_TRACK_NAME = "Track"
DEFAULT_RESOURCE_NAME = "Resource"
DEFAULT_RESOURCE_KIND = "link"


class ScoreRef(BaseModel):
    """Partitura (PDF ou imagens por página)."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    type: Literal["score"] = "score"
    url: str = Field(..., min_length=1)
    name: str = DEFAULT_SCORE_NAME
    pages: list[str] | None = None


class TrackRef(BaseModel):
    """Faixa de áudio no storage do catálogo."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    type: Literal["track"] = "track"
    path: str = Field(..., min_length=1)
    name: str = DEFAULT_TRACK_NAME


class ResourceRef(BaseModel):
    """Recurso externo (youtube, audio, download, link, pdf).

    `resource_kind` preserva valores desconhecidos como vieram do modelo;
    cabe ao renderizador escolher o visualizador.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    type: Literal["resource"] = "resource"
    url: str = Field(..., min_length=1)
    name: str = DEFAULT_RESOURCE_NAME
    resource_kind: str = DEFAULT_RESOURCE_KIND
    description: str | None = None


MediaDescriptor = Annotated[
    Union[ScoreRef, TrackRef, ResourceRef],
    Field(discriminator="type"),
]


class ParsedMessage(BaseModel):
    """Mensagem do assistente separada em texto literal e mídias.

    As duas listas seguem, cada uma, a ordem de aparição na mensagem
    original. A intercalação final entre texto e mídia é do renderizador.
    """

    model_config = ConfigDict(extra="ignore")

    text_segments: list[str] = Field(default_factory=list)
    media: list[MediaDescriptor] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        """True se não há nenhum segmento de texto nem mídia."""
        return not self.text_segments and not self.media

    @property
    def has_media(self) -> bool:
        return bool(self.media)

    @property
    def scores(self) -> list[ScoreRef]:
        return [item for item in self.media if isinstance(item, ScoreRef)]

    @property
    def tracks(self) -> list[TrackRef]:
        return [item for item in self.media if isinstance(item, TrackRef)]

    @property
    def resources(self) -> list[ResourceRef]:
        return [item for item in self.media if isinstance(item, ResourceRef)]

    @classmethod
    def empty(cls) -> ParsedMessage:
        """Retorna resultado vazio (nada extraído)."""
        return cls()
