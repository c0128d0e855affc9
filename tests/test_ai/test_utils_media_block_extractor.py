"""Testes para ai/utils/media_block_extractor.py."""

from __future__ import annotations

import json
import logging
from typing import Any

import pytest

from ai.config.settings import ChatMediaSettings
from ai.models.chat_media import ResourceRef, ScoreRef, TrackRef
from ai.utils.media_block_extractor import MediaBlockExtractor


def _block(payload: dict[str, Any] | str) -> str:
    body = payload if isinstance(payload, str) else json.dumps(payload)
    return f"```json\n{body}\n```"


@pytest.fixture
def extractor() -> MediaBlockExtractor:
    return MediaBlockExtractor(ChatMediaSettings())


class TestBlockDetection:
    """Detecção de blocos e texto literal."""

    def test_no_block_returns_empty(self, extractor: MediaBlockExtractor) -> None:
        """Sem bloco, nada é produzido (nem texto)."""
        result = extractor.extract("Olá! [EMBED_TRACK:a.mp3:A]")

        assert result.is_empty is True

    def test_score_with_surrounding_text(self, extractor: MediaBlockExtractor) -> None:
        """Partitura do bloco e texto antes/depois como segmentos separados."""
        content = (
            "Aqui está:\n"
            + _block({"scores": [{"url": "a.pdf", "name": "S1"}]})
            + "\nBom estudo!"
        )

        result = extractor.extract(content)

        assert result.media == [ScoreRef(url="a.pdf", name="S1", pages=["a.pdf"])]
        assert result.text_segments == ["Aqui está:\n", "\nBom estudo!"]

    def test_invalid_payload_demoted_to_text(self, extractor: MediaBlockExtractor) -> None:
        """Payload inválido vira texto literal com delimitadores."""
        raw_block = _block("{scores: [}")
        content = f"Antes\n{raw_block}\nDepois"

        result = extractor.extract(content)

        assert result.text_segments == ["Antes\n", raw_block, "\nDepois"]
        assert result.media == []

    def test_non_object_payload_demoted(self, extractor: MediaBlockExtractor) -> None:
        """Payload com lista na raiz também é rebaixado."""
        raw_block = _block("[1, 2, 3]")

        result = extractor.extract(raw_block)

        assert result.text_segments == [raw_block]

    def test_demotion_is_logged(
        self,
        extractor: MediaBlockExtractor,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """Rebaixamento registra log sem o conteúdo do bloco."""
        with caplog.at_level(logging.INFO, logger="ai.utils.media_block_extractor"):
            extractor.extract(_block("{segredo"))

        messages = [record.getMessage() for record in caplog.records]
        assert "media_block_demoted" in messages
        assert all("segredo" not in message for message in messages)

    def test_blank_segments_dropped(self, extractor: MediaBlockExtractor) -> None:
        """Texto só com espaços entre blocos é descartado."""
        content = (
            _block({"tracks": [{"path": "1.mp3"}]})
            + "\n\n  \n"
            + _block({"tracks": [{"path": "2.mp3"}]})
        )

        result = extractor.extract(content)

        assert result.text_segments == []
        assert [track.path for track in result.tracks] == ["1.mp3", "2.mp3"]

    def test_segments_reproduce_message_without_blocks(
        self,
        extractor: MediaBlockExtractor,
    ) -> None:
        """Concatenar segmentos reproduz a mensagem sem os blocos."""
        first = _block({"scores": [{"url": "a.pdf"}]})
        second = _block({"tracks": [{"path": "b.mp3"}]})
        content = f"Intro\n{first}\nMeio\n{second}\nFim"

        result = extractor.extract(content)

        assert "".join(result.text_segments) == content.replace(first, "").replace(second, "")

    def test_crlf_after_opening_delimiter(self, extractor: MediaBlockExtractor) -> None:
        """Quebra de linha CRLF após a abertura é aceita."""
        content = '```json\r\n{"tracks": [{"path": "a.mp3"}]}\r\n```'

        assert extractor.extract(content).tracks == [TrackRef(path="a.mp3")]

    def test_custom_delimiters(self) -> None:
        """Delimitadores vêm das settings."""
        extractor = MediaBlockExtractor(
            ChatMediaSettings(block_open="<media>", block_close="</media>")
        )
        content = 'Ouça:\n<media>\n{"tracks": [{"path": "a.mp3", "name": "A"}]}\n</media>'

        result = extractor.extract(content)

        assert result.media == [TrackRef(path="a.mp3", name="A")]
        assert result.text_segments == ["Ouça:\n"]


class TestListForm:
    """Listas scores, tracks e resources."""

    def test_score_from_pages_only(self, extractor: MediaBlockExtractor) -> None:
        """Sem url, usa a primeira página."""
        result = extractor.extract(_block({"scores": [{"pages": ["p1.png", "p2.png"]}]}))

        assert result.media == [ScoreRef(url="p1.png", name="Score", pages=["p1.png", "p2.png"])]

    def test_invalid_entries_skipped_individually(
        self,
        extractor: MediaBlockExtractor,
    ) -> None:
        """Entradas sem campos obrigatórios são puladas; irmãs seguem."""
        payload = {
            "scores": [{"name": "sem url"}, {"url": "b.pdf"}, "lixo", {"pages": []}],
            "tracks": [{"name": "sem path"}, {"path": ""}, {"path": "c.mp3"}],
            "resources": [{"name": "sem url"}, {"url": "https://d.com"}],
        }

        result = extractor.extract(_block(payload))

        assert result.media == [
            ScoreRef(url="b.pdf", pages=["b.pdf"]),
            TrackRef(path="c.mp3", name="Track"),
            ResourceRef(url="https://d.com", name="Resource", resource_kind="link"),
        ]

    def test_sections_in_fixed_order(self, extractor: MediaBlockExtractor) -> None:
        """Ordem fixa: scores, tracks, resources (independente da ordem no JSON)."""
        payload = {
            "resources": [{"url": "https://r.com"}],
            "tracks": [{"path": "t.mp3"}],
            "scores": [{"url": "s.pdf"}],
        }

        result = extractor.extract(_block(payload))

        assert [item.type for item in result.media] == ["score", "track", "resource"]

    def test_resource_kind_and_description(self, extractor: MediaBlockExtractor) -> None:
        """Tipo do recurso vem de 'type' na lista."""
        payload = {
            "resources": [
                {
                    "url": "https://youtu.be/abc",
                    "name": "Ensaio",
                    "type": "youtube",
                    "description": "Vozes separadas",
                }
            ]
        }

        result = extractor.extract(_block(payload))

        assert result.media == [
            ResourceRef(
                url="https://youtu.be/abc",
                name="Ensaio",
                resource_kind="youtube",
                description="Vozes separadas",
            )
        ]

    def test_non_list_sections_ignored(self, extractor: MediaBlockExtractor) -> None:
        """Seções que não são listas são ignoradas."""
        result = extractor.extract("Texto\n" + _block({"scores": {"url": "a.pdf"}}))

        assert result.media == []
        assert result.text_segments == ["Texto\n"]


class TestRootObjectForm:
    """Forma de objeto único na raiz."""

    def test_score_with_name_and_no_type(self, extractor: MediaBlockExtractor) -> None:
        """url + name sem type vira partitura."""
        result = extractor.extract(_block({"url": "k.pdf", "name": "Kyrie"}))

        assert result.media == [ScoreRef(url="k.pdf", name="Kyrie", pages=["k.pdf"])]

    def test_explicit_score_type(self, extractor: MediaBlockExtractor) -> None:
        """type=score com páginas explícitas."""
        payload = {"type": "score", "url": "k.pdf", "pages": ["k1.png", "k2.png"]}

        result = extractor.extract(_block(payload))

        assert result.media == [ScoreRef(url="k.pdf", name="Score", pages=["k1.png", "k2.png"])]

    def test_track(self, extractor: MediaBlockExtractor) -> None:
        """path + type=track vira faixa."""
        result = extractor.extract(_block({"type": "track", "path": "a.mp3"}))

        assert result.media == [TrackRef(path="a.mp3", name="Track")]

    def test_resource(self, extractor: MediaBlockExtractor) -> None:
        """url + type=resource usa resourceKind."""
        payload = {"type": "resource", "url": "https://d.com/x.pdf", "resourceKind": "pdf"}

        result = extractor.extract(_block(payload))

        assert result.media == [
            ResourceRef(url="https://d.com/x.pdf", name="Resource", resource_kind="pdf")
        ]

    def test_url_without_name_or_type_ignored(self, extractor: MediaBlockExtractor) -> None:
        """url sozinha não identifica a mídia."""
        result = extractor.extract("Veja\n" + _block({"url": "k.pdf"}))

        assert result.media == []

    def test_list_and_root_forms_combined(self, extractor: MediaBlockExtractor) -> None:
        """Listas primeiro, depois o objeto da raiz."""
        payload = {"url": "k.pdf", "name": "Kyrie", "tracks": [{"path": "t.mp3"}]}

        result = extractor.extract(_block(payload))

        assert result.media == [
            TrackRef(path="t.mp3"),
            ScoreRef(url="k.pdf", name="Kyrie", pages=["k.pdf"]),
        ]
