"""Heurísticas de tipo de arquivo para escolher visualizador/player."""

from __future__ import annotations

from typing import Final

AUDIO_EXTENSIONS: Final[tuple[str, ...]] = (".mp3", ".wav", ".m4a", ".aac", ".ogg", ".flac")


def is_pdf_url(url: str) -> bool:
    """True se a URL aponta para PDF (inclusive com query string).

    Exemplos:
        >>> is_pdf_url("https://cdn/partitura.PDF")
        True

        >>> is_pdf_url("https://cdn/partitura.pdf?token=abc")
        True
    """
    lowered = (url or "").lower()
    return lowered.endswith(".pdf") or ".pdf?" in lowered


def is_audio_path(path: str) -> bool:
    """True se o caminho termina com extensão de áudio conhecida."""
    return (path or "").lower().endswith(AUDIO_EXTENSIONS)
