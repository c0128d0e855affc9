"""Utilitários de IA.

Re-exporta extratores de mídia e helpers de tipo de arquivo.
"""

from ai.utils._json_extractor import decode_block_payload
from ai.utils.inline_tag_extractor import InlineTagExtractor
from ai.utils.media_block_extractor import MediaBlockExtractor
from ai.utils.media_kind import AUDIO_EXTENSIONS, is_audio_path, is_pdf_url

__all__ = [
    "AUDIO_EXTENSIONS",
    "InlineTagExtractor",
    # Extratores
    "MediaBlockExtractor",
    # JSON
    "decode_block_payload",
    # Tipo de arquivo
    "is_audio_path",
    "is_pdf_url",
]
