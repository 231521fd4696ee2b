"""Chunk classification and rendering."""
from __future__ import annotations

from typing import Iterable, Optional

from .config import OPTIONAL_PLACEHOLDER_DELIMITERS, PLACEHOLDER_DELIMITERS
from .kinds import coerce_chunk_kind
from .models import Chunk, ChunkKind

# Chunk kinds that make up the main completion text
DISPLAY_KINDS = frozenset({
    ChunkKind.OPTIONAL,
    ChunkKind.TYPED_TEXT,
    ChunkKind.PLACEHOLDER,
    ChunkKind.LEFT_PAREN,
    ChunkKind.RIGHT_PAREN,
    ChunkKind.RIGHT_BRACKET,
    ChunkKind.LEFT_BRACKET,
    ChunkKind.LEFT_BRACE,
    ChunkKind.RIGHT_BRACE,
    ChunkKind.RIGHT_ANGLE,
    ChunkKind.LEFT_ANGLE,
    ChunkKind.COMMA,
    ChunkKind.COLON,
    ChunkKind.SEMI_COLON,
    ChunkKind.EQUAL,
    ChunkKind.INFORMATIVE,
    ChunkKind.HORIZONTAL_SPACE,
})


def is_display_chunk(kind) -> bool:
    """True if chunks of this kind contribute to the displayed text."""
    return isinstance(kind, ChunkKind) and kind in DISPLAY_KINDS


def is_result_type(kind) -> bool:
    return kind is ChunkKind.RESULT_TYPE


def render_chunk(chunk: Optional[Chunk],
                 open_delim: str = PLACEHOLDER_DELIMITERS[0],
                 close_delim: str = PLACEHOLDER_DELIMITERS[1]) -> str:
    """Leaf text of `chunk`; placeholders come wrapped in the given delimiters."""
    if chunk is None:
        return ""
    text = chunk.text or ""
    if coerce_chunk_kind(chunk.kind) is ChunkKind.PLACEHOLDER:
        return open_delim + text + close_delim
    return text


def render_optional(chunk: Optional[Chunk]) -> str:
    """
    Flatten an OPTIONAL chunk into text.

    Every placeholder below an OPTIONAL chunk, however deep, is wrapped in the
    optional-slot delimiters so that downstream consumers can tell a required
    slot from one the user has not typed into yet.
    """
    if chunk is None or chunk.children is None:
        return ""
    return render_sequence(chunk.children)


def render_sequence(children: Optional[Iterable[Chunk]]) -> str:
    if not children:
        return ""
    open_delim, close_delim = OPTIONAL_PLACEHOLDER_DELIMITERS
    parts = []
    for child in children:
        if child is None:
            continue
        if coerce_chunk_kind(child.kind) is ChunkKind.OPTIONAL:
            parts.append(render_optional(child))
        else:
            parts.append(render_chunk(child, open_delim, close_delim))
    return "".join(parts)
