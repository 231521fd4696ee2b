# src/completer/builder.py
from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Union

from . import config as CFG
from .chunks import is_display_chunk, is_result_type, render_chunk, render_optional
from .kinds import category_of, coerce_chunk_kind
from .models import Candidate, Chunk, ChunkKind, CompletionRecord
from .normalize import strip_placeholder_markers, strip_qualifiers, strip_reserved_underscores
from .parens import ParenTracker

log = logging.getLogger(__name__)


class CompletionDataBuilder:
    """
    Reduces one candidate's chunk sequence into a CompletionRecord.

    The spacing mode ("foo( int x )" vs "foo(int x)") belongs to the builder
    instance: toggle it with enable_extra_space()/disable_extra_space(); it
    applies to every build() that follows. Builders are not thread-safe with
    respect to toggling; run all builds of one batch under one mode.
    """

    def __init__(self, *, extra_space: bool = CFG.EXTRA_SPACE) -> None:
        self.extra_space = extra_space

    def enable_extra_space(self) -> None:
        self.extra_space = True

    def disable_extra_space(self) -> None:
        self.extra_space = False

    @property
    def spacing(self) -> str:
        return " " if self.extra_space else ""

    # /* ~~~ one candidate -> one record ~~~ */
    def build(self,
              chunks: Optional[Iterable[Chunk]],
              decl_kind: Union[str, int, None] = None,
              brief: Optional[str] = "") -> CompletionRecord:
        chunks = list(chunks) if chunks is not None else []
        if not chunks:
            return CompletionRecord()

        tracker = ParenTracker()
        main_parts: List[str] = []
        call_parts: List[str] = []
        return_type = ""

        for chunk in chunks:
            if chunk is None or _is_malformed(chunk):
                log.debug("Ignoring malformed chunk: %r", chunk)
                continue
            kind = coerce_chunk_kind(chunk.kind)

            if is_display_chunk(kind):
                if tracker.step(kind):
                    main_parts.append(self.spacing)
                    call_parts.append(self.spacing)

                if kind is ChunkKind.OPTIONAL:
                    text = render_optional(chunk)
                else:
                    text = render_chunk(chunk)

                main_parts.append(text)
                # parameter-name hints are shown, never inserted
                if kind is not ChunkKind.INFORMATIVE:
                    call_parts.append(text)

            elif is_result_type(kind):
                return_type = render_chunk(chunk, "", "")

        main_text = strip_placeholder_markers(strip_reserved_underscores("".join(main_parts)))
        insert_text = strip_reserved_underscores("".join(call_parts))
        key_text = strip_qualifiers(strip_placeholder_markers(insert_text))

        brief = brief or ""
        detailed_info = ""
        if brief:
            detailed_info += brief + "\n"
        detailed_info += return_type + " " + main_text + "\n"

        return CompletionRecord(
            category=category_of(decl_kind),
            insert_text=insert_text,
            main_text=main_text,
            return_type=return_type,
            key_text=key_text,
            brief=brief,
            detailed_info=detailed_info,
            doc_string=brief,
        )

    def build_candidate(self, candidate: Candidate) -> CompletionRecord:
        return self.build(candidate.chunks, candidate.decl_kind, candidate.brief)


def _is_malformed(chunk: Chunk) -> bool:
    kind = coerce_chunk_kind(chunk.kind)
    if not isinstance(kind, ChunkKind):
        return True
    return kind is ChunkKind.OPTIONAL and chunk.children is None


def build_record(chunks: Optional[Iterable[Chunk]],
                 decl_kind: Union[str, int, None] = None,
                 brief: Optional[str] = "",
                 *,
                 extra_space: bool = CFG.EXTRA_SPACE) -> CompletionRecord:
    """Convenience: build one record with a throwaway builder."""
    return CompletionDataBuilder(extra_space=extra_space).build(chunks, decl_kind, brief)
