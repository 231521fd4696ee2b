"""
Completion Chunk Reducer

This package turns the typed "completion chunks" a code-intelligence engine
emits for one candidate completion into a few display-ready strings plus a
normalized comparison key.

The package is designed with a clean separation of concerns:
- Chunk classification and rendering (placeholder delimiters, Optional chunks)
- A small state machine for spacing inside call parentheses
- Text normalization passes (reserved "__", placeholder markers, qualifiers)
- Record assembly and de-duplication
- Loading candidate dumps from disk

Main Functions:
    build_record(chunks, decl_kind, brief): Reduce one chunk sequence
    Engine().build(roots): Load candidate dumps and reduce them all

Example Usage:
    from completer import Chunk, ChunkKind, build_record

    rec = build_record([
        Chunk(ChunkKind.RESULT_TYPE, "int"),
        Chunk(ChunkKind.TYPED_TEXT, "foo"),
        Chunk(ChunkKind.LEFT_PAREN, "("),
        Chunk(ChunkKind.PLACEHOLDER, "int x"),
        Chunk(ChunkKind.RIGHT_PAREN, ")"),
    ], "FunctionDecl")

    print(rec.main_text)    # foo(int x)
    print(rec.insert_text)  # foo(⟪int x⟫)
"""

# src/completer/__init__.py
from .models import Candidate, Category, Chunk, ChunkKind, CompletionRecord  # re-export
from .builder import CompletionDataBuilder, build_record
from .engine import Engine, dedupe

__version__ = "1.0.0"
__all__ = [
    "Candidate", "Category", "Chunk", "ChunkKind", "CompletionRecord",
    "CompletionDataBuilder", "build_record", "Engine", "dedupe",
]
