# src/completer/models.py
"""
Data models for the completion-chunk reducer.

This module defines the small, focused data containers the reducer works on:

- ChunkKind: the tag of one completion chunk (libclang chunk numbering).
- Chunk: one tagged text fragment of a candidate, possibly with nested chunks.
- Category: coarse display class derived from the native declaration kind.
- Candidate: everything the code-intelligence engine hands over for one
  candidate completion (chunks, declaration kind, brief comment).
- CompletionRecord: the immutable, display-ready result.

These classes do not contain reduction logic; they only structure the data so
that classifying, rendering and normalizing remain simple and predictable.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Dict, Optional, Tuple, Union


class ChunkKind(IntEnum):
    """Completion chunk tags, numbered the way libclang numbers them."""
    OPTIONAL = 0
    TYPED_TEXT = 1
    OTHER = 2               # libclang "Text"
    PLACEHOLDER = 3
    INFORMATIVE = 4
    CURRENT_PARAMETER = 5
    LEFT_PAREN = 6
    RIGHT_PAREN = 7
    LEFT_BRACKET = 8
    RIGHT_BRACKET = 9
    LEFT_BRACE = 10
    RIGHT_BRACE = 11
    LEFT_ANGLE = 12
    RIGHT_ANGLE = 13
    COMMA = 14
    RESULT_TYPE = 15
    COLON = 16
    SEMI_COLON = 17
    EQUAL = 18
    HORIZONTAL_SPACE = 19
    VERTICAL_SPACE = 20


class Category(IntEnum):
    STRUCT = 0
    CLASS = 1
    ENUM = 2
    TYPE = 3
    MEMBER = 4
    FUNCTION = 5
    VARIABLE = 6
    MACRO = 7
    PARAMETER = 8
    NAMESPACE = 9
    UNKNOWN = 10


@dataclass(frozen=True, slots=True)
class Chunk:
    """
    One tagged text fragment of a single completion candidate.

    Attributes
    ----------
    kind : ChunkKind | int | str
        The chunk tag. Anything that is not a ChunkKind (an unknown number or
        name coming from the engine) is kept as-is and ignored by the builder.
    text : str
        Leaf text; may be empty. Unused for OPTIONAL chunks.
    children : tuple[Chunk, ...] | None
        Nested completion content, present only for OPTIONAL chunks. An
        OPTIONAL chunk without children is malformed.
    """
    kind: Union[ChunkKind, int, str]
    text: str = ""
    children: Optional[Tuple["Chunk", ...]] = None


@dataclass(frozen=True, slots=True)
class Candidate:
    """
    The per-candidate bundle from the code-intelligence engine.

    `decl_kind` is the native declaration-kind tag (a libclang cursor name or
    number); `brief` is the engine's brief documentation comment, possibly "".
    """
    chunks: Optional[Tuple[Chunk, ...]]
    decl_kind: Union[str, int, None] = None
    brief: str = ""


@dataclass(frozen=True, slots=True)
class CompletionRecord:
    """
    The display-ready result built from one candidate.

    Two records compare equal (and hash alike) iff category, main_text and
    return_type match; the remaining fields carry nothing that tells two
    entries of the user-facing list apart.

    Attributes
    ----------
    category : Category
        Display class looked up from the native declaration kind.
    insert_text : str
        What gets inserted into the buffer. Placeholder markers are kept for
        a snippet-aware consumer. For "int foo(int x)" this is "foo(⟪int x⟫)".
    main_text : str
        The signature without the return type, markers stripped: "foo(int x)".
    return_type : str
        Extra menu info: the result type, if any.
    key_text : str
        Marker-free, const/volatile-free insert text used to compare shapes.
    brief : str
        Brief documentation comment.
    detailed_info : str
        Preview-window text: optional brief line, then "<return> <main>".
    doc_string : str
        The brief comment again, for consumers that read it under this name.
    """
    category: Category = Category.UNKNOWN
    insert_text: str = field(default="", compare=False)
    main_text: str = ""
    return_type: str = ""
    key_text: str = field(default="", compare=False)
    brief: str = field(default="", compare=False)
    detailed_info: str = field(default="", compare=False)
    doc_string: str = field(default="", compare=False)

    def as_dict(self) -> Dict[str, str]:
        return {
            "category": self.category.name,
            "insert_text": self.insert_text,
            "main_text": self.main_text,
            "return_type": self.return_type,
            "key_text": self.key_text,
            "brief": self.brief,
            "detailed_info": self.detailed_info,
            "doc_string": self.doc_string,
        }

    def menu_item(self) -> Dict[str, str]:
        """Editor completion-menu view: [abbr]  [kind]  [menu], with info for the preview window."""
        return {
            "word": self.insert_text,
            "abbr": self.main_text,
            "kind": self.category.name.lower(),
            "menu": self.return_type,
            "info": self.detailed_info,
        }
