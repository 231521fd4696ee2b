from __future__ import annotations

from typing import Dict, Union

from .models import Category, ChunkKind

_CURSOR_PREFIX = "CXCursor_"
_CHUNK_PREFIX = "CXCompletionChunk_"

# native declaration kind -> display category
CATEGORY_BY_DECL_KIND: Dict[str, Category] = {
    "StructDecl": Category.STRUCT,

    "ClassDecl": Category.CLASS,
    "ClassTemplate": Category.CLASS,

    "EnumDecl": Category.ENUM,

    "UnexposedDecl": Category.TYPE,
    "UnionDecl": Category.TYPE,
    "TypedefDecl": Category.TYPE,

    "FieldDecl": Category.MEMBER,

    "FunctionDecl": Category.FUNCTION,
    "CXXMethod": Category.FUNCTION,
    "FunctionTemplate": Category.FUNCTION,
    "ConversionFunction": Category.FUNCTION,
    "Constructor": Category.FUNCTION,
    "Destructor": Category.FUNCTION,

    "VarDecl": Category.VARIABLE,

    "MacroDefinition": Category.MACRO,

    "ParmDecl": Category.PARAMETER,

    "Namespace": Category.NAMESPACE,
    "NamespaceAlias": Category.NAMESPACE,
}

# libclang CXCursorKind numbers for the names above
CURSOR_NAME_BY_NUMBER: Dict[int, str] = {
    1: "UnexposedDecl",
    2: "StructDecl",
    3: "UnionDecl",
    4: "ClassDecl",
    5: "EnumDecl",
    6: "FieldDecl",
    8: "FunctionDecl",
    9: "VarDecl",
    10: "ParmDecl",
    20: "TypedefDecl",
    21: "CXXMethod",
    22: "Namespace",
    24: "Constructor",
    25: "Destructor",
    26: "ConversionFunction",
    30: "FunctionTemplate",
    31: "ClassTemplate",
    33: "NamespaceAlias",
    501: "MacroDefinition",
}


def category_of(decl_kind: Union[str, int, None]) -> Category:
    """Map a native declaration kind (cursor name or number) to a Category; unknown tags give UNKNOWN."""
    if isinstance(decl_kind, bool) or decl_kind is None:
        return Category.UNKNOWN
    if isinstance(decl_kind, int):
        name = CURSOR_NAME_BY_NUMBER.get(decl_kind, "")
    else:
        name = str(decl_kind).strip()
        if name.startswith(_CURSOR_PREFIX):
            name = name[len(_CURSOR_PREFIX):]
    return CATEGORY_BY_DECL_KIND.get(name, Category.UNKNOWN)


def _camel_to_enum_name(name: str) -> str:
    # "TypedText" -> "TYPED_TEXT", "SemiColon" -> "SEMI_COLON"
    out = []
    for i, ch in enumerate(name):
        if ch.isupper() and i and not name[i - 1].isupper():
            out.append("_")
        out.append(ch.upper())
    return "".join(out)


def coerce_chunk_kind(raw: Union[ChunkKind, int, str]) -> Union[ChunkKind, int, str]:
    """
    Turn an engine-supplied chunk tag into a ChunkKind.

    Accepts ChunkKind members, libclang numbers and names in either spelling
    ("TypedText", "CXCompletionChunk_TypedText", "typed_text"; "Text" means
    OTHER). Values outside the enumerated set are returned unchanged so that
    the builder can ignore the chunk instead of failing the candidate.
    """
    if isinstance(raw, ChunkKind):
        return raw
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, int):
        try:
            return ChunkKind(raw)
        except ValueError:
            return raw
    name = str(raw).strip()
    if name.startswith(_CHUNK_PREFIX):
        name = name[len(_CHUNK_PREFIX):]
    if name == "Text":
        return ChunkKind.OTHER
    key = name.upper() if "_" in name else _camel_to_enum_name(name)
    try:
        return ChunkKind[key]
    except KeyError:
        return raw
