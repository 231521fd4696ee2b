# src/e2e/test_chunk_rendering.py

from completer.chunks import is_display_chunk, is_result_type, render_chunk, render_optional
from completer.models import Chunk, ChunkKind as K


def test_display_and_result_type_are_disjoint():
    for kind in K:
        assert not (is_display_chunk(kind) and is_result_type(kind))
    assert is_result_type(K.RESULT_TYPE)
    assert not is_display_chunk(K.RESULT_TYPE)


def test_ignored_kinds_are_neither():
    for kind in (K.CURRENT_PARAMETER, K.VERTICAL_SPACE, K.OTHER):
        assert not is_display_chunk(kind)
        assert not is_result_type(kind)
    assert not is_display_chunk(999)
    assert not is_display_chunk("Bogus")


def test_placeholder_gets_delimiters_other_leaves_do_not():
    assert render_chunk(Chunk(K.PLACEHOLDER, "int x")) == "⟪int x⟫"
    assert render_chunk(Chunk(K.PLACEHOLDER, "int x"), "<", ">") == "<int x>"
    assert render_chunk(Chunk(K.TYPED_TEXT, "foo"), "<", ">") == "foo"
    assert render_chunk(None) == ""


def test_optional_two_levels_deep_uses_optional_delimiters():
    inner = Chunk(K.OPTIONAL, children=(
        Chunk(K.COMMA, ", "),
        Chunk(K.PLACEHOLDER, "int c"),
    ))
    outer = Chunk(K.OPTIONAL, children=(
        Chunk(K.COMMA, ", "),
        Chunk(K.PLACEHOLDER, "int b"),
        inner,
    ))
    out = render_optional(outer)
    assert out == ", ⟦int b⟧, ⟦int c⟧"
    assert "⟪" not in out and "⟫" not in out


def test_optional_without_children_renders_empty():
    assert render_optional(Chunk(K.OPTIONAL)) == ""
    assert render_optional(Chunk(K.OPTIONAL, children=())) == ""
    assert render_optional(None) == ""
