import json
from pathlib import Path

import pytest

from completer import Candidate, Category, Chunk, ChunkKind as K, Engine


def _seed(tmp: Path) -> str:
    root = tmp / "dumps"; root.mkdir()
    foo = {"kind": "FunctionDecl", "chunks": [
        {"kind": "ResultType", "text": "int"},
        {"kind": "TypedText", "text": "foo"},
        {"kind": "LeftParen", "text": "("},
        {"kind": "Placeholder", "text": "int x"},
        {"kind": "RightParen", "text": ")"},
    ]}
    dup = dict(foo, brief="same signature, different docs")
    var = {"kind": "VarDecl", "chunks": [{"kind": "ResultType", "text": "char"}, {"kind": "TypedText", "text": "c"}]}
    (root / "cands.json").write_text(json.dumps([foo, dup, var]), encoding="utf-8")
    return str(root)


@pytest.mark.e2e
def test_build_dedupes_equivalent_records(tmp_path: Path):
    eng = Engine()
    try:
        eng.build([_seed(tmp_path)])
        rows = eng.records()
        assert [r.main_text for r in rows] == ["foo(int x)", "c"]
        assert rows[0].category is Category.FUNCTION
        assert rows[0].brief == ""
        assert rows[1].return_type == "char"
    finally:
        eng.shutdown()


@pytest.mark.e2e
def test_build_with_extra_space(tmp_path: Path):
    root = _seed(tmp_path)
    eng = Engine()
    try:
        eng.build([root], extra_space=True)
        assert eng.records()[0].main_text == "foo( int x )"
        # the override only lasts for that build
        assert eng.builder.extra_space is False
        eng.build([root])
        assert eng.records()[0].main_text == "foo(int x)"
        eng.enable_extra_space()
        eng.build([root])
        assert eng.records()[0].main_text == "foo( int x )"
        eng.disable_extra_space()
        eng.build([root])
        assert eng.records()[0].main_text == "foo(int x)"
    finally:
        eng.shutdown()


def test_records_before_build_raises():
    with pytest.raises(RuntimeError):
        Engine().records()


def test_build_requires_roots():
    with pytest.raises(ValueError):
        Engine().build([])


def test_convert_override_leaves_engine_mode():
    cand = Candidate(chunks=(
        Chunk(K.TYPED_TEXT, "f"), Chunk(K.LEFT_PAREN, "("),
        Chunk(K.PLACEHOLDER, "x"), Chunk(K.RIGHT_PAREN, ")"),
    ))
    eng = Engine()
    assert eng.convert([cand], extra_space=True)[0].main_text == "f( x )"
    assert eng.builder.extra_space is False
    assert eng.convert([cand])[0].main_text == "f(x)"
