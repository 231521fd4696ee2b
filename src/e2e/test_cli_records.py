import json
from pathlib import Path

import pytest

from completer.__main__ import main


def _seed(tmp: Path) -> str:
    root = tmp / "dumps"; root.mkdir()
    (root / "c.json").write_text(json.dumps([{"kind": "FunctionDecl", "chunks": [
        {"kind": "ResultType", "text": "void"},
        {"kind": "TypedText", "text": "run"},
        {"kind": "LeftParen", "text": "("},
        {"kind": "RightParen", "text": ")"},
    ]}]), encoding="utf-8")
    return str(root)


@pytest.mark.e2e
def test_cli_json(tmp_path: Path, capsys):
    assert main(["--roots", _seed(tmp_path), "--json"]) == 0
    rows = json.loads(capsys.readouterr().out)
    assert rows[0]["main_text"] == "run()"
    assert rows[0]["return_type"] == "void"


@pytest.mark.e2e
def test_cli_table(tmp_path: Path, capsys):
    assert main(["--roots", _seed(tmp_path), "--extra-space"]) == 0
    out = capsys.readouterr().out
    assert "function" in out and "run()" in out


@pytest.mark.e2e
def test_cli_bad_dump(tmp_path: Path, capsys):
    (tmp_path / "bad.json").write_text("[", encoding="utf-8")
    assert main(["--roots", str(tmp_path)]) == 2
    assert "error" in capsys.readouterr().err
