from __future__ import annotations
import logging
from flask import Flask, request, jsonify
from completer.engine import Engine
from completer.loader import candidates_from_json

log = logging.getLogger(__name__)

app = Flask(__name__)
_engine: Engine | None = None


def attach_engine(engine: Engine) -> None:
    global _engine
    _engine = engine


def _get_engine() -> Engine:
    global _engine
    if _engine is None:
        _engine = Engine()
    return _engine


# ---------- API ----------
@app.get("/health")
def health():
    return jsonify({"ok": True})


@app.get("/api/records")
def api_records():
    try:
        rows = _get_engine().records()
    except RuntimeError:
        # nothing built yet
        rows = []
    return jsonify([r.as_dict() for r in rows])


@app.post("/api/records")
def api_convert():
    payload = request.get_json(silent=True)
    if payload is None:
        return jsonify({"error": "expected a JSON body"}), 400
    try:
        candidates = candidates_from_json(payload, source="request")
    except ValueError as e:
        return jsonify({"error": str(e)}), 400

    extra_space = payload.get("extra_space") if isinstance(payload, dict) else None
    if extra_space is not None and not isinstance(extra_space, bool):
        return jsonify({"error": "extra_space must be true or false"}), 400

    # per-request spacing mode gets its own builder inside convert()
    rows = _get_engine().convert(candidates, extra_space=extra_space)
    log.info("Converted %d candidates into %d records", len(candidates), len(rows))
    return jsonify([r.as_dict() for r in rows])


# ---------- UI ----------
@app.get("/")
def home():
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<title>Completion records</title>
<style>
body{ margin:24px; background:#0b0f14; color:#cfd8e3; font:15px/1.45 system-ui,sans-serif }
table{ border-collapse:collapse } td,th{ padding:6px 12px; border-top:1px solid #1c2530; text-align:left }
.mono{ font-family: ui-monospace, Menlo, Consolas, monospace }
</style>
</head>
<body>
<h1>Completion records</h1>
<table id="rows"><tr><th>Kind</th><th>Return</th><th>Main text</th><th>Insert</th></tr></table>
<script>
fetch("/api/records").then(r => r.json()).then(rows => {
  const t = document.getElementById("rows");
  for (const r of rows) {
    const tr = document.createElement("tr");
    for (const k of ["category", "return_type", "main_text", "insert_text"]) {
      const td = document.createElement("td"); td.className = "mono"; td.textContent = r[k]; tr.appendChild(td);
    }
    t.appendChild(tr);
  }
});
</script>
</body>
</html>
"""
    return html
