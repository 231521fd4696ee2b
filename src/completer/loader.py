from __future__ import annotations
import json
import logging
import os
from typing import Any, Iterable, List, Optional, Tuple

from .config import CANDIDATE_EXTS, EXCLUDE_DIRS
from .kinds import coerce_chunk_kind
from .models import Candidate, Chunk

log = logging.getLogger(__name__)

# Progress logging (set COMPLETER_VERBOSE=1 to enable)
VERBOSE = os.environ.get("COMPLETER_VERBOSE") == "1"
PROGRESS_EVERY_FILES = 500


def _verbose() -> bool:
    return VERBOSE or os.environ.get("COMPLETER_VERBOSE") == "1"


def _iter_candidate_files(roots: Iterable[str]) -> Iterable[str]:
    """Yield candidate dump files (*.json, *.jsonl) recursively under each root."""
    for root in roots:
        root = os.path.abspath(root)
        if os.path.isfile(root):
            yield root
            continue
        for dirpath, dirnames, filenames in os.walk(root):
            dirnames[:] = sorted(d for d in dirnames if d not in EXCLUDE_DIRS)
            for fn in sorted(filenames):
                if os.path.splitext(fn)[1].lower() in CANDIDATE_EXTS:
                    yield os.path.join(dirpath, fn)


def chunk_from_dict(data: Any) -> Optional[Chunk]:
    """
    Decode one chunk object: {"kind": ..., "text": ..., "chunks": [...]}.

    Nested "chunks" only matter for Optional chunks; an Optional chunk without
    them decodes as malformed and is ignored by the builder. Anything that is
    not an object decodes to None.
    """
    if not isinstance(data, dict):
        return None
    kind = coerce_chunk_kind(data.get("kind", ""))
    text = data.get("text") or ""
    nested = data.get("chunks")
    children: Optional[Tuple[Chunk, ...]] = None
    if isinstance(nested, list):
        children = tuple(c for c in (chunk_from_dict(n) for n in nested) if c is not None)
    return Chunk(kind=kind, text=str(text), children=children)


def candidate_from_dict(data: Any) -> Optional[Candidate]:
    """Decode {"kind": <decl kind>, "brief": "...", "chunks": [...]} into a Candidate."""
    if not isinstance(data, dict):
        return None
    raw_chunks = data.get("chunks")
    chunks: Optional[Tuple[Chunk, ...]] = None
    if isinstance(raw_chunks, list):
        chunks = tuple(c for c in (chunk_from_dict(n) for n in raw_chunks) if c is not None)
    decl_kind = data.get("kind", data.get("decl_kind"))
    return Candidate(chunks=chunks, decl_kind=decl_kind, brief=str(data.get("brief") or ""))


def candidates_from_json(payload: Any, source: str = "<payload>") -> List[Candidate]:
    """Accept a list of candidate objects or {"candidates": [...]}."""
    if isinstance(payload, dict) and "candidates" in payload:
        payload = payload["candidates"]
    if isinstance(payload, dict):
        payload = [payload]
    if not isinstance(payload, list):
        raise ValueError(f"{source}: expected a list of candidates")

    out: List[Candidate] = []
    for i, item in enumerate(payload):
        cand = candidate_from_dict(item)
        if cand is None:
            log.warning("%s: skipping entry %d (not an object)", source, i)
            continue
        out.append(cand)
    return out


def _read_file(path: str) -> List[Candidate]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except UnicodeDecodeError as e:
        raise ValueError(f"{path}: not UTF-8 ({e})") from e
    try:
        if path.lower().endswith(".jsonl"):
            items = [json.loads(line) for line in text.splitlines() if line.strip()]
            return candidates_from_json(items, source=path)
        return candidates_from_json(json.loads(text), source=path)
    except json.JSONDecodeError as e:
        raise ValueError(f"{path}: invalid JSON ({e})") from e


def load_candidates(roots: Iterable[str]) -> List[Candidate]:
    """Read every candidate dump under the given roots, in a stable file order."""
    candidates: List[Candidate] = []
    files = 0
    for path in _iter_candidate_files(roots):
        candidates.extend(_read_file(path))
        files += 1
        if _verbose() and files % PROGRESS_EVERY_FILES == 0:
            log.info("[load] files=%d candidates=%d", files, len(candidates))
    log.info("Loaded %d candidates from %d files", len(candidates), files)
    return candidates
