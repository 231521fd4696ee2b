# completer/engine.py
from __future__ import annotations

import os
import logging
from typing import Iterable, List, Optional

from . import config as CFG
from .builder import CompletionDataBuilder
from .loader import load_candidates
from .models import Candidate, CompletionRecord

log = logging.getLogger(__name__)


def dedupe(records: Iterable[CompletionRecord]) -> List[CompletionRecord]:
    """Drop records equivalent to an earlier one (same category, main text and return type)."""
    seen = set()
    out: List[CompletionRecord] = []
    for rec in records:
        if rec in seen:
            continue
        seen.add(rec)
        out.append(rec)
    return out


class Engine:
    """
    Thin orchestration layer that glues together:
      - candidate loading (loader.load_candidates),
      - chunk reduction (builder.CompletionDataBuilder),
      - de-duplication of equivalent records.

    Public API (used by CLI/Flask):
      * build(roots, ...): load candidate dumps -> records -> dedupe -> keep
      * convert(candidates): same pipeline for an in-memory batch, nothing kept
      * records():          records from the last build()
      * enable_extra_space() / disable_extra_space(): spacing mode
      * shutdown():         drop state
    """

    # ------------- lifecycle -------------

    def __init__(self, *, extra_space: bool = CFG.EXTRA_SPACE) -> None:
        self.builder = CompletionDataBuilder(extra_space=extra_space)
        self._records: Optional[List[CompletionRecord]] = None

    # /* ~~~ Build records from candidate dumps under the given roots ~~~ */
    def build(
        self,
        roots: Iterable[str],
        *,
        extra_space: Optional[bool] = None,    # spacing mode for this build only
        verbose: bool = False,
    ) -> None:
        if verbose:
            logging.basicConfig(level=logging.INFO)
            os.environ["COMPLETER_VERBOSE"] = "1"

        roots = list(roots)
        if not roots:
            raise ValueError("build(): at least one root is required")

        log.info("Loading candidates from %s", roots)
        candidates = load_candidates(roots)

        self._records = self.convert(candidates, extra_space=extra_space)
        log.info("Engine build() complete: candidates=%d records=%d",
                 len(candidates), len(self._records))

    def convert(
        self,
        candidates: Iterable[Candidate],
        *,
        extra_space: Optional[bool] = None,
    ) -> List[CompletionRecord]:
        """
        Build and de-duplicate records for a batch.

        `extra_space` applies to this call only: it gets its own builder, so the
        engine's spacing mode is never touched and concurrent callers cannot
        see each other's override.
        """
        builder = self.builder
        if extra_space is not None:
            builder = CompletionDataBuilder(extra_space=extra_space)
        return dedupe(builder.build_candidate(c) for c in candidates)

    # ------------- query -------------

    def records(self) -> List[CompletionRecord]:
        if self._records is None:
            raise RuntimeError("Engine not initialized. Call build() first.")
        return list(self._records)

    # ------------- settings -------------

    def enable_extra_space(self) -> None:
        self.builder.enable_extra_space()

    def disable_extra_space(self) -> None:
        self.builder.disable_extra_space()

    # ------------- teardown -------------

    def shutdown(self) -> None:
        self._records = None
        log.info("Engine shutdown complete")
