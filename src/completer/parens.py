from __future__ import annotations

from enum import Enum

from .models import ChunkKind


class ParenState(Enum):
    INITIAL = "initial"
    SEEN_OPEN_PAREN = "seen_open_paren"
    IN_PARAMS = "in_params"


class ParenTracker:
    """
    Decides where the optional spacing goes around call parentheses.

    Fed every display chunk of one top-level chunk sequence, in order.
    step() returns True when a spacing token belongs *before* the chunk:
    ahead of the first real parameter after "(" and ahead of the ")" that
    closes a non-empty parameter list. "foo()" never gets one.
    """

    def __init__(self) -> None:
        self.state = ParenState.INITIAL

    def step(self, kind: ChunkKind) -> bool:
        if kind is ChunkKind.LEFT_PAREN:
            # once inside a parameter list, nested parens do not reset it
            if self.state is not ParenState.IN_PARAMS:
                self.state = ParenState.SEEN_OPEN_PAREN
            return False

        if (self.state is ParenState.SEEN_OPEN_PAREN
                and kind is not ChunkKind.RIGHT_PAREN
                and kind is not ChunkKind.INFORMATIVE):
            self.state = ParenState.IN_PARAMS
            return True

        return self.state is ParenState.IN_PARAMS and kind is ChunkKind.RIGHT_PAREN
