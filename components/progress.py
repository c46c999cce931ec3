"""components.progress — Per-letter typing progress against the target word."""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum


class Mark(Enum):
    UNSET = "unset"
    CORRECT = "correct"
    WRONG = "wrong"


@dataclass
class TypingProgress:
    """Cursor, per-letter marks and cumulative typing counters.

    ``marks`` is always the same length as ``word``.  ``index`` is the
    position of the next expected letter; every mark left of it is
    CORRECT.  The counters survive word changes and are only zeroed by
    a level restart.
    """
    word: str = ""
    marks: list[Mark] = field(default_factory=list)
    index: int = 0
    total_typed: int = 0
    correct_typed: int = 0

    @property
    def accuracy(self) -> float:
        if self.total_typed == 0:
            return 1.0
        return self.correct_typed / self.total_typed

    @property
    def complete(self) -> bool:
        return bool(self.word) and self.index >= len(self.word)

    def expected(self) -> str | None:
        if self.index < len(self.word):
            return self.word[self.index]
        return None
