"""core/events.py — Lightweight event bus.

Decouples the combat engine (which *signals* hits, misses, completed
words and defeats) from the systems that *react* to them (damage
text, HUD flashes, the dev log).  The bus is owned by the session::

    from core.events import EventBus, LetterHit
    session.bus.emit(LetterHit(index=2, damage=8))

Consumers subscribe with a callable::

    session.bus.subscribe("MonsterDefeated", my_handler)

And the session drains once per tick::

    bus.drain()          # calls all handlers for pending events

Design rules:
  - Events are frozen dataclasses — no behaviour.
  - ``emit()`` is O(1) (just appends).
  - ``drain()`` processes all queued events in FIFO order.
  - Handlers may emit new events; those are processed in the same drain.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable
from collections import defaultdict
import traceback


# ═══════════════════════════════════════════════════════════════════
#  Event definitions
# ═══════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class LetterHit:
    """A typed letter matched the target word and damaged the monster."""
    index: int = 0
    letter: str = ""
    damage: int = 0


@dataclass(frozen=True)
class LetterMissed:
    """A typed letter did not match; the player paid the mistake penalty."""
    index: int = 0
    letter: str = ""
    expected: str = ""
    penalty: float = 0.0


@dataclass(frozen=True)
class MonsterHit:
    """The monster took damage from any source (typing or test-hit)."""
    amount: int = 0
    hp: int = 0
    source: str = "typing"      # "typing" or "test"


@dataclass(frozen=True)
class WordCompleted:
    """Every letter of the target word was typed correctly."""
    word: str = ""
    next_word: str = ""


@dataclass(frozen=True)
class MonsterDefeated:
    """The monster's hp reached zero (fired once per defeat)."""
    name: str = ""


@dataclass(frozen=True)
class SessionRestarted:
    """The level was reset after a defeat."""
    word: str = ""


# ═══════════════════════════════════════════════════════════════════
#  Event Bus
# ═══════════════════════════════════════════════════════════════════

class EventBus:
    """Fire-and-forget event bus owned by the session."""

    def __init__(self):
        self._queue: list[Any] = []
        self._subs: dict[str, list[Callable]] = defaultdict(list)
        self._stats: dict[str, int] = defaultdict(int)

    # ── Public API ───────────────────────────────────────────────────

    def emit(self, event) -> None:
        """Queue an event for processing on next ``drain()``."""
        self._queue.append(event)

    def subscribe(self, event_type: str, handler: Callable) -> None:
        """Register *handler* to receive events of *event_type*.

        *event_type* is the class name, e.g. ``"MonsterDefeated"``.
        """
        self._subs[event_type].append(handler)

    def drain(self) -> int:
        """Process all queued events.  Returns number processed.

        Handlers may emit new events — those are processed in the
        same drain pass (breadth-first).
        """
        processed = 0
        safety = 1000  # prevent infinite loops
        while self._queue and safety > 0:
            batch = self._queue[:]
            self._queue.clear()
            for event in batch:
                name = type(event).__name__
                self._stats[name] += 1
                for handler in self._subs.get(name, []):
                    try:
                        handler(event)
                    except Exception as exc:
                        print(f"[EVENT] handler error for {name}: {exc}")
                        traceback.print_exc()
            processed += len(batch)
            safety -= 1
        return processed

    def clear(self) -> None:
        """Discard all pending events."""
        self._queue.clear()

    def stats(self) -> dict[str, int]:
        """Return cumulative event counts by type."""
        return dict(self._stats)

    def __repr__(self) -> str:
        return f"EventBus(pending={len(self._queue)}, subs={len(self._subs)})"
