"""logic/typing_combat.py — Typing combat state machine.

Per word::

    AwaitingInput ──letter ok──▶ Correct ──…──▶ WordComplete ─▶ next word
          │
          └──letter bad──▶ Wrong (cursor stays, player pays penalty)

Per monster::

    Alive ──hp hits 0──▶ Defeated   (until SessionState.restart())

The engine mutates the session-owned Player, Monster and
TypingProgress in place and emits events on the session bus.  It
never raises for bad input: anything that is not a letter, or arrives
while paused / after the defeat, is dropped.

Usage::

    engine = TypingCombatEngine(player, monster, progress, words, bus, victory)
    engine.reset_for_word(engine.next_word())
    engine.submit_character("n")
    engine.submit_backspace()
"""

from __future__ import annotations
import string
from typing import TYPE_CHECKING, Callable

from components import Mark, VictoryMessage
from core.events import (
    LetterHit, LetterMissed, MonsterHit, WordCompleted, MonsterDefeated,
)
from core.tuning import get as _tun
from logic.monster import damage_monster
from logic.words import FallbackWords, clean_word

if TYPE_CHECKING:
    from components import Player, Monster, TypingProgress, UiSlot
    from core.events import EventBus
    from logic.words import WordSource


_LETTERS = frozenset(string.ascii_lowercase)


def normalize_letter(ch) -> str | None:
    """Lower-case *ch* and return it if it is a single a–z letter."""
    if not isinstance(ch, str) or len(ch) != 1:
        return None
    ch = ch.lower()
    return ch if ch in _LETTERS else None


class TypingCombatEngine:
    """Consumes typed characters against the monster's current word."""

    def __init__(self, player: "Player", monster: "Monster | None",
                 progress: "TypingProgress", words: "WordSource",
                 bus: "EventBus", victory: "UiSlot",
                 *,
                 is_paused: Callable[[], bool] = lambda: False,
                 letter_damage: int | None = None,
                 mistake_penalty: float | None = None,
                 victory_ms: float | None = None):
        self.player = player
        self.monster = monster
        self.progress = progress
        self.words = words
        self.bus = bus
        self.victory = victory
        self.is_paused = is_paused
        if letter_damage is None:
            letter_damage = int(_tun("combat", "letter_damage", 8))
        if mistake_penalty is None:
            mistake_penalty = float(_tun("combat", "mistake_penalty", 4.0))
        if victory_ms is None:
            victory_ms = float(_tun("ui.victory", "duration_ms", 2500.0))
        self.letter_damage = max(0, letter_damage)
        self.mistake_penalty = max(0.0, mistake_penalty)
        self.victory_ms = victory_ms
        self._fallback = FallbackWords()

    # ── state queries ────────────────────────────────────────────────

    def accepting_input(self) -> bool:
        m = self.monster
        return (not self.is_paused()
                and m is not None
                and m.alive
                and bool(m.current_word))

    # ── typing ───────────────────────────────────────────────────────

    def submit_character(self, ch) -> bool:
        """Feed one typed character.  Returns True if it was consumed."""
        if not self.accepting_input():
            return False
        letter = normalize_letter(ch)
        if letter is None:
            return False
        p = self.progress
        expected = p.expected()
        if expected is None:
            return False

        idx = p.index
        if letter == expected:
            p.marks[idx] = Mark.CORRECT
            p.index += 1
            p.correct_typed += 1
            p.total_typed += 1
            dealt = self.apply_damage(self.letter_damage, source="typing")
            self.player.damage_dealt += dealt
            self.player.score += dealt
            self.bus.emit(LetterHit(index=idx, letter=letter, damage=dealt))
            if self.monster.alive and p.complete:
                self._complete_word()
        else:
            p.marks[idx] = Mark.WRONG
            p.total_typed += 1
            pl = self.player
            pl.hp = max(0.0, min(pl.hp - self.mistake_penalty, pl.max_hp))
            self.bus.emit(LetterMissed(index=idx, letter=letter,
                                       expected=expected,
                                       penalty=self.mistake_penalty))

        self.player.accuracy = p.accuracy
        return True

    def submit_backspace(self) -> bool:
        """Retract the most recent correct letter.  Counters are untouched."""
        if not self.accepting_input():
            return False
        p = self.progress
        if p.index <= 0:
            return False
        p.index -= 1
        p.marks[p.index] = Mark.UNSET
        return True

    # ── word lifecycle ───────────────────────────────────────────────

    def next_word(self) -> str:
        """Ask the word source for a word, falling back if it gives junk."""
        word = clean_word(self.words.next_word())
        if not word:
            word = self._fallback.next_word()
            print(f"[COMBAT] word source returned nothing usable — using '{word}'")
        return word

    def reset_for_word(self, word: str) -> None:
        """Point the cursor at a fresh word.  Accuracy counters carry over."""
        word = clean_word(word)
        if self.monster is not None:
            self.monster.current_word = word
        p = self.progress
        p.word = word
        p.marks = [Mark.UNSET] * len(word)
        p.index = 0

    def restart_progress(self, word: str) -> None:
        """``reset_for_word`` plus zeroed counters (level restart)."""
        self.reset_for_word(word)
        self.progress.total_typed = 0
        self.progress.correct_typed = 0
        self.player.accuracy = self.progress.accuracy

    def _complete_word(self) -> None:
        done = self.progress.word
        nxt = self.next_word()
        self.reset_for_word(nxt)
        self.bus.emit(WordCompleted(word=done, next_word=nxt))

    # ── damage & defeat ──────────────────────────────────────────────

    def apply_damage(self, amount: float, *, source: str = "typing") -> int:
        """Canonical monster-damage path.  Returns hp actually removed."""
        m = self.monster
        if m is None:
            return 0
        dealt = damage_monster(m, amount)
        if dealt:
            self.bus.emit(MonsterHit(amount=dealt, hp=m.hp, source=source))
        if m.defeated:
            self.announce_victory()
        return dealt

    def announce_victory(self) -> bool:
        """Latch the defeat once: clear the word, raise the banner."""
        m = self.monster
        if m is None or not m.defeated or m.victory_announced:
            return False
        m.victory_announced = True
        self.reset_for_word("")
        self.victory.show(VictoryMessage(
            text=f"{m.name} defeated!",
            timer=self.victory_ms,
            max_timer=self.victory_ms,
        ))
        self.bus.emit(MonsterDefeated(name=m.name))
        print(f"[COMBAT] {m.name} defeated — accuracy {self.progress.accuracy:.0%}")
        return True
