"""logic/session.py — Session state, tick pipeline and control surface.

One ``SessionState`` owns everything the fight needs: the player, the
monster, typing progress, the two HUD overlays, the input queue, the
event bus and the telemetry.  Nothing here is global; the scene holds
the session and passes elapsed time in.

Per running tick::

    drain input queue → player → monster → typing → HUD timers
                      → event bus → frame monitor

Control surface: ``pause()``, ``resume()``, ``toggle_pause()``,
``restart()`` (only after a defeat), ``apply_test_damage(amount)``.
Renderers read ``snapshot()`` and never touch the live objects.
"""

from __future__ import annotations
import random
from collections import deque
from dataclasses import dataclass, replace

from components import (
    Level, Player, Monster, Mark, TypingProgress,
    DamageText, VictoryMessage, UiSlot, DevLog,
)
from core.events import (
    EventBus, MonsterHit, WordCompleted, MonsterDefeated, SessionRestarted,
)
from core.tuning import get as _tun
from logic.frame_monitor import FrameMonitor
from logic.input_state import InputState, InputEvent, KeyChange, TypedChar, Backspace
from logic.monster import make_monster, update_monster, reset_monster
from logic.player import make_player, update_player
from logic.typing_combat import TypingCombatEngine
from logic.ui_timers import decay_ui_timers
from logic.words import WordSource, resolve_word_source


@dataclass(frozen=True)
class Snapshot:
    """Read-only copy of everything the renderer draws in one frame."""
    player: Player
    monster: Monster
    level: Level
    word: str
    marks: tuple[Mark, ...]
    index: int
    accuracy: float
    damage_text: DamageText | None
    victory: VictoryMessage | None
    paused: bool
    fps: float | None


class SessionState:

    def __init__(self, *,
                 words: WordSource | None = None,
                 level: Level | None = None,
                 player: Player | None = None,
                 monster: Monster | None = None,
                 rng: random.Random | None = None,
                 letter_damage: int | None = None,
                 mistake_penalty: float | None = None):
        self.level = level or Level()
        self.player = player or make_player(self.level)
        self.monster = monster or make_monster(self.level)
        self.progress = TypingProgress()
        self.damage_text: UiSlot[DamageText] = UiSlot()
        self.victory: UiSlot[VictoryMessage] = UiSlot()
        self.input = InputState()
        self.bus = EventBus()
        self.dev_log = DevLog()
        self.monitor = FrameMonitor(self.dev_log)
        self.words = resolve_word_source(words, rng)

        self.paused = False
        self.clock_ms = 0.0
        self._resync = False
        self._queue: deque[InputEvent] = deque()

        self.engine = TypingCombatEngine(
            self.player, self.monster, self.progress, self.words,
            self.bus, self.victory,
            is_paused=lambda: self.paused,
            letter_damage=letter_damage,
            mistake_penalty=mistake_penalty,
        )
        self.damage_text_ms = float(_tun("ui.damage_text", "duration_ms", 800.0))
        self.damage_text_rise = float(_tun("ui.damage_text", "rise_px", 30.0))

        self.bus.subscribe("MonsterHit", self._on_monster_hit)
        self.bus.subscribe("WordCompleted", self._on_word_completed)
        self.bus.subscribe("MonsterDefeated", self._on_monster_defeated)
        self.bus.subscribe("SessionRestarted", self._on_restarted)

        self.engine.reset_for_word(self.engine.next_word())
        print(f"[SESSION] {self.level.name} — {self.monster.name} "
              f"({self.monster.max_hp} hp), first word '{self.progress.word}'")

    # ── input ────────────────────────────────────────────────────────

    def post(self, event: InputEvent) -> None:
        """Queue an input event for the next running tick.

        While paused, typing is dropped; key changes are still queued so
        a key released during the pause is not stuck down afterwards.
        """
        if self.paused and not isinstance(event, KeyChange):
            return
        self._queue.append(event)

    def pending_input(self) -> int:
        return len(self._queue)

    # ── tick ─────────────────────────────────────────────────────────

    def tick(self, elapsed: float) -> bool:
        """Advance one frame of *elapsed* ms.  Returns False while paused."""
        if self.paused:
            return False
        if self._resync:
            # first tick after resume: the paused interval never happened
            elapsed = 0.0
            self._resync = False
        elapsed = max(0.0, elapsed)
        self.clock_ms += elapsed

        while self._queue:
            self.input.apply(self._queue.popleft())

        update_player(self.player, self.input, elapsed, self.level)
        update_monster(self.monster, elapsed)

        for ev in self.input.take_typing():
            if isinstance(ev, TypedChar):
                self.engine.submit_character(ev.ch)
            elif isinstance(ev, Backspace):
                self.engine.submit_backspace()

        decay_ui_timers(elapsed, self.damage_text, self.victory)
        self.bus.drain()
        self.monitor.observe(elapsed, t=self.clock_ms)
        return True

    # ── control surface ──────────────────────────────────────────────

    def pause(self) -> bool:
        if self.paused:
            return False
        self.paused = True
        # typing that arrived before the pause but was never consumed
        self._queue = deque(e for e in self._queue if isinstance(e, KeyChange))
        self.dev_log.record("session", "paused", t=self.clock_ms)
        print("[SESSION] paused")
        return True

    def resume(self) -> bool:
        if not self.paused:
            return False
        self.paused = False
        self._resync = True
        self.dev_log.record("session", "resumed", t=self.clock_ms)
        print("[SESSION] resumed")
        return True

    def toggle_pause(self) -> bool:
        """Flip pause state.  Returns the new ``paused`` value."""
        if self.paused:
            self.resume()
        else:
            self.pause()
        return self.paused

    def restart(self) -> bool:
        """Bring the monster back after a defeat.  No-op otherwise."""
        if not self.monster.defeated:
            return False
        reset_monster(self.monster)
        self.victory.clear()
        self.damage_text.clear()
        self.engine.restart_progress(self.engine.next_word())
        self.bus.emit(SessionRestarted(word=self.progress.word))
        self.bus.drain()
        return True

    def apply_test_damage(self, amount: float = 10) -> int:
        """Direct hit, bypassing typing.  Same clamping and defeat path."""
        if self.paused:
            return 0
        dealt = self.engine.apply_damage(amount, source="test")
        self.bus.drain()
        return dealt

    # ── rendering ────────────────────────────────────────────────────

    def snapshot(self) -> Snapshot:
        dt = self.damage_text.item
        vm = self.victory.item
        return Snapshot(
            player=replace(self.player),
            monster=replace(self.monster),
            level=replace(self.level, platforms=list(self.level.platforms)),
            word=self.progress.word,
            marks=tuple(self.progress.marks),
            index=self.progress.index,
            accuracy=self.progress.accuracy,
            damage_text=replace(dt) if dt is not None else None,
            victory=replace(vm) if vm is not None else None,
            paused=self.paused,
            fps=self.monitor.last_fps,
        )

    # ── event handlers ───────────────────────────────────────────────

    def _on_monster_hit(self, ev: MonsterHit) -> None:
        m = self.monster
        self.damage_text.show(DamageText(
            value=f"-{ev.amount}",
            timer=self.damage_text_ms,
            max_timer=self.damage_text_ms,
            x=m.x + m.width / 2,
            y=m.y - 40,
            rise_px=self.damage_text_rise,
        ))

    def _on_word_completed(self, ev: WordCompleted) -> None:
        self.dev_log.record("combat", f"word '{ev.word}' complete",
                            t=self.clock_ms, details={"next": ev.next_word})
        print(f"[COMBAT] '{ev.word}' complete → next '{ev.next_word}'")

    def _on_monster_defeated(self, ev: MonsterDefeated) -> None:
        self.dev_log.record("combat", f"{ev.name} defeated", t=self.clock_ms,
                            details={"accuracy": self.progress.accuracy})

    def _on_restarted(self, ev: SessionRestarted) -> None:
        self.dev_log.record("session", "restart", t=self.clock_ms,
                            details={"word": ev.word})
        print(f"[SESSION] restart — {self.monster.name} back to "
              f"{self.monster.hp} hp, word '{ev.word}'")
