"""logic/input_manager.py — pygame events → core input events + intents.

Sits between raw pygame events and the session.  The scene feeds in
raw events; the manager turns them into two things:

  * **core events** (``KeyChange``, ``TypedChar``, ``Backspace``) that
    the scene posts, in order, into ``SessionState``;
  * **intents** (``pause``, ``restart``, ``test_hit`` …) for controls
    that act on the session directly.

Usage (in arena_scene)::

    self.input = InputManager()
    # each event:
    self.input.feed(event)
    # each frame:
    for ev in self.input.take_events():
        session.post(ev)
    if self.input.just("pause"):
        session.toggle_pause()
    self.input.begin_frame()

Letters only arrive as TEXTINPUT, so typing never collides with the
bound control keys.
"""

from __future__ import annotations
import pygame

from logic.input_state import InputEvent, KeyChange, TypedChar, Backspace


# ── Default key bindings ────────────────────────────────────────────

# Held keys → KeyChange(name, down) on KEYDOWN / KEYUP
_HELD_BINDS: dict[str, list[int]] = {
    "left":  [pygame.K_LEFT],
    "right": [pygame.K_RIGHT],
    "jump":  [pygame.K_SPACE, pygame.K_UP],
}

# Discrete presses → intents
_PRESS_BINDS: dict[str, list[int]] = {
    "pause":         [pygame.K_ESCAPE],
    "restart":       [pygame.K_RETURN, pygame.K_KP_ENTER],
    "test_hit":      [pygame.K_F5],
    "reload_tuning": [pygame.K_F4],
    "toggle_debug":  [pygame.K_TAB],
}


class InputManager:
    """Maps raw pygame events; holds no game state of its own."""

    def __init__(self):
        # Intents pressed *this frame* (rising edge)
        self._pressed: set[str] = set()
        # Core events in arrival order, waiting to be posted
        self._events: list[InputEvent] = []

    # ── frame lifecycle ─────────────────────────────────────────

    def begin_frame(self):
        """Call once per frame after the intents have been read."""
        self._pressed.clear()

    def feed(self, event: pygame.event.Event):
        """Feed a raw pygame event."""
        if event.type == pygame.TEXTINPUT:
            for ch in event.text:
                self._events.append(TypedChar(ch))
            return

        if event.type == pygame.WINDOWFOCUSLOST:
            self._pressed.add("focus_lost")
            # keys released while unfocused never send KEYUP
            for name in _HELD_BINDS:
                self._events.append(KeyChange(name, False))
            return

        if event.type in (pygame.KEYDOWN, pygame.KEYUP):
            down = event.type == pygame.KEYDOWN
            for name, keys in _HELD_BINDS.items():
                if event.key in keys:
                    self._events.append(KeyChange(name, down))
                    return
            if not down:
                return
            if event.key == pygame.K_BACKSPACE:
                self._events.append(Backspace())
                return
            for intent, keys in _PRESS_BINDS.items():
                if event.key in keys:
                    self._pressed.add(intent)
                    return
            return

    # ── queries ─────────────────────────────────────────────────

    def just(self, intent: str) -> bool:
        """True if the intent was triggered this frame (rising edge)."""
        return intent in self._pressed

    def take_events(self) -> list[InputEvent]:
        """Hand over the queued core events (oldest first) and clear them."""
        events = self._events
        self._events = []
        return events
