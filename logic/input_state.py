"""logic/input_state.py — Core-side input: held flags plus a typing buffer.

The raw input collaborator (``logic.input_manager``) never touches game
state.  It posts small event records into the session queue; once per
tick the session feeds them, in arrival order, through ``apply()``:

    KeyChange("left", True)    → held flag on
    TypedChar("n")             → buffered for the combat engine
    Backspace()                → buffered for the combat engine

``take_typing()`` hands the buffered typing events to the engine and
empties the buffer, so each event is consumed exactly once.
"""

from __future__ import annotations
from dataclasses import dataclass, field


MOVE_KEYS = ("left", "right", "jump")


@dataclass(frozen=True)
class KeyChange:
    key: str            # one of MOVE_KEYS
    down: bool


@dataclass(frozen=True)
class TypedChar:
    ch: str


@dataclass(frozen=True)
class Backspace:
    pass


InputEvent = KeyChange | TypedChar | Backspace


@dataclass
class InputState:
    left: bool = False
    right: bool = False
    jump: bool = False
    typing: list[TypedChar | Backspace] = field(default_factory=list)

    def apply(self, event: InputEvent) -> None:
        if isinstance(event, KeyChange):
            if event.key in MOVE_KEYS:
                setattr(self, event.key, event.down)
        elif isinstance(event, (TypedChar, Backspace)):
            self.typing.append(event)

    def take_typing(self) -> list[TypedChar | Backspace]:
        pending = self.typing
        self.typing = []
        return pending
