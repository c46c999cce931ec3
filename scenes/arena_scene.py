"""scenes/arena_scene.py — The typing fight.

Owns one ``SessionState`` and wires pygame to it: raw events go through
the ``InputManager``, the resulting core events are posted to the
session, and each frame the session ticks once and is drawn from a
snapshot.

Controls:
    ← / →        — move
    Space / ↑    — jump
    a–z          — type the monster's word
    Backspace    — take back the last correct letter
    Esc          — pause / resume
    Enter        — fight again (after a victory)
    F5           — test hit
    F4           — reload tuning
    Tab          — toggle the dev log overlay
"""

from __future__ import annotations
import random
import pygame
from core.scene import Scene
from core.app import App
import core.tuning as tuning
from logic.input_manager import InputManager
from logic.session import SessionState
from logic.words import WordSource
from scenes.arena_draw import draw_arena, draw_dev_log


class ArenaScene(Scene):
    text_input = True

    def __init__(self, words: WordSource | None = None):
        self.words = words
        self.session: SessionState | None = None
        self.input = InputManager()
        self.show_debug = False
        self._fx_rng = random.Random()

    def on_enter(self, app: App):
        if self.session is None:
            self.session = SessionState(words=self.words)

    def on_exit(self, app: App):
        if self.session is not None:
            self.session.pause()

    def handle_event(self, event: pygame.event.Event, app: App):
        self.input.feed(event)

    def update(self, elapsed_ms: float, app: App):
        s = self.session
        if s is None:
            return

        for ev in self.input.take_events():
            s.post(ev)

        if self.input.just("focus_lost"):
            s.pause()
        if self.input.just("pause"):
            s.toggle_pause()
        if self.input.just("restart"):
            s.restart()
        if self.input.just("test_hit"):
            s.apply_test_damage(tuning.get("combat", "test_hit_damage", 10))
        if self.input.just("reload_tuning"):
            tuning.reload()
        if self.input.just("toggle_debug"):
            self.show_debug = not self.show_debug
        self.input.begin_frame()

        s.tick(elapsed_ms)

    def draw(self, surface: pygame.Surface, app: App):
        if self.session is None:
            return
        draw_arena(surface, self.session.snapshot(), app, self._fx_rng)
        if self.show_debug:
            draw_dev_log(surface, self.session.dev_log.recent(8), app)
