"""
core/scene.py — Scene interface

Every screen in the game is a Scene. The app holds a stack of them.
Only the top scene gets events, update and draw calls.

    class MyScene(Scene):
        text_input = True          # deliver typed letters as TEXTINPUT

        def on_enter(self, app): ...
        def handle_event(self, event, app): ...
        def update(self, elapsed_ms, app): ...
        def draw(self, surface, app): ...

``update`` runs every display refresh, even while the game is paused;
a scene that pauses simply stops advancing its own state.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import pygame
    from core.app import App


class Scene:
    # When True the app enables SDL text input while this scene is on top.
    text_input: bool = False

    def on_enter(self, app: App):
        """Called when this scene becomes active (pushed or revealed)."""

    def on_exit(self, app: App):
        """Called when this scene is removed or covered."""

    def handle_event(self, event: pygame.event.Event, app: App):
        """Process a single pygame event."""

    def update(self, elapsed_ms: float, app: App):
        """Advance one frame; *elapsed_ms* comes from the FrameScheduler."""

    def draw(self, surface: pygame.Surface, app: App):
        """Draw to the virtual surface."""
