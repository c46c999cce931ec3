"""
core/app.py — Pygame application shell

Handles the window, main loop, and scene stack.
You don't edit this file to build your game.
You write Scenes and push/pop them.

    app = App(title="Typestrike", width=800, height=480)
    app.push_scene(MyScene())
    app.run()

The loop runs once per display refresh whether or not the game is
paused; pausing is the scene's business, the shell only keeps time.
"""

from __future__ import annotations
import pygame
from core.clock import FrameScheduler
from core.scene import Scene


class App:
    def __init__(self, title: str = "Typestrike", width: int = 800, height: int = 480):
        pygame.init()
        self._windowed_size = (width, height)
        # The virtual (design) resolution — all game rendering targets this.
        self._virtual_size = (width, height)
        self._render_surface = pygame.Surface((width, height))
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        pygame.display.set_caption(title)
        self.clock = pygame.time.Clock()
        self.scheduler = FrameScheduler(pygame.time.get_ticks)
        self.running = True
        self.fullscreen = False
        self.fps = 60
        self.elapsed_ms = 0.0

        # Scene stack — only the top scene is active
        self._scenes: list[Scene] = []

        # Fonts — fixed size (the virtual surface is always the same size)
        self.font = pygame.font.SysFont("monospace", 14)
        self.font_sm = pygame.font.SysFont("monospace", 12)
        self.font_word = pygame.font.SysFont("monospace", 20)
        self.font_lg = pygame.font.SysFont("monospace", 32, bold=True)

    @property
    def size(self) -> tuple[int, int]:
        return self._virtual_size

    # -- Scene management --

    @property
    def scene(self) -> Scene | None:
        return self._scenes[-1] if self._scenes else None

    def push_scene(self, scene: Scene):
        if self._scenes:
            self._scenes[-1].on_exit(self)
        self._scenes.append(scene)
        self._sync_text_input()
        scene.on_enter(self)
        # entering a scene must not count the setup time as a frame
        self.scheduler.resync()

    def pop_scene(self):
        if self._scenes:
            self._scenes[-1].on_exit(self)
            self._scenes.pop()
        if self._scenes:
            self._sync_text_input()
            self._scenes[-1].on_enter(self)
        self.scheduler.resync()

    def _sync_text_input(self):
        if self.scene is not None and self.scene.text_input:
            pygame.key.start_text_input()
        else:
            pygame.key.stop_text_input()

    # -- Main loop --

    def run(self):
        while self.running:
            self.clock.tick(self.fps)
            self.elapsed_ms = self.scheduler.tick()

            # Events
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_F11:
                    self.toggle_fullscreen()
                elif event.type == pygame.VIDEORESIZE and not self.fullscreen:
                    self._windowed_size = (event.w, event.h)
                    self.screen = pygame.display.set_mode(
                        (event.w, event.h), pygame.RESIZABLE)
                elif self.scene:
                    self.scene.handle_event(event, self)

            # Update
            if self.scene:
                self.scene.update(self.elapsed_ms, self)

            # Draw to the fixed-size virtual surface, then scale to screen
            if self.scene:
                self.scene.draw(self._render_surface, self)

            pygame.transform.scale(self._render_surface,
                                   self.screen.get_size(), self.screen)
            pygame.display.flip()

        pygame.quit()

    def toggle_fullscreen(self):
        """Switch between windowed and fullscreen (F11)."""
        self.fullscreen = not self.fullscreen
        if self.fullscreen:
            self.screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        else:
            self.screen = pygame.display.set_mode(
                self._windowed_size, pygame.RESIZABLE)
        self.scheduler.resync()

    # -- Convenience --

    def draw_text(self, surface: pygame.Surface, text: str, x: int, y: int,
                  color=(255, 255, 255), font=None):
        """Quick text draw. Returns the rect for layout chaining."""
        f = font or self.font
        img = f.render(text, True, color)
        rect = surface.blit(img, (x, y))
        return rect

    def draw_text_bg(self, surface: pygame.Surface, text: str, x: int, y: int,
                     color=(255, 255, 255), bg=(0, 0, 0, 160), font=None,
                     pad: int = 2):
        """Draw text with a semi-transparent background box."""
        f = font or self.font
        img = f.render(text, True, color)
        w, h = img.get_size()
        bg_surf = pygame.Surface((w + pad * 2, h + pad * 2), pygame.SRCALPHA)
        bg_surf.fill(bg)
        surface.blit(bg_surf, (x - pad, y - pad))
        return surface.blit(img, (x, y))
