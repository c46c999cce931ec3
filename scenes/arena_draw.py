"""scenes/arena_draw.py — Arena rendering.

Everything here reads a ``Snapshot`` and draws; nothing writes back
into the session.

Draw order: background → ground/platforms → player → monster (shake,
hit flash) → hp bar → word → damage text → HUD → banners.
"""

from __future__ import annotations
import random
import pygame
from core.app import App
from components import Mark
from logic.session import Snapshot


# ── Palette ──────────────────────────────────────────────────────────

SKY = (32, 36, 52)
GROUND = (101, 67, 33)
PLATFORM = (139, 69, 19)
PLAYER = (220, 40, 40)
MONSTER = (121, 85, 72)
FLASH = (255, 255, 255, 150)
LETTER_COLORS = {
    Mark.CORRECT: (76, 175, 80),
    Mark.WRONG: (244, 67, 54),
    Mark.UNSET: (255, 255, 255),
}
HP_GOOD = (76, 175, 80)
HP_MID = (255, 193, 7)
HP_LOW = (244, 67, 54)


def _hp_color(ratio: float) -> tuple[int, int, int]:
    if ratio > 0.5:
        return HP_GOOD
    if ratio > 0.25:
        return HP_MID
    return HP_LOW


# ── World ────────────────────────────────────────────────────────────

def draw_level(surface: pygame.Surface, snap: Snapshot):
    sw, sh = surface.get_size()
    surface.fill(SKY)
    gy = int(snap.level.ground_y)
    pygame.draw.rect(surface, GROUND, (0, gy, sw, sh - gy))
    for rect in snap.level.platforms:
        pygame.draw.rect(surface, PLATFORM, rect)


def draw_player(surface: pygame.Surface, snap: Snapshot):
    p = snap.player
    pygame.draw.rect(surface, PLAYER,
                     (int(p.x), int(p.y), int(p.width), int(p.height)))


def draw_monster(surface: pygame.Surface, snap: Snapshot, app: App,
                 rng: random.Random):
    m = snap.monster
    ox, oy = m.shake_offset(rng)
    rect = pygame.Rect(int(m.x + ox), int(m.y + oy), int(m.width), int(m.height))
    pygame.draw.rect(surface, MONSTER, rect)
    if m.hit_flash > 0:
        flash = pygame.Surface(rect.size, pygame.SRCALPHA)
        flash.fill(FLASH)
        surface.blit(flash, rect.topleft)

    # HP bar above the monster
    bar_w = int(m.width + 40)
    bar_h = 12
    x = int(m.x - 20)
    y = int(m.y - 20)
    pygame.draw.rect(surface, (34, 34, 34), (x, y, bar_w, bar_h))
    pygame.draw.rect(surface, _hp_color(m.hp_ratio),
                     (x, y, int(bar_w * m.hp_ratio), bar_h))
    pygame.draw.rect(surface, (255, 255, 255), (x, y, bar_w, bar_h), 2)
    app.draw_text(surface, f"{m.name} {m.hp}/{m.max_hp}", x, y - 16,
                  font=app.font_sm)

    draw_word(surface, snap, app, y - 46)


def draw_word(surface: pygame.Surface, snap: Snapshot, app: App, y: int):
    """Target word, one glyph at a time, coloured by its mark."""
    if not snap.word:
        return
    m = snap.monster
    font = app.font_word
    char_w = font.size("M")[0]
    start_x = int(m.x + m.width / 2 - len(snap.word) * char_w / 2)
    for i, letter in enumerate(snap.word):
        mark = snap.marks[i] if i < len(snap.marks) else Mark.UNSET
        img = font.render(letter, True, LETTER_COLORS[mark])
        surface.blit(img, (start_x + i * char_w, y))
    # cursor under the next expected letter
    if snap.index < len(snap.word):
        cx = start_x + snap.index * char_w
        cy = y + font.get_height()
        pygame.draw.line(surface, (255, 255, 255), (cx, cy), (cx + char_w - 2, cy), 2)


# ── Overlays ─────────────────────────────────────────────────────────

def draw_damage_text(surface: pygame.Surface, snap: Snapshot, app: App):
    dt = snap.damage_text
    if dt is None:
        return
    img = app.font_word.render(dt.value, True, (255, 235, 59))
    img.set_alpha(int(255 * max(0.0, dt.timer) / dt.max_timer) if dt.max_timer else 255)
    surface.blit(img, (int(dt.x - img.get_width() / 2), int(dt.y - dt.rise)))


def draw_victory(surface: pygame.Surface, snap: Snapshot, app: App):
    vm = snap.victory
    if vm is None:
        return
    sw, sh = surface.get_size()
    img = app.font_lg.render(vm.text, True, (255, 215, 0))
    img.set_alpha(int(255 * vm.alpha))
    surface.blit(img, (sw // 2 - img.get_width() // 2, sh // 3))
    hint = app.font.render("Press Enter to fight again", True, (230, 230, 230))
    surface.blit(hint, (sw // 2 - hint.get_width() // 2, sh // 3 + 44))


def draw_hud(surface: pygame.Surface, snap: Snapshot, app: App):
    p = snap.player
    lines = [
        f"{snap.level.name} ({snap.level.difficulty})",
        f"Player HP: {p.hp:.0f}",
        f"Accuracy: {snap.accuracy:.0%}",
        f"Score: {p.score:.0f}",
    ]
    y = 12
    for line in lines:
        app.draw_text_bg(surface, line, 12, y)
        y += 20
    if snap.fps is not None:
        sw = surface.get_width()
        app.draw_text(surface, f"{snap.fps:.0f} fps", sw - 70, 12,
                      color=(160, 160, 160), font=app.font_sm)
    if snap.monster.defeated and snap.victory is None:
        sw, sh = surface.get_size()
        hint = app.font.render("Press Enter to fight again", True, (230, 230, 230))
        surface.blit(hint, (sw // 2 - hint.get_width() // 2, sh // 3 + 44))


def draw_paused(surface: pygame.Surface, app: App):
    sw, sh = surface.get_size()
    shade = pygame.Surface((sw, sh), pygame.SRCALPHA)
    shade.fill((0, 0, 0, 140))
    surface.blit(shade, (0, 0))
    img = app.font_lg.render("PAUSED", True, (255, 255, 255))
    surface.blit(img, (sw // 2 - img.get_width() // 2, sh // 2 - img.get_height() // 2))
    hint = app.font.render("Esc to resume", True, (200, 200, 200))
    surface.blit(hint, (sw // 2 - hint.get_width() // 2, sh // 2 + 28))


def draw_dev_log(surface: pygame.Surface, entries: list[dict], app: App):
    """Tail of the session DevLog, bottom-left."""
    sh = surface.get_height()
    y = sh - 14 * len(entries) - 8
    for e in entries:
        app.draw_text_bg(surface, f"{e['t'] / 1000:7.2f}s [{e['cat']}] {e['msg']}",
                         8, y, color=(180, 220, 180), font=app.font_sm)
        y += 14


def draw_arena(surface: pygame.Surface, snap: Snapshot, app: App,
               rng: random.Random):
    draw_level(surface, snap)
    draw_player(surface, snap)
    draw_monster(surface, snap, app, rng)
    draw_damage_text(surface, snap, app)
    draw_hud(surface, snap, app)
    draw_victory(surface, snap, app)
    if snap.paused:
        draw_paused(surface, app)
