# viz/renderer_pygame.py
from __future__ import annotations
import pygame as pg
from typing import Optional
from config import AppConfig
from core.interfaces import Snapshot
import viz.renderer_colors as theme

class PygameRenderer:
    def __init__(self):
        self.cell = 24
        self.cfg: Optional[AppConfig] = None
        self.surf: Optional[pg.Surface] = None
        self.clock: Optional[pg.time.Clock] = None
        self._auto_flip = True

    def open(self, cfg: AppConfig) -> None:
        # Guard: ensure instance, not class
        if isinstance(cfg, type):
            raise TypeError("Pass an AppConfig instance (use AppConfig()), not the class.")
        self.cfg = cfg
        self.cell = cfg.render_cell

        pg.init()
        pg.display.set_caption(cfg.render_title)
        self.surf = pg.display.set_mode((cfg.grid_w * self.cell, cfg.grid_h * self.cell))
        self.clock = pg.time.Clock()
        self._auto_flip = True

    def attach_surface(self, surface: pg.Surface, cfg: AppConfig) -> None:
        """Draw onto a caller-owned surface; no window, no clock, no flip."""
        if not pg.get_init():
            pg.init()
        self.cfg = cfg
        self.cell = cfg.render_cell
        self.surf = surface
        self.clock = None
        self._auto_flip = False

    def draw(self, s: Snapshot) -> None:
        if self.surf is None or self.cfg is None:
            raise RuntimeError("Renderer not opened (call open or attach_surface first)")
        surf = self.surf
        c = self.cell

        surf.fill(theme.BG)

        if s.food is not None:
            fr, fc = s.food
            pg.draw.rect(surf, theme.FOOD, pg.Rect(fc * c, fr * c, c, c))

        rows, cols = s.board.nonzero()
        for r, col in zip(rows.tolist(), cols.tolist()):
            if (r, col) == s.head:
                color = theme.HEAD
            else:
                color = theme.body_shade(int(s.board[r, col]), s.level)
            pg.draw.rect(surf, color, pg.Rect(col * c, r * c, c, c))

        if self.cfg.render_show_hud:
            if not pg.font.get_init():
                pg.font.init()
            font = pg.font.SysFont(None, 22)
            txt = font.render(
                f"Length: {s.level}   Steps: {s.step_count}   {s.outcome.value}",
                True, theme.TEXT
            )
            surf.blit(txt, (6, 4))

        if self._auto_flip:
            pg.display.flip()

    def tick(self, fps: int) -> None:
        if self.clock:
            self.clock.tick(fps)

    def close(self) -> None:
        try:
            pg.quit()
        finally:
            self.surf = None
            self.clock = None
