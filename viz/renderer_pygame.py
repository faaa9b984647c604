# viz/renderer_pygame.py
from __future__ import annotations
from typing import Optional
import pygame as pg
from config import AppConfig
from core.frame import Frame, cell_rect, describe
from core.interfaces import Snapshot
import viz.renderer_colors as theme

class PygameRenderer:
    def __init__(self):
        self.cfg: Optional[AppConfig] = None
        self.surf: Optional[pg.Surface] = None
        self.clock: Optional[pg.time.Clock] = None
        self.font: Optional[pg.font.Font] = None
        self._auto_flip = True

    def open(self, cfg: AppConfig) -> None:
        # Guard: ensure instance, not class
        if isinstance(cfg, type):
            raise TypeError("Pass an AppConfig instance (use AppConfig()), not the class.")
        self.cfg = cfg

        pg.init()
        pg.display.set_caption(cfg.title)
        self.surf = pg.display.set_mode((cfg.board_width, cfg.height))
        self.clock = pg.time.Clock()
        self.font = self._make_font(cfg)
        self._auto_flip = True

    def attach_surface(self, surface: pg.Surface, cfg: Optional[AppConfig] = None) -> None:
        if not pg.get_init():
            pg.init()
        self.cfg = cfg or self.cfg or AppConfig()
        self.surf = surface
        self.clock = None  # embedding surface typically controls timing
        self.font = self._make_font(self.cfg)
        self._auto_flip = False

    def draw(self, s: Snapshot) -> None:
        if self.surf is None or self.font is None:
            raise RuntimeError("Renderer not opened (call open or attach_surface first)")
        frame = describe(s)
        surf = self.surf
        surf.fill(theme.BG)

        self._raised_rect(frame, frame.food, theme.FOOD)
        for cell, col in zip(frame.cells, frame.colors):
            self._raised_rect(frame, cell, col)

        if frame.game_over:
            self._draw_overlay(frame)
        elif frame.hud:
            self._blit_baseline(frame.hud, frame.hud_origin(), theme.TEXT)

        if self._auto_flip:
            pg.display.flip()

    def tick(self, fps: int) -> int:
        if self.clock:
            return self.clock.tick(fps)
        return 0

    def close(self) -> None:
        try:
            pg.quit()
        finally:
            self.surf = None
            self.clock = None
            self.font = None

    # internals
    @staticmethod
    def _make_font(cfg: AppConfig) -> pg.font.Font:
        if not pg.font.get_init():
            pg.font.init()
        return pg.font.SysFont(cfg.font_name, cfg.font_size, bold=True)

    def _raised_rect(self, frame: Frame, cell, color) -> None:
        """Filled cell with a one-pixel bevel, light on top/left, dark on bottom/right."""
        rect = pg.Rect(cell_rect(cell, frame.cell_size))
        surf = self.surf
        pg.draw.rect(surf, color, rect)
        hi, lo = theme.brighter(color), theme.darker(color)
        pg.draw.line(surf, hi, rect.topleft, (rect.right - 1, rect.top))
        pg.draw.line(surf, hi, rect.topleft, (rect.left, rect.bottom - 1))
        pg.draw.line(surf, lo, (rect.left, rect.bottom - 1), (rect.right - 1, rect.bottom - 1))
        pg.draw.line(surf, lo, (rect.right - 1, rect.top), (rect.right - 1, rect.bottom - 1))

    def _draw_overlay(self, frame: Frame) -> None:
        font = self.font
        placed = frame.layout_overlay(lambda t: font.size(t)[0], font.get_linesize())
        for text, x, baseline in placed:
            self._blit_baseline(text, (x, baseline), theme.GAME_OVER)

    def _blit_baseline(self, text: str, pos, color) -> None:
        x, baseline = pos
        img = self.font.render(text, True, color)
        self.surf.blit(img, (x, baseline - self.font.get_ascent()))
