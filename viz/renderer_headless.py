# viz/renderer_headless.py
from __future__ import annotations
from typing import Optional
import numpy as np
from config import AppConfig
from core.frame import cell_rect, describe
from core.interfaces import Renderer, Snapshot
import viz.renderer_colors as theme

class HeadlessRenderer(Renderer):
    """Rasterizes frames into an (H, W, 3) uint8 array; no window, no text."""
    def __init__(self):
        self.cfg: Optional[AppConfig] = None
        self.frame: Optional[np.ndarray] = None
        self.frames_drawn = 0

    def open(self, cfg: AppConfig) -> None:
        self.cfg = cfg
        self.frame = np.zeros((cfg.height, cfg.board_width, 3), dtype=np.uint8)
        self.frames_drawn = 0

    def draw(self, snap: Snapshot) -> None:
        if self.frame is None:
            raise RuntimeError("Renderer not opened (call open first)")
        f = describe(snap)
        img = self.frame
        img[:, :] = theme.BG
        self._fill(img, f.food, f.cell_size, theme.FOOD)
        for cell, col in zip(f.cells, f.colors):
            self._fill(img, cell, f.cell_size, col)
        self.frames_drawn += 1

    def tick(self, fps: int) -> int:
        return 0

    def close(self) -> None:
        self.frame = None

    def pixel(self, x: int, y: int):
        if self.frame is None:
            raise RuntimeError("Renderer not opened (call open first)")
        return tuple(int(v) for v in self.frame[y, x])

    @staticmethod
    def _fill(img: np.ndarray, cell, c: int, color) -> None:
        left, top, cw, ch = cell_rect(cell, c)
        h, w = img.shape[:2]
        x0, y0 = max(0, left), max(0, top)
        x1, y1 = min(w, left + cw), min(h, top + ch)
        if x0 < x1 and y0 < y1:
            img[y0:y1, x0:x1] = color
