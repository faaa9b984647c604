# config.py
from dataclasses import dataclass, replace
from typing import Optional

@dataclass(frozen=True, slots=True)
class AppConfig:
    # board (pixels); height falls back to width
    board_width: int = 600
    board_height: Optional[int] = None
    seed: Optional[int] = None

    # gameplay
    tick_ms: int = 90                        # fixed simulation step
    max_spawn_attempts: Optional[int] = None # None -> engine default

    # render
    fps: int = 60
    title: str = "Snake"
    font_name: str = "Arial"
    font_size: int = 16

    @property
    def height(self) -> int:
        return self.board_width if self.board_height is None else self.board_height

    def with_(self, **kwargs) -> "AppConfig":
        """Convenience: clone with updated values"""
        return replace(self, **kwargs)
