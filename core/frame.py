# core/frame.py
"""What a frame looks like, independent of any drawing backend.

Renderers turn a Snapshot into a Frame and only have to put rectangles and
strings on screen; colors, HUD strings and text placement are decided here.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, List, Sequence, Tuple
from .interfaces import Cell, Snapshot

RGB = Tuple[int, int, int]

SNAKE_HEAD: RGB = (0, 255, 0)
TAIL_DIM = 0.3          # tail green = 70% of head green

RESET_HINT = "Press Space Key For Reset"

def snake_colors(length: int, head: RGB = SNAKE_HEAD) -> List[RGB]:
    """Head->tail gradient: green fades linearly to 70%, red/blue fixed."""
    r, g, b = head
    out = []
    for i in range(length):
        factor = i / (length - 1) if length > 1 else 0.0
        out.append((r, int(g * (1 - TAIL_DIM * factor)), b))
    return out

def score_text(score: int) -> str:
    return f"Score: {score}"

def game_over_lines(score: int) -> List[str]:
    return [f"Game Over: {score}", RESET_HINT]

def cell_rect(cell: Cell, cell_size: int) -> Tuple[int, int, int, int]:
    x, y = cell
    return (x * cell_size, y * cell_size, cell_size, cell_size)

def center_lines(
    lines: Sequence[str],
    board_width: int,
    board_height: int,
    measure: Callable[[str], int],
    line_height: int,
) -> List[Tuple[str, int, int]]:
    """Center each line horizontally; first baseline at the board center."""
    cx, cy = board_width // 2, board_height // 2
    placed = []
    for i, line in enumerate(lines):
        x = cx - measure(line) // 2
        y = cy + i * line_height
        placed.append((line, x, y))
    return placed

@dataclass(frozen=True)
class Frame:
    cells: Tuple[Cell, ...]
    colors: Tuple[RGB, ...]
    food: Cell
    cell_size: int
    board_width: int
    board_height: int
    game_over: bool
    hud: str | None = None                       # while running
    overlay: Tuple[str, ...] = field(default=())  # once the game is over

    def hud_origin(self) -> Tuple[int, int]:
        """Baseline position of the score text."""
        return (self.cell_size // 2, self.cell_size)

    def layout_overlay(self, measure: Callable[[str], int], line_height: int):
        return center_lines(self.overlay, self.board_width, self.board_height,
                            measure, line_height)

def describe(s: Snapshot) -> Frame:
    return Frame(
        cells=s.snake,
        colors=tuple(snake_colors(len(s.snake))),
        food=s.food,
        cell_size=s.cell_size,
        board_width=s.board_width,
        board_height=s.board_height,
        game_over=s.game_over,
        hud=None if s.game_over else score_text(s.score),
        overlay=tuple(game_over_lines(s.score)) if s.game_over else (),
    )
