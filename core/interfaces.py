# core/interfaces.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Protocol

Cell = Tuple[int, int]

class GameState(Enum):
    RUNNING = "running"
    GAME_OVER = "game_over"

class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def vector(self) -> Tuple[int, int]:
        return self.value

class Command(Enum):
    """Host-level input, already decoded from raw key events."""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    RESET = "reset"
    QUIT = "quit"

    @property
    def direction(self) -> Direction | None:
        return _COMMAND_DIRS.get(self)

_COMMAND_DIRS = {
    Command.UP: Direction.UP,
    Command.DOWN: Direction.DOWN,
    Command.LEFT: Direction.LEFT,
    Command.RIGHT: Direction.RIGHT,
}

@dataclass(frozen=True)
class Snapshot:
    snake: Tuple[Cell, ...]   # head first
    food: Cell
    velocity: Tuple[int, int]
    score: int
    state: GameState
    reason: str | None        # "self" | "wall" | "full" once the game is over
    tick_count: int
    cell_size: int
    num_cells: int
    board_width: int
    board_height: int

    @property
    def game_over(self) -> bool:
        return self.state is GameState.GAME_OVER

    @property
    def head(self) -> Cell:
        return self.snake[0]

class Renderer(Protocol):
    def open(self, cfg) -> None: ...
    def draw(self, snap: Snapshot) -> None: ...
    def tick(self, fps: int) -> int: ...
    def close(self) -> None: ...
