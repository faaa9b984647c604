# core/game_engine.py  (pure rules, no pygame)
from __future__ import annotations
from collections import deque
from typing import Collection, Deque, Optional, Tuple
import random
from .interfaces import Cell, Command, Direction, GameState, Snapshot

# cell_size = (board_width // CELL_DIVISOR) * 2
CELL_DIVISOR = 60

class BoardFullError(RuntimeError):
    """No free cell could be found for food or head placement."""

def derive_cell_size(board_width: int) -> int:
    return (board_width // CELL_DIVISOR) * 2

class GameEngine:
    """Owns snake, food, velocity and game state; advances one tick at a time.

    The engine never schedules itself: a host calls ``advance()`` once per
    timer tick while ``should_tick`` is true and forwards key input through
    ``apply_direction()`` / ``request_reset()``.
    """

    def __init__(
        self,
        board_width: int,
        board_height: Optional[int] = None,
        *,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        max_spawn_attempts: Optional[int] = None,
    ):
        self.board_width = board_width
        self.board_height = board_width if board_height is None else board_height
        self.cell_size = derive_cell_size(board_width)
        if self.cell_size <= 0:
            raise ValueError(f"board_width {board_width} is too small for a single cell")
        self.num_cells = board_width // self.cell_size
        self.max_spawn_attempts = (
            max_spawn_attempts if max_spawn_attempts is not None
            else max(1000, 20 * self.num_cells * self.num_cells)
        )
        self.rng = rng if rng is not None else random.Random(seed)

        self.snake: Deque[Cell] = deque()
        self.food: Cell = (0, 0)
        self.velocity: Tuple[int, int] = (1, 0)
        self.state = GameState.RUNNING
        self.reason: str | None = None
        self.tick_count = 0
        self.reset()

    # ---- lifecycle ----
    def reset(self) -> Snapshot:
        self.snake.clear()
        self.food = self.random_free_cell(self.snake)
        self.snake.appendleft(self.random_free_cell({self.food}))
        self.velocity = self._random_velocity()
        self.state = GameState.RUNNING
        self.reason = None
        self.tick_count = 0
        return self.snapshot()

    def request_reset(self) -> bool:
        """User-issued reset; only honoured once the game has ended."""
        if self.state is not GameState.GAME_OVER:
            return False
        self.reset()
        return True

    @property
    def should_tick(self) -> bool:
        return self.state is GameState.RUNNING

    @property
    def score(self) -> int:
        return len(self.snake) - 1

    # ---- simulation ----
    def advance(self) -> Snapshot:
        if self.state is GameState.GAME_OVER:
            return self.snapshot()
        self.tick_count += 1

        hx, hy = self.snake[0]
        vx, vy = self.velocity
        new_head = (hx + vx, hy + vy)
        self.snake.appendleft(new_head)

        # order matters: self -> food -> wall -> plain move
        if len(set(self.snake)) != len(self.snake):
            # head stays in the body on a self hit
            self._end("self")
        elif new_head == self.food:
            try:
                self.food = self.random_free_cell(self.snake)
            except BoardFullError:
                # nowhere left to put food: the snake has filled the board
                self._end("full")
        elif self._out_of_bounds(new_head):
            self._end("wall")
            self.snake.popleft()
        else:
            self.snake.pop()
        return self.snapshot()

    def _end(self, reason: str) -> None:
        self.state = GameState.GAME_OVER
        self.reason = reason

    def _out_of_bounds(self, cell: Cell) -> bool:
        x, y = cell
        cs = self.cell_size
        return x < 0 or y < 0 or x * cs >= self.board_width or y * cs >= self.board_height

    # ---- input ----
    def apply_direction(self, direction: Direction) -> bool:
        if not isinstance(direction, Direction):
            raise TypeError(f"expected Direction, got {type(direction).__name__}")
        if self.state is GameState.GAME_OVER:
            return False
        ndx, ndy = direction.vector
        cdx, cdy = self.velocity
        # 180° turns would run straight into the neck
        if (ndx, ndy) == (-cdx, -cdy):
            return False
        self.velocity = (ndx, ndy)
        return True

    def handle_command(self, command: Command) -> bool:
        if command is Command.RESET:
            return self.request_reset()
        direction = command.direction
        if direction is None:
            return False
        return self.apply_direction(direction)

    # ---- placement ----
    def random_free_cell(self, excluded: Collection[Cell]) -> Cell:
        """Uniformly resample grid cells until one is not in ``excluded``.

        Raises BoardFullError when every cell is taken or after
        ``max_spawn_attempts`` unlucky draws.
        """
        n = self.num_cells
        taken = {c for c in excluded if 0 <= c[0] < n and 0 <= c[1] < n}
        if len(taken) >= n * n:
            raise BoardFullError(f"all {n * n} cells are occupied")

        for _ in range(self.max_spawn_attempts):
            cell = (self.rng.randrange(n), self.rng.randrange(n))
            if cell not in excluded:
                return cell
        raise BoardFullError(f"no free cell after {self.max_spawn_attempts} attempts")

    def _random_velocity(self) -> Tuple[int, int]:
        while True:
            vx = self.rng.randint(-1, 1)
            vy = 0 if vx != 0 else self.rng.randint(-1, 1)
            if (vx, vy) != (0, 0):
                return vx, vy

    # ---- export ----
    def snapshot(self) -> Snapshot:
        return Snapshot(
            snake=tuple(self.snake),
            food=self.food,
            velocity=self.velocity,
            score=self.score,
            state=self.state,
            reason=self.reason,
            tick_count=self.tick_count,
            cell_size=self.cell_size,
            num_cells=self.num_cells,
            board_width=self.board_width,
            board_height=self.board_height,
        )

    def get_state(self) -> dict:
        """Pure-Python, JSON-serializable state (plus RNG)."""
        return {
            "snake": [list(c) for c in self.snake],
            "food": list(self.food),
            "velocity": list(self.velocity),
            "state": self.state.value,
            "reason": self.reason,
            "tick_count": self.tick_count,
            "rng_state": self.rng.getstate(),
        }

    def set_state(self, state: dict) -> None:
        """Restore exact internal state (RNG only when present)."""
        self.snake = deque(tuple(c) for c in state["snake"])
        self.food = tuple(state["food"])
        self.velocity = tuple(state["velocity"])
        self.state = GameState(state["state"])
        self.reason = state.get("reason")
        self.tick_count = int(state.get("tick_count", 0))
        if state.get("rng_state") is not None:
            version, internal, gauss = state["rng_state"]
            self.rng.setstate((version, tuple(internal), gauss))
