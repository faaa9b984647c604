# runners/run_snake.py
from __future__ import annotations
from typing import List, Optional
from config import AppConfig
from core.game_engine import GameEngine
from core.interfaces import Command, Renderer
from core.ticker import FixedTicker

class SnakeApp:
    """Single-threaded host: keyboard -> engine, timer -> advance(), engine -> renderer."""

    def __init__(self, cfg: AppConfig, renderer: Optional[Renderer] = None,
                 keyboard=None, engine: Optional[GameEngine] = None):
        self.cfg = cfg
        self.engine = engine or GameEngine(
            cfg.board_width, cfg.height,
            seed=cfg.seed, max_spawn_attempts=cfg.max_spawn_attempts,
        )
        self.ticker = FixedTicker(cfg.tick_ms)
        self.renderer = renderer
        self.keyboard = keyboard
        self.running = False
        self.games_played = 0

    def start(self) -> None:
        if self.renderer is not None:
            self.renderer.open(self.cfg)
        e = self.engine
        print(f"[snake] board={e.board_width}x{e.board_height}  cell={e.cell_size}  "
              f"grid={e.num_cells}x{e.num_cells}  tick={self.cfg.tick_ms}ms")
        self.running = True
        if e.should_tick:
            self.ticker.start()

    def handle_command(self, cmd: Command) -> None:
        if cmd is Command.QUIT:
            self.running = False
            return
        if cmd is Command.RESET:
            if self.engine.request_reset():
                self.ticker.start()
                print("[snake] reset")
            return
        self.engine.handle_command(cmd)

    def update(self, elapsed_ms: float) -> int:
        """Run due ticks; returns how many advance() calls were made."""
        done = 0
        for _ in range(self.ticker.update(elapsed_ms)):
            if not self.engine.should_tick:
                break
            snap = self.engine.advance()
            done += 1
            if snap.game_over:
                self.ticker.stop()
                self.games_played += 1
                print(f"[snake] game over  score={snap.score}  reason={snap.reason}  "
                      f"ticks={snap.tick_count}")
                break
        return done

    def step(self, elapsed_ms: float, commands: Optional[List[Command]] = None) -> None:
        if commands is None:
            commands = self.keyboard.poll() if self.keyboard is not None else []
        for cmd in commands:
            self.handle_command(cmd)
            if not self.running:
                return
        self.update(elapsed_ms)
        if self.renderer is not None:
            self.renderer.draw(self.engine.snapshot())

    def run(self) -> None:
        self.start()
        try:
            elapsed = 0
            while self.running:
                self.step(elapsed)
                elapsed = self.renderer.tick(self.cfg.fps) if self.renderer else 0
        finally:
            if self.renderer is not None:
                self.renderer.close()

def main(cfg: AppConfig | None = None):
    from viz.keyboard import Keyboard
    from viz.renderer_pygame import PygameRenderer

    cfg = cfg or AppConfig()
    app = SnakeApp(cfg, renderer=PygameRenderer(), keyboard=Keyboard())
    app.run()
