# tests/conftest.py
import os
import sys

# Headless SDL so tests don't open a window
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

# Ensure project root is importable (so core.* / viz.* imports work when running from repo root)
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import pygame as pg
import pytest

@pytest.fixture(scope="session", autouse=True)
def _pygame_session():
    pg.init()
    yield
    pg.quit()

@pytest.fixture
def screen():
    # Plain Surface is fine for draw/blit tests (no need for display mode)
    return pg.Surface((600, 600))

@pytest.fixture
def engine_factory():
    from core.game_engine import GameEngine
    def make(width=600, height=None, seed=1234, **kwargs):
        return GameEngine(width, height, seed=seed, **kwargs)
    return make

@pytest.fixture
def place():
    """Put an engine into a known position: place(engine, snake, food, velocity)."""
    def _place(engine, snake, food, velocity=(1, 0), state="running"):
        st = engine.get_state()
        st.update(snake=[list(c) for c in snake], food=list(food),
                  velocity=list(velocity), state=state, reason=None)
        engine.set_state(st)
        return engine
    return _place

@pytest.fixture
def serpentine():
    """Every cell but (0, 0), head at (1, 0), winding down the board row by row."""
    def make(n):
        cells = [(x, 0) for x in range(1, n)]
        for y in range(1, n):
            xs = range(n - 1, -1, -1) if y % 2 else range(n)
            cells.extend((x, y) for x in xs)
        return cells
    return make
