import pygame as pg
import pytest

from core.interfaces import Command
from viz.keyboard import Keyboard

@pytest.mark.parametrize("key,cmd", [
    (pg.K_UP, Command.UP),
    (pg.K_DOWN, Command.DOWN),
    (pg.K_LEFT, Command.LEFT),
    (pg.K_RIGHT, Command.RIGHT),
    (pg.K_SPACE, Command.RESET),
    (pg.K_ESCAPE, Command.QUIT),
])
def test_mapped_keys(key, cmd):
    assert Keyboard.translate(pg.event.Event(pg.KEYDOWN, key=key)) is cmd

def test_other_events_ignored():
    assert Keyboard.translate(pg.event.Event(pg.KEYDOWN, key=pg.K_a)) is None
    assert Keyboard.translate(pg.event.Event(pg.KEYUP, key=pg.K_UP)) is None

def test_window_close_is_quit():
    assert Keyboard.translate(pg.event.Event(pg.QUIT)) is Command.QUIT

def test_command_directions():
    assert Command.LEFT.direction.vector == (-1, 0)
    assert Command.RESET.direction is None
