# viz/keyboard.py
from typing import List, Optional
import pygame as pg
from core.interfaces import Command

KEYMAP = {
    pg.K_UP: Command.UP,
    pg.K_DOWN: Command.DOWN,
    pg.K_LEFT: Command.LEFT,
    pg.K_RIGHT: Command.RIGHT,
    pg.K_SPACE: Command.RESET,
    pg.K_ESCAPE: Command.QUIT,
}

class Keyboard:
    @staticmethod
    def translate(e) -> Optional[Command]:
        if e.type == pg.QUIT:
            return Command.QUIT
        if e.type == pg.KEYDOWN:
            return KEYMAP.get(e.key)
        return None

    def poll(self) -> List[Command]:
        cmds = []
        for e in pg.event.get():
            cmd = self.translate(e)
            if cmd is not None:
                cmds.append(cmd)
        return cmds
