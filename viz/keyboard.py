# viz/keyboard.py
from typing import Dict, List, Optional, Union
import pygame as pg
from core.interfaces import Direction

CONSOLE_KEYS: Dict[str, Direction] = {
    "w": Direction.UP,
    "a": Direction.LEFT,
    "s": Direction.DOWN,
    "d": Direction.RIGHT,
}

QUIT = "quit"


def parse_keys(line: str) -> List[Optional[Direction]]:
    """One entry per non-blank character; unbound ones become None (tick without turning)."""
    return [CONSOLE_KEYS.get(ch.lower()) for ch in line if not ch.isspace()]


class Keyboard:
    """Polls pygame events. Arrows and w/a/s/d steer, Esc or closing the window quits."""
    KEYMAP = {
        pg.K_UP: Direction.UP, pg.K_w: Direction.UP,
        pg.K_DOWN: Direction.DOWN, pg.K_s: Direction.DOWN,
        pg.K_LEFT: Direction.LEFT, pg.K_a: Direction.LEFT,
        pg.K_RIGHT: Direction.RIGHT, pg.K_d: Direction.RIGHT,
    }

    def poll(self) -> Union[Direction, str, None]:
        # last steering key in the frame wins
        pressed = None
        for e in pg.event.get():
            if e.type == pg.QUIT:
                return QUIT
            if e.type == pg.KEYDOWN:
                if e.key == pg.K_ESCAPE:
                    return QUIT
                pressed = self.KEYMAP.get(e.key, pressed)
        return pressed
