# viz/renderer_console.py
from __future__ import annotations
import os
import sys
from typing import Optional, TextIO
from config import AppConfig
from core.interfaces import Snapshot
from core.snake_rules import render_board

def clear_screen():
    os.system('clear' if os.name == 'posix' else 'cls')

class ConsoleRenderer:
    def __init__(self, out: Optional[TextIO] = None, clear: bool = True):
        self.out = out
        self.clear = clear
        self.cfg: Optional[AppConfig] = None

    def open(self, cfg: AppConfig) -> None:
        self.cfg = cfg

    def draw(self, s: Snapshot) -> None:
        if self.cfg is None:
            raise RuntimeError("Renderer not opened (call open first)")
        out = self.out or sys.stdout
        if self.clear:
            clear_screen()
        out.write(render_board(s.board, s.head, s.food))
        if self.cfg.render_show_hud:
            out.write(f"length={s.level} steps={s.step_count} {s.outcome.value}\n")
        out.flush()

    def tick(self, fps: int) -> None:
        pass  # console advances on input, not on a clock

    def close(self) -> None:
        pass
