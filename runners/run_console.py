# runners/run_console.py
from __future__ import annotations
from typing import Iterable, Optional
from config import AppConfig
from core.interfaces import TickOutcome
from metrics.logging import ALL_KEYS, CSVLogger, make_tick_logger
from viz.keyboard import parse_keys
from viz.render_iface import Renderer
from viz.renderer_console import ConsoleRenderer

def _stdin_lines():
    while True:
        try:
            yield input()
        except EOFError:
            return

def main(cfg: AppConfig, lines: Optional[Iterable[str]] = None,
         renderer: Optional[Renderer] = None) -> TickOutcome:
    """
    Turn-based console game: every non-blank character of an input line is one tick
    (w/a/s/d steer, anything else keeps going straight). A line of just "q" quits.
    """
    game = cfg.make_game()
    rend = renderer if renderer is not None else ConsoleRenderer()
    rend.open(cfg)
    logger = CSVLogger(cfg.log_csv, fieldnames=ALL_KEYS) if cfg.log_csv else None
    on_tick = make_tick_logger(logger) if logger else None

    rend.draw(game.snapshot())
    outcome = game.outcome
    try:
        for line in (lines if lines is not None else _stdin_lines()):
            if line.strip().lower() == "q":
                break
            for d in parse_keys(line):
                outcome = game.tick(d)
                if on_tick:
                    on_tick(game.snapshot())
                if outcome.terminal:
                    break
            rend.draw(game.snapshot())
            if outcome.terminal:
                print(f"[tick {game.step_count}] game over: {outcome.value} (length {game.level})")
                break
    finally:
        rend.close()
        if logger:
            logger.close()
    return outcome
