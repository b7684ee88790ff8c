# runners/run_pygame.py
from config import AppConfig
from metrics.logging import ALL_KEYS, CSVLogger, make_tick_logger
from viz.renderer_pygame import PygameRenderer
from viz.keyboard import Keyboard, QUIT

def main(cfg: AppConfig):
    game = cfg.make_game()

    rend = PygameRenderer()
    rend.open(cfg)
    kbd = Keyboard()
    logger = CSVLogger(cfg.log_csv, fieldnames=ALL_KEYS) if cfg.log_csv else None
    on_tick = make_tick_logger(logger) if logger else None

    rend.draw(game.snapshot())
    try:
        while True:
            key = kbd.poll()
            if key == QUIT:
                break
            # sitting still until the first steering key, like the console game
            if key is None and game.direction is None:
                rend.tick(cfg.fps)
                continue

            outcome = game.tick(key)
            snap = game.snapshot()
            if on_tick:
                on_tick(snap)
            rend.draw(snap)
            rend.tick(cfg.fps)
            if outcome.terminal:
                print(f"[tick {game.step_count}] game over: {outcome.value} (length {game.level})")
                break
    finally:
        rend.close()
        if logger:
            logger.close()
