# main.py
import argparse

from config import AppConfig
from runners.run_console import main as console

def run_console(cfg): console(cfg)
def run_pygame(cfg):
    # pygame window only when asked for
    from runners.run_pygame import main as pygame_game
    pygame_game(cfg)

def parse_args(argv=None):
    d = AppConfig()
    p = argparse.ArgumentParser()
    p.add_argument("mode", choices=["console", "pygame"], nargs="?", default="console")
    p.add_argument("--grid-w", type=int, default=d.grid_w)
    p.add_argument("--grid-h", type=int, default=d.grid_h)
    p.add_argument("--start-len", type=int, default=d.start_len)
    p.add_argument("--seed", type=int, default=d.seed)
    p.add_argument("--fps", type=int, default=d.fps)
    p.add_argument("--cell-px", type=int, default=d.render_cell)
    p.add_argument("--no-hud", action="store_true")
    p.add_argument("--log-csv", default=d.log_csv)
    return p.parse_args(argv)

def config_from_args(args) -> AppConfig:
    return AppConfig().with_(
        grid_w=args.grid_w,
        grid_h=args.grid_h,
        start_len=args.start_len,
        seed=args.seed,
        fps=args.fps,
        render_cell=args.cell_px,
        render_show_hud=not args.no_hud,
        log_csv=args.log_csv,
    ).validate()

def main(argv=None):
    args = parse_args(argv)
    cfg = config_from_args(args)
    if args.mode == "console":
        run_console(cfg)
    elif args.mode == "pygame":
        run_pygame(cfg)

if __name__ == "__main__":
    main()
