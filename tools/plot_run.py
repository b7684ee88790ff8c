# tools/plot_run.py
import argparse
import csv
import math
from pathlib import Path

# Use a non-interactive backend that writes to files
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402

SCRIPT_DIR = Path(__file__).resolve().parent
REPO_ROOT = SCRIPT_DIR.parent
LOG_PATH = REPO_ROOT / "runs" / "snake" / "ticks.csv"

def to_float(v):
    try:
        return float(v)
    except (TypeError, ValueError):
        return math.nan

def load_run(path: Path):
    """Read a tick log written by metrics.logging.CSVLogger into column lists."""
    if not path.exists():
        raise FileNotFoundError(f"Could not find tick log at {path}. "
                                f"Run a game with --log-csv pointing there first.")
    steps, level, body, ate = [], [], [], []
    with path.open(newline="") as f:
        for row in csv.DictReader(f):
            steps.append(int(row["step"]))
            level.append(to_float(row.get("level")))
            body.append(to_float(row.get("body_cells")))
            ate.append(row.get("outcome") == "ate")
    return steps, level, body, ate

def plot_run(path: Path, out_path: Path) -> Path:
    steps, level, body, ate = load_run(path)
    fig, ax = plt.subplots(figsize=(9, 4))
    ax.plot(steps, level, label="level")
    ax.plot(steps, body, label="body cells", alpha=0.7)
    eat_steps = [s for s, a in zip(steps, ate) if a]
    if eat_steps:
        ax.vlines(eat_steps, 0, max(level), colors="tab:red", alpha=0.25, label="food")
    ax.set_xlabel("tick")
    ax.set_ylabel("cells")
    ax.set_title(path.name)
    ax.legend()
    fig.tight_layout()
    out_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(out_path, dpi=120)
    plt.close(fig)
    return out_path

def main():
    p = argparse.ArgumentParser()
    p.add_argument("log", nargs="?", default=str(LOG_PATH))
    p.add_argument("--out", default=None)
    args = p.parse_args()
    log = Path(args.log)
    out = Path(args.out) if args.out else log.parent / "plots" / f"{log.stem}.png"
    print(f"wrote {plot_run(log, out)}")

if __name__ == "__main__":
    main()
