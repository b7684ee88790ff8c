from __future__ import annotations
import csv, os
from typing import Dict, Any, Protocol, Callable
from core.interfaces import Snapshot

ALL_KEYS = [
    "step",
    "level", "outcome", "body_cells",
    "head_row", "head_col", "food_row", "food_col",
]

class Logger(Protocol):
    def log(self, step: int, scalars: Dict[str, Any]) -> None: ...
    def flush(self) -> None: ...
    def close(self) -> None: ...


class CSVLogger:
    """Append-only CSV logger with header auto-discovery or predefined schema."""
    def __init__(self, path: str, fieldnames: list[str] | None = None):
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        self.path = path
        self._fieldnames = fieldnames
        self._file = open(path, "a", newline="")
        self._writer = None

    def log(self, step: int, scalars: Dict[str, Any]) -> None:
        scalars = {"step": step, **scalars}
        if self._writer is None:
            if self._fieldnames is None:
                self._fieldnames = list(scalars.keys())
            self._writer = csv.DictWriter(
                self._file,
                fieldnames=self._fieldnames,
                extrasaction="ignore",
            )
            if self._file.tell() == 0:
                self._writer.writeheader()
        self._writer.writerow(scalars)

    def flush(self) -> None:
        self._file.flush()

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()

    def __enter__(self) -> "CSVLogger":
        return self

    def __exit__(self, *exc) -> None:
        self.close()


def make_tick_logger(logger: Logger, flush_every: int = 50) -> Callable[[Snapshot], None]:
    """
    Returns a function(snap) -> None the drivers call after every tick.
    Terminal outcomes are flushed right away.
    """
    def _on_tick(snap: Snapshot) -> None:
        food_row, food_col = snap.food if snap.food is not None else (None, None)
        scalars = {
            "level": snap.level,
            "outcome": snap.outcome.value,
            "body_cells": snap.body_cells,
            "head_row": snap.head[0],
            "head_col": snap.head[1],
            "food_row": food_row,
            "food_col": food_col,
        }
        logger.log(snap.step_count, scalars)
        if snap.terminated or snap.step_count % flush_every == 0:
            logger.flush()
    return _on_tick
