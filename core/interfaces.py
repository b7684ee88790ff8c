# core/interfaces.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Optional, Protocol
import numpy as np

Pos = Tuple[int, int]   # (row, col)


class InvalidConfiguration(ValueError):
    """Board size or starting level is not a positive integer."""


class Direction(Enum):
    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def delta(self) -> Pos:
        return self.value

    @property
    def opposite(self) -> "Direction":
        dr, dc = self.value
        return Direction((-dr, -dc))


class TickOutcome(Enum):
    MOVED = "moved"
    ATE = "ate"
    COLLIDED = "collided"       # terminal
    BOARD_FULL = "board_full"   # terminal, no room left for food

    @property
    def terminal(self) -> bool:
        return self in (TickOutcome.COLLIDED, TickOutcome.BOARD_FULL)


class RandomSource(Protocol):
    """Anything that draws a uniform int from [start, stop). random.Random fits."""
    def randrange(self, start: int, stop: int) -> int: ...


@dataclass(frozen=True)
class Snapshot:
    board: np.ndarray           # copy, (height, width)
    head: Pos
    food: Optional[Pos]         # None once the board is full
    direction: Optional[Direction]
    level: int
    step_count: int
    outcome: TickOutcome
    terminated: bool
    grid_w: int
    grid_h: int

    @property
    def body_cells(self) -> int:
        return int(np.count_nonzero(self.board))
