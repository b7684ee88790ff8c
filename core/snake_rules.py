# core/snake_rules.py  (pure rules, no pygame)
from __future__ import annotations
import copy
import random
from typing import Optional
import numpy as np
from .interfaces import (
    Direction, InvalidConfiguration, Pos, RandomSource, Snapshot, TickOutcome,
)


def step_position(pos: Pos, direction: Optional[Direction], height: int, width: int) -> Pos:
    """One cell from pos towards direction, wrapping at the edges. None stays put."""
    if direction is None:
        return pos
    dr, dc = direction.delta
    return ((pos[0] + dr) % height, (pos[1] + dc) % width)


def render_board(board: np.ndarray, head: Pos, food: Optional[Pos]) -> str:
    """
    Text grid framed by dashed rules:
      @ head, # body, F food, ' ' empty
    The rule is as long as the board is tall.
    """
    height, width = board.shape
    rule = "-" * height
    lines = [rule]
    for r in range(height):
        row = []
        for c in range(width):
            if board[r, c] > 0:
                row.append("@" if (r, c) == head else "#")
            elif (r, c) == food:
                row.append("F")
            else:
                row.append(" ")
        lines.append("".join(row))
    lines.append(rule)
    return "\n".join(lines) + "\n"


def _check_positive(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)) or value < 1:
        raise InvalidConfiguration(f"{name} must be a positive integer, got {value!r}")
    return int(value)


class GameState:
    """
    Snake on a wrapping grid. The body is never stored as a list of segments:
    each board cell holds a timer, the head cell is set to the growth level every
    tick and all cells count down by one, so the tail fades out on its own.
      0  -> empty
      >0 -> snake body (head included)
    """

    def __init__(self, width: int, height: int, starting_level: int,
                 rng: Optional[RandomSource] = None):
        self._width = _check_positive("width", width)
        self._height = _check_positive("height", height)
        self._start_level = _check_positive("starting_level", starting_level)
        self._rng = rng if rng is not None else random.Random()
        self._reset_state()

    def _reset_state(self) -> None:
        self._board = np.zeros((self._height, self._width), dtype=np.int64)
        self._food: Optional[Pos] = self._random_pos()
        self._head: Pos = (self._height // 2, self._width // 2)
        self._dir: Optional[Direction] = None
        self._level = self._start_level
        self._outcome = TickOutcome.MOVED
        self._step_count = 0

        # seed tick: puts the head footprint on the board
        self.tick(None)
        self._step_count = 0

    def reset(self) -> None:
        """Start over with the starting level, keeping the same random source."""
        self._reset_state()

    def clone(self) -> "GameState":
        return copy.deepcopy(self)

    # ---- read-only views ----
    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def board(self) -> np.ndarray:
        view = self._board.view()
        view.flags.writeable = False
        return view

    @property
    def head(self) -> Pos:
        return self._head

    @property
    def food(self) -> Optional[Pos]:
        return self._food

    @property
    def direction(self) -> Optional[Direction]:
        return self._dir

    @property
    def level(self) -> int:
        return self._level

    @property
    def outcome(self) -> TickOutcome:
        return self._outcome

    @property
    def terminated(self) -> bool:
        return self._outcome.terminal

    @property
    def step_count(self) -> int:
        return self._step_count

    # ---- rules ----
    def tick(self, direction: Optional[Direction] = None) -> TickOutcome:
        """
        Advance one step. Order matters: turn, decay, move, collide, stamp head.
        Once COLLIDED or BOARD_FULL is returned the game is frozen.
        """
        if self.terminated:
            return self._outcome

        if direction is not None:
            self._set_direction(direction)

        np.maximum(self._board - 1, 0, out=self._board)

        self._head = step_position(self._head, self._dir, self._height, self._width)
        self._step_count += 1

        outcome = TickOutcome.MOVED
        if self._board[self._head] != 0 and self._dir is not None:
            outcome = TickOutcome.COLLIDED
        elif self._head == self._food:
            outcome = self._eat_food()

        self._board[self._head] = self._level
        self._outcome = outcome
        return outcome

    def _set_direction(self, direction: Direction) -> bool:
        """Apply the turn rule; a direct reversal is ignored. Returns whether it took."""
        if not isinstance(direction, Direction):
            raise TypeError(f"direction must be a Direction or None, got {direction!r}")
        if self._dir is not None and direction == self._dir.opposite:
            return False
        self._dir = direction
        return True

    def _eat_food(self) -> TickOutcome:
        self._level += 1
        self._food = self._random_food_pos()
        if self._food is None:
            return TickOutcome.BOARD_FULL
        return TickOutcome.ATE

    def _random_pos(self) -> Pos:
        return (self._rng.randrange(0, self._height), self._rng.randrange(0, self._width))

    def _random_food_pos(self) -> Optional[Pos]:
        # the head cell is still unstamped here, so it has to be excluded explicitly
        free = int(np.count_nonzero(self._board == 0))
        if self._board[self._head] == 0:
            free -= 1
        if free <= 0:
            return None
        while True:
            pos = self._random_pos()
            if self._board[pos] == 0 and pos != self._head:
                return pos

    # ---- output ----
    def snapshot(self) -> Snapshot:
        return Snapshot(
            board=self._board.copy(),
            head=self._head,
            food=self._food,
            direction=self._dir,
            level=self._level,
            step_count=self._step_count,
            outcome=self._outcome,
            terminated=self.terminated,
            grid_w=self._width,
            grid_h=self._height,
        )

    def render(self) -> str:
        return render_board(self._board, self._head, self._food)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (f"GameState({self._width}x{self._height}, head={self._head}, "
                f"food={self._food}, dir={self._dir}, level={self._level}, "
                f"outcome={self._outcome.value})")
