# tests/conftest.py
import os
import sys

# Headless SDL so tests don't open a window
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

# Ensure project root is importable (so core.* imports work when running from repo root)
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import pygame as pg
import pytest


class ScriptedRandom:
    """RandomSource that replays fixed draws (cycling), checking each fits its range."""
    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def randrange(self, start, stop=None):
        if stop is None:
            start, stop = 0, start
        v = self.values[self.calls % len(self.values)]
        self.calls += 1
        assert start <= v < stop, f"scripted draw {v} outside [{start}, {stop})"
        return v


@pytest.fixture(scope="session", autouse=True)
def _pygame_session():
    pg.init()
    yield
    pg.quit()

@pytest.fixture
def screen():
    # Plain Surface is fine for draw/blit tests (no need for display mode)
    return pg.Surface((7 * 16, 7 * 16), 0, 32)

@pytest.fixture
def scripted():
    return ScriptedRandom

@pytest.fixture
def game_factory():
    from core.snake_rules import GameState
    def make(width=7, height=7, level=3, draws=(0, 0)):
        # default draws park the food in the top-left corner
        return GameState(width, height, level, rng=ScriptedRandom(draws))
    return make
