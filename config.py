# config.py
import random
from dataclasses import dataclass, replace
from typing import Optional

from core.interfaces import InvalidConfiguration
from core.snake_rules import GameState

@dataclass(frozen=True, slots=True)
class AppConfig:
    # board / rules
    grid_w: int = 7
    grid_h: int = 7
    start_len: int = 3
    seed: Optional[int] = None

    # drivers
    fps: int = 8

    # render
    render_cell: int = 48
    render_title: str = "Snake"
    render_show_hud: bool = True

    # logging
    log_csv: Optional[str] = None   # per-tick CSV, off when None

    def with_(self, **kwargs) -> "AppConfig":
        """Convenience: clone with updated values"""
        return replace(self, **kwargs)

    def validate(self) -> "AppConfig":
        for name in ("grid_w", "grid_h", "start_len", "fps", "render_cell"):
            v = getattr(self, name)
            if isinstance(v, bool) or not isinstance(v, int) or v < 1:
                raise InvalidConfiguration(f"{name} must be a positive integer, got {v!r}")
        return self

    def make_game(self) -> GameState:
        self.validate()
        return GameState(self.grid_w, self.grid_h, self.start_len, rng=random.Random(self.seed))
