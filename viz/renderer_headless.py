# viz/renderer_headless.py
from __future__ import annotations
from typing import List
from config import AppConfig
from core.interfaces import Snapshot
from viz.render_iface import Renderer

class HeadlessRenderer(Renderer):
    """Keeps every drawn snapshot; for tests and dry runs."""
    def __init__(self):
        self.frames: List[Snapshot] = []
        self.cfg = None

    def open(self, cfg: AppConfig) -> None:
        self.cfg = cfg
        self.frames.clear()
    def draw(self, snap: Snapshot) -> None:
        self.frames.append(snap)
    def tick(self, fps: int) -> None:
        pass
    def close(self) -> None:
        pass
