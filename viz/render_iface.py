# viz/render_iface.py
from __future__ import annotations
from typing import Protocol
from core.interfaces import Snapshot
from config import AppConfig

class Renderer(Protocol):
    def open(self, cfg: AppConfig) -> None: ...
    def draw(self, snap: Snapshot) -> None: ...
    def tick(self, fps: int) -> None: ...
    def close(self) -> None: ...
