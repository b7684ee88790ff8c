# viz/renderer_colors.py
BG = (15, 15, 15)
FOOD = (220, 70, 70)
HEAD = (60, 200, 90)
BODY = (40, 160, 70)
TAIL = (20, 60, 30)     # body colour for a cell about to expire
TEXT = (230, 230, 230)


def body_shade(timer: int, level: int):
    """Blend TAIL -> BODY by how much of the timer is left."""
    t = max(0.0, min(1.0, timer / max(1, level)))
    return tuple(int(a + (b - a) * t) for a, b in zip(TAIL, BODY))
