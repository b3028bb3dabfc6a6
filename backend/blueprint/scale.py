# blueprint/scale.py
"""Feet to pixel mappings for the blueprint canvas."""
import math
from typing import List, Tuple

from blueprint.constants import PADDING_FT


class Margin:
    def __init__(self, top: float = 50, right: float = 50, bottom: float = 100, left: float = 70):
        self.top, self.right, self.bottom, self.left = top, right, bottom, left

    def __repr__(self) -> str:
        return f"Margin(top={self.top}, right={self.right}, bottom={self.bottom}, left={self.left})"


DEFAULT_MARGIN = Margin()


class LinearScale:
    """Linear map from a domain interval onto a range interval."""

    def __init__(self, domain: Tuple[float, float], range_: Tuple[float, float]):
        d0, d1 = domain
        if d1 == d0:
            raise ValueError(f"Degenerate scale domain {domain!r}")
        self.domain = (float(d0), float(d1))
        self.range = (float(range_[0]), float(range_[1]))

    def __call__(self, value: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        return r0 + (value - d0) * (r1 - r0) / (d1 - d0)


def tick_step(start: float, stop: float, count: int) -> float:
    """Pick a 1/2/5 x 10^k step giving roughly `count` ticks over the span."""
    raw = abs(stop - start) / max(count, 1)
    if raw == 0:
        return 0.0
    power = math.floor(math.log10(raw))
    base = 10 ** power
    error = raw / base
    if error >= math.sqrt(50):
        factor = 10
    elif error >= math.sqrt(10):
        factor = 5
    elif error >= math.sqrt(2):
        factor = 2
    else:
        factor = 1
    return factor * base


def nice_ticks(start: float, stop: float, count: int = 10) -> List[float]:
    step = tick_step(start, stop, count)
    if step == 0:
        return [start]
    lo, hi = min(start, stop), max(start, stop)
    first = math.ceil(lo / step)
    last = math.floor(hi / step)
    return [round(i * step, 10) for i in range(first, last + 1)]


class BlueprintScale:
    """
    Uniform feet->pixel conversion for one layout and canvas width.

    The x-mapping covers the land plus PADDING_FT on each side. The y-axis
    reuses the x pixels-per-foot so a foot is square on screen, and has no
    offset: each floor group translates its own sub-tree.
    """

    def __init__(self, x: LinearScale, pixels_per_foot: float, margin: Margin):
        self.x = x
        self.pixels_per_foot = pixels_per_foot
        self.margin = margin

    @classmethod
    def for_land(cls, land, container_width: float, margin: Margin = DEFAULT_MARGIN) -> "BlueprintScale":
        if land.width <= 0:
            raise ValueError(f"Land width must be positive to scale a blueprint, got {land.width}")
        x = LinearScale(
            (-PADDING_FT, land.width + PADDING_FT),
            (margin.left, container_width - margin.right),
        )
        pixels_per_foot = (x(land.width) - x(0)) / land.width
        return cls(x, pixels_per_foot, margin)

    def y(self, feet: float) -> float:
        return feet * self.pixels_per_foot

    def span_x(self, start_ft: float, length_ft: float) -> float:
        """Pixel width as a difference of mapped edges, not length * scale."""
        return self.x(start_ft + length_ft) - self.x(start_ft)
