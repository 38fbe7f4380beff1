"""Front-chain circle packing of values, each drawn as a circle of that area."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass, field
from typing import Optional, Sequence

INT_MAX = 2147483647
INT_MIN = -2147483648

# Largest finite single-precision float; start value for nearest search.
_FLT_MAX = 3.4028234663852886e38


@dataclass(eq=False)
class Circle:
    """A circle whose area equals ``size``.

    ``next`` and ``prev`` link the circle into the front chain while
    packing.
    """

    size: int
    num: int
    x: float = 0.0
    y: float = 0.0
    name: Optional[str] = None
    color: Optional[str] = None
    radius: float = field(init=False)
    next: Optional[Circle] = field(default=None, repr=False)
    prev: Optional[Circle] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self.radius = math.sqrt(self.size / math.pi)


@dataclass
class Bounds:
    """Bounding box grown to hold every circle placed so far."""

    min_x: float = float(INT_MAX)
    min_y: float = float(INT_MAX)
    max_x: float = float(INT_MIN)
    max_y: float = float(INT_MIN)

    def include(self, circle: Circle) -> None:
        self.min_x = min(circle.x - circle.radius, self.min_x)
        self.min_y = min(circle.y - circle.radius, self.min_y)
        self.max_x = max(circle.x + circle.radius, self.max_x)
        self.max_y = max(circle.y + circle.radius, self.max_y)


def hsv_to_rgb(h: float, s: float, v: float) -> tuple[int, int, int]:
    """Convert a colour to 0..256 RGB components, scaling each by 256."""

    def scale(value: float) -> int:
        return math.floor(value * 256)

    if s == 0.0:
        grey = scale(v)
        return (grey, grey, grey)

    sector = math.floor(h * 6)
    f = h * 6 - sector
    p = v * (1 - s)
    q = v * (1 - s * f)
    t = v * (1 - s * (1 - f))

    if sector == 0:
        rgb = (v, t, p)
    elif sector == 1:
        rgb = (q, v, p)
    elif sector == 2:
        rgb = (p, v, t)
    elif sector == 3:
        rgb = (p, q, v)
    elif sector == 4:
        rgb = (t, p, v)
    else:
        rgb = (v, p, q)
    r, g, b = rgb
    return (scale(r), scale(g), scale(b))


def distance(circle: Circle) -> float:
    """Distance of the circle's centre from the origin."""
    return math.sqrt(circle.x * circle.x + circle.y * circle.y)


def place(a: Circle, b: Circle, c: Circle) -> None:
    """Move ``c`` so that it touches both ``a`` and ``b``."""
    da = b.radius + c.radius
    db = a.radius + c.radius
    dx = b.x - a.x
    dy = b.y - a.y
    dc = math.sqrt(dx * dx + dy * dy)
    if dc > 0.0:
        cos = (db * db + dc * dc - da * da) / (2 * db * dc)
        cos = max(-1.0, min(1.0, cos))
        theta = math.acos(cos)
        along = cos * db
        h = math.sin(theta) * db
        dx /= dc
        dy /= dc
        c.x = a.x + along * dx + h * dy
        c.y = a.y + along * dy - h * dx
    else:
        c.x = a.x + db
        c.y = a.y


def intersects(a: Circle, b: Circle) -> bool:
    """True if the circles overlap by more than a small tolerance."""
    dx = b.x - a.x
    dy = b.y - a.y
    dr = a.radius + b.radius
    return dr * dr - 1e-6 > dx * dx + dy * dy


def _insert(a: Circle, b: Circle) -> None:
    c = a.next
    a.next = b
    b.prev = a
    b.next = c
    if c is not None:
        c.prev = b


def _splice(a: Circle, b: Circle) -> None:
    a.next = b
    b.prev = a


def _trace(debug: bool, message: str) -> None:
    if debug:
        print(message, file=sys.stderr)


def place_circles(circles: Sequence[Circle], bounds: Bounds, debug: bool = False) -> Circle:
    """Pack the circles in order around the origin.

    Every placed circle is added to ``bounds``. Returns a circle of the
    front chain, the closed ring of ``next`` links round the packing.
    """
    if not circles:
        raise ValueError("no circles to place")

    a = circles[0]
    a.x = -1 * a.radius
    bounds.include(a)
    if len(circles) == 1:
        return a

    b = circles[1]
    b.x = b.radius
    b.y = 0.0
    bounds.include(b)
    if len(circles) == 2:
        return a

    c = circles[2]
    place(a, b, c)
    bounds.include(c)
    if len(circles) == 3:
        return a

    a.next, a.prev = c, b
    b.next, b.prev = a, c
    c.next, c.prev = b, a
    b = c

    remaining = iter(circles[3:])
    skip = False
    current = next(remaining, None)
    while current is not None:
        c = current
        _trace(debug, f"Inserting node {c.num} ------------------------")

        if not skip:
            node = a
            nearest = node
            nearest_dist = _FLT_MAX
            while True:
                node_dist = distance(node)
                if node_dist < nearest_dist:
                    nearest_dist = node_dist
                    nearest = node
                node = node.next
                if node is a:
                    break
            _trace(debug, f"Node {nearest.num} is nearest to the origin")
            a = nearest
            b = nearest.next

        _trace(debug, f"Trying to place node {c.num} between nodes {a.num} and {b.num}")
        place(a, b, c)

        intersected = False
        j = b.next
        k = a.prev
        sj = b.radius
        sk = a.radius
        while True:
            if sj <= sk:
                _trace(debug, f"forw: testing intersection of nodes {c.num} and {j.num}")
                if intersects(j, c):
                    _trace(debug, f"Node {c.num} intersects with node {j.num}")
                    _splice(a, j)
                    b = j
                    skip = True
                    intersected = True
                    break
                sj += j.radius
                j = j.next
            else:
                _trace(debug, f"back: testing intersection of nodes {c.num} and {k.num}")
                if intersects(k, c):
                    _trace(debug, f"Node {c.num} intersects with node {k.num}")
                    _splice(k, b)
                    a = k
                    skip = True
                    intersected = True
                    break
                sk += k.radius
                k = k.prev
            if j is k.next:
                break

        if not intersected:
            _insert(a, c)
            b = c
            bounds.include(c)
            skip = False
            current = next(remaining, None)

    return a