"""Reading ``value_label`` lines and drawing them as packed circles in SVG."""

from __future__ import annotations

import math
import random
import re
from os import PathLike
from typing import Iterable, Optional, Sequence, Union

from ispdexa.packing import Bounds, Circle, hsv_to_rgb, place_circles

ULONG_MAX = 2**64 - 1
GOLDEN_RATIO_CONJUGATE = 0.618033988749895
SATURATION = 0.5
VALUE = 0.95
VIEWPORT_WIDTH = 640
VIEWPORT_HEIGHT = 480

_LEADING_NUMBER = re.compile(r"\s*([+-]?)(\d+)")


def _leading_unsigned(text: str) -> int:
    """The unsigned number at the start of ``text``, 0 if there is none."""
    match = _LEADING_NUMBER.match(text)
    if match is None:
        return 0
    value = int(match.group(2))
    if value > ULONG_MAX:
        return ULONG_MAX
    if match.group(1) == "-":
        value = (-value) % (ULONG_MAX + 1)
    return value


def _as_int32(value: int) -> int:
    return ((value + 2**31) % 2**32) - 2**31


def parse_values(lines: Iterable[str], hue: float) -> list[Circle]:
    """Turn ``value_label`` lines into circles, each with its own colour.

    Lines that are a single character or whose value is zero are skipped.
    Colours walk round the hue circle from ``hue`` by the golden ratio.
    """
    circles: list[Circle] = []
    for line in lines:
        if len(line) == 1:
            continue
        value = _leading_unsigned(line)
        if value in (0, ULONG_MAX):
            continue
        circle = Circle(value, len(circles))
        _, underscore, rest = line.partition("_")
        if underscore:
            circle.name = rest.split("\n", 1)[0]
        r, g, b = hsv_to_rgb(hue, SATURATION, VALUE)
        hue = math.fmod(hue + GOLDEN_RATIO_CONJUGATE, 1)
        circle.color = f"rgb({r:03d},{g:03d},{b:03d})"
        circles.append(circle)
    return circles


def render_svg(
    circles: Sequence[Circle],
    front: Optional[Circle],
    bounds: Bounds,
    debug: bool = False,
) -> str:
    """SVG drawing of packed circles, centred on the middle of ``bounds``.

    The circles are moved so that the packing is centred. With ``debug``
    the front chain starting at ``front`` is drawn as lines.
    """
    span_y = bounds.max_y + abs(bounds.min_y)
    span_x = bounds.max_x + abs(bounds.min_x)
    spacing = max(span_y, span_x) / 400.0
    height = span_y + 2 * spacing
    width = span_x + 2 * spacing
    stroke_width = (VIEWPORT_WIDTH // 400) * (width / VIEWPORT_WIDTH)

    parts = [
        f'<svg xmlns="http://www.w3.org/2000/svg" height="{VIEWPORT_HEIGHT}" '
        f'width="{VIEWPORT_WIDTH}" viewBox="0 0 {width:.5f} {height:.5f}" '
        'preserveAspectRatio="xMidYMid meet">\n',
        "<defs>\n",
        '<style type="text/css"><![CDATA[\n',
        f"  .circle_c {{ fill:#eee; stroke: #444; stroke-width: {stroke_width:.5f} }}\n",
        "  .text_c { text-anchor: middle; dominant-baseline: central; }\n",
        "]]></style>\n",
        "</defs>\n",
        f'<g transform="translate({width / 2.0:.5f},{height / 2.0:.5f})">\n',
    ]

    offset_x = (bounds.min_x + bounds.max_x) / 2.0
    offset_y = (bounds.min_y + bounds.max_y) / 2.0

    for circle in circles:
        circle.x -= offset_x
        circle.y -= offset_y
        name = circle.name or ""
        color = circle.color or ""
        parts.append(
            f"<g><title>{name} (num={_as_int32(circle.size)})</title>"
            f'<circle cx="{circle.x:.5f}" cy="{circle.y:.5f}" r="{circle.radius:.5f}" '
            f'style="fill:{color}" class="circle_c"/></g>\n'
        )
        font_size = circle.radius * 0.25
        text_y = circle.y + font_size * 0.35
        parts.append(
            f'<text x="{circle.x:.5f}" y="{text_y:.5f}" class="text_c" '
            f'style="font-size: {font_size:.5f}px; dominant-baseline: middle; '
            f'text-anchor: middle;">{name}</text>\n'
        )

    if debug and front is not None and front.next is not None:
        a = front
        b = front.next
        while True:
            parts.append(
                f'<line x1="{a.x:.5f}" y1="{a.y:.5f}" x2="{b.x:.5f}" y2="{b.y:.5f}" '
                f'style="stroke:black;stroke-width:{stroke_width:.1f};" />\n'
            )
            a = b
            b = b.next
            if b is front.next:
                break

    parts.append("</g>\n")
    parts.append("</svg>\n")
    return "".join(parts)


def pack_file(
    input_path: Union[str, PathLike],
    output_path: Union[str, PathLike],
    hue: Optional[float] = None,
) -> str:
    """Pack the values of ``input_path`` and write the drawing to ``output_path``.

    Without ``hue`` the first colour is chosen at random. Returns the SVG.
    """
    if hue is None:
        hue = random.random()
    with open(input_path, encoding="utf-8", newline="") as source:
        circles = parse_values(source, hue)
    bounds = Bounds()
    front = place_circles(circles, bounds)
    svg = render_svg(circles, front, bounds)
    with open(output_path, "w", encoding="utf-8") as target:
        target.write(svg)
    return svg