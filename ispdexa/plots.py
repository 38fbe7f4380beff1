"""Data behind the result charts: usage series and the machine scatter plot."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence

DEFAULT_AXIS_UPPER = 5.0
SCATTER_MARGIN = 1.1


def _number(obj: Mapping[str, Any], key: str) -> float:
    value = obj.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0.0
    return float(value)


def _integer(obj: Mapping[str, Any], key: str) -> int:
    """The value as an int; a number with a fraction or a non-number is 0."""
    value = obj.get(key)
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return 0


def _entries(value: Any) -> list[Mapping[str, Any]]:
    if not isinstance(value, list):
        return []
    return [entry if isinstance(entry, dict) else {} for entry in value]


@dataclass
class Series:
    """One line of a usage chart with its HSL colour."""

    name: str
    xs: list[float]
    ys: list[float]
    hue: int
    saturation: int
    lightness: int


def computing_power_series(items: Sequence[Mapping[str, Any]]) -> list[Series]:
    """A series of (time, rate) points for each item's ``computing_power``.

    Hues are spread evenly round the colour wheel; saturation and
    lightness are picked at random.
    """
    entries = _entries(list(items))
    count = len(entries)
    series = []
    for index, item in enumerate(entries):
        points = _entries(item.get("computing_power"))
        label = item.get("label")
        series.append(
            Series(
                name=label if isinstance(label, str) else "",
                xs=[_number(point, "time") for point in points],
                ys=[_number(point, "rate") for point in points],
                hue=(index * 360) // count,
                saturation=random.randrange(150, 256),
                lightness=random.randrange(100, 201),
            )
        )
    return series


def scheme_color(scheme: int) -> tuple[int, int, int]:
    """HSV colour (hue, saturation, value) marking a scheme's machines."""
    product = scheme * 150
    hue = abs(product) % 360
    return (-hue if product < 0 else hue, 255, 255)


@dataclass
class ScatterPoint:
    machine_id: int
    mflops: float
    scheme: int
    color: tuple[int, int, int]


@dataclass
class ScatterPlot:
    """Machine performance points, coloured by scheme, with a legend."""

    points: list[ScatterPoint] = field(default_factory=list)
    legend: list[tuple[str, tuple[int, int, int]]] = field(default_factory=list)

    @property
    def x_range(self) -> tuple[float, float]:
        upper = max((p.machine_id for p in self.points), default=DEFAULT_AXIS_UPPER)
        return (0.0, float(upper) * SCATTER_MARGIN)

    @property
    def y_range(self) -> tuple[float, float]:
        upper = max((p.mflops for p in self.points), default=DEFAULT_AXIS_UPPER)
        return (0.0, float(upper) * SCATTER_MARGIN)


def scatter_points(data: Mapping[str, Any]) -> ScatterPlot:
    """Mflops against machine id for every machine of the results."""
    plot = ScatterPlot()
    colors: dict[int, tuple[int, int, int]] = {}
    for machine in _entries(data.get("machines")):
        scheme = _integer(machine, "scheme")
        color = colors.setdefault(scheme, scheme_color(scheme))
        plot.points.append(
            ScatterPoint(
                machine_id=_integer(machine, "id"),
                mflops=_number(machine, "Mflops"),
                scheme=scheme,
                color=color,
            )
        )
    plot.legend = [(f"Scheme {scheme}", colors[scheme]) for scheme in sorted(colors)]
    return plot