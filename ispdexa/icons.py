"""Geometry and selection state of the icons drawn on the editing table."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

ICON_WIDTH = 50
ICON_HEIGHT = 50
ICON_SELECTED_WIDTH = 60
ICON_SELECTED_HEIGHT = 60
BUTTON_WIDTH = 35
BUTTON_HEIGHT = 35

ICON_SIZE = (ICON_WIDTH, ICON_HEIGHT)
ICON_SELECTED_SIZE = (ICON_SELECTED_WIDTH, ICON_SELECTED_HEIGHT)
BUTTON_SIZE = (BUTTON_WIDTH, BUTTON_HEIGHT)

MACHINE_PATH = ":icons/pc.png"
MACHINE_PATH_SELECTED = ":icons/pcSelected.png"
SCHEMA_PATH = ":icons/cluster.png"
SCHEMA_PATH_SELECTED = ":icons/clusterSelected.png"
SWITCH_PATH = ":icons/switch.svg"
SWITCH_PATH_SELECTED = ":icons/switchSelected.png"

CLICK_DURATION = 200
"""Milliseconds; a press followed by a drag longer than this is not a click."""

LINK_COLOR = (9, 132, 227)
CHOSEN_LINK_COLOR = (245, 69, 55)
ARROW_SIZE = 5.0

Point = tuple[float, float]


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @staticmethod
    def from_corners(x1: float, y1: float, x2: float, y2: float) -> Rect:
        """Build a normalized rectangle spanning two opposite corners."""
        return Rect(min(x1, x2), min(y1, y2), abs(x2 - x1), abs(y2 - y1))

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def is_null(self) -> bool:
        return self.width == 0 and self.height == 0

    def _degenerate(self) -> bool:
        return self.width == 0 or self.height == 0

    def contains_point(self, x: float, y: float) -> bool:
        """True if the point lies inside or on the edge of the rectangle."""
        if self._degenerate():
            return False
        return self.x <= x <= self.right and self.y <= y <= self.bottom

    def contains_rect(self, other: Rect) -> bool:
        """True if ``other`` lies entirely within this rectangle."""
        if self._degenerate() or other._degenerate():
            return False
        return (
            other.x >= self.x
            and other.right <= self.right
            and other.y >= self.y
            and other.bottom <= self.bottom
        )

    def united(self, other: Rect) -> Rect:
        """Smallest rectangle holding both; a null rectangle adds nothing."""
        if self.is_null:
            return other
        if other.is_null:
            return self
        left = min(self.x, other.x)
        top = min(self.y, other.y)
        return Rect(left, top, max(self.right, other.right) - left, max(self.bottom, other.bottom) - top)

    def __or__(self, other: Rect) -> Rect:
        return self.united(other)


@dataclass(frozen=True)
class PixmapPair:
    """Image paths for the normal and the selected look of an icon."""

    normal: str
    selected: str
    size: tuple[int, int] = ICON_SIZE


class PixmapIcon:
    """A movable, selectable image standing for a connection on the table.

    The owner is expected to expose ``connected_links`` (a mapping of link
    ids to links with an ``icon``) and ``show_configuration()``.
    """

    def __init__(self, owner: Any, pixmap_pair: PixmapPair) -> None:
        self.owner = owner
        self.pixmap_pair = pixmap_pair
        self.x = 0.0
        self.y = 0.0
        self._chosen = False
        self._pressed = False
        self._interval = 0

    @property
    def chosen(self) -> bool:
        return self._chosen

    @property
    def pixmap(self) -> str:
        """Path of the image currently shown."""
        return self.pixmap_pair.selected if self._chosen else self.pixmap_pair.normal

    @property
    def size(self) -> tuple[int, int]:
        return self.pixmap_pair.size

    @property
    def pos(self) -> Point:
        return (self.x, self.y)

    def set_pos(self, x: float, y: float) -> None:
        self.x = float(x)
        self.y = float(y)

    def middle(self) -> Point:
        """Centre of the icon in scene coordinates."""
        width, height = self.size
        return (self.x + width / 2, self.y + height / 2)

    def scene_bounding_rect(self) -> Rect:
        width, height = self.size
        return Rect(self.x, self.y, width, height)

    def toggle_chosen(self) -> None:
        self._chosen = not self._chosen

    def press(self) -> None:
        """Begin a mouse press on the icon."""
        self._pressed = True

    def double_click(self) -> None:
        """Open the owner's configuration."""
        self.owner.show_configuration()

    def drag_to(self, x: float, y: float) -> None:
        """Move the icon while pressed; a drag is never counted as a click."""
        self._interval = CLICK_DURATION
        self.set_pos(x, y)
        self.update_position()

    def release(self) -> None:
        """End a press; a press without a drag toggles the selection."""
        if self._pressed and self._interval < CLICK_DURATION:
            self.toggle_chosen()
        self._interval = 0
        self._pressed = False

    def update_position(self) -> None:
        """Redraw every link attached to the owner."""
        for link in self.owner.connected_links.values():
            link.icon.update_positions()


@dataclass(frozen=True)
class Pen:
    color: tuple[int, int, int]
    width: float = 1.0
    cosmetic: bool = False


@dataclass(frozen=True)
class Shadow:
    color: tuple[int, int, int, int] = (0, 0, 0, 100)
    blur_radius: float = 4.0
    offset: float = 2.0


class LinkIcon:
    """The line, with an arrow head, drawn between two connection icons.

    The owner is expected to expose ``connections.begin`` and
    ``connections.end``, each carrying an ``icon``.
    """

    def __init__(self, owner: Any) -> None:
        self.owner = owner
        self.begin: PixmapIcon = owner.connections.begin.icon
        self.end: PixmapIcon = owner.connections.end.icon
        self.pen = Pen((0, 0, 0))
        self.shadow: Shadow | None = None
        self.polygon: tuple[Point, ...] = ()
        self.z_value = 0.0
        self._chosen = False

    @property
    def chosen(self) -> bool:
        return self._chosen

    def draw(self) -> None:
        """Style the line and lay it between the two icons."""
        self.pen = Pen(LINK_COLOR, 2.0, cosmetic=True)
        self.shadow = Shadow()
        self.update_positions()
        self.z_value = -1.0

    def update_positions(self) -> None:
        self.polygon = (self.begin.middle(), self.end.middle())

    def arrow_head(self) -> tuple[Point, Point, Point]:
        """The tip and the two back corners of the arrow at the line's end."""
        x1, y1 = self.begin.middle()
        x2, y2 = self.end.middle()
        dx, dy = x2 - x1, y2 - y1
        length = math.hypot(dx, dy)
        norm_dx, norm_dy = (dy / length, -dx / length) if length else (0.0, 0.0)
        angle = math.atan2(-norm_dy, norm_dx)
        corners = [
            (
                x2 - math.sin(angle + turn) * ARROW_SIZE,
                y2 - math.cos(angle + turn) * ARROW_SIZE,
            )
            for turn in (-math.pi / 3, math.pi / 3)
        ]
        return ((x2, y2), corners[0], corners[1])

    def scene_bounding_rect(self) -> Rect:
        if not self.polygon:
            return Rect()
        xs = [x for x, _ in self.polygon]
        ys = [y for _, y in self.polygon]
        half = self.pen.width / 2
        return Rect.from_corners(min(xs) - half, min(ys) - half, max(xs) + half, max(ys) + half)

    def toggle_chosen(self) -> None:
        self.pen = Pen(LINK_COLOR if self._chosen else CHOSEN_LINK_COLOR)
        self._chosen = not self._chosen

    def press(self) -> None:
        """A press on the line toggles its selection."""
        self.toggle_chosen()


def machine_icon(owner: Any) -> PixmapIcon:
    return PixmapIcon(owner, PixmapPair(MACHINE_PATH, MACHINE_PATH_SELECTED))


def schema_icon(owner: Any) -> PixmapIcon:
    return PixmapIcon(owner, PixmapPair(SCHEMA_PATH, SCHEMA_PATH_SELECTED))


def switch_icon(owner: Any) -> PixmapIcon:
    return PixmapIcon(owner, PixmapPair(SWITCH_PATH, SWITCH_PATH_SELECTED))