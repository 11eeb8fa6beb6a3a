"""Graph model: grid, axes with rulers, and plotted points."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, NamedTuple

from .utils import f_toa, i_toa

WIN_HEIGHT = 600
WIN_WIDTH = 800

GRAPH_SCALE = 30
ORIGIN_X = GRAPH_SCALE * ((WIN_WIDTH // GRAPH_SCALE) // 2)
ORIGIN_Y = GRAPH_SCALE * ((WIN_HEIGHT // GRAPH_SCALE) // 2)

GRID_COLOR = (128, 128, 128, 255)
RULER_COLOR = (255, 0, 0, 255)
POINT_COLOR = (0, 0, 255, 255)
POINT_SIZE = 4


class Rect(NamedTuple):
    x: int
    y: int
    w: int
    h: int


class Label(NamedTuple):
    text: str
    x: int
    y: int


@dataclass
class Point:
    x: float
    y: float
    info: str


@dataclass
class Grid:
    scale: int

    def lines(self) -> list[Rect]:
        """Vertical then horizontal one-pixel grid lines."""
        vertical = [
            Rect(self.scale * step, 0, 1, WIN_HEIGHT)
            for step in range(1, WIN_WIDTH // self.scale + 1)
        ]
        horizontal = [
            Rect(0, self.scale * step, WIN_WIDTH, 1)
            for step in range(1, WIN_HEIGHT // self.scale + 1)
        ]
        return vertical + horizontal


@dataclass
class Graph:
    scale: int
    grid: Grid = field(init=False)
    points: list[Point] = field(default_factory=list)
    numbers: Any = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self.grid = Grid(self.scale)

    @property
    def _axis_x(self) -> int:
        return self.scale * ((WIN_WIDTH // self.scale) // 2)

    @property
    def _axis_y(self) -> int:
        return self.scale * ((WIN_HEIGHT // self.scale) // 2)

    def set_point(self, x: float, y: float) -> Point:
        """Add a point; coordinates are truncated to whole units."""
        ix, iy = int(x), int(y)
        point = Point(float(ix), float(iy), f"{f_toa(ix)},{f_toa(iy)}")
        self.points.append(point)
        return point

    def ruler_rects(self) -> list[Rect]:
        """The two axes followed by the tick marks along each."""
        n, k = self._axis_x, self._axis_y
        rects = [Rect(n, 0, 3, WIN_HEIGHT), Rect(0, k, WIN_WIDTH, 3)]
        rects += [
            Rect(self.scale * step, k, 2, 7)
            for step in range(1, WIN_WIDTH // self.scale + 1)
        ]
        rects += [
            Rect(n, WIN_HEIGHT - self.scale * step, 7, 2)
            for step in range(1, WIN_HEIGHT // self.scale + 1)
        ]
        return rects

    def ruler_labels(self) -> list[Label]:
        """Numbers written beside the ticks on both axes."""
        n, k = self._axis_x, self._axis_y
        labels: list[Label] = []

        half = (WIN_WIDTH // self.scale) // 2
        for step in range(1, WIN_WIDTH // self.scale + 1):
            x = self.scale * step
            if step != half:
                labels.append(Label(i_toa(step - half), x, k + 9))
            else:
                labels.append(Label(i_toa(0), x + 4, k + 5))

        half = (WIN_HEIGHT // self.scale) // 2
        for step in range(1, WIN_HEIGHT // self.scale + 1):
            if step != half:
                y = WIN_HEIGHT - self.scale * step
                labels.append(Label(i_toa(step - half), n + 9, y))
        return labels

    def point_rects(self) -> list[Rect]:
        """Screen squares for every plotted point."""
        return [
            Rect(
                int(ORIGIN_X + GRAPH_SCALE * point.x),
                int(ORIGIN_Y - GRAPH_SCALE * point.y),
                POINT_SIZE,
                POINT_SIZE,
            )
            for point in self.points
        ]


def screen_to_graph(mouse_x: int, mouse_y: int) -> tuple[float, float]:
    """Convert window pixel coordinates to graph units."""
    x = (mouse_x - ORIGIN_X) / GRAPH_SCALE
    y = (mouse_y - ORIGIN_Y) / -GRAPH_SCALE
    return x, y