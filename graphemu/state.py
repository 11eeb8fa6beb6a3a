"""Window, event loop and drawing of the graph."""

from __future__ import annotations

from dataclasses import dataclass, field

import pygame

from .font import Text
from .graph import (
    GRAPH_SCALE,
    GRID_COLOR,
    POINT_COLOR,
    RULER_COLOR,
    WIN_HEIGHT,
    WIN_WIDTH,
    Graph,
    screen_to_graph,
)

BACKGROUND = (255, 255, 255, 255)
FRAME_DELAY_MS = 200
DEFAULT_FONT = "res/dina.ttf"


def draw_graph(surface: pygame.Surface, graph: Graph) -> None:
    """Draw the grid, rulers with their numbers, and points of ``graph``."""
    for rect in graph.grid.lines():
        pygame.draw.rect(surface, GRID_COLOR, rect)
    for rect in graph.ruler_rects():
        pygame.draw.rect(surface, RULER_COLOR, rect)
    if graph.numbers is not None:
        for label in graph.ruler_labels():
            graph.numbers.draw(surface, label.text, label.x, label.y)
    for rect in graph.point_rects():
        pygame.draw.rect(surface, POINT_COLOR, rect)


@dataclass
class State:
    title: str
    width: int
    height: int
    font_path: str | None = DEFAULT_FONT
    graph: Graph = field(default_factory=lambda: Graph(GRAPH_SCALE))
    window: pygame.Surface | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        pygame.init()
        self.graph.numbers = Text(self.font_path, 15, (0, 0, 0))

    def __enter__(self) -> State:
        self.init()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def init(self) -> None:
        """Open the window."""
        self.window = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption(self.title)

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Process one event; return False when the program should stop."""
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.MOUSEBUTTONDOWN:
            mouse_x, mouse_y = event.pos
            x, y = screen_to_graph(mouse_x, mouse_y)
            self.graph.set_point(x, y)
            print(f"{mouse_x} - {mouse_y}    {x:.1f} - {y:.1f}\n")
        return True

    def draw(self) -> None:
        """Redraw the whole window."""
        if self.window is None:
            raise RuntimeError("window is not open; call init() first")
        self.window.fill(BACKGROUND)
        draw_graph(self.window, self.graph)
        pygame.display.flip()

    def update(self) -> None:
        """Run the event loop until the window is closed."""
        running = True
        while running:
            for event in pygame.event.get():
                if not self.handle_event(event):
                    running = False
            self.draw()
            pygame.time.delay(FRAME_DELAY_MS)

    def close(self) -> None:
        """Close the window and shut the display down."""
        self.window = None
        pygame.quit()


def main(argv: list[str] | None = None) -> int:
    state = State("Graph emulator", WIN_WIDTH, WIN_HEIGHT)
    state.init()
    try:
        state.update()
    finally:
        state.close()
    return 0