"""Text rendering with a fixed font and colour."""

from __future__ import annotations

from dataclasses import dataclass, field

import pygame


@dataclass
class Text:
    font_path: str | None
    size: int
    color: tuple[int, int, int]
    font: pygame.font.Font = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if not pygame.font.get_init():
            pygame.font.init()
        self.font = pygame.font.Font(self.font_path, self.size)

    def render(self, string: str) -> pygame.Surface:
        """Render ``string`` without anti-aliasing."""
        return self.font.render(string, False, self.color)

    def draw(self, surface: pygame.Surface, string: str, x: int, y: int) -> pygame.Rect:
        """Render ``string`` onto ``surface`` with its top-left corner at (x, y)."""
        rendered = self.render(string)
        return surface.blit(rendered, (x, y))