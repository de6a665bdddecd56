"""Drawing the stars of a galaxy onto a pygame surface."""

from __future__ import annotations

import math

import pygame

from galaxysim.galaxy import Galaxy


class RenderLayer:
    """Turns galaxy stars into screen points and draws them as single pixels.

    Star positions are scaled by the galaxy's length scale into view
    coordinates. ``view_size`` is the extent of that view; it defaults to the
    surface size, and when it differs the points are stretched to fit the
    surface, as a viewport does.
    """

    def __init__(self, surface: pygame.Surface, galaxy: Galaxy) -> None:
        self.surface = surface
        self.galaxy = galaxy
        self.stars: list[tuple[float, float]] = []
        self.color = pygame.Color(255, 255, 255)
        self.view_size: tuple[float, float] | None = None

    def build_stars(self) -> None:
        """Rebuild the point list from the galaxy's current star positions."""
        scale = self.galaxy.length_scale
        self.stars = [
            (star.position.x * scale, star.position.y * scale)
            for star in self.galaxy.stars
        ]

    def render_stars(self) -> None:
        """Plot every built point that falls on the surface."""
        width, height = self.surface.get_size()
        view_width, view_height = self.view_size or (width, height)
        scale_x = width / view_width if view_width else 0.0
        scale_y = height / view_height if view_height else 0.0

        with _locked(self.surface):
            for x, y in self.stars:
                if not (math.isfinite(x) and math.isfinite(y)):
                    continue
                px = math.floor(x * scale_x)
                py = math.floor(y * scale_y)
                if 0 <= px < width and 0 <= py < height:
                    self.surface.set_at((px, py), self.color)


class _locked:
    """Hold a surface lock for a batch of pixel writes."""

    def __init__(self, surface: pygame.Surface) -> None:
        self._surface = surface

    def __enter__(self) -> pygame.Surface:
        self._surface.lock()
        return self._surface

    def __exit__(self, *exc_info: object) -> None:
        self._surface.unlock()