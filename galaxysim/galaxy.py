"""A galaxy: a collection of stars bound by gravity."""

from __future__ import annotations

import math
import random

from galaxysim.star import Star
from galaxysim.vec3 import Vec3

_DISK_LENGTH_SCALE = 0.3
_HEIGHT_LENGTH_SCALE = 0.1
_CENTRE = Vec3(0.5, 0.5, 0.0)


class Galaxy:
    """Holds the stars and the scales used to make quantities dimensionless."""

    def __init__(self, num_stars: int, radius: float, seed: int | None = None) -> None:
        self.num_stars = num_stars
        self.radius = radius
        self.current_star_id = 0
        self.stars: list[Star] = []
        self.solar_mass = 2e30
        self.length_scale = 1000.0
        self._rng = random.Random(seed)

    def init_stars(self) -> None:
        """Replace the stars with a freshly sampled exponential disk."""
        self.stars = [self._sample_star(star_id) for star_id in range(self.num_stars)]

    def _sample_star(self, star_id: int) -> Star:
        rng = self._rng
        mass = 2e30 * rng.randrange(1000) / 1000 / self.solar_mass

        radial = -_DISK_LENGTH_SCALE * math.log(1 - rng.random())
        theta = 2 * math.pi * rng.random()
        height = -_HEIGHT_LENGTH_SCALE * math.log(1 - rng.random())
        position = Vec3(radial * math.cos(theta), radial * math.sin(theta), height)

        speed = rng.random()
        velocity = Vec3(-speed * math.cos(theta), speed * math.sin(theta), 0.0)
        return Star(star_id, position + _CENTRE, velocity, mass)

    def reset(self) -> None:
        """Remove every star."""
        self.stars.clear()
        self.current_star_id = 0
        self.num_stars = 0