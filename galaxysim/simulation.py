"""Direct-summation gravity and Euler integration over a galaxy."""

from __future__ import annotations

import math
from itertools import combinations

from galaxysim.galaxy import Galaxy
from galaxysim.vec3 import Vec3, unit_vector

_SOFTENING = 0.01


def _divide(force: Vec3, mass: float) -> Vec3:
    """Divide with floating-point semantics, so a massless star yields inf/nan."""
    if mass:
        return force / mass
    return Vec3(*(math.copysign(math.inf, c) if c else math.nan for c in force))


class Simulation:
    """Advances the stars of a galaxy under their mutual gravity."""

    def __init__(self, galaxy: Galaxy) -> None:
        self.galaxy = galaxy
        self.gravity_constant = 1.0
        self.time_step = 0.00005

    def update_forces(self) -> None:
        """Add the softened pairwise gravitational force to every star."""
        for star, other in combinations(self.galaxy.stars, 2):
            separation = other.position - star.position
            distance_squared = separation.length_squared()
            if distance_squared > 0:
                magnitude = (
                    self.gravity_constant * star.mass * other.mass
                ) / (distance_squared + _SOFTENING)
                force = magnitude * unit_vector(separation)
                star.force = star.force + force
                other.force = other.force - force

    def update_euler(self, delta_t: float) -> None:
        """Integrate one fixed time step; ``delta_t`` is accepted but the step is ``time_step``."""
        for star in self.galaxy.stars:
            star.acceleration = _divide(star.force, star.mass)
            star.velocity = star.velocity + star.acceleration * self.time_step
            star.position = star.position + star.velocity * self.time_step
            star.force = Vec3()

    def reset(self) -> None:
        self.galaxy.reset()