"""A single star and its physical state."""

from __future__ import annotations

from dataclasses import dataclass, field

from galaxysim.vec3 import Position3, Vec3


@dataclass
class Star:
    """A point mass with kinematic state and the net force acting on it."""

    star_id: int
    position: Position3
    velocity: Vec3
    mass: float
    force: Vec3 = field(default_factory=Vec3)
    acceleration: Vec3 = field(default_factory=Vec3)