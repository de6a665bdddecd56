import math

import pytest

from galaxysim.galaxy import Galaxy
from galaxysim.simulation import Simulation
from galaxysim.star import Star
from galaxysim.vec3 import Vec3, cross, unit_vector


def two_star_galaxy(first_pos, second_pos, masses=(1.0, 2.0)):
    galaxy = Galaxy(2, 1000.0, seed=1)
    galaxy.stars = [
        Star(0, first_pos, Vec3(), masses[0]),
        Star(1, second_pos, Vec3(), masses[1]),
    ]
    return galaxy


def test_defaults():
    sim = Simulation(Galaxy(1, 1000.0))
    assert sim.gravity_constant == 1.0
    assert sim.time_step == 0.00005


def test_forces_are_equal_and_opposite():
    galaxy = two_star_galaxy(Vec3(0.0, 0.0, 0.0), Vec3(1.0, 1.0, 0.0))
    Simulation(galaxy).update_forces()
    first, second = galaxy.stars
    assert first.force == -second.force


def test_force_points_towards_other_star():
    galaxy = two_star_galaxy(Vec3(0.2, 0.1, 0.0), Vec3(0.8, 0.4, 0.3))
    Simulation(galaxy).update_forces()
    first, second = galaxy.stars
    direction = unit_vector(second.position - first.position)
    assert cross(first.force, direction).length() == pytest.approx(0.0, abs=1e-12)
    assert first.force.x > 0


def test_softened_force_is_weaker_than_newtonian():
    galaxy = two_star_galaxy(Vec3(0.0, 0.0, 0.0), Vec3(0.5, 0.0, 0.0))
    sim = Simulation(galaxy)
    sim.update_forces()
    first, second = galaxy.stars
    newtonian = sim.gravity_constant * first.mass * second.mass / 0.25
    assert 0 < first.force.length() < newtonian


def test_coincident_stars_exert_no_force():
    galaxy = two_star_galaxy(Vec3(0.3, 0.3, 0.0), Vec3(0.3, 0.3, 0.0))
    Simulation(galaxy).update_forces()
    assert all(star.force == Vec3() for star in galaxy.stars)


def test_total_force_vanishes_for_random_galaxy():
    galaxy = Galaxy(30, 1000.0, seed=5)
    galaxy.init_stars()
    Simulation(galaxy).update_forces()
    total = Vec3()
    for star in galaxy.stars:
        total = total + star.force
    assert total.length() == pytest.approx(0.0, abs=1e-9)


def test_euler_without_force_moves_in_straight_line():
    galaxy = Galaxy(1, 1000.0)
    start = Vec3(0.5, 0.5, 0.0)
    velocity = Vec3(1.0, -2.0, 0.0)
    galaxy.stars = [Star(0, start, velocity, 1.0)]
    sim = Simulation(galaxy)
    sim.update_euler(0.016)
    star = galaxy.stars[0]
    assert star.velocity == velocity
    assert star.acceleration == Vec3()
    assert star.position == start + velocity * sim.time_step


def test_euler_applies_force_and_clears_it():
    galaxy = Galaxy(1, 1000.0)
    galaxy.stars = [Star(0, Vec3(), Vec3(), 2.0, force=Vec3(4.0, 0.0, 0.0))]
    sim = Simulation(galaxy)
    sim.update_euler(0.016)
    star = galaxy.stars[0]
    assert star.acceleration * 2.0 == Vec3(4.0, 0.0, 0.0)
    assert star.velocity.x > 0
    assert star.position.x > 0
    assert star.force == Vec3()


def test_euler_ignores_frame_time():
    results = []
    for delta in (0.001, 1.0):
        galaxy = two_star_galaxy(Vec3(0.0, 0.0, 0.0), Vec3(1.0, 0.0, 0.0))
        sim = Simulation(galaxy)
        sim.update_forces()
        sim.update_euler(delta)
        results.append([star.position for star in galaxy.stars])
    assert results[0] == results[1]


def test_time_step_controls_displacement():
    positions = []
    for step in (0.001, 0.002):
        galaxy = Galaxy(1, 1000.0)
        galaxy.stars = [Star(0, Vec3(), Vec3(1.0, 0.0, 0.0), 1.0)]
        sim = Simulation(galaxy)
        sim.time_step = step
        sim.update_euler(0.0)
        positions.append(galaxy.stars[0].position.x)
    assert positions[1] == pytest.approx(2 * positions[0])


def test_massless_star_gets_undefined_acceleration():
    galaxy = two_star_galaxy(Vec3(0.0, 0.0, 0.0), Vec3(1.0, 0.0, 0.0), masses=(0.0, 1.0))
    sim = Simulation(galaxy)
    sim.update_forces()
    sim.update_euler(0.0)
    massless, massive = galaxy.stars
    assert [math.isnan(component) for component in massless.acceleration] == [True, True, True]
    assert not math.isnan(massive.acceleration.x)


def test_reset_clears_galaxy():
    galaxy = Galaxy(10, 1000.0, seed=2)
    galaxy.init_stars()
    sim = Simulation(galaxy)
    sim.reset()
    assert galaxy.stars == []
    assert galaxy.num_stars == 0