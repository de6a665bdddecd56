# galaxysim

A small gravitational N-body simulation of a disk galaxy. A pygame window
shows the result as it runs.

`Galaxy.init_stars` places the stars around the point (0.5, 0.5, 0). Their
distance from that point follows an exponential profile with length scale 0.3.
Their height follows an exponential profile with length scale 0.1. Each star
gets a random speed between 0 and 1, set by its angle. Each star also gets a
dimensionless mass between 0 and 0.999, in steps of 0.001.

Each frame does two things. First, `Simulation.update_forces` adds the pairwise
gravitational force to both stars of every pair. The force is
`G * m1 * m2 / (r² + 0.01)`, and `G` is `Simulation.gravity_constant`, which
defaults to 1. Second, `Simulation.update_euler` runs one explicit Euler step
and then clears the forces.

## Installing

```
pip install .
```

## Running

```
galaxysim
```

The window opens with the title "Maze Algorithms". It draws the stars as white
pixels in the right-hand 80% of the window, with each position scaled by the
galaxy's length scale of 1000. The left strip holds two panels:

- **Controls**: a **Test** button. Clicking it scatters a fresh set of stars.
- **Simulation Data**: the current frame rate.

The window can be resized. The simulation runs until the window is closed.

Options:

| Option | Meaning | Default |
| --- | --- | --- |
| `--stars N` | number of stars (0 or more) | 2000 |
| `--width W` | window width in pixels; the height is 80% of it | 1000 |
| `--fps F` | frame rate limit | 120 |
| `--seed S` | random seed for star generation | none |
| `--frames N` | stop after this many frames | run until closed |

Run `galaxysim --help` to see the same list.

## Using the library

```python
from galaxysim.galaxy import Galaxy
from galaxysim.simulation import Simulation

galaxy = Galaxy(num_stars=200, radius=1000, seed=42)
galaxy.init_stars()

simulation = Simulation(galaxy)
for _ in range(10):
    simulation.update_forces()
    simulation.update_euler(1 / 60)

print(galaxy.stars[0].position)
```

- `galaxysim.vec3` holds the immutable vector type `Vec3`. It supports `+`,
  `-`, `*` (by a number, or component-wise by a vector), `/` by a number,
  negation, indexing and iteration. The module also has `dot`, `cross`,
  `unit_vector` and `unit_normal`. `unit_vector` returns the zero vector for
  vectors shorter than 1e-8.
- `galaxysim.star.Star` is a dataclass that holds:
  - `star_id`
  - `position`
  - `velocity`
  - `mass`
  - `force`
  - `acceleration`
- `galaxysim.galaxy.Galaxy` holds the list `stars`, plus `num_stars`,
  `solar_mass` and `length_scale`. It also has the methods `init_stars()` and
  `reset()`. `reset()` removes every star and sets `num_stars` to 0.
- `galaxysim.simulation.Simulation` has `update_forces()`,
  `update_euler(delta_t)` and `reset()`.
- `galaxysim.render.RenderLayer` draws a galaxy onto a pygame surface, using
  `build_stars()` and `render_stars()`. It skips points that fall off the
  surface and points that are not finite.

## Things to know

- The Euler step always advances by `Simulation.time_step`, which defaults to
  0.00005. The `delta_t` given to `update_euler` is accepted but not used.
- The `radius` given to `Galaxy` is stored, but it does not affect where the
  stars are placed.
- A star can be given a mass of exactly 0. Its acceleration then becomes
  infinite or not-a-number, and from then on it is no longer drawn.
- The forces are summed directly over every pair of stars, so each frame's
  cost grows with the square of the star count.
- The simulation state cannot be saved or loaded.

## Tests

```
pip install .[test]
pytest
```