"""Circle scenes: positions, velocities, colours and radii for the renderer.

Every scene except the single-frame snowflake scene is generated from a
fixed seed, so loading the same scene twice gives identical data.
"""

from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from os import PathLike

from .image import clamp

NUM_FIREWORKS = 15
NUM_SPARKS = 20

_RAND_MAX = 2147483647
_PI = 3.14159
_MIN_SNOW_RADIUS = 0.0075


class SceneName(Enum):
    """The scenes the renderer knows how to load."""

    CIRCLE_RGB = 0
    CIRCLE_RGBY = 1
    CIRCLE_TEST_10K = 2
    CIRCLE_TEST_100K = 3
    PATTERN = 4
    SNOWFLAKES = 5
    FIREWORKS = 6
    HYPNOSIS = 7
    BOUNCING_BALLS = 8
    SNOWFLAKES_SINGLE_FRAME = 9
    BIG_LITTLE = 10
    LITTLE_BIG = 11


Vec3 = list[float]


@dataclass
class Scene:
    """Per-circle data of a scene; ``position``, ``velocity`` and ``color`` hold [x, y, z] lists."""

    name: SceneName
    position: list[Vec3] = field(default_factory=list)
    velocity: list[Vec3] = field(default_factory=list)
    color: list[Vec3] = field(default_factory=list)
    radius: list[float] = field(default_factory=list)

    def num_circles(self) -> int:
        """Return the number of circles in the scene."""
        return len(self.radius)


class _Random:
    """Additive feedback generator with the seeding of the common C library ``rand``."""

    def __init__(self, seed: int = 0) -> None:
        seed = seed & 0xFFFFFFFF or 1
        state = [seed]
        for _ in range(1, 31):
            hi, lo = divmod(state[-1], 127773)
            word = 16807 * lo - 2836 * hi
            if word < 0:
                word += _RAND_MAX
            state.append(word)
        state.extend(state[0:3])
        self._state: deque[int] = deque(state, maxlen=34)
        for _ in range(310):
            self._step()

    def _step(self) -> int:
        value = (self._state[-31] + self._state[-3]) & 0xFFFFFFFF
        self._state.append(value)
        return value

    def rand(self) -> int:
        return self._step() >> 1

    def random_float(self) -> float:
        """Return a value between 0 and 1."""
        return self.rand() / _RAND_MAX


def _empty(name: SceneName, count: int) -> Scene:
    return Scene(
        name=name,
        position=[[0.0, 0.0, 0.0] for _ in range(count)],
        velocity=[[0.0, 0.0, 0.0] for _ in range(count)],
        color=[[0.0, 0.0, 0.0] for _ in range(count)],
        radius=[0.0] * count,
    )


def _circle_grid(scene: Scene, rng: _Random, start: int, count: int,
                 circle_radius: float, circle_color: tuple[float, float, float],
                 offset_x: float, offset_y: float) -> None:
    index = start
    for j in range(count):
        for i in range(count):
            scene.position[index] = [
                offset_x + 2.0 * circle_radius * i,
                offset_y + 2.0 * circle_radius * j,
                rng.random_float(),
            ]
            scene.color[index] = list(circle_color)
            scene.radius[index] = circle_radius
            index += 1


def _sorted_depths(rng: _Random, count: int) -> list[float]:
    return sorted((rng.random_float() for _ in range(count)), reverse=True)


def _random_color(rng: _Random, count: int) -> list[float]:
    if count <= 10000:
        return [0.1 + 0.9 * rng.random_float(),
                0.2 + 0.5 * rng.random_float(),
                0.5 + 0.5 * rng.random_float()]
    return [0.3 + 0.9 * rng.random_float(),
            0.1 + 0.9 * rng.random_float(),
            0.1 + 0.4 * rng.random_float()]


def _random_circles(scene: Scene, rng: _Random, fixed_radius: float | None) -> None:
    count = scene.num_circles()
    depths = _sorted_depths(rng, count)
    for i, depth in enumerate(depths):
        if fixed_radius is None:
            scene.radius[i] = 0.02 + 0.06 * rng.random_float()
        else:
            scene.radius[i] = fixed_radius
        x = rng.random_float()
        y = rng.random_float()
        scene.position[i] = [x, y, depth]
        scene.color[i] = _random_color(rng, count)


def _change_circles(scene: Scene, rng: _Random, start: int, count: int,
                    target_radius: float, center: float, spread: float) -> None:
    for i in range(start, start + count):
        scene.radius[i] = target_radius
        scene.position[i][0] = 0.9 - center + spread * rng.random_float()
        scene.position[i][1] = center + spread * rng.random_float()


def _snowflakes(rng: _Random) -> Scene:
    count = 100 * 1000
    scene = _empty(SceneName.SNOWFLAKES, count)
    # Most of the circles are far from the camera; farthest are drawn first.
    depths = sorted(
        (clamp((i / count) ** 0.1 + (-0.05 + 0.1 * rng.random_float()), 0.0, 1.0)
         for i in range(count)),
        reverse=True,
    )
    for i, depth in enumerate(depths):
        actual_size = 0.08 - 0.0075 + 0.015 * rng.random_float()
        radius = (1.0 - depth) * actual_size + depth * actual_size / 15.0
        if depth < 0.02:
            radius *= 3.0
        elif radius < _MIN_SNOW_RADIUS:
            radius = _MIN_SNOW_RADIUS
        scene.radius[i] = radius
        x = rng.random_float()
        y = 1.0 + radius + 2.0 * rng.random_float()
        scene.position[i] = [x, y, depth]
    return scene


def _bouncing_balls(rng: _Random) -> Scene:
    scene = _empty(SceneName.BOUNCING_BALLS, 10)
    for i in range(10):
        scene.radius[i] = 0.05
        x = rng.random_float()
        y = rng.random_float()
        z = rng.random_float()
        scene.position[i] = [x, y, z]
        color = [0.0, 0.0, 0.0]
        color[i % 3] = 1.0
        scene.color[i] = color
        scene.velocity[i] = [0.0, rng.random_float(), 0.0]
    return scene


def _hypnosis(rng: _Random) -> Scene:
    scene = _empty(SceneName.HYPNOSIS, 25)
    for i in range(25):
        scene.position[i] = [0.5, 0.5, 0.0]
        scene.radius[i] = 0.02 + i * 0.02
        r = rng.random_float()
        g = rng.random_float()
        b = rng.random_float()
        scene.color[i] = [r, g, b]
    return scene


def _fireworks(rng: _Random) -> Scene:
    scene = _empty(SceneName.FIREWORKS, NUM_FIREWORKS + NUM_FIREWORKS * NUM_SPARKS)
    for i in range(NUM_FIREWORKS):
        scene.radius[i] = 0.005
        scene.color[i] = [1.0, 1.0, 1.0]
        cx = rng.random_float()
        cy = rng.random_float()
        scene.position[i] = [cx, cy, 0.0]
        for j in range(NUM_SPARKS):
            spark = NUM_FIREWORKS + i * NUM_SPARKS + j
            scene.radius[spark] = 0.01
            color = [0.0, 0.0, 0.0]
            color[i % 3] = 1.0
            scene.color[spark] = color
            angle = (j * 2 * _PI) / NUM_SPARKS
            sin_a = math.sin(angle)
            cos_a = math.cos(angle)
            scene.position[spark] = [cx + cos_a * scene.radius[i],
                                     cy + sin_a * scene.radius[i], 0.0]
            scene.velocity[spark] = [cos_a / 5.0, sin_a / 5.0, 0.0]
    return scene


def _rgb() -> Scene:
    scene = _empty(SceneName.CIRCLE_RGB, 3)
    scene.radius = [0.3, 0.3, 0.3]
    scene.position = [[0.4, 0.5, 0.75], [0.5, 0.5, 0.5], [0.6, 0.5, 0.25]]
    scene.color = [[1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1.0]]
    return scene


def _rgby() -> Scene:
    scene = _empty(SceneName.CIRCLE_RGBY, 4)
    scene.radius = [0.19, 0.19, 0.25, 0.1]
    scene.position = [[0.25, 0.25, 0.75], [0.3, 0.3, 0.5],
                      [0.5, 0.5, 0.25], [0.2, 0.2, 0.9]]
    scene.color = [[1.0, 0.0, 0.0], [0.0, 1.0, 0.0],
                   [0.0, 0.0, 1.0], [1.0, 1.0, 0.0]]
    return scene


def _big_little(rng: _Random, name: SceneName, center: float) -> Scene:
    scene = _empty(name, 10 * 1000)
    _random_circles(scene, rng, 0.25)
    _change_circles(scene, rng, 9 * 1000, 1000, 0.05, center, 0.1)
    return scene


def _random_scene(rng: _Random, name: SceneName, count: int) -> Scene:
    scene = _empty(name, count)
    _random_circles(scene, rng, None)
    return scene


def _pattern(rng: _Random) -> Scene:
    count1, count2 = 16, 31
    scene = _empty(SceneName.PATTERN, count1 * count1 + count2 * count2)
    circle_radius = 0.5 * (1.0 / count1)
    _circle_grid(scene, rng, 0, count1, circle_radius, (1.0, 0.0, 0.0),
                 circle_radius, circle_radius)
    _circle_grid(scene, rng, count1 * count1, count2, circle_radius,
                 (1.0, 1.0, 0.0), 0.0, 0.0)
    return scene


def read_particles(path: str | PathLike[str]) -> Scene:
    """Read a particle file: a circle count, then per circle position, velocity and radius.

    Raises ValueError when the file does not hold that many circles.
    """
    with open(path, encoding="ascii") as fp:
        tokens = fp.read().split()
    if not tokens:
        raise ValueError("Error reading num circles data from scene file.")
    try:
        count = int(tokens[0])
    except ValueError:
        raise ValueError("Error reading num circles data from scene file.") from None
    if count < 0:
        raise ValueError(f"invalid circle count {count} in scene file")
    values = tokens[1:]
    if len(values) < 7 * count:
        raise ValueError("Error reading circle data from scene file.")
    scene = _empty(SceneName.SNOWFLAKES_SINGLE_FRAME, count)
    try:
        for i in range(count):
            px, py, pz, vx, vy, vz, rad = (float(v) for v in values[7 * i:7 * i + 7])
            scene.position[i] = [px, py, pz]
            scene.velocity[i] = [vx, vy, vz]
            scene.radius[i] = rad
    except ValueError:
        raise ValueError("Error reading circle data from scene file.") from None
    return scene


def load_scene(name: SceneName, particle_file: str | PathLike[str] = "snow.par") -> Scene:
    """Build the named scene; the single-frame snowflake scene is read from ``particle_file``."""
    name = SceneName(name)
    rng = _Random(0)
    if name is SceneName.SNOWFLAKES:
        scene = _snowflakes(rng)
    elif name is SceneName.BOUNCING_BALLS:
        scene = _bouncing_balls(rng)
    elif name is SceneName.HYPNOSIS:
        scene = _hypnosis(rng)
    elif name is SceneName.FIREWORKS:
        scene = _fireworks(rng)
    elif name is SceneName.SNOWFLAKES_SINGLE_FRAME:
        scene = read_particles(particle_file)
        print(f"Loaded data for {scene.num_circles()} circles from {particle_file}")
    elif name is SceneName.CIRCLE_RGB:
        scene = _rgb()
    elif name is SceneName.CIRCLE_RGBY:
        scene = _rgby()
    elif name is SceneName.BIG_LITTLE:
        scene = _big_little(rng, name, 0.85)
    elif name is SceneName.LITTLE_BIG:
        scene = _big_little(rng, name, 0.05)
    elif name is SceneName.CIRCLE_TEST_10K:
        scene = _random_scene(rng, name, 10 * 1000)
    elif name is SceneName.CIRCLE_TEST_100K:
        scene = _random_scene(rng, name, 100 * 1000)
    else:
        scene = _pattern(rng)
    print(f"Loaded scene with {scene.num_circles()} circles")
    return scene