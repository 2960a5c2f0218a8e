"""Reference circle renderer: blends semi-transparent circles into an RGBA image."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Sequence
from os import PathLike

from .image import Image, clamp
from .noise import vec2_cell_noise
from .scene import NUM_FIREWORKS, NUM_SPARKS, Scene, SceneName, load_scene

Pixel = tuple[float, float, float, float]

_COLOR_RAMP: tuple[tuple[float, float, float], ...] = (
    (1.0, 1.0, 1.0),
    (1.0, 1.0, 1.0),
    (0.8, 0.9, 1.0),
    (0.8, 0.9, 1.0),
    (0.8, 0.8, 1.0),
)

_SNOW_SCENES = (SceneName.SNOWFLAKES, SceneName.SNOWFLAKES_SINGLE_FRAME)
_DT = 1.0 / 60.0
_PI = 3.14159


def lookup_color(coord: float) -> tuple[float, float, float]:
    """Return the snowflake colour for a normalised distance from the centre.

    The colour is linearly interpolated in a five-entry ramp spanning [0, 1].
    """
    last = len(_COLOR_RAMP) - 1
    scaled = coord * last
    base = min(int(scaled), last)
    upper = min(base + 1, last)
    weight = scaled - base
    low, high = _COLOR_RAMP[base], _COLOR_RAMP[upper]
    r, g, b = ((1.0 - weight) * lo + weight * hi for lo, hi in zip(low, high))
    return (r, g, b)


class CircleRenderer(ABC):
    """A renderer that draws a loaded scene into its output image."""

    def __init__(self) -> None:
        self._image: Image | None = None
        self.scene: Scene | None = None

    @property
    def image(self) -> Image | None:
        """The image rendered into, or None before ``alloc_output_image``."""
        return self._image

    def alloc_output_image(self, width: int, height: int) -> None:
        """Replace the output image with a new one of the given size."""
        self._image = Image(width, height)

    @abstractmethod
    def load_scene(self, name: SceneName) -> None:
        """Load the circles of the named scene."""

    def setup(self) -> None:
        """Prepare for rendering once the image and scene are in place."""

    @abstractmethod
    def clear_image(self) -> None:
        """Reset the output image to the scene's background."""

    @abstractmethod
    def advance_animation(self) -> None:
        """Advance the simulation by one time step."""

    @abstractmethod
    def render(self) -> None:
        """Draw every circle of the scene into the output image."""


class RefRenderer(CircleRenderer):
    """Sequential renderer that draws circles in scene order."""

    def __init__(self, particle_file: str | PathLike[str] = "snow.par") -> None:
        super().__init__()
        self.particle_file = particle_file

    def _require_image(self) -> Image:
        if self._image is None:
            raise RuntimeError("no output image; call alloc_output_image first")
        return self._image

    def _require_scene(self) -> Scene:
        if self.scene is None:
            raise RuntimeError("no scene loaded; call load_scene first")
        return self.scene

    def load_scene(self, name: SceneName) -> None:
        self.scene = load_scene(SceneName(name), self.particle_file)

    def clear_image(self) -> None:
        """Clear to white, or to a vertical blue-grey ramp for snowflake scenes."""
        image = self._require_image()
        if self.scene is not None and self.scene.name in _SNOW_SCENES:
            width, height = image.width, image.height
            for row in range(height):
                shade = 0.4 + 0.45 * (height - row) / height
                start = 4 * row * width
                image.data[start:start + 4 * width] = [shade, shade, shade, 1.0] * width
        else:
            image.clear(1.0, 1.0, 1.0, 1.0)

    def advance_animation(self) -> None:
        scene = self._require_scene()
        if scene.name is SceneName.SNOWFLAKES:
            self._advance_snowflakes(scene)
        elif scene.name is SceneName.BOUNCING_BALLS:
            self._advance_bouncing_balls(scene)
        elif scene.name is SceneName.HYPNOSIS:
            self._advance_hypnosis(scene)
        elif scene.name is SceneName.FIREWORKS:
            self._advance_fireworks(scene)

    @staticmethod
    def _advance_snowflakes(scene: Scene) -> None:
        gravity = -1.8
        drag_coeff = 2.0
        for i, (pos, vel, rad) in enumerate(zip(scene.position, scene.velocity, scene.radius)):
            # Farther flakes move more slowly, giving an illusion of parallax.
            force_scaling = clamp(1.0 - pos[2], 0.1, 1.0)
            nx, ny = vec2_cell_noise((10.0 * pos[0], 10.0 * pos[1], 255.0 * pos[2]), i)
            nx *= 7.5
            ny *= 5.0
            drag_x = -drag_coeff * vel[0]
            drag_y = -drag_coeff * vel[1]

            pos[0] += vel[0] * _DT
            pos[1] += vel[1] * _DT
            pos[2] += vel[2] * _DT

            vel[0] += force_scaling * (nx + drag_x) * _DT
            vel[1] += force_scaling * (gravity + ny + drag_y) * _DT

            if pos[1] + rad < 0.0 or pos[0] + rad < 0.0 or pos[0] - rad > 1.0:
                nx, ny = vec2_cell_noise((255.0 * pos[0], 255.0 * pos[1], 255.0 * pos[2]), i)
                pos[0] = 0.5 + 0.5 * nx
                pos[1] = 1.35 + rad
                vel[0] = 2.0 * ny
                vel[1] = 0.0

    @staticmethod
    def _advance_bouncing_balls(scene: Scene) -> None:
        gravity = -2.8
        drag_coeff = -0.8
        epsilon = 0.001
        for pos, vel in zip(scene.position, scene.velocity):
            old_velocity = vel[1]
            old_position = pos[1]
            if old_velocity == 0.0 and old_position == 0.0:
                continue
            if pos[1] < 0 and old_velocity < 0.0:
                vel[1] *= drag_coeff
            vel[1] += gravity * _DT
            pos[1] += vel[1] * _DT
            if (abs(vel[1] - old_velocity) < epsilon and old_position < 0.0
                    and abs(pos[1] - old_position) < epsilon):
                vel[1] = 0.0
                pos[1] = 0.0

    @staticmethod
    def _advance_hypnosis(scene: Scene) -> None:
        cut_off = 0.5
        scene.radius[:] = [0.02 if r > cut_off else r + 0.01 for r in scene.radius]

    @staticmethod
    def _advance_fireworks(scene: Scene) -> None:
        max_dist = 0.25
        for i in range(NUM_FIREWORKS):
            center = scene.position[i]
            cx, cy = center[0], center[1]
            for j in range(NUM_SPARKS):
                spark = NUM_FIREWORKS + i * NUM_SPARKS + j
                pos = scene.position[spark]
                vel = scene.velocity[spark]
                pos[0] += vel[0] * _DT
                pos[1] += vel[1] * _DT
                if math.hypot(pos[0] - cx, pos[1] - cy) > max_dist:
                    angle = (j * 2 * _PI) / NUM_SPARKS
                    sin_a, cos_a = math.sin(angle), math.cos(angle)
                    scene.position[spark] = [cx + cos_a * scene.radius[i],
                                             cy + sin_a * scene.radius[i], 0.0]
                    scene.velocity[spark] = [cos_a / 5.0, sin_a / 5.0, 0.0]

    def shade_pixel(self, circle_index: int, pixel_center_x: float, pixel_center_y: float,
                    px: float, py: float, pz: float, pixel: Sequence[float]) -> Pixel:
        """Blend one circle into a pixel and return the new (r, g, b, a).

        Coordinates are normalised; the circle is sampled at the pixel centre.
        A pixel outside the circle is returned unchanged.
        """
        scene = self._require_scene()
        diff_x = px - pixel_center_x
        diff_y = py - pixel_center_y
        pixel_dist = diff_x * diff_x + diff_y * diff_y
        rad = scene.radius[circle_index]
        r, g, b, a = pixel
        if pixel_dist > rad * rad:
            return (r, g, b, a)

        if scene.name in _SNOW_SCENES:
            # Opacity falls off with distance; colour is radially symmetric.
            max_circle_alpha = 0.5
            falloff_scale = 4.0
            norm_dist = math.sqrt(pixel_dist) / rad
            col_r, col_g, col_b = lookup_color(norm_dist)
            max_alpha = max_circle_alpha * clamp(0.6 + 0.4 * (1.0 - pz), 0.0, 1.0)
            alpha = max_alpha * math.exp(-falloff_scale * norm_dist * norm_dist)
        else:
            col_r, col_g, col_b = scene.color[circle_index]
            alpha = 0.5

        keep = 1.0 - alpha
        return (alpha * col_r + keep * r,
                alpha * col_g + keep * g,
                alpha * col_b + keep * b,
                a + alpha)

    def render(self) -> None:
        image = self._require_image()
        scene = self._require_scene()
        width, height = image.width, image.height
        if width == 0 or height == 0:
            return
        inv_width = 1.0 / width
        inv_height = 1.0 / height
        data = image.data
        for index, (pos, rad) in enumerate(zip(scene.position, scene.radius)):
            px, py, pz = pos
            min_x = clamp(int((px - rad) * width), 0, width)
            max_x = clamp(int((px + rad) * width) + 1, 0, width)
            min_y = clamp(int((py - rad) * height), 0, height)
            max_y = clamp(int((py + rad) * height) + 1, 0, height)
            for y in range(min_y, max_y):
                center_y = inv_height * (y + 0.5)
                for x in range(min_x, max_x):
                    offset = 4 * (y * width + x)
                    data[offset:offset + 4] = self.shade_pixel(
                        index, inv_width * (x + 0.5), center_y, px, py, pz,
                        data[offset:offset + 4])

    def dump_particles(self, filename: str | PathLike[str]) -> None:
        """Write the circle count, then position, velocity and radius of each circle."""
        scene = self._require_scene()
        with open(filename, "w", encoding="ascii") as fp:
            fp.write(f"{scene.num_circles()}\n")
            for pos, vel, rad in zip(scene.position, scene.velocity, scene.radius):
                fp.write(f"{pos[0]:f} {pos[1]:f} {pos[2]:f}   "
                         f"{vel[0]:f} {vel[1]:f} {vel[2]:f}   {rad:f}\n")