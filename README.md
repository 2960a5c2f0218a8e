# circletasks

A pure-Python reference renderer for scenes of semi-transparent circles. It
ships with a few small helpers:

* **Scenes** (`circletasks.scene`). Snowflakes, fireworks, bouncing balls,
  hypnosis rings, a grid pattern, RGB test scenes and random fields of 10,000
  or 100,000 circles. Every scene is generated from a fixed seed, so it comes
  out the same on every load.
* **Renderer** (`circletasks.renderer`). It blends circles into an RGBA image
  in scene order and advances the animated scenes one step at a time.
* **PPM output** (`circletasks.ppm`) for rendered images and for per-pixel
  iteration counts.
* **Cell noise** (`circletasks.noise`). This is the deterministic 2D noise
  that makes the snowflakes flutter.
* **Scan helpers** (`circletasks.scan`). Exclusive prefix sums and detection
  of adjacent repeated values.
* **Timer** (`circletasks.timer`). A nanosecond tick counter, plus a parser
  that reads the clock rate from `/proc/cpuinfo`-style text.
* **Threading tutorial** (`circletasks.tutorial`). It demonstrates a counter
  guarded by a lock and threads woken through a condition variable.

The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

Install the test extra to run the test suite:

```
pip install ".[test]"
pytest
```

## Rendering a scene

```python
from circletasks.renderer import RefRenderer
from circletasks.scene import SceneName
from circletasks.ppm import write_ppm_image

renderer = RefRenderer()
renderer.alloc_output_image(256, 256)
renderer.load_scene(SceneName.CIRCLE_RGB)
renderer.setup()

for frame in range(3):
    renderer.clear_image()
    renderer.advance_animation()
    renderer.render()
    write_ppm_image(renderer.image, f"rgb_{frame:04d}.ppm")
```

`clear_image` fills the image with white. In the two snowflake scenes it uses
a vertical blue-grey ramp instead.

`advance_animation` only moves the animated scenes: `SNOWFLAKES`,
`BOUNCING_BALLS`, `HYPNOSIS` and `FIREWORKS`. All other scenes stay still.

`render` draws every circle into `renderer.image`. Circles are taken in order,
so later circles are blended over earlier ones. Each circle is sampled at the
pixel centres.

`shade_pixel` blends one circle into one pixel and returns the new
`(r, g, b, a)`. `lookup_color(coord)` gives the snowflake colour ramp.

`dump_particles(filename)` writes the current positions, velocities and radii
as text. The `SNOWFLAKES_SINGLE_FRAME` scene reads its particles back from a
file in that format. By default the file is `snow.par` in the current
directory; pass `RefRenderer(particle_file=...)` to use another path.

All rendering is plain Python. The scenes with tens of thousands of circles
take a long time at large image sizes.

## Scenes without a renderer

```python
from circletasks.scene import SceneName, load_scene, read_particles

scene = load_scene(SceneName.FIREWORKS)
scene.num_circles()            # 315
scene.position[0], scene.radius[0]
```

`read_particles(path)` loads a particle file directly. It raises `ValueError`
when the file does not hold as many circles as its first line announces.

## Images and PPM files

`circletasks.image.Image` holds `width`, `height` and a flat `data` list of
floats, four per pixel. It provides `clear(r, g, b, a)` and `pixel(x, y)`.

`image_ppm_bytes(image)` and `write_ppm_image(image, filename)` encode an
image as binary PPM (P6). The top row comes first, channels are clamped to
[0, 1], and alpha is dropped.

`iteration_ppm_bytes(data, width, height, max_iterations)` and
`write_iteration_ppm(...)` turn iteration counts into a grey image.

## Scan helpers

```python
from circletasks.scan import exclusive_scan, exclusive_scan_tree, find_repeats

exclusive_scan([1, 2, 3, 4])       # [0, 1, 3, 6]
exclusive_scan_tree([1, 2, 3, 4])  # [0, 1, 3, 6]
find_repeats([1, 1, 2, 3, 3, 3])   # [0, 3, 4]
```

`exclusive_scan_tree` uses the up-sweep/down-sweep formulation. It raises
`ValueError` unless the length is a power of two or zero.

## Noise and timing

`vec2_cell_noise((x, y, z), index)` returns a pair of values in [-1, 1] for
the integer cell that contains the point. `noise_tables()` returns the
underlying permutation and value tables.

`current_seconds()`, `current_ticks()`, `seconds_per_tick()`,
`ticks_per_second()`, `ms_per_tick()` and `tick_units()` are built on a
nanosecond counter. `parse_cpuinfo(text)` returns the seconds per cycle
implied by a `model name ... @ X GHz` line or a `cpu MHz : X` line.

## Threading tutorial

```
circletasks-tutorial
```

This command runs `mutex_example()` and `condition_variable_example()`.

* `mutex_example()` starts eight threads that each add 10,000 to a shared
  `Counter`, and returns the final value.
* `condition_variable_example()` starts one signalling thread and two waiters,
  and returns the number of waiters that were woken.

## What the package does not do

The package has no task systems. Nothing here launches numbered tasks across a
thread pool or schedules launches that depend on one another.

Rendering is done from Python only. There is no command for rendering scenes,
no benchmark harness for timing frames or comparing two renderers' output,
and no interactive display window.