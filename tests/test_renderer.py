import math

import pytest

from circletasks.renderer import CircleRenderer, RefRenderer, lookup_color
from circletasks.scene import NUM_FIREWORKS, NUM_SPARKS, SceneName, read_particles


def _renderer(scene, size=16, **kwargs):
    renderer = RefRenderer(**kwargs)
    renderer.alloc_output_image(size, size)
    renderer.load_scene(scene)
    renderer.setup()
    return renderer


@pytest.fixture
def snow_file(tmp_path):
    path = tmp_path / "snow.par"
    path.write_text("1\n0.5 0.5 0.0   0.0 0.0 0.0   0.25\n")
    return path


def test_lookup_color_table_entries():
    assert lookup_color(0.0) == pytest.approx((1.0, 1.0, 1.0))
    assert lookup_color(0.5) == pytest.approx((0.8, 0.9, 1.0))
    assert lookup_color(1.0) == pytest.approx((0.8, 0.8, 1.0))


def test_lookup_color_stays_within_ramp():
    for step in range(101):
        r, g, b = lookup_color(step / 100)
        assert 0.8 - 1e-9 <= r <= 1.0 + 1e-9
        assert 0.8 - 1e-9 <= g <= 1.0 + 1e-9
        assert b == pytest.approx(1.0)


def test_ref_renderer_is_circle_renderer():
    renderer = _renderer(SceneName.CIRCLE_RGB)
    assert isinstance(renderer, CircleRenderer)
    assert (renderer.image.width, renderer.image.height) == (16, 16)
    assert renderer.scene.num_circles() == 3


def test_render_without_image_raises():
    renderer = RefRenderer()
    renderer.load_scene(SceneName.CIRCLE_RGB)
    with pytest.raises(RuntimeError):
        renderer.render()


def test_advance_without_scene_raises():
    renderer = RefRenderer()
    with pytest.raises(RuntimeError):
        renderer.advance_animation()


def test_clear_image_white():
    renderer = _renderer(SceneName.CIRCLE_RGB)
    renderer.image.data[:] = [0.0] * len(renderer.image.data)
    renderer.clear_image()
    assert set(renderer.image.data) == {1.0}


def test_clear_image_snow_ramp(snow_file):
    renderer = _renderer(SceneName.SNOWFLAKES_SINGLE_FRAME, size=8, particle_file=snow_file)
    renderer.clear_image()
    image = renderer.image
    assert image.pixel(0, 0) == pytest.approx((0.85, 0.85, 0.85, 1.0))
    shades = [image.pixel(0, y)[0] for y in range(image.height)]
    assert shades == sorted(shades, reverse=True)
    assert all(image.pixel(x, 3) == image.pixel(0, 3) for x in range(image.width))


def test_render_rgb_center_blends_all_circles():
    renderer = _renderer(SceneName.CIRCLE_RGB)
    renderer.clear_image()
    renderer.render()
    assert renderer.image.pixel(8, 8) == pytest.approx((0.25, 0.375, 0.625, 2.5))


def test_render_leaves_uncovered_pixel_white():
    renderer = _renderer(SceneName.CIRCLE_RGB)
    renderer.clear_image()
    renderer.render()
    assert renderer.image.pixel(0, 0) == (1.0, 1.0, 1.0, 1.0)


def test_shade_pixel_outside_circle_unchanged():
    renderer = _renderer(SceneName.CIRCLE_RGB)
    pixel = (0.1, 0.2, 0.3, 0.4)
    assert renderer.shade_pixel(0, 0.99, 0.99, 0.4, 0.5, 0.75, pixel) == pixel


def test_shade_pixel_inside_adds_half_alpha():
    renderer = _renderer(SceneName.CIRCLE_RGB)
    r, g, b, a = renderer.shade_pixel(1, 0.5, 0.5, 0.5, 0.5, 0.5, (1.0, 1.0, 1.0, 1.0))
    assert a == pytest.approx(1.5)
    assert g == pytest.approx(1.0)
    assert r == pytest.approx(b)
    assert r < 1.0


def test_render_snowflake_alpha_bounds(snow_file):
    renderer = _renderer(SceneName.SNOWFLAKES_SINGLE_FRAME, size=8, particle_file=snow_file)
    renderer.clear_image()
    corner_before = renderer.image.pixel(0, 0)
    renderer.render()
    alpha = renderer.image.pixel(4, 4)[3]
    assert 1.0 < alpha <= 1.5
    assert renderer.image.pixel(0, 0) == corner_before


def test_hypnosis_radii_stay_bounded():
    renderer = _renderer(SceneName.HYPNOSIS)
    before = list(renderer.scene.radius)
    renderer.advance_animation()
    for old, new in zip(before, renderer.scene.radius):
        if old > 0.5:
            assert new == pytest.approx(0.02)
        else:
            assert new == pytest.approx(old + 0.01)
    for _ in range(100):
        renderer.advance_animation()
    assert all(0.0 < r <= 0.52 for r in renderer.scene.radius)


def test_bouncing_balls_move_only_vertically():
    renderer = _renderer(SceneName.BOUNCING_BALLS)
    xs = [p[0] for p in renderer.scene.position]
    for _ in range(50):
        renderer.advance_animation()
    assert [p[0] for p in renderer.scene.position] == xs
    assert all(v[0] == 0.0 and v[2] == 0.0 for v in renderer.scene.velocity)


def test_fireworks_sparks_stay_near_center():
    renderer = _renderer(SceneName.FIREWORKS)
    for _ in range(200):
        renderer.advance_animation()
    scene = renderer.scene
    for i in range(NUM_FIREWORKS):
        cx, cy, _ = scene.position[i]
        for j in range(NUM_SPARKS):
            sx, sy, _ = scene.position[NUM_FIREWORKS + i * NUM_SPARKS + j]
            assert math.hypot(sx - cx, sy - cy) <= 0.25 + 1e-9


def test_dump_particles_round_trip(tmp_path):
    renderer = _renderer(SceneName.CIRCLE_RGB)
    path = tmp_path / "dump.par"
    renderer.dump_particles(path)
    assert path.read_text().splitlines()[0] == "3"
    loaded = read_particles(path)
    assert loaded.num_circles() == 3
    for got, want in zip(loaded.position, renderer.scene.position):
        assert got == pytest.approx(want, abs=1e-6)
    assert loaded.radius == pytest.approx(renderer.scene.radius, abs=1e-6)