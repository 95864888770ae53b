"""Tests for image assembly: per-row rendering, output conversion and PPM.

The scene is a red diffuse sphere filling a tiny 2x2 frame, small enough to
render in full inside a unit test.
"""

import io

import numpy as np
import pytest

from pathtracer.camera import Camera
from pathtracer.config import RenderSettings
from pathtracer.core.vector import Color, Vector3
from pathtracer.geometry import HittableList, Sphere
from pathtracer.materials import Lambertian
from pathtracer.renderer import Renderer, render_row, to_bytes, write_ppm
from pathtracer.renderer.tone_mapping import reinhard_tone_mapping


@pytest.fixture
def red_sphere_scene():
    world = HittableList([Sphere(Vector3(0.0, 0.0, 0.0), 1.0, Lambertian(Color(0.9, 0.1, 0.1)))])
    camera = Camera(Vector3(0.0, 0.0, 3.0), Vector3(0.0, 0.0, 0.0), Vector3(0.0, 1.0, 0.0),
                    20.0, 1.0)
    return world, camera


def tiny_settings(**overrides):
    values = dict(width=2, height=2, samples_per_pixel=1, max_depth=5, progress=False)
    values.update(overrides)
    return RenderSettings(**values)


class TestRender:
    def test_image_shape_and_color(self, red_sphere_scene):
        world, camera = red_sphere_scene
        image = Renderer(tiny_settings()).render(world, camera)
        assert image.shape == (2, 2, 3)
        # Every primary ray hits the sphere and bounces once into the sky
        assert np.all(image[:, :, 0] > image[:, :, 1])
        assert np.all(image > 0.0)

    def test_visible_sphere_changes_the_image(self, red_sphere_scene):
        world, camera = red_sphere_scene
        # Same material, placed behind the camera
        hidden = HittableList([Sphere(Vector3(0.0, 0.0, 10.0), 1.0, Lambertian(Color(0.9, 0.1, 0.1)))])
        settings = tiny_settings(seed=3)
        with_sphere = Renderer(settings).render(world, camera)
        sky_only = Renderer(settings).render(hidden, camera)
        # With nothing in view every pixel is sky: blue stays 1 across the gradient
        assert np.allclose(sky_only[:, :, 2], 1.0)
        assert not np.allclose(with_sphere, sky_only)
        renderer = Renderer(settings)
        assert not np.array_equal(renderer.to_image(with_sphere), renderer.to_image(sky_only))

    def test_same_seed_same_image(self, red_sphere_scene):
        world, camera = red_sphere_scene
        a = Renderer(tiny_settings(seed=11)).render(world, camera)
        b = Renderer(tiny_settings(seed=11)).render(world, camera)
        assert np.array_equal(a, b)

    def test_seed_changes_image(self, red_sphere_scene):
        world, camera = red_sphere_scene
        a = Renderer(tiny_settings(seed=1)).render(world, camera)
        b = Renderer(tiny_settings(seed=2)).render(world, camera)
        assert not np.array_equal(a, b)

    def test_worker_count_does_not_change_image(self, red_sphere_scene):
        world, camera = red_sphere_scene
        serial = Renderer(tiny_settings(workers=1)).render(world, camera)
        parallel = Renderer(tiny_settings(workers=2)).render(world, camera)
        assert np.array_equal(serial, parallel)

    def test_background_override(self):
        world = HittableList([Sphere(Vector3(0.0, 0.0, -50.0), 1.0, Lambertian(Color(1.0, 1.0, 1.0)))])
        camera = Camera(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, 1.0), Vector3(0.0, 1.0, 0.0),
                        20.0, 1.0)
        image = Renderer(tiny_settings()).render(world, camera, Color(0.2, 0.4, 0.6))
        assert np.allclose(image, [0.2, 0.4, 0.6])

    def test_empty_scene_rejected(self, red_sphere_scene):
        _, camera = red_sphere_scene
        with pytest.raises(ValueError):
            Renderer(tiny_settings()).render(HittableList(), camera)

    def test_render_row_matches_full_image(self, red_sphere_scene):
        world, camera = red_sphere_scene
        renderer = Renderer(tiny_settings(seed=5))
        image = renderer.render(world, camera)
        seeds = renderer.row_seeds()
        row = render_row(world, camera, renderer.settings, 1, seeds[1])
        assert np.allclose(row, image[1])


class TestOutput:
    def test_quantization(self):
        pixels = np.array([[[1.0, 0.25, 0.0], [np.nan, -1.0, 4.0]]])
        linear = to_bytes(pixels, gamma=1.0)
        assert linear.dtype == np.uint8
        assert linear.tolist() == [[[255, 64, 0], [0, 0, 255]]]
        corrected = to_bytes(pixels, gamma=2.0)
        assert corrected.tolist() == [[[255, 128, 0], [0, 0, 255]]]

    def test_bad_gamma(self):
        with pytest.raises(ValueError):
            to_bytes(np.zeros((1, 1, 3)), gamma=0.0)

    def test_reinhard_compresses_into_unit_range(self):
        out = reinhard_tone_mapping(np.array([[[0.0, 1.0, 100.0]]]))
        assert out[0, 0, 0] == 0.0
        assert out[0, 0, 1] == pytest.approx(0.5)
        assert 0.99 < out[0, 0, 2] < 1.0

    def test_ppm_layout(self):
        image = np.array([[[255, 0, 0], [0, 255, 0]],
                          [[0, 0, 255], [1, 2, 3]]], dtype=np.uint8)
        stream = io.StringIO()
        write_ppm(stream, image)
        assert stream.getvalue() == "P3\n2 2\n255\n255 0 0\n0 255 0\n0 0 255\n1 2 3\n"

    def test_ppm_rejects_wrong_shape(self):
        with pytest.raises(ValueError):
            write_ppm(io.StringIO(), np.zeros((2, 2), dtype=np.uint8))

    def test_render_to_ppm(self, red_sphere_scene):
        world, camera = red_sphere_scene
        stream = io.StringIO()
        image = Renderer(tiny_settings()).render_to_ppm(stream, world, camera)
        lines = stream.getvalue().splitlines()
        assert lines[:3] == ["P3", "2 2", "255"]
        assert len(lines) == 3 + 4
        first = [int(v) for v in lines[3].split()]
        assert first == image[0, 0].tolist()
        assert all(0 <= v <= 255 for v in first)
