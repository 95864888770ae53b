"""Unit tests for procedural and image textures."""

import math
import random

import numpy as np
import pytest
from PIL import Image

from pathtracer.core.uv import UV
from pathtracer.core.vector import Color, Vector3
from pathtracer.materials import (
    CheckerTexture, ImageTexture, Lambertian, NoiseTexture, SolidTexture,
)
from pathtracer.materials.noise import PerlinNoise
from pathtracer.materials.texture_loader import create_image_material, load_texture

ODD = Color(1.0, 0.0, 0.0)
EVEN = Color(0.0, 0.0, 1.0)
ORIGIN_UV = UV(0.0, 0.0)


class TestSolidTexture:
    def test_same_color_everywhere(self):
        texture = SolidTexture(Color(0.2, 0.4, 0.6))
        assert texture.sample(UV(0.9, 0.1), Vector3(5.0, -3.0, 2.0)) == Color(0.2, 0.4, 0.6)


class TestCheckerTexture:
    def test_sign_of_sines_picks_the_cell(self):
        checker = CheckerTexture(ODD, EVEN, scale=1.0)
        # sin(1)^3 > 0
        assert checker.sample(ORIGIN_UV, Vector3(1.0, 1.0, 1.0)) == EVEN
        # sin(-1) * sin(1)^2 < 0
        assert checker.sample(ORIGIN_UV, Vector3(-1.0, 1.0, 1.0)) == ODD

    def test_scale_changes_cell_size(self):
        checker = CheckerTexture(ODD, EVEN, scale=10.0)
        p = Vector3(0.2, 0.2, 0.2)
        # sin(2)^3 > 0
        assert checker.sample(ORIGIN_UV, p) == EVEN
        p = Vector3(0.4, 0.2, 0.2)
        # sin(4) < 0
        assert checker.sample(ORIGIN_UV, p) == ODD

    def test_nested_textures(self):
        inner = CheckerTexture(Color(0.0, 1.0, 0.0), EVEN, scale=1.0)
        checker = CheckerTexture(inner, EVEN, scale=1.0)
        assert checker.sample(ORIGIN_UV, Vector3(-1.0, 1.0, 1.0)) == Color(0.0, 1.0, 0.0)


class TestPerlinNoise:
    def test_zero_at_lattice_points(self):
        noise = PerlinNoise(random.Random(3))
        for p in (Vector3(0.0, 0.0, 0.0), Vector3(1.0, 2.0, 3.0), Vector3(-4.0, 7.0, -2.0)):
            assert noise.noise(p) == pytest.approx(0.0, abs=1e-12)

    def test_seeded_noise_is_repeatable(self):
        p = Vector3(0.3, 1.7, -2.2)
        a = PerlinNoise(random.Random(9))
        b = PerlinNoise(random.Random(9))
        assert a.noise(p) == b.noise(p)
        assert a.turbulence(p) == b.turbulence(p)

    def test_values_are_bounded(self):
        noise = PerlinNoise(random.Random(5))
        rng = random.Random(6)
        for _ in range(200):
            p = Vector3(rng.uniform(-10, 10), rng.uniform(-10, 10), rng.uniform(-10, 10))
            assert -2.0 <= noise.noise(p) <= 2.0
            assert noise.turbulence(p) >= 0.0

    def test_noise_texture_is_grey_in_unit_range(self):
        texture = NoiseTexture(4.0, PerlinNoise(random.Random(2)))
        color = texture.sample(ORIGIN_UV, Vector3(0.5, 0.25, 0.125))
        assert color.x == color.y == color.z
        assert 0.0 <= color.x <= 1.0

    def test_noise_texture_at_origin(self):
        # Turbulence vanishes on the lattice, leaving 0.5 * (1 + sin(0))
        texture = NoiseTexture(4.0, PerlinNoise(random.Random(2)))
        assert texture.sample(ORIGIN_UV, Vector3(0.0, 0.0, 0.0)).x == pytest.approx(0.5)


def make_image(tmp_path, name="texture.png"):
    # 2x2 image: red top-left, green top-right, blue bottom-left, white bottom-right
    pixels = np.array([[[255, 0, 0], [0, 255, 0]],
                       [[0, 0, 255], [255, 255, 255]]], dtype=np.uint8)
    path = tmp_path / name
    Image.fromarray(pixels, "RGB").save(path)
    return path


class TestImageTexture:
    def test_v_is_flipped(self, tmp_path):
        texture = load_texture(str(make_image(tmp_path)))
        assert texture.width == 2 and texture.height == 2
        assert texture.sample(UV(0.0, 1.0), Vector3.zero()) == Color(1.0, 0.0, 0.0)
        assert texture.sample(UV(0.99, 0.01), Vector3.zero()) == Color(1.0, 1.0, 1.0)
        assert texture.sample(UV(0.0, 0.0), Vector3.zero()) == Color(0.0, 0.0, 1.0)

    def test_uv_is_clamped(self, tmp_path):
        texture = load_texture(str(make_image(tmp_path)))
        assert texture.sample(UV(-3.0, 7.0), Vector3.zero()) == Color(1.0, 0.0, 0.0)
        assert texture.sample(UV(2.0, 1.0), Vector3.zero()) == Color(0.0, 1.0, 0.0)

    def test_array_data(self):
        data = np.full((4, 3, 3), 0.25)
        texture = ImageTexture(data=data)
        assert texture.sample(UV(0.5, 0.5), Vector3.zero()) == Color(0.25, 0.25, 0.25)

    def test_missing_data_is_black(self):
        assert ImageTexture().sample(UV(0.5, 0.5), Vector3.zero()) == Color(0.0, 0.0, 0.0)


class TestTextureLoader:
    def test_load_texture_normalizes_pixels(self, tmp_path):
        texture = load_texture(str(make_image(tmp_path)))
        assert isinstance(texture, ImageTexture)
        assert texture.data.shape == (2, 2, 3)
        assert texture.data.dtype == np.float64
        assert texture.data[1, 1].tolist() == [1.0, 1.0, 1.0]
        assert texture.data[0, 1].tolist() == [0.0, 1.0, 0.0]

    def test_grayscale_image_is_expanded_to_rgb(self, tmp_path):
        path = tmp_path / "grey.png"
        Image.fromarray(np.full((3, 2), 51, dtype=np.uint8), "L").save(path)
        texture = load_texture(str(path))
        assert texture.data.shape == (3, 2, 3)
        assert texture.sample(UV(0.5, 0.5), Vector3.zero()) == Color(0.2, 0.2, 0.2)

    def test_truncated_image(self, tmp_path):
        path = tmp_path / "broken.png"
        path.write_bytes(make_image(tmp_path).read_bytes()[:20])
        with pytest.raises(ValueError):
            load_texture(str(path))

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_texture(str(tmp_path / "nope.png"))

    def test_not_an_image(self, tmp_path):
        path = tmp_path / "notes.png"
        path.write_text("definitely not a png")
        with pytest.raises(ValueError):
            load_texture(str(path))

    def test_create_image_material(self, tmp_path):
        material = create_image_material(str(make_image(tmp_path)), Lambertian)
        assert isinstance(material, Lambertian)
        assert isinstance(material.texture, ImageTexture)
        assert not math.isnan(material.texture.sample(UV(0.5, 0.5), Vector3.zero()).x)
