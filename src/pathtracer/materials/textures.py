# materials/textures.py
import math
from typing import Union
import numpy as np
from pathtracer.core.vector import Color, Point3, Vector3
from pathtracer.core.uv import UV
from pathtracer.materials.noise import PerlinNoise

class Texture:
    """Base class for all textures."""
    def sample(self, uv: UV, p: Point3) -> Color:
        """Sample the texture at given UV coordinates and hit point."""
        raise NotImplementedError("sample() must be implemented by texture subclasses.")

def as_texture(value: Union[Color, Texture]) -> Texture:
    """Wraps a plain color in a SolidTexture; textures pass through."""
    if isinstance(value, Vector3):
        return SolidTexture(value)
    return value

class SolidTexture(Texture):
    """A solid color texture."""
    def __init__(self, color: Color):
        self.color = color

    def sample(self, uv: UV, p: Point3) -> Color:
        return self.color

class CheckerTexture(Texture):
    """
    A 3D checker pattern: the sign of sin(x)sin(y)sin(z) at the scaled hit
    point picks between the odd and even textures.
    """
    def __init__(self, odd: Union[Color, Texture], even: Union[Color, Texture],
                 scale: float = 10.0):
        self.odd = as_texture(odd)
        self.even = as_texture(even)
        self.scale = scale

    def sample(self, uv: UV, p: Point3) -> Color:
        s = self.scale
        sines = math.sin(s * p.x) * math.sin(s * p.y) * math.sin(s * p.z)
        if sines < 0:
            return self.odd.sample(uv, p)
        return self.even.sample(uv, p)

class NoiseTexture(Texture):
    """Marble-like grey pattern driven by Perlin turbulence."""
    def __init__(self, scale: float = 4.0, noise: PerlinNoise = None):
        self.scale = scale
        self.noise = noise if noise is not None else PerlinNoise()

    def sample(self, uv: UV, p: Point3) -> Color:
        value = 0.5 * (1 + math.sin(self.scale * p.z + 10 * self.noise.turbulence(p)))
        return Color(1.0, 1.0, 1.0) * value

class ImageTexture(Texture):
    """
    A texture over a (height, width, 3) array of RGB values in [0, 1], row 0
    at the top. Files are decoded by texture_loader.load_texture().
    """
    def __init__(self, data: np.ndarray = None):
        self.data = None
        self.width = 0
        self.height = 0
        if data is not None:
            self.data = np.asarray(data, dtype=np.float64)
            self.height, self.width = self.data.shape[:2]

    def sample(self, uv: UV, p: Point3) -> Color:
        # No image data: black
        if self.data is None or self.height <= 0:
            return Color(0.0, 0.0, 0.0)

        # Clamp to [0,1] and flip V to image coordinates
        u = min(max(uv.u, 0.0), 1.0)
        v = 1.0 - min(max(uv.v, 0.0), 1.0)

        # Convert to pixel coordinates
        x = min(int(u * self.width), self.width - 1)
        y = min(int(v * self.height), self.height - 1)

        r, g, b = self.data[y, x, :3].tolist()
        return Color(r, g, b)
