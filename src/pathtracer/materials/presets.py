# materials/presets.py
from pathtracer.core.vector import Color
from pathtracer.materials.metal import Metal
from pathtracer.materials.dielectric import Dielectric
from pathtracer.materials.diffuse_light import DiffuseLight
from pathtracer.materials.noise import PerlinNoise
from pathtracer.materials.textures import CheckerTexture, NoiseTexture

class MetalPresets:
    """Predefined metal materials."""

    @staticmethod
    def mirror() -> Metal:
        return Metal(Color(0.7, 0.6, 0.5), fuzz=0.0)

    @staticmethod
    def shiny() -> Metal:
        return Metal(Color(0.8, 0.8, 0.8), fuzz=0.3)

    @staticmethod
    def dull() -> Metal:
        return Metal(Color(0.8, 0.6, 0.2), fuzz=1.0)

class DielectricPresets:
    """Predefined dielectric materials with realistic refractive indices."""

    @staticmethod
    def glass() -> Dielectric:
        return Dielectric(1.5)

class LightPresets:
    """Predefined light sources with different intensities."""

    @staticmethod
    def white(intensity: float = 1.0) -> DiffuseLight:
        return DiffuseLight(Color(1.0, 1.0, 1.0) * intensity)

class ColorPresets:
    """Common colors used by the built-in scenes."""

    RED = Color(0.65, 0.05, 0.05)
    GREEN = Color(0.12, 0.45, 0.15)
    WHITE = Color(0.73, 0.73, 0.73)
    GROUND_YELLOW = Color(0.8, 0.8, 0.0)
    CHECKER_GREEN = Color(0.2, 0.3, 0.1)
    CHECKER_WHITE = Color(0.9, 0.9, 0.9)

class TexturePresets:
    """Predefined texture presets."""

    @staticmethod
    def checkerboard(odd: Color = None, even: Color = None, scale: float = 10.0) -> CheckerTexture:
        """Create a checker texture with default or custom colors."""
        if odd is None:
            odd = ColorPresets.CHECKER_GREEN
        if even is None:
            even = ColorPresets.CHECKER_WHITE
        return CheckerTexture(odd, even, scale)

    @staticmethod
    def marble(scale: float = 4.0, rng=None) -> NoiseTexture:
        """Create a marble texture driven by Perlin turbulence."""
        return NoiseTexture(scale, PerlinNoise(rng))
