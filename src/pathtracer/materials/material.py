# materials/material.py
from typing import Optional, Tuple
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Color, Point3
from pathtracer.core.uv import UV
from pathtracer.geometry.hittable import HitRecord

BLACK = Color(0.0, 0.0, 0.0)

class Material:
    """
    Abstract material class. Subclasses must implement scatter().

    Materials hold read-only parameters and are shared between every
    primitive that uses them.
    """
    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Optional[Tuple[Color, Ray]]:
        """
        Computes the attenuation and the scattered ray.
        Returns a tuple (attenuation, scattered_ray) or None if the ray is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")

    def emitted(self, uv: UV, p: Point3) -> Color:
        """
        Light given off at the hit point. Non-emissive materials return black.
        """
        return BLACK
