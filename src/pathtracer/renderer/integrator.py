# renderer/integrator.py
from typing import Optional
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Color
from pathtracer.core.utils import INFINITY, T_EPSILON

BLACK = Color(0.0, 0.0, 0.0)
SKY_WHITE = Color(1.0, 1.0, 1.0)
SKY_BLUE = Color(0.5, 0.7, 1.0)

def background(ray: Ray) -> Color:
    """
    Sky gradient: white at the horizon blending to light blue overhead,
    driven by the y component of the normalized ray direction.
    """
    unit_direction = ray.direction.unit()
    t = 0.5 * (unit_direction.y + 1.0)
    return SKY_WHITE * (1.0 - t) + SKY_BLUE * t

def ray_color(ray: Ray, world, depth: int, rng,
              background_color: Optional[Color] = None) -> Color:
    """
    Radiance carried back along `ray`.

    The ray is followed through at most `depth` bounces; a path that runs out
    of bounces contributes black. Misses return the sky gradient, or
    `background_color` when one is given.
    """
    if depth <= 0:
        return BLACK

    rec = world.hit(ray, T_EPSILON, INFINITY)
    if rec is None:
        if background_color is not None:
            return background_color
        return background(ray)

    emitted = rec.material.emitted(rec.uv, rec.p)
    scatter = rec.material.scatter(ray, rec, rng)
    if scatter is None:
        return emitted

    attenuation, scattered = scatter
    return emitted + attenuation * ray_color(scattered, world, depth - 1, rng,
                                             background_color)
