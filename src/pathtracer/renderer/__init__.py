from pathtracer.renderer.integrator import background, ray_color
from pathtracer.renderer.raytracer import Renderer, render_row
from pathtracer.renderer.ppm import write_ppm
from pathtracer.renderer.tone_mapping import to_bytes, reinhard_tone_mapping

__all__ = [
    "background", "ray_color", "Renderer", "render_row",
    "write_ppm", "to_bytes", "reinhard_tone_mapping",
]
