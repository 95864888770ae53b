# scenes.py
import logging
import random
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional, Tuple
from pathtracer.camera.camera import Camera
from pathtracer.core.vector import Color, Point3, Vector3
from pathtracer.core.utils import random_vector
from pathtracer.geometry import Box, HittableList, MovingSphere, Sphere, XYRect, XZRect, YZRect
from pathtracer.materials import Dielectric, DiffuseLight, Lambertian, Metal
from pathtracer.materials.presets import (
    ColorPresets, DielectricPresets, LightPresets, MetalPresets, TexturePresets,
)

logger = logging.getLogger(__name__)

@dataclass
class CameraSettings:
    """Camera placement for a scene, turned into a Camera once the aspect is known."""
    look_from: Point3
    look_at: Point3
    vup: Vector3 = field(default_factory=lambda: Vector3(0.0, 1.0, 0.0))
    vfov: float = 20.0
    aperture: float = 0.0
    focus_dist: float = 10.0
    time0: float = 0.0
    time1: float = 0.0
    background: Optional[Color] = None

    def make_camera(self, aspect_ratio: float) -> Camera:
        return Camera(self.look_from, self.look_at, self.vup, self.vfov, aspect_ratio,
                      aperture=self.aperture, focus_dist=self.focus_dist,
                      time0=self.time0, time1=self.time1)

Scene = Tuple[HittableList, CameraSettings]

def simple_world(rng: random.Random = None) -> Scene:
    """A handful of spheres over a large ground sphere, lit by two panels."""
    world = HittableList()

    glass = DielectricPresets.glass()
    world.add(XYRect(-2.0, 0.0, 0.0, 1.0, 1.0, LightPresets.white(5.0)))
    world.add(XYRect(-2.0, 0.0, 0.0, 1.0, -2.0, LightPresets.white(1.0)))

    world.add(Sphere(Point3(0.0, 0.0, -1.0), 0.5, Lambertian(Color(0.7, 0.3, 0.3))))
    world.add(Sphere(Point3(0.0, -100.5, -1.0), 100.0, Lambertian(ColorPresets.GROUND_YELLOW)))
    world.add(Sphere(Point3(-1.0, 0.0, -1.0), 0.5, glass))
    # Negative radius: hollow glass bubble
    world.add(Sphere(Point3(-1.0, 0.0, -1.0), -0.4, glass))
    world.add(Sphere(Point3(1.0, 0.0, -1.0), 0.5, MetalPresets.dull()))
    world.add(Sphere(Point3(0.0, 1.0, -1.0), 0.5, MetalPresets.shiny()))

    camera = CameraSettings(look_from=Point3(-2.0, 2.0, 1.0), look_at=Point3(0.0, 0.0, -1.0),
                            vfov=50.0, focus_dist=3.4)
    return world, camera

def random_world(rng: random.Random = None) -> Scene:
    """
    The classic final scene: a checkered ground covered in small random
    spheres, some of them moving, around three large feature spheres.
    """
    if rng is None:
        rng = random.Random()
    world = HittableList()
    world.add(Sphere(Point3(0.0, -1000.0, 0.0), 1000.0,
                     Lambertian(TexturePresets.checkerboard())))

    bound = 11
    for a in range(-bound, bound):
        for b in range(-bound, bound):
            choose_mat = rng.random()
            center = Point3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())
            if (center - Point3(4.0, 0.2, 0.0)).length() <= 0.9:
                continue

            if choose_mat < 0.8:
                # diffuse, bouncing upward during the shutter interval
                albedo = random_vector(rng) * random_vector(rng)
                center1 = center + Vector3(0.0, rng.uniform(0.0, 0.5), 0.0)
                world.add(MovingSphere(center, center1, 0.0, 1.0, 0.2, Lambertian(albedo)))
            elif choose_mat < 0.95:
                albedo = random_vector(rng, 0.5, 1.0)
                world.add(Sphere(center, 0.2, Metal(albedo, rng.uniform(0.0, 0.5))))
            else:
                world.add(Sphere(center, 0.2, DielectricPresets.glass()))

    world.add(Sphere(Point3(0.0, 1.0, 0.0), 1.0, Dielectric(1.5)))
    world.add(Sphere(Point3(-4.0, 1.0, 0.0), 1.0, Lambertian(Color(0.4, 0.2, 0.1))))
    world.add(Sphere(Point3(4.0, 1.0, 0.0), 1.0, MetalPresets.mirror()))
    world.add(Sphere(Point3(0.0, 1.0, 2.0), 1.0,
                     Lambertian(TexturePresets.marble(4.0, rng))))
    world.add(XYRect(-4.0, 0.0, -2.0, 2.0, 2.0, LightPresets.white(1.0)))

    logger.debug("random_world generated %d objects", len(world))
    camera = CameraSettings(look_from=Point3(13.0, 2.0, 3.0), look_at=Point3(0.0, 0.0, 0.0),
                            vfov=20.0, aperture=0.1, focus_dist=10.0, time0=0.0, time1=1.0)
    return world, camera

def two_spheres(rng: random.Random = None) -> Scene:
    """Two large checkered spheres, one above the other."""
    checker = TexturePresets.checkerboard()
    world = HittableList([
        Sphere(Point3(0.0, -10.0, 0.0), 10.0, Lambertian(checker)),
        Sphere(Point3(0.0, 10.0, 0.0), 10.0, Lambertian(checker)),
    ])
    camera = CameraSettings(look_from=Point3(13.0, 2.0, 3.0), look_at=Point3(0.0, 0.0, 0.0),
                            vfov=20.0)
    return world, camera

def cornell_box(rng: random.Random = None) -> Scene:
    """Cornell box: red and green side walls, a ceiling light and two blocks."""
    red = Lambertian(ColorPresets.RED)
    white = Lambertian(ColorPresets.WHITE)
    green = Lambertian(ColorPresets.GREEN)
    light = DiffuseLight(Color(15.0, 15.0, 15.0))

    world = HittableList()
    world.add(YZRect(0, 555, 0, 555, 555, green))
    world.add(YZRect(0, 555, 0, 555, 0, red))
    world.add(XZRect(213, 343, 227, 332, 554, light))
    world.add(XZRect(0, 555, 0, 555, 0, white))
    world.add(XZRect(0, 555, 0, 555, 555, white))
    world.add(XYRect(0, 555, 0, 555, 555, white))
    world.add(Box(Point3(130, 0, 65), Point3(295, 165, 230), white))
    world.add(Box(Point3(265, 0, 295), Point3(430, 330, 460), white))

    camera = CameraSettings(look_from=Point3(278.0, 278.0, -800.0),
                            look_at=Point3(278.0, 278.0, 0.0),
                            vfov=40.0, background=Color(0.0, 0.0, 0.0))
    return world, camera

SCENES: Dict[str, Callable[..., Scene]] = {
    "simple": simple_world,
    "random": random_world,
    "two_spheres": two_spheres,
    "cornell": cornell_box,
}

def build_scene(name: str, rng: random.Random = None) -> Scene:
    try:
        factory = SCENES[name]
    except KeyError:
        raise ValueError(f"Unknown scene '{name}', expected one of {sorted(SCENES)}") from None
    return factory(rng)
