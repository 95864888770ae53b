# camera/camera.py
import math
from pathtracer.core.vector import Point3, Vector3
from pathtracer.core.ray import Ray
from pathtracer.core.utils import degrees_to_radians, random_in_unit_disk

class Camera:
    """
    Thin-lens camera looking from `look_from` toward `look_at`.

    vfov is the vertical field of view in degrees. A non-zero aperture gives
    depth of field around the plane at `focus_dist`; rays are stamped with a
    time drawn uniformly from the [time0, time1] shutter interval.
    """
    def __init__(self, look_from: Point3, look_at: Point3, vup: Vector3,
                 vfov: float, aspect_ratio: float, aperture: float = 0.0,
                 focus_dist: float = 1.0, time0: float = 0.0, time1: float = 0.0):
        self.look_from = look_from
        self.look_at = look_at
        self.vup = vup
        self.vfov = vfov
        self.aspect_ratio = aspect_ratio
        self.aperture = aperture  # Lens aperture for depth of field
        self.focus_dist = focus_dist  # Distance to focus plane
        self.lens_radius = aperture / 2.0
        self.time0 = time0
        self.time1 = time1
        self.update_camera()

    def update_camera(self):
        """Updates the camera's basis vectors and viewport."""
        view = self.look_from - self.look_at
        if view.near_zero():
            raise ValueError("Camera look_from and look_at must differ")
        self.w = view.unit()
        side = self.vup.cross(self.w)
        if side.near_zero():
            raise ValueError("Camera vup must not be parallel to the view direction")
        self.u = side.unit()
        self.v = self.w.cross(self.u)

        # Compute viewport dimensions based on fov
        h = math.tan(degrees_to_radians(self.vfov) / 2)
        viewport_height = 2.0 * h
        viewport_width = self.aspect_ratio * viewport_height

        # Scale by focus distance
        self.origin = self.look_from
        self.horizontal = self.u * (viewport_width * self.focus_dist)
        self.vertical = self.v * (viewport_height * self.focus_dist)
        self.lower_left_corner = (self.origin -
                                  self.horizontal * 0.5 -
                                  self.vertical * 0.5 -
                                  self.w * self.focus_dist)

    def get_ray(self, s: float, t: float, rng) -> Ray:
        """
        Generates the ray through viewport coordinates (s, t), both in [0, 1]
        with (0, 0) at the lower left.
        """
        if self.lens_radius > 0:
            rd = random_in_unit_disk(rng) * self.lens_radius
            offset = self.u * rd.x + self.v * rd.y
        else:
            offset = Vector3.zero()

        origin = self.origin + offset
        direction = (self.lower_left_corner +
                     self.horizontal * s +
                     self.vertical * t -
                     origin)
        if self.time1 > self.time0:
            time = rng.uniform(self.time0, self.time1)
        else:
            time = self.time0
        return Ray(origin, direction, time)
