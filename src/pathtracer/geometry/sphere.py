# geometry/sphere.py
import math
from typing import Optional
from pathtracer.core.vector import Vector3
from pathtracer.core.ray import Ray
from pathtracer.core.aabb import AABB
from pathtracer.core.uv import sphere_uv
from pathtracer.geometry.hittable import Hittable, HitRecord

def _solve_sphere(ray: Ray, center: Vector3, radius: float,
                  t_min: float, t_max: float) -> Optional[float]:
    oc = ray.origin - center
    a = ray.direction.length_squared()
    half_b = oc.dot(ray.direction)
    c = oc.length_squared() - radius * radius
    discriminant = half_b * half_b - a * c

    if discriminant < 0:
        return None

    sqrt_disc = math.sqrt(discriminant)
    # Find the nearest root that lies in the acceptable range
    root = (-half_b - sqrt_disc) / a
    if root < t_min or root > t_max:
        root = (-half_b + sqrt_disc) / a
        if root < t_min or root > t_max:
            return None
    return root

def _sphere_record(ray: Ray, root: float, center: Vector3, radius: float,
                   material) -> HitRecord:
    rec = HitRecord()
    rec.t = root
    rec.p = ray.at(root)
    # Dividing by a negative radius turns the normal inward (hollow spheres).
    outward_normal = (rec.p - center) / radius
    rec.set_face_normal(ray, outward_normal)
    rec.uv = sphere_uv((rec.p - center) / abs(radius))
    rec.material = material
    return rec

class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.

    A negative radius keeps the geometry but flips the normals, which is how
    a hollow glass bubble is modelled.
    """
    def __init__(self, center: Vector3, radius: float, material):
        if radius == 0:
            raise ValueError("Sphere radius must be non-zero")
        self.center = center
        self.radius = radius
        self.material = material

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        root = _solve_sphere(ray, self.center, self.radius, t_min, t_max)
        if root is None:
            return None
        return _sphere_record(ray, root, self.center, self.radius, self.material)

    def bounding_box(self, time0: float = 0.0, time1: float = 0.0) -> AABB:
        # The bounding box of a sphere is center ± radius
        r = abs(self.radius)
        offset = Vector3(r, r, r)
        return AABB(self.center - offset, self.center + offset)

    def __repr__(self) -> str:
        return f"Sphere(center={self.center}, radius={self.radius})"

class MovingSphere(Hittable):
    """
    A sphere whose center moves linearly from center0 at time0 to center1 at
    time1. Rays cast outside that interval never hit it.
    """
    def __init__(self, center0: Vector3, center1: Vector3,
                 time0: float, time1: float, radius: float, material):
        if radius == 0:
            raise ValueError("Sphere radius must be non-zero")
        if time1 == time0:
            raise ValueError("MovingSphere needs a non-empty time interval")
        self.center0 = center0
        self.center1 = center1
        self.time0 = time0
        self.time1 = time1
        self.radius = radius
        self.material = material

    def center(self, time: float) -> Vector3:
        fraction = (time - self.time0) / (self.time1 - self.time0)
        return self.center0 + (self.center1 - self.center0) * fraction

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        lo, hi = min(self.time0, self.time1), max(self.time0, self.time1)
        if ray.time < lo or ray.time > hi:
            return None

        center = self.center(ray.time)
        root = _solve_sphere(ray, center, self.radius, t_min, t_max)
        if root is None:
            return None
        return _sphere_record(ray, root, center, self.radius, self.material)

    def bounding_box(self, time0: float = 0.0, time1: float = 0.0) -> AABB:
        r = abs(self.radius)
        offset = Vector3(r, r, r)
        start = self.center(time0)
        end = self.center(time1)
        box0 = AABB(start - offset, start + offset)
        box1 = AABB(end - offset, end + offset)
        return AABB.surrounding_box(box0, box1)

    def __repr__(self) -> str:
        return (f"MovingSphere({self.center0} -> {self.center1}, "
                f"t=[{self.time0}, {self.time1}], radius={self.radius})")
