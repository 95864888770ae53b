# geometry/box.py
from typing import Optional
from pathtracer.core.vector import Vector3
from pathtracer.core.ray import Ray
from pathtracer.core.aabb import AABB
from pathtracer.geometry.hittable import Hittable, HitRecord
from pathtracer.geometry.rect import XYRect, XZRect, YZRect
from pathtracer.geometry.world import HittableList

class Box(Hittable):
    """
    Axis-aligned rectangular prism between corners p0 and p1, made of six
    rectangles sharing one material.
    """
    def __init__(self, p0: Vector3, p1: Vector3, material):
        self.box_min = Vector3(min(p0.x, p1.x), min(p0.y, p1.y), min(p0.z, p1.z))
        self.box_max = Vector3(max(p0.x, p1.x), max(p0.y, p1.y), max(p0.z, p1.z))
        self.material = material

        lo, hi = self.box_min, self.box_max
        self.sides = HittableList()
        self.sides.add(XYRect(lo.x, hi.x, lo.y, hi.y, hi.z, material))
        self.sides.add(XYRect(lo.x, hi.x, lo.y, hi.y, lo.z, material))
        self.sides.add(XZRect(lo.x, hi.x, lo.z, hi.z, hi.y, material))
        self.sides.add(XZRect(lo.x, hi.x, lo.z, hi.z, lo.y, material))
        self.sides.add(YZRect(lo.y, hi.y, lo.z, hi.z, hi.x, material))
        self.sides.add(YZRect(lo.y, hi.y, lo.z, hi.z, lo.x, material))

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        return self.sides.hit(ray, t_min, t_max)

    def bounding_box(self, time0: float = 0.0, time1: float = 0.0) -> AABB:
        return AABB(self.box_min, self.box_max)

    def __repr__(self) -> str:
        return f"Box({self.box_min}, {self.box_max})"
