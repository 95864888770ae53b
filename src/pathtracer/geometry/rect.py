# geometry/rect.py
from typing import Optional
from pathtracer.core.vector import Vector3
from pathtracer.core.ray import Ray
from pathtracer.core.aabb import AABB
from pathtracer.core.uv import UV
from pathtracer.geometry.hittable import Hittable, HitRecord

# Half-thickness given to the box of a flat rectangle along its fixed axis.
# A zero-width box would make the BVH slab test reject every ray.
RECT_PADDING = 1e-4

_AXIS_NORMALS = (Vector3(1.0, 0.0, 0.0), Vector3(0.0, 1.0, 0.0), Vector3(0.0, 0.0, 1.0))

class AxisAlignedRect(Hittable):
    """
    Rectangle lying in the plane where coordinate `axis` equals k, spanning
    [a0, a1] along the first in-plane axis and [b0, b1] along the second.
    """
    axis = 2
    in_plane = (0, 1)

    def __init__(self, a0: float, a1: float, b0: float, b1: float, k: float, material):
        if a0 == a1 or b0 == b1:
            raise ValueError(f"{type(self).__name__} extents must not coincide")
        self.a0, self.a1 = min(a0, a1), max(a0, a1)
        self.b0, self.b1 = min(b0, b1), max(b0, b1)
        self.k = k
        self.material = material

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        d = ray.direction[self.axis]
        if d == 0:
            # Parallel to the plane.
            return None
        t = (self.k - ray.origin[self.axis]) / d
        if t < t_min or t > t_max:
            return None

        ia, ib = self.in_plane
        a = ray.origin[ia] + t * ray.direction[ia]
        b = ray.origin[ib] + t * ray.direction[ib]
        if a < self.a0 or a > self.a1 or b < self.b0 or b > self.b1:
            return None

        rec = HitRecord()
        rec.t = t
        rec.p = ray.at(t)
        rec.uv = UV((a - self.a0) / (self.a1 - self.a0),
                    (b - self.b0) / (self.b1 - self.b0))
        rec.set_face_normal(ray, _AXIS_NORMALS[self.axis])
        rec.material = self.material
        return rec

    def _point(self, a: float, b: float, k: float) -> Vector3:
        coords = [0.0, 0.0, 0.0]
        ia, ib = self.in_plane
        coords[ia] = a
        coords[ib] = b
        coords[self.axis] = k
        return Vector3(*coords)

    def bounding_box(self, time0: float = 0.0, time1: float = 0.0) -> AABB:
        return AABB(self._point(self.a0, self.b0, self.k - RECT_PADDING),
                    self._point(self.a1, self.b1, self.k + RECT_PADDING))

    def __repr__(self) -> str:
        return (f"{type(self).__name__}({self.a0}, {self.a1}, "
                f"{self.b0}, {self.b1}, k={self.k})")

class XYRect(AxisAlignedRect):
    """Rectangle in the plane z = k, spanning x in [x0, x1] and y in [y0, y1]."""
    axis = 2
    in_plane = (0, 1)

class XZRect(AxisAlignedRect):
    """Rectangle in the plane y = k, spanning x in [x0, x1] and z in [z0, z1]."""
    axis = 1
    in_plane = (0, 2)

class YZRect(AxisAlignedRect):
    """Rectangle in the plane x = k, spanning y in [y0, y1] and z in [z0, z1]."""
    axis = 0
    in_plane = (1, 2)
