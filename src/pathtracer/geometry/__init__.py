from pathtracer.geometry.hittable import Hittable, HitRecord
from pathtracer.geometry.sphere import Sphere, MovingSphere
from pathtracer.geometry.rect import AxisAlignedRect, XYRect, XZRect, YZRect
from pathtracer.geometry.bvh import BVHNode
from pathtracer.geometry.world import HittableList
from pathtracer.geometry.box import Box

__all__ = [
    "Hittable", "HitRecord",
    "Sphere", "MovingSphere",
    "AxisAlignedRect", "XYRect", "XZRect", "YZRect",
    "Box", "BVHNode", "HittableList",
]
