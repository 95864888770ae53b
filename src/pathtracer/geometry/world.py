# src/geometry/world.py
import logging
import random
from typing import Iterable, List, Optional
from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.geometry.hittable import Hittable, HitRecord
from pathtracer.geometry.bvh import BVHNode

logger = logging.getLogger(__name__)

class HittableList(Hittable):
    """
    A list of Hittable objects. Hitting the list returns the nearest hit among
    its members. build_bvh() produces an acceleration tree over the same
    objects for rendering.
    """
    def __init__(self, objects: Iterable[Hittable] = ()):
        self.objects: List[Hittable] = list(objects)

    def add(self, obj: Hittable):
        self.objects.append(obj)

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self):
        return iter(self.objects)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        hit_record = None
        closest_so_far = t_max
        for obj in self.objects:
            rec = obj.hit(ray, t_min, closest_so_far)
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record

    def bounding_box(self, time0: float = 0.0, time1: float = 0.0) -> Optional[AABB]:
        if not self.objects:
            return None
        result = None
        for obj in self.objects:
            box = obj.bounding_box(time0, time1)
            if box is None:
                return None
            result = box if result is None else AABB.surrounding_box(result, box)
        return result

    def build_bvh(self, time0: float = 0.0, time1: float = 0.0, rng=None) -> BVHNode:
        """
        Builds a BVH over a copy of the objects; the list itself keeps its order.
        """
        if not self.objects:
            raise ValueError("Cannot build a BVH over an empty scene")
        if rng is None:
            rng = random.Random()
        working = list(self.objects)
        root = BVHNode(working, 0, len(working), time0, time1, rng)
        logger.debug("Built BVH over %d objects", len(working))
        return root
