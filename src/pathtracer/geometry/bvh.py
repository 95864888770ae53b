# src/geometry/bvh.py
from typing import Optional
from pathtracer.core.aabb import AABB
from pathtracer.geometry.hittable import Hittable

def _box_of(obj, time0: float, time1: float) -> AABB:
    box = obj.bounding_box(time0, time1)
    if box is None:
        raise ValueError(f"No bounding box for {obj!r} in BVHNode constructor")
    return box

class BVHNode(Hittable):
    """
    Binary bounding volume hierarchy node.

    Children are either primitives or further BVHNodes. The tree is built once
    from objects[start:end] (a working list that gets reordered in place) and
    is read-only afterwards. Split axis is picked at random per node and the
    objects are split at the median of their box minimum along that axis; no
    surface area heuristic is used.

    Node boxes are computed for the [time0, time1] window given at
    construction. Moving objects only stay inside them for rays cast in that
    window, so a different shutter interval needs a rebuilt tree.
    """
    def __init__(self, objects: list, start: int, end: int,
                 time0: float, time1: float, rng):
        object_span = end - start
        if object_span <= 0:
            raise ValueError("BVHNode needs at least one object")

        axis = rng.randint(0, 2)

        def key(obj):
            return _box_of(obj, time0, time1).minimum[axis]

        if object_span == 1:
            self.left = self.right = objects[start]
        elif object_span == 2:
            first, second = objects[start], objects[start + 1]
            if key(first) < key(second):
                self.left, self.right = first, second
            else:
                self.left, self.right = second, first
        else:
            objects[start:end] = sorted(objects[start:end], key=key)
            mid = start + object_span // 2
            self.left = BVHNode(objects, start, mid, time0, time1, rng)
            self.right = BVHNode(objects, mid, end, time0, time1, rng)

        self.is_leaf = object_span <= 2
        self.box = AABB.surrounding_box(_box_of(self.left, time0, time1),
                                        _box_of(self.right, time0, time1))

    def bounding_box(self, time0: float = 0.0, time1: float = 0.0) -> Optional[AABB]:
        return self.box

    def hit(self, ray, t_min: float, t_max: float):
        if not self.box.hit(ray, t_min, t_max):
            return None

        hit_left = self.left.hit(ray, t_min, t_max)

        # Anything on the right has to beat the left hit to matter. Children
        # are not spatially ordered, so the right side is always visited.
        if hit_left is not None:
            t_max = hit_left.t

        if self.right is self.left:
            return hit_left
        hit_right = self.right.hit(ray, t_min, t_max)

        # Return the closer hit
        if hit_left is not None and hit_right is not None:
            return hit_left if hit_left.t <= hit_right.t else hit_right
        return hit_left if hit_left is not None else hit_right

    def depth(self) -> int:
        child_depths = [c.depth() for c in (self.left, self.right) if isinstance(c, BVHNode)]
        return 1 + (max(child_depths) if child_depths else 0)

    def __repr__(self) -> str:
        return f"BVHNode(box={self.box}, leaf={self.is_leaf})"
