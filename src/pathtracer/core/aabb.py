# src/core/aabb.py
from pathtracer.core.vector import Vector3

class AABB:
    """
    Axis-aligned bounding box given by its minimum and maximum corners.
    """
    __slots__ = ("minimum", "maximum")

    def __init__(self, minimum: Vector3, maximum: Vector3):
        self.minimum = minimum
        self.maximum = maximum

    def hit(self, ray, t_min: float, t_max: float) -> bool:
        # Slab method: for each axis, find intersection intervals.
        # Zero direction components have an infinite reciprocal; a NaN bound
        # (origin exactly on the slab plane) fails both comparisons below and
        # leaves the interval as it was.
        inv_direction = ray.inverse_direction
        for a in range(3):
            invD = inv_direction[a]
            origin = ray.origin[a]
            t0 = (self.minimum[a] - origin) * invD
            t1 = (self.maximum[a] - origin) * invD
            if invD < 0:
                t0, t1 = t1, t0
            t_min = t0 if t0 > t_min else t_min
            t_max = t1 if t1 < t_max else t_max
            if t_max <= t_min:
                return False
        return True

    def merge(self, other: "AABB") -> "AABB":
        return AABB.surrounding_box(self, other)

    def is_close(self, other: "AABB", tol: float = 1e-9) -> bool:
        return (self.minimum.is_close(other.minimum, tol) and
                self.maximum.is_close(other.maximum, tol))

    @staticmethod
    def surrounding_box(box0: "AABB", box1: "AABB") -> "AABB":
        small = Vector3(
            min(box0.minimum.x, box1.minimum.x),
            min(box0.minimum.y, box1.minimum.y),
            min(box0.minimum.z, box1.minimum.z)
        )
        big = Vector3(
            max(box0.maximum.x, box1.maximum.x),
            max(box0.maximum.y, box1.maximum.y),
            max(box0.maximum.z, box1.maximum.z)
        )
        return AABB(small, big)

    def __getstate__(self):
        return (self.minimum, self.maximum)

    def __setstate__(self, state):
        self.minimum, self.maximum = state

    def __repr__(self) -> str:
        return f"AABB({self.minimum}, {self.maximum})"
