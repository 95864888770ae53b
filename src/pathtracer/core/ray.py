# core/ray.py
import math
from pathtracer.core.vector import Vector3

def _reciprocal(d: float) -> float:
    # IEEE-754 semantics: 1/+0.0 is +inf and 1/-0.0 is -inf. Python's float
    # division raises instead.
    if d == 0.0:
        return math.copysign(math.inf, d)
    return 1.0 / d

class Ray:
    """
    Represents a ray in 3D space with an origin, a direction and the moment in
    time it was cast (used for motion blur).
    """
    __slots__ = ("origin", "direction", "time", "_inverse_direction")

    def __init__(self, origin: Vector3, direction: Vector3, time: float = 0.0):
        self.origin = origin
        self.direction = direction
        self.time = time
        self._inverse_direction = None

    def at(self, t: float) -> Vector3:
        """
        Returns the point along the ray at parameter t.
        """
        return self.origin + self.direction * t

    @property
    def inverse_direction(self):
        """
        Per-axis reciprocal of the direction as a tuple of floats, computed on
        first use. Zero components give +/-inf, which the slab test relies on.
        """
        if self._inverse_direction is None:
            d = self.direction
            self._inverse_direction = (_reciprocal(d.x), _reciprocal(d.y), _reciprocal(d.z))
        return self._inverse_direction

    def __getstate__(self):
        return (self.origin, self.direction, self.time)

    def __setstate__(self, state):
        self.origin, self.direction, self.time = state
        self._inverse_direction = None

    def __repr__(self) -> str:
        return f"Ray(origin={self.origin}, direction={self.direction}, time={self.time})"
