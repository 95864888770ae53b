# core/uv.py
import math

class UV:
    """
    Represents a 2D texture coordinate.
    """
    __slots__ = ("u", "v")

    def __init__(self, u: float, v: float):
        self.u = u
        self.v = v

    def __eq__(self, other) -> bool:
        if not isinstance(other, UV):
            return NotImplemented
        return self.u == other.u and self.v == other.v

    def __getstate__(self):
        return (self.u, self.v)

    def __setstate__(self, state):
        self.u, self.v = state

    def __repr__(self) -> str:
        return f"UV({self.u}, {self.v})"


def sphere_uv(p) -> UV:
    """
    Maps a point on the unit sphere to texture coordinates.

    u: angle around the Y axis from X=-1, in [0, 1].
    v: angle from Y=-1 to Y=+1, in [0, 1].
    """
    theta = math.acos(max(-1.0, min(1.0, -p.y)))
    phi = math.atan2(-p.z, p.x) + math.pi
    return UV(phi / (2 * math.pi), theta / math.pi)
