# materials/noise.py
import math
import random
import numpy as np
from pathtracer.core.vector import Vector3

class PerlinNoise:
    """
    Lattice gradient noise over 3D points.

    Random unit gradients sit on an integer lattice addressed through three
    shuffled permutation tables; values between lattice points are blended
    with a Hermite-smoothed trilinear interpolation. Output lies in about
    [-1, 1].
    """
    SIZE = 256

    def __init__(self, rng=None):
        if rng is None:
            rng = random.Random()
        np_rng = np.random.default_rng(rng.getrandbits(64))
        gradients = np_rng.uniform(-1.0, 1.0, size=(self.SIZE, 3))
        gradients /= np.linalg.norm(gradients, axis=1, keepdims=True)
        self.gradients = [Vector3(*g) for g in gradients.tolist()]
        self.perm_x = np_rng.permutation(self.SIZE).tolist()
        self.perm_y = np_rng.permutation(self.SIZE).tolist()
        self.perm_z = np_rng.permutation(self.SIZE).tolist()

    def noise(self, p: Vector3) -> float:
        fx, fy, fz = math.floor(p.x), math.floor(p.y), math.floor(p.z)
        u, v, w = p.x - fx, p.y - fy, p.z - fz
        i, j, k = int(fx), int(fy), int(fz)

        mask = self.SIZE - 1
        uu = u * u * (3 - 2 * u)
        vv = v * v * (3 - 2 * v)
        ww = w * w * (3 - 2 * w)

        accum = 0.0
        for di in range(2):
            for dj in range(2):
                for dk in range(2):
                    g = self.gradients[self.perm_x[(i + di) & mask] ^
                                       self.perm_y[(j + dj) & mask] ^
                                       self.perm_z[(k + dk) & mask]]
                    weight = Vector3(u - di, v - dj, w - dk)
                    accum += ((di * uu + (1 - di) * (1 - uu)) *
                              (dj * vv + (1 - dj) * (1 - vv)) *
                              (dk * ww + (1 - dk) * (1 - ww)) *
                              g.dot(weight))
        return accum

    def turbulence(self, p: Vector3, depth: int = 7) -> float:
        accum = 0.0
        temp_p = p
        weight = 1.0
        for _ in range(depth):
            accum += weight * self.noise(temp_p)
            weight *= 0.5
            temp_p = temp_p * 2
        return abs(accum)
