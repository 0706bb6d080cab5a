# materials/perlin.py
import numpy as np
from numba import njit
from core.vector import Vector3

POINT_COUNT = 256

class Perlin:
    """
    3D gradient noise over a 256-entry lattice.

    The gradient and permutation tables are plain numpy arrays, so a Perlin
    instance pickles cleanly into render worker processes. The per-point
    evaluation runs in numba-compiled functions.
    """
    def __init__(self, seed: int = 1234):
        rng = np.random.default_rng(seed)
        vecs = rng.uniform(-1.0, 1.0, size=(POINT_COUNT, 3))
        norms = np.linalg.norm(vecs, axis=1, keepdims=True)
        self.ranvec = vecs / np.maximum(norms, 1e-12)
        self.perm_x = rng.permutation(POINT_COUNT).astype(np.int64)
        self.perm_y = rng.permutation(POINT_COUNT).astype(np.int64)
        self.perm_z = rng.permutation(POINT_COUNT).astype(np.int64)

    def noise(self, p: Vector3) -> float:
        """Noise value in roughly [-1, 1]."""
        return float(_noise(self.ranvec, self.perm_x, self.perm_y, self.perm_z,
                            float(p.x), float(p.y), float(p.z)))

    def turb(self, p: Vector3, depth: int = 7) -> float:
        """Absolute value of `depth` summed octaves, each half the weight of the last."""
        return float(_turb(self.ranvec, self.perm_x, self.perm_y, self.perm_z,
                           float(p.x), float(p.y), float(p.z), depth))

@njit(cache=True)
def _noise(ranvec, perm_x, perm_y, perm_z, x, y, z):
    fx = np.floor(x)
    fy = np.floor(y)
    fz = np.floor(z)
    u = x - fx
    v = y - fy
    w = z - fz
    i = int(fx)
    j = int(fy)
    k = int(fz)

    # Hermite smoothing of the interpolation weights
    uu = u * u * (3.0 - 2.0 * u)
    vv = v * v * (3.0 - 2.0 * v)
    ww = w * w * (3.0 - 2.0 * w)

    accum = 0.0
    for di in range(2):
        for dj in range(2):
            for dk in range(2):
                idx = perm_x[(i + di) & 255] ^ perm_y[(j + dj) & 255] ^ perm_z[(k + dk) & 255]
                wx = u - di
                wy = v - dj
                wz = w - dk
                g_dot = ranvec[idx, 0] * wx + ranvec[idx, 1] * wy + ranvec[idx, 2] * wz
                accum += ((di * uu + (1 - di) * (1.0 - uu))
                          * (dj * vv + (1 - dj) * (1.0 - vv))
                          * (dk * ww + (1 - dk) * (1.0 - ww))
                          * g_dot)
    return accum

@njit(cache=True)
def _turb(ranvec, perm_x, perm_y, perm_z, x, y, z, depth):
    accum = 0.0
    weight = 1.0
    for _ in range(depth):
        accum += weight * _noise(ranvec, perm_x, perm_y, perm_z, x, y, z)
        weight *= 0.5
        x *= 2.0
        y *= 2.0
        z *= 2.0
    return abs(accum)
