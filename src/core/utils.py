# core/utils.py
import math
import random
from core.vector import Vector3

def task_rng(seed: int, index: int) -> random.Random:
    """
    Returns a private generator for one unit of work (an image row).

    The stream depends only on (seed, index), so a render is reproducible
    whatever the number of workers.
    """
    return random.Random(seed * 1_000_003 + index)

def random_in_unit_sphere(rng) -> Vector3:
    """
    Returns a random point inside a unit sphere.
    """
    while True:
        p = Vector3(rng.uniform(-1, 1),
                    rng.uniform(-1, 1),
                    rng.uniform(-1, 1))
        if p.dot(p) < 1.0:
            return p

def random_unit_vector(rng) -> Vector3:
    """
    Returns a random unit vector (uniformly distributed over the sphere).
    """
    return random_in_unit_sphere(rng).normalize()

def random_in_unit_disk(rng) -> Vector3:
    """
    Returns a random point inside the unit disk in the xy-plane.
    """
    while True:
        p = Vector3(rng.uniform(-1, 1), rng.uniform(-1, 1), 0.0)
        if p.dot(p) < 1.0:
            return p

def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)

def refract(uv: Vector3, n: Vector3, etai_over_etat: float) -> Vector3:
    """
    Refracts the unit vector uv through a surface with normal n (Snell's law).

    The caller is responsible for checking total internal reflection first.
    """
    cos_theta = min(-uv.dot(n), 1.0)
    r_out_perp = (uv + n * cos_theta) * etai_over_etat
    r_out_parallel = n * (-math.sqrt(abs(1.0 - r_out_perp.length_squared())))
    return r_out_perp + r_out_parallel

def schlick(cosine: float, ref_idx: float) -> float:
    """
    Schlick's approximation of the Fresnel reflectance.
    """
    r0 = (1.0 - ref_idx) / (1.0 + ref_idx)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow((1.0 - cosine), 5)

def clamp(x: float, lo: float, hi: float) -> float:
    if x < lo:
        return lo
    if x > hi:
        return hi
    return x
