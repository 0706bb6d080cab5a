# materials/material.py
from typing import Optional, Tuple
from core.ray import Ray
from core.vector import Vector3
from geometry.hittable import HitRecord

BLACK = Vector3(0.0, 0.0, 0.0)

class Material:
    """
    Abstract material class. Subclasses must implement scatter().

    One instance is shared by every primitive that uses it and is never
    mutated after construction, so materials are safe to read from any
    number of render workers.
    """
    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Optional[Tuple[Ray, Vector3]]:
        """
        Computes the scattered ray and attenuation.
        Returns a tuple (scattered_ray, attenuation) or None if the ray is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")

    def emitted(self, u: float, v: float, p: Vector3) -> Vector3:
        """
        Radiance emitted at the hit point. Black unless the material is a light.
        """
        return BLACK
