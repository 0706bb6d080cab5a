# materials/metal.py
from typing import Optional, Tuple, Union
from core.ray import Ray
from core.vector import Vector3
from core.utils import reflect, random_in_unit_sphere, clamp
from geometry.hittable import HitRecord
from materials.material import Material
from materials.textures import Texture, as_texture

class Metal(Material):
    """
    Metal material with reflective properties and optional texture support.

    fuzz is clamped to [0, 1]; at high fuzz some perturbed reflections point
    into the surface and are absorbed.
    """
    def __init__(self, albedo: Union[Vector3, Texture], fuzz: float = 0.0):
        self.texture = as_texture(albedo)
        self.fuzz = clamp(fuzz, 0.0, 1.0)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Optional[Tuple[Ray, Vector3]]:
        reflected = reflect(ray_in.direction.normalize(), rec.normal)
        if self.fuzz > 0:
            reflected = reflected + random_in_unit_sphere(rng) * self.fuzz
        scattered = Ray(rec.p, reflected)

        if scattered.direction.dot(rec.normal) > 0:
            return scattered, self.texture.sample(rec.uv, rec.p)

        return None  # Absorb the ray if it does not scatter forward
