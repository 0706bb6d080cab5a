# materials/lambertian.py
from typing import Tuple, Union
from core.ray import Ray
from core.vector import Vector3
from core.utils import random_unit_vector
from geometry.hittable import HitRecord
from materials.material import Material
from materials.textures import Texture, as_texture

class Lambertian(Material):
    """
    Ideal diffuse surface. Always scatters, with a cosine-weighted direction
    drawn as normal + random unit vector.
    """
    def __init__(self, albedo: Union[Vector3, Texture]):
        self.texture = as_texture(albedo)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Tuple[Ray, Vector3]:
        direction = rec.normal + random_unit_vector(rng)

        # The sample can cancel the normal almost exactly
        if direction.near_zero():
            direction = rec.normal

        return Ray(rec.p, direction), self.texture.sample(rec.uv, rec.p)
