# materials/diffuse_light.py
from typing import Union
from core.uv import UV
from core.vector import Vector3
from materials.material import Material
from materials.textures import Texture, as_texture

class DiffuseLight(Material):
    """
    Area light. Paths end when they hit it and carry back its emission.

    The emission may be a texture, e.g. a checker for a patterned lamp.
    Brightness above 1 is expected; reinhard tone mapping keeps it in range.
    """
    def __init__(self, emit: Union[Vector3, Texture]):
        self.texture = as_texture(emit)

    def scatter(self, ray_in, rec, rng):
        # Absorbs everything, the integrator then asks for emitted()
        return None

    def emitted(self, u: float, v: float, p: Vector3) -> Vector3:
        return self.texture.sample(UV(u, v), p)
