# materials/textures.py
import math
from typing import Union
from core.vector import Vector3
from core.uv import UV
from materials.perlin import Perlin

class Texture:
    """Base class for all textures."""
    def sample(self, uv: UV, p: Vector3) -> Vector3:
        """Sample the texture at surface coordinates uv and world point p."""
        raise NotImplementedError("sample() must be implemented by texture subclasses.")

class SolidTexture(Texture):
    """A solid color texture."""
    def __init__(self, color: Vector3):
        self.color = color

    def sample(self, uv: UV, p: Vector3) -> Vector3:
        return self.color

class CheckerTexture(Texture):
    """
    A 3D checker pattern: the sign of sin(sx)sin(sy)sin(sz) picks a cell.

    Because it is defined in space rather than in uv, it wraps any surface
    without seams. `odd` and `even` may be colors or nested textures.
    """
    def __init__(self, odd: Union[Vector3, Texture], even: Union[Vector3, Texture],
                 scale: float = 10.0):
        self.odd = as_texture(odd)
        self.even = as_texture(even)
        self.scale = scale

    def sample(self, uv: UV, p: Vector3) -> Vector3:
        s = self.scale
        sines = math.sin(s * p.x) * math.sin(s * p.y) * math.sin(s * p.z)
        if sines < 0:
            return self.odd.sample(uv, p)
        return self.even.sample(uv, p)

class NoiseTexture(Texture):
    """A marble-like procedural texture driven by Perlin turbulence."""
    def __init__(self, scale: float = 4.0, perlin: Perlin = None, turbulence_depth: int = 7):
        self.scale = scale
        self.noise = perlin if perlin is not None else Perlin()
        self.turbulence_depth = turbulence_depth

    def sample(self, uv: UV, p: Vector3) -> Vector3:
        t = self.noise.turb(p, self.turbulence_depth)
        value = 0.5 * (1.0 + math.sin(self.scale * p.z + 10.0 * t))
        return Vector3(1.0, 1.0, 1.0) * value

def as_texture(value: Union[Vector3, Texture]) -> Texture:
    if isinstance(value, Vector3):
        return SolidTexture(value)
    return value
