# materials/presets.py
import random
from core.vector import Vector3
from materials.metal import Metal
from materials.lambertian import Lambertian
from materials.dielectric import Dielectric
from materials.diffuse_light import DiffuseLight
from materials.textures import CheckerTexture, NoiseTexture
from materials.perlin import Perlin

class ColorPresets:
    """Albedos used by the bundled scenes."""

    GROUND = Vector3(0.5, 0.5, 0.5)
    BROWN = Vector3(0.4, 0.2, 0.1)
    NAVY = Vector3(0.1, 0.2, 0.5)
    YELLOW = Vector3(0.8, 0.8, 0.0)
    GREEN = Vector3(0.2, 0.3, 0.1)
    WHITE = Vector3(0.9, 0.9, 0.9)
    BLACK = Vector3(0.0, 0.0, 0.0)

    @staticmethod
    def matte(color: Vector3) -> Lambertian:
        return Lambertian(color)

    @staticmethod
    def random_matte(rng: random.Random) -> Lambertian:
        # Product of two uniform colors, biased towards darker albedos
        a = Vector3(rng.random(), rng.random(), rng.random())
        b = Vector3(rng.random(), rng.random(), rng.random())
        return Lambertian(a * b)

class MetalPresets:
    """Metals; fuzz 0 is a perfect mirror."""

    @staticmethod
    def mirror() -> Metal:
        return Metal(Vector3(0.7, 0.6, 0.5), fuzz=0.0)

    @staticmethod
    def gold() -> Metal:
        return Metal(Vector3(1.0, 0.78, 0.34), fuzz=0.1)

    @staticmethod
    def brushed() -> Metal:
        return Metal(Vector3(0.8, 0.6, 0.2), fuzz=0.3)

    @staticmethod
    def random_metal(rng: random.Random) -> Metal:
        albedo = Vector3(rng.uniform(0.5, 1.0), rng.uniform(0.5, 1.0), rng.uniform(0.5, 1.0))
        return Metal(albedo, rng.uniform(0.0, 0.5))

class DielectricPresets:
    """Clear materials by refractive index."""

    @staticmethod
    def glass() -> Dielectric:
        return Dielectric(1.5)

    @staticmethod
    def water() -> Dielectric:
        return Dielectric(1.33)

    @staticmethod
    def diamond() -> Dielectric:
        return Dielectric(2.42)

class LightPresets:
    @staticmethod
    def white(intensity: float = 1.0) -> DiffuseLight:
        return DiffuseLight(Vector3(1.0, 1.0, 1.0) * intensity)

    @staticmethod
    def warm(intensity: float = 1.0) -> DiffuseLight:
        return DiffuseLight(Vector3(1.0, 0.85, 0.6) * intensity)

class TexturePresets:
    @staticmethod
    def checkerboard(scale: float = 10.0) -> CheckerTexture:
        """Dark green and white cells, as on the checker scene's spheres."""
        return CheckerTexture(ColorPresets.GREEN, ColorPresets.WHITE, scale)

    @staticmethod
    def marble(scale: float = 4.0, seed: int = 1234) -> NoiseTexture:
        return NoiseTexture(scale, Perlin(seed))
