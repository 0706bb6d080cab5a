# scenes.py
import logging
import math
import random
from core.vector import Vector3
from camera.camera import Camera
from geometry.world import HittableList
from geometry.sphere import Sphere
from materials.lambertian import Lambertian
from materials.presets import MetalPresets, DielectricPresets, LightPresets, ColorPresets, TexturePresets
from renderer.integrator import SKY, SolidBackground

logger = logging.getLogger(__name__)

class Scene:
    """
    A world (flat list of primitives) together with the camera looking at
    it and the background returned for rays that escape.
    """
    def __init__(self, world: HittableList, camera: Camera, background=SKY,
                 aspect_ratio: float = 16.0 / 9.0):
        self.world = world
        self.camera = camera
        self.background = background
        self.aspect_ratio = aspect_ratio

    def image_height(self, width: int) -> int:
        return max(1, int(width / self.aspect_ratio))

def _ground() -> Sphere:
    return Sphere(Vector3(0, -1000, 0), 1000, ColorPresets.matte(ColorPresets.GROUND))

def random_scene(rng: random.Random) -> Scene:
    """
    The classic cover scene: a grid of small random spheres around three
    large ones (glass, diffuse, mirror).
    """
    aspect = 3.0 / 2.0
    world = HittableList()
    world.add(_ground())

    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = rng.random()
            center = Vector3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())

            if (center - Vector3(4, 0.2, 0)).length() <= 0.9:
                continue

            if choose_mat < 0.8:
                material = ColorPresets.random_matte(rng)
            elif choose_mat < 0.95:
                material = MetalPresets.random_metal(rng)
            else:
                material = DielectricPresets.glass()
            world.add(Sphere(center, 0.2, material))

    world.add(Sphere(Vector3(0, 1, 0), 1.0, DielectricPresets.glass()))
    world.add(Sphere(Vector3(-4, 1, 0), 1.0, ColorPresets.matte(ColorPresets.BROWN)))
    world.add(Sphere(Vector3(4, 1, 0), 1.0, MetalPresets.mirror()))

    camera = Camera(Vector3(13, 2, 3), Vector3(0, 0, 0), vfov=20.0,
                    aspect_ratio=aspect, aperture=0.1, focus_dist=10.0)
    return Scene(world, camera, aspect_ratio=aspect)

def simple_scene(rng: random.Random) -> Scene:
    aspect = 16.0 / 9.0
    world = HittableList()
    world.add(_ground())
    world.add(Sphere(Vector3(0, 0.5, 0), 0.5, Lambertian(Vector3(0.0, 0.0, 0.8))))

    look_from = Vector3(-5, 1, 0)
    look_at = Vector3(0, 0.5, 0)
    camera = Camera(look_from, look_at, vfov=90.0, aspect_ratio=aspect,
                    aperture=0.01, focus_dist=(look_from - look_at).length())
    return Scene(world, camera, aspect_ratio=aspect)

def sphereflake(rng: random.Random, max_depth: int = 3) -> Scene:
    """
    Recursive glass sphereflake: every sphere carries nine children a third
    of its size, 3 at 45 degrees and 6 at 90 degrees from its axis.
    """
    aspect = 16.0 / 9.0
    world = HittableList()
    world.add(_ground())
    world.extend(_flake(Vector3(0, 1, 0), Vector3(0, 1, 0), 1.0, 0, max_depth,
                        DielectricPresets.glass()))
    logger.debug("Sphereflake with %d spheres", len(world) - 1)

    look_from = Vector3(-3, 1, 0)
    look_at = Vector3(0, 0.5, 0)
    camera = Camera(look_from, look_at, vfov=90.0, aspect_ratio=aspect,
                    aperture=0.01, focus_dist=(look_from - look_at).length())
    return Scene(world, camera, aspect_ratio=aspect)

def _flake(pos: Vector3, axis: Vector3, r: float, depth: int, max_depth: int, material):
    spheres = [Sphere(pos, r, material)]
    if depth == max_depth:
        return spheres

    if axis.x != 0.0:
        perp = Vector3(-axis.y, axis.x, 0.0).normalize()
    elif axis.y != 0.0:
        perp = Vector3(axis.y, -axis.x, 0.0).normalize()
    else:
        perp = Vector3(axis.z, 0.0, -axis.x).normalize()

    for ring in (1, 2):
        tilted = _rotate(axis.normalize(), perp, math.radians(45) * ring)
        count = 3 if ring == 1 else 6
        offset = 0.0 if ring == 1 else math.radians(30)
        step = 2.0 * math.pi / count
        for k in range(count):
            child_axis = _rotate(tilted, axis, step * k + offset).normalize()
            child_pos = pos + child_axis * r * 1.33
            spheres.extend(_flake(child_pos, child_axis, 0.33 * r, depth + 1,
                                  max_depth, material))
    return spheres

def _rotate(v: Vector3, axis: Vector3, angle: float) -> Vector3:
    # Rodrigues' rotation of v about the unit axis
    k = axis.normalize()
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    return v * cos_a + k.cross(v) * sin_a + k * (k.dot(v) * (1.0 - cos_a))

def perlin_spheres(rng: random.Random) -> Scene:
    aspect = 16.0 / 9.0
    marble = TexturePresets.marble(4.0)
    world = HittableList()
    world.add(Sphere(Vector3(0, -1000, 0), 1000, Lambertian(marble)))
    world.add(Sphere(Vector3(0, 2, 0), 2, Lambertian(marble)))

    camera = Camera(Vector3(13, 2, 3), Vector3(0, 0, 0), vfov=20.0,
                    aspect_ratio=aspect, aperture=0.0, focus_dist=10.0)
    return Scene(world, camera, aspect_ratio=aspect)

def checker_spheres(rng: random.Random) -> Scene:
    aspect = 16.0 / 9.0
    checker = Lambertian(TexturePresets.checkerboard())
    world = HittableList()
    world.add(Sphere(Vector3(0, -10, 0), 10, checker))
    world.add(Sphere(Vector3(0, 10, 0), 10, checker))

    camera = Camera(Vector3(13, 2, 3), Vector3(0, 0, 0), vfov=20.0,
                    aspect_ratio=aspect, aperture=0.0, focus_dist=10.0)
    return Scene(world, camera, aspect_ratio=aspect)

def glass_shell(rng: random.Random) -> Scene:
    """
    Diffuse, hollow-glass and metal spheres in a row. The hollow sphere is
    a glass sphere with a slightly smaller negative-radius sphere inside.
    """
    aspect = 16.0 / 9.0
    glass = DielectricPresets.glass()
    world = HittableList()
    world.add(Sphere(Vector3(0, -100.5, -1), 100, ColorPresets.matte(ColorPresets.YELLOW)))
    world.add(Sphere(Vector3(0, 0, -1), 0.5, ColorPresets.matte(ColorPresets.NAVY)))
    world.add(Sphere(Vector3(-1, 0, -1), 0.5, glass))
    world.add(Sphere(Vector3(-1, 0, -1), -0.45, glass))
    world.add(Sphere(Vector3(1, 0, -1), 0.5, MetalPresets.brushed()))

    look_from = Vector3(3, 3, 2)
    look_at = Vector3(0, 0, -1)
    camera = Camera(look_from, look_at, vfov=20.0, aspect_ratio=aspect,
                    aperture=0.1, focus_dist=(look_from - look_at).length())
    return Scene(world, camera, aspect_ratio=aspect)

def lit_scene(rng: random.Random) -> Scene:
    """Marble spheres lit only by an emissive sphere, on a black background."""
    aspect = 16.0 / 9.0
    marble = Lambertian(TexturePresets.marble(4.0))
    world = HittableList()
    world.add(Sphere(Vector3(0, -1000, 0), 1000, marble))
    world.add(Sphere(Vector3(0, 2, 0), 2, marble))
    world.add(Sphere(Vector3(0, 7, 0), 2, LightPresets.white(4.0)))
    world.add(Sphere(Vector3(-4, 1, 3), 1, MetalPresets.gold()))

    camera = Camera(Vector3(26, 3, 6), Vector3(0, 2, 0), vfov=20.0,
                    aspect_ratio=aspect, aperture=0.0, focus_dist=10.0)
    return Scene(world, camera, background=SolidBackground(Vector3(0, 0, 0)),
                 aspect_ratio=aspect)

SCENES = {
    "random": random_scene,
    "simple": simple_scene,
    "sphereflake": sphereflake,
    "perlin": perlin_spheres,
    "checker": checker_spheres,
    "glass_shell": glass_shell,
    "lit": lit_scene,
}

def build_scene(name: str, seed: int = 1232) -> Scene:
    """
    Build the named scene. Raises ValueError for unknown names.
    """
    try:
        factory = SCENES[name]
    except KeyError:
        raise ValueError(f"unknown scene {name!r}, expected one of {sorted(SCENES)}") from None
    scene = factory(random.Random(seed))
    logger.info("Scene %r: %d primitives", name, len(scene.world))
    return scene
