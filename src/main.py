# main.py
import argparse
import logging
import random
import sys
import time
from config import QUALITY_LEVELS, TONE_MAPS, RenderConfig
from geometry.bvh import BVHBuildError
from renderer.image import save_image
from renderer.raytracer import Renderer
from renderer.tone_mapping import gamma_correct, reinhard_tone_mapping
from scenes import SCENES, build_scene

logger = logging.getLogger("raytracer")

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="CPU path tracer for sphere scenes")
    parser.add_argument("--scene", choices=sorted(SCENES), default="random",
                        help="Scene to render")
    parser.add_argument("--quality", choices=sorted(QUALITY_LEVELS), default="preview",
                        help="Quality preset (samples, bounces, width)")
    parser.add_argument("--width", type=int, default=None, help="Image width in pixels")
    parser.add_argument("--samples", type=int, default=None, help="Samples per pixel")
    parser.add_argument("--depth", type=int, default=None, help="Maximum bounces per path")
    parser.add_argument("--seed", type=int, default=42, help="Seed for the per-row generators")
    parser.add_argument("--scene-seed", type=int, default=1232, help="Seed for scene generation")
    parser.add_argument("--workers", type=int, default=1,
                        help="Worker processes (0 = one per CPU)")
    parser.add_argument("--output", "-o", default="out.png", help="Output image file")
    parser.add_argument("--tone-map", choices=TONE_MAPS, default="gamma",
                        help="Mapping from linear radiance to 8-bit output")
    parser.add_argument("--no-bvh", action="store_true",
                        help="Trace against the flat primitive list")
    parser.add_argument("--random-bvh-axis", action="store_true",
                        help="Pick the BVH split axis at random instead of the longest axis")
    parser.add_argument("--debug-normals", action="store_true",
                        help="Shade primitives without a material by their normal")
    parser.add_argument("--preview", action="store_true",
                        help="Show rows in a window as they finish")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser

def run(config: RenderConfig) -> str:
    """
    Build the scene, render it and write the image. Returns the output path.
    """
    scene = build_scene(config.scene, config.scene_seed)
    world = scene.world
    if config.use_bvh:
        start = time.time()
        bvh_rng = random.Random(config.scene_seed) if config.random_bvh_axis else None
        world = scene.world.build_bvh(bvh_rng)
        logger.info("BVH over %d primitives built in %.3fs", len(scene.world), time.time() - start)

    height = scene.image_height(config.width)
    renderer = Renderer(world, scene.camera, config.width, height,
                        samples=config.samples, max_depth=config.max_depth,
                        seed=config.seed, background=scene.background,
                        debug_normals=config.debug_normals)

    window = None
    on_row = None
    if config.preview:
        from renderer.preview import PreviewWindow
        window = PreviewWindow(config.width, height, config.samples)
        on_row = window.update

    accumulated = renderer.render(workers=config.workers, on_row=on_row)

    if config.tone_map == "reinhard":
        pixels = reinhard_tone_mapping(accumulated, config.samples)
    else:
        pixels = gamma_correct(accumulated, config.samples)
    path = save_image(pixels, config.output)

    if window is not None:
        window.wait()
    return path

def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = RenderConfig.from_args(args)
    except ValueError as e:
        parser.error(str(e))

    logger.info("Starting render: %r", config)
    try:
        run(config)
    except BVHBuildError as e:
        logger.error("Scene cannot be rendered: %s", e)
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
