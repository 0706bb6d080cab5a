# config.py
"""
Render configuration: named quality presets plus the settings a single
render needs. main.py builds a RenderConfig from the command line.
"""
import os

QUALITY_LEVELS = {
    "preview": {"samples": 4, "bounces": 8, "width": 320},
    "balanced": {"samples": 32, "bounces": 20, "width": 600},
    "final": {"samples": 100, "bounces": 50, "width": 1200},
}

TONE_MAPS = ("gamma", "reinhard")

class RenderConfig:
    """
    Settings for one render. Values not given fall back to the chosen
    quality level.
    """
    def __init__(self, scene: str = "random", quality: str = "preview",
                 width: int = None, samples: int = None, max_depth: int = None,
                 seed: int = 42, scene_seed: int = 1232, workers: int = 1,
                 output: str = "out.png", tone_map: str = "gamma",
                 use_bvh: bool = True, random_bvh_axis: bool = False,
                 debug_normals: bool = False, preview: bool = False):
        if quality not in QUALITY_LEVELS:
            raise ValueError(f"unknown quality {quality!r}, expected one of {sorted(QUALITY_LEVELS)}")
        level = QUALITY_LEVELS[quality]
        self.scene = scene
        self.quality = quality
        self.width = width if width is not None else level["width"]
        self.samples = samples if samples is not None else level["samples"]
        self.max_depth = max_depth if max_depth is not None else level["bounces"]
        self.seed = seed
        self.scene_seed = scene_seed
        self.workers = workers if workers > 0 else (os.cpu_count() or 1)
        self.output = output
        self.tone_map = tone_map
        self.use_bvh = use_bvh
        self.random_bvh_axis = random_bvh_axis
        self.debug_normals = debug_normals
        self.preview = preview
        self.validate()

    def validate(self):
        if self.width <= 0:
            raise ValueError(f"width must be positive, got {self.width}")
        if self.samples <= 0:
            raise ValueError(f"samples must be positive, got {self.samples}")
        if self.max_depth < 0:
            raise ValueError(f"max depth cannot be negative, got {self.max_depth}")
        if self.tone_map not in TONE_MAPS:
            raise ValueError(f"unknown tone map {self.tone_map!r}, expected one of {TONE_MAPS}")

    @classmethod
    def from_args(cls, args) -> "RenderConfig":
        return cls(
            scene=args.scene,
            quality=args.quality,
            width=args.width,
            samples=args.samples,
            max_depth=args.depth,
            seed=args.seed,
            scene_seed=args.scene_seed,
            workers=args.workers,
            output=args.output,
            tone_map=args.tone_map,
            use_bvh=not args.no_bvh,
            random_bvh_axis=args.random_bvh_axis,
            debug_normals=args.debug_normals,
            preview=args.preview,
        )

    def __repr__(self) -> str:
        return (f"RenderConfig(scene={self.scene!r}, quality={self.quality!r}, width={self.width}, "
                f"samples={self.samples}, max_depth={self.max_depth}, workers={self.workers})")
