"""Render defaults, quality presets and environment overrides for tiletracer."""

import os
from typing import Optional

# Intersection tests start this far along a ray so a bounce cannot re-hit
# the surface it just left.
EPSILON = 1e-4

# Seconds the coordinating thread sleeps between completion checks once the
# job queue is drained.
POLL_INTERVAL = 0.005

ASPECT_RATIO = 16.0 / 9.0

# Environment overrides
DEFAULT_WIDTH = int(os.getenv("TILETRACER_WIDTH", "400"))
DEFAULT_SAMPLES = int(os.getenv("TILETRACER_SAMPLES", "32"))
DEFAULT_DEPTH = int(os.getenv("TILETRACER_DEPTH", "8"))
DEFAULT_TILE = int(os.getenv("TILETRACER_TILE", "32"))
_workers_env = os.getenv("TILETRACER_WORKERS")
DEFAULT_WORKERS: Optional[int] = int(_workers_env) if _workers_env else None

LOG_LEVEL = os.getenv("TILETRACER_LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

QUALITY_LEVELS = {
    "preview": {"samples": 8, "bounces": 4},
    "balanced": {"samples": 32, "bounces": 8},
    "final": {"samples": 128, "bounces": 8},
}


def default_worker_count() -> int:
    """Worker threads to start; the coordinating thread renders too."""
    return max((os.cpu_count() or 1) - 1, 0)


class RenderSettings:
    """
    Tunable parameters consumed by the tile scheduler.

    ``workers`` counts background threads only; ``None`` picks one fewer than
    the available cores. A ``seed`` makes the image reproducible for any
    worker count.
    """
    def __init__(self, width: int = DEFAULT_WIDTH, height: Optional[int] = None,
                 samples_per_pixel: int = DEFAULT_SAMPLES, ray_depth: int = DEFAULT_DEPTH,
                 tile_width: int = DEFAULT_TILE, tile_height: Optional[int] = None,
                 workers: Optional[int] = DEFAULT_WORKERS, seed: Optional[int] = None):
        self.width = width
        self.height = height if height is not None else int(width / ASPECT_RATIO)
        self.samples_per_pixel = samples_per_pixel
        self.ray_depth = ray_depth
        self.tile_width = tile_width
        self.tile_height = tile_height if tile_height is not None else tile_width
        self.workers = workers if workers is not None else default_worker_count()
        self.seed = seed

    @classmethod
    def from_quality(cls, name: str, **overrides) -> "RenderSettings":
        if name not in QUALITY_LEVELS:
            raise ValueError(
                f"Unknown quality preset {name!r}; expected one of {sorted(QUALITY_LEVELS)}"
            )
        quality = QUALITY_LEVELS[name]
        params = {"samples_per_pixel": quality["samples"], "ray_depth": quality["bounces"]}
        params.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**params)

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height

    def validate(self) -> "RenderSettings":
        for name in ("width", "height", "samples_per_pixel", "tile_width", "tile_height"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
        if self.ray_depth < 0:
            raise ValueError(f"ray_depth must not be negative, got {self.ray_depth}")
        if self.workers < 0:
            raise ValueError(f"workers must not be negative, got {self.workers}")
        return self

    def __repr__(self) -> str:
        return (f"RenderSettings({self.width}x{self.height}, spp={self.samples_per_pixel}, "
                f"depth={self.ray_depth}, tile={self.tile_width}x{self.tile_height}, "
                f"workers={self.workers}, seed={self.seed})")
