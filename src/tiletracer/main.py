# main.py
import argparse
import logging
import time
from typing import List, Optional

from tiletracer.config import DEFAULT_WIDTH, DEFAULT_TILE, DEFAULT_WORKERS, LOG_LEVEL, QUALITY_LEVELS, RenderSettings
from tiletracer.logging_config import setup_logging
from tiletracer.renderer.image import save_image
from tiletracer.renderer.raytracer import Renderer, RenderError
from tiletracer.scenes import SCENES, textured_scene

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tiletracer",
        description="Render a scene with a tile-parallel Monte Carlo path tracer.",
    )
    parser.add_argument("--scene", choices=sorted(SCENES), default="default")
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH, help="image width in pixels")
    parser.add_argument("--height", type=int, default=None,
                        help="image height in pixels (default: width / 16:9)")
    parser.add_argument("--quality", choices=sorted(QUALITY_LEVELS), default="balanced",
                        help="samples/bounces preset, overridden by --samples and --depth")
    parser.add_argument("--samples", type=int, default=None, help="samples per pixel")
    parser.add_argument("--depth", type=int, default=None, help="maximum bounces per path")
    parser.add_argument("--tile", type=int, default=DEFAULT_TILE, help="tile edge length in pixels")
    parser.add_argument("--workers", type=int, default=DEFAULT_WORKERS,
                        help="background render threads (default: cores - 1)")
    parser.add_argument("--texture", default=None, help="image file for the textured scene")
    parser.add_argument("--output", "-o", default="image.ppm", help=".ppm, .png or any Pillow format")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for reproducible sampling, independent of --workers")
    parser.add_argument("--log-level", default=LOG_LEVEL)
    parser.add_argument("--quiet", action="store_true", help="hide the progress line")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        settings = RenderSettings.from_quality(
            args.quality,
            width=args.width,
            height=args.height,
            samples_per_pixel=args.samples,
            ray_depth=args.depth,
            tile_width=args.tile,
            workers=args.workers,
            seed=args.seed,
        ).validate()
    except ValueError as e:
        logger.error("Invalid render settings: %s", e)
        return 2

    if args.scene == "textured":
        world, camera = textured_scene(settings.aspect_ratio, args.texture)
    else:
        world, camera = SCENES[args.scene](settings.aspect_ratio)

    tile_count_x = (settings.width + settings.tile_width - 1) // settings.tile_width
    tile_count_y = (settings.height + settings.tile_height - 1) // settings.tile_height
    print("\n=== Initializing Renderer ===")
    print(f"Scene: {args.scene} ({len(world)} objects)")
    print(f"Using {settings.workers + 1} threads, total tiles: {tile_count_x * tile_count_y}, "
          f"{tile_count_x}x{tile_count_y}")
    print(f"Image quality: {settings.width}x{settings.height} pixels, "
          f"{settings.samples_per_pixel} samples per pixel, {settings.ray_depth} ray depth")

    renderer = Renderer(settings, show_progress=not args.quiet)
    start = time.perf_counter()
    try:
        image = renderer.render(world, camera)
    except RenderError as e:
        logger.error("%s: %s", e, e.__cause__)
        return 1
    elapsed_ms = (time.perf_counter() - start) * 1000.0

    print("Raycasting Done!")
    save_image(args.output, image)
    print(f"Wrote {args.output}")

    total_samples = renderer.last_queue.total_bounces.value
    print(f"Total time: {elapsed_ms:.0f} ms")
    print(f"Total samples: {total_samples}")
    if total_samples:
        print(f"Time per sample: {elapsed_ms / total_samples:.6f} ms")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
