# main.py
import argparse
import logging
import random
import sys
from typing import List, Optional
from pathtracer.config import DEFAULT_QUALITY, QUALITY_LEVELS, RenderSettings
from pathtracer.renderer.raytracer import Renderer
from pathtracer.scenes import SCENES, build_scene

logger = logging.getLogger("pathtracer")

def positive_float(text: str) -> float:
    try:
        value = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: '{text}'") from None
    if not value > 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {text}")
    return value

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pathtracer",
        description="Render a built-in scene with a Monte Carlo path tracer and write a P3 PPM image.")
    parser.add_argument("--scene", choices=sorted(SCENES), default="random",
                        help="scene to render (default: %(default)s)")
    parser.add_argument("--quality", choices=list(QUALITY_LEVELS), default=DEFAULT_QUALITY,
                        help="samples/bounces preset (default: %(default)s)")
    parser.add_argument("--width", type=int, default=400, help="image width in pixels")
    parser.add_argument("--aspect", type=positive_float, default=16 / 9,
                        help="width / height ratio (default: 16/9)")
    parser.add_argument("--samples", type=int, help="samples per pixel, overrides --quality")
    parser.add_argument("--max-depth", type=int, help="bounce limit, overrides --quality")
    parser.add_argument("--workers", type=int, default=1,
                        help="worker processes; 0 uses every CPU (default: %(default)s)")
    parser.add_argument("--seed", type=int, default=0, help="random seed (default: %(default)s)")
    parser.add_argument("--gamma", type=float, default=2.0, help="output gamma (default: %(default)s)")
    parser.add_argument("--tone-map", action="store_true",
                        help="apply Reinhard tone mapping before gamma")
    parser.add_argument("-o", "--output", help="output file (default: stdout)")
    parser.add_argument("-q", "--quiet", action="store_true", help="no progress bar or info logs")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser

def configure_logging(quiet: bool, verbose: bool) -> None:
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO
    logging.basicConfig(level=level, stream=sys.stderr,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.quiet, args.verbose)

    overrides = {
        "width": args.width,
        "height": max(1, int(args.width / args.aspect)),
        "workers": None if args.workers == 0 else args.workers,
        "seed": args.seed,
        "gamma": args.gamma,
        "tone_map": args.tone_map,
        "progress": not args.quiet,
    }
    if args.samples is not None:
        overrides["samples_per_pixel"] = args.samples
    if args.max_depth is not None:
        overrides["max_depth"] = args.max_depth
    try:
        settings = RenderSettings.from_quality(args.quality, **overrides)
    except ValueError as e:
        parser.error(str(e))

    world, camera_settings = build_scene(args.scene, random.Random(settings.seed))
    camera = camera_settings.make_camera(settings.aspect_ratio)
    logger.info("Scene '%s' with %d objects", args.scene, len(world))

    renderer = Renderer(settings)
    if args.output:
        with open(args.output, "w") as stream:
            renderer.render_to_ppm(stream, world, camera, camera_settings.background)
        logger.info("Wrote %s", args.output)
    else:
        renderer.render_to_ppm(sys.stdout, world, camera, camera_settings.background)
    return 0

if __name__ == "__main__":
    sys.exit(main())
