# main.py
"""
Command-line entry point: render one of the built-in scenes to an image file.

Example:
    sphere-tracer --scene random --quality balanced --seed 7 --output final.png
"""
import argparse
import logging
import random
import sys
from typing import List, Optional

from renderer.image import save_image
from renderer.render import Renderer
from renderer.settings import QUALITY_LEVELS, RenderSettings
from scenes.demo import SCENES, build_scene

logger = logging.getLogger(__name__)

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Render a scene of spheres with a Monte Carlo path tracer.")
    parser.add_argument("--scene", choices=sorted(SCENES), default="three_spheres",
                        help="Scene to render (default: three_spheres)")
    parser.add_argument("--quality", choices=sorted(QUALITY_LEVELS), default="balanced",
                        help="Quality preset (default: balanced)")
    parser.add_argument("--width", type=int, default=None,
                        help="Image width in pixels (overrides the preset)")
    parser.add_argument("--samples", type=int, default=None,
                        help="Samples per pixel (overrides the preset)")
    parser.add_argument("--max-depth", type=int, default=None,
                        help="Maximum bounces per path (overrides the preset)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for the random source")
    parser.add_argument("--output", default="image.ppm",
                        help="Output file; .ppm, .png, .jpg or .bmp (default: image.ppm)")
    parser.add_argument("--preview", action="store_true",
                        help="Show the result in a window after rendering")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log per-scanline progress")
    return parser.parse_args(argv)

def run(args: argparse.Namespace):
    settings = RenderSettings.from_quality(
        args.quality,
        image_width=args.width,
        samples_per_pixel=args.samples,
        max_depth=args.max_depth,
        seed=args.seed,
    )
    rng = random.Random(settings.seed)

    scene = build_scene(args.scene, rng)
    camera = scene.make_camera(settings.aspect_ratio)
    logger.info("Rendering '%s' (%d objects) at %dx%d, %d spp, depth %d",
                args.scene, len(scene.world), settings.image_width,
                settings.image_height, settings.samples_per_pixel, settings.max_depth)

    pixels = Renderer(settings).render(scene.world, camera, rng)
    save_image(args.output, pixels)

    if args.preview:
        from renderer.preview import show_image
        show_image(pixels, title=f"{args.scene} - {args.output}")
    return pixels

def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
    )
    try:
        run(args)
    except (ValueError, OSError) as e:
        logger.error("%s", e)
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
