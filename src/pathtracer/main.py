# main.py
"""
Render a scene and write it as a plain-text PPM image.

By default the image is streamed to stdout; progress and log messages go to
stderr, so the output can be redirected straight into a file:

    pathtracer --width 300 --samples 20 > image.ppm
    pathtracer --scene hollow-glass --output glass.png
"""
import argparse
import logging
import sys
from typing import List, Optional

from pathtracer.config import RenderSettings
from pathtracer.renderer.image_output import save_png, write_ppm
from pathtracer.renderer.raytracer import Renderer
from pathtracer.scenes import SCENES, Scene, build_scene

logger = logging.getLogger(__name__)

_DEFAULTS = RenderSettings()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pathtracer",
        description="Monte Carlo path tracer for scenes of spheres.",
    )
    parser.add_argument("--scene", default="three-spheres", choices=sorted(SCENES),
                        help="Scene to render (default: three-spheres)")
    parser.add_argument("--width", type=int, default=_DEFAULTS.image_width,
                        help=f"Image width in pixels (default: {_DEFAULTS.image_width})")
    parser.add_argument("--aspect-ratio", type=float, default=_DEFAULTS.aspect_ratio,
                        help="Width divided by height (default: 1.5)")
    parser.add_argument("--samples", type=int, default=_DEFAULTS.samples_per_pixel,
                        help=f"Samples per pixel (default: {_DEFAULTS.samples_per_pixel})")
    parser.add_argument("--max-depth", type=int, default=_DEFAULTS.max_depth,
                        help=f"Maximum ray bounces (default: {_DEFAULTS.max_depth})")
    parser.add_argument("--vfov", type=float, default=_DEFAULTS.vfov,
                        help=f"Vertical field of view in degrees (default: {_DEFAULTS.vfov})")
    parser.add_argument("--threads", type=int, default=_DEFAULTS.threads,
                        help=f"Worker threads (default: {_DEFAULTS.threads})")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for the per-worker random sources")
    parser.add_argument("--output", "-o", default=None,
                        help="Write to this file instead of stdout; .png saves a PNG")
    parser.add_argument("--quiet", "-q", action="store_true",
                        help="No progress line or log messages")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Debug logging")
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def settings_from_args(args: argparse.Namespace) -> RenderSettings:
    return RenderSettings(
        image_width=args.width,
        aspect_ratio=args.aspect_ratio,
        samples_per_pixel=args.samples,
        max_depth=args.max_depth,
        vfov=args.vfov,
        threads=args.threads,
        seed=args.seed,
    )


def configure_logging(quiet: bool, verbose: bool):
    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO
    logging.basicConfig(stream=sys.stderr, level=level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def render(args: argparse.Namespace, settings: RenderSettings, scene: Scene,
           stdout=None) -> int:
    logger.debug("Scene %s: %d objects, camera at %r",
                 args.scene, len(scene.world), scene.camera.look_from)

    renderer = Renderer(scene.world, scene.camera, settings,
                        show_progress=not args.quiet)
    width, height = settings.image_width, settings.image_height

    if args.output is None:
        stream = stdout if stdout is not None else sys.stdout
        write_ppm(stream, width, height, renderer.scanlines())
        stream.flush()
    elif args.output.lower().endswith(".png"):
        save_png(args.output, renderer.render())
        logger.info("Saved %s", args.output)
    else:
        with open(args.output, "w") as f:
            write_ppm(f, width, height, renderer.scanlines())
        logger.info("Saved %s", args.output)
    return 0


def run(args: argparse.Namespace, stdout=None) -> int:
    settings = settings_from_args(args)
    scene = build_scene(args.scene, settings)
    return render(args, settings, scene, stdout)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.quiet, args.verbose)
    # Only bad settings are usage errors; failures while rendering propagate.
    try:
        settings = settings_from_args(args)
        scene = build_scene(args.scene, settings)
    except (ValueError, KeyError) as e:
        parser.error(e.args[0] if e.args else str(e))
    return render(args, settings, scene)


if __name__ == "__main__":
    sys.exit(main())
