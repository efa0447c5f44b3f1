# main.py
import argparse
import logging
import math
import sys
from pathlib import Path
from typing import Optional, Sequence

from camera.camera import Camera
from core.color import Color
from core.config import OUTPUT_DIR
from core.errors import RayTracerError
from core.logging_config import setup_logging
from core.matrix import Matrix
from core.transformations import chain, view_transform
from core.vector import Tuple
from geometry.plane import Plane
from geometry.sphere import Sphere
from geometry.world import World
from materials.light import PointLight
from materials.material import Material
from materials.patterns import CheckersPattern, GradientPattern, RingPattern, StripePattern

logger = logging.getLogger(__name__)


def create_world() -> World:
    """
    A checkered floor and back wall with three patterned spheres.
    """
    world = World(PointLight(Tuple.point(-10, 10, -10), Color.white()))

    floor_pattern = CheckersPattern(Color(0.9, 0.9, 0.9), Color(0.1, 0.1, 0.1))
    world.add(Plane(material=Material(specular=0.0, pattern=floor_pattern)))

    wall_pattern = RingPattern(Color(0.8, 0.5, 0.3), Color(0.6, 0.3, 0.1),
                               transform=Matrix.scaling(0.5, 0.5, 0.5))
    world.add(Plane(
        transform=Matrix.translation(0, 0, 10) * Matrix.rotation_x(math.pi / 2),
        material=Material(specular=0.0, pattern=wall_pattern),
    ))

    stripes = StripePattern(Color(0.1, 1.0, 0.5), Color(0.0, 0.4, 0.2),
                            transform=chain(Matrix.scaling(0.2, 0.2, 0.2), Matrix.rotation_z(math.pi / 4)))
    world.add(Sphere(
        transform=Matrix.translation(-0.5, 1, 0.5),
        material=Material(diffuse=0.7, specular=0.3, pattern=stripes),
    ))

    gradient = GradientPattern(Color(1.0, 0.2, 0.2), Color(0.2, 0.2, 1.0),
                               transform=chain(Matrix.scaling(2, 1, 1), Matrix.translation(-1, 0, 0)))
    world.add(Sphere(
        transform=Matrix.translation(1.5, 0.5, -0.5) * Matrix.scaling(0.5, 0.5, 0.5),
        material=Material(diffuse=0.7, specular=0.3, pattern=gradient),
    ))

    world.add(Sphere(
        transform=Matrix.translation(-1.5, 0.33, -0.75) * Matrix.scaling(0.33, 0.33, 0.33),
        material=Material(color=Color(1.0, 0.8, 0.1), diffuse=0.7, specular=0.3),
    ))

    logger.info("Created world with %d shapes", len(world))
    return world


def create_camera(width: int, height: int, fov: float) -> Camera:
    return Camera(width, height, fov, view_transform(
        Tuple.point(0, 1.5, -5),
        Tuple.point(0, 1, 0),
        Tuple.vector(0, 1, 0),
    ))


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render the demo scene with the CPU ray tracer")
    parser.add_argument("--width", type=int, default=320, help="image width in pixels")
    parser.add_argument("--height", type=int, default=160, help="image height in pixels")
    parser.add_argument("--fov", type=float, default=60.0, help="vertical field of view in degrees")
    parser.add_argument("--workers", type=int, default=None,
                        help="render processes (default: RAYTRACER_WORKERS, 0 for one per CPU)")
    parser.add_argument("--output", type=Path, default=OUTPUT_DIR / "scene.png",
                        help="output image; .ppm is written as text, anything else via Pillow")
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ...")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(level=args.log_level)

    try:
        world = create_world()
        camera = create_camera(args.width, args.height, math.radians(args.fov))
        canvas = camera.render(world, workers=args.workers)
        path = canvas.save(args.output)
    except (RayTracerError, ValueError, OSError) as e:
        logger.error("Rendering failed: %s", e)
        return 1

    logger.info("Image saved to %s", path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
