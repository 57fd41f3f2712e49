# main.py
import argparse
import sys
from core.vector import Point3
from camera.camera import Camera
from geometry.world import HittableList
from geometry.sphere import Sphere
from renderer.image_sink import ImageSinkError, PNGImageSink, PPMImageSink

SINKS = {
    "ppm": PPMImageSink,
    "png": PNGImageSink,
}

def create_world() -> HittableList:
    """
    A small sphere in front of the camera resting on a very large "ground" sphere.
    """
    world = HittableList()
    world.add(Sphere(Point3(0, 0, -1), 0.5))
    world.add(Sphere(Point3(0, -100.5, -1), 100))
    print("Added sphere at (0, 0, -1) with radius 0.5")
    print("Added ground sphere at (0, -100.5, -1) with radius 100")
    return world

def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render a sphere scene to an image file")
    parser.add_argument("--output", type=str, default=None,
                        help="Output path (default: ./output.<format>)")
    parser.add_argument("--format", type=str, default="ppm", choices=sorted(SINKS),
                        help="Image file format")
    parser.add_argument("--width", type=int, default=400, help="Image width in pixels")
    parser.add_argument("--aspect-ratio", type=float, default=16.0 / 9.0,
                        help="Image width over height")
    parser.add_argument("--preview", action="store_true",
                        help="Show the finished image in a window")
    parser.add_argument("--debug", action="store_true", help="Print per-scanline progress")
    return parser.parse_args(argv)

def main(argv=None) -> int:
    args = parse_args(argv)
    output = args.output or f"./output.{args.format}"

    print("Hello, to the ray tracer!")
    print("\n=== Creating World ===")
    world = create_world()

    camera = Camera(aspect_ratio=args.aspect_ratio, image_width=args.width,
                    debug_mode=args.debug)
    try:
        camera.initialize()
    except ValueError as e:
        print(f"Invalid camera settings: {e}")
        return 2

    print("\n=== Rendering ===")
    print(f"Render resolution: {camera.image_width}x{camera.image_height}")
    print(f"Output: {output} ({args.format})")

    sink = SINKS[args.format](output)
    try:
        pixels = camera.render(world, sink)
    except ImageSinkError as e:
        print(f"Error writing image: {e}")
        return 1
    print(f"Wrote {output}")

    if args.preview:
        # Imported here so headless runs never initialize a display.
        from renderer.preview import show_image
        show_image(pixels)
    return 0

if __name__ == "__main__":
    sys.exit(main())
