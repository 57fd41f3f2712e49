# camera/camera.py
import numpy as np
from core.vector import Vector3, Point3, Color
from core.ray import Ray
from core.interval import Interval
from core.utils import INFINITY
from geometry.hittable import Hittable
from renderer.color import quantize

FOCAL_LENGTH = 1.0
VIEWPORT_HEIGHT = 2.0

WHITE = Color(1.0, 1.0, 1.0)
SKY_BLUE = Color(0.5, 0.7, 1.0)

class Camera:
    """
    Pinhole camera at the origin looking down -z.

    Set aspect_ratio and image_width, then call initialize() once to derive the
    viewport geometry. render() only reads that geometry.
    """
    def __init__(self, aspect_ratio: float = 16.0 / 9.0, image_width: int = 400,
                 debug_mode: bool = False):
        self.aspect_ratio = aspect_ratio  # Ratio of image width over height
        self.image_width = image_width    # Rendered image width in pixel count
        self.debug_mode = debug_mode
        self.initialized = False

        # Derived in initialize()
        self.image_height = None
        self.center = None
        self.pixel00_loc = None    # Location of pixel 0, 0
        self.pixel_delta_u = None  # Offset to pixel to the right
        self.pixel_delta_v = None  # Offset to pixel below

    def initialize(self):
        """Derives image height, viewport and per-pixel deltas from the settings."""
        if not self.aspect_ratio > 0:
            raise ValueError(f"aspect_ratio must be positive, got {self.aspect_ratio}")
        if int(self.image_width) != self.image_width or self.image_width < 1:
            raise ValueError(f"image_width must be a positive integer, got {self.image_width}")
        self.image_width = int(self.image_width)

        self.image_height = max(1, int(self.image_width / self.aspect_ratio))

        # The real ratio of the pixel grid, not the requested one, sets the viewport width.
        viewport_width = VIEWPORT_HEIGHT * (self.image_width / self.image_height)
        self.center = Point3(0, 0, 0)

        # Vectors across the horizontal and down the vertical viewport edges
        viewport_u = Vector3(viewport_width, 0, 0)
        viewport_v = Vector3(0, -VIEWPORT_HEIGHT, 0)

        self.pixel_delta_u = viewport_u / self.image_width
        self.pixel_delta_v = viewport_v / self.image_height

        viewport_upper_left = (self.center
                               - Vector3(0, 0, FOCAL_LENGTH)
                               - viewport_u / 2
                               - viewport_v / 2)
        self.pixel00_loc = viewport_upper_left + (self.pixel_delta_u + self.pixel_delta_v) * 0.5
        self.initialized = True

    def get_ray(self, i: int, j: int) -> Ray:
        """Ray from the camera center through the center of pixel (i, j)."""
        pixel_center = (self.pixel00_loc
                        + self.pixel_delta_u * i
                        + self.pixel_delta_v * j)
        return Ray(self.center, pixel_center - self.center)

    @staticmethod
    def ray_color(ray: Ray, world: Hittable) -> Color:
        rec = world.hit(ray, Interval(0, INFINITY))
        if rec is not None:
            # Map the normal from [-1, 1] to [0, 1] per channel.
            return (rec.normal + WHITE) * 0.5

        unit_direction = ray.direction.unit()
        a = 0.5 * (unit_direction.y + 1.0)
        return WHITE * (1.0 - a) + SKY_BLUE * a

    def render(self, world: Hittable, sink=None) -> np.ndarray:
        """
        Renders the world one ray per pixel.

        Args:
            world: The scene to render
            sink: Optional ImageSink that receives the finished image

        Returns:
            (image_height, image_width, 3) integer array of quantized colors, row 0 at the top
        """
        if not self.initialized:
            self.initialize()

        pixels = np.zeros((self.image_height, self.image_width, 3), dtype=np.int64)
        for j in range(self.image_height):
            if self.debug_mode:
                print(f"Scanlines remaining: {self.image_height - j}")
            for i in range(self.image_width):
                ray = self.get_ray(i, j)
                pixels[j, i] = quantize(self.ray_color(ray, world))

        if self.debug_mode:
            print("Done.")
        if sink is not None:
            sink.write(self.image_width, self.image_height, iter_pixels(pixels))
        return pixels


def iter_pixels(pixels: np.ndarray):
    """Yields (r, g, b) tuples in row-major order, top row first."""
    for row in pixels:
        for r, g, b in row:
            yield int(r), int(g), int(b)
