# renderer/image_sink.py
import os
from typing import Iterable, List, Tuple
import numpy as np
from PIL import Image

Pixel = Tuple[int, int, int]

MAX_CHANNEL = 255


class ImageSinkError(RuntimeError):
    """
    Raised when a finished image cannot be persisted.
    """


def _collect_pixels(width: int, height: int, pixels: Iterable[Pixel]) -> List[Pixel]:
    if width <= 0 or height <= 0:
        raise ValueError(f"Image dimensions must be positive, got {width}x{height}")
    collected = [tuple(int(c) for c in pixel) for pixel in pixels]
    if len(collected) != width * height:
        raise ValueError(
            f"Expected {width * height} pixels for a {width}x{height} image, got {len(collected)}"
        )
    return collected


def format_ppm(width: int, height: int, pixels: Iterable[Pixel]) -> str:
    """
    Serializes pixels as a plain-text (P3) PPM image.

    Args:
        width: Image width in pixels
        height: Image height in pixels
        pixels: (r, g, b) triples, top row first, left to right

    Returns:
        The PPM document: magic, dimensions, max channel value, then one triple per line
    """
    collected = _collect_pixels(width, height, pixels)
    lines = ["P3", f"{width} {height}", f"{MAX_CHANNEL}"]
    lines.extend(f"{r} {g} {b}" for r, g, b in collected)
    return "\n".join(lines) + "\n"


class ImageSink:
    """
    Abstract destination for a rendered image.
    """
    def write(self, width: int, height: int, pixels: Iterable[Pixel]) -> None:
        raise NotImplementedError("write() must be implemented by subclasses.")


class MemoryImageSink(ImageSink):
    """
    Keeps the most recently written image in memory.
    """
    def __init__(self):
        self.width = 0
        self.height = 0
        self.pixels: List[Pixel] = []

    def write(self, width: int, height: int, pixels: Iterable[Pixel]) -> None:
        self.pixels = _collect_pixels(width, height, pixels)
        self.width = width
        self.height = height

    def pixel(self, i: int, j: int) -> Pixel:
        return self.pixels[j * self.width + i]


class PPMImageSink(ImageSink):
    """
    Writes the image as a plain-text PPM file.
    """
    def __init__(self, path: str):
        self.path = path

    def write(self, width: int, height: int, pixels: Iterable[Pixel]) -> None:
        text = format_ppm(width, height, pixels)
        try:
            with open(self.path, "w", encoding="ascii") as f:
                f.write(text)
        except OSError as e:
            raise ImageSinkError(f"Error writing image {self.path}: {str(e)}") from e


class PNGImageSink(ImageSink):
    """
    Writes the image as a PNG through Pillow.
    PNG channels are 8-bit, so values outside [0, 255] are clipped here.
    """
    def __init__(self, path: str):
        self.path = path

    def write(self, width: int, height: int, pixels: Iterable[Pixel]) -> None:
        collected = _collect_pixels(width, height, pixels)
        data = np.array(collected, dtype=np.int64).reshape(height, width, 3)
        data = data.clip(0, MAX_CHANNEL).astype("uint8")
        directory = os.path.dirname(self.path)
        if directory and not os.path.isdir(directory):
            raise ImageSinkError(f"Output directory not found: {directory}")
        try:
            Image.fromarray(data).save(self.path, format="PNG")
        except OSError as e:
            raise ImageSinkError(f"Error writing image {self.path}: {str(e)}") from e
