"""
Bitmap decoding, cropping and pixel sampling for skin sheets.

Every decoded sheet is normalised to an RGB Pillow image so pixel reads
return the same shape whatever the BMP's bit depth was.
"""

import io
import logging
from collections import namedtuple

from PIL import Image

from .catalog import SHEET_SPRITES
from .errors import InvalidBitmapError

logger = logging.getLogger(__name__)

# The largest legitimate sprite sheet is about 800px wide; anything beyond
# this is treated as a decompression bomb from an untrusted archive.
MAX_DIMENSION = 4096

# Two colours match when every channel differs by less than this
COLOR_TOLERANCE = 0.01


class Color(namedtuple('Color', 'red green blue')):
    """sRGB colour with channels in [0, 1]."""

    __slots__ = ()

    @classmethod
    def from_rgb8(cls, r, g, b):
        return cls(r / 255.0, g / 255.0, b / 255.0)

    def to_rgb8(self):
        return tuple(int(round(c * 255)) for c in self)

    def hex(self):
        return '#%02x%02x%02x' % self.to_rgb8()


def decode(data, max_dimension=MAX_DIMENSION):
    """
    Decode raw bitmap bytes into an RGB image.

    The dimensions are checked from the header before pixel data is read.
    Raises InvalidBitmapError for unreadable data and for sizes of 0 or
    above max_dimension on either axis.
    """
    try:
        image = Image.open(io.BytesIO(data))
    except (OSError, ValueError, SyntaxError, Image.DecompressionBombError) as e:
        raise InvalidBitmapError(f"failed to create image source: {e}") from e

    width, height = image.size
    if width <= 0 or height <= 0:
        raise InvalidBitmapError(f"image dimensions {width}x{height} are empty")
    if width > max_dimension or height > max_dimension:
        raise InvalidBitmapError(
            f"image dimensions {width}x{height} exceed maximum {max_dimension}x{max_dimension}"
        )

    try:
        return image.convert('RGB')
    except (OSError, ValueError, SyntaxError, Image.DecompressionBombError) as e:
        raise InvalidBitmapError(f"failed to create image from source: {e}") from e


def crop(image, rect):
    """
    Crop a rectangle out of an image as an independent copy.

    A rectangle that only partly overlaps the image is clamped to the
    overlap. One with no overlap at all raises InvalidBitmapError.
    """
    left = max(rect.x, 0)
    top = max(rect.y, 0)
    right = min(rect.x + rect.width, image.width)
    bottom = min(rect.y + rect.height, image.height)
    if right <= left or bottom <= top:
        raise InvalidBitmapError(f"failed to crop sprite at {tuple(rect)}")
    return image.crop((left, top, right, bottom))


def extract_sheet(image, sheet):
    """
    Crop every catalogued sprite of a sheet out of its decoded image.

    Sprites whose rectangle does not fit entirely inside the image are
    skipped, so undersized or hand-edited sheets still contribute whatever
    does fit.
    """
    sprites = {}
    for sprite, rect in SHEET_SPRITES[sheet].items():
        if not rect.fits_within(image.width, image.height):
            logger.debug("%s: %s does not fit in %dx%d, skipped",
                         sheet.filename, sprite, image.width, image.height)
            continue
        try:
            sprites[sprite] = crop(image, rect)
        except InvalidBitmapError as e:
            logger.debug("%s: %s skipped: %s", sheet.filename, sprite, e)
    return sprites


def read_pixel(image, x, y):
    """Read one pixel as a Color. Raises InvalidBitmapError when out of bounds."""
    if not (0 <= x < image.width and 0 <= y < image.height):
        raise InvalidBitmapError(
            f"pixel ({x}, {y}) out of bounds ({image.width}x{image.height})"
        )
    pixel = image.getpixel((x, y))
    if isinstance(pixel, int):
        # Single band images
        return Color.from_rgb8(pixel, pixel, pixel)
    r, g, b = pixel[:3]
    return Color.from_rgb8(r, g, b)


def colors_match(a, b, tolerance=COLOR_TOLERANCE):
    """Compare two colours channel by channel."""
    return (abs(a.red - b.red) < tolerance and
            abs(a.green - b.green) < tolerance and
            abs(a.blue - b.blue) < tolerance)

