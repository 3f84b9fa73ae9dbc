"""
Variable-width GEN.BMP font extraction.

GEN.BMP carries two rows of A-Z glyphs used for general window titles:
    y=88: selected/highlighted characters
    y=96: normal characters

Glyph widths vary. Boundaries are found by scanning for the row's
background colour (sampled at x=0); glyphs are separated by one background
column. Same approach as Webamp's genGenTextSprites().
"""

import logging

from .bitmap import colors_match, crop, read_pixel
from .catalog import GEN_FONT_LETTERS, Rect, gen_text_sprite
from .errors import InvalidBitmapError

logger = logging.getLogger(__name__)

FONT_HEIGHT = 7
FONT_ROWS = ((88, True), (96, False))


def scan_glyph_row(image, row_y):
    """
    Locate the glyph rectangles of one font row.

    Returns a list of (letter, Rect) for letters with a non-empty run of
    foreground columns. Letters whose run has zero width are left out but
    still consume their separator column. Returns [] when the row does not
    fit in the image.
    """
    if row_y + FONT_HEIGHT > image.height:
        return []

    background = read_pixel(image, 0, row_y)
    glyphs = []
    x = 1  # skip the 1px background margin

    for letter in GEN_FONT_LETTERS:
        end = x
        while end < image.width:
            if colors_match(background, read_pixel(image, end, row_y)):
                break
            end += 1

        width = end - x
        if width > 0:
            glyphs.append((letter, Rect(x, row_y, width, FONT_HEIGHT)))
        # TODO: confirm whether dropping zero-width letters is wanted for
        # skins that leave gaps in the font strip
        x = end + 1

    return glyphs


def extract_gen_font(image):
    """Slice both GEN.BMP font rows into up to 52 glyph sprites."""
    sprites = {}
    for row_y, selected in FONT_ROWS:
        rows = scan_glyph_row(image, row_y)
        if not rows:
            logger.debug("GEN.BMP font row y=%d missing or empty", row_y)
        for letter, rect in rows:
            try:
                sprites[gen_text_sprite(letter, selected)] = crop(image, rect)
            except InvalidBitmapError as e:
                logger.debug("GEN.BMP glyph %s skipped: %s", letter, e)
    return sprites
