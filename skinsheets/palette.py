"""
GENEX.BMP colour palette.

GENEX.BMP stores 22 colours as single pixels along its top row, one every
other column starting at x=48. They style general purpose windows such as
the browse window.
"""

import dataclasses
from dataclasses import dataclass

from .bitmap import Color, read_pixel

PALETTE_ROW = 0
PALETTE_FIRST_X = 48
PALETTE_STEP = 2


@dataclass(frozen=True)
class GenExColors:
    item_background: Color                      # x=48
    item_foreground: Color                      # x=50
    window_background: Color                    # x=52
    button_text: Color                          # x=54
    window_text: Color                          # x=56
    divider: Color                              # x=58
    playlist_selection: Color                   # x=60
    list_header_background: Color               # x=62
    list_header_text: Color                     # x=64
    list_header_frame_top_and_left: Color       # x=66
    list_header_frame_bottom_and_right: Color   # x=68
    list_header_frame_pressed: Color            # x=70
    list_header_dead_area: Color                # x=72
    scrollbar_one: Color                        # x=74
    scrollbar_two: Color                        # x=76
    pressed_scrollbar_one: Color                # x=78
    pressed_scrollbar_two: Color                # x=80
    scrollbar_dead_area: Color                  # x=82
    list_text_highlighted: Color                # x=84
    list_text_highlighted_background: Color     # x=86
    list_text_selected: Color                   # x=88
    list_text_selected_background: Color        # x=90


PALETTE_FIELDS = tuple(f.name for f in dataclasses.fields(GenExColors))
PALETTE_X_COORDINATES = tuple(
    PALETTE_FIRST_X + PALETTE_STEP * index for index in range(len(PALETTE_FIELDS))
)


def extract_palette(image):
    """
    Sample the 22 palette colours from a decoded GENEX.BMP.

    All or nothing: if any sample falls outside the image the
    InvalidBitmapError propagates and no palette is produced.
    """
    colors = [read_pixel(image, x, PALETTE_ROW) for x in PALETTE_X_COORDINATES]
    return GenExColors(*colors)


def _gray(level):
    return Color(level, level, level)


_BLACK = _gray(0.0)
_WHITE = _gray(1.0)
_GREEN = Color(0.0, 1.0, 0.0)
_NAVY = Color(0.0, 0.0, 0.5)

# Classic colours matching base-2.91, for callers with no palette at all
GenExColors.DEFAULT = GenExColors(
    item_background=_BLACK,
    item_foreground=_GREEN,
    window_background=_BLACK,
    button_text=_GREEN,
    window_text=_GREEN,
    divider=_gray(0.3),
    playlist_selection=_NAVY,
    list_header_background=_gray(0.3),
    list_header_text=_GREEN,
    list_header_frame_top_and_left=_gray(0.5),
    list_header_frame_bottom_and_right=_gray(0.2),
    list_header_frame_pressed=_gray(0.4),
    list_header_dead_area=_gray(0.3),
    scrollbar_one=_gray(0.3),
    scrollbar_two=_gray(0.3),
    pressed_scrollbar_one=_gray(0.4),
    pressed_scrollbar_two=_gray(0.4),
    scrollbar_dead_area=_gray(0.2),
    list_text_highlighted=_WHITE,
    list_text_highlighted_background=_NAVY,
    list_text_selected=_WHITE,
    list_text_selected_background=_NAVY,
)
