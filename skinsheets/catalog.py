"""
Static sprite catalog for classic Winamp skins.

Maps every sprite id to the sheet (BMP file) it lives in and the rectangle it
occupies there. Coordinates follow Webamp's skinSprites table:
https://github.com/captbaritone/webamp/blob/master/packages/webamp/js/skinSprites.ts

The tables are built once at import time and exposed read-only.
"""

import enum
from collections import namedtuple
from types import MappingProxyType


class Sheet(enum.Enum):
    """The closed set of bitmap files a skin may contain."""

    MAIN = 'MAIN'
    CBUTTONS = 'CBUTTONS'
    TITLEBAR = 'TITLEBAR'
    POSBAR = 'POSBAR'
    VOLUME = 'VOLUME'
    BALANCE = 'BALANCE'
    SHUFREP = 'SHUFREP'
    PLAYPAUS = 'PLAYPAUS'
    MONOSTER = 'MONOSTER'
    NUMBERS = 'NUMBERS'
    NUMS_EX = 'NUMS_EX'
    TEXT = 'TEXT'
    EQMAIN = 'EQMAIN'
    EQ_EX = 'EQ_EX'
    PLEDIT = 'PLEDIT'
    GEN = 'GEN'
    GENEX = 'GENEX'
    MB = 'MB'

    @property
    def filename(self):
        return f"{self.value}.BMP"

    @classmethod
    def from_filename(cls, filename):
        """Return the sheet for a file name (any case), or None."""
        upper = filename.upper()
        if not upper.endswith('.BMP'):
            return None
        try:
            return cls(upper[:-4])
        except ValueError:
            return None


class Rect(namedtuple('Rect', 'x y width height')):
    """Integer rectangle within a sheet."""

    __slots__ = ()

    @property
    def right(self):
        return self.x + self.width

    @property
    def bottom(self):
        return self.y + self.height

    def fits_within(self, width, height):
        """True when the whole rectangle lies inside a width x height image."""
        return (self.x >= 0 and self.y >= 0 and
                self.right <= width and self.bottom <= height)


# Sprites referenced by the loader's decision logic
MAIN_WINDOW_BACKGROUND = 'MAIN_WINDOW_BACKGROUND'
MAIN_EASTER_EGG_TITLE_BAR = 'MAIN_EASTER_EGG_TITLE_BAR'
MAIN_EASTER_EGG_TITLE_BAR_SELECTED = 'MAIN_EASTER_EGG_TITLE_BAR_SELECTED'
PLAYLIST_TITLE_BAR = 'PLAYLIST_TITLE_BAR'
EQ_WINDOW_BACKGROUND = 'EQ_WINDOW_BACKGROUND'
EQ_SHADE_BACKGROUND = 'EQ_SHADE_BACKGROUND'
GEN_TOP_LEFT_SELECTED = 'GEN_TOP_LEFT_SELECTED'
MB_TITLE_BAR = 'MB_TITLE_BAR'

GEN_FONT_LETTERS = 'ABCDEFGHIJKLMNOPQRSTUVWXYZ'

# TEXT.BMP is a 5x6 character grid. '\0' marks cells we do not map
# (unused cells, the ellipsis and the accented capitals).
TEXT_CHAR_SIZE = (5, 6)
TEXT_ROWS = (
    'ABCDEFGHIJKLMNOPQRSTUVWXYZ"@\0\0 ',
    '0123456789\0.:()-\'!_+\\/[]^&%,=$#',
    '\0\0\0?*',
)


def _text_sprites():
    char_w, char_h = TEXT_CHAR_SIZE
    sprites = {}
    for row, chars in enumerate(TEXT_ROWS):
        for col, char in enumerate(chars):
            if char == '\0':
                continue
            sprites[f"CHARACTER_{ord(char)}"] = Rect(col * char_w, row * char_h, char_w, char_h)
    return sprites


def _gen_title_sprites():
    # Six 25x20 title pieces, selected row at y=0, unselected at y=21
    pieces = ('TOP_LEFT', 'TOP_LEFT_END', 'TOP_CENTER_FILL',
              'TOP_RIGHT_END', 'TOP_LEFT_RIGHT_FILL', 'TOP_RIGHT')
    sprites = {}
    for index, piece in enumerate(pieces):
        sprites[f"GEN_{piece}_SELECTED"] = Rect(index * 26, 0, 25, 20)
    for index, piece in enumerate(pieces):
        sprites[f"GEN_{piece}"] = Rect(index * 26, 21, 25, 20)
    return sprites


def _pledit_button_sprites():
    # Menu buttons are 22x18, the selected variant sits 23px to the right
    columns = (
        (0, ('ADD_URL', 'ADD_DIR', 'ADD_FILE')),
        (54, ('REMOVE_ALL', 'CROP', 'REMOVE_SELECTED', 'REMOVE_MISC')),
        (104, ('INVERT_SELECTION', 'SELECT_ZERO', 'SELECT_ALL')),
        (154, ('SORT_LIST', 'FILE_INFO', 'MISC_OPTIONS')),
        (204, ('NEW_LIST', 'SAVE_LIST', 'LOAD_LIST')),
    )
    sprites = {}
    for x, names in columns:
        for row, name in enumerate(names):
            y = 111 + row * 19
            sprites[f"PLAYLIST_{name}"] = Rect(x, y, 22, 18)
            sprites[f"PLAYLIST_{name}_SELECTED"] = Rect(x + 23, y, 22, 18)
    return sprites


_SHEET_SPRITES = {
    Sheet.MAIN: {
        MAIN_WINDOW_BACKGROUND: Rect(0, 0, 275, 116),
    },
    Sheet.CBUTTONS: {
        'MAIN_PREVIOUS_BUTTON': Rect(0, 0, 23, 18),
        'MAIN_PREVIOUS_BUTTON_ACTIVE': Rect(0, 18, 23, 18),
        'MAIN_PLAY_BUTTON': Rect(23, 0, 23, 18),
        'MAIN_PLAY_BUTTON_ACTIVE': Rect(23, 18, 23, 18),
        'MAIN_PAUSE_BUTTON': Rect(46, 0, 23, 18),
        'MAIN_PAUSE_BUTTON_ACTIVE': Rect(46, 18, 23, 18),
        'MAIN_STOP_BUTTON': Rect(69, 0, 23, 18),
        'MAIN_STOP_BUTTON_ACTIVE': Rect(69, 18, 23, 18),
        'MAIN_NEXT_BUTTON': Rect(92, 0, 22, 18),
        'MAIN_NEXT_BUTTON_ACTIVE': Rect(92, 18, 22, 18),
        'MAIN_EJECT_BUTTON': Rect(114, 0, 22, 16),
        'MAIN_EJECT_BUTTON_ACTIVE': Rect(114, 16, 22, 16),
    },
    Sheet.TITLEBAR: {
        'MAIN_TITLE_BAR': Rect(27, 15, 275, 14),
        'MAIN_TITLE_BAR_SELECTED': Rect(27, 0, 275, 14),
        MAIN_EASTER_EGG_TITLE_BAR: Rect(27, 72, 275, 14),
        MAIN_EASTER_EGG_TITLE_BAR_SELECTED: Rect(27, 57, 275, 14),
        'MAIN_OPTIONS_BUTTON': Rect(0, 0, 9, 9),
        'MAIN_OPTIONS_BUTTON_DEPRESSED': Rect(0, 9, 9, 9),
        'MAIN_MINIMIZE_BUTTON': Rect(9, 0, 9, 9),
        'MAIN_MINIMIZE_BUTTON_DEPRESSED': Rect(9, 9, 9, 9),
        'MAIN_SHADE_BUTTON': Rect(0, 18, 9, 9),
        'MAIN_SHADE_BUTTON_DEPRESSED': Rect(9, 18, 9, 9),
        'MAIN_CLOSE_BUTTON': Rect(18, 0, 9, 9),
        'MAIN_CLOSE_BUTTON_DEPRESSED': Rect(18, 9, 9, 9),
        'MAIN_CLUTTER_BAR_BACKGROUND': Rect(304, 0, 8, 43),
        'MAIN_CLUTTER_BAR_BACKGROUND_DISABLED': Rect(312, 0, 8, 43),
        'MAIN_CLUTTER_BAR_BUTTON_O_SELECTED': Rect(304, 47, 8, 8),
        'MAIN_CLUTTER_BAR_BUTTON_A_SELECTED': Rect(312, 55, 8, 7),
        'MAIN_CLUTTER_BAR_BUTTON_I_SELECTED': Rect(320, 62, 8, 7),
        'MAIN_CLUTTER_BAR_BUTTON_D_SELECTED': Rect(328, 69, 8, 8),
        'MAIN_CLUTTER_BAR_BUTTON_V_SELECTED': Rect(336, 77, 8, 7),
        'MAIN_SHADE_BACKGROUND': Rect(27, 42, 275, 14),
        'MAIN_SHADE_BACKGROUND_SELECTED': Rect(27, 29, 275, 14),
        'MAIN_SHADE_BUTTON_SELECTED': Rect(0, 27, 9, 9),
        'MAIN_SHADE_BUTTON_SELECTED_DEPRESSED': Rect(9, 27, 9, 9),
        'MAIN_SHADE_POSITION_BACKGROUND': Rect(0, 36, 17, 7),
        'MAIN_SHADE_POSITION_THUMB': Rect(20, 36, 3, 7),
        'MAIN_SHADE_POSITION_THUMB_LEFT': Rect(17, 36, 3, 7),
        'MAIN_SHADE_POSITION_THUMB_RIGHT': Rect(23, 36, 3, 7),
    },
    Sheet.POSBAR: {
        'MAIN_POSITION_SLIDER_BACKGROUND': Rect(0, 0, 248, 10),
        'MAIN_POSITION_SLIDER_THUMB': Rect(248, 0, 29, 10),
        'MAIN_POSITION_SLIDER_THUMB_SELECTED': Rect(278, 0, 29, 10),
    },
    Sheet.VOLUME: {
        'MAIN_VOLUME_BACKGROUND': Rect(0, 0, 68, 420),
        'MAIN_VOLUME_THUMB': Rect(15, 422, 14, 11),
        'MAIN_VOLUME_THUMB_SELECTED': Rect(0, 422, 14, 11),
    },
    Sheet.BALANCE: {
        'MAIN_BALANCE_BACKGROUND': Rect(9, 0, 38, 420),
        'MAIN_BALANCE_THUMB': Rect(15, 422, 14, 11),
        'MAIN_BALANCE_THUMB_ACTIVE': Rect(0, 422, 14, 11),
    },
    Sheet.SHUFREP: {
        'MAIN_SHUFFLE_BUTTON': Rect(28, 0, 47, 15),
        'MAIN_SHUFFLE_BUTTON_DEPRESSED': Rect(28, 15, 47, 15),
        'MAIN_SHUFFLE_BUTTON_SELECTED': Rect(28, 30, 47, 15),
        'MAIN_SHUFFLE_BUTTON_SELECTED_DEPRESSED': Rect(28, 45, 47, 15),
        'MAIN_REPEAT_BUTTON': Rect(0, 0, 28, 15),
        'MAIN_REPEAT_BUTTON_DEPRESSED': Rect(0, 15, 28, 15),
        'MAIN_REPEAT_BUTTON_SELECTED': Rect(0, 30, 28, 15),
        'MAIN_REPEAT_BUTTON_SELECTED_DEPRESSED': Rect(0, 45, 28, 15),
        'MAIN_EQ_BUTTON': Rect(0, 61, 23, 12),
        'MAIN_EQ_BUTTON_SELECTED': Rect(0, 73, 23, 12),
        'MAIN_EQ_BUTTON_DEPRESSED': Rect(46, 61, 23, 12),
        'MAIN_EQ_BUTTON_DEPRESSED_SELECTED': Rect(46, 73, 23, 12),
        'MAIN_PLAYLIST_BUTTON': Rect(23, 61, 23, 12),
        'MAIN_PLAYLIST_BUTTON_SELECTED': Rect(23, 73, 23, 12),
        'MAIN_PLAYLIST_BUTTON_DEPRESSED': Rect(69, 61, 23, 12),
        'MAIN_PLAYLIST_BUTTON_DEPRESSED_SELECTED': Rect(69, 73, 23, 12),
    },
    Sheet.PLAYPAUS: {
        'MAIN_PLAYING_INDICATOR': Rect(0, 0, 9, 9),
        'MAIN_PAUSED_INDICATOR': Rect(9, 0, 9, 9),
        'MAIN_STOPPED_INDICATOR': Rect(18, 0, 9, 9),
        'MAIN_NOT_WORKING_INDICATOR': Rect(36, 0, 9, 9),
        'MAIN_WORKING_INDICATOR': Rect(39, 0, 9, 9),
    },
    Sheet.MONOSTER: {
        'MAIN_STEREO': Rect(0, 12, 29, 12),
        'MAIN_STEREO_SELECTED': Rect(0, 0, 29, 12),
        'MAIN_MONO': Rect(29, 12, 27, 12),
        'MAIN_MONO_SELECTED': Rect(29, 0, 27, 12),
    },
    Sheet.NUMBERS: dict(
        [('NO_MINUS_SIGN', Rect(9, 6, 5, 1)), ('MINUS_SIGN', Rect(20, 6, 5, 1))] +
        [(f"DIGIT_{d}", Rect(d * 9, 0, 9, 13)) for d in range(10)]
    ),
    Sheet.NUMS_EX: dict(
        [('NO_MINUS_SIGN_EX', Rect(90, 0, 9, 13)), ('MINUS_SIGN_EX', Rect(99, 0, 9, 13))] +
        [(f"DIGIT_{d}_EX", Rect(d * 9, 0, 9, 13)) for d in range(10)]
    ),
    Sheet.TEXT: _text_sprites(),
    Sheet.PLEDIT: {
        'PLAYLIST_TOP_TILE': Rect(127, 21, 25, 20),
        'PLAYLIST_TOP_LEFT_CORNER': Rect(0, 21, 25, 20),
        PLAYLIST_TITLE_BAR: Rect(26, 21, 100, 20),
        'PLAYLIST_TOP_RIGHT_CORNER': Rect(153, 21, 25, 20),
        'PLAYLIST_TOP_TILE_SELECTED': Rect(127, 0, 25, 20),
        'PLAYLIST_TOP_LEFT_SELECTED': Rect(0, 0, 25, 20),
        'PLAYLIST_TITLE_BAR_SELECTED': Rect(26, 0, 100, 20),
        'PLAYLIST_TOP_RIGHT_CORNER_SELECTED': Rect(153, 0, 25, 20),
        'PLAYLIST_LEFT_TILE': Rect(0, 42, 12, 29),
        'PLAYLIST_RIGHT_TILE': Rect(31, 42, 20, 29),
        'PLAYLIST_BOTTOM_TILE': Rect(179, 0, 25, 38),
        'PLAYLIST_BOTTOM_LEFT_CORNER': Rect(0, 72, 125, 38),
        'PLAYLIST_BOTTOM_RIGHT_CORNER': Rect(126, 72, 150, 38),
        'PLAYLIST_VISUALIZER_BACKGROUND': Rect(205, 0, 75, 38),
        'PLAYLIST_SHADE_BACKGROUND': Rect(72, 57, 25, 14),
        'PLAYLIST_SHADE_BACKGROUND_LEFT': Rect(72, 42, 25, 14),
        'PLAYLIST_SHADE_BACKGROUND_RIGHT': Rect(99, 57, 50, 14),
        'PLAYLIST_SHADE_BACKGROUND_RIGHT_SELECTED': Rect(99, 42, 50, 14),
        'PLAYLIST_SCROLL_HANDLE_SELECTED': Rect(61, 53, 8, 18),
        'PLAYLIST_SCROLL_HANDLE': Rect(52, 53, 8, 18),
        **_pledit_button_sprites(),
        'PLAYLIST_ADD_MENU_BAR': Rect(48, 111, 3, 54),
        'PLAYLIST_REMOVE_MENU_BAR': Rect(100, 111, 3, 72),
        'PLAYLIST_SELECT_MENU_BAR': Rect(150, 111, 3, 54),
        'PLAYLIST_MISC_MENU_BAR': Rect(200, 111, 3, 54),
        'PLAYLIST_LIST_BAR': Rect(250, 111, 3, 54),
        'PLAYLIST_CLOSE_SELECTED': Rect(52, 42, 9, 9),
        'PLAYLIST_COLLAPSE_SELECTED': Rect(62, 42, 9, 9),
        'PLAYLIST_EXPAND_SELECTED': Rect(150, 42, 9, 9),
    },
    Sheet.EQMAIN: {
        EQ_WINDOW_BACKGROUND: Rect(0, 0, 275, 116),
        'EQ_TITLE_BAR': Rect(0, 149, 275, 14),
        'EQ_TITLE_BAR_SELECTED': Rect(0, 134, 275, 14),
        'EQ_SLIDER_BACKGROUND': Rect(13, 164, 209, 129),
        'EQ_SLIDER_THUMB': Rect(0, 164, 11, 11),
        'EQ_SLIDER_THUMB_SELECTED': Rect(0, 176, 11, 11),
        'EQ_CLOSE_BUTTON': Rect(0, 116, 9, 9),
        'EQ_CLOSE_BUTTON_ACTIVE': Rect(0, 125, 9, 9),
        'EQ_MAXIMIZE_BUTTON_ACTIVE_FALLBACK': Rect(254, 152, 9, 9),
        'EQ_ON_BUTTON': Rect(10, 119, 26, 12),
        'EQ_ON_BUTTON_DEPRESSED': Rect(128, 119, 26, 12),
        'EQ_ON_BUTTON_SELECTED': Rect(69, 119, 26, 12),
        'EQ_ON_BUTTON_SELECTED_DEPRESSED': Rect(187, 119, 26, 12),
        'EQ_AUTO_BUTTON': Rect(36, 119, 32, 12),
        'EQ_AUTO_BUTTON_DEPRESSED': Rect(154, 119, 32, 12),
        'EQ_AUTO_BUTTON_SELECTED': Rect(95, 119, 32, 12),
        'EQ_AUTO_BUTTON_SELECTED_DEPRESSED': Rect(213, 119, 32, 12),
        'EQ_GRAPH_BACKGROUND': Rect(0, 294, 113, 19),
        'EQ_GRAPH_LINE_COLORS': Rect(115, 294, 1, 19),
        'EQ_PRESETS_BUTTON': Rect(224, 164, 44, 12),
        'EQ_PRESETS_BUTTON_SELECTED': Rect(224, 176, 44, 12),
        'EQ_PREAMP_LINE': Rect(0, 314, 113, 1),
    },
    Sheet.EQ_EX: {
        'EQ_SHADE_BACKGROUND_SELECTED': Rect(0, 0, 275, 14),
        EQ_SHADE_BACKGROUND: Rect(0, 15, 275, 14),
        'EQ_SHADE_VOLUME_SLIDER_LEFT': Rect(1, 30, 3, 7),
        'EQ_SHADE_VOLUME_SLIDER_CENTER': Rect(4, 30, 3, 7),
        'EQ_SHADE_VOLUME_SLIDER_RIGHT': Rect(7, 30, 3, 7),
        'EQ_SHADE_BALANCE_SLIDER_LEFT': Rect(11, 30, 3, 7),
        'EQ_SHADE_BALANCE_SLIDER_CENTER': Rect(14, 30, 3, 7),
        'EQ_SHADE_BALANCE_SLIDER_RIGHT': Rect(17, 30, 3, 7),
        'EQ_MAXIMIZE_BUTTON_ACTIVE': Rect(1, 38, 9, 9),
        'EQ_MINIMIZE_BUTTON_ACTIVE': Rect(1, 47, 9, 9),
        'EQ_SHADE_CLOSE_BUTTON': Rect(11, 38, 9, 9),
        'EQ_SHADE_CLOSE_BUTTON_ACTIVE': Rect(11, 47, 9, 9),
    },
    Sheet.GEN: {
        **_gen_title_sprites(),
        'GEN_BOTTOM_LEFT': Rect(0, 42, 125, 14),
        'GEN_BOTTOM_RIGHT': Rect(0, 57, 125, 14),
        'GEN_BOTTOM_FILL': Rect(127, 72, 25, 14),
        'GEN_MIDDLE_LEFT': Rect(127, 42, 11, 29),
        'GEN_MIDDLE_LEFT_BOTTOM': Rect(158, 42, 11, 24),
        'GEN_MIDDLE_RIGHT': Rect(139, 42, 8, 29),
        'GEN_MIDDLE_RIGHT_BOTTOM': Rect(170, 42, 8, 24),
        'GEN_CLOSE_SELECTED': Rect(148, 42, 9, 9),
    },
    # GENEX.BMP only feeds the colour palette
    Sheet.GENEX: {},
    # Browse window title pieces, laid out like PLEDIT's top row
    Sheet.MB: {
        'MB_TOP_LEFT': Rect(0, 0, 25, 20),
        MB_TITLE_BAR: Rect(26, 0, 100, 20),
        'MB_TOP_FILL': Rect(127, 0, 25, 20),
        'MB_TOP_RIGHT': Rect(153, 0, 25, 20),
        'MB_MIDDLE_LEFT': Rect(0, 21, 11, 29),
        'MB_MIDDLE_RIGHT': Rect(12, 21, 8, 29),
        'MB_BOTTOM_LEFT': Rect(0, 51, 125, 14),
        'MB_BOTTOM_FILL': Rect(126, 51, 25, 14),
        'MB_BOTTOM_RIGHT': Rect(0, 66, 125, 14),
    },
}


def _gen_text_ids():
    ids = [f"GEN_TEXT_SELECTED_{letter}" for letter in GEN_FONT_LETTERS]
    ids += [f"GEN_TEXT_{letter}" for letter in GEN_FONT_LETTERS]
    return tuple(ids)


GEN_TEXT_SPRITES = _gen_text_ids()

SHEET_SPRITES = MappingProxyType({
    sheet: MappingProxyType(sprites) for sheet, sprites in _SHEET_SPRITES.items()
})

SPRITE_SHEETS = MappingProxyType(dict(
    [(sprite, sheet) for sheet, sprites in _SHEET_SPRITES.items() for sprite in sprites] +
    [(sprite, Sheet.GEN) for sprite in GEN_TEXT_SPRITES]
))

CHARACTER_SPRITES = MappingProxyType({
    char: f"CHARACTER_{ord(char)}"
    for chars in TEXT_ROWS for char in chars if char != '\0'
})


def sheet_for(sprite):
    """Return the Sheet holding a sprite id, or None."""
    return SPRITE_SHEETS.get(sprite)


def region_for(sprite):
    """Return the catalogued Rect of a sprite id, or None (glyphs have none)."""
    sheet = SPRITE_SHEETS.get(sprite)
    if sheet is None:
        return None
    return SHEET_SPRITES[sheet].get(sprite)


def sprites_in(sheet):
    """Sprite ids with a catalogued rectangle in a sheet, in table order."""
    return tuple(SHEET_SPRITES[sheet])


def character_sprite(char):
    """Return the TEXT.BMP sprite id for a character, or None."""
    return CHARACTER_SPRITES.get(char.upper() if char.isalpha() else char)


def gen_text_sprite(letter, selected):
    """Return the GEN.BMP glyph id for a letter A-Z."""
    letter = letter.upper()
    if len(letter) != 1 or letter not in GEN_FONT_LETTERS:
        return None
    if selected:
        return f"GEN_TEXT_SELECTED_{letter}"
    return f"GEN_TEXT_{letter}"


def sheet_extent(sheet):
    """Smallest (width, height) that holds every rectangle of a sheet."""
    regions = SHEET_SPRITES[sheet].values()
    if not regions:
        return (0, 0)
    return (max(r.right for r in regions), max(r.bottom for r in regions))
