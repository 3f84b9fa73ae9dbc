"""
Composing a complete sprite set from a skin and a fallback base skin.

Many skins ship only some of the sheets. Missing sheets are filled in from
a reference skin (normally base-2.91.wsz), following these rules:

    - a sprite taken from the skin is never replaced by a fallback sprite;
    - PLEDIT, EQMAIN and EQ_EX fall back independently of each other;
    - the browse window title (MB.BMP) and window chrome (GEN.BMP) must come
      from the same skin, so a fallback browse title drags GEN.BMP along
      and the skin's own GEN sprites are purged first;
    - a TITLEBAR.BMP without the easter egg rows falls back for those rows,
      and window chrome follows it for the same reason.

The decision is made by plan_fallback(), a pure function over the sprites
extracted so far, so the ordering can be tested without any bitmaps.
"""

import logging
from collections import namedtuple
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

from PIL import Image

from . import catalog
from .archive import SkinSource, read_skin_archive
from .bitmap import MAX_DIMENSION, decode, extract_sheet
from .catalog import Sheet
from .config import SkinConfig, parse_skin_config
from .errors import InvalidBitmapError, MissingRequiredFileError, SkinError
from .genfont import extract_gen_font
from .palette import GenExColors, extract_palette

logger = logging.getLogger(__name__)

REQUIRED_SPRITES = ((catalog.MAIN_WINDOW_BACKGROUND, 'MAIN.BMP (background sprite)'),)

BROWSE_TITLE_SHEET = Sheet.MB
CHROME_SHEET = Sheet.GEN
PALETTE_SHEET = Sheet.GENEX

# Sheets that fall back on their own when their signature sprite is missing
INDEPENDENT_FALLBACKS = (
    (Sheet.PLEDIT, catalog.PLAYLIST_TITLE_BAR),
    (Sheet.EQMAIN, catalog.EQ_WINDOW_BACKGROUND),
    (Sheet.EQ_EX, catalog.EQ_SHADE_BACKGROUND),
)

EASTER_EGG_SPRITES = (
    catalog.MAIN_EASTER_EGG_TITLE_BAR,
    catalog.MAIN_EASTER_EGG_TITLE_BAR_SELECTED,
)


class FallbackStep(namedtuple('FallbackStep', 'sheet purge')):
    """
    One sheet to take from the fallback skin.

    purge: drop the sprites already extracted from the skin's own copy of
    the sheet before any fallback sprite is merged.
    """

    __slots__ = ()


@dataclass(frozen=True)
class SkinData:
    """
    Everything extracted from one skin load.

    The sprite mapping is read-only, but the Pillow images in it are not
    frozen. Callers must treat them as shared and copy() before drawing on
    one.
    """

    sprites: Mapping[str, Image.Image]
    config: SkinConfig = SkinConfig.DEFAULT
    genex_colors: Optional[GenExColors] = None
    has_native_easter_egg_titlebar: bool = False

    def __post_init__(self):
        if not isinstance(self.sprites, MappingProxyType):
            object.__setattr__(self, 'sprites', MappingProxyType(dict(self.sprites)))

    def __getitem__(self, sprite):
        return self.sprites.get(sprite)

    def __contains__(self, sprite):
        return sprite in self.sprites

    def __len__(self):
        return len(self.sprites)


def plan_fallback(sprites):
    """
    Decide which sheets to load from the fallback skin.

    Returns an ordered tuple of FallbackStep. Each rule is evaluated on its
    own against the sprites extracted from the skin.
    """
    steps = {}

    for sheet, signature in INDEPENDENT_FALLBACKS:
        if signature not in sprites:
            steps[sheet] = False

    chrome_purged = False
    if catalog.MB_TITLE_BAR not in sprites:
        # Browse title from the base skin: chrome must match it
        steps[BROWSE_TITLE_SHEET] = False
        steps[CHROME_SHEET] = True
        chrome_purged = True
    elif catalog.GEN_TOP_LEFT_SELECTED not in sprites:
        steps[CHROME_SHEET] = False

    if not all(sprite in sprites for sprite in EASTER_EGG_SPRITES):
        steps[Sheet.TITLEBAR] = False
        if not chrome_purged:
            # Re-inserted so chrome stays after the titlebar step
            steps.pop(CHROME_SHEET, None)
            steps[CHROME_SHEET] = True

    return tuple(FallbackStep(sheet, purge) for sheet, purge in steps.items())


def merge_missing(target, sprites):
    """Add sprites whose ids are not in target yet. Returns the number added."""
    added = 0
    for sprite, image in sprites.items():
        if sprite not in target:
            target[sprite] = image
            added += 1
    return added


def purge_sheet(target, sheet):
    """Remove every catalogued sprite of a sheet from target."""
    for sprite in catalog.sprites_in(sheet):
        target.pop(sprite, None)


def _decode_sheet(source, sheet, max_dimension):
    data = source.get(sheet)
    if data is None:
        return None
    try:
        return decode(data, max_dimension=max_dimension)
    except InvalidBitmapError as e:
        logger.debug("%s: %s unusable: %s", source.name or 'skin', sheet.filename, e)
        return None


def _palette_from(image):
    if image is None:
        return None
    try:
        return extract_palette(image)
    except InvalidBitmapError as e:
        logger.debug("GENEX.BMP palette unavailable: %s", e)
        return None


def compose_skin(primary, fallback=None, max_dimension=MAX_DIMENSION):
    """
    Build SkinData from a primary SkinSource and an optional fallback one.

    Raises MissingRequiredFileError when the main window background cannot
    be resolved. Every other bitmap problem only makes assets unavailable.
    """
    sprites = {}
    decoded = {}

    for sheet in Sheet:
        image = _decode_sheet(primary, sheet, max_dimension)
        if image is None:
            continue
        decoded[sheet] = image
        merge_missing(sprites, extract_sheet(image, sheet))

    native_easter_egg = catalog.MAIN_EASTER_EGG_TITLE_BAR_SELECTED in sprites

    fallback_decoded = {}
    if fallback is not None:
        plan = plan_fallback(sprites)
        if plan:
            logger.info("%s: falling back for %s", primary.name or 'skin',
                        ', '.join(step.sheet.filename for step in plan))
            for step in plan:
                if step.purge:
                    purge_sheet(sprites, step.sheet)
            for step in plan:
                image = _decode_sheet(fallback, step.sheet, max_dimension)
                if image is None:
                    continue
                fallback_decoded[step.sheet] = image
                merge_missing(sprites, extract_sheet(image, step.sheet))

    genex_colors = _palette_from(decoded.get(PALETTE_SHEET))
    if genex_colors is None and fallback is not None:
        genex_colors = _palette_from(_decode_sheet(fallback, PALETTE_SHEET, max_dimension))

    chrome = decoded.get(CHROME_SHEET)
    if chrome is not None:
        merge_missing(sprites, extract_gen_font(chrome))
    elif fallback is not None:
        chrome = fallback_decoded.get(CHROME_SHEET)
        if chrome is None:
            chrome = _decode_sheet(fallback, CHROME_SHEET, max_dimension)
        if chrome is not None:
            merge_missing(sprites, extract_gen_font(chrome))

    for sprite, description in REQUIRED_SPRITES:
        if sprite not in sprites:
            raise MissingRequiredFileError(description)

    config = SkinConfig.DEFAULT
    if primary.config_text is not None:
        try:
            config = parse_skin_config(primary.config_text)
        except SkinError as e:
            logger.debug("PLEDIT.TXT ignored: %s", e)

    return SkinData(
        sprites=sprites,
        config=config,
        genex_colors=genex_colors,
        has_native_easter_egg_titlebar=native_easter_egg,
    )


class SkinLoader:
    """
    Loads .wsz skins, filling gaps from a fallback skin.

    fallback_skin: path to (or bytes of) the reference skin, usually
    base-2.91.wsz; None disables fallback entirely. It is only read when a
    skin actually needs it.
    """

    def __init__(self, fallback_skin=None, max_dimension=MAX_DIMENSION):
        self.fallback_skin = fallback_skin
        self.max_dimension = max_dimension

    def load(self, path):
        """Load a skin archive from disk."""
        return self._compose(read_skin_archive(path))

    def load_bytes(self, data, name=None):
        """Load a skin archive held in memory."""
        return self._compose(read_skin_archive(data, name=name))

    def _read_fallback(self):
        if self.fallback_skin is None:
            return None
        try:
            return read_skin_archive(self.fallback_skin)
        except SkinError as e:
            logger.warning("fallback skin unavailable: %s", e)
            return None

    def _compose(self, primary):
        fallback = None
        if self.fallback_skin is not None:
            fallback = _LazySource(self._read_fallback)
        return compose_skin(primary, fallback, max_dimension=self.max_dimension)


class _LazySource:
    """SkinSource stand-in that reads its archive on first access."""

    def __init__(self, reader):
        self._reader = reader
        self._source = None
        self._loaded = False

    def _resolve(self):
        if not self._loaded:
            self._source = self._reader() or SkinSource({})
            self._loaded = True
        return self._source

    @property
    def name(self):
        return self._resolve().name

    @property
    def config_text(self):
        return self._resolve().config_text

    def get(self, sheet):
        return self._resolve().get(sheet)

    def __contains__(self, sheet):
        return sheet in self._resolve()
