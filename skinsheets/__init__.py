"""Winamp classic skin (.wsz) sprite extraction with base-skin fallback."""

from .archive import SkinSource, read_skin_archive
from .bitmap import MAX_DIMENSION, Color, crop, decode, extract_sheet, read_pixel
from .catalog import Rect, Sheet
from .config import SkinConfig, parse_skin_config
from .errors import (
    InvalidArchiveError,
    InvalidBitmapError,
    InvalidConfigurationError,
    MissingRequiredFileError,
    SkinError,
    SkinNotFoundError,
)
from .genfont import extract_gen_font
from .loader import SkinData, SkinLoader, compose_skin, plan_fallback
from .palette import GenExColors, extract_palette

__version__ = '0.1.0'
