"""
PLEDIT.TXT parsing.

PLEDIT.TXT is a Windows INI style file. The [Text] section holds the
playlist colours and font:

    [Text]
    Normal=#00FF00
    Current=#FFFFFF
    NormalBG=#000000
    SelectedBG=#0000C6
    Font=Arial
"""

import re
from dataclasses import dataclass

from .bitmap import Color
from .errors import InvalidConfigurationError

TEXT_SECTION = 'Text'

HEX_COLOR = re.compile(r'[0-9a-fA-F]{6}')


class IniDocument:
    """Sections of key=value pairs parsed from INI text."""

    def __init__(self, sections=None):
        self.sections = sections or {}

    @classmethod
    def parse(cls, text):
        sections = {}
        current = None

        for line in text.splitlines():
            stripped = line.strip()

            # Skip empty lines and comments
            if not stripped or stripped.startswith((';', '#')):
                continue

            if stripped.startswith('[') and stripped.endswith(']'):
                current = stripped[1:-1]
                sections.setdefault(current, {})
                continue

            if '=' in stripped:
                if current is None:
                    # No section opened yet, nowhere to put it
                    continue
                key, value = stripped.split('=', 1)
                sections[current][key.strip()] = value.strip()

        return cls(sections)

    def value(self, section, key):
        return self.sections.get(section, {}).get(key)

    def section(self, name):
        return dict(self.sections.get(name, {}))


def parse_color(text):
    """
    Parse a hex colour: #RRGGBB, RRGGBB, #RGB or RGB (any case).

    Returns a Color, or None when the text is not one of those forms.
    """
    hex_digits = text.strip()
    if hex_digits.startswith('#'):
        hex_digits = hex_digits[1:]
    if len(hex_digits) == 3:
        hex_digits = ''.join(c * 2 for c in hex_digits)
    if not HEX_COLOR.fullmatch(hex_digits):
        return None
    rgb = int(hex_digits, 16)
    return Color.from_rgb8((rgb >> 16) & 0xFF, (rgb >> 8) & 0xFF, rgb & 0xFF)


@dataclass(frozen=True)
class SkinConfig:
    normal_text_color: Color = Color(0.0, 1.0, 0.0)
    current_text_color: Color = Color(1.0, 1.0, 1.0)
    normal_background_color: Color = Color(0.0, 0.0, 0.0)
    selected_background_color: Color = Color(0.0, 0.0, 0.5)
    font_name: str = 'Arial'


SkinConfig.DEFAULT = SkinConfig()


def extract_skin_config(document):
    """Build a SkinConfig from the [Text] section, defaulting each field on its own."""
    text = document.section(TEXT_SECTION)
    default = SkinConfig.DEFAULT

    def color(key, fallback):
        raw = text.get(key)
        parsed = parse_color(raw) if raw is not None else None
        return parsed if parsed is not None else fallback

    return SkinConfig(
        normal_text_color=color('Normal', default.normal_text_color),
        current_text_color=color('Current', default.current_text_color),
        normal_background_color=color('NormalBG', default.normal_background_color),
        selected_background_color=color('SelectedBG', default.selected_background_color),
        font_name=text.get('Font', default.font_name),
    )


def parse_skin_config(raw):
    """
    Parse PLEDIT.TXT content (bytes or str) into a SkinConfig.

    Raises InvalidConfigurationError if bytes are not valid UTF-8.
    """
    if isinstance(raw, bytes):
        try:
            raw = raw.decode('utf-8-sig')
        except UnicodeDecodeError as e:
            raise InvalidConfigurationError(f"PLEDIT.TXT is not UTF-8: {e}") from e
    return extract_skin_config(IniDocument.parse(raw))
