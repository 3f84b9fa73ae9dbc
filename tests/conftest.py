import io
import struct
import zipfile

from PIL import Image

from skinsheets.archive import SkinSource
from skinsheets.catalog import Sheet, sheet_extent

RED = (255, 0, 0)
BLUE = (0, 0, 255)
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)

# Sheets whose useful area goes beyond their catalogued rectangles
SHEET_SIZES = {
    Sheet.GEN: (sheet_extent(Sheet.GEN)[0], 104),  # font rows at y=88 and y=96
    Sheet.GENEX: (100, 4),                         # palette row up to x=90
}


def image_bytes(image, format='BMP'):
    buffer = io.BytesIO()
    image.save(buffer, format=format)
    return buffer.getvalue()


def bmp_bytes(width, height, color=BLACK):
    return image_bytes(Image.new('RGB', (width, height), color))


def sheet_size(sheet):
    return SHEET_SIZES.get(sheet) or sheet_extent(sheet)


def sheet_bmp(sheet, color, size=None):
    width, height = size or sheet_size(sheet)
    return bmp_bytes(width, height, color)


def make_source(sheets, color=RED, config_text=None, name=None, sizes=None):
    """SkinSource with each listed sheet filled with one solid colour."""
    sizes = sizes or {}
    bitmaps = {sheet: sheet_bmp(sheet, color, sizes.get(sheet)) for sheet in sheets}
    return SkinSource(bitmaps, config_text=config_text, name=name)


def make_wsz(files):
    """Zip {entry name: bytes} into .wsz bytes."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, 'w') as archive:
        for name, data in files.items():
            archive.writestr(name, data)
    return buffer.getvalue()


def mark_encrypted(data, entry):
    """Set the encrypted flag on one entry's central directory record."""
    data = bytearray(data)
    name = entry.encode()
    start = data.find(b'PK\x01\x02')
    while start != -1:
        name_length = struct.unpack_from('<H', data, start + 28)[0]
        if bytes(data[start + 46:start + 46 + name_length]) == name:
            flags = struct.unpack_from('<H', data, start + 8)[0]
            struct.pack_into('<H', data, start + 8, flags | 0x1)
            return bytes(data)
        start = data.find(b'PK\x01\x02', start + 4)
    raise KeyError(entry)


def gen_font_image(glyph_width=2, rows=(88, 96), background=BLACK, ink=WHITE):
    """GEN.BMP-sized image with 26 glyphs per font row, each glyph_width wide."""
    width = 1 + 26 * (glyph_width + 1)
    image = Image.new('RGB', (max(width, sheet_size(Sheet.GEN)[0]), 104), background)
    for row_y in rows:
        x = 1
        for _ in range(26):
            for gx in range(x, x + glyph_width):
                for gy in range(row_y, row_y + 7):
                    image.putpixel((gx, gy), ink)
            x += glyph_width + 1
    return image


ALL_SHEETS = tuple(Sheet)
