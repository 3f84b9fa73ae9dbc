"""
Reading .wsz skin archives.

A .wsz file is a plain ZIP. The bitmaps sit either at the root or inside a
single top-level folder, with names in any case (main.bmp, Main.BMP, ...).
Archives are read in memory; nothing is written to disk.
"""

import io
import logging
import os
import posixpath
import zipfile
import zlib

from .catalog import Sheet
from .errors import InvalidArchiveError, SkinNotFoundError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = 'PLEDIT.TXT'

# Resource forks added by macOS zip tools
IGNORED_PREFIXES = ('__MACOSX/',)


class SkinSource:
    """
    The files of one skin: sheet -> BMP bytes, plus optional PLEDIT.TXT.
    """

    def __init__(self, bitmaps, config_text=None, name=None):
        self.bitmaps = dict(bitmaps)
        self.config_text = config_text
        self.name = name

    @classmethod
    def from_files(cls, files, name=None):
        """
        Build a source from a {filename: bytes} mapping.

        Names are matched case-insensitively; the first file seen for a
        sheet wins. Unrecognised files are ignored.
        """
        bitmaps = {}
        config_text = None
        for filename, data in files.items():
            basename = posixpath.basename(filename)
            sheet = Sheet.from_filename(basename)
            if sheet is not None:
                bitmaps.setdefault(sheet, data)
            elif basename.upper() == CONFIG_FILENAME and config_text is None:
                config_text = data
        return cls(bitmaps, config_text, name)

    def __contains__(self, sheet):
        return sheet in self.bitmaps

    def get(self, sheet):
        return self.bitmaps.get(sheet)

    def __repr__(self):
        sheets = ', '.join(sorted(s.value for s in self.bitmaps))
        return f"SkinSource({self.name!r}, [{sheets}])"


def _safe_entry_name(name):
    """Normalise an entry name, raising InvalidArchiveError if it escapes the root."""
    normalized = name.replace('\\', '/')
    if normalized.startswith('/') or (len(normalized) > 1 and normalized[1] == ':'):
        raise InvalidArchiveError(f"archive entry escaped destination directory: {name}")
    normalized = posixpath.normpath(normalized)
    if normalized == '..' or normalized.startswith('../'):
        raise InvalidArchiveError(f"archive entry escaped destination directory: {name}")
    return normalized


def _has_bitmap(names):
    return any(Sheet.from_filename(n) is not None for n in names)


def _is_skin_file(basename):
    return Sheet.from_filename(basename) is not None or basename.upper() == CONFIG_FILENAME


def find_skin_files(names):
    """
    Pick the entries that make up the skin from a list of entry names.

    Uses the root if it holds a recognised bitmap, otherwise the single
    top-level folder if that does, otherwise the root. Returns
    {basename: entry name} for the recognised bitmaps and PLEDIT.TXT at
    the chosen level, in archive order.
    """
    root = {n: n for n in names if '/' not in n}
    if not _has_bitmap(root):
        folders = {n.split('/', 1)[0] for n in names if '/' in n}
        if len(folders) == 1:
            prefix = folders.pop() + '/'
            nested = {
                n[len(prefix):]: n for n in names
                if n.startswith(prefix) and '/' not in n[len(prefix):]
            }
            if _has_bitmap(nested):
                root = nested

    return {basename: n for basename, n in root.items() if _is_skin_file(basename)}


def read_skin_archive(source, name=None):
    """
    Read a skin archive from a path or raw bytes into a SkinSource.

    Raises SkinNotFoundError for a missing path and InvalidArchiveError for
    unreadable archives or entries that escape the archive root.
    """
    if isinstance(source, (bytes, bytearray)):
        stream = io.BytesIO(source)
    else:
        path = os.fspath(source)
        if not os.path.isfile(path):
            raise SkinNotFoundError(path)
        stream = path
        if name is None:
            name = os.path.splitext(os.path.basename(path))[0]

    files = {}
    try:
        with zipfile.ZipFile(stream) as archive:
            infos = {}
            for info in archive.infolist():
                entry = _safe_entry_name(info.filename)
                if info.is_dir() or entry.startswith(IGNORED_PREFIXES):
                    continue
                infos.setdefault(entry, info)

            # Only the skin's own files are decompressed
            for basename, entry in find_skin_files(list(infos)).items():
                files[basename] = archive.read(infos[entry])
    except (zipfile.BadZipFile, zipfile.LargeZipFile, zlib.error,
            NotImplementedError, RuntimeError, OSError, EOFError) as e:
        # RuntimeError: encrypted entry, no password
        raise InvalidArchiveError(str(e)) from e

    logger.debug("%s: %d file(s) in skin directory", name or '<bytes>', len(files))
    return SkinSource.from_files(files, name=name)
