"""
Inspect Winamp skins from the command line.

Usage: python -m skinsheets <skin.wsz|dir> [...] [--base base-2.91.wsz] [--dump out]
Example: python -m skinsheets skins/ --base skins/base-2.91.wsz
"""

import argparse
import logging
import os
import sys

from .bitmap import MAX_DIMENSION
from .errors import SkinError
from .loader import SkinLoader

BASE_SKIN_ENV = 'SKINSHEETS_BASE_SKIN'


def find_skins(paths):
    """Expand directories into the .wsz files they contain."""
    skins = []
    for path in paths:
        if os.path.isdir(path):
            for item in sorted(os.listdir(path)):
                if item.lower().endswith('.wsz'):
                    skins.append(os.path.join(path, item))
        else:
            skins.append(path)
    return skins


def describe_skin(skin):
    """Summary lines for one loaded skin."""
    config = skin.config
    lines = [
        f"  sprites: {len(skin)}",
        f"  palette: {'yes' if skin.genex_colors is not None else 'no'}",
        f"  native easter egg titlebar: {'yes' if skin.has_native_easter_egg_titlebar else 'no'}",
        f"  font: {config.font_name}",
        f"  text colours: normal {config.normal_text_color.hex()}"
        f" current {config.current_text_color.hex()}"
        f" bg {config.normal_background_color.hex()}"
        f" selected bg {config.selected_background_color.hex()}",
    ]
    return lines


def dump_sprites(skin, output_dir):
    """Write every sprite as <id>.png under output_dir for inspection."""
    os.makedirs(output_dir, exist_ok=True)
    for sprite, image in sorted(skin.sprites.items()):
        image.save(os.path.join(output_dir, f"{sprite}.png"))
    return len(skin.sprites)


def build_parser():
    parser = argparse.ArgumentParser(
        prog='skinsheets',
        description='Load Winamp classic skins and report the sprites they provide.',
    )
    parser.add_argument('skins', nargs='+', help='.wsz files or directories of them')
    parser.add_argument('--base', default=os.environ.get(BASE_SKIN_ENV),
                        help=f'fallback skin (default: ${BASE_SKIN_ENV})')
    parser.add_argument('--max-dimension', type=int, default=MAX_DIMENSION,
                        help='largest accepted bitmap width or height')
    parser.add_argument('--dump', metavar='DIR',
                        help='write sprites as PNG files under DIR/<skin name>/')
    parser.add_argument('-v', '--verbose', action='count', default=0,
                        help='log fallback decisions (-vv for skipped sprites)')
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format='%(levelname)s %(name)s: %(message)s')

    skins = find_skins(args.skins)
    if not skins:
        print("No skins found")
        sys.exit(1)

    loader = SkinLoader(fallback_skin=args.base, max_dimension=args.max_dimension)

    success_count = 0
    error_count = 0

    for path in skins:
        name = os.path.splitext(os.path.basename(path))[0]
        try:
            skin = loader.load(path)
        except SkinError as e:
            error_count += 1
            print(f"✗ {name}: {e}")
            continue

        success_count += 1
        print(f"✓ {name}")
        for line in describe_skin(skin):
            print(line)

        if args.dump:
            count = dump_sprites(skin, os.path.join(args.dump, name))
            print(f"  wrote {count} sprite(s)")

    if len(skins) > 1:
        print(f"\nLoaded {success_count} skin(s), {error_count} error(s)")

    sys.exit(1 if error_count else 0)
