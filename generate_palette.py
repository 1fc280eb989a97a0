#!/usr/bin/env python3
"""Generate luminance-matched OKLCH color ramps and export them."""

import argparse
import re
import sys
from pathlib import Path

from default_palettes import get_default_palettes
from export import export_css, export_json, render_html, render_text, visualize_ramps
from ramp import generate_ramp
from storage import load_ramps, save_ramps
from url_state import write_ramps_to_url


HEX_INPUT_PATTERN = re.compile(r'#?[0-9A-Fa-f]{6}')


def parse_base(value: str) -> str:
    """Validate a hex argument and normalize it to '#RRGGBB'."""
    if not HEX_INPUT_PATTERN.fullmatch(value):
        raise argparse.ArgumentTypeError(f"not a 6-digit hex color: {value!r}")
    return '#' + value.lstrip('#').upper()


def main():
    parser = argparse.ArgumentParser(
        description='Generate OKLCH color ramps with matching contrast across hues.'
    )
    parser.add_argument(
        '--base', '-b',
        type=parse_base,
        action='append',
        default=[],
        help='Base color as #RRGGBB. Repeat for several ramps.'
    )
    parser.add_argument(
        '--name', '-n',
        action='append',
        default=[],
        help='Ramp name, one per --base. Defaults to the hex value.'
    )
    parser.add_argument(
        '--defaults',
        action='store_true',
        help='Include the built-in ramps'
    )
    parser.add_argument(
        '--load',
        help='Include ramps from a saved JSON file'
    )
    parser.add_argument(
        '--html',
        nargs='?',
        const='palette.html',
        default=None,
        help='Write an HTML report (default: palette.html)'
    )
    parser.add_argument('--css', help='Write CSS custom properties to this path')
    parser.add_argument('--json', help='Write a JSON export to this path')
    parser.add_argument('--png', help='Write a swatch image to this path')
    parser.add_argument('--save', help='Save ramps (reloadable with --load) to this path')
    parser.add_argument('--url', help='Print a shareable URL built on this base URL')

    args = parser.parse_args()

    if len(args.name) > len(args.base):
        print("Error: more --name values than --base values", file=sys.stderr)
        sys.exit(2)

    ramps = []
    if args.defaults:
        ramps.extend(get_default_palettes())
    if args.load:
        loaded = load_ramps(Path(args.load))
        if loaded is None:
            print(f"Error: no ramps could be loaded from {args.load}", file=sys.stderr)
            sys.exit(2)
        ramps.extend(loaded)

    names = args.name + [None] * (len(args.base) - len(args.name))
    for base_hex, name in zip(args.base, names):
        ramps.append(generate_ramp(name or base_hex, base_hex, is_saved=True))

    if not ramps:
        print("Error: nothing to generate, pass --base, --defaults or --load", file=sys.stderr)
        sys.exit(2)

    # Always print the table to the terminal
    print(render_text(ramps))

    outputs = [
        (args.html, lambda: render_html(ramps)),
        (args.css, lambda: export_css(ramps)),
        (args.json, lambda: export_json(ramps)),
    ]

    try:
        for path, render in outputs:
            if path:
                Path(path).write_text(render())
                print(f"Wrote: {path}")
        if args.png:
            visualize_ramps(ramps, args.png)
        if args.save:
            save_ramps(ramps, Path(args.save))
            print(f"Saved {len(ramps)} ramps to {args.save}")
    except OSError as e:
        print(f"Error writing output: {e}", file=sys.stderr)
        sys.exit(1)

    if args.url:
        print(write_ramps_to_url(args.url, ramps))


if __name__ == '__main__':
    main()
