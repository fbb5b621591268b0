#!/usr/bin/env python
"""
Pixel Bleed CLI - Fill transparent texture padding from the nearest opaque pixel

Usage:
    python main.py <input_image> [options]

Examples:
    python main.py atlas.png                          # Bleed in place
    python main.py atlas.png -o atlas_padded.png      # Write elsewhere
    python main.py tile.png --edge-mode repeat        # Tiling texture
    python main.py mask.png --output-as distance      # Distance field
"""

import argparse
import sys
from pathlib import Path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Fill transparent texture padding from the nearest opaque pixel",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Edge Modes:
  clamp     - Lookups past the border read the border pixel
  repeat    - Lookups wrap around (for tiling textures)
  zero      - Lookups past the border find nothing (default)

Output Modes:
  bleed     - Copy the nearest opaque colour, fully opaque (default)
  coverage  - White where an opaque pixel was reached, black elsewhere
  uv        - Nearest opaque pixel position as red (x) / green (y)
  distance  - Grayscale, 255 on opaque pixels fading over 255 pixels

Examples:
  %(prog)s atlas.png                         # Overwrites atlas.png
  %(prog)s atlas.png -o padded.png --preserve-above 127
  %(prog)s atlas.png --preset uv_lookup -o atlas_uv.png
  %(prog)s --list-presets
        """
    )

    parser.add_argument(
        'input',
        type=str,
        nargs='?',  # Optional for --list-presets
        default=None,
        help='Input image (PNG, TGA, WebP, etc.)'
    )

    parser.add_argument(
        '-o', '--output',
        type=str,
        default=None,
        help='Output path (default: overwrite the input)'
    )

    parser.add_argument(
        '--preserve-above',
        type=int,
        default=None,
        metavar='ALPHA',
        help='Keep pixels with alpha above this value 0-255 (default: 0)'
    )

    parser.add_argument(
        '--edge-mode',
        type=str,
        default=None,
        choices=['clamp', 'repeat', 'zero'],
        help='Edge behaviour (default: zero)'
    )

    parser.add_argument(
        '--output-as',
        type=str,
        default=None,
        choices=['bleed', 'coverage', 'uv', 'distance'],
        help='What to write (default: bleed)'
    )

    parser.add_argument(
        '--preset',
        type=str,
        default=None,
        metavar='NAME',
        help='Start from a named preset (e.g. tiling_padding, distance_field)'
    )

    parser.add_argument(
        '--config',
        type=str,
        default=None,
        metavar='PATH',
        help='Start from a YAML config file'
    )

    parser.add_argument(
        '--list-presets',
        action='store_true',
        help='List all available presets and exit'
    )

    parser.add_argument(
        '-q', '--quiet',
        action='store_true',
        help='Only print errors'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Print a traceback on errors'
    )

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    from pixel_bleed import bleed
    from pixel_bleed.core.presets import get_preset_manager, load_config

    if args.list_presets:
        manager = get_preset_manager()

        print("Available Presets:\n")
        for name in manager.list_all():
            preset = manager.get(name)
            print(f"  {name:<20} - {preset.description}")
            print(f"  {'':<20}   edge={preset.edge_mode} output={preset.output_as} "
                  f"preserve_above={preset.preserve_above}")

        print(f"\nTotal: {len(manager.list_all())} presets")
        return 0

    if not args.input:
        print("Error: Input file is required")
        print("Usage: python main.py <input_image> [options]")
        print("       python main.py --list-presets")
        return 1

    input_path = Path(args.input)
    if not input_path.exists():
        print(f"Error: Input file not found: {args.input}")
        return 1

    try:
        config = None

        if args.config:
            config = load_config(args.config)

        if args.preset:
            preset = get_preset_manager().get(args.preset)
            if not preset:
                print(f"Error: Preset '{args.preset}' not found")
                print("Use --list-presets to see available presets")
                return 1
            if not args.quiet:
                print(f"Using preset: {preset.name} ({preset.description})")
            config = preset

        bleed(
            args.input,
            output_path=args.output,
            edge_mode=args.edge_mode,
            output_as=args.output_as,
            preserve_above=args.preserve_above,
            config=config,
            verbose=not args.quiet
        )

    except Exception as e:
        print(f"Error: {e}")
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
