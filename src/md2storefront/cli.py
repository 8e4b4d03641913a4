"""Command-line interface for md2storefront.

Usage::

    md2storefront notes.txt                    # writes notes.html
    md2storefront notes.txt -o out.html        # explicit output path
    md2storefront notes.txt -o -               # print to stdout
    md2storefront notes.txt --profile div      # div-wrapped markup
    md2storefront --list-profiles              # list available profiles
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from md2storefront import __version__
from md2storefront.converter import NO_DESCRIPTION, Converter
from md2storefront.profiles import PROFILES


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="md2storefront",
        description="Convert catalog text to storefront HTML.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        help="Path to the text file to convert.",
    )
    parser.add_argument(
        "-o", "--output",
        help="Output HTML file path, or '-' for stdout. Defaults to <input>.html.",
    )
    parser.add_argument(
        "-p", "--profile",
        default="semantic",
        choices=PROFILES,
        help="Markup profile (default: %(default)s).",
    )
    parser.add_argument(
        "-e", "--encoding",
        default="utf-8",
        help="Input file encoding (default: %(default)s).",
    )
    parser.add_argument(
        "--fallback",
        action="store_true",
        help=f"Render {NO_DESCRIPTION!r} when the input has no content.",
    )
    parser.add_argument(
        "--list-profiles",
        action="store_true",
        help="List available markup profiles and exit.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Print progress information.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for the CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.list_profiles:
        print("Available profiles:")
        for profile in PROFILES:
            print(f"  - {profile}")
        return 0

    if not args.input:
        parser.error("the following argument is required: input")

    input_path = Path(args.input)
    if not input_path.is_file():
        print(f"Error: file not found: {input_path}", file=sys.stderr)
        return 1

    fallback = NO_DESCRIPTION if args.fallback else None
    converter = Converter(profile=args.profile)

    if args.output == "-":
        try:
            text = input_path.read_text(encoding=args.encoding)
        except (OSError, UnicodeDecodeError, LookupError) as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1
        if fallback is not None:
            html = converter.convert_with_fallback(text, fallback)
        else:
            html = converter.convert_text(text)
        print(html or "")
        return 0

    output_path = Path(args.output) if args.output else input_path.with_suffix(".html")

    if args.verbose:
        print(f"Input:   {input_path}")
        print(f"Output:  {output_path}")
        print(f"Profile: {args.profile}")

    try:
        html = converter.convert_file(
            input_path, output_path, encoding=args.encoding, fallback=fallback
        )
    except (OSError, UnicodeDecodeError, LookupError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.verbose:
        status = "no content" if html is None else f"{len(html)} chars"
        print(f"Done. {status} written.")
    else:
        print(f"Converted: {output_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
