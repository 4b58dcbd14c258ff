"""targa command-line tool.

Usage:
    targa info <file.tga>
    targa info <file.tga> --format json
    targa convert <file.tga> <output.png>
    targa convert <file.tga> <output.png> --correct-right-origin --keep-alpha

Output formats for info:
    --format table    (default, human-readable)
    --format json     (machine-readable)
"""

import sys
import json
import logging
import argparse
from pathlib import Path

from . import __version__
from .decoder import DecoderConfig, decode
from .errors import TGAError, TGAIOError
from .tga_file import TGAFile, read

logger = logging.getLogger(__name__)


def describe(tga: TGAFile) -> dict:
    """Collect header, footer and derived fields of a file."""
    h = tga.header
    f = tga.footer
    kind = h.image_kind
    return {
        "header": {
            "id_length": h.id_length,
            "color_map_type": h.color_map_type,
            "image_type": h.image_type,
            "image_type_name": kind.name if kind is not None else None,
            "color_map_origin": h.color_map_origin,
            "color_map_length": h.color_map_length,
            "color_map_depth": h.color_map_depth,
            "x_origin": h.x_origin,
            "y_origin": h.y_origin,
            "width": h.width,
            "height": h.height,
            "bits_per_pixel": h.bits_per_pixel,
            "image_descriptor": h.image_descriptor,
        },
        "derived": {
            "bytes_per_pixel": h.bytes_per_pixel,
            "image_bytes": h.image_bytes,
            "color_map_bytes": h.color_map_bytes,
            "alpha_bits": h.alpha_bits,
            "image_origin": h.image_origin.label,
            "image_data_offset": h.image_data_offset,
        },
        "footer": {
            "extension_area_offset": f.extension_area_offset,
            "developer_directory_offset": f.developer_directory_offset,
            "signature": f.signature.decode("ascii", errors="replace"),
            "version": f.version.label,
        },
    }


def format_table(info: dict) -> str:
    lines = []
    for section, fields in info.items():
        lines.append(f"{section.upper()}")
        width = max(len(k) for k in fields)
        for key, value in fields.items():
            lines.append(f"  {key:<{width}}  {value}")
    return "\n".join(lines)


def cmd_info(args) -> int:
    tga = read(args.file)
    info = describe(tga)
    if args.format == "json":
        print(json.dumps(info, indent=2))
    else:
        print(tga.summary())
        print(format_table(info))
    return 0


def cmd_convert(args) -> int:
    config = DecoderConfig(
        correct_right_origin=args.correct_right_origin,
        use_stored_alpha=args.keep_alpha,
    )
    image = decode(args.file, config)

    output = Path(args.output)
    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        image.save(output)
    except (OSError, ValueError) as e:
        raise TGAIOError(f"Failed to write {output}: {e}") from e
    logger.info(f"Wrote {output} ({image.width}x{image.height})")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="targa",
        description="Inspect and convert uncompressed true-color TGA images.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    sub = parser.add_subparsers(dest="command")

    p = sub.add_parser("info", help="Show header and footer fields")
    p.add_argument("file", help="Path to a .tga file")
    p.add_argument("--format", choices=["table", "json"], default="table",
                   help="Output format (default: table)")

    p = sub.add_parser("convert", help="Decode a TGA and save it in another format")
    p.add_argument("file", help="Path to a .tga file")
    p.add_argument("output", help="Output image path; format follows the extension")
    p.add_argument("--correct-right-origin", action="store_true",
                   help="Use edge-correct mapping for TopRight/BottomRight origins")
    p.add_argument("--keep-alpha", action="store_true",
                   help="Keep stored alpha of 32-bit pixels instead of forcing 255")

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.command:
        parser.print_help()
        return 0

    commands = {
        "info": cmd_info,
        "convert": cmd_convert,
    }

    try:
        return commands[args.command](args)
    except TGAError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
