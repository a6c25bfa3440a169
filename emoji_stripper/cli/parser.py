import argparse
from pathlib import Path

from emoji_stripper import __version__


def build_parser() -> argparse.ArgumentParser:
    """Command-line surface of strip-emojis."""
    parser = argparse.ArgumentParser(
        prog="strip-emojis",
        description=(
            "Strip emojis from markdown files. "
            "Can process single files or recursively scan directories."
        ),
    )
    parser.add_argument(
        "-p",
        "--path",
        type=Path,
        required=True,
        metavar="PATH",
        help="Path to a markdown file or directory containing .md files",
    )
    parser.add_argument(
        "-r",
        "--recursive",
        action="store_true",
        help="Recursively process all .md files in the directory (replaces files in-place)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Output file path (only works with single file mode, ignored with --recursive)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show detailed processing information",
    )
    parser.add_argument(
        "-d",
        "--dry-run",
        action="store_true",
        help="Preview changes without modifying files",
    )
    parser.add_argument(
        "-b",
        "--backup",
        action="store_true",
        help="Create backup files (.bak) before modifying (only with --recursive)",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser
