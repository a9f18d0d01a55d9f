# codeflat/parsing/parser.py
from __future__ import annotations

import argparse

from codeflat.constants import DEFAULT_OUTPUT


def _build_parser() -> argparse.ArgumentParser:
    """
    Build the CLI argument parser.

    Notes:
        - The positional FOLDER is required; its existence is checked later
          so the failure is reported through the same fatal-error path as
          other startup errors.
    """
    from codeflat import __version__

    p = argparse.ArgumentParser(
        prog="codeflat",
        formatter_class=argparse.RawTextHelpFormatter,
        description=(
            "codeflat – flatten a folder into one text file.\n"
            "Respects every .gitignore along the walk, always skips .git/ "
            "directories and never emits the .gitignore files themselves."
        ),
    )

    p.add_argument(
        "folder",
        metavar="FOLDER",
        help="Source folder to flatten.",
    )
    p.add_argument(
        "-o",
        "--output",
        metavar="PATH",
        default=DEFAULT_OUTPUT,
        help=f"Output file, overwritten on every run (default: ./{DEFAULT_OUTPUT}).",
    )
    p.add_argument(
        "-b",
        "--binary",
        dest="include_binary",
        action="store_true",
        help="Include binary files as raw bytes instead of skipping them.",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Report progress and skip reasons on stderr.",
    )
    p.add_argument(
        "--json-logs",
        dest="json_logs",
        action="store_true",
        help="Emit diagnostics as JSON lines instead of plain text.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return p
