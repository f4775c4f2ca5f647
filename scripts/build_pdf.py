"""
Export a text file (or stdin) as a paginated, justified PDF.
"""

import argparse
import dataclasses
import json
import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from reportlab.pdfbase.ttfonts import TTFError

from editflow.bionic import SHORT_WORD_POLICIES
from editflow.errors import GeometryError, LayoutError
from editflow.pdf.builder import ExportOptions, build_pdf
from editflow.pdf.pdf_constants import DEBUG_LAYOUT, DEFAULT_TITLE
from editflow.pdf.pdf_settings import LayoutLimits, PageGeometry, register_font_family

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

logger = logging.getLogger("editflow.cli")


def _parse_args(argv=None) -> argparse.Namespace:
    """Return CLI arguments for the export script."""

    parser = argparse.ArgumentParser(
        description="Lay out plain text into justified, paginated PDF pages."
    )
    parser.add_argument(
        "--input",
        "-i",
        type=Path,
        default=None,
        help="Text file to export (reads stdin when omitted).",
    )
    parser.add_argument(
        "--output-file",
        "-o",
        type=Path,
        default=Path("output/editflow-document.pdf"),
        help="File path into which the resulting pdf will be saved.",
    )
    parser.add_argument(
        "--bionic",
        action="store_true",
        help="Bold the leading half of every word.",
    )
    parser.add_argument(
        "--short-words",
        choices=SHORT_WORD_POLICIES,
        default="plain",
        help="Bionic treatment of words of three characters or fewer.",
    )
    parser.add_argument("--title", default=DEFAULT_TITLE, help="Header title.")
    parser.add_argument(
        "--geometry",
        type=Path,
        default=None,
        help="JSON file with PageGeometry fields (margins, header_height, font, ...).",
    )
    parser.add_argument("--font-size", type=float, default=None, help="Body font size.")
    parser.add_argument(
        "--font-file",
        type=Path,
        default=None,
        help="TrueType file for body text (defaults to Helvetica).",
    )
    parser.add_argument(
        "--bold-font-file",
        type=Path,
        default=None,
        help="TrueType file for bold runs; reuses --font-file when omitted.",
    )
    parser.add_argument("--logo", type=Path, default=None, help="Header logo image.")
    parser.add_argument(
        "--max-pages",
        type=int,
        default=LayoutLimits().max_pages,
        help="Abort when the layout needs more pages than this.",
    )
    parser.add_argument(
        "--max-seconds",
        type=float,
        default=LayoutLimits().max_seconds,
        help="Abort when layout takes longer than this many seconds.",
    )
    return parser.parse_args(argv)


def _configure_logging() -> None:
    """Send log records to stderr; DEBUG level when DEBUG_LAYOUT is set."""

    logging.basicConfig(
        level=logging.DEBUG if DEBUG_LAYOUT else logging.INFO,
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )


def _geometry(args: argparse.Namespace) -> PageGeometry:
    """Return page geometry from the JSON file and CLI overrides.

    Args:
        args: Parsed CLI arguments.
    Returns:
        PageGeometry instance.
    Raises:
        GeometryError: The geometry file, a font file, or the logo is unusable.
    """

    data = {}
    if args.geometry is not None:
        try:
            data = json.loads(args.geometry.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise GeometryError(f"Cannot read geometry file {args.geometry}: {exc}") from exc
        if not isinstance(data, dict):
            raise GeometryError(f"Geometry file {args.geometry} must hold a JSON object")
    geometry = PageGeometry.from_mapping(data)
    font = geometry.font
    if args.font_file is not None:
        try:
            registered = register_font_family(
                regular_path=args.font_file, bold_path=args.bold_font_file
            )
        except (OSError, TTFError) as exc:
            raise GeometryError(f"Cannot load font {args.font_file}: {exc}") from exc
        font = dataclasses.replace(font, regular=registered.regular, bold=registered.bold)
    if args.font_size is not None:
        font = dataclasses.replace(font, size=args.font_size)
    overrides = {"font": font}
    if args.logo is not None:
        if not args.logo.is_file():
            raise GeometryError(f"Logo image not found: {args.logo}")
        overrides["logo_path"] = args.logo
    return dataclasses.replace(geometry, **overrides)


def _read_text(path: Path | None) -> str:
    """Return the document text from ``path`` or stdin."""

    if path is None:
        return sys.stdin.read()
    return path.read_text(encoding="utf-8")


def main(argv=None) -> int:
    """Export the input text to ``--output-file``.

    Example:
        >>> main(["--input", "notes.txt", "-o", "output/notes.pdf"])  # doctest: +SKIP
        0
    """

    args = _parse_args(argv)
    _configure_logging()
    options = ExportOptions(
        bionic=args.bionic,
        short_words=args.short_words,
        title=args.title,
        limits=LayoutLimits(max_pages=args.max_pages, max_seconds=args.max_seconds),
    )
    try:
        geometry = _geometry(args)
        build_pdf(
            _read_text(args.input),
            output_path=args.output_file,
            geometry=geometry,
            options=options,
            show_progress=sys.stderr.isatty(),
        )
    except (LayoutError, OSError) as exc:
        logger.error("Export failed: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
