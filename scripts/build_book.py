"""
Typeset a plain-text manuscript into output/book.pdf.
"""

import argparse
import subprocess
import sys
from dataclasses import replace
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from manuscript.pdf.builder import build_book
from manuscript.pdf.pdf_settings import PageSettings


def _parse_args() -> argparse.Namespace:
    """Return CLI arguments for the build script."""

    parser = argparse.ArgumentParser(
        description="Build a justified, paginated PDF from a plain-text manuscript."
    )
    parser.add_argument(
        "source",
        type=Path,
        help="UTF-8 text file; blank lines separate paragraphs.",
    )
    parser.add_argument(
        "--output-file",
        "-o",
        type=Path,
        default=Path("output/book.pdf"),
        help="File path into which the resulting pdf will be saved.",
    )
    parser.add_argument(
        "--font",
        type=Path,
        default=None,
        help="TrueType/OpenType font to embed (defaults to Times-Roman).",
    )
    parser.add_argument(
        "--margin",
        type=float,
        default=None,
        help="Page margin in points.",
    )
    parser.add_argument(
        "--font-size",
        type=float,
        default=None,
        help="Body font size in points.",
    )
    parser.add_argument(
        "--open",
        action="store_true",
        help="Open the PDF in the system viewer when done.",
    )
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Hide the progress bar.",
    )
    args = parser.parse_args()
    if not args.source.exists():
        parser.error(f"Manuscript not found: {args.source}")
    return args


def _settings_from_args(args: argparse.Namespace) -> PageSettings:
    """Return PageSettings with CLI overrides applied.

    Args:
        args: Parsed CLI arguments.
    Returns:
        PageSettings instance.
    """

    settings = PageSettings()
    if args.margin is not None:
        settings = replace(settings, margin=args.margin)
    if args.font_size is not None:
        settings = replace(settings, body_font_size=args.font_size)
    return settings


def _open_pdf(path: Path) -> None:
    """Open ``path`` with the platform's default viewer."""

    if sys.platform == "win32":
        subprocess.run(["cmd", "/c", "start", "", str(path)], check=False)
    elif sys.platform == "darwin":
        subprocess.run(["open", str(path)], check=False)
    else:
        subprocess.run(["xdg-open", str(path)], check=False)


def main() -> None:
    """Render the manuscript given on the command line.

    Example:
        >>> main()  # doctest: +SKIP
    """

    args = _parse_args()
    result = build_book(
        source=args.source,
        output_path=args.output_file,
        settings=_settings_from_args(args),
        font_path=args.font,
        progress=not args.no_progress,
    )
    print(f"Wrote {result.page_count} pages to {result.output_path}")
    if args.open:
        _open_pdf(result.output_path)


if __name__ == "__main__":
    main()
