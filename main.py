"""
Text Katas - Entry Point

Command line front end for the kata routines. Input is read from --file
or standard input; results are written to standard output.

Example:
    python main.py rectangles --file figure.txt
    python main.py account < account.txt
    python main.py wrap --columns 12 --file paragraph.txt
    python main.py poker 4♥ 5♥ 6♥ 7♥ 8♥
"""

import sys
import logging
import argparse
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from katas.figure import Figure, iter_rectangles, save_debug_image
from katas.ocr import create_engine
from katas.text import wrap_text
from katas.poker import get_poker_hand_rank
from katas.settings import load_settings


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Configure root logging to stderr so stdout carries only results."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True
    )


def _read_input(path: Optional[str]) -> str:
    """Read command input from a file, or stdin when no file is given."""
    if path:
        return Path(path).read_text(encoding="utf-8")
    return sys.stdin.read()


def _cmd_rectangles(args: argparse.Namespace, settings: dict) -> int:
    figure = Figure.from_text(_read_input(args.file))
    rectangles = []

    for rectangle in iter_rectangles(figure):
        rectangles.append(rectangle)
        sys.stdout.write(rectangle.render() + "\n")

    logger.info(f"Figure {figure.rows}x{figure.cols}: {len(rectangles)} rectangle(s)")

    debug_image = args.debug_image
    if debug_image is None and settings.get("debug_enabled"):
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        debug_image = str(Path(settings["debug_dir"]) / f"debug_{timestamp}.png")
    if debug_image:
        save_debug_image(figure, rectangles, debug_image)
        logger.info(f"Debug image saved: {debug_image}")

    return 0


def _cmd_account(args: argparse.Namespace, settings: dict) -> int:
    engine = create_engine("glyph", account_digits=settings["account_digits"])
    result = engine.process(_read_input(args.file))

    if result.value is None:
        logger.error(f"Unreadable account: {result.digits or '<no glyph rows>'}")
        print(result.digits)
        return 1

    print(result.value)
    return 0


def _cmd_wrap(args: argparse.Namespace, settings: dict) -> int:
    columns = args.columns if args.columns is not None else settings["wrap_columns"]
    text = _read_input(args.file).rstrip("\n")
    for line in wrap_text(text, columns):
        print(line)
    return 0


def _cmd_poker(args: argparse.Namespace, settings: dict) -> int:
    rank = get_poker_hand_rank(args.cards)
    print(f"{rank.name} ({rank.value})")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(description="Text kata routines")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--config", type=str, default=None,
                        help="Path to settings JSON (default: ./config.json)")

    subparsers = parser.add_subparsers(dest="command", required=True)

    rectangles = subparsers.add_parser("rectangles", help="Decompose an ASCII figure into rectangles")
    rectangles.add_argument("--file", "-f", type=str, help="Figure file (default: stdin)")
    rectangles.add_argument("--debug-image", type=str, default=None,
                            help="Save an annotated PNG of the decomposition")
    rectangles.set_defaults(handler=_cmd_rectangles)

    account = subparsers.add_parser("account", help="Parse a glyph-drawn bank account number")
    account.add_argument("--file", "-f", type=str, help="Account file (default: stdin)")
    account.set_defaults(handler=_cmd_account)

    wrap = subparsers.add_parser("wrap", help="Wrap text at word boundaries")
    wrap.add_argument("--file", "-f", type=str, help="Text file (default: stdin)")
    wrap.add_argument("--columns", "-c", type=int, default=None,
                      help="Maximum line length (default: from settings)")
    wrap.set_defaults(handler=_cmd_wrap)

    poker = subparsers.add_parser("poker", help="Rank a five-card poker hand")
    poker.add_argument("cards", nargs="+", help="Cards such as 4♥ 10♠ A♦")
    poker.set_defaults(handler=_cmd_poker)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run the CLI and return the process exit status."""
    args = build_parser().parse_args(argv)

    settings = load_settings(args.config)
    level = "DEBUG" if args.debug or settings.get("debug_enabled") else settings["log_level"]
    configure_logging(level)

    try:
        return args.handler(args, settings)
    except ValueError as e:
        logger.error(str(e))
        return 2
    except OSError as e:
        logger.error(f"I/O error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
