"""Entry point for verse-detect."""

import argparse
import logging
from typing import List, Optional

from verse_detect.app import VerseDetectApp
from verse_detect.config import CONFIG_DIR, DISPLAY_MODES, LOG_FILE, get_config


def setup_logging(level: str) -> None:
    """Log to a file under the config directory; Textual owns the terminal."""
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        filename=LOG_FILE,
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="verse-detect",
        description="Read a document with its scripture references highlighted and previewed",
    )
    parser.add_argument("file", nargs="?", help="Text or HTML document (default: built-in sample)")
    parser.add_argument("--mode", choices=DISPLAY_MODES, help="Display mode: link, popup or both")
    parser.add_argument("--lang", help="Primary language code, e.g. es")
    parser.add_argument("--also", nargs="+", metavar="CODE", help='Additional language codes, or "all"')
    parser.add_argument("--log-level", default="info", choices=["debug", "info", "warning", "error"])
    parser.add_argument("-v", "--verbose", action="store_true", help="Same as --log-level debug")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Run the verse-detect reader."""
    args = build_parser().parse_args(argv)
    setup_logging("debug" if args.verbose else args.log_level)

    config = get_config()
    if args.mode:
        config.display_mode = args.mode
    if args.lang:
        config.language.primary = args.lang
    if args.also:
        config.language.additional = "all" if args.also == ["all"] else args.also

    app = VerseDetectApp(args.file, config=config)
    app.run()


if __name__ == "__main__":
    main()
