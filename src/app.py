"""Application entry point for richfields."""

from __future__ import annotations

import argparse
import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

from art import tprint

import settings
from core.config import RenderConfig
from core.scrubbing import SCRUB_TAGS, scrub

NAME = "RICHFIELDS"
FONT = "tarty-1"


def _print_banner() -> None:
    tprint(NAME, FONT, space=1)


def _configure_logging() -> None:
    config = settings.LOGGING or {}
    if not config.get("enabled", False):
        return

    level_name = str(config.get("level", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)

    fmt = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    datefmt = "%Y-%m-%d %H:%M:%S"
    formatter = logging.Formatter(fmt=fmt, datefmt=datefmt)

    handlers: list[logging.Handler] = []

    if config.get("console", True):
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    file_cfg = config.get("file", {})
    if file_cfg.get("enabled", False):
        path = file_cfg.get("path", "logs/richfields.log")
        if not os.path.isabs(path):
            path = os.path.join(settings.PROJECT_ROOT, path)
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        max_bytes = int(file_cfg.get("max_bytes", 5 * 1024 * 1024))
        backup_count = int(file_cfg.get("backup_count", 5))
        file_handler = RotatingFileHandler(
            path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    if not handlers:
        return

    logging.basicConfig(level=level, handlers=handlers)


def _render_config() -> RenderConfig:
    return RenderConfig(money_decimals=settings.MONEY_DECIMALS)


def _demo() -> None:
    _print_banner()
    _configure_logging()
    # Imported late so the scrub command works without loading Textual.
    from frontend.app import RichFieldsDemoApp

    logger = logging.getLogger(__name__)
    logger.info("Starting demo form with %s preset values", len(settings.DEMO_VALUES))
    payload = RichFieldsDemoApp(settings.DEMO_VALUES, _render_config()).run()
    if payload:
        logger.info("Exited after saving %s", payload)


def _scrub(tag: str, value: str, previous: str) -> None:
    _configure_logging()
    print(scrub(tag, value, previous))


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(prog="richfields")
    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("demo", help="Launch the demo form TUI")
    scrub_parser = subparsers.add_parser("scrub", help="Print the scrubbed form of a value")
    scrub_parser.add_argument("tag", choices=[tag or "none" for tag in SCRUB_TAGS])
    scrub_parser.add_argument("value")
    scrub_parser.add_argument(
        "--previous",
        default="",
        help="Previously scrubbed month/year value (monthyear tags only)",
    )

    args = parser.parse_args(argv)
    if args.command == "scrub":
        _scrub("" if args.tag == "none" else args.tag, args.value, args.previous)
        return
    _demo()


if __name__ == "__main__":
    main()
