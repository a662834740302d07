"""Command line entrypoint: deliver text into the app that has focus."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import List, Optional

from automation import create_backend
from config import JsonConfigStore
from delivery_controller import DeliveryController
from errors import DeliveryError
from logging_config import configure_logging

LOGGER = logging.getLogger(__name__)


class CommandLineSettings:
    """Stored settings with command line flags layered on top."""

    def __init__(self, store: JsonConfigStore, args: argparse.Namespace) -> None:
        self._store = store
        self._args = args

    def get_auto_paste(self) -> bool:
        if self._args.no_auto_paste:
            return False
        return self._store.get_auto_paste()

    def get_editor_file_tagging(self) -> bool:
        return bool(self._args.file) or self._store.get_editor_file_tagging()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ghostpaste",
        description="Paste text into the focused app, tagging file names in Cursor and VS Code chat.",
    )
    parser.add_argument("text", nargs="?", help="Text to deliver (read from stdin when omitted)")
    parser.add_argument("--file", action="append", default=[], metavar="NAME",
                        help="File name to insert as an editor mention (repeatable)")
    parser.add_argument("--target", default=None, metavar="APP_ID",
                        help="Bundle identifier of the app that will receive the text")
    parser.add_argument("--no-auto-paste", action="store_true",
                        help="Only copy to the clipboard, do not press any keys")
    parser.add_argument("--delay", type=float, default=2.0,
                        help="Seconds to wait so you can focus the target (default: 2.0)")
    parser.add_argument("--backend", choices=["auto", "osascript", "pynput"], default=None,
                        help="Automation backend (default: from config)")
    parser.add_argument("--log-level", default=None, help="Log level (default: from config)")
    parser.add_argument("--config", type=Path, default=None, help="Path to config.json")
    return parser


async def _run(args: argparse.Namespace, store: JsonConfigStore, text: str) -> None:
    controller = DeliveryController(
        backend=create_backend(args.backend or store.get_backend()),
        config_store=CommandLineSettings(store, args),
        on_state_change=lambda f, t: LOGGER.debug("state %s -> %s", f.value, t.value),
    )
    if args.delay > 0:
        LOGGER.info("Delivering in %.1fs, focus the target window now", args.delay)
        await asyncio.sleep(args.delay)
    await controller.deliver_text(text, file_references=args.file, target_app_id=args.target)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    store = JsonConfigStore(path=args.config)
    configure_logging(args.log_level or store.get_log_level())

    text = args.text if args.text is not None else sys.stdin.read()
    try:
        asyncio.run(_run(args, store, text))
    except DeliveryError as exc:
        print(f"ghostpaste: {exc.user_message} ({exc})", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
