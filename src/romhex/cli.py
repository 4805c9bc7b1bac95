from __future__ import annotations

import argparse
import logging
import sys

from romhex.app import RomHexApp
from romhex.core.config import ConfigError, load_config


def configure_logging(log_file: str | None, level: str) -> None:
    # The terminal belongs to the TUI; only log when a file is given.
    root = logging.getLogger("romhex")
    root.setLevel(level.upper())
    if log_file:
        handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
    else:
        handler = logging.NullHandler()
    root.addHandler(handler)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="romhex", description="romhex hex viewer/editor (Textual)")
    parser.add_argument("path", nargs="?", help="Binary file to open")
    parser.add_argument("--config", help="YAML config file (default: $ROMHEX_CONFIG or user config)")
    parser.add_argument("--log-file", help="Write log records to this file")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level for --log-file",
    )
    args = parser.parse_args(argv)

    configure_logging(args.log_file, args.log_level)

    try:
        config = load_config(args.config)
    except ConfigError as e:
        for err in e.errors:
            print(f"romhex: config error: {err}", file=sys.stderr)
        return 2

    app = RomHexApp(args.path, config=config)
    app.run()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
