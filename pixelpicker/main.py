#!/usr/bin/env python3
"""
Command-line entry point for inspecting and resetting the Pixel Picker configuration.
"""

import sys
import json
import logging
import argparse
from pathlib import Path
from typing import List, Optional

from pixelpicker.config import ConfigStore


DEFAULT_LOG_FILE = Path.home() / ".pixel-picker" / "logs" / "pixelpicker.log"


def setup_logging(log_level: str = "INFO", log_file: Optional[Path] = DEFAULT_LOG_FILE):
    """Set up application logging."""
    handlers = [logging.StreamHandler()]
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pixelpicker-config",
        description="Inspect or reset the Pixel Picker configuration file"
    )
    parser.add_argument("--config", type=Path, default=None,
                        help="Path to the config file (default: per-user config directory)")
    parser.add_argument("--show", action="store_true",
                        help="Print the effective configuration as JSON")
    parser.add_argument("--info", action="store_true",
                        help="Print information about the config file")
    parser.add_argument("--reset", action="store_true",
                        help="Reset every setting to its default and save")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level")
    parser.add_argument("--no-log-file", action="store_true",
                        help="Log to the console only")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level, None if args.no_log_file else DEFAULT_LOG_FILE)
    logger = logging.getLogger(__name__)

    store = ConfigStore(args.config)

    if args.reset:
        store.reset_state()
        outcome = store.save()
        if not outcome:
            print(f"Failed to reset configuration: {outcome.message}", file=sys.stderr)
            return 1
        print(f"Configuration reset: {store.save_path}")
    else:
        outcome = store.load()
        if not outcome:
            logger.warning(f"Using default configuration: {outcome.message}")

    if args.info:
        print(json.dumps(store.get_config_info().to_dict(), indent=2))

    if args.show or not (args.info or args.reset):
        print(store.to_json())

    return 0


if __name__ == "__main__":
    sys.exit(main())
