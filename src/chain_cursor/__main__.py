"""
Chain follower configuration CLI entry point.

Resolve the network, well-known chain info and start points a chain follower
would use, and print them as JSON.

Usage::

    python -m chain_cursor --magic testnet
    python -m chain_cursor --config follower.yaml
    python -m chain_cursor --point 4492800,aa83acbf5904c0edfe4d79b3689d3d00fcfc553cf360fd2229b98d464c28e9de
    python -m chain_cursor --fallback 4492800,aa83...e9de --fallback origin

Options:
    --config       Path to a follower YAML file
    --magic        Network keyword (mainnet, testnet) or decimal magic
    --point        Intersect at one explicit point (slot,hex-hash or origin)
    --fallback     Candidate intersect point, can be repeated
    --from-origin  Intersect at genesis
    --from-tip     Intersect at the current chain head
    --cursor       Last processed point; overrides the intersect strategy
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Sequence

import yaml
from pydantic import ValidationError

from chain_cursor.subspecs.follower import FollowerConfig, load_yaml_mapping
from chain_cursor.subspecs.point import ChainPoint, OriginPoint, SpecificPoint
from chain_cursor.types import CursorError

logger = logging.getLogger(__name__)


LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class ColoredFormatter(logging.Formatter):
    """The plain log format with the time, level and logger name in ANSI colors."""

    LEVEL_COLORS = {
        logging.DEBUG: "\x1b[38;5;244m",
        logging.INFO: "\x1b[38;5;40m",
        logging.WARNING: "\x1b[38;5;220m",
        logging.ERROR: "\x1b[38;5;196m",
        logging.CRITICAL: "\x1b[38;5;196;1m",
    }
    TIME_COLOR = "\x1b[38;5;51m"
    NAME_COLOR = "\x1b[38;5;39m"
    RESET = "\x1b[0m"

    def __init__(self) -> None:
        super().__init__(LOG_FORMAT, datefmt=DATE_FORMAT)

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        return f"{self.TIME_COLOR}{super().formatTime(record, datefmt)}{self.RESET}"

    def format(self, record: logging.LogRecord) -> str:
        # Copy: the record is shared with other handlers.
        record = logging.makeLogRecord(record.__dict__)
        color = self.LEVEL_COLORS.get(record.levelno, self.RESET)
        record.levelname = f"{color}{record.levelname:8}{self.RESET}"
        record.name = f"{self.NAME_COLOR}{record.name}{self.RESET}"
        return super().format(record)


def setup_logging(verbose: bool = False, no_color: bool = False) -> None:
    """Configure logging on stderr with optional colors."""
    level = logging.DEBUG if verbose else logging.INFO

    handler = logging.StreamHandler()
    handler.setLevel(level)
    if no_color:
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    else:
        handler.setFormatter(ColoredFormatter())

    root = logging.getLogger()
    root.setLevel(level)
    root.addHandler(handler)


def build_config(args: argparse.Namespace) -> FollowerConfig:
    """
    Merge the optional YAML file with command-line overrides.

    Flags win over values read from the file.

    Raises:
        OSError: If the config file cannot be read.
        UnicodeDecodeError: If the config file is not valid UTF-8.
        yaml.YAMLError: If the config file is not valid YAML.
        ConfigError: If the config file does not hold a mapping.
        pydantic.ValidationError: If the merged values fail validation.
    """
    data: dict[str, Any] = {}
    if args.config is not None:
        data = load_yaml_mapping(args.config)

    if args.magic is not None:
        data["magic"] = args.magic
    if args.point is not None:
        data["intersect"] = {"type": "Point", "value": args.point}
    elif args.fallbacks:
        data["intersect"] = {"type": "Fallbacks", "value": args.fallbacks}
    elif args.from_origin:
        data["intersect"] = {"type": "Origin"}
    elif args.from_tip:
        data["intersect"] = {"type": "Tip"}
    if args.cursor is not None:
        data["cursor"] = args.cursor

    return FollowerConfig.model_validate(data)


def _render_point(point: ChainPoint) -> Any:
    """JSON form of a protocol point."""
    match point:
        case OriginPoint():
            return "origin"
        case SpecificPoint(slot=slot, hash=raw_hash):
            return [int(slot), raw_hash.hex()]
        case _:
            raise TypeError(f"Expected a chain point, got {type(point).__name__}")


def resolve(config: FollowerConfig) -> dict[str, Any]:
    """
    Resolve a follower config into the values handed to a chain-sync client.

    Raises:
        ConfigError: If the chain info cannot be inferred from the magic.
        DecodeError: If a configured point hash is not valid hexadecimal.
    """
    info = config.well_known_info()
    points = config.start_points()
    return {
        "magic": int(config.magic),
        "chain": info.model_dump(mode="json"),
        "intersect": config.intersect.model_dump(mode="json"),
        "cursor": None if config.cursor is None else str(config.cursor),
        "start_points": [_render_point(point) for point in points],
    }


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Chain follower configuration resolver",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to follower YAML file",
    )
    parser.add_argument(
        "--magic",
        type=str,
        default=None,
        help="Network keyword (mainnet, testnet) or decimal magic (default: mainnet)",
    )
    intersect = parser.add_mutually_exclusive_group()
    intersect.add_argument(
        "--point",
        type=str,
        default=None,
        help="Intersect at one point (slot,hex-hash or origin)",
    )
    intersect.add_argument(
        "--fallback",
        action="append",
        default=[],
        dest="fallbacks",
        help="Candidate intersect point, tried in order (can be repeated)",
    )
    intersect.add_argument(
        "--from-origin",
        action="store_true",
        help="Intersect at genesis",
    )
    intersect.add_argument(
        "--from-tip",
        action="store_true",
        help="Intersect at the current chain head (default)",
    )
    parser.add_argument(
        "--cursor",
        type=str,
        default=None,
        help="Last processed point; takes precedence over the intersect strategy",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored logging output",
    )

    args = parser.parse_args(argv)

    setup_logging(args.verbose, args.no_color)

    try:
        config = build_config(args)
        resolved = resolve(config)
    except (CursorError, ValidationError, OSError, UnicodeDecodeError, yaml.YAMLError) as e:
        logger.error("Failed to resolve follower configuration: %s", e)
        return 1

    json.dump(resolved, sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
