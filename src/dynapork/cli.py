"""Command-line entry point: print the current public IP reported by Porkbun."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from .client import PorkbunClient
from .config import read_config
from .errors import ConfigError, PorkbunError
from .logger import LOG_LEVELS
from .transport import Transport
from .version import __version__


def positive_float(value: str) -> float:
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}") from None
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dynapork",
        description="Ask the Porkbun API for this machine's public IP address.",
    )
    parser.add_argument("--config", help="Path to a JSON config file (default: $DYNAPORK_CONFIG).")
    parser.add_argument("--log-level", choices=LOG_LEVELS, help="Override the configured log level.")
    parser.add_argument("--timeout", type=positive_float, help="Request timeout in seconds.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Sequence[str] | None = None, *, transport: Transport | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = read_config(args.config)
    except ConfigError as exc:
        print(f"Error loading configuration: {exc}", file=sys.stderr)
        return 1

    with PorkbunClient(
        config.credentials,
        read_timeout=config.read_timeout if args.timeout is None else args.timeout,
        transport=transport,
        log_level=args.log_level or config.log_level,
    ) as client:
        try:
            ip = client.request_ip()
        except PorkbunError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1

    print(ip)
    return 0


if __name__ == "__main__":
    sys.exit(main())
