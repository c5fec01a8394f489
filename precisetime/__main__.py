"""
PreciseTime: Main Entry Point

Samples the system clocks and prints each reading in debug text.
Diagnostic only; exits 1 if any requested clock cannot be read.
"""
import sys
import argparse
from typing import List, Optional
from .clock import Clock
from .core.errors import ClockReadError
from .core.logger import LOG_LEVEL_ENV, LOG_LEVELS, configure_logging, default_log_level
from .core.types import ClockDomain, Resolution

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="precisetime",
        description="PreciseTime clock diagnostics"
    )
    parser.add_argument(
        "--resolution",
        type=Resolution.parse,
        default=Resolution.NANOSECOND,
        help="Sub-second resolution: ns or us (default: ns)"
    )
    parser.add_argument(
        "--domain",
        choices=[d.value for d in ClockDomain],
        action="append",
        help="Clock domain to sample; repeat for several (default: all)"
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=default_log_level(),
        help="Log level (default: $PRECISETIME_LOG_LEVEL or WARNING)"
    )
    return parser

def main(argv: Optional[List[str]] = None, clock: Optional[Clock] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    # argparse never checks a default against choices
    if args.log_level not in LOG_LEVELS:
        parser.error(f"invalid log level {args.log_level!r} (from {LOG_LEVEL_ENV})")
    configure_logging(args.log_level, json_output=False)

    clock = clock if clock is not None else Clock()
    domains = [ClockDomain(d) for d in args.domain] if args.domain else list(ClockDomain)

    exit_code = 0
    for domain in domains:
        try:
            value = clock.read(domain, args.resolution)
        except ClockReadError as e:
            print(f"{domain.value}: unavailable ({e})")
            exit_code = 1
            continue
        print(f"{domain.value}: {value}")
    return exit_code

if __name__ == "__main__":
    sys.exit(main())
