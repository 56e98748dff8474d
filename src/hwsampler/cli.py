"""CLI interface for the hwsampler background sampler."""

from __future__ import annotations

import argparse
import signal
import sys
import threading
from typing import Any

from .config import settings
from .formatters import get_formatter
from .logging import configure_logging
from .sampler import Sampler

# Set by SIGINT/SIGTERM; doubles as the wait primitive of the print loop.
_shutdown_requested = threading.Event()


def _signal_handler(signum: int, frame: Any) -> None:
    """Handle shutdown signals gracefully."""
    _shutdown_requested.set()
    sys.stderr.write("\n[hwsampler] Shutdown requested, exiting gracefully...\n")


def _write(line: str) -> None:
    sys.stdout.write(line + "\n")
    sys.stdout.flush()


def cmd_watch(args: argparse.Namespace) -> int:
    """Print the sampler status periodically until interrupted."""
    refresh = float(args.refresh)
    if refresh <= 0:
        sys.stderr.write("Error: --refresh must be > 0\n")
        return 2

    signal.signal(signal.SIGINT, _signal_handler)
    signal.signal(signal.SIGTERM, _signal_handler)

    formatter = get_formatter(args.format)
    sampler = Sampler()
    sampler.start(args.interface)

    printed = 0
    header_done = False
    max_count = args.count if args.count > 0 else float("inf")
    try:
        while printed < max_count and not _shutdown_requested.wait(refresh):
            status = sampler.snapshot()
            # Zero totals mean the memory collector has not reported yet.
            if not status.memory_warmed_up:
                continue
            if not header_done:
                header = formatter.header(status)
                if header:
                    _write(header)
                header_done = True
            _write(formatter.format(status))
            printed += 1
    finally:
        sampler.stop()

    return 0


def cmd_snapshot(args: argparse.Namespace) -> int:
    """Sample for one warm-up period and print a single status."""
    warmup = float(args.warmup)
    if warmup < 0:
        sys.stderr.write("Error: --warmup must be >= 0\n")
        return 2

    formatter = get_formatter(args.format)
    sampler = Sampler()
    sampler.start(args.interface)
    try:
        _shutdown_requested.wait(warmup)
        status = sampler.snapshot()
    finally:
        sampler.stop()

    header = formatter.header(status)
    if header:
        _write(header)
    _write(formatter.format(status))
    return 0 if status.memory_warmed_up else 1


def cmd_version(args: argparse.Namespace) -> int:
    """Show version."""
    from . import __version__

    sys.stdout.write(f"hwsampler version {__version__}\n")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build argument parser."""
    parser = argparse.ArgumentParser(
        prog="hwsampler",
        description="Background CPU, memory and network sampler",
    )

    parser.add_argument(
        "--version",
        "-V",
        action="store_true",
        help="Show version and exit",
    )

    subparsers = parser.add_subparsers(dest="command")

    def add_common_args(p: argparse.ArgumentParser) -> None:
        p.add_argument(
            "--interface",
            "-I",
            default=settings.interface_name,
            help=f"Network interface to sample (default: {settings.interface_name})",
        )
        p.add_argument(
            "--format",
            "-f",
            choices=["table", "json"],
            default="table",
            help="Output format (default: table)",
        )

    p_watch = subparsers.add_parser(
        "watch",
        help="Continuously print sampled metrics",
    )
    add_common_args(p_watch)
    p_watch.add_argument(
        "--refresh",
        "-r",
        type=float,
        default=settings.refresh_seconds,
        help=f"Seconds between printed lines (default: {settings.refresh_seconds:g})",
    )
    p_watch.add_argument(
        "--count",
        "-n",
        type=int,
        default=0,
        help="Number of lines to print (default: unlimited)",
    )
    p_watch.set_defaults(func=cmd_watch)

    default_warmup = settings.cpu_interval_seconds + settings.cpu_sample_gap_seconds + 1
    p_snapshot = subparsers.add_parser(
        "snapshot",
        help="Warm up the sampler once and print a single reading",
    )
    add_common_args(p_snapshot)
    p_snapshot.add_argument(
        "--warmup",
        "-w",
        type=float,
        default=default_warmup,
        help=f"Seconds to sample before reading (default: {default_warmup:g})",
    )
    p_snapshot.set_defaults(func=cmd_snapshot)

    p_version = subparsers.add_parser(
        "version",
        help="Show version",
    )
    p_version.set_defaults(func=cmd_version)

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    configure_logging()
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        return_code = cmd_version(args)
        raise SystemExit(return_code)

    if not args.command:
        parser.print_help()
        raise SystemExit(0)

    rc = int(args.func(args))
    raise SystemExit(rc)
