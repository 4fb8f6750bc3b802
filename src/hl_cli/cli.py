"""Command-line interface for hl."""

from __future__ import annotations

import argparse
import io
import logging
import os
import sys
from pathlib import Path
from typing import Any, TextIO

import yaml

from hl_cli import __version__
from hl_cli.config.loader import load_config
from hl_cli.core.processor import LineProcessor
from hl_cli.errors import HlError
from hl_cli.logging_utils import configure_logging

log = logging.getLogger(__name__)


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        args: Arguments to parse (defaults to sys.argv[1:])

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        prog="hl",
        description="Highlight delimited fields of each input line",
        epilog="Example: expac '%n %m' | hl -f0:blue -f1:size",
    )

    parser.add_argument(
        "--field",
        "-f",
        action="append",
        dest="fields",
        metavar="FIELD:COLOR",
        help="Color fields (repeatable). COLOR is a name, fixed(N), rgb(R,G,B) or size",
    )

    parser.add_argument(
        "--delimiter",
        "-d",
        metavar="TEXT",
        help="Custom delimiter for fields (default: a single space)",
    )

    parser.add_argument(
        "--skip",
        "-s",
        metavar="TEXT",
        help="Skip to a substring and match fields after it",
    )

    parser.add_argument(
        "--yellow-size",
        metavar="SIZE",
        help='For the "size" color (default: 20MB)',
    )

    parser.add_argument(
        "--red-size",
        metavar="SIZE",
        help='For the "size" color (default: 100MB)',
    )

    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        metavar="FILE",
        help="Configuration file path (default: ~/.config/hl/config.yaml)",
    )

    parser.add_argument(
        "--config-dir",
        type=Path,
        metavar="DIR",
        help="Drop-in configuration directory (default: ~/.config/hl/conf.d/)",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log debug messages to stderr",
    )

    parser.add_argument(
        "--version",
        "-V",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser.parse_args(args)


def config_overrides(parsed: argparse.Namespace) -> dict[str, Any]:
    """Collect the options given on the command line."""
    overrides: dict[str, Any] = {}
    for key in ("fields", "delimiter", "skip", "yellow_size", "red_size"):
        value = getattr(parsed, key)
        if value is not None:
            overrides[key] = value
    return overrides


def setup_streams() -> tuple[TextIO, TextIO]:
    """Return stdin and stdout set up to pass line endings and bytes through."""
    for stream in (sys.stdin, sys.stdout):
        if isinstance(stream, io.TextIOWrapper):
            stream.reconfigure(newline="", errors="surrogateescape")
    if isinstance(sys.stdout, io.TextIOWrapper):
        sys.stdout.reconfigure(line_buffering=True)
    return sys.stdin, sys.stdout


def silence_stream(stream: TextIO) -> None:
    """Point the stream's descriptor at /dev/null after the reader went away."""
    try:
        fd = stream.fileno()
    except (AttributeError, OSError):
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, fd)
    os.close(devnull)


def run(parsed: argparse.Namespace, stdin: TextIO | None, stdout: TextIO | None) -> int:
    """Load the configuration and color the input stream.

    Returns:
        Exit code
    """
    try:
        config = load_config(
            config_path=parsed.config,
            dropin_dir=parsed.config_dir,
            overrides=config_overrides(parsed),
        )
    except (HlError, ValueError, OSError, yaml.YAMLError) as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return 1

    if stdin is None or stdout is None:
        default_in, default_out = setup_streams()
        stdin = stdin if stdin is not None else default_in
        stdout = stdout if stdout is not None else default_out

    processor = LineProcessor(config)

    try:
        processor.run(stdin, stdout)
        stdout.flush()
    except BrokenPipeError:
        log.debug("Output closed by reader")
        silence_stream(stdout)
    except (HlError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


def main(
    args: list[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    """Main entry point.

    Args:
        args: Command-line arguments
        stdin: Input stream (default: standard input)
        stdout: Output stream (default: standard output)

    Returns:
        Exit code
    """
    parsed = parse_args(args)
    configure_logging(logging.DEBUG if parsed.verbose else logging.WARNING)

    try:
        return run(parsed, stdin, stdout)
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    sys.exit(main())
