"""CLI entry-point for dumpcode.

Usage:
    python -m dumpcode [DIRECTORY]
    python -m dumpcode [DIRECTORY] --clipboard
    python -m dumpcode [DIRECTORY] -e py,rs -x .git,target -m 50 --max-files 200
    python -m dumpcode [DIRECTORY] --manifest
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dumpcode import __version__
from dumpcode.api import build_manifest, dump_project, load_config
from dumpcode.core.config import parse_extensions, parse_names
from dumpcode.errors import DumpError
from dumpcode.sinks import ClipboardSink, Sink, StdoutSink
from dumpcode.utils.exit_codes import ExitCode
from dumpcode.utils.json_norm import stable_json_dumps

logger = logging.getLogger("dumpcode")


def _non_negative_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {raw!r}")
    if value < 0:
        raise argparse.ArgumentTypeError(f"expected a value >= 0, got {value}")
    return value


def _positive_int(raw: str) -> int:
    value = _non_negative_int(raw)
    if value == 0:
        raise argparse.ArgumentTypeError("expected a value >= 1")
    return value


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="dumpcode",
        description="Dumps project files in an LLM-friendly format.",
    )
    p.add_argument(
        "directory",
        nargs="?",
        type=Path,
        default=Path("."),
        help="Directory to scan (default: current directory).",
    )
    p.add_argument(
        "-c",
        "--clipboard",
        action="store_true",
        default=False,
        help="Copy the output to the clipboard instead of printing it.",
    )
    p.add_argument(
        "-e",
        "--extensions",
        default=None,
        help="Comma-separated file extensions to include.",
    )
    p.add_argument(
        "-m",
        "--max-size",
        dest="max_size",
        type=_non_negative_int,
        default=None,
        help="Maximum file size in KB (default: 100).",
    )
    p.add_argument(
        "-x",
        "--exclude",
        default=None,
        help="Comma-separated directory names to exclude at any depth.",
    )
    p.add_argument(
        "--max-files",
        dest="max_files",
        type=_non_negative_int,
        default=None,
        help="Maximum number of files to include (default: 1000).",
    )
    p.add_argument(
        "--no-extensionless",
        dest="include_extensionless",
        action="store_const",
        const=False,
        default=None,
        help="Never include files without an extension (Dockerfile, scripts).",
    )
    p.add_argument(
        "--workers",
        type=_positive_int,
        default=None,
        help="Threads used to read files (default: DUMPCODE_WORKERS or auto).",
    )
    p.add_argument(
        "--manifest",
        action="store_true",
        default=False,
        help="Print a JSON manifest of the selection instead of the dump.",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Enable debug logging.",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> int:
    """Entry-point — returns an exit code (0 = success, 2 = error)."""
    args = _build_parser().parse_args(argv)
    _configure_logging(args.verbose)
    logger.debug("cli args: %s", vars(args))

    try:
        cfg = load_config(
            args.directory,
            extensions=(
                parse_extensions(args.extensions) if args.extensions is not None else None
            ),
            exclude_dirs=parse_names(args.exclude) if args.exclude is not None else None,
            max_size_kb=args.max_size,
            max_files=args.max_files,
            include_extensionless=args.include_extensionless,
            workers=args.workers,
        )

        if args.manifest:
            sys.stdout.write(stable_json_dumps(build_manifest(cfg)))
            return ExitCode.SUCCESS

        document = dump_project(cfg)
        sink: Sink = ClipboardSink() if args.clipboard else StdoutSink()
        sink.write(document)
    except DumpError as e:
        print(f"error: {e}", file=sys.stderr)
        return ExitCode.ERROR

    return ExitCode.SUCCESS


if __name__ == "__main__":
    raise SystemExit(main())
