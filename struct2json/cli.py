"""CLI entrypoint for struct2json."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Sequence

from .config import CONFIG_FILENAME, ConfigError, load_config
from .describe import TypeMode
from .extractor import StructExtractor, UnitRequest
from .logging import configure_logging, get_logger
from .serialize import dump_document

_SOURCE_SUFFIX = ".go"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="struct2json",
        description="Describe Go struct declarations as JSON.",
        usage="%(prog)s [options] f1.go [structName ...] [f2.go [structName ...] ...]",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help=f"Path to a config file (defaults to ./{CONFIG_FILENAME} when present).",
    )
    parser.add_argument(
        "--type-mode",
        choices=[mode.value for mode in TypeMode],
        default=None,
        help="Render field types as flat strings or nested trees.",
    )
    parser.add_argument(
        "--first-name-only",
        action="store_true",
        default=None,
        help="Emit only the first name of multi-name fields such as `a, b int`.",
    )
    parser.add_argument(
        "--keep-going",
        action="store_true",
        default=None,
        help="Continue with the remaining files when one fails to parse.",
    )
    parser.add_argument(
        "-j",
        "--jobs",
        type=int,
        default=None,
        help="Number of files to parse in parallel.",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=None,
        help="JSON indentation width (default 4).",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Write JSON to this file instead of stdout.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log records to this file.",
    )
    parser.add_argument(
        "inputs",
        nargs="+",
        metavar="ARG",
        help="Go files, each followed by the struct names to extract from it (none means all).",
    )
    return parser


def group_inputs(args: Sequence[str]) -> List[UnitRequest]:
    """Group ``f1.go A B f2.go C`` into one request per file.

    Raises ``ValueError`` when a struct name appears before any Go file.
    """
    requests: List[UnitRequest] = []
    current: Path | None = None
    names: List[str] = []
    for arg in args:
        if not arg.endswith(_SOURCE_SUFFIX):
            if current is None:
                raise ValueError(f"struct name {arg!r} must follow a {_SOURCE_SUFFIX} file")
            names.append(arg)
            continue
        if current is not None:
            requests.append(UnitRequest(path=current, names=tuple(names)))
        current = Path(arg)
        names = []
    if current is not None:
        requests.append(UnitRequest(path=current, names=tuple(names)))
    return requests


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for struct2json."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)
    logger = get_logger("cli")

    try:
        requests = group_inputs(args.inputs)
    except ValueError as exc:
        parser.error(str(exc))

    try:
        config = load_config(args.config, required=args.config is not None).with_overrides(
            type_mode=args.type_mode,
            first_name_only=args.first_name_only,
            keep_going=args.keep_going,
            jobs=args.jobs,
            indent=args.indent,
        )
    except ConfigError as exc:
        parser.exit(1, f"struct2json: invalid configuration: {exc}\n")

    if config.source is not None:
        logger.debug("Loaded configuration from %s", config.source)

    result = StructExtractor(config).run(requests)
    output = dump_document(result.document, indent=config.indent)

    # A failed unit suppresses output unless --keep-going asked for partial results.
    if result.ok or config.keep_going:
        if args.output is not None:
            try:
                args.output.write_text(output + "\n", encoding="utf-8")
            except OSError as exc:
                parser.exit(1, f"struct2json: failed to write {args.output}: {exc}\n")
        else:
            print(output)

    if not result.ok:
        failed = ", ".join(unit.request.path.as_posix() for unit in result.failures)
        parser.exit(1, f"struct2json: failed to parse {failed}\nRun with --verbose for more details.\n")


if __name__ == "__main__":
    main(sys.argv[1:])
