"""
Command-line option resolution.

Turns raw CLI arguments into a RunConfig plus logging options. Usage problems
are raised as UsageError instead of exiting, so the entrypoint decides how to
report them and which exit code to use.
"""

import argparse
from collections.abc import Sequence
from pathlib import Path
from typing import NoReturn

from pydantic import BaseModel, ConfigDict

from infrastructure.config.loader import load_run_config
from infrastructure.config.models import LabelPosition, RunConfig
from infrastructure.constants import DEFAULT_FALSE_TEXT, DEFAULT_TRUE_TEXT, PROG_NAME

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class UsageError(ValueError):
    """Invalid command line. Carries the usage text to show the user."""

    def __init__(self, message: str, usage: str = "") -> None:
        super().__init__(message)
        self.usage = usage


class ResolvedOptions(BaseModel):
    """Everything the entrypoint needs after option resolution."""

    model_config = ConfigDict(frozen=True)

    key_file: Path
    config: RunConfig
    console_level: str = "INFO"
    log_file: Path | None = None
    file_level: str = "DEBUG"


class _RaisingArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        raise UsageError(message, usage=self.format_help())


def build_parser() -> argparse.ArgumentParser:
    p = _RaisingArgumentParser(
        prog=PROG_NAME,
        description="Create a directory tree from a dichotomous key described in JSON.",
        allow_abbrev=False,
    )
    p.add_argument("key_file", nargs="?", metavar="<clave>", help="JSON file with the dichotomous key")
    p.add_argument(
        "-d",
        "--dir",
        dest="root_dir",
        metavar="<raiz>",
        help="Root directory to create the structure under (default: .)",
    )
    p.add_argument(
        "-t",
        "--true",
        dest="true_text",
        metavar="<texto>",
        help=f"Label for true answers (default: '{DEFAULT_TRUE_TEXT}'); use -t=-text for labels starting with '-'",
    )
    p.add_argument(
        "-f",
        "--false",
        dest="false_text",
        metavar="<texto>",
        help=f"Label for false answers (default: '{DEFAULT_FALSE_TEXT}'); use -f=-text for labels starting with '-'",
    )
    # -p and -s share one destination, so whichever comes last wins
    p.add_argument(
        "-p",
        "--pre",
        dest="label_position",
        action="store_const",
        const=LabelPosition.PREFIX,
        help="Place the label before the question text (default)",
    )
    p.add_argument(
        "-s",
        "--suf",
        dest="label_position",
        action="store_const",
        const=LabelPosition.SUFFIX,
        help="Place the label after the question text (disables --pre)",
    )
    p.add_argument(
        "-c",
        "--config",
        dest="config_file",
        metavar="<yaml>",
        help="YAML file with default values for the options above",
    )
    p.add_argument(
        "--console-level",
        type=str,
        default="INFO",
        choices=LOG_LEVELS,
        help="Console log level",
    )
    p.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Also write logs to this file (rotating)",
    )
    p.add_argument(
        "--file-level",
        type=str,
        default="DEBUG",
        choices=LOG_LEVELS,
        help="File log level",
    )
    return p


def resolve_options(argv: Sequence[str]) -> ResolvedOptions:
    """
    Resolve CLI arguments into ResolvedOptions.

    Options may appear before or after the JSON file; for repeated options the
    last occurrence wins.

    Raises:
        UsageError: No arguments, unknown flag, or missing JSON file
        FileNotFoundError: --config points to a missing file
        ValueError: The config file or an option value is invalid
    """
    parser = build_parser()
    if not argv:
        raise UsageError("no arguments given", usage=parser.format_help())

    args = parser.parse_args(list(argv))
    if args.key_file is None:
        raise UsageError("a JSON key file is required", usage=parser.format_help())

    cfg = load_run_config(
        Path(args.config_file) if args.config_file else None,
        overrides={
            "root_dir": Path(args.root_dir) if args.root_dir is not None else None,
            "true_text": args.true_text,
            "false_text": args.false_text,
            "label_position": args.label_position,
        },
    )

    return ResolvedOptions(
        key_file=Path(args.key_file),
        config=cfg,
        console_level=args.console_level,
        log_file=Path(args.log_file) if args.log_file else None,
        file_level=args.file_level,
    )
