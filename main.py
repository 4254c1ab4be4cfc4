"""
CLI entrypoint for building a directory tree from a dichotomous key.

This script performs the following steps:
- resolves options (CLI flags over an optional YAML config file over defaults)
- configures console (and optional rotating file) logging
- loads the JSON key document
- creates one directory per question/answer pair and one marker file per species
- logs a human-readable summary of the run

Exit status is 0 on success (warnings included) and 1 on any fatal error.
"""

import logging
import sys
from collections.abc import Sequence

from application import log_materialize_summary, materialize
from infrastructure.config import UsageError, resolve_options
from infrastructure.io import load_key_document
from infrastructure.observability import configure_logging

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def main(argv: Sequence[str] | None = None) -> int:
    try:
        opts = resolve_options(sys.argv[1:] if argv is None else argv)
    except UsageError as e:
        print(f"Error: {e}", file=sys.stderr)
        print(e.usage, file=sys.stderr, end="")
        return EXIT_FAILURE
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    try:
        configure_logging(
            log_file=opts.log_file,
            console_level=getattr(logging, opts.console_level),
            file_level=getattr(logging, opts.file_level),
        )
    except OSError as e:
        print(f"Error: cannot open log file: {e}", file=sys.stderr)
        return EXIT_FAILURE

    cfg = opts.config
    logger.debug(
        "Resolved options: key_file=%s root_dir=%s true_text=%r false_text=%r label_position=%s",
        opts.key_file,
        cfg.root_dir,
        cfg.true_text,
        cfg.false_text,
        cfg.label_position.value,
    )

    try:
        document = load_key_document(opts.key_file)
    except (OSError, ValueError) as e:
        logger.error("%s", e)
        return EXIT_FAILURE

    try:
        report = materialize(document, cfg.root_dir, cfg)
    except OSError as e:
        logger.error("Error creating directory: %s", e)
        return EXIT_FAILURE

    log_materialize_summary(report, cfg.root_dir)
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
