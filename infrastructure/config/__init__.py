"""
Configuration management: models, loading, and CLI option resolution.

Handles:
- RunConfig: resolved run configuration (root dir, labels, label position)
- YAML config file loading
- Command-line option resolution into a RunConfig

The loader and options modules perform file I/O; models are pure Pydantic classes.
"""

from infrastructure.config.loader import load_run_config, parse_config_file
from infrastructure.config.models import LabelPosition, RunConfig
from infrastructure.config.options import ResolvedOptions, UsageError, build_parser, resolve_options

__all__ = [
    # Main config (most commonly used)
    "RunConfig",
    "load_run_config",
    # Enums
    "LabelPosition",
    # CLI
    "resolve_options",
    "build_parser",
    "ResolvedOptions",
    "UsageError",
    # Loaders
    "parse_config_file",
]
