"""
Infrastructure layer: External dependencies and I/O boundaries.

Contains:
- Configuration loading (YAML config file, CLI options)
- Key document loading and filesystem operations
- Observability (logging)

This is the only layer that performs I/O operations.
"""

# Most commonly used - exposed at top level for convenience
from infrastructure.config import (
    LabelPosition,
    RunConfig,
    UsageError,
    load_run_config,
    resolve_options,
)
from infrastructure.io import load_key_document

__all__ = [
    # Configuration (most commonly used)
    "resolve_options",
    "load_run_config",
    "RunConfig",
    "LabelPosition",
    "UsageError",
    # I/O
    "load_key_document",
]
