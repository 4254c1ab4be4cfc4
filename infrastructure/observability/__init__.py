"""
Observability: structured logging and context management.

Provides:
- Contextual logging with category/species tags
- Log rotation and file management
"""

from infrastructure.observability.logging import (
    clear_log_context,
    clear_species_context,
    configure_logging,
    set_log_context,
)

__all__ = [
    "configure_logging",
    "set_log_context",
    "clear_species_context",
    "clear_log_context",
]
