"""
Domain layer: Business logic with minimal external dependencies.

Contains:
- key: JSON value classification, directory segment naming, and the
  traversal of a dichotomous key into species paths
"""

from domain.key import SpeciesPath, Skipped, build_segment, walk_key

__all__ = [
    "SpeciesPath",
    "Skipped",
    "build_segment",
    "walk_key",
]
