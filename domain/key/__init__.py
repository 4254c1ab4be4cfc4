"""
Dichotomous key handling: value classification, segment naming, traversal.

All functions in this module are pure (no file I/O).
"""

from domain.key.events import EntryLevel, KeyEvent, Skipped, SpeciesPath
from domain.key.nodes import JsonKind, kind_of
from domain.key.segments import build_segment
from domain.key.walker import walk_key, walk_species_entry

__all__ = [
    "JsonKind",
    "kind_of",
    "build_segment",
    "walk_key",
    "walk_species_entry",
    "EntryLevel",
    "KeyEvent",
    "Skipped",
    "SpeciesPath",
]
