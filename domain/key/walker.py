"""
Traversal of a key document.

Turns the parsed JSON (category -> species entries -> question entries) into a
lazy stream of events: one SpeciesPath per species that can be placed, and one
Skipped per value of the wrong kind. This module performs no file I/O.
"""

from collections.abc import Iterator
from typing import Any

from domain.key.events import EntryLevel, KeyEvent, Skipped, SpeciesPath
from domain.key.nodes import JsonKind, kind_of
from domain.key.segments import build_segment
from infrastructure.config.models import RunConfig


def walk_key(document: Any, cfg: RunConfig) -> Iterator[KeyEvent]:
    """
    Walk a key document in document order.

    Entries hold a single key by convention only. Every key is processed:
    a species entry with two keys yields two species, and a question entry
    with two keys adds two directory levels.

    Args:
        document: Value returned by json.load()
        cfg: Resolved run configuration (labels and label position)

    Yields:
        Skipped events for malformed values, then SpeciesPath for each species
    """
    found = kind_of(document)
    if found is not JsonKind.OBJECT:
        yield Skipped(level=EntryLevel.DOCUMENT, expected=JsonKind.OBJECT, found=found)
        return

    for category, species_list in document.items():
        found = kind_of(species_list)
        if found is not JsonKind.ARRAY:
            yield Skipped(
                level=EntryLevel.CATEGORY,
                key=category,
                category=category,
                expected=JsonKind.ARRAY,
                found=found,
            )
            continue

        for species_entry in species_list:
            yield from walk_species_entry(category, species_entry, cfg)


def walk_species_entry(category: str, species_entry: Any, cfg: RunConfig) -> Iterator[KeyEvent]:
    found = kind_of(species_entry)
    if found is not JsonKind.OBJECT:
        yield Skipped(
            level=EntryLevel.SPECIES_ENTRY,
            category=category,
            expected=JsonKind.OBJECT,
            found=found,
        )
        return

    for species, questions in species_entry.items():
        found = kind_of(questions)
        if found is not JsonKind.ARRAY:
            yield Skipped(
                level=EntryLevel.SPECIES,
                key=species,
                category=category,
                species=species,
                expected=JsonKind.ARRAY,
                found=found,
            )
            continue

        yield from _fold_questions(category, species, questions, cfg)


def _fold_questions(category: str, species: str, questions: list[Any], cfg: RunConfig) -> Iterator[KeyEvent]:
    segments: tuple[str, ...] = ()
    skipped = 0

    for question_entry in questions:
        found = kind_of(question_entry)
        if found is not JsonKind.OBJECT:
            yield Skipped(
                level=EntryLevel.QUESTION_ENTRY,
                category=category,
                species=species,
                expected=JsonKind.OBJECT,
                found=found,
            )
            continue

        for question, answer in question_entry.items():
            found = kind_of(answer)
            if found is not JsonKind.BOOLEAN:
                # Level omitted; the species still gets a (shorter) path
                skipped += 1
                yield Skipped(
                    level=EntryLevel.QUESTION,
                    key=question,
                    category=category,
                    species=species,
                    expected=JsonKind.BOOLEAN,
                    found=found,
                )
                continue
            segments = (*segments, build_segment(question, answer, cfg))

    yield SpeciesPath(category=category, species=species, segments=segments, skipped_questions=skipped)
