"""Pydantic models for the events produced while walking a key document."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from domain.key.nodes import JsonKind


class EntryLevel(str, Enum):
    """Position in the key document where a value was found."""

    DOCUMENT = "document"
    CATEGORY = "category"
    SPECIES_ENTRY = "species entry"
    SPECIES = "species"
    QUESTION_ENTRY = "question entry"
    QUESTION = "question"


class SpeciesPath(BaseModel):
    """A species and the directory segments leading to its marker file."""

    model_config = ConfigDict(frozen=True)

    category: str
    species: str
    segments: tuple[str, ...] = Field(
        default=(),
        description="Directory names from the root down to the species marker, in question order.",
    )
    skipped_questions: int = Field(
        default=0,
        description="Questions left out of the path because their answer was not a boolean.",
    )


class Skipped(BaseModel):
    """A value of the wrong kind that was left out of the generated tree."""

    model_config = ConfigDict(frozen=True)

    level: EntryLevel
    key: str = ""
    category: str | None = None
    species: str | None = None
    expected: JsonKind
    found: JsonKind

    def describe(self) -> str:
        where = f" '{self.key}'" if self.key else ""
        return f"Unexpected value for {self.level.value}{where}: expected {self.expected.value}, got {self.found.value}"


KeyEvent = SpeciesPath | Skipped
