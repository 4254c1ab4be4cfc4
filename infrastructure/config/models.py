"""Configuration models (Pydantic classes)."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from infrastructure.constants import DEFAULT_FALSE_TEXT, DEFAULT_ROOT_DIR, DEFAULT_TRUE_TEXT


class LabelPosition(str, Enum):
    """Where the true/false label goes relative to the question text."""

    PREFIX = "prefix"
    SUFFIX = "suffix"


class RunConfig(BaseModel):
    """
    Runtime configuration.
    - Built from defaults, then the optional YAML config file, then CLI flags
    - Frozen once resolved
    - Consumed by segment building and the tree materializer
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    root_dir: Path = Field(
        default_factory=lambda: DEFAULT_ROOT_DIR,
        description="Directory under which the key structure is created.",
    )
    true_text: str = Field(default=DEFAULT_TRUE_TEXT, description="Label used for true answers.")
    false_text: str = Field(default=DEFAULT_FALSE_TEXT, description="Label used for false answers.")
    label_position: LabelPosition = Field(
        default=LabelPosition.PREFIX,
        description="Place the label before (prefix) or after (suffix) the question text.",
    )

    def label_for(self, answer: bool) -> str:
        return self.true_text if answer else self.false_text
