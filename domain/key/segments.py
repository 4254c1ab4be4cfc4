"""Directory segment naming."""

from infrastructure.config.models import LabelPosition, RunConfig


def build_segment(question: str, answer: bool, cfg: RunConfig) -> str:
    """
    Build the directory name for one question/answer pair.

    Examples:
        >>> build_segment("Can fly", True, RunConfig())
        'si tiene Can fly'
        >>> build_segment("Has feathers", False, RunConfig(false_text="no", label_position="suffix"))
        'Has feathers no'
    """
    label = cfg.label_for(answer)
    if cfg.label_position is LabelPosition.PREFIX:
        return f"{label} {question}"
    return f"{question} {label}"
