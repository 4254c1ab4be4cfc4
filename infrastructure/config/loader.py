"""Configuration loading from YAML files."""

from pathlib import Path
from typing import Any

import yaml

from infrastructure.config.models import LabelPosition, RunConfig

CONFIG_KEYS = ("root_dir", "true_text", "false_text", "label_position")


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML file and return as dict."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e

    # An empty file is a valid (empty) config
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected YAML dict in {path}, got {type(data)}")

    return data


def parse_config_file(data: dict[str, Any], path: Path | None = None) -> dict[str, Any]:
    """
    Validate the keys of a pre-loaded config mapping and normalize its values.

    Args:
        data: Dictionary from yaml.safe_load()
        path: Source file, only used in error messages

    Returns:
        Dict of RunConfig field values present in the file

    Raises:
        ValueError: If an unknown key or an invalid label_position is found
    """
    where = f" in {path}" if path is not None else ""
    unknown = sorted(str(k) for k in data if k not in CONFIG_KEYS)
    if unknown:
        raise ValueError(f"Unknown config keys{where}: {unknown}. Allowed: {list(CONFIG_KEYS)}")

    values: dict[str, Any] = {}
    if data.get("root_dir") is not None:
        values["root_dir"] = Path(str(data["root_dir"]))
    for key in ("true_text", "false_text"):
        if data.get(key) is not None:
            values[key] = str(data[key])
    if data.get("label_position") is not None:
        raw = str(data["label_position"]).strip().lower()
        try:
            values["label_position"] = LabelPosition(raw)
        except ValueError as e:
            raise ValueError(
                f"Invalid label_position {data['label_position']!r}{where}; "
                f"expected one of {[p.value for p in LabelPosition]}"
            ) from e
    return values


def load_run_config(config_path: Path | None = None, overrides: dict[str, Any] | None = None) -> RunConfig:
    """
    Construct a fully-resolved RunConfig.

    Precedence (lowest to highest): model defaults, YAML config file, overrides.
    Override values that are None are ignored so callers can pass unset CLI flags as-is.
    """
    values: dict[str, Any] = {}
    if config_path is not None:
        values.update(parse_config_file(_load_yaml(config_path), config_path))

    values.update({k: v for k, v in (overrides or {}).items() if v is not None})
    return RunConfig(**values)
