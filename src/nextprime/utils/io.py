"""Verification config and results file I/O."""

import json
from pathlib import Path
from typing import Any

import yaml

REQUIRED_SECTIONS = ("run", "verify")


def load_config(config_path: str | Path) -> dict[str, Any]:
    """Load a verification config from YAML.

    Args:
        config_path: Path to the YAML config file.

    Returns:
        Configuration dictionary with at least "run" and "verify" sections.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ValueError: If the file is not a mapping or a section is missing.
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r") as f:
        config = yaml.safe_load(f)

    if not isinstance(config, dict):
        raise ValueError(f"Invalid config: {config_path} does not contain a mapping.")
    missing = [s for s in REQUIRED_SECTIONS if s not in config]
    if missing:
        raise ValueError(f"Invalid config: {config_path} is missing section '{missing[0]}'.")

    return config


def save_config(config: dict[str, Any], path: str | Path) -> None:
    """Snapshot a config into a run directory as YAML."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w") as f:
        yaml.dump(config, f, default_flow_style=False, sort_keys=False)


def load_jsonl(path: str | Path) -> list[dict]:
    """Read verification records back from a results.jsonl file."""
    with open(path, "r") as f:
        return [json.loads(line) for line in f if line.strip()]
