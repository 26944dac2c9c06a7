# cdjkit/config.py

from __future__ import annotations
import json
import sys
from pathlib import Path
from typing import Any, Dict, Tuple


def load_config(path: Path | None) -> Dict[str, Any]:
    """Load configuration from a JSON file.

    Args:
        path (Path | None): Path to the JSON configuration file.

    Returns:
        Dict[str, Any]: Configuration dictionary. Empty if no file is provided or read fails.
    """
    if not path:
        return {}
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as exc:
        print(f"[WARN] Failed to read config {path}: {exc}", file=sys.stderr)
        return {}
    if not isinstance(data, dict):
        print(f"[WARN] Ignoring config {path}: top level must be an object", file=sys.stderr)
        return {}
    return data


def effective_config(explicit: str | None, default_path: Path) -> Tuple[Dict[str, Any], Path]:
    """Load the explicit config if given, else `default_path` when it exists."""
    config_path = Path(explicit) if explicit else default_path
    cfg = load_config(config_path if config_path.exists() else None)
    return cfg, config_path
