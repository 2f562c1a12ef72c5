"""Persisted preview options used by the command line interface."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

USER_DIR = Path.home() / ".ease"
OPTIONS_FILE = USER_DIR / "options.json"

DEFAULT_OPTIONS: Dict[str, Any] = {
    "cell_width": 160,
    "cell_height": 120,
    "columns": 4,
    "samples": 100,
    "line_width": 2,
    "background": [30, 30, 30],
    "frame_color": [90, 90, 90],
    "curve_color": [255, 200, 0],
    "label_color": [220, 220, 220],
}


def _coerce(value: Any, default: Any) -> Any:
    if isinstance(default, list):
        color = [int(v) for v in value][: len(default)]
        if len(color) < len(default) or not all(0 <= v <= 255 for v in color):
            raise ValueError(f"invalid colour {value!r}")
        return color
    return type(default)(value)


def load_options(path: Optional[Path] = None) -> Dict[str, Any]:
    """Return the preview options, falling back to the defaults.

    Unknown keys are ignored.  A file that cannot be read or parsed is
    logged and the defaults are returned unchanged.
    """
    options = dict(DEFAULT_OPTIONS)
    path = Path(path) if path is not None else OPTIONS_FILE
    if not path.exists():
        return options
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"expected a JSON object in {path}")
        loaded = {
            key: _coerce(value, DEFAULT_OPTIONS[key])
            for key, value in data.items()
            if key in DEFAULT_OPTIONS
        }
    except (OSError, ValueError, TypeError) as exc:
        logger.warning("Failed to load options: %s", exc)
        return options
    options.update(loaded)
    return options


def save_options(options: Dict[str, Any], path: Optional[Path] = None) -> None:
    """Write the known keys of ``options`` as JSON."""
    path = Path(path) if path is not None else OPTIONS_FILE
    data = {key: options[key] for key in DEFAULT_OPTIONS if key in options}
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
    except OSError as exc:
        logger.warning("Failed to save options: %s", exc)


__all__ = ["USER_DIR", "OPTIONS_FILE", "DEFAULT_OPTIONS", "load_options", "save_options"]
