"""Centralized default values loaded from YAML.

The master source is ``values.yml`` in this package. On import we load and
parse it; a missing or corrupt file falls back to the hard-coded literals
below so the engine can still run. Individual keys are merged over the
fallbacks, so a partial YAML file only overrides what it names.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict

import yaml

__all__ = [
    "FIELD_DEFAULTS",
    "VIDEO_DEFAULTS",
    "FILL_DEFAULTS",
    "DIAGNOSTICS_DEFAULTS",
    "load_values",
]

logger = logging.getLogger(__name__)

_PKG_DIR = Path(__file__).parent
_YAML_PATH = _PKG_DIR / "values.yml"

# --- Fallback literals ---------------------------------------------------
_FALLBACK_FIELD: Dict[str, Any] = {"width": 400, "height": 400}
_FALLBACK_VIDEO: Dict[str, Any] = {
    "frame_interval": 10,
    "frame_dir": ".",
    "frame_pattern": "frame%05d.bmp",
}
_FALLBACK_FILL: Dict[str, Any] = {"polygon_capacity": 128}
_FALLBACK_DIAGNOSTICS: Dict[str, Any] = {
    "oob_report_limit": 100,
    "log_level": "WARNING",
}


def _merge(base: Dict[str, Any], section: Any) -> Dict[str, Any]:
    out = dict(base)
    if isinstance(section, dict):
        for k, v in section.items():
            if k in out and v is not None:
                out[k] = v
    return out


def load_values(path: Path = _YAML_PATH) -> Dict[str, Dict[str, Any]]:
    """Return the default sections, merged over the fallbacks.

    Args:
        path: YAML file to read.
    Returns:
        Mapping of section name (``field``, ``video``, ``fill``,
        ``diagnostics``) to its key/value defaults.
    """
    raw: Any = {}
    if path.exists():
        try:
            with path.open("r", encoding="utf-8") as f:
                raw = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as exc:
            logger.warning("ignoring unreadable defaults file %s: %s", path, exc)
            raw = {}
    if not isinstance(raw, dict):
        raw = {}
    return {
        "field": _merge(_FALLBACK_FIELD, raw.get("field")),
        "video": _merge(_FALLBACK_VIDEO, raw.get("video")),
        "fill": _merge(_FALLBACK_FILL, raw.get("fill")),
        "diagnostics": _merge(_FALLBACK_DIAGNOSTICS, raw.get("diagnostics")),
    }


_values = load_values()

FIELD_DEFAULTS: Dict[str, Any] = _values["field"]
VIDEO_DEFAULTS: Dict[str, Any] = _values["video"]
FILL_DEFAULTS: Dict[str, Any] = _values["fill"]
DIAGNOSTICS_DEFAULTS: Dict[str, Any] = _values["diagnostics"]
