"""Runtime configuration helpers.

Small aggregator that merges the packaged defaults, the persisted Settings
store and optional CLI overrides into the :class:`EngineConfig` used to
build a :class:`~pixelturtle.core.turtle.Turtle`.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .settings.schema import Settings
from .settings.store import SettingsStore


@dataclass(slots=True)
class EngineConfig:
    width: int
    height: int
    frame_interval: int
    frame_dir: str
    frame_pattern: str
    polygon_capacity: int
    oob_report_limit: int
    log_level: str


def parse_size(text: str) -> tuple[int, int]:
    """Parse ``"WxH"`` (e.g. ``"320x240"``) into a positive size tuple."""
    parts = text.lower().split("x")
    if len(parts) != 2:
        raise ValueError(f"size must look like WIDTHxHEIGHT, got {text!r}")
    w, h = int(parts[0]), int(parts[1])
    if w <= 0 or h <= 0:
        raise ValueError(f"size must be positive, got {text!r}")
    return w, h


def make_engine_config(
    *, args: Optional[object] = None, settings: Optional[Settings] = None
) -> EngineConfig:
    """Build an EngineConfig from persisted settings and CLI overrides.

    Rules:
    - *settings* (or ``SettingsStore.load()`` when omitted) provides the
      user defaults.
    - Attributes present and not None on *args* (argparse.Namespace-like)
      override them for the current session: ``size`` (``"WxH"``),
      ``video`` (frame interval), ``frame_dir`` and ``log_level``.
    """
    if settings is None:
        settings = SettingsStore.load()
    cfg = EngineConfig(
        width=settings.width,
        height=settings.height,
        frame_interval=settings.frame_interval,
        frame_dir=settings.frame_dir,
        frame_pattern=settings.frame_pattern,
        polygon_capacity=settings.polygon_capacity,
        oob_report_limit=settings.oob_report_limit,
        log_level=settings.log_level,
    )

    if args is not None:
        size = getattr(args, "size", None)
        if size is not None:
            cfg.width, cfg.height = parse_size(str(size))
        interval = getattr(args, "video", None)
        if interval is not None:
            cfg.frame_interval = int(interval)
        frame_dir = getattr(args, "frame_dir", None)
        if frame_dir is not None:
            cfg.frame_dir = str(frame_dir)
        level = getattr(args, "log_level", None)
        if level is not None:
            cfg.log_level = str(level).upper()

    return cfg
