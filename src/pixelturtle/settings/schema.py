"""Pydantic model for user settings."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from .values import DIAGNOSTICS_DEFAULTS, FIELD_DEFAULTS, FILL_DEFAULTS, VIDEO_DEFAULTS

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseModel):
    """Engine settings persisted to disk.

    Parameters
    ----------
    width, height: Default field size in pixels for new engines.
    frame_interval: Default pixels per video frame.
    frame_dir: Directory video frames are written into.
    frame_pattern: printf-style frame file name; must take one integer.
    polygon_capacity: Maximum polygon vertices recorded during a fill, and
        maximum intercepts per scanline before the fill is aborted.
    oob_report_limit: How many out-of-bounds pixel writes are logged per
        engine before further ones are only counted.
    log_level: Logging level name used by the CLI.
    """

    width: int = Field(default=int(FIELD_DEFAULTS["width"]))
    height: int = Field(default=int(FIELD_DEFAULTS["height"]))
    frame_interval: int = Field(default=int(VIDEO_DEFAULTS["frame_interval"]))
    frame_dir: str = Field(default=str(VIDEO_DEFAULTS["frame_dir"]))
    frame_pattern: str = Field(default=str(VIDEO_DEFAULTS["frame_pattern"]))
    polygon_capacity: int = Field(default=int(FILL_DEFAULTS["polygon_capacity"]))
    oob_report_limit: int = Field(
        default=int(DIAGNOSTICS_DEFAULTS["oob_report_limit"])
    )
    log_level: str = Field(default=str(DIAGNOSTICS_DEFAULTS["log_level"]))

    @field_validator("width", "height")
    @classmethod
    def _chk_size(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("field size must be > 0 pixels")
        return v

    @field_validator("frame_interval", "polygon_capacity")
    @classmethod
    def _chk_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("must be >= 1")
        return v

    @field_validator("oob_report_limit")
    @classmethod
    def _chk_limit(cls, v: int) -> int:
        if v < 0:
            raise ValueError("oob_report_limit must be >= 0")
        return v

    @field_validator("frame_pattern")
    @classmethod
    def _chk_pattern(cls, v: str) -> str:
        try:
            name = v % 1
        except (TypeError, ValueError):
            raise ValueError(
                "frame_pattern must contain exactly one integer field, e.g. %05d"
            ) from None
        if name == v % 2:
            raise ValueError("frame_pattern must vary with the frame number")
        return v

    @field_validator("log_level")
    @classmethod
    def _chk_log_level(cls, v: str) -> str:
        v = v.strip().upper()
        if v not in _LOG_LEVELS:
            raise ValueError(
                "invalid log_level: must be one of " + ", ".join(_LOG_LEVELS)
            )
        return v
