from __future__ import annotations

from pathlib import Path

from pixelturtle.settings.values import FIELD_DEFAULTS, VIDEO_DEFAULTS, load_values


def test_packaged_defaults() -> None:
    assert FIELD_DEFAULTS == {"width": 400, "height": 400}
    assert VIDEO_DEFAULTS["frame_pattern"] == "frame%05d.bmp"


def test_partial_file_merges_over_fallbacks(tmp_path: Path) -> None:
    path = tmp_path / "values.yml"
    path.write_text("field:\n  width: 320\nfill:\n  polygon_capacity: ~\n")
    values = load_values(path)
    assert values["field"] == {"width": 320, "height": 400}
    assert values["fill"]["polygon_capacity"] == 128
    assert values["diagnostics"]["oob_report_limit"] == 100


def test_unknown_keys_ignored(tmp_path: Path) -> None:
    path = tmp_path / "values.yml"
    path.write_text("video:\n  codec: h264\n")
    assert "codec" not in load_values(path)["video"]


def test_missing_or_broken_file_uses_fallbacks(tmp_path: Path) -> None:
    assert load_values(tmp_path / "absent.yml")["field"]["width"] == 400
    broken = tmp_path / "broken.yml"
    broken.write_text("field: [unclosed\n")
    assert load_values(broken)["field"]["height"] == 400
    scalar = tmp_path / "scalar.yml"
    scalar.write_text("42\n")
    assert load_values(scalar)["video"]["frame_interval"] == 10
