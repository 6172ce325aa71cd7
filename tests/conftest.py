from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable, Iterator, Set, Tuple

import pytest

from pixelturtle.core.models import WHITE
from pixelturtle.core.turtle import Turtle

Point = Tuple[int, int]


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    # keep the user's real ~/.pixelturtle out of every test
    home = tmp_path / "home"
    monkeypatch.setenv("PIXELTURTLE_HOME", str(home))
    return home


@pytest.fixture
def turtle() -> Iterator[Turtle]:
    t = Turtle(40, 40)
    yield t
    t.close()


def painted_pixels(t: Turtle, background=WHITE) -> dict[Point, tuple[int, int, int]]:
    """Map every non-background pixel's centered coordinate to its color."""
    buf = t.buffer
    data = buf.data
    out: dict[Point, tuple[int, int, int]] = {}
    half_w, half_h = buf.width // 2, buf.height // 2
    for idx in range(buf.width * buf.height):
        rgb = tuple(data[3 * idx : 3 * idx + 3])
        if rgb != tuple(background):
            out[(idx % buf.width - half_w, idx // buf.width - half_h)] = rgb
    return out


@pytest.fixture
def painted() -> Callable[..., dict]:
    return painted_pixels


def picture(rows: Iterable[str], x: int = 0, y: int = 0) -> Set[Point]:
    """Points marked '1' in a top-down text picture anchored at (x, y)."""
    pts: Set[Point] = set()
    for r, row in enumerate(rows):
        for c, ch in enumerate(row):
            if ch == "1":
                pts.add((x + c, y - r))
    return pts


@pytest.fixture
def draw_picture() -> Callable[..., Set[Point]]:
    return picture
