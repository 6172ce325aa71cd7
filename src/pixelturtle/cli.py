"""Command-line interface for pixelturtle.

Two subcommands wrap the public API:

- ``pixelturtle demo NAME --out FILE`` renders one of the built-in sketches
  from :mod:`pixelturtle.app.sketches` and saves it as a BMP, optionally
  emitting video frames along the way (``--video N``).
- ``pixelturtle info FILE`` prints the header fields of a BMP.

Defaults come from the persisted settings (see :mod:`pixelturtle.config`);
flags override them for the current run.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from pixelturtle import __version__
from pixelturtle.app.sketches import SKETCHES
from pixelturtle.config import EngineConfig, make_engine_config, parse_size
from pixelturtle.core.errors import TurtleError
from pixelturtle.core.turtle import Turtle
from pixelturtle.export.bmp import read_bmp

logger = logging.getLogger(__name__)


def _size_arg(text: str) -> str:
    try:
        parse_size(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None
    return text


def _interval_arg(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pixelturtle", description="Turtle graphics rendered to BMP files."
    )
    parser.add_argument(
        "--version", action="store_true", help="Print version and exit"
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="Logging level (default: from settings)",
    )
    sub = parser.add_subparsers(dest="command")

    demo = sub.add_parser("demo", help="Render a built-in sketch")
    demo.add_argument("name", choices=sorted(SKETCHES), help="Sketch to draw")
    demo.add_argument("--out", required=True, help="Output .bmp path")
    demo.add_argument("--size", type=_size_arg, default=None, help="Field size WxH")
    demo.add_argument(
        "--video",
        type=_interval_arg,
        default=None,
        metavar="N",
        help="Also save a frame every N drawn pixels",
    )
    demo.add_argument("--frame-dir", default=None, help="Directory for video frames")

    info = sub.add_parser("info", help="Print BMP header fields")
    info.add_argument("path", help="Bitmap to inspect")
    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def _run_demo(args: argparse.Namespace, cfg: EngineConfig) -> int:
    if args.video is not None:
        Path(cfg.frame_dir).mkdir(parents=True, exist_ok=True)
    with Turtle.from_config(cfg) as t:
        if args.video is not None:
            t.begin_video()
        SKETCHES[args.name](t)
        t.end_video()
        out = t.save_bitmap(args.out)
        frames = t.video.frame_count
    msg = f"wrote {out} ({cfg.width}x{cfg.height})"
    if args.video is not None:
        msg += f" and {frames} frame(s) to {cfg.frame_dir}"
    print(msg)
    return 0


def _run_info(args: argparse.Namespace) -> int:
    bmp = read_bmp(args.path)
    h = bmp.header
    order = "top-down" if h.top_down else "bottom-up"
    print(f"{args.path}: {h.width}x{abs(h.height)} {h.bit_count}-bit {order}")
    print(f"  file size:    {h.file_size}")
    print(f"  data offset:  {h.data_offset}")
    print(f"  image size:   {h.image_size}")
    print(f"  compression:  {h.compression}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entrypoint for the pixelturtle CLI. Returns a process exit status."""
    args = parse_args(argv)

    if args.version:
        print(f"pixelturtle {__version__}")
        return 0

    cfg = make_engine_config(args=args)
    logging.basicConfig(
        level=cfg.log_level, format="%(levelname)s %(name)s: %(message)s"
    )

    if args.command is None:
        build_parser().print_help()
        return 2
    try:
        if args.command == "demo":
            return _run_demo(args, cfg)
        return _run_info(args)
    except (TurtleError, OSError) as exc:
        logger.error("%s", exc)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
