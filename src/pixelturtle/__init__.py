"""pixelturtle package root.

The project version is defined here as the single source of truth and
exposed via ``__version__``. The packaging configuration (pyproject.toml)
reads this attribute using ``version = { attr = "pixelturtle.__version__" }``.

The engine itself lives in :mod:`pixelturtle.core.turtle`; it is re-exported
here for convenience::

    from pixelturtle import Turtle

    with Turtle(200, 200) as t:
        t.forward(50)
        t.save_bitmap("out.bmp")
"""

__version__ = "0.1.0"

from pixelturtle.core.turtle import Turtle  # noqa: E402

__all__ = ["Turtle", "__version__"]
