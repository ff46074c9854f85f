"""Command line entry point: starts the requested game windows around one shared model."""

from __future__ import annotations

import argparse
import os
import time
from enum import Enum
from typing import Any, List, Optional, Sequence

from multitetris.application import AbstractApplication
from multitetris.controller import TimeController
from multitetris.game import GameModel

DEFAULT_FONT_PATH = "./Resources/arial_bolditalicmt.ttf"
DROP_INTERVAL = 0.5
_IDLE_SLEEP = 0.001

_DESCRIPTION = (
    "MultiTetris - multi-window tetris using pygame and Tk graphics libraries.\n"
    "All options"
)


class ApplicationKind(str, Enum):
    """Available front ends."""

    PYGAME = "pygame"
    TK = "tk"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="multitetris",
        description=_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    parser.add_argument(
        "--QWidget",
        dest="qt_widgets",
        type=int,
        default=1,
        help="how many Tk windows, by default 1",
    )
    parser.add_argument(
        "--SFMLWidget",
        dest="pygame_widgets",
        type=int,
        default=1,
        help="how many pygame views, by default 1",
    )
    parser.add_argument("--help", action="store_true", help="produce help message")
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse the command line.

    The result has ``qt_widgets``, ``pygame_widgets`` and ``help``. A malformed
    command line makes argparse exit with status 2.
    """
    return _build_parser().parse_args(argv)


def make_application(kind: Any, model: Any, count: int) -> AbstractApplication:
    """Create, without starting, a front end of ``kind`` showing ``count`` views of ``model``.

    Raises ValueError for an unknown kind.
    """
    kind = ApplicationKind(kind)
    if kind is ApplicationKind.PYGAME:
        from multitetris.pygame_view import PygameApplication

        font_path = DEFAULT_FONT_PATH if os.path.isfile(DEFAULT_FONT_PATH) else None
        return PygameApplication(model, count, font_path)
    from multitetris.tk_view import TkApplication

    return TkApplication(model, count)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the game; return the process exit status."""
    args = parse_args(argv)
    if args.help:
        print(_build_parser().format_help())
        return 1

    with GameModel() as model:
        applications: List[AbstractApplication] = []
        if args.pygame_widgets > 0:
            applications.append(
                make_application(ApplicationKind.PYGAME, model, args.pygame_widgets)
            )
        if args.qt_widgets > 0:
            applications.append(make_application(ApplicationKind.TK, model, args.qt_widgets))
        for app in applications:
            app.start()

        timer = TimeController(model, DROP_INTERVAL)
        while applications:
            applications = [app for app in applications if app.is_running()]
            timer.check()
            time.sleep(_IDLE_SLEEP)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())