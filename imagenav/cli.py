"""Command-line entry point."""

from __future__ import annotations

import argparse
import contextlib
import os
import sys
from pathlib import Path
from queue import Queue
from typing import Optional, Sequence

from .config import (
    IMG_EXTS, PAGEANT_INTERVAL_S, TICK_MS, WINDOW_WIDTH, WINDOW_HEIGHT, ViewerConfig,
)
from .errors import (
    StartupError, NoDisplayableEntries, RenderError, WindowError, InputThreadError,
)
from .logging import get_logger, log
from .surfaces import Renderer
from .types import FullscreenMode


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="imagenav",
        description="Step through the images of a directory one at a time.",
    )
    parser.add_argument(
        "directory",
        nargs="?",
        default=None,
        help="Directory containing the images to show.",
    )
    parser.add_argument(
        "--interval",
        type=float,
        default=PAGEANT_INTERVAL_S,
        help="Seconds between automatic advances in pageant mode.",
    )
    parser.add_argument(
        "--tick-ms",
        type=int,
        default=TICK_MS,
        help="Event loop sleep per iteration, in milliseconds.",
    )
    parser.add_argument("--width", type=int, default=WINDOW_WIDTH, help="Window width in pixels.")
    parser.add_argument("--height", type=int, default=WINDOW_HEIGHT, help="Window height in pixels.")
    parser.add_argument(
        "--pageant",
        action="store_true",
        help="Start with pageant (automatic advance) mode on.",
    )
    parser.add_argument(
        "--fullscreen",
        action="store_true",
        help="Start in desktop fullscreen.",
    )
    parser.add_argument(
        "--images-only",
        action="store_true",
        help="Only list files with a known image extension.",
    )
    parser.add_argument(
        "--no-terminal",
        dest="use_terminal",
        action="store_false",
        help="Do not read keys from the terminal; window keys only.",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> ViewerConfig:
    return ViewerConfig(
        tick_ms=max(0, args.tick_ms),
        pageant_interval_s=max(0.0, args.interval),
        width=args.width,
        height=args.height,
        start_pageant=args.pageant,
        start_fullscreen=args.fullscreen,
        images_only=args.images_only,
        use_terminal=args.use_terminal,
    )


def terminal_fd(config: ViewerConfig) -> Optional[int]:
    """The stdin descriptor when terminal input should be read, else None."""
    if not config.use_terminal:
        return None
    try:
        fd = sys.stdin.fileno()
    except (AttributeError, OSError, ValueError):
        return None
    return fd if os.isatty(fd) else None


def open_window(config: ViewerConfig):
    """Create and open the raylib window."""
    from .window import RaylibWindow
    window = RaylibWindow()
    window.open(config.width, config.height)
    return window


def run_viewer(directory: Path, config: ViewerConfig, renderer: Optional[Renderer] = None,
               window=None, input_fd: Optional[int] = None) -> int:
    """Open the window and run the event loop. Returns the process exit code."""
    from .app import EventLoop
    from .image_utils import list_entries
    from .input_decoder import ExitFlag, InputDecoder
    from .input_handler import InputHandler
    from .navigator import Navigator
    from .terminal import RawTerminal

    entries = list_entries(directory, IMG_EXTS if config.images_only else None)
    log(f"[DIR] Found {len(entries)} files in {directory}")

    if window is None:
        try:
            window = open_window(config)
        except WindowError as e:
            raise StartupError(f"cannot open window: {e}") from e
    if renderer is None:
        from .renderer import RaylibRenderer
        renderer = RaylibRenderer()

    try:
        try:
            nav = Navigator(entries, renderer, window, config.pageant_interval_s)
        except NoDisplayableEntries as e:
            raise StartupError(f"no displayable images in {directory}") from e
        nav.view.pageant_mode = config.start_pageant
        if config.start_fullscreen:
            nav.view.fullscreen = FullscreenMode.DESKTOP
        log(f"[START] {len(nav.ring)} displayable candidates, first={nav.current.name}")
        try:
            nav.show()
        except (RenderError, WindowError) as e:
            log(f"[START][ERR] {e}")

        exit_flag = ExitFlag()
        symbols: "Queue[str]" = Queue()
        decoder = None
        with contextlib.ExitStack() as stack:
            if input_fd is not None:
                if os.isatty(input_fd):
                    stack.enter_context(RawTerminal(input_fd).raw_mode())
                    stack.enter_context(get_logger().raw_lines())
                decoder = InputDecoder(input_fd, symbols, exit_flag)
                decoder.start()
            loop = EventLoop(
                navigator=nav,
                window=window,
                exit_flag=exit_flag,
                symbols=symbols,
                decoder=decoder,
                input_handler=InputHandler(config.rotate_step, config.zoom_step),
                tick_seconds=config.tick_seconds,
            )
            result = loop.run()
    finally:
        renderer.close()
        window.close()

    if not result.ok:
        print("imagenav: no displayable entries left", file=sys.stderr)
        return 1
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.directory is None:
        parser.print_usage(sys.stdout)
        return 0

    config = config_from_args(args)
    directory = Path(args.directory).expanduser()
    try:
        return run_viewer(directory, config, input_fd=terminal_fd(config))
    except StartupError as e:
        print(f"imagenav: {e}", file=sys.stderr)
        return 1
    except InputThreadError as e:
        print(f"imagenav: {e}", file=sys.stderr)
        return 1
