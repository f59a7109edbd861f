from __future__ import annotations

import io
import unittest

from imagenav.commands import (
    CloseApp, NavigateNext, NavigatePrev, Rotate, ToggleFullscreen, TogglePageant, Zoom,
)
from imagenav.input_handler import InputHandler
from imagenav.logging import Logger


class InputHandlerTests(unittest.TestCase):
    def test_default_bindings(self) -> None:
        handler = InputHandler()
        expected = {
            "q": CloseApp,
            "CTRL_C": CloseApp,
            "ESC": CloseApp,
            "QUIT": CloseApp,
            "f": ToggleFullscreen,
            "r": Rotate,
            "z": Zoom,
            "RIGHT": NavigateNext,
            "LEFT": NavigatePrev,
            "p": TogglePageant,
            "SPACE": TogglePageant,
        }
        for symbol, cls in expected.items():
            self.assertIsInstance(handler.command_for(symbol), cls, symbol)

    def test_steps_come_from_handler(self) -> None:
        handler = InputHandler(rotate_step=-1.0, zoom_step=0.25)
        self.assertEqual(handler.command_for("r"), Rotate(-1.0))
        self.assertEqual(handler.command_for("z"), Zoom(0.25))

    def test_unbound_symbols(self) -> None:
        handler = InputHandler()
        for symbol in ("x", "Q", "UP", "ENTER", ""):
            self.assertIsNone(handler.command_for(symbol), symbol)


class LoggerTests(unittest.TestCase):
    def test_line_format_uses_tick_and_lf(self) -> None:
        stream = io.StringIO()
        logger = Logger(stream=stream)
        logger.increment_tick()
        logger.increment_tick()
        logger("[NAV] hello")
        line = stream.getvalue()
        self.assertTrue(line.endswith(" T000002] [NAV] hello\n"), line)
        self.assertNotIn("\r", line)
        self.assertTrue(line.startswith("["))

    def test_raw_lines_uses_crlf_only_inside_block(self) -> None:
        stream = io.StringIO()
        logger = Logger(stream=stream)
        with logger.raw_lines():
            logger("inside")
        logger("after")
        inside, after = stream.getvalue().split("\r\n")
        self.assertTrue(inside.endswith("inside"))
        self.assertTrue(after.endswith("after\n"))
        self.assertNotIn("\r", after)


if __name__ == "__main__":
    unittest.main()
