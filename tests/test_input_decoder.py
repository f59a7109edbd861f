"""Terminal input thread driven through an os.pipe instead of a tty."""

from __future__ import annotations

import os
import time
import unittest
from queue import Empty, Queue

from imagenav.input_decoder import ExitFlag, InputDecoder

from nav_fakes import quiet_logs


def drain(q: "Queue[str]", count: int, timeout: float = 2.0):
    out = []
    deadline = time.monotonic() + timeout
    while len(out) < count and time.monotonic() < deadline:
        try:
            out.append(q.get(timeout=0.05))
        except Empty:
            continue
    return out


class ExitFlagTests(unittest.TestCase):
    def test_flag_starts_clear_and_stays_set(self) -> None:
        flag = ExitFlag()
        self.assertFalse(flag.is_set())
        flag.set()
        flag.set()
        self.assertTrue(flag.is_set())


class InputDecoderTests(unittest.TestCase):
    def setUp(self) -> None:
        quiet_logs()
        self.read_fd, self.write_fd = os.pipe()
        self.symbols: "Queue[str]" = Queue()
        self.flag = ExitFlag()
        self.decoder = InputDecoder(self.read_fd, self.symbols, self.flag, esc_timeout_ms=20)

    def tearDown(self) -> None:
        self.flag.set()
        self._close(self.write_fd)
        self.decoder.join(1.0)
        self._close(self.read_fd)

    @staticmethod
    def _close(fd: int) -> None:
        try:
            os.close(fd)
        except OSError:
            pass

    def test_bytes_become_symbols_in_order(self) -> None:
        self.decoder.start()
        os.write(self.write_fd, b"q\x1b[Cp")
        self.assertEqual(drain(self.symbols, 3), ["q", "RIGHT", "p"])

    def test_lone_escape_is_flushed_after_timeout(self) -> None:
        self.decoder.start()
        os.write(self.write_fd, b"\x1b")
        self.assertEqual(drain(self.symbols, 1), ["ESC"])

    def test_end_of_input_stops_thread_cleanly(self) -> None:
        self.decoder.start()
        os.write(self.write_fd, b"r")
        os.close(self.write_fd)
        self.assertTrue(self.decoder.join(2.0))
        self.assertTrue(self.decoder.reached_eof)
        self.assertFalse(self.decoder.failed)
        self.assertEqual(drain(self.symbols, 1), ["r"])

    def test_exit_flag_stops_thread_after_next_byte(self) -> None:
        self.decoder.start()
        os.write(self.write_fd, b"f")
        self.assertEqual(drain(self.symbols, 1), ["f"])

        self.flag.set()
        self.assertFalse(self.decoder.join(0.1))
        os.write(self.write_fd, b"z")
        self.assertTrue(self.decoder.join(2.0))

    def test_read_failure_is_recorded(self) -> None:
        os.close(self.read_fd)
        self.decoder.start()
        self.assertTrue(self.decoder.join(2.0))
        self.assertTrue(self.decoder.failed)
        self.assertIsInstance(self.decoder.error, OSError)

    def test_join_before_start_is_immediate(self) -> None:
        self.assertTrue(self.decoder.join(0.0))


if __name__ == "__main__":
    unittest.main()
