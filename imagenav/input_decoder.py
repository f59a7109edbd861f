"""Background terminal input: exit flag and the byte-reading decoder thread."""

from __future__ import annotations
import os
import select
from queue import Queue
from threading import Lock, Thread
from typing import Optional

from .config import ESC_SEQUENCE_TIMEOUT_MS
from .logging import log
from .terminal import KeyDecoder


class ExitFlag:
    """Cooperative cancellation flag shared by the event loop and the input thread."""

    def __init__(self):
        self._lock = Lock()
        self._value = False

    def set(self) -> None:
        with self._lock:
            self._value = True

    def is_set(self) -> bool:
        with self._lock:
            return self._value


class InputDecoder:
    """Reads the terminal one byte at a time and queues decoded key symbols.

    The exit flag is checked before each blocking read only. After an exit
    request the thread therefore stays blocked until the next byte arrives
    (or the process exits; the thread is a daemon), so shutdown of this
    thread can lag behind the event loop.
    """

    def __init__(self, fd: int, symbols: "Queue[str]", exit_flag: ExitFlag,
                 decoder: Optional[KeyDecoder] = None,
                 esc_timeout_ms: int = ESC_SEQUENCE_TIMEOUT_MS):
        self.fd = fd
        self.symbols = symbols
        self.exit_flag = exit_flag
        self.decoder = decoder or KeyDecoder()
        self.esc_timeout_ms = esc_timeout_ms
        self.error: Optional[OSError] = None
        self.reached_eof = False
        self._thread = Thread(target=self._run, name="imagenav-input", daemon=True)

    @property
    def failed(self) -> bool:
        """True once the thread has died from a read failure."""
        return self.error is not None

    def start(self) -> None:
        self._thread.start()

    def is_alive(self) -> bool:
        return self._thread.is_alive()

    def join(self, timeout: Optional[float] = None) -> bool:
        """Wait for the thread; returns True if it has finished."""
        if self._thread.ident is None:
            return True
        self._thread.join(timeout)
        return not self._thread.is_alive()

    def _run(self) -> None:
        try:
            while not self.exit_flag.is_set():
                ch = os.read(self.fd, 1)
                if not ch:
                    self.reached_eof = True
                    self._emit(self.decoder.flush())
                    log("[INPUT] End of terminal input")
                    return
                self._emit(self.decoder.feed(ch[0]))
                if self.decoder.pending_escape and not self._byte_ready():
                    self._emit(self.decoder.flush())
        except OSError as e:
            self.error = e
            log(f"[INPUT][ERR] Terminal read failed: {e!r}")

    def _byte_ready(self) -> bool:
        ready, _, _ = select.select([self.fd], [], [], max(0.0, self.esc_timeout_ms / 1000.0))
        return bool(ready)

    def _emit(self, symbols) -> None:
        for symbol in symbols:
            self.symbols.put(symbol)
