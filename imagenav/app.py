"""EventLoop - the single control thread.

Each tick merges three sources into one sequential stream of state
transitions:
- key symbols queued by the terminal InputDecoder thread
- the window's own pending events
- the pageant timer
then redraws and sleeps for a fixed short interval.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from queue import Empty, Queue
from typing import Callable, Optional
import time

from .commands import CloseApp, Command
from .config import TICK_MS, JOIN_TIMEOUT_S
from .errors import (
    EmptyCollection, NoDisplayableEntries, RenderError, WindowError, InputThreadError,
)
from .input_decoder import ExitFlag, InputDecoder
from .input_handler import InputHandler
from .logging import log, increment_tick
from .navigator import Navigator
from .surfaces import WindowSurface


class ExitReason(Enum):
    QUIT = "quit"
    EXHAUSTED = "exhausted"


@dataclass
class LoopResult:
    """How a run of the event loop ended."""
    reason: ExitReason
    ticks: int
    decoder_joined: bool = True

    @property
    def ok(self) -> bool:
        return self.reason == ExitReason.QUIT


@dataclass
class EventLoop:
    """
    Cooperative scheduler that owns the Navigator and the window.

    Usage:
        loop = EventLoop(navigator, window, exit_flag, symbols, decoder)
        result = loop.run()
    """

    navigator: Navigator
    window: WindowSurface
    exit_flag: ExitFlag = field(default_factory=ExitFlag)
    symbols: "Queue[str]" = field(default_factory=Queue)
    decoder: Optional[InputDecoder] = None
    input_handler: InputHandler = field(default_factory=InputHandler)
    tick_seconds: float = TICK_MS / 1000.0
    join_timeout: float = JOIN_TIMEOUT_S
    sleep: Callable[[float], None] = time.sleep

    reason: ExitReason = field(default=ExitReason.QUIT, init=False)
    ticks: int = field(default=0, init=False)
    _last_render_error: Optional[str] = field(default=None, init=False)

    def run(self) -> LoopResult:
        """Run until the exit flag is set, then join the input thread."""
        log("[LOOP] Starting event loop")
        joined = True
        try:
            while self._tick():
                pass
        finally:
            self.exit_flag.set()
            joined = self._join_decoder()
        log(f"[LOOP] Stopped: reason={self.reason.value} ticks={self.ticks}")
        return LoopResult(reason=self.reason, ticks=self.ticks, decoder_joined=joined)

    def _tick(self) -> bool:
        """Execute one iteration. Returns False when the loop should stop."""
        # 1. Exit requested by either thread
        if self.exit_flag.is_set():
            return False
        if self.decoder is not None and self.decoder.failed:
            raise InputThreadError(f"terminal input thread died: {self.decoder.error!r}")

        # 2. Terminal key symbols, FIFO, non-blocking
        while not self.exit_flag.is_set():
            try:
                symbol = self.symbols.get_nowait()
            except Empty:
                break
            self._dispatch(symbol, "TERM")

        # 3. Window events
        if not self.exit_flag.is_set():
            for symbol in self.window.poll_symbols():
                self._dispatch(symbol, "WIN")
                if self.exit_flag.is_set():
                    break

        if self.exit_flag.is_set():
            return False

        # 4. Pageant timer
        self._guarded(self.navigator.tick_pageant)
        if self.exit_flag.is_set():
            return False

        # 5. Redraw
        if self._guarded(self.navigator.redraw):
            self._last_render_error = None

        # 6. Bookkeeping and fixed sleep
        self.ticks += 1
        increment_tick()
        self.sleep(self.tick_seconds)
        return True

    def _dispatch(self, symbol: str, source: str) -> None:
        cmd = self.input_handler.command_for(symbol)
        if cmd is None:
            log(f"[KEY][{source}] unbound symbol={symbol!r}")
            return
        self._execute_command(cmd, symbol, source)

    def _execute_command(self, cmd: Command, symbol: str, source: str) -> None:
        if isinstance(cmd, CloseApp):
            log(f"[KEY][{source}] {symbol} -> exit requested")
            self.exit_flag.set()
            return
        self._guarded(lambda: cmd.execute(self.navigator))

    def _guarded(self, action: Callable[[], object]) -> bool:
        """Run a navigator action, converting recoverable failures into log lines.

        Returns True if the action completed without error.
        """
        try:
            action()
            return True
        except EmptyCollection as e:
            log(f"[NAV][FATAL] {e}")
            self._end_exhausted()
        except NoDisplayableEntries as e:
            log(f"[NAV][ERR] {e}")
            if self.navigator.ring.is_empty:
                self._end_exhausted()
        except WindowError as e:
            log(f"[WINDOW][ERR] {e}")
        except RenderError as e:
            message = str(e)
            if message != self._last_render_error:
                log(f"[RENDER][ERR] {message}")
            self._last_render_error = message
        return False

    def _end_exhausted(self) -> None:
        self.reason = ExitReason.EXHAUSTED
        self.exit_flag.set()

    def _join_decoder(self) -> bool:
        if self.decoder is None:
            return True
        if self.decoder.join(self.join_timeout):
            log("[LOOP] Input thread joined")
            return True
        log("[LOOP] Input thread still blocked on a read; it ends at the next byte or at exit")
        return False
