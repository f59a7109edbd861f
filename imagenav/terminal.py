"""Terminal helpers: raw-mode lifecycle and byte-to-key-symbol decoding.

The decoder is fed one byte at a time and emits zero or more key symbols
per byte, since escape sequences and UTF-8 characters span several bytes.
Symbols are plain strings: printable characters stand for themselves,
everything else uses an upper-case token ("ESC", "RIGHT", "CTRL_C", ...).
"""

from __future__ import annotations

import contextlib
import termios
import tty
from typing import List, Optional

from .types import KEY_ESC, KEY_CTRL_C, KEY_LEFT, KEY_RIGHT, KEY_UP, KEY_DOWN, KEY_SPACE, KEY_ENTER

ESC = 0x1B
MAX_SEQUENCE_BYTES = 32

_CONTROL_KEYS = {
    0x03: KEY_CTRL_C,
    0x09: "TAB",
    0x0A: KEY_ENTER,
    0x0D: KEY_ENTER,
    0x08: "BACKSPACE",
    0x7F: "BACKSPACE",
    0x20: KEY_SPACE,
}

_CSI_FINAL = {
    "A": KEY_UP,
    "B": KEY_DOWN,
    "C": KEY_RIGHT,
    "D": KEY_LEFT,
    "H": "HOME",
    "F": "END",
}

_CSI_TILDE = {
    "1": "HOME",
    "2": "INSERT",
    "3": "DELETE",
    "4": "END",
    "5": "PAGE_UP",
    "6": "PAGE_DOWN",
    "7": "HOME",
    "8": "END",
}

_MODIFIERS = {
    "2": "SHIFT_",
    "3": "ALT_",
    "5": "CTRL_",
    "9": "ALT_",
}


class KeyDecoder:
    """Stateful decoder from raw terminal bytes to key symbols."""

    def __init__(self):
        self._state = "idle"
        self._seq = bytearray()
        self._utf8 = bytearray()
        self._utf8_needed = 0

    @property
    def pending_escape(self) -> bool:
        """True while a lone ESC is waiting to see if a sequence follows."""
        return self._state == "esc"

    def feed(self, byte: int) -> List[str]:
        if self._state == "esc":
            return self._feed_escape(byte)
        if self._state in ("csi", "ss3"):
            return self._feed_sequence(byte)
        return self._feed_idle(byte)

    def flush(self) -> List[str]:
        """Emit whatever is pending as-is (an unfinished sequence becomes ESC)."""
        out: List[str] = []
        if self._state != "idle":
            out.append(KEY_ESC)
        if self._utf8:
            out.append(self._utf8.decode("utf-8", errors="replace"))
        self._reset()
        return out

    def _reset(self) -> None:
        self._state = "idle"
        self._seq.clear()
        self._utf8.clear()
        self._utf8_needed = 0

    def _feed_idle(self, byte: int) -> List[str]:
        if self._utf8_needed:
            if 0x80 <= byte < 0xC0:
                self._utf8.append(byte)
                self._utf8_needed -= 1
                if self._utf8_needed:
                    return []
                text = self._utf8.decode("utf-8", errors="replace")
                self._utf8.clear()
                return [text]
            # Truncated character: emit what we have, then handle this byte.
            out = [self._utf8.decode("utf-8", errors="replace")]
            self._utf8.clear()
            self._utf8_needed = 0
            return out + self._feed_idle(byte)

        if byte == ESC:
            self._state = "esc"
            return []
        if byte in _CONTROL_KEYS:
            return [_CONTROL_KEYS[byte]]
        if 0x01 <= byte <= 0x1A:
            return [f"CTRL_{chr(byte + 0x40)}"]
        if byte < 0x20:
            return []
        if byte < 0x80:
            return [chr(byte)]

        needed = _utf8_continuations(byte)
        if needed == 0:
            return ["�"]
        self._utf8.append(byte)
        self._utf8_needed = needed
        return []

    def _feed_escape(self, byte: int) -> List[str]:
        if byte == ord("["):
            self._state = "csi"
            return []
        if byte == ord("O"):
            self._state = "ss3"
            return []
        if byte == ESC:
            return [KEY_ESC]
        # ESC followed by an ordinary key: both are delivered.
        self._state = "idle"
        return [KEY_ESC] + self._feed_idle(byte)

    def _feed_sequence(self, byte: int) -> List[str]:
        if self._state == "ss3":
            self._reset()
            return [_CSI_FINAL.get(chr(byte), f"SS3_{chr(byte)}")]
        if 0x40 <= byte <= 0x7E:
            params = self._seq.decode("ascii", errors="replace")
            self._reset()
            return [_csi_symbol(params, chr(byte))]
        self._seq.append(byte)
        if len(self._seq) > MAX_SEQUENCE_BYTES:
            self._reset()
            return [KEY_ESC]
        return []


def _utf8_continuations(lead: int) -> int:
    if 0xC2 <= lead <= 0xDF:
        return 1
    if 0xE0 <= lead <= 0xEF:
        return 2
    if 0xF0 <= lead <= 0xF4:
        return 3
    return 0


def _csi_symbol(params: str, final: str) -> str:
    if final == "~":
        name = _CSI_TILDE.get(params.split(";")[0])
        if name is not None:
            return name
    elif final in _CSI_FINAL:
        base = _CSI_FINAL[final]
        if ";" in params:
            prefix = _MODIFIERS.get(params.split(";")[-1], "")
            return prefix + base
        return base
    return f"CSI_{params}{final}"


class RawTerminal:
    """Raw-mode lifecycle for the controlling terminal."""

    def __init__(self, fd: int):
        self.fd = fd
        self._saved: Optional[list] = None

    def enable(self) -> None:
        self._saved = termios.tcgetattr(self.fd)
        tty.setraw(self.fd, termios.TCSANOW)

    def restore(self) -> None:
        if self._saved is None:
            return
        termios.tcsetattr(self.fd, termios.TCSAFLUSH, self._saved)
        self._saved = None

    @contextlib.contextmanager
    def raw_mode(self):
        try:
            self.enable()
            yield self
        finally:
            self.restore()
