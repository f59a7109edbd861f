"""Navigator - validated moves over the ring plus view state transitions."""

from __future__ import annotations
from typing import Callable, Dict, Iterable, Optional
import time

from .config import PAGEANT_INTERVAL_S
from .errors import EmptyCollection, NoDisplayableEntries, WindowError
from .image_utils import read_image_info
from .logging import log
from .ring import NavigationRing
from .state.view import ViewState
from .surfaces import Renderer, WindowSurface
from .types import Entry, ImageInfo

class Navigator:
    """Composes a NavigationRing and a ViewState.

    Every move is validated: the candidate entry is offered to the renderer
    and evicted from the ring if it cannot be displayed. Construction applies
    the same rule to the initial entry, so `current` is always an entry the
    renderer accepted.

    Usage:
        nav = Navigator(entries, renderer, window)
        nav.show()
        nav.advance()
    """

    def __init__(self, entries: Iterable[Entry], renderer: Renderer, surface: WindowSurface,
                 pageant_interval_s: float = PAGEANT_INTERVAL_S,
                 view: Optional[ViewState] = None,
                 clock: Callable[[], float] = time.monotonic):
        self.ring = NavigationRing(entries)
        self.renderer = renderer
        self.surface = surface
        self.pageant_interval_s = max(0.0, float(pageant_interval_s))
        self.clock = clock
        self._pageant_last: Optional[float] = None
        self.view = view if view is not None else ViewState()
        self._info_cache: Dict[Entry, Optional[ImageInfo]] = {}
        self.view.current = self._settle_initial()

    @property
    def current(self) -> Entry:
        return self.view.current

    # ═══════════════════════════════════════════════════════════════════════
    # Navigation
    # ═══════════════════════════════════════════════════════════════════════

    def advance(self) -> Entry:
        """Move to the next displayable entry, evicting rejected ones."""
        return self._move(1)

    def retreat(self) -> Entry:
        """Move to the previous displayable entry, evicting rejected ones."""
        return self._move(-1)

    def _move(self, step: int) -> Entry:
        entry = self._validated_move(step)
        self.view.current = entry
        self.view.pageant_elapsed = 0.0
        log(f"[NAV] {'next' if step > 0 else 'prev'} -> {self._describe(entry)} "
            f"({self.ring.cursor + 1}/{len(self.ring)})")
        self._show_current()
        return entry

    def _validated_move(self, step: int) -> Entry:
        limit = len(self.ring)
        if limit == 0:
            raise EmptyCollection()
        attempts = 0
        while attempts < limit:
            attempts += 1
            idx, candidate = self.ring.peek(step)
            if self.renderer.can_display(candidate):
                return self.ring.advance() if step > 0 else self.ring.retreat()
            self._evict(idx, candidate)
            if self.ring.is_empty:
                break
        raise NoDisplayableEntries(attempts)

    def _settle_initial(self) -> Entry:
        limit = len(self.ring)
        if limit == 0:
            raise EmptyCollection()
        for _ in range(limit):
            candidate = self.ring.current
            if self.renderer.can_display(candidate):
                return candidate
            self._evict(self.ring.cursor, candidate)
        raise NoDisplayableEntries(limit)

    def _evict(self, idx: int, entry: Entry) -> None:
        self.ring.remove_at(idx)
        self._info_cache.pop(entry, None)
        log(f"[NAV][EVICT] {entry.name} is not displayable ({len(self.ring)} left)")

    # ═══════════════════════════════════════════════════════════════════════
    # View transformations
    # ═══════════════════════════════════════════════════════════════════════

    def rotate(self, delta: float) -> None:
        self.view.rotation += delta
        self.redraw()

    def zoom(self, delta: float) -> None:
        # No redraw here; the next loop tick draws with the new factor.
        self.view.zoom += delta

    def toggle_fullscreen(self) -> None:
        """Cycle OFF -> DESKTOP -> OFF (TRUE also goes to OFF)."""
        previous = self.view.fullscreen
        self.view.fullscreen = self.view.next_fullscreen()
        try:
            self.surface.set_fullscreen(self.view.fullscreen)
        except WindowError:
            self.view.fullscreen = previous
            raise
        log(f"[VIEW] fullscreen {previous.value} -> {self.view.fullscreen.value}")
        self.redraw()

    def toggle_pageant(self) -> None:
        self.view.pageant_mode = not self.view.pageant_mode
        # Accumulated time is kept; only time spent while on counts.
        self._pageant_last = self.clock() if self.view.pageant_mode else None
        log(f"[VIEW] pageant {'on' if self.view.pageant_mode else 'off'}")

    def tick_pageant(self) -> bool:
        """Add the wall-clock time since the previous tick; advance once the interval is reached.

        Returns True if an automatic advance was attempted.
        """
        if not self.view.pageant_mode:
            self._pageant_last = None
            return False
        now = self.clock()
        if self._pageant_last is not None:
            self.view.pageant_elapsed += max(0.0, now - self._pageant_last)
        self._pageant_last = now
        if self.view.pageant_elapsed < self.pageant_interval_s:
            return False
        # Reset before advancing so a failed advance waits a full interval.
        self.view.pageant_elapsed = 0.0
        self.advance()
        return True

    # ═══════════════════════════════════════════════════════════════════════
    # Output
    # ═══════════════════════════════════════════════════════════════════════

    def show(self) -> None:
        """Push the whole view to the window: fullscreen mode, title, frame."""
        self.surface.set_fullscreen(self.view.fullscreen)
        self._show_current()

    def redraw(self) -> None:
        self.renderer.draw(self.view.current, self.view.rotation, self.view.zoom)

    def title_text(self) -> str:
        entry = self.view.current
        text = f"{entry.name} [{self.ring.cursor + 1}/{len(self.ring)}]"
        info = self._info(entry)
        if info is not None:
            text += f" {info.dimensions}"
        return text

    def _show_current(self) -> None:
        self.surface.set_title(self.title_text())
        self.redraw()

    def _info(self, entry: Entry) -> Optional[ImageInfo]:
        if entry not in self._info_cache:
            self._info_cache[entry] = read_image_info(entry.path)
        return self._info_cache[entry]

    def _describe(self, entry: Entry) -> str:
        info = self._info(entry)
        if info is None:
            return entry.name
        return f"{entry.name} {info.dimensions} {info.format or '?'}"
