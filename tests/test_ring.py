"""NavigationRing cursor and removal behavior.

Covers wraparound in both directions, advance/retreat inversion and cursor
placement after removals, including draining the ring to empty.
"""

from __future__ import annotations

import unittest

from imagenav.errors import EmptyCollection
from imagenav.ring import NavigationRing

from nav_fakes import entries


def names(ring: NavigationRing):
    return [e.name for e in ring]


class RingTraversalTests(unittest.TestCase):
    def test_advance_n_times_returns_to_start_for_every_size(self) -> None:
        for n in range(1, 7):
            ring = NavigationRing(entries(*[f"{i}.png" for i in range(n)]))
            ring.seek(n // 2)
            start = ring.current
            for _ in range(n):
                ring.advance()
            self.assertEqual(ring.current, start, f"size {n}")

    def test_retreat_after_advance_restores_entry(self) -> None:
        ring = NavigationRing(entries("a", "b", "c", "d"))
        for start in range(4):
            ring.seek(start)
            before = ring.current
            ring.advance()
            self.assertEqual(ring.retreat(), before)

    def test_advance_wraps_from_last_to_first(self) -> None:
        ring = NavigationRing(entries("a", "b", "c"))
        ring.seek(2)
        self.assertEqual(ring.advance().name, "a")
        self.assertEqual(ring.cursor, 0)

    def test_retreat_wraps_from_first_to_last(self) -> None:
        ring = NavigationRing(entries("a", "b", "c"))
        self.assertEqual(ring.retreat().name, "c")
        self.assertEqual(ring.cursor, 2)

    def test_peek_does_not_move_cursor(self) -> None:
        ring = NavigationRing(entries("a", "b", "c"))
        self.assertEqual(ring.peek(1)[1].name, "b")
        self.assertEqual(ring.peek(-1), (2, ring.entries[2]))
        self.assertEqual(ring.cursor, 0)

    def test_single_entry_ring_stays_put(self) -> None:
        ring = NavigationRing(entries("only"))
        self.assertEqual(ring.advance().name, "only")
        self.assertEqual(ring.retreat().name, "only")
        self.assertEqual(ring.cursor, 0)


class RingRemovalTests(unittest.TestCase):
    def test_remove_current_moves_to_following_entry(self) -> None:
        ring = NavigationRing(entries("a", "b", "c"))
        ring.seek(1)
        removed = ring.remove_current()
        self.assertEqual(removed.name, "b")
        self.assertEqual(ring.current.name, "c")
        self.assertEqual(names(ring), ["a", "c"])

    def test_remove_current_at_end_wraps_to_zero(self) -> None:
        ring = NavigationRing(entries("a", "b", "c"))
        ring.seek(2)
        ring.remove_current()
        self.assertEqual(ring.cursor, 0)
        self.assertEqual(ring.current.name, "a")

    def test_remove_before_cursor_keeps_current_entry(self) -> None:
        ring = NavigationRing(entries("a", "b", "c", "d"))
        ring.seek(2)
        ring.remove_at(0)
        self.assertEqual(ring.current.name, "c")
        self.assertEqual(ring.cursor, 1)

    def test_remove_after_cursor_keeps_cursor(self) -> None:
        ring = NavigationRing(entries("a", "b", "c"))
        ring.seek(1)
        ring.remove_at(2)
        self.assertEqual(ring.current.name, "b")
        self.assertEqual(names(ring), ["a", "b"])

    def test_cursor_never_past_end_while_draining(self) -> None:
        ring = NavigationRing(entries("a", "b", "c", "d", "e"))
        ring.seek(3)
        while len(ring):
            self.assertLess(ring.cursor, len(ring))
            ring.remove_current()
        self.assertTrue(ring.is_empty)
        self.assertEqual(ring.cursor, 0)

    def test_empty_ring_operations_raise_empty_collection(self) -> None:
        ring = NavigationRing(entries("a"))
        ring.remove_current()
        for op in (ring.advance, ring.retreat, ring.remove_current, lambda: ring.current,
                   lambda: ring.peek(1)):
            with self.assertRaises(EmptyCollection):
                op()

    def test_order_preserved_across_removals(self) -> None:
        ring = NavigationRing(entries("a", "b", "c", "d", "e"))
        ring.remove_at(1)
        ring.remove_at(2)
        self.assertEqual(names(ring), ["a", "c", "e"])

    def test_remove_at_out_of_range(self) -> None:
        ring = NavigationRing(entries("a"))
        with self.assertRaises(IndexError):
            ring.remove_at(3)


if __name__ == "__main__":
    unittest.main()
