"""Scroll axis model tests.

Covers lazy seeding, tap/hold semantics, jumps, and per-frame convergence.
"""

from __future__ import annotations

import unittest

from musophobia.scroll.axis import ScrollAxis, ScrollTuning, direction_for_key


class _FakeScroll:
    def __init__(self, position: float = 0.0) -> None:
        self.position = position
        self.writes: list[float] = []

    def get(self) -> float:
        return self.position

    def set(self, value: float) -> None:
        self.writes.append(value)
        self.position = value


def _axis(start: float = 0.0, **tuning: float) -> tuple[ScrollAxis, _FakeScroll]:
    scroll = _FakeScroll(start)
    return ScrollAxis(scroll.get, scroll.set, ScrollTuning(**tuning)), scroll


class DirectionForKeyTests(unittest.TestCase):
    def test_hold_keys_map_to_directions(self) -> None:
        self.assertEqual(direction_for_key("j"), 1)
        self.assertEqual(direction_for_key("l"), 1)
        self.assertEqual(direction_for_key("k"), -1)
        self.assertEqual(direction_for_key("h"), -1)
        self.assertEqual(direction_for_key("x"), 0)
        self.assertEqual(direction_for_key("J"), 0)


class ScrollTuningTests(unittest.TestCase):
    def test_rejects_out_of_range_values(self) -> None:
        with self.assertRaises(ValueError):
            ScrollTuning(lerp_factor=0.0)
        with self.assertRaises(ValueError):
            ScrollTuning(lerp_factor=1.5)
        with self.assertRaises(ValueError):
            ScrollTuning(hold_velocity=0.0)
        with self.assertRaises(ValueError):
            ScrollTuning(tap_amount=-1.0)


class ScrollAxisHoldTests(unittest.TestCase):
    def test_seeds_from_host_position_on_first_use(self) -> None:
        axis, _scroll = _axis(start=300.0)
        self.assertFalse(axis.initialized)

        axis.hold_start(1)

        self.assertTrue(axis.initialized)
        self.assertEqual(axis.current, 300.0)
        self.assertEqual(axis.target, 350.0)

    def test_repeated_hold_start_applies_single_tap(self) -> None:
        axis, _scroll = _axis()
        axis.hold_start(1)
        axis.hold_start(1)

        self.assertEqual(axis.target, 50.0)
        self.assertTrue(axis.is_held())

    def test_direction_switch_applies_new_tap(self) -> None:
        axis, _scroll = _axis()
        axis.hold_start(1)
        axis.hold_start(-1)

        self.assertEqual(axis.target, 0.0)
        self.assertEqual(axis.held_direction, -1)

    def test_tap_sequence_nets_one_tap(self) -> None:
        axis, _scroll = _axis(tap_amount=50.0)
        for key in ("j", "k", "j"):
            axis.key_down(key)
            axis.key_up(key)

        self.assertEqual(axis.target, 50.0)
        self.assertFalse(axis.is_held())

    def test_stale_release_does_not_clear_new_direction(self) -> None:
        axis, _scroll = _axis()
        axis.hold_start(1)
        axis.hold_start(-1)
        axis.hold_end(1)

        self.assertEqual(axis.held_direction, -1)
        axis.hold_end(-1)
        self.assertEqual(axis.held_direction, 0)

    def test_zero_direction_is_ignored(self) -> None:
        axis, _scroll = _axis()
        axis.hold_start(0)

        self.assertFalse(axis.initialized)
        self.assertFalse(axis.is_held())


class ScrollAxisJumpTests(unittest.TestCase):
    def test_jump_relative_adds_to_target(self) -> None:
        axis, _scroll = _axis(start=100.0)
        axis.jump_relative(400.0)
        axis.jump_relative(-150.0)

        self.assertEqual(axis.target, 350.0)
        self.assertEqual(axis.current, 100.0)

    def test_jump_absolute_overrides_target(self) -> None:
        axis, _scroll = _axis(start=100.0)
        axis.jump_relative(400.0)
        axis.jump_absolute(0.0)

        self.assertEqual(axis.target, 0.0)


class ScrollAxisTickTests(unittest.TestCase):
    def test_tick_before_initialization_is_noop(self) -> None:
        axis, scroll = _axis(start=10.0)
        axis.tick(16.0)

        self.assertEqual(scroll.writes, [])
        self.assertFalse(axis.initialized)

    def test_tick_interpolates_and_pushes_position(self) -> None:
        axis, scroll = _axis(lerp_factor=0.5)
        axis.jump_absolute(100.0)
        axis.tick(16.0)

        self.assertAlmostEqual(axis.current, 50.0)
        self.assertEqual(scroll.writes, [50.0])

    def test_held_direction_moves_target_at_velocity(self) -> None:
        axis, _scroll = _axis(tap_amount=50.0, hold_velocity=800.0)
        axis.hold_start(1)
        axis.tick(500.0)

        self.assertAlmostEqual(axis.target, 450.0)

    def test_converges_monotonically_below_epsilon(self) -> None:
        axis, _scroll = _axis()
        axis.jump_absolute(1000.0)

        gaps = [abs(axis.target - axis.current)]
        steps = 0
        while axis.is_converging():
            axis.tick(16.0)
            gaps.append(abs(axis.target - axis.current))
            steps += 1
            self.assertLess(steps, 200)

        self.assertTrue(all(later < earlier for earlier, later in zip(gaps, gaps[1:])))
        self.assertLessEqual(gaps[-1], 0.5)

    def test_tick_frame_reports_activity_while_held(self) -> None:
        axis, _scroll = _axis(lerp_factor=1.0)
        axis.hold_start(1)

        self.assertTrue(axis.tick_frame(16.0))
        axis.hold_end(1)
        self.assertFalse(axis.tick_frame(16.0))


if __name__ == "__main__":
    unittest.main()
