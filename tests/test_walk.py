"""Tests for the bounded random-walk simulator.

Covers the anchor walk, start sampling in both modes, bounds containment,
early termination at the destination (never checked at the start),
determinism, generator ownership, mutators, invalid modes, and the
optional retry cap on degenerate rectangles.
"""

import numpy as np
import pytest

from squarewalk.config import ANCHOR_CONFIG, WalkConfig
from squarewalk.prng import MiddleSquareGenerator
from squarewalk.walk import (
    Bounds,
    RandomWalk,
    RejectionLimitError,
    Trajectory,
    WalkMode,
    WalkStatus,
    simulate,
)

ANCHOR_SEED = 19890929


def _assert_in_bounds(trajectory: Trajectory, bounds: Bounds) -> None:
    xs, ys = trajectory.xs, trajectory.ys
    assert np.all(xs >= bounds.min_x) and np.all(xs <= bounds.max_x)
    assert np.all(ys >= bounds.min_y) and np.all(ys <= bounds.max_y)


class TestBounds:
    """Centred rectangle geometry and inclusive containment."""

    def test_centered(self):
        b = Bounds.centered(4.0, 6.0)
        assert (b.min_x, b.max_x, b.min_y, b.max_y) == (-2.0, 2.0, -3.0, 3.0)
        assert b.width == 4.0
        assert b.height == 6.0

    def test_edges_are_inside(self):
        b = Bounds.centered(4.0, 4.0)
        assert b.contains(2.0, -2.0)
        assert b.contains(-2.0, 2.0)
        assert not b.contains(2.0000001, 0.0)
        assert not b.contains(0.0, -2.0000001)


class TestAnchorWalk:
    """Seed 19890929, uniform steps, 4x4 rectangle, destination at origin."""

    def test_start_point(self):
        walker = RandomWalk(WalkMode.UNIFORM, seed=ANCHOR_SEED)
        expected = (
            9618676884 / 10_000_000_000.0 * 4.0 - 2.0,
            9625450664 / 10_000_000_000.0 * 4.0 - 2.0,
        )
        assert walker.start == expected

    def test_runs_full_budget(self):
        walker = RandomWalk(WalkMode.UNIFORM, seed=ANCHOR_SEED)
        traj = walker.walk(100)
        assert len(traj) == 101
        assert traj.status is WalkStatus.EXHAUSTED
        assert traj.steps_taken == 100
        assert traj.steps_requested == 100
        assert traj.rejected == 20

    def test_end_point(self):
        traj = RandomWalk(WalkMode.UNIFORM, seed=ANCHOR_SEED).walk(100)
        x, y = traj.end
        assert x == pytest.approx(-1.5457094253000003, abs=1e-9)
        assert y == pytest.approx(-1.3090723478999999, abs=1e-9)
        # Far from the destination on both axes, so the budget ran out.
        assert abs(x) > 1e-5 and abs(y) > 1e-5

    def test_simulate_matches_direct_walk(self):
        walker, traj = simulate(ANCHOR_CONFIG)
        direct = RandomWalk(WalkMode.UNIFORM, seed=ANCHOR_SEED).walk(100)
        assert walker.start == direct.start
        assert np.array_equal(traj.points, direct.points)

    def test_gaussian_anchor(self):
        walker = RandomWalk(WalkMode.GAUSSIAN, seed=ANCHOR_SEED)
        assert walker.start[0] == pytest.approx(0.27116277873954003, abs=1e-12)
        assert walker.start[1] == pytest.approx(-0.065019220766148467, abs=1e-12)
        traj = walker.walk(100)
        assert len(traj) == 101
        assert traj.rejected == 12
        x, y = traj.end
        assert x == pytest.approx(-1.0318963015897755, abs=1e-9)
        assert y == pytest.approx(-1.7952100293563427, abs=1e-9)


class TestTrajectoryShape:
    """Trajectory invariants: start first, length bound, one axis per step."""

    def test_zero_steps_returns_start_only(self):
        walker = RandomWalk(WalkMode.UNIFORM, seed=ANCHOR_SEED)
        traj = walker.walk(0)
        assert len(traj) == 1
        assert traj.start == walker.start
        assert traj.status is WalkStatus.EXHAUSTED

    def test_points_array(self):
        traj = RandomWalk(WalkMode.UNIFORM, seed=ANCHOR_SEED).walk(10)
        assert traj.points.shape == (11, 2)
        assert traj.points.dtype == np.float64

    @pytest.mark.parametrize("mode", list(WalkMode))
    def test_each_step_moves_one_axis_by_at_most_one(self, mode):
        traj = RandomWalk(mode, seed=0xDEADBEEF).walk(200)
        deltas = np.diff(traj.points, axis=0)
        moved_both = (deltas[:, 0] != 0) & (deltas[:, 1] != 0)
        assert not moved_both.any()
        assert np.all(np.abs(deltas) <= 1.0 + 1e-12)

    def test_negative_steps_rejected(self):
        with pytest.raises(ValueError):
            RandomWalk(WalkMode.UNIFORM, seed=ANCHOR_SEED).walk(-1)


class TestBoundsContainment:
    """Every point stays inside the rectangle."""

    @pytest.mark.parametrize("mode", list(WalkMode))
    @pytest.mark.parametrize("seed", [ANCHOR_SEED, 0xDEADBEEF, 1556150400])
    def test_default_rectangle(self, mode, seed):
        walker = RandomWalk(mode, seed=seed)
        _assert_in_bounds(walker.walk(300), walker.bounds)

    @pytest.mark.parametrize("mode", list(WalkMode))
    def test_narrow_rectangle(self, mode):
        walker = RandomWalk(mode, seed=ANCHOR_SEED, width=1.0, height=3.0,
                            destination=(0.3, 0.2))
        assert walker.x_range == (-0.5, 0.5)
        assert walker.y_range == (-1.5, 1.5)
        _assert_in_bounds(walker.walk(300), walker.bounds)


class TestStartSampling:
    """Start selection per mode."""

    @pytest.mark.parametrize("seed", [ANCHOR_SEED, 0xDEADBEEF, 1556150400])
    def test_gaussian_start_strictly_inside(self, seed):
        walker = RandomWalk(WalkMode.GAUSSIAN, seed=seed, width=2.0, height=1.0)
        x, y = walker.start
        assert abs(x) < 1.0
        assert abs(y) < 0.5

    def test_uniform_start_consumes_two_draws(self):
        gen = MiddleSquareGenerator(ANCHOR_SEED)
        RandomWalk(WalkMode.UNIFORM, generator=gen)
        ref = MiddleSquareGenerator(ANCHOR_SEED)
        ref.next_uniform()
        ref.next_uniform()
        assert gen.state == ref.state

    def test_explicit_start_consumes_no_draws(self):
        gen = MiddleSquareGenerator(ANCHOR_SEED)
        walker = RandomWalk(WalkMode.GAUSSIAN, generator=gen, start=(0.5, -0.25))
        assert walker.start == (0.5, -0.25)
        assert gen.state == ANCHOR_SEED


class TestDestination:
    """Early termination after an accepted step; the start is never checked."""

    def test_start_equal_to_destination_still_walks(self):
        walker = RandomWalk(WalkMode.UNIFORM, seed=ANCHOR_SEED,
                            start=(0.0, 0.0), destination=(0.0, 0.0))
        traj = walker.walk(5)
        assert len(traj) == 6
        assert traj.status is WalkStatus.EXHAUSTED

    def test_reached_after_first_step(self):
        # Seed 0 draws only zeros: start (-2, -2), every step has length 0.
        walker = RandomWalk(WalkMode.UNIFORM, seed=0, destination=(-2.0, -2.0))
        assert walker.start == (-2.0, -2.0)
        traj = walker.walk(50)
        assert len(traj) == 2
        assert traj.status is WalkStatus.REACHED_DESTINATION

    def test_degenerate_stream_runs_full_budget_in_place(self):
        traj = RandomWalk(WalkMode.UNIFORM, seed=0).walk(25)
        assert len(traj) == 26
        assert np.all(traj.points == -2.0)

    def test_tolerance_is_per_axis(self):
        walker = RandomWalk(WalkMode.UNIFORM, seed=0,
                            destination=(-2.0 + 5e-6, -2.0 - 5e-6))
        assert walker.walk(10).status is WalkStatus.REACHED_DESTINATION

        walker = RandomWalk(WalkMode.UNIFORM, seed=0,
                            destination=(-2.0 + 2e-5, -2.0))
        assert walker.walk(10).status is WalkStatus.EXHAUSTED


class TestDeterminism:
    """Same seed, mode and geometry reproduce the whole trajectory."""

    @pytest.mark.parametrize("mode", list(WalkMode))
    def test_repeat_run_identical(self, mode):
        a = RandomWalk(mode, seed=0xDEADBEEF, width=3.0, height=5.0).walk(150)
        b = RandomWalk(mode, seed=0xDEADBEEF, width=3.0, height=5.0).walk(150)
        assert np.array_equal(a.points, b.points)
        assert a.rejected == b.rejected

    def test_modes_differ(self):
        a = RandomWalk(WalkMode.UNIFORM, seed=ANCHOR_SEED).walk(20)
        b = RandomWalk(WalkMode.GAUSSIAN, seed=ANCHOR_SEED).walk(20)
        assert not np.array_equal(a.points, b.points)

    def test_generator_handle_continues_stream(self):
        gen = MiddleSquareGenerator(ANCHOR_SEED)
        walker = RandomWalk(WalkMode.UNIFORM, generator=gen)
        assert walker.generator is gen
        first = walker.walk(10)
        second = walker.walk(10)
        # Second walk starts from the same point but sees later draws.
        assert first.start == second.start
        assert not np.array_equal(first.points, second.points)


class TestModeHandling:
    """Only the two WalkMode members are accepted."""

    def test_string_mode_accepted(self):
        walker = RandomWalk("gaussian", seed=ANCHOR_SEED)
        assert walker.mode is WalkMode.GAUSSIAN

    @pytest.mark.parametrize("mode", ["diagonal", 0, 2, None])
    def test_invalid_mode_fails_fast(self, mode):
        with pytest.raises(ValueError, match="Invalid walk mode"):
            RandomWalk(mode, seed=ANCHOR_SEED)

    def test_seed_and_generator_conflict(self):
        with pytest.raises(ValueError):
            RandomWalk(WalkMode.UNIFORM, seed=1, generator=MiddleSquareGenerator(1))

    def test_default_seed_from_clock(self, monkeypatch):
        monkeypatch.setattr("squarewalk.reproducibility.seed.time.time", lambda: 1556150400.7)
        walker = RandomWalk(WalkMode.UNIFORM)
        assert walker.generator.seed == 1556150400


class TestMutators:
    """Setters change geometry without re-validating the start."""

    def test_set_dimensions(self):
        walker = RandomWalk(WalkMode.UNIFORM, seed=ANCHOR_SEED)
        start = walker.start
        walker.set_dimensions(10.0, 6.0)
        assert walker.x_range == (-5.0, 5.0)
        assert walker.y_range == (-3.0, 3.0)
        assert walker.start == start

    def test_set_start_and_destination(self):
        walker = RandomWalk(WalkMode.UNIFORM, seed=ANCHOR_SEED)
        walker.set_start(1.0, -1.0)
        walker.set_destination(0.5, 0.5)
        assert walker.start == (1.0, -1.0)
        assert walker.destination == (0.5, 0.5)
        traj = walker.walk(10)
        assert traj.start == (1.0, -1.0)
        _assert_in_bounds(traj, walker.bounds)

    def test_out_of_bounds_start_accepted(self):
        walker = RandomWalk(WalkMode.UNIFORM, seed=ANCHOR_SEED, start=(10.0, 10.0))
        assert walker.start == (10.0, 10.0)
        walker.set_dimensions(2.0, 2.0)
        assert not walker.bounds.contains(*walker.start)


class TestRetryCap:
    """max_attempts turns unbounded rejection loops into an error."""

    def test_gaussian_start_on_zero_area(self, caplog):
        with pytest.raises(RejectionLimitError, match="start"):
            RandomWalk(WalkMode.GAUSSIAN, seed=ANCHOR_SEED, width=0.0,
                       height=0.0, max_attempts=10)
        assert "gave up after 10 attempts" in caplog.text

    def test_boundary_loop_on_zero_area(self):
        walker = RandomWalk(WalkMode.UNIFORM, seed=ANCHOR_SEED, width=0.0,
                            height=0.0, max_attempts=25)
        assert walker.start == (0.0, 0.0)
        with pytest.raises(RejectionLimitError, match="boundary"):
            walker.walk(1)

    def test_cap_not_hit_on_normal_walk(self):
        walker = RandomWalk(WalkMode.GAUSSIAN, seed=ANCHOR_SEED, max_attempts=1000)
        assert len(walker.walk(100)) == 101

    def test_invalid_cap(self):
        with pytest.raises(ValueError):
            RandomWalk(WalkMode.UNIFORM, seed=ANCHOR_SEED, max_attempts=0)

    def test_simulate_passes_cap(self):
        cfg = WalkConfig(mode=WalkMode.GAUSSIAN, width=0.0, height=0.0, max_attempts=5)
        with pytest.raises(RejectionLimitError):
            simulate(cfg)
