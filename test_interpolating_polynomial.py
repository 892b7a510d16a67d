# test_interpolating_polynomial.py
"""
Tests for piecewise polynomial trajectories.
"""

import numpy as np
import pytest

from agent_dynamics import SingleIntegrator
from interpolating_polynomial import InterpolatingPolynomial, TrajectoryRangeError


def quadratic_spline():
    # interval 0: x = 1 + 2 tau + 3 tau^2, y = tau
    # interval 1: x = 2.75 + 5 tau,         y = 0.5 - tau
    coeffs = np.array([
        [[1.0, 0.0], [2.0, 1.0], [3.0, 0.0]],
        [[2.75, 0.5], [5.0, -1.0], [0.0, 0.0]],
    ])
    return InterpolatingPolynomial(coeffs, initial_time=1.0, interval_length=0.5)


def test_support():
    traj = quadratic_spline()
    assert traj.initial_time() == 1.0
    assert traj.number_of_intervals() == 2
    assert traj.interval_length() == 0.5
    assert traj.final_time() == pytest.approx(2.0)
    assert traj.degree == 2
    assert traj.dim == 2


def test_evaluation():
    traj = quadratic_spline()
    np.testing.assert_allclose(traj.at(1.0), [1.0, 0.0])
    np.testing.assert_allclose(traj.at(1.25), [1.0 + 0.5 + 0.1875, 0.25])
    np.testing.assert_allclose(traj.at(1.5), [2.75, 0.5])
    np.testing.assert_allclose(traj.at(2.0), [5.25, 0.0])
    np.testing.assert_allclose(traj.final_state(), [5.25, 0.0])


def test_vectorized_evaluation_matches_scalar():
    traj = quadratic_spline()
    times = np.linspace(1.0, 2.0, 9)
    expected = np.array([traj.at(t) for t in times])
    np.testing.assert_allclose(traj.states_at(times), expected)


def test_out_of_range_is_rejected():
    traj = quadratic_spline()
    with pytest.raises(TrajectoryRangeError):
        traj.at(0.99)
    with pytest.raises(TrajectoryRangeError):
        traj.at(2.001)
    with pytest.raises(TrajectoryRangeError):
        traj.states_at([1.5, 2.5])


def test_invalid_construction():
    with pytest.raises(ValueError):
        InterpolatingPolynomial(np.zeros((2, 3)), 0.0, 1.0)
    with pytest.raises(ValueError):
        InterpolatingPolynomial(np.zeros((1, 1, 2)), 0.0, 0.0)


def test_concatenate_copies_and_preserves_values():
    model = SingleIntegrator(max_time_step=0.5)
    seg1 = model.integrate([0.0, 0.0], [1.0, 0.0], 1.0, t0=0.0)
    seg2 = model.integrate(seg1.final_state(), [0.0, 1.0], 1.0, t0=1.0)
    before = seg1.coefficients.copy()

    traj = InterpolatingPolynomial.concatenate([seg1, seg2])

    assert traj.number_of_intervals() == seg1.number_of_intervals() + seg2.number_of_intervals()
    assert traj.initial_time() == 0.0
    assert traj.final_time() == pytest.approx(2.0)
    np.testing.assert_allclose(traj.at(0.5), seg1.at(0.5))
    np.testing.assert_allclose(traj.at(1.5), seg2.at(1.5))
    np.testing.assert_allclose(traj.final_state(), [1.0, 1.0])

    # sources untouched and not aliased
    traj.coefficients[0, 0, 0] = 100.0
    np.testing.assert_array_equal(seg1.coefficients, before)


def test_concatenate_rejects_gaps_and_mismatches():
    model = SingleIntegrator(max_time_step=0.5)
    seg1 = model.integrate([0.0, 0.0], [1.0, 0.0], 1.0, t0=0.0)
    gap = model.integrate([1.0, 0.0], [1.0, 0.0], 1.0, t0=1.5)
    with pytest.raises(ValueError):
        InterpolatingPolynomial.concatenate([seg1, gap])

    other = SingleIntegrator(max_time_step=0.25).integrate([1.0, 0.0], [1.0, 0.0], 1.0, t0=1.0)
    with pytest.raises(ValueError):
        InterpolatingPolynomial.concatenate([seg1, other])

    with pytest.raises(ValueError):
        InterpolatingPolynomial.concatenate([])


def test_constant():
    traj = InterpolatingPolynomial.constant([1.0, -2.0], 3.0, 0.25, intervals=4)
    assert traj.number_of_intervals() == 4
    assert traj.final_time() == pytest.approx(4.0)
    np.testing.assert_allclose(traj.at(3.6), [1.0, -2.0])


def test_sample_includes_endpoints():
    traj = quadratic_spline()
    times, states = traj.sample(5)
    assert times[0] == 1.0
    assert times[-1] == pytest.approx(2.0)
    assert states.shape == (5, 2)
    np.testing.assert_allclose(states[-1], traj.final_state())


def test_print_spline(capsys):
    InterpolatingPolynomial.constant([1.0, 2.0], 0.0, 1.0).print_spline(3, "hold")
    lines = capsys.readouterr().out.strip().splitlines()
    assert "hold" in lines[0]
    assert len(lines) == 4
    assert lines[-1] == "t=1.0000: 1.000000 2.000000"
