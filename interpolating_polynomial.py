"""
Piecewise polynomial trajectories.

A trajectory is a stack of equal-length intervals. Interval i covers
[t0 + i*h, t0 + (i+1)*h] and is evaluated as

    p_i(tau) = c_i0 + c_i1 * tau + ... + c_ik * tau^k,   tau = t - (t0 + i*h)

Coefficients are stored in one array of shape (intervals, degree + 1, dim).
"""

import numpy as np

import glc_config as cfg


class TrajectoryRangeError(ValueError):
    """Raised when a trajectory is evaluated outside of its time support."""


class InterpolatingPolynomial:
    def __init__(self, coefficients, initial_time, interval_length):
        """
        Parameters
        ----------
        coefficients : array-like
            Shape (intervals, degree + 1, dim).
        initial_time : float
            Start of the first interval.
        interval_length : float
            Duration of every interval.
        """
        coeffs = np.array(coefficients, dtype=float)
        if coeffs.ndim != 3 or coeffs.shape[0] < 1 or coeffs.shape[1] < 1:
            raise ValueError(
                f"coefficients must have shape (intervals, degree + 1, dim), got {coeffs.shape}")
        if interval_length <= 0:
            raise ValueError(f"interval_length must be positive, got {interval_length}")
        self.coefficients = coeffs
        self.t0 = float(initial_time)
        self.h = float(interval_length)

    # ------------------------------------------------------------------
    # --- Support ---
    # ------------------------------------------------------------------
    def initial_time(self):
        return self.t0

    def number_of_intervals(self):
        return self.coefficients.shape[0]

    def interval_length(self):
        return self.h

    def final_time(self):
        return self.t0 + self.number_of_intervals() * self.h

    def duration(self):
        return self.number_of_intervals() * self.h

    @property
    def degree(self):
        return self.coefficients.shape[1] - 1

    @property
    def dim(self):
        return self.coefficients.shape[2]

    def _tolerance(self):
        return cfg.TIME_TOLERANCE * max(1.0, abs(self.final_time()))

    # ------------------------------------------------------------------
    # --- Evaluation ---
    # ------------------------------------------------------------------
    def at(self, t):
        """
        Evaluate the trajectory at time t.

        Raises
        ------
        TrajectoryRangeError
            If t lies outside [initial_time, final_time].
        """
        tf = self.final_time()
        tol = self._tolerance()
        if t < self.t0 - tol or t > tf + tol:
            raise TrajectoryRangeError(
                f"t={t} outside trajectory support [{self.t0}, {tf}]")

        n = self.number_of_intervals()
        i = int(np.floor((t - self.t0) / self.h))
        i = min(max(i, 0), n - 1)
        tau = t - (self.t0 + i * self.h)

        # Horner
        c = self.coefficients[i]
        value = c[-1].copy()
        for k in range(c.shape[0] - 2, -1, -1):
            value = value * tau + c[k]
        return value

    def states_at(self, times):
        """
        Evaluate the trajectory at several times at once.

        Returns
        -------
        np.ndarray
            Shape (len(times), dim).
        """
        times = np.asarray(times, dtype=float).reshape(-1)
        tf = self.final_time()
        tol = self._tolerance()
        if times.size and (times.min() < self.t0 - tol or times.max() > tf + tol):
            raise TrajectoryRangeError(
                f"times [{times.min()}, {times.max()}] outside trajectory support [{self.t0}, {tf}]")

        n = self.number_of_intervals()
        idx = np.clip(np.floor((times - self.t0) / self.h).astype(int), 0, n - 1)
        tau = (times - (self.t0 + idx * self.h))[:, None]

        c = self.coefficients[idx]  # (len(times), degree + 1, dim)
        values = c[:, -1, :].copy()
        for k in range(c.shape[1] - 2, -1, -1):
            values = values * tau + c[:, k, :]
        return values

    def final_state(self):
        return self.at(self.final_time())

    def sample(self, num_points):
        """
        Sample the trajectory at evenly spaced times, both endpoints included.

        Returns
        -------
        times : np.ndarray
            Shape (num_points,).
        states : np.ndarray
            Shape (num_points, dim).
        """
        if num_points < 2:
            raise ValueError("num_points must be at least 2")
        times = np.linspace(self.t0, self.final_time(), num_points)
        states = np.array([self.at(t) for t in times])
        return times, states

    def print_spline(self, num_points, label=""):
        print(f"********* {label} *********")
        times, states = self.sample(num_points)
        for t, x in zip(times, states):
            print(f"t={t:.4f}: " + " ".join(f"{v:.6f}" for v in x))

    # ------------------------------------------------------------------
    # --- Construction ---
    # ------------------------------------------------------------------
    @classmethod
    def concatenate(cls, segments):
        """
        Build a new trajectory from consecutive segments.

        The sources are not modified; the result owns a copy of every
        coefficient array. Segments must share interval length, degree and
        dimension, and each must start where the previous one ends.
        """
        segments = list(segments)
        if not segments:
            raise ValueError("cannot concatenate an empty sequence of segments")

        first = segments[0]
        for prev, seg in zip(segments, segments[1:]):
            if not np.isclose(seg.h, first.h, rtol=1e-9, atol=0.0):
                raise ValueError(
                    f"interval length mismatch: {seg.h} vs {first.h}")
            if seg.coefficients.shape[1:] != first.coefficients.shape[1:]:
                raise ValueError(
                    f"degree/dimension mismatch: {seg.coefficients.shape[1:]} "
                    f"vs {first.coefficients.shape[1:]}")
            if abs(seg.t0 - prev.final_time()) > prev._tolerance() + 1e-9 * first.h:
                raise ValueError(
                    f"segments are not contiguous: {prev.final_time()} -> {seg.t0}")

        coeffs = np.concatenate([seg.coefficients for seg in segments], axis=0)
        return cls(coeffs, first.t0, first.h)

    @classmethod
    def constant(cls, value, initial_time, interval_length, intervals=1):
        """Piecewise constant trajectory holding value over every interval."""
        value = np.asarray(value, dtype=float).reshape(1, 1, -1)
        coeffs = np.repeat(value, intervals, axis=0)
        return cls(coeffs, initial_time, interval_length)

    def __repr__(self):
        return (f"InterpolatingPolynomial(t0={self.t0:.4f}, intervals={self.number_of_intervals()}, "
                f"h={self.h:.4f}, degree={self.degree}, dim={self.dim})")
