"""
Planning parameters for the GLC planner.
Validated once at construction; immutable for the duration of a run.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path

import numpy as np

import glc_config as cfg


class ConfigurationError(ValueError):
    """Raised when planner inputs are inconsistent (dimensions, scales, policies)."""


@dataclass(frozen=True, eq=False)
class Parameters:
    """
    Algorithm parameters.

    Attributes
    ----------
    res : int
        Resolution. Controls the number of control samples, the expansion
        horizon (time_scale / res) and the lattice density.
    control_dim, state_dim : int
        Dimensions of control and state vectors.
    depth_scale : float
        Scales the maximum search depth.
    dt_max : float
        Upper bound on the integration step and on the expansion horizon.
    max_iter : int
        Maximum number of node expansions.
    time_scale : float
        Scales the expansion horizon.
    partition_scale : float
        Larger values give coarser dominance cells.
    x0 : np.ndarray
        Initial state.
    time_varying : bool
        Include the search depth in the dominance key.
    termination : str
        "discovery" or "pop".
    """
    res: int = cfg.RES
    control_dim: int = cfg.CONTROL_DIM
    state_dim: int = cfg.STATE_DIM
    depth_scale: float = cfg.DEPTH_SCALE
    dt_max: float = cfg.DT_MAX
    max_iter: int = cfg.MAX_ITER
    time_scale: float = cfg.TIME_SCALE
    partition_scale: float = cfg.PARTITION_SCALE
    x0: np.ndarray = field(default_factory=lambda: cfg.X0.copy())
    time_varying: bool = cfg.TIME_VARYING
    termination: str = cfg.TERMINATION

    def __post_init__(self):
        x0 = np.array(self.x0, dtype=float).reshape(-1)
        x0.flags.writeable = False
        object.__setattr__(self, "x0", x0)
        self.validate()

    def validate(self):
        """Reject inconsistent settings before any search starts."""
        for name in ("res", "control_dim", "state_dim", "max_iter"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)) or value < 1:
                raise ConfigurationError(f"{name} must be a positive integer, got {value!r}")
        if self.res < 2:
            raise ConfigurationError(f"res must be at least 2, got {self.res}")
        for name in ("depth_scale", "dt_max", "time_scale", "partition_scale"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float, np.number)) \
                    or not np.isfinite(value) or value <= 0:
                raise ConfigurationError(f"{name} must be positive, got {value!r}")
        if self.x0.shape[0] != self.state_dim:
            raise ConfigurationError(
                f"x0 has dimension {self.x0.shape[0]} but state_dim is {self.state_dim}")
        if not np.all(np.isfinite(self.x0)):
            raise ConfigurationError("x0 must be finite")
        if self.termination not in cfg.TERMINATION_POLICIES:
            raise ConfigurationError(
                f"termination must be one of {cfg.TERMINATION_POLICIES}, got {self.termination!r}")

    def to_dict(self) -> dict:
        return {
            'res': int(self.res),
            'control_dim': int(self.control_dim),
            'state_dim': int(self.state_dim),
            'depth_scale': float(self.depth_scale),
            'dt_max': float(self.dt_max),
            'max_iter': int(self.max_iter),
            'time_scale': float(self.time_scale),
            'partition_scale': float(self.partition_scale),
            'x0': self.x0.tolist(),
            'time_varying': bool(self.time_varying),
            'termination': self.termination,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Parameters":
        unknown = set(data) - set(cls.__dataclass_fields__)
        if unknown:
            raise ConfigurationError(f"unknown parameters: {sorted(unknown)}")
        return cls(**data)

    def to_json(self, filename):
        """Save parameters to a JSON file."""
        path = Path(filename)
        with open(path, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)
        return path

    @classmethod
    def from_json(cls, filename) -> "Parameters":
        """Load and validate parameters from a JSON file."""
        with open(filename, 'r') as f:
            data = json.load(f)
        return cls.from_dict(data)
