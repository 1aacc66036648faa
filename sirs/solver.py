"""
Public entry point of the SIRS solver.

solve_sirs() validates the inputs, derives the rate constants, integrates the
model with RK4 and samples the trajectory once per reporting interval.

Example:
    from sirs.solver import solve_sirs
    solution = solve_sirs(r0=2.5, gamma=0.2, immunity_duration=180, duration=365)
    print(solution.peak_day, solution.peak_infected)
"""

import math
from collections.abc import Sequence
from dataclasses import asdict, dataclass
from typing import Dict, Iterator, List, Optional

import numpy as np

from .config import SolverConfig, get_config
from .errors import InvalidParameter
from .model import EpidemicState, run_sirs
from .parameters import Parameters, derive_rates


@dataclass(frozen=True)
class SamplePoint:
    time: float  # Days since start
    susceptible: float
    infected: float
    recovered: float


class Solution(Sequence):
    """Ordered sample points of one solver run."""

    def __init__(self, points: List[SamplePoint]):
        self._points = tuple(points)
        self.t = np.array([p.time for p in self._points])
        self.S = np.array([p.susceptible for p in self._points])
        self.I = np.array([p.infected for p in self._points])
        self.R = np.array([p.recovered for p in self._points])

    def __getitem__(self, index):
        return self._points[index]

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[SamplePoint]:
        return iter(self._points)

    def __repr__(self) -> str:
        return f"Solution({len(self)} points, t={self.t[0]:g}..{self.t[-1]:g})"

    @property
    def peak_infected(self) -> float:
        return float(np.max(self.I))

    @property
    def peak_day(self) -> float:
        return float(self.t[np.argmax(self.I)])

    @property
    def final_point(self) -> SamplePoint:
        return self._points[-1]

    def to_records(self) -> List[Dict[str, float]]:
        return [asdict(p) for p in self._points]


def initial_state(config: SolverConfig) -> EpidemicState:
    state = EpidemicState(
        S=config.initial_susceptible,
        I=config.initial_infected,
        R=config.initial_recovered,
    )
    if not math.isclose(state.total, 1.0, abs_tol=1e-12):
        raise InvalidParameter(f"Initial fractions sum to {state.total}, expected 1")
    return state


def solve_sirs(
    r0: float,
    gamma: float,
    immunity_duration: float,
    duration: int,
    config: Optional[SolverConfig] = None,
) -> Solution:
    """
    Solves the SIRS model and samples it once per reporting interval.

    Args:
        r0: Basic reproduction number.
        gamma: Recovery rate per day, in (0, 1].
        immunity_duration: Mean days of immunity; math.inf gives plain SIR.
        duration: Days to simulate.
        config: Step size, reporting interval and initial condition.
            Defaults to get_config("default").

    Returns:
        Solution whose first point is the initial condition at time 0 and
        whose last point is the last reporting time not after duration.

    Raises:
        InvalidParameter: If any input is outside its domain.
        NumericalInstability: If integration produces a non-finite state.
    """
    if config is None:
        config = get_config("default")

    rates = derive_rates(Parameters(r0, gamma, immunity_duration, duration))
    state = initial_state(config)

    n_reports = int(math.floor(duration / config.report_interval + 1e-9))
    every = config.steps_per_report
    S, I, R = run_sirs(
        state, rates, config.step_size, n_reports * every, record_every=every
    )

    points = [SamplePoint(0.0, state.S, state.I, state.R)]
    for k in range(1, n_reports + 1):
        points.append(
            SamplePoint(
                time=k * config.report_interval,
                susceptible=float(S[k - 1]),
                infected=float(I[k - 1]),
                recovered=float(R[k - 1]),
            )
        )

    return Solution(points)
