import math
import warnings
from dataclasses import dataclass

import numpy as np

from .errors import InvalidParameter, NumericalInstability
from .parameters import DerivedRates


@dataclass
class EpidemicState:
    S: float  # Susceptible fraction
    I: float  # Infected fraction
    R: float  # Recovered fraction

    @property
    def total(self) -> float:
        return self.S + self.I + self.R


def endemic_equilibrium(rates: DerivedRates) -> EpidemicState:
    """
    Fixed point the SIRS system settles into.

    Above the epidemic threshold (R0 > 1) the susceptible fraction settles at
    1 / R0 and infection persists at the level where recoveries balance waning
    immunity. At or below the threshold the disease dies out.

    With permanent immunity (omega = 0) and R0 > 1 there is no endemic state:
    the run ends at the SIR final size, which depends on the initial condition.

    Returns:
        EpidemicState at equilibrium.

    Raises:
        InvalidParameter: If omega is 0 and R0 > 1.
    """
    if rates.r0 <= 1:
        return EpidemicState(S=1.0, I=0.0, R=0.0)

    if rates.omega == 0:
        raise InvalidParameter(
            "No endemic equilibrium with permanent immunity (omega = 0) and R0 > 1"
        )

    S = 1.0 / rates.r0
    I = rates.omega * (1.0 - S) / (rates.gamma + rates.omega)
    return EpidemicState(S=S, I=I, R=1.0 - S - I)


def sirs_rhs(S: float, I: float, R: float, rates: DerivedRates):
    """Right-hand side of the SIRS equations"""
    new_infections = rates.beta * S * I
    new_recoveries = rates.gamma * I
    waned = rates.omega * R

    dS = -new_infections + waned
    dI = new_infections - new_recoveries
    dR = new_recoveries - waned
    return dS, dI, dR


def rk4_step(S: float, I: float, R: float, h: float, rates: DerivedRates):
    """Single RK4 step of length h"""
    k1 = sirs_rhs(S, I, R, rates)
    k2 = sirs_rhs(S + 0.5 * h * k1[0], I + 0.5 * h * k1[1], R + 0.5 * h * k1[2], rates)
    k3 = sirs_rhs(S + 0.5 * h * k2[0], I + 0.5 * h * k2[1], R + 0.5 * h * k2[2], rates)
    k4 = sirs_rhs(S + h * k3[0], I + h * k3[1], R + h * k3[2], rates)
    S_next = S + (h / 6.0) * (k1[0] + 2 * k2[0] + 2 * k3[0] + k4[0])
    I_next = I + (h / 6.0) * (k1[1] + 2 * k2[1] + 2 * k3[1] + k4[1])
    R_next = R + (h / 6.0) * (k1[2] + 2 * k2[2] + 2 * k3[2] + k4[2])
    return S_next, I_next, R_next


def clamp_state(S: float, I: float, R: float):
    """
    Pulls a drifted triple back into [0, 1] and rescales it to sum to 1.

    Returns the triple unchanged when it is already in range. Otherwise emits
    a RuntimeWarning, since a clamp under normal parameters means the step
    size is too coarse.
    """
    if 0.0 <= S <= 1.0 and 0.0 <= I <= 1.0 and 0.0 <= R <= 1.0:
        return S, I, R

    warnings.warn(
        f"State ({S:.3g}, {I:.3g}, {R:.3g}) left [0, 1]; clamping. "
        "Consider a smaller step_size.",
        RuntimeWarning,
        stacklevel=2,
    )
    S, I, R = (min(max(x, 0.0), 1.0) for x in (S, I, R))
    total = S + I + R
    return S / total, I / total, R / total


def run_sirs(
    state: EpidemicState,
    rates: DerivedRates,
    h: float,
    steps: int,
    t0: float = 0.0,
    record_every: int = 1,
):
    """
    Integrates the SIRS model with fixed-step RK4.

    :param state: State at t0 (fractions)
    :param rates: Rate constants (beta, gamma, omega)
    :param h: Step size in days
    :param steps: Number of steps to take
    :param t0: Time of the starting state, used in error reports
    :param record_every: Keep only every n-th state (after steps n, 2n, ...)
    :return: Arrays of (S, I, R) for the kept steps (excluding initial state)
    :raises NumericalInstability: if a step yields NaN or infinity
    """
    S, I, R = [], [], []
    S_current, I_current, R_current = state.S, state.I, state.R

    for step in range(steps):
        S_next, I_next, R_next = rk4_step(S_current, I_current, R_current, h, rates)

        if not (math.isfinite(S_next) and math.isfinite(I_next) and math.isfinite(R_next)):
            raise NumericalInstability(t0 + (step + 1) * h, (S_next, I_next, R_next))

        S_next, I_next, R_next = clamp_state(S_next, I_next, R_next)

        if (step + 1) % record_every == 0:
            S.append(S_next)
            I.append(I_next)
            R.append(R_next)

        S_current, I_current, R_current = S_next, I_next, R_next

    return np.array(S), np.array(I), np.array(R)
