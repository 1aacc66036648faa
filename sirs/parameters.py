"""
Epidemiological inputs of the SIRS model and the rate constants derived from them.

Callers describe an epidemic with human-facing quantities (R0, recovery rate,
mean immunity duration); the integrator works with the rate constants
beta, gamma and omega.
"""

import math
from dataclasses import dataclass

from .errors import InvalidParameter


@dataclass(frozen=True)
class Parameters:
    r0: float  # Basic reproduction number
    gamma: float  # Recovery rate (per day)
    immunity_duration: float  # Mean days of immunity, math.inf for permanent
    duration: int  # Days to simulate

    def validate(self) -> None:
        """
        Checks every input against its domain.

        :raises InvalidParameter: naming the first offending input
        """
        if not (self.r0 > 0 and math.isfinite(self.r0)):
            raise InvalidParameter(f"r0 must be a positive finite number, got {self.r0}")
        if not 0 < self.gamma <= 1:
            raise InvalidParameter(f"gamma must be in (0, 1], got {self.gamma}")
        if not self.immunity_duration > 0:
            raise InvalidParameter(
                f"immunity_duration must be positive, got {self.immunity_duration}"
            )
        if isinstance(self.duration, bool) or not self.duration > 0:
            raise InvalidParameter(f"duration must be a positive integer, got {self.duration}")
        if not math.isfinite(self.duration) or self.duration != int(self.duration):
            raise InvalidParameter(f"duration must be a whole number of days, got {self.duration}")


@dataclass(frozen=True)
class DerivedRates:
    beta: float  # Transmission rate
    gamma: float  # Recovery rate
    omega: float  # Waning-immunity rate

    @property
    def r0(self) -> float:
        return self.beta / self.gamma


def derive_rates(params: Parameters) -> DerivedRates:
    """
    Validates the parameters and converts them into ODE rate constants.

    :param params: Epidemiological inputs
    :return: DerivedRates with beta = r0 * gamma and omega = 1 / immunity_duration
    """
    params.validate()
    return DerivedRates(
        beta=params.r0 * params.gamma,
        gamma=params.gamma,
        omega=1.0 / params.immunity_duration,
    )
