import math
from dataclasses import dataclass

from .errors import InvalidParameter


@dataclass(frozen=True)
class SolverConfig:
    # Integration settings
    step_size: float = 0.1  # RK4 step (days)
    report_interval: float = 1.0  # Days between reported samples

    # Initial condition (fractions of the population)
    initial_infected: float = 0.001
    initial_recovered: float = 0.0

    def __post_init__(self):
        if not self.step_size > 0:
            raise InvalidParameter(f"step_size must be positive, got {self.step_size}")
        if not (math.isfinite(self.step_size) and math.isfinite(self.report_interval)):
            raise InvalidParameter(
                f"step_size and report_interval must be finite, got "
                f"{self.step_size} and {self.report_interval}"
            )
        if not self.report_interval >= self.step_size:
            raise InvalidParameter(
                f"report_interval ({self.report_interval}) must not be shorter "
                f"than step_size ({self.step_size})"
            )
        ratio = self.report_interval / self.step_size
        if abs(ratio - round(ratio)) > 1e-9:
            raise InvalidParameter(
                f"report_interval ({self.report_interval}) must be a whole "
                f"multiple of step_size ({self.step_size})"
            )
        for name in ("initial_infected", "initial_recovered"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise InvalidParameter(f"{name} must be in [0, 1], got {value}")
        if self.initial_infected + self.initial_recovered > 1.0:
            raise InvalidParameter(
                "initial_infected + initial_recovered must not exceed 1"
            )

    @property
    def initial_susceptible(self) -> float:
        return 1.0 - self.initial_infected - self.initial_recovered

    @property
    def steps_per_report(self) -> int:
        return int(round(self.report_interval / self.step_size))


PRESETS = {
    "default": SolverConfig(),
    "coarse": SolverConfig(step_size=1.0),
    "fine": SolverConfig(step_size=0.01),
}


def get_config(name: str) -> SolverConfig:
    if name in PRESETS:
        return PRESETS[name]
    else:
        available = ", ".join(PRESETS.keys())
        raise ValueError(f"Unknown config: {name}. Available configs: {available}")
