class InvalidParameter(ValueError):
    """Raised when a model input or solver setting is outside its domain."""


class NumericalInstability(ArithmeticError):
    """Raised when integration produces a non-finite state."""

    def __init__(self, time: float, state):
        self.time = time
        self.state = state
        super().__init__(f"Non-finite state {state} at t={time:g}")
