"""Exception and warning types raised by the simulation engine."""


class InvalidParameter(ValueError):
    """A body or engine parameter failed boundary validation."""


class NumericalInstability(ArithmeticError):
    """Non-finite positions or velocities appeared after a step."""

    def __init__(self, message: str, body_ids=None, t_days: float = None):
        super().__init__(message)
        self.body_ids = list(body_ids or [])
        self.t_days = t_days


class NumericalInstabilityWarning(RuntimeWarning):
    """Warning variant of NumericalInstability for the 'warn' policy."""
