from backend import config


class EvalError(Exception):
    """A computation that cannot produce a displayable number."""

    sentinel = config.ERROR_TEXT


class DivisionByZeroError(EvalError):
    sentinel = config.DIV_BY_ZERO_TEXT
