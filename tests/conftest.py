import pytest

from backend.engine import CalculatorEngine
from backend.tokens import (
    Backspace,
    BinaryOp,
    BinaryOperator,
    Clear,
    DecimalPoint,
    Digit,
    Equals,
    Percent,
)

# Compact key script: digits, ".", operators, "=", "C" (clear), "<" (backspace), "%"
SCRIPT_TOKENS = {
    ".": DecimalPoint(),
    "=": Equals(),
    "C": Clear(),
    "<": Backspace(),
    "%": Percent(),
}
SCRIPT_TOKENS.update({op.value: BinaryOp(op) for op in BinaryOperator})
SCRIPT_TOKENS.update({str(d): Digit(d) for d in range(10)})


@pytest.fixture
def engine():
    return CalculatorEngine()


@pytest.fixture
def press(engine):
    """Feed a key script to the engine and return the final display."""
    def _press(script):
        display = engine.display
        for ch in script:
            display = engine.apply(SCRIPT_TOKENS[ch])
        return display
    return _press
