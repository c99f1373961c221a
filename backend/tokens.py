"""
Input tokens consumed by the calculator engine.

Every user action (button click or key press) becomes exactly one token.
Tokens are immutable; the engine dispatches on their type.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Union


class BinaryOperator(Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    POWER = "^"


class ScientificFunction(Enum):
    SQRT = "sqrt"
    SQUARE = "square"
    INVERSE = "inverse"
    SIN = "sin"
    COS = "cos"
    TAN = "tan"
    LOG = "log"
    LN = "ln"


class MemoryAction(Enum):
    CLEAR = "MC"
    ADD = "M+"
    SUBTRACT = "M-"
    STORE = "MS"
    RECALL = "MR"


@dataclass(frozen=True)
class Digit:
    value: int

    def __post_init__(self):
        if not 0 <= self.value <= 9:
            raise ValueError(f"Digit out of range: {self.value}")

    @property
    def label(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class DecimalPoint:
    pass


@dataclass(frozen=True)
class BinaryOp:
    op: BinaryOperator


@dataclass(frozen=True)
class Equals:
    pass


@dataclass(frozen=True)
class Clear:
    pass


@dataclass(frozen=True)
class Backspace:
    pass


@dataclass(frozen=True)
class Percent:
    pass


@dataclass(frozen=True)
class Unary:
    func: ScientificFunction


@dataclass(frozen=True)
class Memory:
    action: MemoryAction


Token = Union[Digit, DecimalPoint, BinaryOp, Equals, Clear, Backspace, Percent, Unary, Memory]
