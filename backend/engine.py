import logging
import math
import operator
from dataclasses import dataclass, replace
from typing import Callable, Dict, Optional, Tuple

from backend import config, scientific
from backend.errors import DivisionByZeroError, EvalError
from backend.formatter import format_number, is_numeral, parse_number
from backend.history import HistoryEntry, HistoryLog
from backend.memory import MemoryCell
from backend.tokens import (
    Backspace,
    BinaryOp,
    BinaryOperator,
    Clear,
    DecimalPoint,
    Digit,
    Equals,
    Memory,
    MemoryAction,
    Percent,
    Token,
    Unary,
)

logger = logging.getLogger(__name__)

SENTINELS = (config.ERROR_TEXT, config.DIV_BY_ZERO_TEXT)

_OPERATORS: Dict[BinaryOperator, Callable[[float, float], float]] = {
    BinaryOperator.ADD: operator.add,
    BinaryOperator.SUBTRACT: operator.sub,
    BinaryOperator.MULTIPLY: operator.mul,
    BinaryOperator.DIVIDE: operator.truediv,
    BinaryOperator.POWER: scientific.power,
}


def evaluate(left: float, op: BinaryOperator, right: float) -> float:
    """
    Apply a binary operator to two floats.
    Raises DivisionByZeroError for x / 0 and EvalError for NaN/inf results.
    """
    if op is BinaryOperator.DIVIDE and right == 0:
        raise DivisionByZeroError("Division by zero")
    result = _OPERATORS[op](left, right)
    if not math.isfinite(result):
        raise EvalError(f"Non-finite result for {left} {op.value} {right}")
    return result


@dataclass
class EngineState:
    display: str = "0"
    stored_operand: float = 0.0
    pending_op: Optional[BinaryOperator] = None
    awaiting_new_entry: bool = True
    # buffer holds an operand typed or computed since the last operator/equals
    operand_entered: bool = False

    @property
    def has_error(self) -> bool:
        return self.display in SENTINELS

    def reset(self):
        self.display = "0"
        self.stored_operand = 0.0
        self.pending_op = None
        self.awaiting_new_entry = True
        self.operand_entered = False


class CalculatorEngine:
    """
    Left-to-right calculator state machine.

    Consumes one token at a time through apply() and exposes the display
    string, the history log and the memory indicator for the presentation
    layer. Nothing raises out of apply() for a valid token: parse failures
    become 0.0 and computation failures become a sentinel display string.
    """

    def __init__(self, memory: Optional[MemoryCell] = None, history: Optional[HistoryLog] = None):
        self.state = EngineState()
        self.memory = memory if memory is not None else MemoryCell()
        self.history = history if history is not None else HistoryLog()
        self._handlers = {
            Digit: self._on_digit,
            DecimalPoint: self._on_decimal_point,
            BinaryOp: self._on_binary_op,
            Equals: self._on_equals,
            Clear: self._on_clear,
            Backspace: self._on_backspace,
            Percent: self._on_percent,
            Unary: self._on_unary,
            Memory: self._on_memory,
        }

    # -------------------------
    # Read-only views for the presentation layer
    # -------------------------
    @property
    def display(self) -> str:
        return self.state.display

    def history_entries(self) -> Tuple[HistoryEntry, ...]:
        return self.history.entries()

    def memory_indicator_active(self) -> bool:
        return self.memory.has_memory()

    def pending_expression(self) -> str:
        """Left operand and operator waiting for a right operand, e.g. "12 +"."""
        if self.state.pending_op is None:
            return ""
        return f"{format_number(self.state.stored_operand)} {self.state.pending_op.value}"

    def snapshot(self) -> EngineState:
        return replace(self.state)

    # -------------------------
    # Token dispatch
    # -------------------------
    def apply(self, token: Token) -> str:
        if self.state.has_error and not isinstance(token, (Clear, Backspace)):
            logger.debug("Ignoring %r while display shows %r", token, self.state.display)
            return self.state.display

        handler = self._handlers.get(type(token))
        if handler is None:
            raise TypeError(f"Unsupported token: {token!r}")
        try:
            handler(token)
        except EvalError as e:
            self._fail(e)
        logger.debug("%r -> %r", token, self.state)
        return self.state.display

    # -------------------------
    # Clipboard bridge
    # -------------------------
    def load_entry(self, text: str) -> bool:
        """
        Replace the current entry with pasted text.
        Only plain decimal numerals are accepted; anything else is rejected
        and leaves the state untouched.
        """
        if self.state.has_error:
            return False
        candidate = text.strip() if isinstance(text, str) else ""
        if not is_numeral(candidate):
            logger.info("Rejected pasted text %r", text)
            return False

        sign = "-" if candidate.startswith("-") else ""
        digits = candidate.lstrip("-")
        if digits.startswith("."):
            digits = "0" + digits
        self.state.display = sign + digits
        self.state.awaiting_new_entry = False
        self.state.operand_entered = True
        return True

    def copy_text(self) -> str:
        return self.state.display

    # -------------------------
    # Helpers
    # -------------------------
    def _operand(self) -> float:
        value = parse_number(self.state.display)
        if value is None:
            # unparseable buffer counts as zero
            logger.debug("Could not parse %r, using 0", self.state.display)
            return 0.0
        if not math.isfinite(value):
            raise EvalError(f"Operand out of range: {self.state.display[:20]}...")
        return value

    def _fail(self, error: EvalError):
        logger.info("Calculation failed: %s", error)
        s = self.state
        s.display = error.sentinel
        s.stored_operand = 0.0
        s.pending_op = None
        s.awaiting_new_entry = True
        s.operand_entered = False

    def _show(self, value: float) -> bool:
        """Write a computed value into the buffer, or fail on NaN/inf."""
        if not math.isfinite(value):
            self._fail(EvalError(f"Non-finite value: {value}"))
            return False
        self.state.display = format_number(value)
        return True

    def _resolve(self) -> bool:
        """Evaluate the pending operation against the buffer."""
        s = self.state
        left, op, right = s.stored_operand, s.pending_op, self._operand()
        s.pending_op = None
        try:
            result = evaluate(left, op, right)
        except EvalError as e:
            self._fail(e)
            return False

        text = format_number(result)
        self.history.append(f"{format_number(left)} {op.value} {format_number(right)}", text)
        s.display = text
        s.stored_operand = result
        s.awaiting_new_entry = True
        s.operand_entered = False
        return True

    def _type(self, char: str):
        s = self.state
        if s.awaiting_new_entry:
            s.display = "0." if char == "." else char
            s.awaiting_new_entry = False
        elif char == ".":
            if "." in s.display:
                return
            s.display += char
        elif s.display in ("0", "-0"):
            # keep the sign of a pasted "-0"
            s.display = s.display[:-1] + char
        else:
            s.display += char
        s.operand_entered = True

    # -------------------------
    # Handlers
    # -------------------------
    def _on_digit(self, token: Digit):
        self._type(token.label)

    def _on_decimal_point(self, token: DecimalPoint):
        self._type(".")

    def _on_binary_op(self, token: BinaryOp):
        s = self.state
        if s.operand_entered:
            if s.pending_op is not None:
                if not self._resolve():
                    return
            else:
                s.stored_operand = self._operand()
        s.pending_op = token.op
        s.awaiting_new_entry = True
        s.operand_entered = False

    def _on_equals(self, token: Equals):
        if self.state.pending_op is None:
            return
        self._resolve()

    def _on_clear(self, token: Clear):
        self.state.reset()

    def _on_backspace(self, token: Backspace):
        s = self.state
        if s.has_error:
            s.reset()
            return
        if len(s.display) <= 1:
            s.display = "0"
            s.awaiting_new_entry = True
        else:
            trimmed = s.display[:-1]
            s.display = "0" if trimmed == "-" else trimmed
            s.awaiting_new_entry = False
        s.operand_entered = True

    def _on_percent(self, token: Percent):
        s = self.state
        value = self._operand()
        if s.pending_op is not None:
            result = s.stored_operand * value / 100
        else:
            result = value * value / 100
        if self._show(result):
            s.operand_entered = True

    def _on_unary(self, token: Unary):
        result = scientific.apply(token.func, self._operand())
        if self._show(result):
            self.state.awaiting_new_entry = True
            self.state.operand_entered = True

    def _on_memory(self, token: Memory):
        action = token.action
        if action is MemoryAction.CLEAR:
            self.memory.clear()
        elif action in (MemoryAction.STORE, MemoryAction.ADD, MemoryAction.SUBTRACT):
            value = self._operand()
            if action is MemoryAction.STORE:
                self.memory.store(value)
            elif action is MemoryAction.ADD:
                self.memory.add(value)
            else:
                self.memory.subtract(value)
            # next digit starts a new number
            self.state.awaiting_new_entry = True
        elif action is MemoryAction.RECALL:
            if self._show(self.memory.recall()):
                self.state.awaiting_new_entry = True
                self.state.operand_entered = True
