"""
Input source: translate keypad labels and Tk key events into engine tokens.

Kept free of any widget code so the mapping can be checked without a display.
"""
from typing import Dict, Optional

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
    ScientificFunction,
    Token,
    Unary,
)

# -------------------------
# Keypad labels
# -------------------------
KEYPAD_LAYOUT = [
    ["MC", "MR", "MS", "M+", "M-"],
    ["sin", "cos", "tan", "log", "ln"],
    ["√", "x²", "1/x", "xʸ", "%"],
    ["7", "8", "9", "/", "⌫"],
    ["4", "5", "6", "*", "C"],
    ["1", "2", "3", "-", ""],
    ["0", ".", "=", "+", ""],
]

LABEL_TOKENS: Dict[str, Token] = {
    ".": DecimalPoint(),
    "+": BinaryOp(BinaryOperator.ADD),
    "-": BinaryOp(BinaryOperator.SUBTRACT),
    "*": BinaryOp(BinaryOperator.MULTIPLY),
    "/": BinaryOp(BinaryOperator.DIVIDE),
    "xʸ": BinaryOp(BinaryOperator.POWER),
    "=": Equals(),
    "C": Clear(),
    "⌫": Backspace(),
    "%": Percent(),
    "√": Unary(ScientificFunction.SQRT),
    "x²": Unary(ScientificFunction.SQUARE),
    "1/x": Unary(ScientificFunction.INVERSE),
    "sin": Unary(ScientificFunction.SIN),
    "cos": Unary(ScientificFunction.COS),
    "tan": Unary(ScientificFunction.TAN),
    "log": Unary(ScientificFunction.LOG),
    "ln": Unary(ScientificFunction.LN),
}
LABEL_TOKENS.update({action.value: Memory(action) for action in MemoryAction})
LABEL_TOKENS.update({str(d): Digit(d) for d in range(10)})

# -------------------------
# Keyboard (Tk keysyms first, then the typed character)
# -------------------------
KEYSYM_TOKENS: Dict[str, Token] = {
    "KP_Add": BinaryOp(BinaryOperator.ADD),
    "KP_Subtract": BinaryOp(BinaryOperator.SUBTRACT),
    "KP_Multiply": BinaryOp(BinaryOperator.MULTIPLY),
    "KP_Divide": BinaryOp(BinaryOperator.DIVIDE),
    "KP_Decimal": DecimalPoint(),
    "KP_Enter": Equals(),
    "Return": Equals(),
    "Escape": Clear(),
    "BackSpace": Backspace(),
}
KEYSYM_TOKENS.update({f"KP_{d}": Digit(d) for d in range(10)})

CHAR_TOKENS: Dict[str, Token] = {
    "+": BinaryOp(BinaryOperator.ADD),
    "-": BinaryOp(BinaryOperator.SUBTRACT),
    "*": BinaryOp(BinaryOperator.MULTIPLY),
    "/": BinaryOp(BinaryOperator.DIVIDE),
    "^": BinaryOp(BinaryOperator.POWER),
    ".": DecimalPoint(),
    "=": Equals(),
    "c": Clear(),
    "C": Clear(),
    "%": Percent(),
}
CHAR_TOKENS.update({str(d): Digit(d) for d in range(10)})


def token_for_label(label: str) -> Optional[Token]:
    return LABEL_TOKENS.get(label)


def token_for_key(keysym: str, char: str = "") -> Optional[Token]:
    """Map a Tk key event (event.keysym, event.char) to a token, or None."""
    token = KEYSYM_TOKENS.get(keysym)
    if token is not None:
        return token
    return CHAR_TOKENS.get(char)
