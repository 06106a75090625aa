"""Deterministic arithmetic for numbers embedded in natural text"""

import logging
import math
import re
from typing import List, NamedTuple, Optional, Tuple

logger = logging.getLogger(__name__)

_NUMBER_RE = re.compile(r'\d+\.?\d*')
_SQRT_RE = re.compile(r'square\s+root|sqrt')

# Keywords are checked before symbols; within each list the order decides ties.
_KEYWORD_OPERATORS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ('add',      ('plus', 'add')),
    ('subtract', ('minus', 'subtract')),
    ('multiply', ('times', 'multipl')),
    ('divide',   ('divide',)),
    ('power',    ('power', 'to the')),
    ('percent',  ('percent',)),
    ('modulo',   ('mod', 'remainder')),
)

_SYMBOL_OPERATORS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ('add',      ('+',)),
    ('subtract', ('-',)),
    ('multiply', ('*', '×')),
    ('divide',   ('/', '÷')),
    ('power',    ('^',)),
    ('percent',  ('%',)),
)


class CalculationError(ValueError):
    """Base class for expressions that cannot be evaluated"""


class ParseError(CalculationError):
    """Raised when the text does not hold enough numeric operands"""

    def __init__(self, message: str, expected: int = 2, found: int = 0):
        super().__init__(message)
        self.expected = expected
        self.found = found


class DivisionByZero(CalculationError):
    """Raised when the right operand of a division or modulo is zero"""


class Calculation(NamedTuple):
    left: float
    operator: str
    right: Optional[float]
    value: float
    result: str
    rendered: str


def format_number(value: float) -> str:
    """Integral values without a decimal point, others to at most 4 decimals."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.4f}".rstrip('0').rstrip('.')


def format_quotient(value: float) -> str:
    """Division results: always 4 decimals, trailing zeros and point stripped."""
    return f"{value:.4f}".rstrip('0').rstrip('.')


def extract_numbers(text: str) -> List[float]:
    """All numeric tokens (decimals included) in order of appearance."""
    return [float(token) for token in _NUMBER_RE.findall(text)]


def detect_operator(text: str) -> Optional[str]:
    """Name of the operator in ``text``: keywords first, then symbols."""
    lower = text.lower()
    for name, keywords in _KEYWORD_OPERATORS:
        if any(k in lower for k in keywords):
            return name
    for name, symbols in _SYMBOL_OPERATORS:
        if name == 'subtract' and '—' in lower:
            continue
        if any(s in lower for s in symbols):
            return name
    return None


def _square_root(lower: str) -> Calculation:
    m = _SQRT_RE.search(lower)
    tail = lower[m.end():]
    number = _NUMBER_RE.search(tail)
    if number is None:
        raise ParseError("No number given for the square root", expected=1)
    n = float(number.group())
    value = math.sqrt(n)
    result = format_number(value)
    return Calculation(n, 'sqrt', None, value, result, f"√{format_number(n)} = {result}")


def compute(text: str) -> Calculation:
    """
    Evaluate the first binary operation found in ``text``.

    Raises:
        ParseError: fewer than two numbers (one for a square root).
        DivisionByZero: division or modulo by zero.
    """
    lower = text.lower()

    if _SQRT_RE.search(lower):
        return _square_root(lower)

    numbers = extract_numbers(lower)
    if len(numbers) < 2:
        raise ParseError(
            f"Expected two numbers, found {len(numbers)}",
            expected=2, found=len(numbers),
        )

    a, b = numbers[0], numbers[1]
    fa, fb = format_number(a), format_number(b)
    operator = detect_operator(lower)

    if operator == 'add':
        value = a + b
        result = format_number(value)
        rendered = f"{fa} + {fb} = {result}"
    elif operator == 'subtract':
        value = a - b
        result = format_number(value)
        rendered = f"{fa} - {fb} = {result}"
    elif operator == 'multiply':
        value = a * b
        result = format_number(value)
        rendered = f"{fa} × {fb} = {result}"
    elif operator == 'divide':
        if b == 0:
            raise DivisionByZero(f"Cannot divide {fa} by zero")
        value = a / b
        result = format_quotient(value)
        rendered = f"{fa} ÷ {fb} = {result}"
    elif operator == 'power':
        value = a ** b
        result = format_number(value)
        rendered = f"{fa} ^ {fb} = {result}"
    elif operator == 'percent':
        value = a * b / 100
        result = format_number(value)
        rendered = f"{fb}% of {fa} = {result}"
    elif operator == 'modulo':
        if b == 0:
            raise DivisionByZero(f"Cannot take {fa} modulo zero")
        value = math.fmod(a, b)
        result = format_number(value)
        rendered = f"{fa} mod {fb} = {result}"
    else:
        operator = 'add'
        value = a + b
        result = format_number(value)
        rendered = f"{fa} + {fb} = {result} (assumed addition)"

    logger.debug(f"Calculated {operator}: {rendered}")
    return Calculation(a, operator, b, value, result, rendered)


def evaluate(text: str) -> str:
    """Return the arithmetic identity for ``text``, e.g. ``"10 + 5 = 15"``."""
    return compute(text).rendered


class ExpressionEvaluator:
    """Object facade over :func:`compute` / :func:`evaluate`"""

    def compute(self, text: str) -> Calculation:
        return compute(text)

    def evaluate(self, text: str) -> str:
        return evaluate(text)
