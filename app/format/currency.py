# app/format/currency.py

from decimal import Decimal, ROUND_HALF_UP, localcontext
import math
from typing import Protocol

TWOPLACES = Decimal("0.01")
FLOAT_DIGITS = 400


class CurrencyFormatter(Protocol):
    def format(self, value: float) -> str:
        ...


def _split(value: float):
    """
    Sign, integer digits and two-digit fraction of a value rounded to cents.
    Infinity and NaN come back as ("", "∞", None) / ("", "NaN", None).
    """
    if math.isnan(value):
        return "", "NaN", None
    if math.isinf(value):
        return ("-" if value < 0 else ""), "∞", None
    with localcontext() as ctx:
        # room for every digit of the largest float plus the cents
        ctx.prec = FLOAT_DIGITS
        quantized = Decimal(repr(value)).quantize(TWOPLACES, rounding=ROUND_HALF_UP)
        sign = "-" if quantized < 0 else ""
        whole, _, frac = f"{abs(quantized):.2f}".partition(".")
    return sign, whole, frac


def group_indian(digits: str) -> str:
    """
    Indian (lakh/crore) grouping: last three digits, then pairs.
    "900000" -> "9,00,000", "123456789" -> "12,34,56,789"
    """
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return ",".join(pairs) + "," + tail


class IndianRupeeFormatter:
    """Rupee amounts the way an en-IN browser shows them: ₹12,34,567.89"""

    symbol = "₹"

    def format(self, value: float) -> str:
        sign, whole, frac = _split(value)
        if frac is None:
            return f"{sign}{self.symbol}{whole}"
        return f"{sign}{self.symbol}{group_indian(whole)}.{frac}"


class GroupedFormatter:
    """Three-digit grouping with configurable separators, e.g. 12.345,60 or $12,345.60"""

    def __init__(self, symbol: str = "", group_sep: str = ",", decimal_sep: str = "."):
        self.symbol = symbol
        self.group_sep = group_sep
        self.decimal_sep = decimal_sep

    def format(self, value: float) -> str:
        sign, whole, frac = _split(value)
        if frac is None:
            return f"{sign}{self.symbol}{whole}"
        grouped = f"{int(whole):,}".replace(",", self.group_sep)
        return f"{sign}{self.symbol}{grouped}{self.decimal_sep}{frac}"


FORMATTERS = {
    "inr": IndianRupeeFormatter,
    "plain": GroupedFormatter,
}


def get_formatter(name: str) -> CurrencyFormatter:
    try:
        return FORMATTERS[name.lower()]()
    except KeyError:
        raise ValueError(f"Unknown currency format '{name}', expected one of: {', '.join(FORMATTERS)}")
