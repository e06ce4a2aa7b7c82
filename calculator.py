# calculator.py

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union
import math
import re

import schemas
from app.math.units import DAUGHTER_UNITS, SON_UNITS, total_share_units, unit_value

# --------------------------
# Validation outcomes
# --------------------------
class ValidationErrorKind(str, Enum):
    INVALID_AMOUNT = "InvalidAmount"
    NEGATIVE_HEIR_COUNT = "NegativeHeirCount"
    NO_HEIRS = "NoHeirs"

    @property
    def message(self) -> str:
        return ERROR_MESSAGES[self]


ERROR_MESSAGES = {
    ValidationErrorKind.INVALID_AMOUNT: "Please enter a valid positive amount",
    ValidationErrorKind.NEGATIVE_HEIR_COUNT: "Number of sons and daughters cannot be negative",
    ValidationErrorKind.NO_HEIRS: "Please enter at least one son or daughter",
}


@dataclass(frozen=True)
class ShareOutcome:
    """
    Tagged result of one calculation: exactly one of `result` / `error` is set.
    """
    result: Optional[schemas.InheritanceResult] = None
    error: Optional[ValidationErrorKind] = None

    @classmethod
    def success(cls, result: schemas.InheritanceResult) -> "ShareOutcome":
        return cls(result=result)

    @classmethod
    def failure(cls, kind: ValidationErrorKind) -> "ShareOutcome":
        return cls(error=kind)

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_state(self) -> schemas.CalculationState:
        if self.error is not None:
            return schemas.CalculationState(error=self.error.message)
        return schemas.CalculationState(success=True, result=self.result)


# --------------------------
# Raw input coercion (browser form semantics)
# --------------------------
_FLOAT_PREFIX = re.compile(r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_INT_PREFIX = re.compile(r"[+-]?\d+")

# largest float is ~1.8e308; longer digit strings also trip int()'s 4300-digit limit
MAX_COUNT_DIGITS = 309
HUGE_COUNT = 10 ** MAX_COUNT_DIGITS

RawValue = Union[str, float, int, None]


def parse_amount(raw: RawValue) -> Optional[float]:
    """
    Leading-float parse: "12.5abc" -> 12.5, "abc" / "" / None -> None.
    Non-finite and non-positive values are passed through; compute_shares rejects them.
    """
    if raw is None:
        return None
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        return float(raw)
    match = _FLOAT_PREFIX.match(str(raw).lstrip())
    if not match:
        return None
    text = match.group(0)
    if text.lstrip("+-") == "Infinity":
        return -math.inf if text.startswith("-") else math.inf
    return float(text)


def parse_count(raw: RawValue) -> int:
    """Leading-integer parse: "3.7" -> 3, "-2" -> -2; anything unparseable -> 0."""
    if raw is None or isinstance(raw, bool):
        return 0
    if isinstance(raw, float):
        if not math.isfinite(raw):
            return 0
        return int(raw)
    if isinstance(raw, int):
        return raw
    match = _INT_PREFIX.match(str(raw).lstrip())
    if not match:
        return 0
    text = match.group(0)
    digits = text.lstrip("+-").lstrip("0")
    if len(digits) > MAX_COUNT_DIGITS:
        # past the float range a browser reads the count as Infinity
        return -HUGE_COUNT if text.startswith("-") else HUGE_COUNT
    return int(text)


def parse_form(amount: RawValue, sons: RawValue, daughters: RawValue) -> schemas.InheritanceRequest:
    return schemas.InheritanceRequest(
        amount=parse_amount(amount),
        sons=parse_count(sons),
        daughters=parse_count(daughters),
    )


# ============================================================
#                    MAIN FUNCTION
# ============================================================
def compute_shares(amount: Optional[float], sons: int, daughters: int) -> ShareOutcome:
    """
    Split `amount` between sons and daughters at 2:1.

    Checks run in order and the first failure wins:
    1. amount missing, non-finite or <= 0  -> InvalidAmount
    2. a negative heir count               -> NegativeHeirCount
    3. no heirs at all                     -> NoHeirs

    The shares are per individual heir and are not rounded.
    """
    if amount is None or not math.isfinite(amount) or amount <= 0:
        return ShareOutcome.failure(ValidationErrorKind.INVALID_AMOUNT)
    if sons < 0 or daughters < 0:
        return ShareOutcome.failure(ValidationErrorKind.NEGATIVE_HEIR_COUNT)
    if sons == 0 and daughters == 0:
        return ShareOutcome.failure(ValidationErrorKind.NO_HEIRS)

    value = unit_value(amount, total_share_units(sons, daughters))
    # son_share is filled in even with zero sons; the page shows both lines
    return ShareOutcome.success(
        schemas.InheritanceResult(son_share=value * SON_UNITS, daughter_share=value * DAUGHTER_UNITS)
    )


def calculate_inheritance(request: schemas.InheritanceRequest) -> ShareOutcome:
    return compute_shares(request.amount, request.sons, request.daughters)


def calculate_from_form(amount: RawValue, sons: RawValue, daughters: RawValue) -> ShareOutcome:
    """Coerce the three raw form fields, then run the calculation."""
    return calculate_inheritance(parse_form(amount, sons, daughters))
