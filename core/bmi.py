"""
core/bmi.py
────────────────────────────────────────────────────────────────────────
BMI value + band.

    BMI = weight_kg / height_m²

Bands (WHO adult cut-offs, lower bound inclusive):

    < 18.5  underweight
    < 25    normal
    < 30    overweight
    else    obese
"""

from __future__ import annotations

import logging
import math
from decimal import ROUND_HALF_UP, Context, Decimal

from core.models.profile import BMIClass

Logger = logging.getLogger(__name__)

# (upper bound, band), checked in order
_BANDS: tuple[tuple[float, BMIClass], ...] = (
    (18.5, BMIClass.underweight),
    (25.0, BMIClass.normal),
    (30.0, BMIClass.overweight),
)

_ONE_DP = Decimal("0.1")
# wide enough for every finite float (max ~1.8e308) plus one decimal
_CTX = Context(prec=400)


def compute_bmi(weight_kg: float | None, height_cm: float | None) -> float | None:
    """
    Return BMI rounded to one decimal, or None when either input is
    missing, zero or negative, or when the ratio is not a finite number
    (height so small that its square underflows, weight that overflows).

    Rounding is half-away-from-zero on the exact binary value, so
    22.25 → 22.3 (plain `round()` would give 22.2).
    """
    if not weight_kg or not height_cm or weight_kg < 0 or height_cm < 0:
        return None

    h = height_cm / 100
    h2 = h * h
    if h2 == 0:
        return None
    raw = weight_kg / h2
    if not math.isfinite(raw):
        return None
    bmi = float(Decimal(raw).quantize(_ONE_DP, rounding=ROUND_HALF_UP, context=_CTX))
    Logger.debug("bmi(%s kg, %s cm) = %s", weight_kg, height_cm, bmi)
    return bmi


def classify_bmi(bmi: float | None) -> BMIClass:
    if bmi is None:
        return BMIClass.unknown
    for upper, band in _BANDS:
        if bmi < upper:
            return band
    return BMIClass.obese
