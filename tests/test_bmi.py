# tests/test_bmi.py
from __future__ import annotations

import math
import pytest

from core.bmi import classify_bmi, compute_bmi
from core.models.profile import BMIClass


# ── compute_bmi ───────────────────────────────────────────────────────
def test_bmi_70kg_175cm():
    assert compute_bmi(70, 175) == 22.9


@pytest.mark.parametrize("w, h", [(50, 160), (95.5, 182), (120, 170), (45, 150.5)])
def test_bmi_matches_formula(w, h):
    expected = w / (h / 100) ** 2
    assert math.isclose(compute_bmi(w, h), expected, abs_tol=0.05)


def test_bmi_rounds_half_away_from_zero():
    # 22.25 is exact in binary; round() would give 22.2
    assert compute_bmi(22.25, 100) == 22.3


@pytest.mark.parametrize("w, h", [(0, 175), (70, 0), (None, 175), (70, None), (None, None)])
def test_missing_inputs_give_none(w, h):
    assert compute_bmi(w, h) is None


def test_negative_inputs_give_none():
    assert compute_bmi(-70, 175) is None
    assert compute_bmi(70, -175) is None


# ── classify_bmi ──────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "bmi, band",
    [
        (None, BMIClass.unknown),
        (18.4, BMIClass.underweight),
        (18.5, BMIClass.normal),
        (24.9, BMIClass.normal),
        (25.0, BMIClass.overweight),
        (29.9, BMIClass.overweight),
        (30.0, BMIClass.obese),
        (45.2, BMIClass.obese),
    ],
)
def test_classify_thresholds(bmi, band):
    assert classify_bmi(bmi) is band


def test_classify_computed_value():
    assert classify_bmi(compute_bmi(70, 175)) is BMIClass.normal


# ── extreme magnitudes never raise ────────────────────────────────────
@pytest.mark.parametrize(
    "w, h",
    [
        (70, 1e-200),             # height² underflows to 0.0
        (1e308, 1e-10),           # ratio overflows to inf
        (float("inf"), 175),
        (float("nan"), 175),
        (70, float("nan")),
    ],
)
def test_non_finite_ratio_gives_none(w, h):
    assert compute_bmi(w, h) is None


def test_huge_finite_ratio_is_rounded():
    bmi = compute_bmi(1e300, 100)
    assert bmi == 1e300
    assert classify_bmi(bmi) is BMIClass.obese


def test_infinite_height_gives_zero():
    assert compute_bmi(70, float("inf")) == 0.0
