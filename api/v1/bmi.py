# api/v1/bmi.py
from __future__ import annotations

from fastapi import APIRouter, Query, status

from core.bmi import classify_bmi, compute_bmi
from api.v1.schemas import BMIOut

router = APIRouter()


@router.get(
    "",
    response_model=BMIOut,
    status_code=status.HTTP_200_OK,
    summary="BMI value and band for a weight/height pair",
)
def bmi(
    weight_kg: float | None = Query(None, ge=0, allow_inf_nan=False),
    height_cm: float | None = Query(None, ge=0, allow_inf_nan=False),
) -> BMIOut:
    """
    Missing or zero inputs are not an error: the response is
    `{"bmi": null, "bmi_class": "unknown"}`.
    """
    value = compute_bmi(weight_kg, height_cm)
    return BMIOut(bmi=value, bmi_class=classify_bmi(value))
