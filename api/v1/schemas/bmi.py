from __future__ import annotations

from pydantic import BaseModel

from core.models.profile import BMIClass


class BMIOut(BaseModel):
    bmi: float | None
    bmi_class: BMIClass
