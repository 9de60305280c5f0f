from __future__ import annotations
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Gender(str, Enum):
    male = "male"
    female = "female"
    other = "other"


class ActivityLevel(str, Enum):
    sedentary = "sedentary"
    light = "light"
    moderate = "moderate"
    active = "active"


class DietPref(str, Enum):
    none = "none"
    vegetarian = "vegetarian"
    vegan = "vegan"
    lowcarb = "lowcarb"
    keto = "keto"
    other = "other"


class Goal(str, Enum):
    lose = "lose"
    gain = "gain"
    maintain = "maintain"
    other = "other"


class BMIClass(str, Enum):
    underweight = "underweight"
    normal = "normal"
    overweight = "overweight"
    obese = "obese"
    unknown = "unknown"


class UserProfile(BaseModel):
    """What the health-check form submits. Every field may be left blank."""

    name: str | None = None
    age: int | None = Field(None, ge=0)
    gender: Gender | None = None
    weight_kg: float | None = Field(None, ge=0, allow_inf_nan=False)
    height_cm: float | None = Field(None, ge=0, allow_inf_nan=False)
    activity: ActivityLevel | None = None
    diet_pref: DietPref | None = None
    goal: Goal | None = None

    model_config = ConfigDict(frozen=True)

    @field_validator("*", mode="before")
    @classmethod
    def _blank_is_missing(cls, v):
        # empty <input>/<select> values arrive as ""
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v


class RecommendationBundle(BaseModel):
    greeting: str
    bmi_text: str
    bmi: float | None = None
    bmi_class: BMIClass = BMIClass.unknown
    diet: list[str] = []
    habits: list[str] = []
