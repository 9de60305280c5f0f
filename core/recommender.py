"""
core/recommender.py
────────────────────────────────────────────────────────────────────────
Rule-table recommender.

Responsibilities
----------------
1.   `recommendations()` – greeting, BMI summary, diet tips and habit
     tips for an already-classified profile.
2.   `assess()` – convenience wrapper: compute BMI → classify → recommend.

Tips are selected from the lookup tables below; each table has a
default entry so every combination of inputs (including blanks) yields
a complete bundle.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Tuple

from core.bmi import classify_bmi, compute_bmi
from core.models.profile import (
    ActivityLevel,
    BMIClass,
    DietPref,
    Goal,
    RecommendationBundle,
    UserProfile,
)

_LOG = logging.getLogger(__name__)

_DEFAULT = None

# ──────────────────────────── diet: goal ────────────────────────── #
_LOSE_DEFICIT = (
    "Aim for a moderate calorie deficit: reduce portion sizes and pick whole foods."
)

# (goal) -> tips; "lose" is completed by _LOSE_BY_DIET below
GOAL_DIET_TIPS: Dict[Goal | None, Tuple[str, ...]] = {
    Goal.lose: (_LOSE_DEFICIT,),
    Goal.gain: (
        "Increase calorie intake with nutrient-dense meals; add protein-rich snacks.",
        "Combine with strength training and progressive overload.",
    ),
    Goal.maintain: (
        "Balance meals: vegetables, a protein source, whole grains, and healthy fats.",
    ),
    _DEFAULT: (
        "Focus on small sustainable shifts: more veg, less processed food, consistent meals.",
    ),
}

_PLANT_BASED = "Lean on legumes, tofu/tempeh, whole grains, and ample vegetables."
_LOW_CARB = (
    "Prioritise proteins, non-starchy vegetables, and healthy fats; track portions."
)
_LEAN_PROTEIN = "Lean proteins (chicken, fish), whole grains, and lots of vegetables."

LOSE_DIET_TIPS: Dict[DietPref | None, str] = {
    DietPref.vegetarian: _PLANT_BASED,
    DietPref.vegan: _PLANT_BASED,
    DietPref.lowcarb: _LOW_CARB,
    DietPref.keto: _LOW_CARB,
    _DEFAULT: _LEAN_PROTEIN,
}

# ──────────────────────────── BMI band ──────────────────────────── #
BMI_DIET_TIPS: Dict[BMIClass, Tuple[str, ...]] = {
    BMIClass.underweight: (
        "Include calorie-dense healthy snacks: nut butter, full-fat yogurt, smoothies with oats.",
    ),
}

BMI_HABIT_TIPS: Dict[BMIClass, Tuple[str, ...]] = {
    BMIClass.underweight: ("Discuss with a clinician if weight is unintended.",),
    BMIClass.normal: ("Maintain balanced meals and varied activity. Good job!",),
    BMIClass.overweight: (
        "Aim for gradual weight loss (0.25–0.5 kg/week) with small sustainable changes.",
        "Limit sugar-sweetened beverages and highly processed snacks.",
    ),
}
BMI_HABIT_TIPS[BMIClass.obese] = BMI_HABIT_TIPS[BMIClass.overweight]

# ──────────────────────────── activity ──────────────────────────── #
ACTIVITY_HABIT_TIPS: Dict[ActivityLevel | None, str] = {
    ActivityLevel.sedentary: (
        "Increase daily movement: short walks, standing breaks, and 2–3 light workouts weekly."
    ),
    ActivityLevel.light: (
        "Build to consistent moderate activity: target 150 min/week of moderate exercise."
    ),
    _DEFAULT: "Keep varying your routine; include strength work and recovery days.",
}

GENERAL_HABITS: Tuple[str, ...] = (
    "Stay hydrated across the day.",
    "Prioritise 7–9 hours of sleep and short stress breaks.",
    "Schedule regular checkups and consult a registered dietitian or doctor for personalised needs.",
)


def _lookup(table: dict, key):
    return table.get(key, table[_DEFAULT])


# ───────────────────────────── public ───────────────────────────── #
def diet_tips(goal: Goal | None, diet_pref: DietPref | None, bmi_class: BMIClass) -> List[str]:
    tips = list(_lookup(GOAL_DIET_TIPS, goal))
    if goal is Goal.lose:
        tips.append(_lookup(LOSE_DIET_TIPS, diet_pref))
    tips.extend(BMI_DIET_TIPS.get(bmi_class, ()))
    return tips


def habit_tips(bmi_class: BMIClass, activity: ActivityLevel | None) -> List[str]:
    tips = list(BMI_HABIT_TIPS.get(bmi_class, ()))
    tips.append(_lookup(ACTIVITY_HABIT_TIPS, activity))
    tips.extend(GENERAL_HABITS)
    return tips


def recommendations(
    profile: UserProfile,
    bmi: float | None,
    bmi_class: BMIClass,
) -> RecommendationBundle:
    """Build the bundle for a profile whose BMI has already been computed."""
    greeting = f"Hi {profile.name}!" if profile.name else "Hello!"
    if not bmi:  # None, or a value that rounds to 0.0
        bmi_text = "BMI data incomplete."
    else:
        bmi_text = f"Your BMI is {bmi} ({bmi_class.value})."

    return RecommendationBundle(
        greeting=greeting,
        bmi_text=bmi_text,
        bmi=bmi,
        bmi_class=bmi_class,
        diet=diet_tips(profile.goal, profile.diet_pref, bmi_class),
        habits=habit_tips(bmi_class, profile.activity),
    )


def assess(profile: UserProfile) -> RecommendationBundle:
    bmi = compute_bmi(profile.weight_kg, profile.height_cm)
    bmi_class = classify_bmi(bmi)
    _LOG.debug("assessed profile → bmi=%s class=%s", bmi, bmi_class.value)
    return recommendations(profile, bmi, bmi_class)
