"""
scripts/check.py
────────────────────────────────────────────────────────────────────────
Run one health check from the terminal:

    python -m scripts.check --weight 70 --height 175 --goal lose --diet vegan
    python -m scripts.check --weight 70 --height 175 --html > result.html
"""
from __future__ import annotations

from argparse import ArgumentParser
from typing import Sequence

from pydantic import ValidationError

from core.models.profile import ActivityLevel, DietPref, Gender, Goal, UserProfile
from core.recommender import assess
from core.render import render_html, render_text
from services.logger import configure_logging


def _parser() -> ArgumentParser:
    ap = ArgumentParser(description="BMI + diet/habit suggestions")
    ap.add_argument("--name")
    ap.add_argument("--age", type=int)
    ap.add_argument("--gender", choices=[g.value for g in Gender])
    ap.add_argument("--weight", type=float, help="kg")
    ap.add_argument("--height", type=float, help="cm")
    ap.add_argument("--activity", choices=[a.value for a in ActivityLevel])
    ap.add_argument("--diet", choices=[d.value for d in DietPref])
    ap.add_argument("--goal", choices=[g.value for g in Goal])
    ap.add_argument("--html", action="store_true", help="emit an HTML fragment")
    ap.add_argument("--log-level", default=None)
    return ap


def main(argv: Sequence[str] | None = None) -> str:
    ap = _parser()
    args = ap.parse_args(argv)
    configure_logging(args.log_level)

    try:
        profile = UserProfile(
            name=args.name,
            age=args.age,
            gender=args.gender,
            weight_kg=args.weight,
            height_cm=args.height,
            activity=args.activity,
            diet_pref=args.diet,
            goal=args.goal,
        )
    except ValidationError as exc:
        bad = ", ".join(f"{e['loc'][0]}: {e['msg']}" for e in exc.errors())
        ap.error(bad)

    bundle = assess(profile)
    out = render_html(bundle) if args.html else render_text(bundle)
    print(out)
    return out


if __name__ == "__main__":
    main()
