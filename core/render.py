"""
Turn a RecommendationBundle into something a page (or a terminal) can show.
"""

from __future__ import annotations

from typing import Any, List

from core.models.profile import RecommendationBundle

DISCLAIMER = (
    "These are general suggestions. For medical conditions or allergies, "
    "consult a healthcare professional."
)

_HTML_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#39;"),
)


def escape_html(value: Any) -> str:
    if value is None or value == "":
        return ""
    out = str(value)
    for raw, entity in _HTML_ESCAPES:  # "&" must go first
        out = out.replace(raw, entity)
    return out


def _tip_list(tips: List[str], empty_label: str) -> str:
    if not tips:
        return f'<p class="muted">No {empty_label} suggestions available.</p>'
    items = "".join(f"<li>{escape_html(t)}</li>" for t in tips)
    return f"<ul>{items}</ul>"


def render_html(bundle: RecommendationBundle) -> str:
    return (
        f"<h3>{escape_html(bundle.greeting)}</h3>\n"
        f'<p class="muted" style="margin-top:6px">{escape_html(bundle.bmi_text)}</p>\n'
        '<div class="reco">\n'
        '  <div class="section">\n'
        "    <strong>Diet suggestions</strong>\n"
        f"    {_tip_list(bundle.diet, 'diet')}\n"
        "  </div>\n"
        '  <div class="section">\n'
        "    <strong>Daily health habits</strong>\n"
        f"    {_tip_list(bundle.habits, 'habit')}\n"
        "  </div>\n"
        '  <div style="margin-top:10px; font-size:13px; color:var(--muted)">\n'
        f"    <em>Note:</em> {DISCLAIMER}\n"
        "  </div>\n"
        "</div>\n"
    )


def render_text(bundle: RecommendationBundle) -> str:
    lines = [bundle.greeting, bundle.bmi_text, "", "Diet suggestions:"]
    lines += [f"  - {t}" for t in bundle.diet] or ["  (none)"]
    lines += ["", "Daily health habits:"]
    lines += [f"  - {t}" for t in bundle.habits] or ["  (none)"]
    lines += ["", f"Note: {DISCLAIMER}"]
    return "\n".join(lines)
