from core.models.profile import RecommendationBundle, UserProfile
from core.recommender import assess
from core.render import escape_html, render_html, render_text


def test_escape_html():
    assert escape_html("<b>Tom & 'Jerry'</b>") == "&lt;b&gt;Tom &amp; &#39;Jerry&#39;&lt;/b&gt;"
    assert escape_html('"') == "&quot;"
    assert escape_html(None) == ""
    assert escape_html(0) == "0"


def test_render_escapes_name():
    html = render_html(assess(UserProfile(name="<script>x</script>")))
    assert "<script>" not in html
    assert "Hi &lt;script&gt;x&lt;/script&gt;!" in html


def test_render_empty_lists():
    html = render_html(RecommendationBundle(greeting="Hello!", bmi_text="BMI data incomplete."))
    assert "No diet suggestions available." in html
    assert "No habit suggestions available." in html


def test_render_lists_every_tip():
    rec = assess(UserProfile(weight_kg=70, height_cm=175, goal="maintain"))
    html = render_html(rec)
    assert html.count("<li>") == len(rec.diet) + len(rec.habits)
    text = render_text(rec)
    assert text.splitlines()[:2] == ["Hello!", "Your BMI is 22.9 (normal)."]
