"""
Tests for HtmlSurface page rendering.
"""
from vitals_dashboard.services.graph import ChartRenderer
from vitals_dashboard.services.history_analyzer import most_recent
from vitals_dashboard.services.view_renderer import ViewRenderer
from vitals_dashboard.surface import HtmlSurface, render_failure_page
from vitals_dashboard.surface import base as slots


def render_jessica(jessica) -> HtmlSurface:
    surface = HtmlSurface()
    view = ViewRenderer(surface)
    view.render_profile(jessica)
    view.render_vitals(most_recent(jessica.diagnosis_history))
    view.render_diagnosis_list(jessica.diagnosis_history)
    ChartRenderer().render(surface, jessica.diagnosis_history)
    return surface


def test_render_html_contains_all_regions(jessica):
    page = render_jessica(jessica).render_html(title="Jessica Taylor - Patient Dashboard")

    assert page.startswith("<!DOCTYPE html>")
    assert "<title>Jessica Taylor - Patient Dashboard</title>" in page
    assert f"id=\"{slots.PATIENT_AGE}\">28 years<" in page
    assert "https://fedskillstest.ct.digital/4.png" in page
    assert "160/78 mmHg" in page
    assert "March 2024 — BP 160/78 mmHg, HR 78 bpm" in page
    assert "id=\"bp-chart\"" in page
    assert "cdn.plot.ly" in page


def test_render_html_escapes_text():
    surface = HtmlSurface()
    surface.set_text(slots.PATIENT_NAME, "<script>alert(1)</script>")
    surface.set_items(slots.DIAGNOSIS_LIST, ["a & b"])

    page = surface.render_html()

    assert "<script>alert(1)</script>" not in page
    assert "&lt;script&gt;" in page
    assert "a &amp; b" in page


def test_render_html_idempotent(jessica):
    surface = render_jessica(jessica)

    assert surface.render_html() == surface.render_html()


def test_set_items_replaces_region():
    surface = HtmlSurface()
    surface.set_items(slots.VITALS_LIST, [("Heart Rate", "70 bpm")])
    surface.set_items(slots.VITALS_LIST, ["No vitals available."])

    page = surface.render_html()

    assert "70 bpm" not in page
    assert "No vitals available." in page


def test_render_html_without_chart():
    page = HtmlSurface().render_html()

    assert "<div id=\"bp-chart\"></div>" in page


def test_write_creates_file(tmp_path, jessica):
    output = tmp_path / "dashboard.html"

    path = render_jessica(jessica).write(output)

    assert path == output
    assert "Jessica Taylor" in output.read_text(encoding="utf-8")


def test_render_failure_page():
    page = render_failure_page("Failed to load patient data. See logs for details.")

    assert "role=\"alert\"" in page
    assert "Failed to load patient data." in page


def test_avatar_rendered_as_escaped_img():
    surface = HtmlSurface()
    surface.set_image(slots.PATIENT_AVATAR, "https://example.test/a.png\" onerror=\"alert(1)')")

    page = surface.render_html()

    assert f"<img class=\"avatar\" id=\"{slots.PATIENT_AVATAR}\" src=\"https://example.test/a.png&quot; onerror=&quot;alert(1)&#x27;)\"" in page
    assert "background-image" not in page
    assert "onerror=\"" not in page


def test_missing_avatar_renders_placeholder_circle():
    page = HtmlSurface().render_html()

    assert "<div class=\"avatar\"></div>" in page
    assert "<img" not in page
