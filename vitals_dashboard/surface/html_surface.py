"""
Standalone HTML rendering of the dashboard.

HtmlSurface keeps whatever the renderers wrote into its slots and turns it
into a single HTML page. The chart is embedded with Plotly loaded from the
CDN, the same way the health graph page is produced.
"""
import html
import logging
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

import plotly.graph_objects as go
import plotly.io as pio

from vitals_dashboard.surface.base import (
    DIAGNOSIS_LIST,
    PATIENT_AVATAR,
    PATIENT_AGE,
    PATIENT_BLOOD_TYPE,
    PATIENT_DOB,
    PATIENT_EMERGENCY,
    PATIENT_GENDER,
    PATIENT_INSURANCE,
    PATIENT_NAME,
    PATIENT_PHONE,
    VITALS_LIST,
    DisplaySurface,
    ListItem,
)

logger = logging.getLogger(__name__)

CHART_DIV_ID = "bp-chart"

# Label shown next to each profile slot
PROFILE_LABELS = (
    (PATIENT_GENDER, "Gender"),
    (PATIENT_AGE, "Age"),
    (PATIENT_DOB, "Date of Birth"),
    (PATIENT_PHONE, "Contact Info"),
    (PATIENT_EMERGENCY, "Emergency Contact"),
    (PATIENT_INSURANCE, "Insurance Provider"),
    (PATIENT_BLOOD_TYPE, "Blood Type"),
)

PAGE_CSS = """
    * { box-sizing: border-box; }
    body {
        margin: 0;
        padding: 16px;
        background: #0F1419;
        color: #E6E6E6;
        font-family: -apple-system, system-ui, BlinkMacSystemFont, "Segoe UI", Roboto, sans-serif;
        -webkit-font-smoothing: antialiased;
    }
    .grid { display: grid; grid-template-columns: 320px 1fr; gap: 16px; }
    .card { background: #1A2027; border-radius: 10px; padding: 16px; }
    .avatar {
        width: 120px; height: 120px; border-radius: 50%;
        display: block; object-fit: cover;
        background-color: #2A323B; margin: 0 auto 12px;
    }
    h1 { text-align: center; font-size: 20px; margin: 0 0 12px; }
    h2 { font-size: 16px; margin: 0 0 8px; color: #9E9E9E; }
    dl { margin: 0; }
    dt { font-size: 12px; color: #9E9E9E; }
    dd { margin: 0 0 8px; }
    ul, ol { margin: 0; padding-left: 20px; }
    .label { color: #9E9E9E; margin-right: 8px; }
    .value { font-weight: 600; }
    #bp-chart { height: 360px; }
    .notice { background: #4A1D1D; border-radius: 10px; padding: 16px; }
"""


class HtmlSurface(DisplaySurface):
    """DisplaySurface that renders to one HTML document."""

    def __init__(self) -> None:
        self._texts: Dict[str, str] = {}
        self._images: Dict[str, str] = {}
        self._items: Dict[str, List[ListItem]] = {}
        self._figure: Optional[go.Figure] = None

    def set_text(self, slot: str, text: str) -> None:
        self._texts[slot] = text

    def set_image(self, slot: str, url: str) -> None:
        self._images[slot] = url

    def set_items(self, region: str, items: Sequence[ListItem]) -> None:
        self._items[region] = list(items)

    def draw_chart(self, figure: go.Figure) -> None:
        self._figure = figure

    # -------------------------------------------------------------------------
    # Page rendering
    # -------------------------------------------------------------------------

    def render_html(self, title: str = "Patient Dashboard") -> str:
        """Render everything written so far as a complete HTML page."""
        body = (
            "<div class=\"grid\">"
            f"<section class=\"card\">{self._render_profile()}</section>"
            "<section>"
            f"<div class=\"card\"><h2>Blood Pressure</h2>{self._render_chart()}</div>"
            f"<div class=\"card\"><h2>Latest Vitals</h2>{self._render_list(VITALS_LIST, 'ul')}</div>"
            f"<div class=\"card\"><h2>Diagnosis History</h2>{self._render_list(DIAGNOSIS_LIST, 'ol')}</div>"
            "</section>"
            "</div>"
        )
        return _page(title, body)

    def write(self, path: Union[str, Path], title: str = "Patient Dashboard") -> Path:
        """Write the rendered page to path and return it."""
        output_path = Path(path)
        output_path.write_text(self.render_html(title), encoding="utf-8")
        logger.info("Dashboard written", extra={"path": str(output_path)})
        return output_path

    def _render_profile(self) -> str:
        parts = []
        avatar = self._images.get(PATIENT_AVATAR)
        if avatar:
            parts.append(
                f"<img class=\"avatar\" id=\"{PATIENT_AVATAR}\" src=\"{html.escape(avatar, quote=True)}\" alt=\"\">"
            )
        else:
            parts.append("<div class=\"avatar\"></div>")

        parts.append(f"<h1 id=\"{PATIENT_NAME}\">{html.escape(self._texts.get(PATIENT_NAME, ''))}</h1>")
        parts.append("<dl>")
        for slot, label in PROFILE_LABELS:
            parts.append(
                f"<dt>{label}</dt><dd id=\"{slot}\">{html.escape(self._texts.get(slot, ''))}</dd>"
            )
        parts.append("</dl>")
        return "".join(parts)

    def _render_list(self, region: str, tag: str) -> str:
        rendered = []
        for item in self._items.get(region, []):
            if isinstance(item, tuple):
                label, value = item
                rendered.append(
                    f"<li><span class=\"label\">{html.escape(label)}</span>"
                    f"<span class=\"value\">{html.escape(value)}</span></li>"
                )
            else:
                rendered.append(f"<li>{html.escape(item)}</li>")
        return f"<{tag} id=\"{region}\">{''.join(rendered)}</{tag}>"

    def _render_chart(self) -> str:
        if self._figure is None:
            return f"<div id=\"{CHART_DIV_ID}\"></div>"
        return pio.to_html(
            self._figure,
            include_plotlyjs="cdn",
            full_html=False,
            div_id=CHART_DIV_ID,
            config={"displaylogo": False, "responsive": True},
        )


def render_failure_page(message: str, title: str = "Patient Dashboard") -> str:
    """Page shown instead of the dashboard when a load fails."""
    return _page(title, f"<div class=\"notice\" role=\"alert\">{html.escape(message)}</div>")


def _page(title: str, body: str) -> str:
    return (
        "<!DOCTYPE html>"
        "<html lang=\"en\"><head><meta charset=\"utf-8\">"
        "<meta name=\"viewport\" content=\"width=device-width, initial-scale=1\">"
        f"<title>{html.escape(title)}</title>"
        f"<style>{PAGE_CSS}</style>"
        f"</head><body>{body}</body></html>"
    )
