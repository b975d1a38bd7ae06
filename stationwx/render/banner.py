# stationwx/render/banner.py
"""
Banner rendering for an Advisory.

The advisory already carries converted, rounded values; this module only
chooses colors and lays the parts out as plain text, SVG or JSON.

Part order:
    station + times | clouds | temperature | wind | flight category
    | altimeter | runway preference (when configured)
"""

import json
from dataclasses import asdict
from enum import Enum
from typing import Any, Dict, List
from xml.sax.saxutils import escape

from ..engine.models import Advisory
from .colors import BannerPalette, DEFAULT_PALETTE

SEPARATOR = " • "

SVG_WIDTH = 1200
SVG_HEIGHT = 80
SVG_FONT = "system-ui, -apple-system, Segoe UI, Roboto, Arial, sans-serif"


def _time_part(advisory: Advisory) -> str:
    return f"{advisory.station} • {advisory.zulu_time} / {advisory.local_time} {advisory.local_tz_label}"


def _category_detail(advisory: Advisory) -> str:
    return f"(ceil {advisory.ceiling_text}, vis {advisory.visibility_text})"


def banner_parts(advisory: Advisory) -> List[str]:
    """Plain-text banner parts in display order."""
    parts = [
        _time_part(advisory),
        advisory.cloud_summary,
        advisory.temperature_text,
        f"Wind {advisory.wind_text}",
        f"{advisory.flight_category.value} {_category_detail(advisory)}",
        f"Altimeter {advisory.altimeter_text}",
    ]
    if advisory.runway is not None:
        parts.append(advisory.runway.text)
    return parts


def render_text(advisory: Advisory) -> str:
    """One-line text banner."""
    return SEPARATOR.join(banner_parts(advisory))


def _tspan(text: str, fill: str = None, bold: bool = False, opacity: float = None) -> str:
    attrs = []
    if fill:
        attrs.append(f'fill="{fill}"')
    if bold:
        attrs.append('font-weight="700"')
    if opacity is not None:
        attrs.append(f'opacity="{opacity}"')
    return f"<tspan {' '.join(attrs)}>{text}</tspan>"


def _svg_runway(advisory: Advisory, palette: BannerPalette) -> str:
    runway = advisory.runway
    if runway.calm:
        return _tspan(escape(runway.text), fill=palette.calm, bold=True)

    title = _tspan(
        f"Preferred: RWY {escape(runway.designator)}",
        fill=palette.crosswind.color_for(runway.crosswind_kt),
        bold=True,
    )
    if runway.tailwind_kt:
        along = _tspan(f"TW {runway.tailwind_kt} kt", fill=palette.tailwind.color_for(runway.tailwind_kt))
    else:
        along = f"HW {runway.headwind_kt} kt"
    detail = _tspan(f"({along}, XW {runway.crosswind_kt} kt)", opacity=0.85)
    return f"{title} {detail}"


def svg_parts(advisory: Advisory, palette: BannerPalette = DEFAULT_PALETTE) -> List[str]:
    """Colored SVG <tspan> markup for each banner part."""
    category = (
        _tspan(advisory.flight_category.value, fill=advisory.flight_category_color, bold=True)
        + " "
        + _tspan(escape(_category_detail(advisory)), opacity=0.85)
    )
    parts = [
        escape(_time_part(advisory)),
        _tspan(escape(advisory.cloud_summary), fill=palette.clouds),
        _tspan(escape(advisory.temperature_text), fill=palette.temperature.color_for(advisory.temperature_f)),
        _tspan(escape(f"Wind {advisory.wind_text}"), fill=palette.wind.color_for(advisory.wind_speed_kt)),
        category,
        escape(f"Altimeter {advisory.altimeter_text}"),
    ]
    if advisory.runway is not None:
        parts.append(_svg_runway(advisory, palette))
    return parts


def render_svg(advisory: Advisory, palette: BannerPalette = DEFAULT_PALETTE) -> str:
    """
    Single-line SVG banner.

    Args:
        advisory: Advisory to render
        palette: Color presets

    Returns:
        SVG document as a string
    """
    body = SEPARATOR.join(svg_parts(advisory, palette))
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{SVG_WIDTH}" height="{SVG_HEIGHT}" '
        f'viewBox="0 0 {SVG_WIDTH} 60">\n'
        f'  <rect x="0" y="0" width="{SVG_WIDTH}" height="{SVG_HEIGHT}" fill="{palette.background}"/>\n'
        f'  <g font-family="{SVG_FONT}" font-size="24" font-weight="600">\n'
        f'    <text x="12" y="38" fill="{palette.text}">\n'
        f'      {body}\n'
        f'    </text>\n'
        f'  </g>\n'
        f'</svg>'
    )


def advisory_to_dict(advisory: Advisory) -> Dict[str, Any]:
    """JSON-ready dict of the advisory."""
    data = asdict(advisory)
    for key, value in data.items():
        if isinstance(value, Enum):
            data[key] = value.value
    data["banner"] = render_text(advisory)
    return data


def render_json(advisory: Advisory) -> str:
    return json.dumps(advisory_to_dict(advisory), default=str, ensure_ascii=False, indent=2)


RENDERERS = {
    "text": render_text,
    "svg": render_svg,
    "json": render_json,
}


def render(advisory: Advisory, output_format: str) -> str:
    """
    Render in the named format.

    Raises:
        ValueError: If the format is unknown
    """
    try:
        renderer = RENDERERS[output_format]
    except KeyError:
        raise ValueError(f"Unknown output format: {output_format!r}")
    return renderer(advisory)
