# Render module - banner layout and storage
from .banner import banner_parts, render, render_json, render_svg, render_text
from .colors import BannerPalette, ColorScale, DEFAULT_PALETTE
from .output import write_banner

__all__ = [
    "banner_parts",
    "render",
    "render_json",
    "render_svg",
    "render_text",
    "BannerPalette",
    "ColorScale",
    "DEFAULT_PALETTE",
    "write_banner",
]
