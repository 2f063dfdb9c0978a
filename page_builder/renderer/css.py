"""
Générateur CSS — variables (couleur d'accent du membre) + SCSS compilé (libsass).

Pipeline :
  generate_css_variables(accent)  →  :root { --accent: ...; --accent-rgb: ... }
  get_compiled_scss()             →  reset + blocs + lightbox (compilé une fois)
  generate_page_css(accent)       →  variables + SCSS
"""
import re
from typing import Optional
from pathlib import Path

_SCSS_CACHE: dict = {}
_SCSS_DIR = Path(__file__).parent.parent / "scss"
_HEX_RE = re.compile(r"^#?([a-f\d]{2})([a-f\d]{2})([a-f\d]{2})$", re.IGNORECASE)


def get_compiled_scss() -> str:
    """Compile main.scss une seule fois, met en cache (libsass requis)."""
    if "main" not in _SCSS_CACHE:
        import sass
        _SCSS_CACHE["main"] = sass.compile(
            filename=str(_SCSS_DIR / "main.scss"),
            output_style="compressed",
        )
    return _SCSS_CACHE["main"]


def hex_to_rgb(hex_color: str) -> Optional[str]:
    """#RRGGBB → "R, G, B" ; None si la couleur n'est pas un hex 6 chiffres."""
    m = _HEX_RE.match(hex_color or "")
    if not m:
        return None
    return ", ".join(str(int(part, 16)) for part in m.groups())


def generate_css_variables(accent_color: str) -> str:
    rgb = hex_to_rgb(accent_color) or "99, 102, 241"
    return f""":root {{
  --accent:     {accent_color};
  --accent-rgb: {rgb};
}}"""


def generate_page_css(accent_color: str = "#6366F1") -> str:
    return generate_css_variables(accent_color) + "\n\n" + get_compiled_scss()


def invalidate_scss_cache():
    """Force la recompilation SCSS (dev only)."""
    _SCSS_CACHE.clear()
