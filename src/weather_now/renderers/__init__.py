"""Pure rendering functions: structured data -> display strings.

Renderers take schemas (``WeatherResponse``, ``ScreenState``) and return
strings. No side effects, no I/O beyond loading templates.

Public API:
  - weather_utils: code_to_icon, icon_style, format_temperature
  - card: build_weather_card_html
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

# Shared Jinja2 environment for all renderers
_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
_jinja_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=True,
)


def render_template(template_name: str, **kwargs: Any) -> str:
    """Render a Jinja2 template by name."""
    return _jinja_env.get_template(template_name).render(**kwargs)
