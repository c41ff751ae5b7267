"""HTML card for a single weather screen snapshot."""

from __future__ import annotations

from weather_now.renderers import render_template
from weather_now.renderers.weather_utils import icon_style
from weather_now.schemas import IconId, ScreenState, ScreenStatus


def build_weather_card_html(state: ScreenState) -> str:
    """Build the weather card HTML fragment.

    Args:
        state: Screen snapshot from ``WeatherScreen``.

    Returns:
        Rendered HTML string. Error states render the message in place of
        the temperature.
    """
    style = icon_style(state.icon or IconId.UNKNOWN)
    return render_template(
        "weather_card.html.j2",
        state=state,
        is_error=state.status is ScreenStatus.ERROR,
        icon=(state.icon or IconId.UNKNOWN).value,
        symbol=style.symbol,
        palette=" ".join(style.palette),
    )
