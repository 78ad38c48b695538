"""Visualization layer: themes and matplotlib renderers."""

from stochastic_sir.viz.render import (
    render_ensemble,
    render_sir_curves,
    render_waiting_time_histogram,
)
from stochastic_sir.viz.theme import (
    DEFAULT_THEME,
    PAPER_THEME,
    REGISTERED_THEMES,
    Theme,
    get_theme,
)

__all__ = [
    "DEFAULT_THEME",
    "PAPER_THEME",
    "REGISTERED_THEMES",
    "Theme",
    "get_theme",
    "render_ensemble",
    "render_sir_curves",
    "render_waiting_time_histogram",
]
