"""Colour and label themes for rendered figures."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Theme:
    """Named palette for compartment curves and histograms."""

    name: str
    state_colors: dict[str, str] = field(
        default_factory=lambda: {
            "susceptible": "#4C72B0",
            "infectious": "#C44E52",
            "recovered": "#55A868",
        }
    )
    state_labels: dict[str, str] = field(
        default_factory=lambda: {
            "susceptible": "Susceptible",
            "infectious": "Infectious",
            "recovered": "Recovered",
        }
    )
    expected_color: str = "#222222"
    histogram_color: str = "#8172B2"
    dpi: int = 150


DEFAULT_THEME = Theme(name="default")
PAPER_THEME = Theme(
    name="paper",
    state_colors={"susceptible": "#1f77b4", "infectious": "#d62728", "recovered": "#2ca02c"},
    expected_color="black",
    histogram_color="#7f7f7f",
    dpi=300,
)

REGISTERED_THEMES: dict[str, Theme] = {t.name: t for t in (DEFAULT_THEME, PAPER_THEME)}


def get_theme(name: str) -> Theme:
    """Look up a registered theme by name."""
    try:
        return REGISTERED_THEMES[name]
    except KeyError as exc:
        valid = ", ".join(sorted(REGISTERED_THEMES))
        raise ValueError(f"theme must be one of {valid}") from exc
