"""Condition label to background gradient mapping."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Gradient:
    """Two-color top-to-bottom background."""

    top: str
    bottom: str

    def css(self) -> str:
        return f"linear-gradient(to bottom, {self.top}, {self.bottom})"


DEFAULT_GRADIENT = Gradient("#a1c4fd", "#c2e9fb")

_MIST = Gradient("#bdc3c7", "#2c3e50")

THEMES: dict[str, Gradient] = {
    "clear": Gradient("#fceabb", "#f8b500"),
    "clouds": Gradient("#d7d2cc", "#304352"),
    "rain": Gradient("#314755", "#26a0da"),
    "snow": Gradient("#e6dada", "#274046"),
    "thunderstorm": Gradient("#373B44", "#4286f4"),
    "drizzle": Gradient("#89f7fe", "#66a6ff"),
    "mist": _MIST,
    "fog": _MIST,
}


def theme_for(condition: str | None) -> Gradient:
    """Return the gradient for a condition label; unknown labels get the default."""
    if not condition:
        return DEFAULT_GRADIENT
    return THEMES.get(condition.strip().lower(), DEFAULT_GRADIENT)
