"""Symbolic icon lookup for dock items and window title bars."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Icon:
    name: str
    glyph: str


FALLBACK_ICON = Icon("AppWindow", "[ ]")

ICONS: dict[str, Icon] = {
    "Calculator": Icon("Calculator", "[+]"),
    "Grid": Icon("Grid", "[#]"),
    "Orbit": Icon("Orbit", "[o]"),
}


def resolve_icon(name: str | None) -> Icon:
    """Return the icon for a symbolic name, or the generic app icon."""
    if name is None:
        return FALLBACK_ICON
    return ICONS.get(name, FALLBACK_ICON)
