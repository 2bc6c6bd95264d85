"""Color palettes for the environment browser.

Themes are immutable ANSI palettes handed to the renderer; nothing reads
colors from module globals at draw time.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the pane drawers."""

    name: str
    reset: str
    title: str
    footer: str
    panel_title: str
    panel_body: str
    list_item: str
    list_highlight: str
    detail_text: str
    placeholder: str


# Tailwind slate/blue palette.
DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    title="\033[1m",
    footer="",
    panel_title="\033[38;2;241;245;249;48;2;30;64;175m",
    panel_body="\033[48;2;2;6;23m",
    list_item="\033[38;2;226;232;240;48;2;2;6;23m",
    list_highlight="\033[1;38;2;241;245;249;48;2;30;41;59m",
    detail_text="\033[38;2;226;232;240;48;2;2;6;23m",
    placeholder="\033[2;38;2;226;232;240;48;2;2;6;23m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    title="\033[1;38;5;45m",
    footer="\033[2;38;5;110m",
    panel_title="\033[1;38;5;153;48;5;24m",
    panel_body="\033[48;5;17m",
    list_item="\033[38;5;252;48;5;17m",
    list_highlight="\033[1;38;5;231;48;5;31m",
    detail_text="\033[38;5;153;48;5;17m",
    placeholder="\033[2;38;5;110;48;5;17m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="\033[0m",
    title="\033[1m",
    footer="",
    panel_title="",
    panel_body="",
    list_item="",
    list_highlight="\033[7m",
    detail_text="",
    placeholder="",
)

THEMES_BY_NAME: dict[str, UITheme] = {theme.name: theme for theme in (DEFAULT_THEME, OCEAN_THEME)}


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Pick the palette for a configured theme name.

    ``NO_COLOR`` wins over any name. Names are matched case-insensitively and
    unknown or empty names get the default palette.
    """
    if no_color:
        return PLAIN_THEME
    key = (name or "").strip().lower()
    return THEMES_BY_NAME.get(key, DEFAULT_THEME)
