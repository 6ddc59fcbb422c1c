"""Console interface package."""

from ledgerlite.console.menu import (
    ConsoleMenu,
    MenuOption,
    MenuState,
    parse_choice,
    render_menu,
)

__all__ = [
    "ConsoleMenu",
    "MenuOption",
    "MenuState",
    "parse_choice",
    "render_menu",
]
