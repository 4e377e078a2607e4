"""Composes the menu, HUD and transition into the top drawing layer."""

from __future__ import annotations

from typing import Container

from .hud import Hud
from .menu import Button, MenuSystem
from .transition import Transition


class Overlay:
    """Draws the menu if one is shown, otherwise the HUD, then any transition."""

    def __init__(self, menu: MenuSystem, hud: Hud, transition: Transition):
        self.menu = menu
        self.hud = hud
        self.transition = transition

    def render(
        self,
        drawlist,
        pressed: Container[Button] = (),
        lives: int = 0,
        coins: int = 0,
        level_flags: int = 0,
        timer: int = 0,
    ) -> bool:
        """Draw the overlay; return True when a menu was shown instead of the HUD."""
        shown = self.menu.render(drawlist, pressed)
        if not shown:
            self.hud.render(drawlist, lives, coins, level_flags, timer)
        self.transition.render(drawlist)
        return shown