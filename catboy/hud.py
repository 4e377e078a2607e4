"""The heads-up display: lives, coins and the level's cat coins."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .math_util import clamp
from .screen import WIDTH

BUMP_HEIGHT = 2
HIDDEN_OPACITY = 100
SHOWN_OPACITY = 255
SPACING = 12
DISTANCE_FROM_TOP = 8
HIDDEN_POS = -40
SHOWN_POS = 8
FADE_SPEED = 10
FADE_DELAY = 60
SHOW_DELAY = 300
STANDING_DELAY = 30
NUM_CAT_COINS = 3
CAT_COIN_DISTANCE = 8
CAT_COIN_SPACING = 20
CAT_COIN_POPOUT_SCALE = 1.5
CAT_COIN_POPOUT_DELAY = 30
CAT_COIN_GLINT_FRAMES = 8
CAT_COIN_GLINT_DELAY = 3
CAT_COIN_HIDDEN_POS = -24
CAT_COIN_GLYPH_SIZE = 19

# Font glyphs used by the HUD.
LIVES_GLYPH = "\x80"
COIN_GLYPHS = "\x81\x82\x83\x84"
CAT_COIN_COLLECTED = "\x84\x85\n\x86\x87"
CAT_COIN_MISSING = "\x88\x89\n\x8A\x8B"
CAT_COIN_GLINT = (
    "\x00\x00\n\x00\x00",
    "\x8C\x8D\n\x8E\x8F",
    "\x90\x91\n\x92\x93",
    "\x94\x95\n\x96\x97",
    "\x98\x99\n\x9A\x9B",
    "\x9C\x9D\n\x9E\x9F",
    "\xA0\xA1\n\xA2\xA3",
    "\x00\x00\n\x00\x00",
)


def approach(value: int, target: int, speed: int) -> tuple[int, bool]:
    """Step ``value`` towards ``target`` without overshooting; flag whether it moved."""
    if value == target:
        return value, False
    if value < target:
        return min(value + speed, target), True
    return max(value - speed, target), True


def interpolate_color(src: int, dst: int, x: float) -> int:
    """Blend two 0xRRGGBB colours, ``x`` running from 0 (``src``) to 1 (``dst``)."""
    result = 0
    for shift in (16, 8, 0):
        a = (src >> shift) & 0xFF
        b = (dst >> shift) & 0xFF
        result |= (int((b - a) * x + a) & 0xFF) << shift
    return result


def _opacity(percent: int) -> str:
    return f"${{%{percent}}}"


def _color(color: int) -> str:
    return f"${{#{color:06x}}}"


def _scale(percent: int) -> str:
    return f"${{^{percent}}}"


@dataclass
class HudElement:
    """One counter that slides in when it changes and out when the player is busy."""

    color: int
    hide_x: int
    box: tuple[int, int, int, int] = (0, 0, 0, 0)
    init: bool = True
    x: float = 0.0
    y: float = 0.0
    dst_x: float = 0.0
    dst_y: float = 0.0
    show_timer: int = 0
    bump_timer: int = 0
    value: int = 0
    opacity: int = 0


class Hud:
    """Lives and coin counters plus the cat-coin row."""

    def __init__(self):
        self.standing_timer = 0
        self.cat_coin_timers = [-1] * NUM_CAT_COINS
        self.elements = [
            HudElement(0x00FF00, HIDDEN_POS, (-100, -100, 156, 144)),
            HudElement(0xFFFF00, HIDDEN_POS, (-100, -100, 156, 144)),
            HudElement(0xFFFFFF, CAT_COIN_HIDDEN_POS, (WIDTH - 80, -100, 180, 140)),
        ]

    def suggest_y(self, element: HudElement) -> float:
        """Stack ``element`` below the elements before it that are on screen."""
        shown = 0
        for other in self.elements:
            if other is element:
                break
            if other.dst_x == other.hide_x and abs(other.dst_x - other.x) < 1:
                continue
            shown += 1
        else:
            raise ValueError("element does not belong to this HUD")
        return DISTANCE_FROM_TOP + shown * SPACING

    def _show(self, element: HudElement) -> None:
        element.show_timer = 0
        element.dst_x = SHOWN_POS
        element.dst_y = element.y = self.suggest_y(element)

    def show_element(self, index: int) -> None:
        self._show(self.elements[index])

    def _update_element(self, element: HudElement, target: int) -> None:
        element.dst_y = self.suggest_y(element)
        if element.init:
            element.init = False
            element.value = target
            element.x = element.dst_x = SHOWN_POS
            element.y = element.dst_y
            element.show_timer = 0
            element.bump_timer = FADE_DELAY
            element.opacity = SHOWN_OPACITY
        element.bump_timer += 1
        element.show_timer += 1
        element.opacity, _ = approach(element.opacity, SHOWN_OPACITY, FADE_SPEED)
        element.value, changed = approach(element.value, target, 1)
        if changed:
            self._show(element)
            element.bump_timer = 0
        if element.show_timer == SHOW_DELAY and self.standing_timer < STANDING_DELAY:
            element.dst_x = element.hide_x
        element.x += (element.dst_x - element.x) / 10
        element.y += (element.dst_y - element.y) / 10

    def update(self, vel_x: float, vel_y: float, lives: int, coins: int) -> None:
        """Advance one frame given the player's velocity and the current counters."""
        if abs(vel_x) + abs(vel_y) < 0.05:
            self.standing_timer += 1
        else:
            self.standing_timer = 0
        for element in self.elements:
            if element.show_timer < SHOW_DELAY:
                continue
            if self.standing_timer == 0:
                element.dst_x = element.hide_x
            if self.standing_timer == STANDING_DELAY:
                element.dst_x = SHOWN_POS
                element.y = element.dst_y = self.suggest_y(element)
        self._update_element(self.elements[0], lives)
        self._update_element(self.elements[1], coins)
        self._update_element(self.elements[2], 0)

    def _render_element(self, drawlist, element: HudElement, glyph: str, value: int) -> None:
        bump = max(0, min(-abs(element.bump_timer - BUMP_HEIGHT) + BUMP_HEIGHT, BUMP_HEIGHT))
        color = interpolate_color(
            element.color, 0xFFFFFF, clamp(element.bump_timer / FADE_DELAY, 0, 1)
        )
        text = f"{_opacity(element.opacity * 100 // 255)}{glyph}{_color(color)}*{value:02d}"
        drawlist.text(element.x, element.y - bump, text)

    def _render_cat_coins(self, drawlist, level_flags: int) -> None:
        timers = self.cat_coin_timers
        for i in reversed(range(NUM_CAT_COINS)):
            if timers[i] != -1:
                timers[i] += 1
            if timers[i] < 0 and level_flags & (1 << i):
                self.show_element(2)
                timers[i] = 0
        for i, timer in enumerate(timers):
            collected = timer >= 0
            if collected and timer < CAT_COIN_POPOUT_DELAY:
                wave = math.sin(timer / CAT_COIN_POPOUT_DELAY * math.pi)
                scale = wave * (CAT_COIN_POPOUT_SCALE - 1) + 1
            else:
                scale = 1.0
            grow = (scale - 1) * CAT_COIN_GLYPH_SIZE / 2
            x = WIDTH - CAT_COIN_DISTANCE - (NUM_CAT_COINS - i) * CAT_COIN_SPACING - grow
            y = self.elements[2].x - grow
            glyph = CAT_COIN_COLLECTED if collected else CAT_COIN_MISSING
            drawlist.text(x, y, f"{_scale(int(scale * 100))}{glyph}")
            frame = int(clamp(
                (timer - CAT_COIN_POPOUT_DELAY) / CAT_COIN_GLINT_DELAY,
                0,
                CAT_COIN_GLINT_FRAMES - 1,
            ))
            drawlist.text(x, y, CAT_COIN_GLINT[frame])

    def render(self, drawlist, lives: int, coins: int, level_flags: int = 0, timer: int = 0) -> None:
        """Draw the counters; ``level_flags`` are the current level's progress bits."""
        coin = COIN_GLYPHS[(timer // 10) % len(COIN_GLYPHS)]
        self._render_element(drawlist, self.elements[0], LIVES_GLYPH, lives)
        self._render_element(drawlist, self.elements[1], coin, coins)
        self._render_cat_coins(drawlist, level_flags)