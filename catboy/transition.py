"""Full-screen wipe transitions that run an action while the screen is covered."""

from __future__ import annotations

import enum
from typing import Callable

from .math_util import Easing, lerp, linear
from .screen import HEIGHT, WIDTH

TRANSITION_PADDING = 32
TRANSITION_TEXTURE = "images/transition.png"


class Direction(enum.Enum):
    """The direction the wipe travels across the screen."""

    UP = enum.auto()
    LEFT = enum.auto()
    DOWN = enum.auto()
    RIGHT = enum.auto()


class Transition:
    """One wipe at a time; the action fires just after the halfway frame."""

    def __init__(self):
        self.active = False
        self.easing: Easing = linear
        self.action: Callable[[], None] = lambda: None
        self.length = 0
        self.frame = 0
        self.direction = Direction.LEFT
        self.x = 0.0
        self.y = 0.0

    def start(
        self,
        action: Callable[[], None],
        length: int,
        direction: Direction,
        easing: Easing = linear,
    ) -> None:
        """Begin a wipe lasting ``length`` frames; ignored while one is running."""
        if self.active:
            return
        if length < 0:
            raise ValueError("length must not be negative")
        self.frame = 0
        self.length = length
        self.easing = easing
        self.action = action
        self.direction = direction
        self.active = True
        self.update()
        self.frame = 0

    def update(self) -> None:
        """Advance the wipe by one frame."""
        if not self.active:
            return
        if self.frame == self.length:
            self.active = False
            return
        self.x = -TRANSITION_PADDING
        self.y = -TRANSITION_PADDING
        if self.frame == self.length // 2 + 1:
            self.action()
        progress = self.easing(self.frame / self.length)
        span_w = -WIDTH - TRANSITION_PADDING * 2
        span_h = -HEIGHT - TRANSITION_PADDING * 2
        if self.direction is Direction.UP:
            self.y = lerp(progress, span_h, HEIGHT)
        elif self.direction is Direction.LEFT:
            self.x = lerp(progress, span_w, WIDTH)
        elif self.direction is Direction.DOWN:
            self.y = lerp(progress, HEIGHT, span_h)
        elif self.direction is Direction.RIGHT:
            self.x = lerp(progress, WIDTH, span_w)
        self.frame += 1

    def render(self, drawlist) -> None:
        """Draw the wipe texture at its current position, if one is running."""
        if not self.active:
            return
        w = TRANSITION_PADDING * 2 + WIDTH
        h = TRANSITION_PADDING * 2 + HEIGHT
        drawlist.append(TRANSITION_TEXTURE, self.x, self.y, w, h, 0, 0, w, h)