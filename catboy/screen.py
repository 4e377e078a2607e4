"""Screen geometry, letterboxing and the draw list consumed by the renderer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator

WIDTH = 384
HEIGHT = 256
MAX_PLAYERS = 16
FPS = 60
BORDER_COLOR = 0x000000FF
DEFAULT_COLOR = 0xFFFFFFFF


@dataclass(frozen=True)
class Viewport:
    """Visible area in game coordinates; x and y are the letterbox margins."""

    x: float
    y: float
    w: float
    h: float


@dataclass
class DrawCommand:
    texture: Any
    x: float
    y: float
    w: float
    h: float
    srcx: int = 0
    srcy: int = 0
    srcw: int = 0
    srch: int = 0
    color: int = DEFAULT_COLOR
    text: str | None = None


class DrawList:
    """An ordered list of draw commands sharing a current tint colour."""

    def __init__(self):
        self.color = DEFAULT_COLOR
        self._commands: list[DrawCommand] = []

    def set_color(self, color: int) -> None:
        self.color = color

    def append(self, texture, x, y, w, h, srcx=0, srcy=0, srcw=0, srch=0) -> DrawCommand:
        command = DrawCommand(texture, x, y, w, h, srcx, srcy, srcw, srch, self.color)
        self._commands.append(command)
        return command

    def text(self, x, y, text: str) -> DrawCommand:
        command = DrawCommand(None, x, y, 0, 0, color=self.color, text=text)
        self._commands.append(command)
        return command

    def clear(self) -> None:
        self._commands.clear()

    def __len__(self) -> int:
        return len(self._commands)

    def __iter__(self) -> Iterator[DrawCommand]:
        return iter(self._commands)


def compute_viewport(window_w: int, window_h: int) -> Viewport:
    """Fit the fixed game area into a window, widening one axis to keep the aspect."""
    if window_w == 0:
        window_w = 1
    if window_h == 0:
        window_h = 1
    view_w, view_h = float(WIDTH), float(HEIGHT)
    if WIDTH / HEIGHT > window_w / window_h:
        view_h = window_h / (window_w / view_w)
    else:
        view_w = window_w / (window_h / view_h)
    return Viewport((view_w - WIDTH) / 2, (view_h - HEIGHT) / 2, view_w, view_h)


def border_rects(viewport: Viewport) -> list[tuple[float, float, float, float]]:
    """The four ``(x1, y1, x2, y2)`` bars that cover everything outside the game area."""
    vx, vy = viewport.x, viewport.y
    return [
        (-vx, -vy, WIDTH + vx, 0),
        (-vx, -vy, 0, HEIGHT + vy),
        (-vx, HEIGHT, WIDTH + vx, HEIGHT + vy),
        (WIDTH, -vy, WIDTH + vx, HEIGHT + vy),
    ]


def quad_coords(texture_size, dstx, dsty, dstw, dsth, srcx, srcy, srcw, srch):
    """Return ``((u1, v1, u2, v2), (x1, y1, x2, y2))`` for one sprite quad.

    ``texture_size`` is ``(width, height)`` or None for an untextured quad.
    A negative size mirrors the quad while keeping it over the same area.
    """
    x1, y1 = dstx, dsty
    x2, y2 = dstx + dstw, dsty + dsth
    if x2 < x1:
        x1 -= dstw
        x2 -= dstw
    if y2 < y1:
        y1 -= dsth
        y2 -= dsth
    u1 = v1 = u2 = v2 = 0.0
    if texture_size is not None:
        tex_w, tex_h = texture_size
        u1 = srcx / tex_w
        v1 = srcy / tex_h
        u2 = (srcx + srcw) / tex_w
        v2 = (srcy + srch) / tex_h
    return (u1, v1, u2, v2), (x1, y1, x2, y2)