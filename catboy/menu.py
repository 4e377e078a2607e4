"""The stacked, animated menu overlay and the menus of the game."""

from __future__ import annotations

import enum
import sys
from dataclasses import dataclass, field
from typing import Callable, Container, Optional

from .math_util import elastic_in, elastic_out, lerp
from .savefile import NUM_SAVEFILES, SaveStore
from .screen import HEIGHT, WIDTH

DEFAULT_MENU_WIDTH = 192
MENU_PADDING = 4
MENU_SPACING = 4
MENU_CURSOR_HEIGHT = 16
MENU_ANIM_DELAY = 15
FONT_SIZE = 8
LINE_HEIGHT = FONT_SIZE + MENU_SPACING

BACKGROUND_COLOR = 0x0000007F
CURSOR_COLOR = 0xFFFFFF7F
TEXT_COLOR = 0xFFFFFFFF

NONE_MENU = "none"


class Button(enum.IntEnum):
    """Logical inputs the game reacts to."""

    MOUSE_LEFT = 0
    MOUSE_RIGHT = 1
    MOUSE_MIDDLE = 2
    MOVE_UP = 3
    MOVE_LEFT = 4
    MOVE_DOWN = 5
    MOVE_RIGHT = 6
    JUMP = 7
    RUN = 8
    PAUSE = 9


# Keyboard scancodes bound to each input.
KEY_BINDINGS = {
    Button.MOVE_UP: (26,),
    Button.MOVE_LEFT: (4,),
    Button.MOVE_DOWN: (22,),
    Button.MOVE_RIGHT: (7,),
    Button.JUMP: (44,),
    Button.RUN: (225,),
    Button.PAUSE: (41,),
}

MOUSE_BINDINGS = {
    Button.MOUSE_LEFT: (1,),
    Button.MOUSE_RIGHT: (3,),
    Button.MOUSE_MIDDLE: (2,),
}

# Controller button numbers: A=1, B=0, X=3, Y=2, PLUS=9, D-pad up/down/left/right=11/12/13/14.
CONTROLLER_BINDINGS = {
    Button.MOUSE_LEFT: (1,),
    Button.MOVE_UP: (11,),
    Button.MOVE_LEFT: (13,),
    Button.MOVE_DOWN: (12,),
    Button.MOVE_RIGHT: (14,),
    Button.JUMP: (1, 0),
    Button.RUN: (3, 2),
    Button.PAUSE: (9,),
}

# Joystick directions encoded as axis * 4 + (left=0, right=1, up=2, down=3).
JOYSTICK_BINDINGS = {
    Button.MOVE_UP: (2,),
    Button.MOVE_LEFT: (0,),
    Button.MOVE_DOWN: (3,),
    Button.MOVE_RIGHT: (1,),
}


class ItemType(enum.Enum):
    BUTTON = enum.auto()
    SLIDER = enum.auto()
    INPUT_BIND = enum.auto()
    SEPARATOR = enum.auto()
    IMAGE = enum.auto()


class AnimState(enum.Enum):
    IDLE = enum.auto()
    PUSH1 = enum.auto()
    PUSH2 = enum.auto()
    POP1 = enum.auto()
    POP2 = enum.auto()


class Anchor(enum.Enum):
    """Which screen edge a menu offset is measured from."""

    START = enum.auto()
    END = enum.auto()
    CENTER = enum.auto()


class _FileContext(enum.Enum):
    SELECT = enum.auto()
    ERASE = enum.auto()
    COPY_WHAT = enum.auto()
    COPY_TO = enum.auto()


@dataclass
class MenuItem:
    type: ItemType
    label: str
    action: Optional[Callable[[int], None]] = None
    image: Optional[tuple[int, int, int, int, float, float, float, float]] = None

    @property
    def selectable(self) -> bool:
        return self.type not in (ItemType.SEPARATOR, ItemType.IMAGE)


@dataclass
class Menu:
    name: str
    items: list[MenuItem] = field(default_factory=list)
    x: int = 0
    y: int = 0
    anchor_x: Anchor = Anchor.START
    anchor_y: Anchor = Anchor.START
    width: int = DEFAULT_MENU_WIDTH
    follow: bool = False


def _button(label: str, action: Callable[[int], None]) -> MenuItem:
    return MenuItem(ItemType.BUTTON, label, action)


def _separator(label: str) -> MenuItem:
    return MenuItem(ItemType.SEPARATOR, label)


class MenuSystem:
    """A stack of menus with a selection cursor and slide-in/slide-out animations."""

    def __init__(self, saves: SaveStore, quit_action: Callable[[], None] | None = None):
        self.saves = saves
        self._quit_action = quit_action if quit_action is not None else (lambda: sys.exit(0))
        self.stack: list[Menu | None] = []
        self.selected_index = 0
        self.visual_cursor_index = 0
        self.visual_cursor_pos = 0.0
        self.anim_state = AnimState.IDLE
        self.anim_timer = 0
        self._anim_arg: str | int = 0
        self.context = _FileContext.SELECT
        self._copy_what = -1
        self.menus = self._build_menus()

    def _file_buttons(self) -> list[MenuItem]:
        return [_button(f"File {i + 1}", self.file_select) for i in range(NUM_SAVEFILES)]

    def _build_menus(self) -> dict[str, Menu]:
        title = Menu(
            "title_screen",
            [
                MenuItem(
                    ItemType.IMAGE,
                    "images/logo.png",
                    image=(0, 0, 90, 49, WIDTH / 2 - 90, 24, 180, 98),
                ),
                _button("Start Game", self.start),
                _button("Select File", self.select_file),
                _button("Settings", self.settings),
                _button("Quit", self.quit),
            ],
            x=0, y=48, anchor_x=Anchor.CENTER, anchor_y=Anchor.END,
        )
        file_select = Menu(
            "file_select",
            [
                _separator("File Select"),
                *self._file_buttons(),
                _button("Copy", self.file_copy),
                _button("Erase", self.file_erase),
                _button("Back", self.back),
            ],
            anchor_x=Anchor.CENTER, anchor_y=Anchor.CENTER,
        )
        file_what = Menu(
            "file_what",
            [_separator("What?"), *self._file_buttons(), _button("Cancel", self.file_cancel)],
            anchor_x=Anchor.CENTER, anchor_y=Anchor.CENTER,
        )
        file_to = Menu(
            "file_to",
            [_separator("To?"), *self._file_buttons(), _button("Cancel", self.file_cancel)],
            anchor_x=Anchor.CENTER, anchor_y=Anchor.CENTER,
        )
        settings = Menu(
            "settings",
            [
                _separator("Settings"),
                _separator("not done pls lemme cook :pray:"),
                _button("Back", self.back),
            ],
            anchor_x=Anchor.CENTER, anchor_y=Anchor.CENTER,
        )
        return {m.name: m for m in (title, file_select, file_what, file_to, settings)}

    def _resolve(self, name: str) -> Menu | None:
        if name == NONE_MENU:
            return None
        try:
            return self.menus[name]
        except KeyError:
            raise KeyError(f"unknown menu {name!r}") from None

    @property
    def current(self) -> Menu | None:
        return self.stack[-1] if self.stack else None

    @property
    def selected_item(self) -> MenuItem | None:
        menu = self.current
        if menu is None or not 0 <= self.selected_index < len(menu.items):
            return None
        return menu.items[self.selected_index]

    # Stack operations

    def push(self, name: str) -> None:
        """Animate the current menu out and ``name`` in."""
        self._resolve(name)
        self.anim_state = AnimState.PUSH1
        self._anim_arg = name

    def load(self, name: str) -> None:
        """Put ``name`` on top of the stack immediately."""
        menu = self._resolve(name)
        self.stack.append(menu)
        if menu is not None:
            self._reset_cursor()

    def pop(self, count: int = 1) -> None:
        """Animate ``count`` menus off the stack."""
        self.anim_state = AnimState.POP1
        self._anim_arg = count

    def _pop_now(self) -> None:
        if not self.stack:
            return
        self.stack.pop()
        if self.visible():
            self._reset_cursor()

    def visible(self) -> bool:
        return self.current is not None

    # Cursor

    def _selectable(self) -> list[int]:
        menu = self.current
        if menu is None:
            return []
        return [i for i, item in enumerate(menu.items) if item.selectable]

    def _update_visual_cursor(self) -> None:
        menu = self.current
        items = menu.items[: self.selected_index] if menu else []
        self.visual_cursor_index = sum(1 for item in items if item.type is not ItemType.IMAGE)

    def cursor_up(self) -> None:
        """Move to the previous selectable item, or the first one at the top."""
        selectable = self._selectable()
        if not selectable:
            return
        before = [i for i in selectable if i < self.selected_index]
        self.selected_index = before[-1] if before else selectable[0]
        self._update_visual_cursor()

    def cursor_down(self) -> None:
        """Move to the next selectable item, or the last one at the bottom."""
        selectable = self._selectable()
        if not selectable:
            return
        after = [i for i in selectable if i > self.selected_index]
        self.selected_index = after[0] if after else selectable[-1]
        self._update_visual_cursor()

    def _reset_cursor(self) -> None:
        self.selected_index = -1
        self.cursor_down()
        self.visual_cursor_pos = float(self.visual_cursor_index)

    # Animation and layout

    def update_animation(self) -> float:
        """Advance the transition by one frame and return the horizontal offset."""
        x = self.anim_timer / MENU_ANIM_DELAY
        translation = 0.0
        state = self.anim_state
        if state is AnimState.POP1:
            translation = lerp(elastic_in(x), 0, WIDTH)
        elif state is AnimState.POP2:
            translation = lerp(elastic_out(x), -WIDTH, 0)
        elif state is AnimState.PUSH1:
            translation = lerp(elastic_in(x), 0, -WIDTH)
        elif state is AnimState.PUSH2:
            translation = lerp(elastic_out(x), WIDTH, 0)
        if state is not AnimState.IDLE:
            self.anim_timer += 1
        if self.anim_timer == MENU_ANIM_DELAY:
            self.anim_timer = 0
            if state is AnimState.POP1:
                self.anim_state = AnimState.POP2
                for _ in range(int(self._anim_arg)):
                    self._pop_now()
            elif state is AnimState.PUSH1:
                self.anim_state = AnimState.PUSH2
                self.load(str(self._anim_arg))
            else:
                self.anim_state = AnimState.IDLE
        return translation

    def bounds(self) -> tuple[int, int, int, int]:
        """The ``(x, y, w, h)`` box of the menu on top of the stack."""
        menu = self.current
        if menu is None:
            raise LookupError("no menu is visible")
        w = menu.width
        lines = sum(1 for item in menu.items if item.type is not ItemType.IMAGE)
        h = MENU_PADDING + lines * LINE_HEIGHT - MENU_SPACING + MENU_PADDING

        def place(anchor: Anchor, offset: int, screen: int, size: int) -> int:
            if anchor is Anchor.CENTER:
                return screen // 2 - size // 2 + offset
            if anchor is Anchor.END:
                return screen - size - offset
            return offset

        x = place(menu.anchor_x, menu.x, WIDTH, w)
        y = place(menu.anchor_y, menu.y, HEIGHT, h)
        if menu.follow:
            y, h = 0, HEIGHT
        return x, y, w, h

    def render(self, drawlist, pressed: Container[Button] = ()) -> bool:
        """Draw the top menu and react to ``pressed``; False when no menu is shown."""
        offset = self.update_animation()
        if not self.visible():
            return False
        menu = self.current
        x, y, w, h = self.bounds()
        x = int(x + offset)
        drawlist.set_color(BACKGROUND_COLOR)
        drawlist.append(None, x, y, w, h)
        self.visual_cursor_pos += (self.visual_cursor_index - self.visual_cursor_pos) / 5
        cursor_y = (
            y + MENU_PADDING + self.visual_cursor_pos * LINE_HEIGHT
            + FONT_SIZE / 2 - MENU_CURSOR_HEIGHT / 2
        )
        drawlist.set_color(CURSOR_COLOR)
        drawlist.append(None, x, cursor_y, w, MENU_CURSOR_HEIGHT)
        drawlist.set_color(TEXT_COLOR)
        text_y = y + MENU_PADDING
        for item in menu.items:
            if item.type is ItemType.IMAGE:
                srcx, srcy, srcw, srch, dstx, dsty, dstw, dsth = item.image
                drawlist.append(item.label, dstx + offset, dsty, dstw, dsth, srcx, srcy, srcw, srch)
            elif item.type is ItemType.BUTTON:
                drawlist.text(x + MENU_PADDING, text_y, item.label)
                text_y += LINE_HEIGHT
            elif item.type is ItemType.SEPARATOR:
                drawlist.text(x + (w - len(item.label) * FONT_SIZE) / 2, text_y, item.label)
                text_y += LINE_HEIGHT
        if self.anim_state is AnimState.IDLE:
            if Button.MOVE_UP in pressed:
                self.cursor_up()
            if Button.MOVE_DOWN in pressed:
                self.cursor_down()
            item = self.selected_item
            if Button.JUMP in pressed and item is not None and item.type is ItemType.BUTTON:
                item.action(self.selected_index)
        return True

    # Button actions

    def start(self, index: int) -> None:
        self.push(NONE_MENU)

    def select_file(self, index: int) -> None:
        self.push("file_select")

    def settings(self, index: int) -> None:
        self.push("settings")

    def back(self, index: int) -> None:
        self.pop()

    def quit(self, index: int) -> None:
        self._quit_action()

    def file_select(self, index: int) -> None:
        """Act on save slot ``index - 1`` according to the current file operation."""
        slot = index - 1
        if self.context is _FileContext.SELECT:
            self.saves.select(slot)
            self.pop()
        elif self.context is _FileContext.COPY_WHAT:
            self.context = _FileContext.COPY_TO
            self._copy_what = slot
            self.push("file_to")
        elif self.context is _FileContext.COPY_TO:
            self.saves.copy(self._copy_what, slot)
            self.pop(2)
        elif self.context is _FileContext.ERASE:
            self.saves.erase(slot)
            self.pop()

    def file_copy(self, index: int) -> None:
        self.context = _FileContext.COPY_WHAT
        self.push("file_what")

    def file_erase(self, index: int) -> None:
        self.context = _FileContext.ERASE
        self.push("file_what")

    def file_cancel(self, index: int) -> None:
        if self.context is _FileContext.COPY_TO:
            self.pop(2)
        else:
            self.pop()
        self.context = _FileContext.SELECT