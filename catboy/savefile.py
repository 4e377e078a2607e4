"""Save slots: the on-disk record layout and the store that loads, edits and writes them."""

from __future__ import annotations

import enum
import struct
from dataclasses import dataclass, field
from pathlib import Path

SAVEFILE_NAME = "btcb.sav"
NUM_SAVEFILES = 4
NUM_LEVELS = 256
MAP_EVENT_BYTES = 32
NUM_MAP_EVENTS = MAP_EVENT_BYTES * 8
DEFAULT_LIVES = 3

_LAYOUT = struct.Struct(f"<6B10x{NUM_LEVELS}s{MAP_EVENT_BYTES}s")
RECORD_SIZE = _LAYOUT.size


class LevelFlag(enum.IntFlag):
    """Per-level progress bits stored in ``SaveFile.level_flags``."""

    CATCOIN1 = 1 << 0
    CATCOIN2 = 1 << 1
    CATCOIN3 = 1 << 2
    EXIT_UP = 1 << 3
    EXIT_LEFT = 1 << 4
    EXIT_DOWN = 1 << 5
    EXIT_RIGHT = 1 << 6


@dataclass
class SaveFile:
    """One save slot. A freshly constructed slot is an erased one."""

    levels_completed: int = 0
    coins: int = 0
    lives: int = DEFAULT_LIVES
    map_x: int = 0
    map_y: int = 0
    map_id: int = 0
    level_flags: bytearray = field(default_factory=lambda: bytearray(NUM_LEVELS))
    map_events: bytearray = field(default_factory=lambda: bytearray(MAP_EVENT_BYTES))

    def to_bytes(self) -> bytes:
        """Serialise to the fixed record layout; byte fields wrap like unsigned 8-bit values."""
        if len(self.level_flags) != NUM_LEVELS or len(self.map_events) != MAP_EVENT_BYTES:
            raise ValueError("level_flags or map_events has the wrong length")
        return _LAYOUT.pack(
            self.levels_completed & 0xFF,
            self.coins & 0xFF,
            self.lives & 0xFF,
            self.map_x & 0xFF,
            self.map_y & 0xFF,
            self.map_id & 0xFF,
            bytes(self.level_flags),
            bytes(self.map_events),
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> "SaveFile":
        if len(data) != RECORD_SIZE:
            raise ValueError(f"save record must be {RECORD_SIZE} bytes, got {len(data)}")
        completed, coins, lives, map_x, map_y, map_id, flags, events = _LAYOUT.unpack(data)
        return cls(completed, coins, lives, map_x, map_y, map_id, bytearray(flags), bytearray(events))

    @staticmethod
    def _locate(index: int) -> tuple[int, int]:
        if not 0 <= index < NUM_MAP_EVENTS:
            raise IndexError(f"map event {index} out of range")
        return index // 8, index % 8

    def map_event(self, index: int) -> bool:
        byte, bit = self._locate(index)
        return bool((self.map_events[byte] >> bit) & 1)

    def set_map_event(self, index: int) -> None:
        byte, bit = self._locate(index)
        self.map_events[byte] |= 1 << bit

    def clear_map_event(self, index: int) -> None:
        byte, bit = self._locate(index)
        self.map_events[byte] &= ~(1 << bit) & 0xFF

    def _clone(self) -> "SaveFile":
        return SaveFile.from_bytes(self.to_bytes())


class SaveStore:
    """All save slots, backed by a single file."""

    def __init__(self, path=SAVEFILE_NAME):
        self.path = Path(path)
        self.files = [SaveFile() for _ in range(NUM_SAVEFILES)]
        self._selected: int | None = None

    @property
    def current(self) -> SaveFile | None:
        """The selected slot, or None before anything is selected."""
        return None if self._selected is None else self.files[self._selected]

    @staticmethod
    def _check(index: int) -> None:
        if not 0 <= index < NUM_SAVEFILES:
            raise IndexError(f"save slot {index} out of range")

    def load(self) -> None:
        """Read all slots; when no file exists, erase every slot and write a new file."""
        try:
            data = self.path.read_bytes()
        except FileNotFoundError:
            for index in range(NUM_SAVEFILES):
                self.erase(index)
            self.save()
            return
        expected = RECORD_SIZE * NUM_SAVEFILES
        if len(data) < expected:
            raise ValueError(f"save file is {len(data)} bytes, expected {expected}")
        self.files = [
            SaveFile.from_bytes(data[i * RECORD_SIZE:(i + 1) * RECORD_SIZE])
            for i in range(NUM_SAVEFILES)
        ]

    def save(self) -> None:
        self.path.write_bytes(b"".join(slot.to_bytes() for slot in self.files))

    def select(self, index: int) -> SaveFile:
        self._check(index)
        self._selected = index
        return self.files[index]

    def erase(self, index: int) -> None:
        self._check(index)
        self.files[index] = SaveFile()

    def copy(self, src: int, dst: int) -> None:
        self._check(src)
        self._check(dst)
        self.files[dst] = self.files[src]._clone()

    def get(self, index: int) -> SaveFile:
        self._check(index)
        return self.files[index]