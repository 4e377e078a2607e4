"""Packed asset bundles: building them from a directory, reading them, extracting them."""

from __future__ import annotations

import argparse
import struct
from pathlib import Path
from typing import Any, Callable, Iterable, Iterator, Mapping

from .binary_reader import BinaryStream

PATH_MAX = 4096
DEFAULT_ASSET_DIR = "assets"
DEFAULT_HEADER = "src/io/assets/asset_data.h"

Decoder = Callable[[bytes], Any]


def get_extension(name: str) -> str:
    """Return the text after the last '.' or '/', or the whole name if neither occurs."""
    for i in range(len(name) - 1, -1, -1):
        if name[i] in "./":
            return name[i + 1:]
    return name


def parse_bundle(data: bytes) -> list[tuple[str, bytes]]:
    """Split a bundle into ``(name, contents)`` pairs in stored order."""
    stream = BinaryStream(data)
    entries: list[tuple[str, bytes]] = []
    while True:
        name = stream.read_string(PATH_MAX)
        if not name:
            break
        size = stream.read_uint32()
        entries.append((name, stream.read(size)))
    return entries


def _walk(directory: Path, prefix: str) -> Iterator[tuple[str, bytes]]:
    for child in sorted(directory.iterdir(), key=lambda p: p.name):
        name = f"{prefix}/{child.name}" if prefix else child.name
        if child.is_dir():
            yield from _walk(child, name)
        else:
            yield name, child.read_bytes()


def build_bundle(root) -> bytes:
    """Pack every file under ``root`` into a bundle, names relative with '/' separators."""
    parts = []
    for name, contents in _walk(Path(root), ""):
        parts.append(name.encode("utf-8") + b"\0")
        parts.append(struct.pack("<I", len(contents)))
        parts.append(contents)
    parts.append(b"\0")
    return b"".join(parts)


def bundle_to_header(data: bytes) -> str:
    """Render bytes as a comma-terminated list of hex literals."""
    return "".join(f"0x{byte:02x}," for byte in data)


class AssetStore:
    """Named assets, each decoded by the decoder registered for its extension."""

    def __init__(self, entries: Iterable[tuple[str, bytes]], decoders: Mapping[str, Decoder] | None = None):
        decoders = dict(decoders or {})
        self._entries: list[tuple[str, bytes, Any]] = []
        for name, raw in entries:
            decoder = decoders.get(get_extension(name))
            asset = decoder(raw) if decoder else raw
            self._entries.append((name, raw, asset))

    def get(self, name: str) -> Any:
        for entry_name, _, asset in self._entries:
            if entry_name == name:
                return asset
        raise KeyError(f"asset {name} not found")

    def name_of(self, asset: Any) -> str:
        for name, _, stored in self._entries:
            if stored is asset:
                return name
        raise KeyError(f"asset {asset!r} not found")

    def extract(self, dest="assets") -> list[Path]:
        """Write every asset's raw bytes below ``dest``; return the written paths."""
        written = []
        for name, raw, _ in self._entries:
            print(f"extracting {name}")
            path = Path(dest) / name
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(raw)
            written.append(path)
        return written


def load_assets(data: bytes, decoders: Mapping[str, Decoder] | None = None) -> AssetStore:
    return AssetStore(parse_bundle(data), decoders)


def extract_assets(data: bytes, dest="assets") -> list[Path]:
    return load_assets(data).extract(dest)


def main(argv=None) -> int:
    """Pack an asset directory into a hex-literal header file."""
    parser = argparse.ArgumentParser(description="Pack game assets into a header file.")
    parser.add_argument("--assets", default=DEFAULT_ASSET_DIR, help="directory to pack")
    parser.add_argument("--output", default=DEFAULT_HEADER, help="header file to write")
    args = parser.parse_args(argv)
    Path(args.output).write_text(bundle_to_header(build_bundle(args.assets)))
    return 0