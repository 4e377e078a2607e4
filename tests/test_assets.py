import struct

import pytest

from catboy.assets import (
    AssetStore,
    build_bundle,
    bundle_to_header,
    extract_assets,
    get_extension,
    load_assets,
    main,
    parse_bundle,
)


@pytest.fixture
def asset_dir(tmp_path):
    root = tmp_path / "assets"
    (root / "images" / "tiles").mkdir(parents=True)
    (root / "levels").mkdir()
    (root / "images" / "logo.png").write_bytes(b"\x89PNGdata")
    (root / "images" / "tiles" / "grass.png").write_bytes(b"grass")
    (root / "levels" / "1-1.lvl").write_bytes(bytes(range(10)))
    (root / "readme").write_bytes(b"")
    return root


@pytest.mark.parametrize(
    "name, ext",
    [("images/logo.png", "png"), ("levels/1-1.lvl", "lvl"), ("dir/noext", "noext"), ("plain", "plain")],
)
def test_get_extension(name, ext):
    assert get_extension(name) == ext


def test_bundle_wire_format(tmp_path):
    (tmp_path / "a.txt").write_bytes(b"hi")
    assert build_bundle(tmp_path) == b"a.txt\0" + b"\x02\x00\x00\x00" + b"hi" + b"\0"


def test_empty_bundle_is_single_zero(tmp_path):
    assert build_bundle(tmp_path) == b"\0"
    assert parse_bundle(b"\0") == []


def test_bundle_round_trip(asset_dir):
    entries = dict(parse_bundle(build_bundle(asset_dir)))
    expected = {
        p.relative_to(asset_dir).as_posix(): p.read_bytes()
        for p in asset_dir.rglob("*") if p.is_file()
    }
    assert entries == expected


def test_parse_truncated_bundle_raises():
    data = b"x\0" + struct.pack("<I", 10) + b"abc"
    with pytest.raises(EOFError):
        parse_bundle(data)


def test_bundle_to_header():
    assert bundle_to_header(b"\x00\xab") == "0x00,0xab,"


def test_store_get_and_name_of(asset_dir):
    store = load_assets(build_bundle(asset_dir))
    logo = store.get("images/logo.png")
    assert logo == b"\x89PNGdata"
    assert store.name_of(logo) == "images/logo.png"


def test_store_missing_raises():
    store = AssetStore([("a", b"1")])
    with pytest.raises(KeyError):
        store.get("b")
    with pytest.raises(KeyError):
        store.name_of(object())


def test_decoders_apply_by_extension(asset_dir):
    store = load_assets(build_bundle(asset_dir), {"png": lambda raw: ("image", len(raw))})
    assert store.get("images/tiles/grass.png") == ("image", 5)
    assert store.get("levels/1-1.lvl") == bytes(range(10))


def test_first_duplicate_wins():
    store = AssetStore([("a", b"first"), ("a", b"second")])
    assert store.get("a") == b"first"


def test_extract_round_trip(asset_dir, tmp_path, capsys):
    out = tmp_path / "out"
    written = extract_assets(build_bundle(asset_dir), out)
    assert len(written) == 4
    for path in asset_dir.rglob("*"):
        if path.is_file():
            assert (out / path.relative_to(asset_dir)).read_bytes() == path.read_bytes()
    assert "extracting levels/1-1.lvl" in capsys.readouterr().out


def test_extract_uses_raw_bytes_even_with_decoders(tmp_path):
    store = AssetStore([("x/y.png", b"raw")], {"png": lambda raw: None})
    store.extract(tmp_path)
    assert (tmp_path / "x" / "y.png").read_bytes() == b"raw"


def test_main_writes_header(asset_dir, tmp_path):
    out = tmp_path / "asset_data.h"
    assert main(["--assets", str(asset_dir), "--output", str(out)]) == 0
    assert out.read_text() == bundle_to_header(build_bundle(asset_dir))