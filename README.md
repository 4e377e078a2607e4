# catboy

The engine-independent core of a small side-scrolling platformer. It is
written in plain Python and has no runtime dependencies.

## Modules

- **`catboy.math_util`**: `clamp`, `wrap` and `lerp`. `wrap` raises
  `ValueError` when the range is empty and the value lies outside it. The
  module also has easing curves (`linear`, `sin_in`/`sin_out`/`sin_in_out`,
  `quad_in`/`quad_out`/`quad_in_out`, `cubic_in`/`cubic_out`/`cubic_in_out`,
  `elastic_in`/`elastic_out`/`elastic_in_out`) and the building blocks
  `expo_in`, `expo_out` and `in_out`.
- **`catboy.binary_reader`**: `BinaryStream`, a little-endian reader over a
  byte buffer. It has `read`, `read_uint32`, `read_int32`, `read_string`
  (NUL-terminated) and `skip`. `goto` reads a 32-bit offset and opens a child
  stream there. `close` returns the parent stream. A short read raises
  `EOFError`.
- **`catboy.assets`**: the asset bundle format. A bundle is a series of
  NUL-terminated names. Each name is followed by a 32-bit little-endian size
  and the file contents, and an empty name ends the bundle.
  - `build_bundle(root)` packs a directory, sorted by name, using `/`
    separators.
  - `parse_bundle(data)` returns `(name, contents)` pairs.
  - `bundle_to_header(data)` renders the bytes as `0x..,` literals.
  - `load_assets(data, decoders)` returns an `AssetStore`. The store decodes
    each entry with the decoder registered for its extension (see
    `get_extension`).
  - `AssetStore.get` and `AssetStore.name_of` raise `KeyError` for unknown
    entries. `AssetStore.extract(dest)` writes the raw files out.
    `extract_assets(data, dest)` does the same directly from a bundle.
- **`catboy.screen`**: the fixed 384×256 game area.
  - `compute_viewport` letterboxes the game area into a window and returns a
    `Viewport`.
  - `border_rects` gives the four bars that cover the margins.
  - `quad_coords` maps a sprite to texture and screen coordinates.
  - `DrawList` is an ordered list of `DrawCommand`s (sprites, rectangles and
    text) that share a current tint colour.
- **`catboy.savefile`**: the fixed-layout save slots.
  - `SaveFile` is one slot, with `to_bytes`/`from_bytes` and the map-event
    bits `map_event`, `set_map_event` and `clear_map_event`.
  - `LevelFlag` holds the per-level progress bits.
  - `SaveStore` keeps four slots in one file, with `load`, `save`, `select`,
    `erase`, `copy`, `get` and `current`. When the file is missing, `load`
    creates it with erased slots.
- **`catboy.audio`**: `Sound`, `Voice`, `AudioInstance` and `Mixer`.
  `Mixer.mix(count)` sums every playing instance and clips the result to
  signed 16-bit. One-shot instances are dropped once they finish, and stopped
  instances are dropped on the next pass.
- **`catboy.wav`**: `load_wav` / `WavSound` play the data chunk of a 16-bit
  PCM WAV file. `validate_wav` issues a warning when the data is not 16-bit
  stereo PCM at 48000 Hz.
- **`catboy.sfxr`**: `SfxrParams.from_bytes` reads sfxr settings files
  (versions 100–102). `SfxrSynth` is the synthesiser. `load_sfxr` /
  `SfxrSound` play the result as stereo samples through the mixer. You can
  pass a `random.Random` to make noise reproducible.
- **`catboy.menu`**: `MenuSystem` is the stacked menu overlay: title screen,
  file select, copy/erase prompts and settings. It has slide animations
  (`push`, `load`, `pop`, `update_animation`), cursor movement, layout
  (`bounds`) and drawing (`render`, driven by a set of pressed `Button`s). The
  file-select buttons act on a `SaveStore`. The module also defines the
  default key, mouse, controller and joystick bindings for each `Button`.
- **`catboy.hud`**: `Hud` draws the lives and coin counters and the row of
  three cat coins. It also provides the helpers `approach` and
  `interpolate_color`.
- **`catboy.transition`**: `Transition` is a full-screen wipe in any
  `Direction`. It runs an action just after its halfway frame.
- **`catboy.overlay`**: `Overlay.render` draws the menu if one is shown,
  otherwise the HUD, and then any active transition.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command line

`catboy-assets` packs a directory into a header file of hex byte literals:

```
catboy-assets --assets assets --output asset_data.h
```

`--assets` defaults to `assets`. `--output` defaults to
`src/io/assets/asset_data.h`. The command only packs; to unpack a bundle, call
`extract_assets` from Python.

## Examples

```python
from catboy.math_util import clamp, lerp, cubic_in_out

x = lerp(cubic_in_out(clamp(0.3, 0, 1)), 0, 384)
```

```python
from catboy.assets import build_bundle, load_assets

store = load_assets(build_bundle("assets"), {})
level = store.get("levels/1-1.lvl")   # raw bytes; KeyError if missing
```

```python
from catboy.savefile import SaveStore

saves = SaveStore("btcb.sav")
saves.load()
saves.get(0).set_map_event(5)
saves.save()
```

```python
from catboy.audio import Mixer
from catboy.wav import load_wav

mixer = Mixer()
with open("jump.wav", "rb") as fh:
    mixer.play_oneshot(load_wav(fh.read()))
samples = mixer.mix(2048)
```

```python
from catboy.hud import Hud
from catboy.menu import MenuSystem
from catboy.overlay import Overlay
from catboy.savefile import SaveStore
from catboy.screen import DrawList
from catboy.transition import Transition

menu = MenuSystem(SaveStore("btcb.sav"))
menu.load("title_screen")
overlay = Overlay(menu, Hud(), Transition())
drawlist = DrawList()
overlay.render(drawlist)
```

## What this package does not do

The package has no window, renderer, audio output device or input polling.
A `DrawList` only records commands, and `Mixer.mix` only returns sample
values. Your own front end has to draw the commands, play the samples and
report pressed `Button`s.

The package also does not include:

- a game loop;
- level or tile loading, or entity and player logic;
- NSF music playback;
- networked multiplayer.