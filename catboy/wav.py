"""Playback of 16-bit PCM WAV data."""

from __future__ import annotations

import struct
import sys
import warnings
from array import array

from .audio import AUDIO_SAMPLE_RATE, Sound, Voice

HEADER_SIZE = 44
CHANNELS = 2
BITS_PER_SAMPLE = 16
PCM_FORMAT = 1


def _check_header(data: bytes) -> None:
    if len(data) < HEADER_SIZE:
        raise ValueError(f"WAV data must be at least {HEADER_SIZE} bytes, got {len(data)}")


def validate_wav(data: bytes) -> bool:
    """Return True for 16-bit stereo PCM at the mixer's rate; warn otherwise."""
    _check_header(data)
    (fmt, channels) = struct.unpack_from("<HH", data, 20)
    (rate,) = struct.unpack_from("<I", data, 24)
    (bits,) = struct.unpack_from("<H", data, 34)
    ok = (
        fmt == PCM_FORMAT
        and channels == CHANNELS
        and rate == AUDIO_SAMPLE_RATE
        and bits == BITS_PER_SAMPLE
    )
    if not ok:
        warnings.warn(
            f"WAV file should be signed 16-bit stereo PCM with {AUDIO_SAMPLE_RATE} Hz sample rate",
            stacklevel=2,
        )
    return ok


class WavVoice(Voice):
    """Plays interleaved samples once, then silence."""

    def __init__(self, samples):
        self.samples = samples
        self.position = 0
        self.speed = 1.0

    def render(self, count: int) -> tuple[list[int], bool]:
        chunk = list(self.samples[self.position:self.position + count])
        done = len(chunk) < count
        chunk.extend([0] * (count - len(chunk)))
        self.position += count
        return chunk, not done

    def seek(self, sec: float) -> None:
        self.position = int(sec * AUDIO_SAMPLE_RATE) * CHANNELS

    def set_speed(self, speed: float) -> None:
        """Record the requested tempo; WAV samples still play at their own rate."""
        self.speed = float(speed)


class WavSound(Sound):
    """The samples of a WAV file's data chunk."""

    def __init__(self, data: bytes):
        validate_wav(data)
        (size,) = struct.unpack_from("<I", data, 40)
        body = data[HEADER_SIZE:HEADER_SIZE + size]
        samples = array("h")
        samples.frombytes(body[: len(body) // 2 * 2])
        if sys.byteorder == "big":
            samples.byteswap()
        self.samples = samples

    def open(self) -> WavVoice:
        return WavVoice(self.samples)


def load_wav(data: bytes) -> WavSound:
    return WavSound(data)