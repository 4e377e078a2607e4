"""Procedural sound effects synthesised from sfxr parameter files."""

from __future__ import annotations

import copy
import math
import random
import struct
from dataclasses import dataclass

from .audio import INT16_MAX, INT16_MIN, Sound, Voice
from .binary_reader import BinaryStream

WAVE_SQUARE = 0
WAVE_SAWTOOTH = 1
WAVE_SINE = 2
WAVE_NOISE = 3

MASTER_VOL = 0.05
DEFAULT_SOUND_VOL = 0.5
PHASER_SIZE = 1024
NOISE_SIZE = 32
OVERSAMPLING = 8
OUTPUT_SCALE = 65536

_FLOAT = struct.Struct("<f")


@dataclass
class SfxrParams:
    """The tunable parameters of one sfxr sound."""

    wave_type: int = WAVE_SQUARE
    sound_vol: float = DEFAULT_SOUND_VOL
    base_freq: float = 0.0
    freq_limit: float = 0.0
    freq_ramp: float = 0.0
    freq_dramp: float = 0.0
    duty: float = 0.0
    duty_ramp: float = 0.0
    vib_strength: float = 0.0
    vib_speed: float = 0.0
    vib_delay: float = 0.0
    env_attack: float = 0.0
    env_sustain: float = 0.0
    env_decay: float = 0.0
    env_punch: float = 0.0
    filter_on: bool = False
    lpf_resonance: float = 0.0
    lpf_freq: float = 0.0
    lpf_ramp: float = 0.0
    hpf_freq: float = 0.0
    hpf_ramp: float = 0.0
    pha_offset: float = 0.0
    pha_ramp: float = 0.0
    repeat_speed: float = 0.0
    arp_speed: float = 0.0
    arp_mod: float = 0.0

    @classmethod
    def from_bytes(cls, data: bytes) -> "SfxrParams":
        """Parse a settings file; versions 100, 101 and 102 are understood."""
        stream = BinaryStream(data)

        def f() -> float:
            return _FLOAT.unpack(stream.read(_FLOAT.size))[0]

        params = cls()
        version = stream.read_int32()
        params.wave_type = stream.read_int32()
        if version == 102:
            params.sound_vol = f()
        params.base_freq = f()
        params.freq_limit = f()
        params.freq_ramp = f()
        if version >= 101:
            params.freq_dramp = f()
        params.duty = f()
        params.duty_ramp = f()
        params.vib_strength = f()
        params.vib_speed = f()
        params.vib_delay = f()
        params.env_attack = f()
        params.env_sustain = f()
        params.env_decay = f()
        params.env_punch = f()
        params.filter_on = stream.read(1)[0] != 0
        params.lpf_resonance = f()
        params.lpf_freq = f()
        params.lpf_ramp = f()
        params.hpf_freq = f()
        params.hpf_ramp = f()
        params.pha_offset = f()
        params.pha_ramp = f()
        params.repeat_speed = f()
        if version >= 101:
            params.arp_speed = f()
            params.arp_mod = f()
        return params


def _ratio(t: int, n: int) -> float:
    # A zero-length envelope stage counts as already complete.
    return 1.0 if n == 0 else t / n


class SfxrSynth:
    """The running state of the sfxr synthesiser for one playback."""

    def __init__(self, params: SfxrParams, rng: random.Random | None = None):
        self.params = params
        self.rng = rng if rng is not None else random.Random()
        self.master_vol = MASTER_VOL
        self.phaser_buffer = [0.0] * PHASER_SIZE
        self.noise_buffer = [0.0] * NOISE_SIZE
        self.env_length = [0, 0, 0]
        self.reset(False)

    def _frnd(self, x: float) -> float:
        return self.rng.random() * x

    def reset(self, restart: bool = False) -> None:
        """Recompute pitch state; without ``restart`` also reset filters and envelope."""
        p = self.params
        self.fperiod = 100.0 / (p.base_freq * p.base_freq + 0.001)
        self.period = int(self.fperiod)
        self.fmaxperiod = 100.0 / (p.freq_limit * p.freq_limit + 0.001)
        self.fslide = 1.0 - p.freq_ramp ** 3.0 * 0.01
        self.fdslide = -(p.freq_dramp ** 3.0) * 0.000001
        self.square_duty = 0.5 - p.duty * 0.5
        self.square_slide = -p.duty_ramp * 0.00005
        if p.arp_mod >= 0.0:
            self.arp_mod = 1.0 - p.arp_mod ** 2.0 * 0.9
        else:
            self.arp_mod = 1.0 + p.arp_mod ** 2.0 * 10.0
        self.arp_time = 0
        self.arp_limit = int((1.0 - p.arp_speed) ** 2.0 * 20000 + 32)
        if p.arp_speed == 1.0:
            self.arp_limit = 0
        if restart:
            return
        self.phase = 0
        self.fltp = 0.0
        self.fltdp = 0.0
        self.fltw = p.lpf_freq ** 3.0 * 0.1
        self.fltw_d = 1.0 + p.lpf_ramp * 0.0001
        self.fltdmp = min(0.8, 5.0 / (1.0 + p.lpf_resonance ** 2.0 * 20.0) * (0.01 + self.fltw))
        self.fltphp = 0.0
        self.flthp = p.hpf_freq ** 2.0 * 0.1
        self.flthp_d = 1.0 + p.hpf_ramp * 0.0003
        self.vib_phase = 0.0
        self.vib_speed = p.vib_speed ** 2.0 * 0.01
        self.vib_amp = p.vib_strength * 0.5
        self.env_vol = 0.0
        self.env_stage = 0
        self.env_time = 0
        self.env_length = [
            int(p.env_attack * p.env_attack * 100000.0),
            int(p.env_sustain * p.env_sustain * 100000.0),
            int(p.env_decay * p.env_decay * 100000.0),
        ]
        self.fphase = p.pha_offset ** 2.0 * 1020.0
        if p.pha_offset < 0.0:
            self.fphase = -self.fphase
        self.fdphase = p.pha_ramp ** 2.0 * 1.0
        if p.pha_ramp < 0.0:
            self.fdphase = -self.fdphase
        self.iphase = abs(int(self.fphase))
        self.ipp = 0
        self.phaser_buffer = [0.0] * PHASER_SIZE
        self.noise_buffer = [self._frnd(2.0) - 1.0 for _ in range(NOISE_SIZE)]
        self.rep_time = 0
        self.rep_limit = int((1.0 - p.repeat_speed) ** 2.0 * 20000 + 32)
        if p.repeat_speed == 0.0:
            self.rep_limit = 0

    def _clone(self) -> "SfxrSynth":
        twin = copy.copy(self)
        twin.phaser_buffer = list(self.phaser_buffer)
        twin.noise_buffer = list(self.noise_buffer)
        twin.env_length = list(self.env_length)
        return twin

    def _oscillator(self) -> float:
        wave = self.params.wave_type
        fp = self.phase / self.period
        if wave == WAVE_SQUARE:
            return 0.5 if fp < self.square_duty else -0.5
        if wave == WAVE_SAWTOOTH:
            return 1.0 - fp * 2
        if wave == WAVE_SINE:
            return math.sin(fp * 2 * math.pi)
        if wave == WAVE_NOISE:
            return self.noise_buffer[self.phase * NOISE_SIZE // self.period]
        return 0.0

    def _subsample(self) -> float:
        p = self.params
        self.phase += 1
        if self.phase >= self.period:
            self.phase %= self.period
            if p.wave_type == WAVE_NOISE:
                self.noise_buffer = [self._frnd(2.0) - 1.0 for _ in range(NOISE_SIZE)]
        sample = self._oscillator()
        pp = self.fltp
        self.fltw = min(0.1, max(0.0, self.fltw * self.fltw_d))
        if p.lpf_freq != 1.0:
            self.fltdp += (sample - self.fltp) * self.fltw
            self.fltdp -= self.fltdp * self.fltdmp
        else:
            self.fltp = sample
            self.fltdp = 0.0
        self.fltp += self.fltdp
        self.fltphp += self.fltp - pp
        self.fltphp -= self.fltphp * self.flthp
        sample = self.fltphp
        self.phaser_buffer[self.ipp & 1023] = sample
        sample += self.phaser_buffer[(self.ipp - self.iphase + 1024) & 1023]
        self.ipp = (self.ipp + 1) & 1023
        return sample * self.env_vol

    def synth(self, length: int) -> tuple[list[float], bool]:
        """Produce ``length`` mono samples in ``[-1, 1]``; the flag is False once finished."""
        if length < 0:
            raise ValueError("length must not be negative")
        buffer = [0.0] * length
        if self.env_stage >= 3:
            return buffer, False
        p = self.params
        playing = True
        for n in range(length):
            if not playing:
                break
            self.rep_time += 1
            if self.rep_limit != 0 and self.rep_time >= self.rep_limit:
                self.rep_time = 0
                self.reset(True)
            self.arp_time += 1
            if self.arp_limit != 0 and self.arp_time >= self.arp_limit:
                self.arp_limit = 0
                self.fperiod *= self.arp_mod
            self.fslide += self.fdslide
            self.fperiod *= self.fslide
            if self.fperiod > self.fmaxperiod:
                self.fperiod = self.fmaxperiod
                if p.freq_limit > 0.0:
                    playing = False
            rfperiod = self.fperiod
            if self.vib_amp > 0.0:
                self.vib_phase += self.vib_speed
                rfperiod = self.fperiod * (1.0 + math.sin(self.vib_phase) * self.vib_amp)
            self.period = max(8, int(rfperiod))
            self.square_duty = min(0.5, max(0.0, self.square_duty + self.square_slide))
            self.env_time += 1
            if self.env_time > self.env_length[self.env_stage]:
                self.env_time = 0
                self.env_stage += 1
                if self.env_stage == 3:
                    playing = False
            if self.env_stage == 0:
                self.env_vol = _ratio(self.env_time, self.env_length[0])
            elif self.env_stage == 1:
                self.env_vol = 1.0 + (1.0 - _ratio(self.env_time, self.env_length[1])) * 2.0 * p.env_punch
            elif self.env_stage == 2:
                self.env_vol = 1.0 - _ratio(self.env_time, self.env_length[2])
            self.fphase += self.fdphase
            self.iphase = min(1023, abs(int(self.fphase)))
            if self.flthp_d != 0.0:
                self.flthp = min(0.1, max(0.00001, self.flthp * self.flthp_d))
            ssample = sum(self._subsample() for _ in range(OVERSAMPLING))
            ssample = ssample / OVERSAMPLING * self.master_vol
            ssample *= 2.0 * p.sound_vol
            buffer[n] = min(1.0, max(-1.0, ssample))
        return buffer, playing


class SfxrVoice(Voice):
    """Renders a synthesiser as interleaved stereo 16-bit samples."""

    def __init__(self, synth: SfxrSynth):
        self.synth = synth
        self.speed = 1.0
        self.requested_position = None

    def render(self, count: int) -> tuple[list[int], bool]:
        mono, playing = self.synth.synth(count // 2)
        out: list[int] = []
        for sample in mono:
            value = min(INT16_MAX, max(INT16_MIN, int(sample * OUTPUT_SCALE)))
            out.extend((value, value))
        out.extend([0] * (count - len(out)))
        return out, playing

    def seek(self, sec: float) -> None:
        """Record the request; synthesised effects keep playing from where they are."""
        self.requested_position = float(sec)

    def set_speed(self, speed: float) -> None:
        """Record the requested tempo; synthesised effects play at a fixed speed."""
        self.speed = float(speed)


class SfxrSound(Sound):
    """An sfxr effect; every playback starts from the same prepared state."""

    def __init__(self, params: SfxrParams, rng: random.Random | None = None):
        self.params = params
        self._template = SfxrSynth(params, rng)

    def open(self) -> SfxrVoice:
        return SfxrVoice(self._template._clone())


def load_sfxr(data: bytes, rng: random.Random | None = None) -> SfxrSound:
    return SfxrSound(SfxrParams.from_bytes(data), rng)