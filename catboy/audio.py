"""Sound sources and the mixer that sums playing instances into 16-bit samples."""

from __future__ import annotations

from abc import ABC, abstractmethod

AUDIO_SAMPLE_RATE = 48000
INT16_MIN = -32768
INT16_MAX = 32767


class Voice(ABC):
    """The playback state of one sound being played."""

    speed: float = 1.0
    requested_position: float | None = None

    @abstractmethod
    def render(self, count: int) -> tuple[list[int], bool]:
        """Produce ``count`` samples; the flag is False once the sound has ended."""

    def seek(self, sec: float) -> None:
        """Record a seek request; sources that cannot seek keep playing as before."""
        self.requested_position = float(sec)

    def set_speed(self, speed: float) -> None:
        """Record the requested tempo; sources that cannot change tempo ignore it."""
        self.speed = float(speed)


class Sound(ABC):
    """A loaded sound that can be played any number of times at once."""

    @abstractmethod
    def open(self) -> Voice:
        """Start a new, independent playback of this sound."""


class AudioInstance:
    """A sound registered with a mixer, with its play, pause and stop state."""

    def __init__(self, sound: Sound, oneshot: bool = False):
        self.sound = sound
        self.voice = sound.open()
        self.oneshot = oneshot
        self.playing = True
        self.stopped = False

    def stop(self) -> None:
        """Mark for removal; the mixer drops it on its next pass."""
        self.stopped = True

    def pause(self) -> None:
        self.playing = False

    def resume(self) -> None:
        self.playing = True

    def seek(self, sec: float) -> None:
        self.voice.seek(sec)

    def speed(self, speed: float) -> None:
        self.voice.set_speed(speed)

    @property
    def finished(self) -> bool:
        return self.stopped or (self.oneshot and not self.playing)


class Mixer:
    """Sums every playing instance, clipping the result to the signed 16-bit range."""

    def __init__(self):
        self._instances: list[AudioInstance] = []

    def play(self, sound: Sound) -> AudioInstance:
        instance = AudioInstance(sound)
        self._instances.append(instance)
        return instance

    def play_oneshot(self, sound: Sound) -> AudioInstance:
        """Play a sound that is dropped as soon as it ends."""
        instance = AudioInstance(sound, oneshot=True)
        self._instances.append(instance)
        return instance

    def mix(self, count: int) -> list[int]:
        """Render ``count`` interleaved samples from all playing instances."""
        if count < 0:
            raise ValueError("count must not be negative")
        self._instances = [inst for inst in self._instances if not inst.finished]
        mixed = [0] * count
        for instance in self._instances:
            if not instance.playing:
                continue
            samples, still_playing = instance.voice.render(count)
            if not still_playing:
                instance.playing = False
            for i, sample in enumerate(samples[:count]):
                mixed[i] += sample
        return [min(INT16_MAX, max(INT16_MIN, value)) for value in mixed]

    def __len__(self) -> int:
        return len(self._instances)