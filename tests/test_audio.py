import pytest

from catboy.audio import INT16_MAX, INT16_MIN, AudioInstance, Mixer, Sound, Voice


class _ConstVoice(Voice):
    def __init__(self, value, renders):
        self.value = value
        self.renders = renders
        self.seeks = []
        self.speeds = []

    def render(self, count):
        self.renders -= 1
        return [self.value] * count, self.renders > 0

    def seek(self, sec):
        self.seeks.append(sec)

    def set_speed(self, speed):
        self.speeds.append(speed)


class _ConstSound(Sound):
    def __init__(self, value, renders=1000):
        self.value = value
        self.renders = renders

    def open(self):
        return _ConstVoice(self.value, self.renders)


def test_mix_sums_instances():
    mixer = Mixer()
    mixer.play(_ConstSound(100))
    mixer.play(_ConstSound(-30))
    assert mixer.mix(4) == [70, 70, 70, 70]


def test_mix_empty_is_silence():
    assert Mixer().mix(3) == [0, 0, 0]


def test_mix_clips_to_int16():
    mixer = Mixer()
    mixer.play(_ConstSound(30000))
    mixer.play(_ConstSound(30000))
    assert mixer.mix(2) == [INT16_MAX, INT16_MAX]
    low = Mixer()
    low.play(_ConstSound(-30000))
    low.play(_ConstSound(-30000))
    assert low.mix(1) == [INT16_MIN]


def test_paused_instance_is_silent_until_resumed():
    mixer = Mixer()
    inst = mixer.play(_ConstSound(5))
    inst.pause()
    assert mixer.mix(2) == [0, 0]
    inst.resume()
    assert mixer.mix(2) == [5, 5]


def test_stopped_instance_is_removed():
    mixer = Mixer()
    inst = mixer.play(_ConstSound(5))
    mixer.play(_ConstSound(1))
    inst.stop()
    assert mixer.mix(2) == [1, 1]
    assert len(mixer) == 1


def test_oneshot_plays_last_block_then_is_dropped():
    mixer = Mixer()
    mixer.play_oneshot(_ConstSound(7, renders=1))
    assert mixer.mix(2) == [7, 7]
    assert len(mixer) == 1
    assert mixer.mix(2) == [0, 0]
    assert len(mixer) == 0


def test_finished_regular_instance_stays_but_is_silent():
    mixer = Mixer()
    inst = mixer.play(_ConstSound(7, renders=1))
    mixer.mix(2)
    assert not inst.playing
    assert mixer.mix(2) == [0, 0]
    assert len(mixer) == 1


def test_seek_and_speed_forwarded():
    inst = AudioInstance(_ConstSound(0))
    inst.seek(1.5)
    inst.speed(2.0)
    assert inst.voice.seeks == [1.5]
    assert inst.voice.speeds == [2.0]


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        Mixer().mix(-1)