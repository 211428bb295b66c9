import pytest

from blocky.audio import AudioLoadError, AudioModule, Mixer, NO_CHANNEL_SPECIFIED
from blocky.logger import BLogger
from blocky.modules import ModuleManager


class FakeMixer(Mixer):
    def __init__(self, missing=()):
        self.missing = set(missing)
        self.loaded = []
        self.played = []
        self.halted = []
        self.next_channel = 4

    def load(self, path):
        self.loaded.append(path)
        if path in self.missing:
            return None
        return f"chunk:{path}"

    def play(self, chunk, loops):
        self.played.append((chunk, loops))
        return self.next_channel

    def halt(self, channel):
        self.halted.append(channel)


@pytest.fixture
def mixer():
    return FakeMixer(missing={"missing.mp3"})


@pytest.fixture
def audio(mixer):
    return AudioModule(mixer, BLogger(None, to_console=True, to_file=False))


def test_add_loads_once_and_counts_instances(audio, mixer):
    audio.add_audio("jingle", "jingle.mp3", 55, True)
    audio.add_audio("jingle", "jingle.mp3", 55, True)
    assert mixer.loaded == ["jingle.mp3"]
    fragment = audio.fragment("jingle")
    assert fragment.instances == 2
    assert fragment.volume == 55
    assert fragment.looping is True
    assert fragment.chunk == "chunk:jingle.mp3"


def test_remove_unloads_after_last_instance(audio):
    audio.add_audio("jingle", "jingle.mp3")
    audio.add_audio("jingle", "jingle.mp3")
    audio.remove_audio("jingle")
    assert audio.fragment("jingle").instances == 1
    audio.remove_audio("jingle")
    assert audio.fragment("jingle") is None
    audio.remove_audio("jingle")
    assert audio.fragment("jingle") is None


def test_failed_load_raises_and_logs(audio, capsys):
    with pytest.raises(AudioLoadError):
        audio.add_audio("bad", "missing.mp3")
    assert audio.fragment("bad") is None
    assert "Could not AddAudio" in capsys.readouterr().out


def test_play_uses_requested_loops(audio, mixer):
    audio.add_audio("shot", "shot.wav", looping=False)
    audio.play_audio("shot", 2)
    assert mixer.played == [("chunk:shot.wav", 2)]
    assert audio.fragment("shot").playing_channel == mixer.next_channel


def test_looping_sound_plays_forever(audio, mixer):
    audio.add_audio("music", "music.mp3", looping=True)
    audio.play_audio("music", 0)
    assert mixer.played == [("chunk:music.mp3", -1)]
    assert audio.fragment("music").playing_channel == mixer.next_channel


def test_play_unknown_tag_does_nothing(audio, mixer):
    audio.play_audio("nothing", 0)
    assert audio.fragment("nothing") is None
    assert mixer.played == []


def test_stop_halts_channel_once(audio, mixer):
    audio.add_audio("shot", "shot.wav")
    audio.play_audio("shot", 0)
    audio.stop_audio("shot")
    audio.stop_audio("shot")
    assert mixer.halted == [mixer.next_channel]
    assert audio.fragment("shot").playing_channel == NO_CHANNEL_SPECIFIED


def test_is_a_registrable_module(audio):
    manager = ModuleManager([audio])
    assert manager.get_module(AudioModule) is audio