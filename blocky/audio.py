"""Sound registry that shares loaded audio between users of the same tag."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from blocky.logger import BLogger, LogLevel
from blocky.modules import ModuleWrapper

NO_CHANNEL_SPECIFIED = -1
LOOP_FOREVER = -1

_FUNC = "void AudioModule::AddAudio(const Audio&)"


class AudioLoadError(RuntimeError):
    """Raised when an audio file cannot be loaded."""


class Mixer(ABC):
    """Backend that loads sound chunks and plays them on channels."""

    @abstractmethod
    def load(self, path: str) -> Any:
        """Load a sound file; return a chunk, or None if it cannot be loaded."""

    @abstractmethod
    def play(self, chunk: Any, loops: int) -> int:
        """Play ``chunk`` on a free channel ``loops`` extra times (-1: forever); return the channel."""

    @abstractmethod
    def halt(self, channel: int) -> None:
        """Stop whatever is playing on ``channel``."""


@dataclass
class AudioFragment:
    """A loaded sound and the bookkeeping for its users."""

    path: str
    volume: int
    looping: bool
    chunk: Any = None
    playing_channel: int = 0
    instances: int = 0


class AudioModule(ModuleWrapper):
    """Loads each tagged sound once and plays or stops it by tag."""

    def __init__(self, mixer: Mixer, logger: BLogger | None = None) -> None:
        self._mixer = mixer
        self._logger = logger if logger is not None else BLogger(None, to_file=False)
        self._fragments: dict[str, AudioFragment] = {}

    def update(self, delta: float) -> None:
        """Audio needs no per-frame work."""

    def add_audio(self, tag: str, path: str, volume: int = 100,
                  looping: bool = False) -> None:
        """Load the sound for ``tag``, or count one more user if already loaded."""
        existing = self._fragments.get(tag)
        if existing is not None:
            existing.instances += 1
            return
        chunk = self._mixer.load(path)
        if chunk is None:
            message = f"Could not AddAudio, error: cannot load {path}"
            self._logger.log(LogLevel.ERROR, _FUNC, message)
            raise AudioLoadError(message)
        self._fragments[tag] = AudioFragment(path, volume, looping, chunk, instances=1)

    def remove_audio(self, tag: str) -> None:
        """Drop one user of ``tag``; the sound is unloaded when none remain."""
        fragment = self._fragments.get(tag)
        if fragment is None:
            return
        fragment.instances -= 1
        if fragment.instances <= 0:
            del self._fragments[tag]

    def play_audio(self, tag: str, loops: int = 0) -> None:
        """Play the sound for ``tag``; looping sounds always repeat forever."""
        fragment = self._fragments.get(tag)
        if fragment is None:
            return
        if fragment.looping:
            loops = LOOP_FOREVER
        fragment.playing_channel = self._mixer.play(fragment.chunk, loops)

    def stop_audio(self, tag: str) -> None:
        """Stop the channel the sound for ``tag`` was last started on."""
        fragment = self._fragments.get(tag)
        if fragment is None or fragment.playing_channel == NO_CHANNEL_SPECIFIED:
            return
        self._mixer.halt(fragment.playing_channel)
        fragment.playing_channel = NO_CHANNEL_SPECIFIED

    def fragment(self, tag: str) -> AudioFragment | None:
        """Return the fragment loaded for ``tag``, if any."""
        return self._fragments.get(tag)