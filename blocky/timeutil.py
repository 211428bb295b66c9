"""Frame timing, frame rate and adjustable game speed."""

from __future__ import annotations

import time
from collections.abc import Callable

from blocky.logger import BLogger, LogLevel

_FUNC = "TimeUtil::TimeUtil()"


class TimeUtil:
    """Measures frame deltas and scales them by the current game speed."""

    GAME_SPEEDS = (0.125, 0.25, 0.5, 1.0, 1.5, 2.0, 5.0, 10.0)
    DEFAULT_SPEED_INDEX = 3

    _instance: "TimeUtil | None" = None

    def __init__(self, clock: Callable[[], float] | None = None,
                 logger: BLogger | None = None) -> None:
        self._clock = clock if clock is not None else time.perf_counter
        self._logger = logger if logger is not None else BLogger(None, to_file=False)
        self._start_time = self._clock()
        self._last_frame_time = self._clock()
        self._raw_delta_time = 0.0
        self._scaled_delta_time = 0.0
        self._speed_index = self.DEFAULT_SPEED_INDEX
        self._game_speed = self.GAME_SPEEDS[self._speed_index]
        self._show_fps = False

    @classmethod
    def create_instance(cls, clock=None, logger=None) -> "TimeUtil":
        """Create the shared instance, replacing any earlier one."""
        cls._instance = cls(clock, logger)
        return cls._instance

    @classmethod
    def get_instance(cls) -> "TimeUtil":
        """Return the shared instance."""
        if cls._instance is None:
            raise RuntimeError("TimeUtil instance has not been created")
        return cls._instance

    def reset(self) -> None:
        """Restart the clocks and clear the deltas; the game speed is kept."""
        self._start_time = self._clock()
        self._last_frame_time = self._clock()
        self._raw_delta_time = 0.0
        self._scaled_delta_time = 0.0

    def calculate_delta_time(self) -> float:
        """Measure the time since the last call and return it scaled by the speed."""
        now = self._clock()
        self._raw_delta_time = now - self._last_frame_time
        self._last_frame_time = now
        self._scaled_delta_time = self._raw_delta_time * self._game_speed
        return self._scaled_delta_time

    @property
    def scaled_delta_time(self) -> float:
        return self._scaled_delta_time

    @property
    def elapsed_time(self) -> float:
        return self._clock() - self._start_time

    @property
    def fps(self) -> int:
        return int(1.0 / self._raw_delta_time) if self._raw_delta_time > 0.0 else 0

    def toggle_fps_counter(self) -> None:
        self._logger.log(LogLevel.DEBUG, _FUNC,
                         f"Toggling fps counter to {int(self._show_fps)}")
        self._show_fps = not self._show_fps

    @property
    def fps_counter_enabled(self) -> bool:
        return self._show_fps

    def set_game_speed(self, speed: float) -> None:
        """Set an arbitrary positive game speed."""
        if speed <= 0.0:
            self._logger.log(LogLevel.ERROR, _FUNC,
                             "Invalid game speed. Speed must be greater than 0.")
            raise ValueError("Invalid game speed. Speed must be greater than 0.")
        self._game_speed = speed
        self._logger.log(LogLevel.DEBUG, _FUNC, f"Game speed set to {speed:f}x")

    @property
    def game_speed(self) -> float:
        return self._game_speed

    def increase_game_speed(self) -> None:
        """Step up to the next preset speed, if there is one."""
        if self._speed_index < len(self.GAME_SPEEDS) - 1:
            self._speed_index += 1
            self._game_speed = self.GAME_SPEEDS[self._speed_index]
            self._logger.log(LogLevel.DEBUG, _FUNC,
                             f"Game speed increased to: {self._game_speed:f}x")

    def decrease_game_speed(self) -> None:
        """Step down to the previous preset speed, if there is one."""
        if self._speed_index > 0:
            self._speed_index -= 1
            self._game_speed = self.GAME_SPEEDS[self._speed_index]
            self._logger.log(LogLevel.DEBUG, _FUNC,
                             f"Game speed decreased to: {self._game_speed:f}x")

    def reset_game_speed(self) -> None:
        """Return to the default preset speed."""
        self._speed_index = self.DEFAULT_SPEED_INDEX
        self._game_speed = self.GAME_SPEEDS[self._speed_index]
        self._logger.log(LogLevel.DEBUG, _FUNC,
                         f"Game speed reset to default: {self._game_speed:f}x")