"""Dispatch of keyboard and mouse events to registered listeners."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Union

from blocky import keys
from blocky.keys import (
    KeyEvent,
    KeyInput,
    KeyState,
    MouseButtonState,
    MouseEvent,
    MouseInput,
    sdl_button_to_mouse_input,
    sdl_key_to_key_input,
)
from blocky.logger import BLogger, LogLevel
from blocky.timeutil import TimeUtil

_FUNC = "void InputModule::PollEvents()"

KeyListener = Callable[[KeyState], None]
MouseListener = Callable[[MouseButtonState, int, int], None]


@dataclass(frozen=True)
class KeyboardEvent:
    """A raw key press or release, identified by its SDL keycode."""

    keycode: int
    pressed: bool


@dataclass(frozen=True)
class MouseButtonEvent:
    """A raw mouse button press or release at a window position."""

    button: int
    pressed: bool
    x: int
    y: int


@dataclass(frozen=True)
class QuitEvent:
    """A request to close the application."""


RawEvent = Union[KeyboardEvent, MouseButtonEvent, QuitEvent]


class InputModule:
    """Routes input events to per-key and per-button listeners."""

    def __init__(self, time_util: TimeUtil | None = None,
                 on_quit: Callable[[], None] | None = None,
                 logger: BLogger | None = None) -> None:
        self._time_util = time_util
        self._on_quit = on_quit
        self._logger = logger if logger is not None else BLogger(None, to_file=False)
        self._key_listeners: defaultdict[KeyInput, list[tuple[Any, KeyListener]]] = \
            defaultdict(list)
        self._mouse_listeners: defaultdict[MouseInput, list[tuple[Any, MouseListener]]] = \
            defaultdict(list)
        self.quit_requested = False

    def add_key_listener(self, key: KeyInput, owner: Any, listener: KeyListener) -> None:
        """Call ``listener`` with the key state whenever ``key`` changes."""
        self._key_listeners[key].append((owner, listener))

    def remove_key_listener(self, key: KeyInput, owner: Any) -> None:
        """Remove the first listener of ``owner`` on ``key``, if any."""
        self._remove_first(self._key_listeners[key], owner)

    def add_mouse_listener(self, button: MouseInput, owner: Any,
                           listener: MouseListener) -> None:
        """Call ``listener`` with state and position whenever ``button`` changes."""
        self._mouse_listeners[button].append((owner, listener))

    def remove_mouse_listener(self, button: MouseInput, owner: Any) -> None:
        """Remove the first listener of ``owner`` on ``button``, if any."""
        self._remove_first(self._mouse_listeners[button], owner)

    @staticmethod
    def _remove_first(listeners: list, owner: Any) -> None:
        for entry in listeners:
            if entry[0] is owner:
                listeners.remove(entry)
                return

    def _timer(self) -> TimeUtil:
        return self._time_util if self._time_util is not None else TimeUtil.get_instance()

    def _quit(self) -> None:
        self.quit_requested = True
        if self._on_quit is not None:
            self._on_quit()

    def process_event(self, event: RawEvent) -> KeyEvent | MouseEvent | None:
        """Handle one raw event and return the engine event it became, if any."""
        if isinstance(event, KeyboardEvent):
            return self._process_key(event)
        if isinstance(event, MouseButtonEvent):
            return self._process_mouse(event)
        if isinstance(event, QuitEvent):
            self._quit()
        return None

    def _process_key(self, event: KeyboardEvent) -> KeyEvent:
        state = KeyState.KEY_DOWN if event.pressed else KeyState.KEY_UP
        key = sdl_key_to_key_input(event.keycode)
        self._logger.log(
            LogLevel.DEBUG, _FUNC,
            f"Processing key event: {key.value}, state: {'down' if event.pressed else 'up'}",
        )
        for _, listener in list(self._key_listeners.get(key, ())):
            listener(state)

        if event.pressed:
            if event.keycode == keys.SDLK_END:
                self._timer().toggle_fps_counter()
            elif event.keycode == keys.SDLK_PAGEUP:
                self._timer().increase_game_speed()
            elif event.keycode == keys.SDLK_HOME:
                self._timer().reset_game_speed()
            elif event.keycode == keys.SDLK_PAGEDOWN:
                self._timer().decrease_game_speed()
            elif event.keycode == keys.SDLK_ESCAPE:
                self._quit()
        return KeyEvent(key, state)

    def _process_mouse(self, event: MouseButtonEvent) -> MouseEvent:
        state = MouseButtonState.BUTTON_DOWN if event.pressed else MouseButtonState.BUTTON_UP
        button = sdl_button_to_mouse_input(event.button)
        self._logger.log(
            LogLevel.DEBUG, _FUNC,
            f"Processing mouse event: button {button.value}, state: "
            f"{'down' if event.pressed else 'up'}, position: ({event.x}, {event.y})",
        )
        for _, listener in list(self._mouse_listeners.get(button, ())):
            listener(state, event.x, event.y)
        return MouseEvent(button, state, event.x, event.y)

    def poll_events(self, events: Iterable[RawEvent]) -> list[KeyEvent | MouseEvent]:
        """Handle every event in order; return the key and mouse events produced."""
        produced = []
        for event in events:
            result = self.process_event(event)
            if result is not None:
                produced.append(result)
        return produced