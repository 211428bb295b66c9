import pytest

from blocky import keys
from blocky.input import InputModule, KeyboardEvent, MouseButtonEvent, QuitEvent
from blocky.keys import (
    KeyEvent,
    KeyInput,
    KeyState,
    MouseButtonState,
    MouseEvent,
    MouseInput,
)
from blocky.logger import BLogger
from blocky.timeutil import TimeUtil


def _quiet():
    return BLogger(None, to_console=False, to_file=False)


@pytest.fixture
def timer():
    return TimeUtil(clock=lambda: 0.0, logger=_quiet())


@pytest.fixture
def quits():
    return []


@pytest.fixture
def module(timer, quits):
    return InputModule(timer, lambda: quits.append(True), _quiet())


def test_key_listener_receives_states(module):
    received = []
    module.add_key_listener(KeyInput.KEY_A, object(), received.append)
    module.process_event(KeyboardEvent(ord("a"), True))
    module.process_event(KeyboardEvent(ord("a"), False))
    assert received == [KeyState.KEY_DOWN, KeyState.KEY_UP]


def test_other_key_does_not_reach_listener(module):
    received = []
    module.add_key_listener(KeyInput.KEY_A, object(), received.append)
    module.process_event(KeyboardEvent(ord("b"), True))
    assert received == []


def test_process_event_returns_engine_event(module):
    result = module.process_event(KeyboardEvent(ord("w"), True))
    assert result == KeyEvent(KeyInput.KEY_W, KeyState.KEY_DOWN)


def test_remove_key_listener_removes_only_that_owner(module):
    first_owner, second_owner = object(), object()
    first, second = [], []
    module.add_key_listener(KeyInput.KEY_SPACE, first_owner, first.append)
    module.add_key_listener(KeyInput.KEY_SPACE, second_owner, second.append)
    module.remove_key_listener(KeyInput.KEY_SPACE, first_owner)
    module.process_event(KeyboardEvent(keys.SDLK_SPACE, True))
    assert first == []
    assert second == [KeyState.KEY_DOWN]


def test_remove_key_listener_removes_one_entry_at_a_time(module):
    owner = object()
    received = []
    module.add_key_listener(KeyInput.KEY_Q, owner, received.append)
    module.add_key_listener(KeyInput.KEY_Q, owner, received.append)
    module.remove_key_listener(KeyInput.KEY_Q, owner)
    module.process_event(KeyboardEvent(ord("q"), True))
    assert received == [KeyState.KEY_DOWN]


def test_remove_unknown_owner_keeps_listeners(module):
    received = []
    module.add_key_listener(KeyInput.KEY_Z, object(), received.append)
    module.remove_key_listener(KeyInput.KEY_Z, object())
    module.process_event(KeyboardEvent(ord("z"), False))
    assert received == [KeyState.KEY_UP]


def test_mouse_listener_receives_state_and_position(module):
    received = []
    module.add_mouse_listener(MouseInput.BUTTON_RIGHT, object(),
                              lambda state, x, y: received.append((state, x, y)))
    result = module.process_event(MouseButtonEvent(keys.SDL_BUTTON_RIGHT, True, 12, 34))
    assert received == [(MouseButtonState.BUTTON_DOWN, 12, 34)]
    assert result == MouseEvent(MouseInput.BUTTON_RIGHT, MouseButtonState.BUTTON_DOWN, 12, 34)


def test_unknown_mouse_button_reaches_left_listener(module):
    received = []
    module.add_mouse_listener(MouseInput.BUTTON_LEFT, object(),
                              lambda state, x, y: received.append(state))
    module.process_event(MouseButtonEvent(9, False, 0, 0))
    assert received == [MouseButtonState.BUTTON_UP]


def test_remove_mouse_listener(module):
    owner = object()
    received = []
    module.add_mouse_listener(MouseInput.BUTTON_MIDDLE, owner,
                              lambda state, x, y: received.append(state))
    module.remove_mouse_listener(MouseInput.BUTTON_MIDDLE, owner)
    module.process_event(MouseButtonEvent(keys.SDL_BUTTON_MIDDLE, True, 1, 1))
    assert received == []


def test_end_toggles_fps_counter_on_press_only(module, timer):
    module.process_event(KeyboardEvent(keys.SDLK_END, True))
    assert timer.fps_counter_enabled is True
    module.process_event(KeyboardEvent(keys.SDLK_END, False))
    assert timer.fps_counter_enabled is True


def test_page_up_and_down_step_game_speed(module, timer):
    module.process_event(KeyboardEvent(keys.SDLK_PAGEUP, True))
    assert timer.game_speed == TimeUtil.GAME_SPEEDS[TimeUtil.DEFAULT_SPEED_INDEX + 1]
    module.process_event(KeyboardEvent(keys.SDLK_PAGEDOWN, True))
    module.process_event(KeyboardEvent(keys.SDLK_PAGEDOWN, True))
    assert timer.game_speed == TimeUtil.GAME_SPEEDS[TimeUtil.DEFAULT_SPEED_INDEX - 1]


def test_home_resets_game_speed(module, timer):
    module.process_event(KeyboardEvent(keys.SDLK_PAGEUP, True))
    module.process_event(KeyboardEvent(keys.SDLK_HOME, True))
    assert timer.game_speed == TimeUtil.GAME_SPEEDS[TimeUtil.DEFAULT_SPEED_INDEX]


def test_escape_requests_quit_and_reaches_listener(module, quits):
    received = []
    module.add_key_listener(KeyInput.KEY_ESCAPE, object(), received.append)
    module.process_event(KeyboardEvent(keys.SDLK_ESCAPE, True))
    assert quits == [True]
    assert module.quit_requested is True
    assert received == [KeyState.KEY_DOWN]


def test_escape_release_does_not_quit(module, quits):
    module.process_event(KeyboardEvent(keys.SDLK_ESCAPE, False))
    assert quits == []
    assert module.quit_requested is False


def test_quit_event(module, quits):
    assert module.process_event(QuitEvent()) is None
    assert quits == [True]


def test_poll_events_processes_in_order(module, quits):
    order = []
    module.add_key_listener(KeyInput.KEY_D, object(), lambda s: order.append(("key", s)))
    module.add_mouse_listener(MouseInput.BUTTON_LEFT, object(),
                              lambda s, x, y: order.append(("mouse", s)))
    produced = module.poll_events([
        KeyboardEvent(ord("d"), True),
        MouseButtonEvent(keys.SDL_BUTTON_LEFT, True, 5, 6),
        QuitEvent(),
    ])
    assert order == [("key", KeyState.KEY_DOWN), ("mouse", MouseButtonState.BUTTON_DOWN)]
    assert produced == [
        KeyEvent(KeyInput.KEY_D, KeyState.KEY_DOWN),
        MouseEvent(MouseInput.BUTTON_LEFT, MouseButtonState.BUTTON_DOWN, 5, 6),
    ]
    assert quits == [True]


def test_shared_time_util_used_when_none_given(quits):
    shared = TimeUtil.create_instance(clock=lambda: 0.0, logger=_quiet())
    module = InputModule(None, None, _quiet())
    module.process_event(KeyboardEvent(keys.SDLK_END, True))
    assert shared.fps_counter_enabled is True