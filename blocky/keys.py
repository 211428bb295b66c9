"""Engine key and mouse identifiers, and their mapping from SDL codes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

_SCANCODE_MASK = 1 << 30


def _from_scancode(scancode: int) -> int:
    return scancode | _SCANCODE_MASK


# SDL keycodes: printable keys use their character, the rest are scancode based.
SDLK_RETURN = 13
SDLK_ESCAPE = 27
SDLK_TAB = 9
SDLK_SPACE = 32
SDLK_0 = ord("0")
SDLK_1 = ord("1")
SDLK_2 = ord("2")
SDLK_3 = ord("3")
SDLK_4 = ord("4")
SDLK_5 = ord("5")
SDLK_6 = ord("6")
SDLK_7 = ord("7")
SDLK_8 = ord("8")
SDLK_9 = ord("9")
SDLK_CAPSLOCK = _from_scancode(57)
SDLK_F1 = _from_scancode(58)
SDLK_F2 = _from_scancode(59)
SDLK_F3 = _from_scancode(60)
SDLK_F4 = _from_scancode(61)
SDLK_F5 = _from_scancode(62)
SDLK_F6 = _from_scancode(63)
SDLK_F7 = _from_scancode(64)
SDLK_F8 = _from_scancode(65)
SDLK_F9 = _from_scancode(66)
SDLK_F10 = _from_scancode(67)
SDLK_F11 = _from_scancode(68)
SDLK_F12 = _from_scancode(69)
SDLK_HOME = _from_scancode(74)
SDLK_PAGEUP = _from_scancode(75)
SDLK_END = _from_scancode(77)
SDLK_PAGEDOWN = _from_scancode(78)
SDLK_RIGHT = _from_scancode(79)
SDLK_LEFT = _from_scancode(80)
SDLK_DOWN = _from_scancode(81)
SDLK_UP = _from_scancode(82)
SDLK_KP_DIVIDE = _from_scancode(84)
SDLK_KP_MULTIPLY = _from_scancode(85)
SDLK_KP_MINUS = _from_scancode(86)
SDLK_KP_PLUS = _from_scancode(87)
SDLK_KP_ENTER = _from_scancode(88)
SDLK_KP_1 = _from_scancode(89)
SDLK_KP_2 = _from_scancode(90)
SDLK_KP_3 = _from_scancode(91)
SDLK_KP_4 = _from_scancode(92)
SDLK_KP_5 = _from_scancode(93)
SDLK_KP_6 = _from_scancode(94)
SDLK_KP_7 = _from_scancode(95)
SDLK_KP_8 = _from_scancode(96)
SDLK_KP_9 = _from_scancode(97)
SDLK_KP_0 = _from_scancode(98)
SDLK_KP_PERIOD = _from_scancode(99)
SDLK_KP_COMMA = _from_scancode(133)
SDLK_LCTRL = _from_scancode(224)
SDLK_LSHIFT = _from_scancode(225)
SDLK_RCTRL = _from_scancode(228)
SDLK_RSHIFT = _from_scancode(229)

SDL_BUTTON_LEFT = 1
SDL_BUTTON_MIDDLE = 2
SDL_BUTTON_RIGHT = 3


class _Numbered(Enum):
    """Enum whose automatic values count up from zero."""

    @staticmethod
    def _generate_next_value_(name, start, count, last_values):
        return count


class KeyInput(_Numbered):
    """Keys the engine knows about."""

    KEY_UNKNOWN = auto()
    KEY_A = auto()
    KEY_B = auto()
    KEY_C = auto()
    KEY_D = auto()
    KEY_E = auto()
    KEY_F = auto()
    KEY_G = auto()
    KEY_H = auto()
    KEY_I = auto()
    KEY_J = auto()
    KEY_K = auto()
    KEY_L = auto()
    KEY_M = auto()
    KEY_N = auto()
    KEY_O = auto()
    KEY_P = auto()
    KEY_Q = auto()
    KEY_R = auto()
    KEY_S = auto()
    KEY_T = auto()
    KEY_U = auto()
    KEY_V = auto()
    KEY_W = auto()
    KEY_X = auto()
    KEY_Y = auto()
    KEY_Z = auto()
    KEY_SPACE = auto()
    KEY_ENTER = auto()
    KEY_ESCAPE = auto()
    KEY_UP = auto()
    KEY_DOWN = auto()
    KEY_LEFT = auto()
    KEY_RIGHT = auto()
    KEY_F1 = auto()
    KEY_F2 = auto()
    KEY_F3 = auto()
    KEY_F4 = auto()
    KEY_F5 = auto()
    KEY_F6 = auto()
    KEY_F7 = auto()
    KEY_F8 = auto()
    KEY_F9 = auto()
    KEY_F10 = auto()
    KEY_F11 = auto()
    KEY_F12 = auto()
    KEY_1 = auto()
    KEY_2 = auto()
    KEY_3 = auto()
    KEY_4 = auto()
    KEY_5 = auto()
    KEY_6 = auto()
    KEY_7 = auto()
    KEY_8 = auto()
    KEY_9 = auto()
    KEY_0 = auto()
    KEY_NUMPAD_1 = auto()
    KEY_NUMPAD_2 = auto()
    KEY_NUMPAD_3 = auto()
    KEY_NUMPAD_4 = auto()
    KEY_NUMPAD_5 = auto()
    KEY_NUMPAD_6 = auto()
    KEY_NUMPAD_7 = auto()
    KEY_NUMPAD_8 = auto()
    KEY_NUMPAD_9 = auto()
    KEY_NUMPAD_0 = auto()
    KEY_NUMPAD_ENTER = auto()
    KEY_NUMPAD_PLUS = auto()
    KEY_NUMPAD_MINUS = auto()
    KEY_NUMPAD_MULTIPLY = auto()
    KEY_NUMPAD_DIVIDE = auto()
    KEY_NUMPAD_PERIOD = auto()
    KEY_NUMPAD_COMMA = auto()
    KEY_LCTRL = auto()
    KEY_RCTRL = auto()
    KEY_LSHIFT = auto()
    KEY_RSHIFT = auto()
    KEY_TAB = auto()
    KEY_CAPSLOCK = auto()


class KeyState(_Numbered):
    """Whether a key went up or down."""

    KEY_UP = auto()
    KEY_DOWN = auto()


class MouseInput(_Numbered):
    """Mouse buttons the engine knows about."""

    BUTTON_LEFT = auto()
    BUTTON_RIGHT = auto()
    BUTTON_MIDDLE = auto()


class MouseButtonState(_Numbered):
    """Whether a mouse button went up or down."""

    BUTTON_UP = auto()
    BUTTON_DOWN = auto()


@dataclass(frozen=True)
class KeyEvent:
    """A key changing state."""

    key: KeyInput
    state: KeyState


@dataclass(frozen=True)
class MouseEvent:
    """A mouse button changing state at a screen position."""

    button: MouseInput
    state: MouseButtonState
    x: int
    y: int


_KEY_MAP: dict[int, KeyInput] = {
    **{ord(c): KeyInput[f"KEY_{c.upper()}"] for c in "abcdefghijklmnopqrstuvwxyz"},
    **{ord(d): KeyInput[f"KEY_{d}"] for d in "0123456789"},
    SDLK_SPACE: KeyInput.KEY_SPACE,
    SDLK_RETURN: KeyInput.KEY_ENTER,
    SDLK_ESCAPE: KeyInput.KEY_ESCAPE,
    SDLK_UP: KeyInput.KEY_UP,
    SDLK_DOWN: KeyInput.KEY_DOWN,
    SDLK_LEFT: KeyInput.KEY_LEFT,
    SDLK_RIGHT: KeyInput.KEY_RIGHT,
    SDLK_F1: KeyInput.KEY_F1,
    SDLK_F2: KeyInput.KEY_F2,
    SDLK_F3: KeyInput.KEY_F3,
    SDLK_F4: KeyInput.KEY_F4,
    SDLK_F5: KeyInput.KEY_F5,
    SDLK_F6: KeyInput.KEY_F6,
    SDLK_F7: KeyInput.KEY_F7,
    SDLK_F8: KeyInput.KEY_F8,
    SDLK_F9: KeyInput.KEY_F9,
    SDLK_F10: KeyInput.KEY_F10,
    SDLK_F11: KeyInput.KEY_F11,
    SDLK_F12: KeyInput.KEY_F12,
    SDLK_KP_1: KeyInput.KEY_NUMPAD_1,
    SDLK_KP_2: KeyInput.KEY_NUMPAD_2,
    SDLK_KP_3: KeyInput.KEY_NUMPAD_3,
    SDLK_KP_4: KeyInput.KEY_NUMPAD_4,
    SDLK_KP_5: KeyInput.KEY_NUMPAD_5,
    SDLK_KP_6: KeyInput.KEY_NUMPAD_6,
    SDLK_KP_7: KeyInput.KEY_NUMPAD_7,
    SDLK_KP_8: KeyInput.KEY_NUMPAD_8,
    SDLK_KP_9: KeyInput.KEY_NUMPAD_9,
    SDLK_KP_0: KeyInput.KEY_NUMPAD_0,
    SDLK_KP_ENTER: KeyInput.KEY_NUMPAD_ENTER,
    SDLK_KP_PLUS: KeyInput.KEY_NUMPAD_PLUS,
    SDLK_KP_MINUS: KeyInput.KEY_NUMPAD_MINUS,
    SDLK_KP_MULTIPLY: KeyInput.KEY_NUMPAD_MULTIPLY,
    SDLK_KP_DIVIDE: KeyInput.KEY_NUMPAD_DIVIDE,
    SDLK_KP_PERIOD: KeyInput.KEY_NUMPAD_PERIOD,
    SDLK_KP_COMMA: KeyInput.KEY_NUMPAD_COMMA,
    SDLK_LCTRL: KeyInput.KEY_LCTRL,
    SDLK_RCTRL: KeyInput.KEY_RCTRL,
    SDLK_LSHIFT: KeyInput.KEY_LSHIFT,
    SDLK_RSHIFT: KeyInput.KEY_RSHIFT,
    SDLK_TAB: KeyInput.KEY_TAB,
    SDLK_CAPSLOCK: KeyInput.KEY_CAPSLOCK,
}

_BUTTON_MAP: dict[int, MouseInput] = {
    SDL_BUTTON_LEFT: MouseInput.BUTTON_LEFT,
    SDL_BUTTON_RIGHT: MouseInput.BUTTON_RIGHT,
    SDL_BUTTON_MIDDLE: MouseInput.BUTTON_MIDDLE,
}


def sdl_key_to_key_input(keycode: int) -> KeyInput:
    """Map an SDL keycode to a key, or ``KEY_UNKNOWN``."""
    return _KEY_MAP.get(keycode, KeyInput.KEY_UNKNOWN)


def sdl_button_to_mouse_input(button: int) -> MouseInput:
    """Map an SDL mouse button; unrecognised buttons count as the left one."""
    return _BUTTON_MAP.get(button, MouseInput.BUTTON_LEFT)