"""Keyboard and cursor state tracking with named callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Optional

from yukiengine.errors import (
    InputCallbackExistsError,
    InputCallbackNotExistError,
    InputKeyCodeInvalidError,
    InputUndefinedCallbackError,
    raise_error,
)


def _key_codes() -> dict[str, int]:
    codes = {
        "KEY_SPACE": 32,
        "KEY_APOSTROPHE": 39,
        "KEY_COMMA": 44,
        "KEY_MINUS": 45,
        "KEY_PERIOD": 46,
        "KEY_SLASH": 47,
        "KEY_SEMICOLON": 59,
        "KEY_EQUAL": 61,
        "KEY_ESCAPE": 256,
        "KEY_ENTER": 257,
        "KEY_TAB": 258,
        "KEY_BACKSPACE": 259,
        "KEY_INSERT": 260,
        "KEY_DELETE": 261,
        "KEY_RIGHT": 262,
        "KEY_LEFT": 263,
        "KEY_DOWN": 264,
        "KEY_UP": 265,
        "KEY_PAGE_UP": 266,
        "KEY_PAGE_DOWN": 267,
        "KEY_HOME": 268,
        "KEY_END": 269,
        "KEY_LEFT_SHIFT": 340,
        "KEY_LEFT_CONTROL": 341,
        "KEY_LEFT_ALT": 342,
        "KEY_RIGHT_SHIFT": 344,
        "KEY_RIGHT_CONTROL": 345,
        "KEY_RIGHT_ALT": 346,
        "KEY_MENU": 348,
        "KEY_LAST": 348,
    }
    codes.update({f"KEY_{digit}": 48 + digit for digit in range(10)})
    codes.update({f"KEY_{chr(letter)}": letter for letter in range(ord("A"), ord("Z") + 1)})
    codes.update({f"KEY_F{n}": 289 + n for n in range(1, 13)})
    return codes


KeyCode = IntEnum("KeyCode", _key_codes(), module=__name__)
KeyCode.__doc__ = "Keyboard key codes."


class KeyState(IntEnum):
    """What a key is doing."""

    RELEASE = 0
    PRESS = 1
    REPEAT = 2


@dataclass
class KeyStatus:
    """The last known state of one key."""

    code: int = 0
    state: KeyState = KeyState.RELEASE
    modifiers: int = 0
    scancode: int = 0


@dataclass
class MouseStatus:
    """Cursor position and its change since the previous event."""

    x: float = 0.0
    y: float = 0.0
    vx: float = 0.0
    vy: float = 0.0


@dataclass
class MouseLock:
    """Where the cursor is held, and whether it is held."""

    lx: int = 0
    ly: int = 0
    lock: bool = False


KeyboardCallback = Callable[[int, int, int, int], None]
CursorCallback = Callable[[int, int], None]

_KEY_COUNT = KeyCode.KEY_LAST + 1


class InputController:
    """Keeps key and cursor state and fans events out to named callbacks."""

    def __init__(self, set_cursor_pos: Optional[Callable[[int, int], None]] = None) -> None:
        self._set_cursor_pos = set_cursor_pos
        self._key_callbacks: dict[str, Optional[KeyboardCallback]] = {}
        self._cursor_callbacks: dict[str, Optional[CursorCallback]] = {}
        self._key_statuses = [KeyStatus() for _ in range(_KEY_COUNT)]
        self.mouse_status = MouseStatus()
        self.previous_mouse_status = MouseStatus()
        self.mouse_lock = MouseLock()

    def add_keyboard_callback(self, name: str, callback: Optional[KeyboardCallback]) -> None:
        if name in self._key_callbacks:
            raise_error(InputCallbackExistsError)
        self._key_callbacks[name] = callback

    def add_cursor_callback(self, name: str, callback: Optional[CursorCallback]) -> None:
        if name in self._cursor_callbacks:
            raise_error(InputCallbackExistsError)
        self._cursor_callbacks[name] = callback

    def remove_keyboard_callback(self, name: str) -> None:
        if name not in self._key_callbacks:
            raise_error(InputCallbackNotExistError)
        del self._key_callbacks[name]

    def remove_cursor_callback(self, name: str) -> None:
        if name not in self._cursor_callbacks:
            raise_error(InputCallbackNotExistError)
        del self._cursor_callbacks[name]

    def execute_key_callbacks(self, key: int, scancode: int, action: int, modifiers: int) -> None:
        """Record a key event and run the keyboard callbacks in name order."""
        if key < 0 or key > KeyCode.KEY_LAST:
            raise_error(InputKeyCodeInvalidError)
        status = self._key_statuses[key]
        status.state = KeyState(action)
        status.modifiers = modifiers
        status.scancode = scancode
        for _, callback in sorted(self._key_callbacks.items()):
            if callback is None:
                raise_error(InputUndefinedCallbackError)
            callback(key, scancode, action, modifiers)

    def execute_cursor_callbacks(self, x: int, y: int) -> None:
        """Record a cursor move and run the cursor callbacks in name order."""
        current = self.mouse_status
        self.previous_mouse_status = MouseStatus(current.x, current.y)
        self.mouse_status = MouseStatus(x, y, x - current.x, y - current.y)
        if self.mouse_lock.lock and self._set_cursor_pos is not None:
            self._set_cursor_pos(self.mouse_lock.lx, self.mouse_lock.ly)
        for _, callback in sorted(self._cursor_callbacks.items()):
            if callback is None:
                raise_error(InputUndefinedCallbackError)
            callback(x, y)

    def lock_mouse(self, x: int, y: int) -> None:
        self.mouse_lock = MouseLock(x, y, True)

    def unlock_mouse(self) -> None:
        self.mouse_lock.lock = False

    @property
    def is_mouse_locked(self) -> bool:
        return self.mouse_lock.lock

    def key_status(self, key: int) -> KeyStatus:
        """The live status record of ``key``."""
        return self._key_statuses[int(key)]

    def mouse_position(self) -> tuple[float, float]:
        return (self.mouse_status.x, self.mouse_status.y)

    def mouse_velocity(self) -> tuple[float, float]:
        return (self.mouse_status.vx, self.mouse_status.vy)

    def _held(self, *keys: KeyCode) -> bool:
        return any(self.key_status(key).state != KeyState.RELEASE for key in keys)

    def horizontal_axis(self) -> int:
        """-1 for left (A or arrow), 1 for right (D or arrow), otherwise 0."""
        if self._held(KeyCode.KEY_A, KeyCode.KEY_LEFT):
            return -1
        if self._held(KeyCode.KEY_D, KeyCode.KEY_RIGHT):
            return 1
        return 0

    def vertical_axis(self) -> int:
        """-1 for down (S or arrow), 1 for up (W or arrow), otherwise 0."""
        if self._held(KeyCode.KEY_S, KeyCode.KEY_DOWN):
            return -1
        if self._held(KeyCode.KEY_W, KeyCode.KEY_UP):
            return 1
        return 0

    def create(self) -> None:
        """Reset every key below the last key code to released."""
        for code in range(KeyCode.KEY_LAST):
            self._key_statuses[code] = KeyStatus(code=code)

    def destroy(self) -> None:
        """Let go of the cursor; callbacks stay registered for the next create."""
        self.mouse_lock = MouseLock()