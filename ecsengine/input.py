"""Keyboard and mouse state fed by window events."""

from __future__ import annotations

from enum import IntEnum

from ecsengine.vector import Vector2


class Key(IntEnum):
    W = 87
    A = 65
    S = 83
    D = 68


class Action(IntEnum):
    RELEASE = 0
    PRESS = 1
    REPEAT = 2


class Keyboard:
    """Tracks which keys are held down."""

    def __init__(self) -> None:
        self._keys: dict[int, bool] = {}

    def handle_key(self, key: int, action: int) -> None:
        """Record a key event; any action but release marks the key pressed."""
        self._keys[int(key)] = Action(action) is not Action.RELEASE

    def is_key_pressed(self, key: int) -> bool:
        return self._keys.get(int(key), False)


class Mouse:
    """Tracks the cursor position."""

    def __init__(self) -> None:
        self.position = Vector2()

    def handle_cursor(self, x: float, y: float) -> None:
        self.position = Vector2(float(x), float(y))

    def get_position(self) -> Vector2:
        return self.position