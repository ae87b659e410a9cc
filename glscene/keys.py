"""Keyboard key codes understood by the scene windows."""

from __future__ import annotations

from enum import IntEnum


class Key(IntEnum):
    """Key codes, numbered as in GLFW."""

    ZERO = 48
    ONE = 49
    Q = 81
    ESCAPE = 256
    RIGHT = 262
    LEFT = 263
    DOWN = 264
    UP = 265
    FRONT = 265
    BACK = 264


_CLOSE_KEYS = frozenset({Key.ESCAPE, Key.Q})


def is_close_key(key: int) -> bool:
    """Return True for the keys that close a window when pressed."""
    return key in _CLOSE_KEYS