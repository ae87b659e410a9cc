"""Exceptions raised by the scene framework."""


class SceneError(Exception):
    """Base class for every error the package raises."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class WindowInitError(SceneError):
    """The windowing or GL loading library could not be initialised."""


class WindowCreateError(SceneError):
    """A window could not be created."""