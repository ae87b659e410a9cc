"""Figures and the strategies that draw, update and drive them."""

from __future__ import annotations

from abc import ABC, abstractmethod


class FigureDrawer(ABC):
    """Renders a figure."""

    @abstractmethod
    def draw(self, figure: "Figure") -> None:
        """Render ``figure``."""


class FigureUpdater(ABC):
    """Changes a figure as time passes."""

    @abstractmethod
    def update(self, figure: "Figure", timestamp: int) -> None:
        """Bring ``figure`` to its state at ``timestamp`` (nanoseconds)."""


class InputProcessor(ABC):
    """Reacts to user input once per frame."""

    @abstractmethod
    def process(self) -> None:
        """Inspect the input state and act on it."""


class Figure:
    """A scene object with an optional drawer and updater."""

    def __init__(
        self,
        drawer: FigureDrawer | None = None,
        updater: FigureUpdater | None = None,
    ) -> None:
        self.drawer = drawer
        self.updater = updater

    def draw(self) -> None:
        """Render the figure through its drawer, if it has one."""
        if self.drawer is not None:
            self.drawer.draw(self)

    def update(self, timestamp: int) -> None:
        """Update the figure through its updater, if it has one."""
        if self.updater is not None:
            self.updater.update(self, timestamp)