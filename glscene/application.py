"""Main loop that drives input processors and figures."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Protocol

from glscene.figure import Figure, InputProcessor
from glscene.timing import Timer


class _FrameWindow(Protocol):
    def start_iteration(self) -> None: ...

    def end_iteration(self) -> None: ...

    def should_not_close(self) -> bool: ...


class Application(ABC):
    """Runs frames until :meth:`keep_going` says to stop."""

    def __init__(self, timer: Timer | None = None) -> None:
        self.timer = timer if timer is not None else Timer()
        self.figures: list[Figure] = []
        self.input_processors: list[InputProcessor] = []

    def set_figures(self, figures: Iterable[Figure]) -> None:
        self.figures = list(figures)

    def set_input_processors(self, processors: Iterable[InputProcessor]) -> None:
        self.input_processors = list(processors)

    def launch(self) -> None:
        """Run frames until the application is told to stop."""
        while self.keep_going():
            self.iterate()

    def iterate(self) -> None:
        """Run one frame: process input, then update and draw each figure."""
        timestamp = self.timer.now()
        for processor in self.input_processors:
            processor.process()
        for figure in self.figures:
            figure.update(timestamp)
            figure.draw()

    @abstractmethod
    def keep_going(self) -> bool:
        """Return False to end :meth:`launch`."""


class WindowApplication(Application):
    """An application whose frames are framed by a window's buffer swaps."""

    def __init__(
        self,
        window: _FrameWindow,
        figures: Iterable[Figure] = (),
        processors: Iterable[InputProcessor] = (),
        timer: Timer | None = None,
    ) -> None:
        super().__init__(timer)
        self.window = window
        self.set_figures(figures)
        self.set_input_processors(processors)

    def iterate(self) -> None:
        self.window.start_iteration()
        super().iterate()
        self.window.end_iteration()

    def keep_going(self) -> bool:
        return self.window.should_not_close()