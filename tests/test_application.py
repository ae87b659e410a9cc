import pytest

from glscene.application import Application, WindowApplication
from glscene.figure import Figure, FigureDrawer, FigureUpdater, InputProcessor
from glscene.timing import Timer


class Log:
    def __init__(self):
        self.events = []


class LoggingProcessor(InputProcessor):
    def __init__(self, log, name):
        self.log, self.name = log, name

    def process(self):
        self.log.events.append(("process", self.name))


class LoggingDrawer(FigureDrawer):
    def __init__(self, log):
        self.log = log

    def draw(self, figure):
        self.log.events.append(("draw", figure.name))


class LoggingUpdater(FigureUpdater):
    def __init__(self, log):
        self.log = log

    def update(self, figure, timestamp):
        self.log.events.append(("update", figure.name, timestamp))


def make_figure(log, name):
    figure = Figure(LoggingDrawer(log), LoggingUpdater(log))
    figure.name = name
    return figure


class CountingApp(Application):
    def __init__(self, frames, timer):
        super().__init__(timer)
        self.remaining = frames

    def keep_going(self):
        self.remaining -= 1
        return self.remaining >= 0


class FakeWindow:
    def __init__(self, log, frames):
        self.log = log
        self.frames = frames

    def start_iteration(self):
        self.log.events.append("start")

    def end_iteration(self):
        self.log.events.append("end")
        self.frames -= 1

    def should_not_close(self):
        return self.frames > 0


def test_iterate_order():
    log = Log()
    app = CountingApp(1, Timer(clock=lambda: 7))
    app.set_input_processors([LoggingProcessor(log, "p1"), LoggingProcessor(log, "p2")])
    app.set_figures([make_figure(log, "a"), make_figure(log, "b")])
    app.iterate()
    assert log.events == [
        ("process", "p1"),
        ("process", "p2"),
        ("update", "a", 7),
        ("draw", "a"),
        ("update", "b", 7),
        ("draw", "b"),
    ]


def test_launch_runs_until_keep_going_false():
    log = Log()
    app = CountingApp(3, Timer(clock=lambda: 0))
    app.set_input_processors([LoggingProcessor(log, "p")])
    app.launch()
    assert log.events == [("process", "p")] * 3


def test_set_figures_copies_iterable():
    app = CountingApp(0, Timer(clock=lambda: 0))
    figures = [Figure()]
    app.set_figures(iter(figures))
    assert app.figures == figures


def test_application_is_abstract():
    with pytest.raises(TypeError):
        Application()


def test_window_application_frames():
    log = Log()
    window = FakeWindow(log, 2)
    app = WindowApplication(
        window, [make_figure(log, "f")], [], timer=Timer(clock=lambda: 5)
    )
    app.launch()
    frame = ["start", ("update", "f", 5), ("draw", "f"), "end"]
    assert log.events == frame * 2
    assert app.keep_going() is False