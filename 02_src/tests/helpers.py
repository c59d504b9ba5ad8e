"""Test doubles shared across test modules."""

from debugbar.models import Asset


class FakeClock:
    """Clock returning queued timestamps, then counting up from the last one."""

    def __init__(self, *times: float):
        self._times = list(times)
        self._last = 0.0

    def __call__(self) -> float:
        if self._times:
            self._last = self._times.pop(0)
        else:
            self._last += 1.0
        return self._last


class StubFormatter:
    """Formatter recording what it was asked to format."""

    def __init__(self):
        self.calls = []

    def format(self, value):
        self.calls.append(value)
        return f"formatted:{value!r}"


class StubRenderer:
    """Renderer recording what it was asked to render."""

    def __init__(self):
        self.calls = []

    def render(self, value):
        self.calls.append(value)
        return f"<b>{value!r}</b>"

    def get_assets(self):
        return [Asset(name="stub.css", kind="css", path="/static/stub.css")]
