"""Shared fixtures for dropdown tests."""

import os

# Must be set before kivy is imported anywhere
os.environ.setdefault("KIVY_NO_ARGS", "1")
os.environ.setdefault("KIVY_NO_CONSOLELOG", "1")
os.environ.setdefault("KIVY_NO_FILELOG", "1")

import pytest


OPTIONS = ["Easy", "Normal", "Hard", "Expert"]
ROW_HEIGHT = 55


class FakeEvent:
    def __init__(self, callback, due):
        self.callback = callback
        self.due = due
        self.cancelled = False
        self.fired = False

    def cancel(self):
        self.cancelled = True


class FakeClock:
    """Stands in for kivy.clock.Clock; time only moves on advance()."""

    def __init__(self):
        self.now = 0.0
        self.events = []

    def schedule_once(self, callback, timeout=0):
        event = FakeEvent(callback, self.now + timeout)
        self.events.append(event)
        return event

    def advance(self, seconds):
        self.now += seconds
        for event in list(self.events):
            if event.cancelled or event.fired or event.due > self.now + 1e-9:
                continue
            event.fired = True
            event.callback(self.now - event.due)

    @property
    def live(self):
        return [e for e in self.events if not (e.cancelled or e.fired)]


@pytest.fixture
def options():
    return list(OPTIONS)


@pytest.fixture
def clock():
    return FakeClock()
