import pytest


class FakeClock:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now

    def sleep(self, seconds):
        self.now += seconds


class FakePointer:
    """Pointer that stays where it is put; ``moves`` records every move_to."""

    def __init__(self, x=10, y=10):
        self.pos = (x, y)
        self.moves = []

    def position(self):
        return self.pos

    def move_to(self, x, y):
        self.moves.append((x, y))
        self.pos = (x, y)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def pointer():
    return FakePointer()
