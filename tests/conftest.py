import pytest

from core.password_utils import RandomSourceError


class SequenceSource:
    """Replays a fixed list of 32-bit words (cycling) and counts draws."""

    def __init__(self, words):
        self.words = list(words)
        self.calls = 0

    def next_uint32(self) -> int:
        w = self.words[self.calls % len(self.words)]
        self.calls += 1
        return w


class FailingSource:
    def next_uint32(self) -> int:
        raise RandomSourceError("entropy unavailable")


@pytest.fixture
def zero_source():
    return SequenceSource([0])


@pytest.fixture
def failing_source():
    return FailingSource()
