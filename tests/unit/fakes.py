"""Test doubles for profiling backends."""

from collections import Counter


class FakeCpu:
    """CPU backend stand-in that records applied rates without signals."""

    def __init__(self):
        self.applied: list[int] = []

    def apply(self, rate: int) -> bool:
        self.applied.append(rate)
        return bool(rate)

    def samples(self) -> Counter:
        return Counter()

    def clear(self) -> None:
        self.applied.clear()


class FakeHeap:
    """Heap backend stand-in that records applied rates."""

    def __init__(self):
        self.applied: list[int] = []

    def apply(self, rate: int) -> None:
        self.applied.append(rate)

    @staticmethod
    def snapshot():
        return None
