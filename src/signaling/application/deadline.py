"""
Wall-clock budget passed explicitly to every time-bounded stage.
"""
import time
from typing import Callable

Clock = Callable[[], float]

class Deadline:
    """
    Wall-clock instant after which optimization stops. Created once per
    instance and passed to every stage that loops.
    """
    def __init__(self, at: float, clock: Clock = time.time):
        self.at = at
        self.clock = clock

    @classmethod
    def after(cls, seconds: float, clock: Clock = time.time) -> "Deadline":
        return cls(clock() + seconds, clock=clock)

    def expired(self) -> bool:
        return self.clock() >= self.at

    def remaining(self) -> float:
        return max(0.0, self.at - self.clock())

    def __repr__(self) -> str:
        return f"Deadline(remaining={self.remaining():.1f}s)"
