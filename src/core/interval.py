# core/interval.py
from core.utils import INFINITY

class Interval:
    """
    A real range [min, max] used to bound acceptable ray parameters.
    """
    def __init__(self, minimum: float = INFINITY, maximum: float = -INFINITY):
        self.min = minimum
        self.max = maximum

    def size(self) -> float:
        return self.max - self.min

    def contains(self, x: float) -> bool:
        # Closed on both ends.
        return self.min <= x <= self.max

    def surrounds(self, x: float) -> bool:
        # Open on both ends.
        return self.min < x < self.max

    @staticmethod
    def empty() -> "Interval":
        return Interval(INFINITY, -INFINITY)

    @staticmethod
    def universe() -> "Interval":
        return Interval(-INFINITY, INFINITY)

    def __repr__(self) -> str:
        return f"Interval({self.min}, {self.max})"


EMPTY = Interval.empty()
UNIVERSE = Interval.universe()
