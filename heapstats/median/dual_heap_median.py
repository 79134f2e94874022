import logging
import numbers
from decimal import Decimal
from typing import Iterable, Iterator, Union

from heapstats.binary_heap.binary_heap import BinaryHeap
from heapstats.exceptions import EmptyStreamError

logger = logging.getLogger(__name__)

Number = Union[int, float, Decimal]


class DualHeapMedian:
    """
    Running median of a numeric stream.

    ``lower`` is a max heap over the smaller half of the values and
    ``upper`` a min heap over the larger half. Everything in ``lower`` is
    <= everything in ``upper``, and ``lower`` holds either as many values
    as ``upper`` or exactly one more.
    """

    def __init__(self) -> None:
        self._lower = BinaryHeap.max_heap()
        self._upper = BinaryHeap.min_heap()

    def add_num(self, x: Number) -> None:
        """Add a value to the stream. O(log n)."""
        if not isinstance(x, (numbers.Real, Decimal)):
            raise TypeError(f"expected a real number, got {type(x).__name__}")
        is_nan = x.is_nan() if isinstance(x, Decimal) else x != x
        if is_nan:
            raise ValueError("NaN has no position in the running median")

        self._lower.insert(x)
        if self._upper.is_empty() or self._lower.peek_top() > self._upper.peek_top():
            self._upper.insert(self._lower.extract_top())

        if len(self._lower) > len(self._upper) + 1:
            self._upper.insert(self._lower.extract_top())
        elif len(self._upper) > len(self._lower):
            self._lower.insert(self._upper.extract_top())

    def extend(self, values: Iterable[Number]) -> None:
        for value in values:
            self.add_num(value)

    def find_median(self) -> Number:
        """
        Median of every value added so far, without mutating anything.

        Raises
        ------
        EmptyStreamError
            If no value has been added yet.
        """
        if self._lower.is_empty():
            raise EmptyStreamError("median of an empty stream")
        if len(self._lower) > len(self._upper):
            return self._lower.peek_top()
        total = self._lower.peek_top() + self._upper.peek_top()
        if isinstance(total, numbers.Integral) and total % 2 == 0:
            return total // 2
        return total / 2

    def is_empty(self) -> bool:
        return self._lower.is_empty()

    def __len__(self) -> int:
        return len(self._lower) + len(self._upper)

    def __repr__(self) -> str:
        return f"DualHeapMedian(count={len(self)})"


def running_medians(values: Iterable[Number]) -> Iterator[Number]:
    """Yield the median of the stream after each value of ``values``."""
    tracker = DualHeapMedian()
    for value in values:
        tracker.add_num(value)
        yield tracker.find_median()
    logger.debug("running median finished over %d values", len(tracker))
