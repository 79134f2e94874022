import logging
from typing import Any, Callable, Iterable, Optional

from heapstats.binary_heap.binary_heap import BinaryHeap
from heapstats.exceptions import CapacityError

logger = logging.getLogger(__name__)


class BoundedTopK:
    """
    Keep the K best values seen in a stream.

    The values are held in a heap of at most ``k`` elements whose root is
    the worst retained value, so the root doubles as the admission
    threshold: a min heap when keeping the largest values, a max heap when
    keeping the smallest.

    Parameters
    ----------
    k : int
        Number of values to retain. Zero is allowed and retains nothing.
    cmp : Callable[[Any, Any], int], optional
        Three-way comparator, natural ordering when omitted.
    largest : bool
        Keep the largest values if True, the smallest otherwise, by default
        True.

    Raises
    ------
    CapacityError
        If ``k`` is negative.
    """

    def __init__(
        self,
        k: int,
        cmp: Optional[Callable[[Any, Any], int]] = None,
        largest: bool = True
    ) -> None:
        if k < 0:
            raise CapacityError(f"k must be non-negative, got {k}")
        self.capacity = k
        self.largest = largest
        self.seen = 0
        self._heap = BinaryHeap(cmp=cmp, is_max_heap=not largest)
        logger.debug(
            "BoundedTopK created: k=%d, keep=%s",
            k, "largest" if largest else "smallest"
        )

    def offer(self, value: Any) -> None:
        """
        Offer a value to the retained set. O(log K).

        Below capacity the value is always kept. At capacity it replaces the
        current threshold only if it is strictly better; ties go to the value
        that arrived first.
        """
        if len(self._heap) < self.capacity:
            self._heap.insert(value)
        elif self.capacity:
            self._heap.pushpop(value)
        self.seen += 1

    def extend(self, values: Iterable[Any]) -> None:
        for value in values:
            self.offer(value)

    def threshold(self) -> Any:
        """The worst retained value, i.e. the bar a new value must beat."""
        return self._heap.peek_top()

    def snapshot(self) -> list[Any]:
        """Copy of the retained values, in no particular order."""
        return self._heap.to_list()

    def drain_sorted(self) -> list[Any]:
        """
        Empty the retained set and return it best first.

        Returns
        -------
        list[Any]
            Descending when keeping the largest values, ascending when
            keeping the smallest.
        """
        drained = []
        while not self._heap.is_empty():
            drained.append(self._heap.extract_top())
        drained.reverse()
        logger.debug("BoundedTopK drained %d of %d seen", len(drained), self.seen)
        return drained

    def __len__(self) -> int:
        return len(self._heap)

    def __repr__(self) -> str:
        return (
            f"BoundedTopK(k={self.capacity}, largest={self.largest}, "
            f"retained={len(self._heap)}, seen={self.seen})"
        )


def get_topk(
    values: Iterable[Any],
    k: int,
    cmp: Optional[Callable[[Any, Any], int]] = None,
    largest: bool = True
) -> list[Any]:
    """
    Function to get the top-K elements from a batch of values.

    With ``largest`` the K greatest values are retrieved; otherwise the K
    smallest.

    Parameters
    ----------
    values : Iterable[Any]
        The values to select from.
    k : int
        The number of 'top-K' elements to retrieve. Zero or negative values
        yield an empty list.
    cmp : Callable[[Any, Any], int], optional
        Three-way comparator, natural ordering when omitted.
    largest : bool
        Select the largest values if True, the smallest otherwise.

    Returns
    -------
    list[Any]
        The 'top-K' elements, best first.
    """
    if k <= 0:
        return []

    topk = BoundedTopK(k, cmp=cmp, largest=largest)
    topk.extend(values)
    return topk.drain_sorted()


def nlargest(
    k: int,
    values: Iterable[Any],
    cmp: Optional[Callable[[Any, Any], int]] = None
) -> list[Any]:
    """The k largest values, greatest first."""
    return get_topk(values, k, cmp=cmp, largest=True)


def nsmallest(
    k: int,
    values: Iterable[Any],
    cmp: Optional[Callable[[Any, Any], int]] = None
) -> list[Any]:
    """The k smallest values, smallest first."""
    return get_topk(values, k, cmp=cmp, largest=False)
