import logging
from typing import Any, Callable, Iterable, Iterator, Optional

from heapstats.binary_heap.binary_heap import BinaryHeap
from heapstats.exceptions import ExhaustedError

logger = logging.getLogger(__name__)

_DONE = object()


class KWayMerge:
    """
    Lazily merge already sorted sources into one sorted stream.

    The heap holds one cursor ``(value, source_index, position)`` per source
    that still has values. Cursors order by value, then by source index, so
    equal values come out lowest source first.

    Parameters
    ----------
    sources : Iterable[Iterable[Any]]
        Sources sorted ascending under ``cmp``. This is not checked; an
        unsorted source gives an unsorted output. Sources are consumed one
        value at a time, so lazy iterators are fine.
    cmp : Callable[[Any, Any], int], optional
        Three-way comparator, natural ordering when omitted.
    """

    def __init__(
        self,
        sources: Iterable[Iterable[Any]],
        cmp: Optional[Callable[[Any, Any], int]] = None
    ) -> None:
        self._cmp = cmp
        self._iterators: list[Optional[Iterator[Any]]] = []
        cursors = []
        for index, source in enumerate(sources):
            iterator = iter(source)
            first = next(iterator, _DONE)
            if first is _DONE:
                self._iterators.append(None)
                continue
            self._iterators.append(iterator)
            cursors.append((first, index, 0))

        self._heap = BinaryHeap(cursors, cmp=self._compare_cursors)
        logger.debug(
            "KWayMerge over %d sources, %d non-empty",
            len(self._iterators), len(cursors)
        )

    def _compare_cursors(self, a: tuple, b: tuple) -> int:
        if self._cmp is None:
            if a[0] < b[0]:
                return -1
            if b[0] < a[0]:
                return 1
        else:
            order = self._cmp(a[0], b[0])
            if order:
                return order
        return a[1] - b[1]

    def has_next(self) -> bool:
        return not self._heap.is_empty()

    def pop(self) -> Any:
        """
        Return the next merged value.

        Raises
        ------
        ExhaustedError
            When every source has been drained.
        """
        if self._heap.is_empty():
            raise ExhaustedError("all merge sources are drained")

        value, index, position = self._heap.peek_top()
        following = next(self._iterators[index], _DONE)
        if following is _DONE:
            self._heap.extract_top()
            self._iterators[index] = None
            logger.debug("source %d exhausted after %d values", index, position + 1)
        else:
            self._heap.replace((following, index, position + 1))
        return value

    def next(self) -> Optional[Any]:
        """Like :meth:`pop`, but return None once the merge is exhausted."""
        try:
            return self.pop()
        except ExhaustedError:
            return None

    def __iter__(self) -> "KWayMerge":
        return self

    def __next__(self) -> Any:
        try:
            return self.pop()
        except ExhaustedError:
            raise StopIteration from None


def merge(*sources: Iterable[Any], cmp=None) -> Iterator[Any]:
    """Generator over the stable sorted merge of ``sources``."""
    yield from KWayMerge(sources, cmp=cmp)
