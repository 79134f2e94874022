class HeapStatsError(Exception):
    """Base class for every error raised by heapstats."""


class EmptyHeapError(HeapStatsError, RuntimeError):
    """Peek or extraction on a heap holding no elements."""


class ExhaustedError(HeapStatsError, RuntimeError):
    """Every source of a k-way merge has been drained."""


class EmptyStreamError(HeapStatsError, RuntimeError):
    """A median was requested before any value was added."""


class CapacityError(HeapStatsError, ValueError):
    """A bounded structure was given a negative capacity."""
