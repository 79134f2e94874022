import logging

from heapstats.binary_heap.binary_heap import BinaryHeap
from heapstats.binary_heap.topk import BoundedTopK, get_topk, nlargest, nsmallest
from heapstats.exceptions import (
    CapacityError,
    EmptyHeapError,
    EmptyStreamError,
    ExhaustedError,
    HeapStatsError,
)
from heapstats.median.dual_heap_median import DualHeapMedian, running_medians
from heapstats.merge.kway_merge import KWayMerge, merge

logging.getLogger(__name__).addHandler(logging.NullHandler())
