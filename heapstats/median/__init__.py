from heapstats.median.dual_heap_median import DualHeapMedian, running_medians
