from heapstats.binary_heap.binary_heap import BinaryHeap
