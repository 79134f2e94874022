from heapstats import BinaryHeap, BoundedTopK, DualHeapMedian, KWayMerge


priorities = [10.5, 3.2, 15.0, 7.8, 20.1, 1.5]

# Create a max heap from a batch
print("Creating max heap...")
heap = BinaryHeap.max_heap(priorities)

print(f"Heap size: {len(heap)}")
print(f"Is empty: {heap.is_empty()}")
print(f"Top: {heap.peek_top()}")

topk = BoundedTopK(3)
topk.extend(priorities)
print(f"Top 3: {topk.drain_sorted()}")

merged = KWayMerge([[1, 4, 7], [2, 5, 8], [3, 6, 9]])
print(f"Merged: {list(merged)}")

median = DualHeapMedian()
for value in priorities:
    median.add_num(value)
    print(f"Median after {value}: {median.find_median()}")
