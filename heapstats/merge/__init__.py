from heapstats.merge.kway_merge import KWayMerge, merge
