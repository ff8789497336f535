import threading
from collections import namedtuple

import config
from buckets import alloc, bucket_index, size_range, overflow_range

Row = namedtuple('Row', ['label', 'range', 'count', 'size', 'blocks', 'overhead'])


class StatCounter:
    """Per-bucket and total file statistics for one scan.

    Single writer: only add_file mutates the counter. total_count may also
    be read from another thread, e.g. by a progress ticker.
    """

    def __init__(self, block_size=config.block_size, bucket_count=config.bucket_count):
        self.block_size = block_size
        self.bucket_count = bucket_count
        self._count_lock = threading.Lock()
        self._total_count = 0
        self.total_size = 0
        self.total_blocks = 0
        self.total_overhead = 0
        self.max_bucket = 0
        self.count = [0] * bucket_count
        self.size = [0] * bucket_count
        self.blocks = [0] * bucket_count
        self.overhead = [0] * bucket_count
        self.overflow_count = 0
        self.overflow_size = 0

    @property
    def total_count(self):
        with self._count_lock:
            return self._total_count

    @property
    def overflow_blocks(self):
        return self.total_blocks - sum(self.blocks)

    @property
    def overflow_overhead(self):
        return self.total_overhead - sum(self.overhead)

    def add_file(self, size):
        blocks, overhead = alloc(size, self.block_size)

        with self._count_lock:
            self._total_count += 1
        self.total_size += size
        self.total_blocks += blocks
        self.total_overhead += overhead

        p = bucket_index(size)
        if p < self.bucket_count:
            self.count[p] += 1
            self.size[p] += size
            self.blocks[p] += blocks
            self.overhead[p] += overhead
            if p > self.max_bucket:
                self.max_bucket = p
        else:
            self.overflow_count += 1
            self.overflow_size += size

    def rows(self):
        for i in range(self.max_bucket + 1):
            yield Row(str(i), size_range(i), self.count[i], self.size[i], self.blocks[i], self.overhead[i])

    def overflow_row(self):
        if not self.overflow_count:
            return None
        return Row('%d+' % self.bucket_count, overflow_range(self.bucket_count),
                   self.overflow_count, self.overflow_size, self.overflow_blocks, self.overflow_overhead)

    def total_row(self):
        return Row('**', 'TOTAL', self.total_count, self.total_size, self.total_blocks, self.total_overhead)
