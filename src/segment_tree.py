import operator

import numpy as np

DEFAULT_CONFIG = {
    'skip_zero_delta': True,
    'verbose': False,
}


class SegmentTreeError(Exception):
    pass


class EmptyInputError(SegmentTreeError, ValueError):
    def __init__(self):
        super().__init__("Provided sequence should contain at least one element")


class InvalidRangeError(SegmentTreeError, IndexError):
    def __init__(self, l, r):
        super().__init__(f"Invalid range: {l} to {r}")
        self.l = l
        self.r = r


def _min_with_identity(a, b):
    # None stands for a branch outside the queried range
    if a is None:
        return b
    if b is None:
        return a
    return a if a < b else b


def _tree_size(n):
    # 2 * 2^ceil(log2(n)) - 1
    return 2 * (1 << (n - 1).bit_length()) - 1


class SegmentTree:
    """Range-minimum segment tree with lazy range-add."""

    def __init__(self, values, config=None):
        config = {**DEFAULT_CONFIG, **(config or {})}
        self.skip_zero_delta = config['skip_zero_delta']

        values = np.asarray(values)
        if values.ndim != 1:
            raise ValueError(f"Expected a one-dimensional sequence, got {values.ndim} dimensions")
        if values.size == 0:
            raise EmptyInputError()
        # 'O' holds ints too wide for int64
        if values.dtype.kind not in 'iuO':
            raise TypeError(f"SegmentTree stores integers, got {values.dtype} values")
        values = [operator.index(v) for v in values]

        self.orig_len = len(values)
        size = _tree_size(self.orig_len)
        # object arrays keep python ints, so adds never wrap around
        self._tree = np.zeros(size, dtype=object)
        self._lazy = np.zeros(size, dtype=object)
        self._build(values, 0, 0, self.orig_len - 1)

        if config['verbose']:
            print(f"Segment tree built: {self.orig_len} values, {size} nodes")

    def _build(self, values, node, node_start, node_end):
        if node_start >= node_end:
            self._tree[node] = values[node_start]
            return
        mid = (node_start + node_end) // 2
        self._build(values, 2 * node + 1, node_start, mid)
        self._build(values, 2 * node + 2, mid + 1, node_end)
        self._tree[node] = min(self._tree[2 * node + 1], self._tree[2 * node + 2])

    def _flush(self, node, node_start, node_end):
        pending = self._lazy[node]
        self._tree[node] += pending
        if node_start < node_end:
            self._lazy[2 * node + 1] += pending
            self._lazy[2 * node + 2] += pending
        self._lazy[node] = 0

    def _query(self, start, end, node, node_start, node_end):
        if self._lazy[node] != 0:
            self._flush(node, node_start, node_end)
        if start <= node_start and end >= node_end:
            return self._tree[node]
        if start > node_end or end < node_start:
            return None
        mid = (node_start + node_end) // 2
        left_result = self._query(start, end, 2 * node + 1, node_start, mid)
        right_result = self._query(start, end, 2 * node + 2, mid + 1, node_end)
        return _min_with_identity(left_result, right_result)

    def _add(self, start, end, delta, node, node_start, node_end):
        if self._lazy[node] != 0:
            self._flush(node, node_start, node_end)
        if start > node_end or end < node_start:
            return
        if start <= node_start and end >= node_end:
            self._tree[node] += delta
            if node_start < node_end:
                self._lazy[2 * node + 1] += delta
                self._lazy[2 * node + 2] += delta
            return
        mid = (node_start + node_end) // 2
        self._add(start, end, delta, 2 * node + 1, node_start, mid)
        self._add(start, end, delta, 2 * node + 2, mid + 1, node_end)
        self._tree[node] = min(self._tree[2 * node + 1], self._tree[2 * node + 2])

    def _check_range(self, l, r):
        l = operator.index(l)
        r = operator.index(r)
        if l < 0 or l > r or r > self.orig_len - 1:
            raise InvalidRangeError(l, r)
        return l, r

    def range_min_query(self, l=0, r=None):
        if r is None:
            r = self.orig_len - 1
        l, r = self._check_range(l, r)
        return int(self._query(l, r, 0, 0, self.orig_len - 1))

    def range_add(self, l, r, delta):
        l, r = self._check_range(l, r)
        delta = operator.index(delta)
        if delta == 0 and self.skip_zero_delta:
            return
        self._add(l, r, delta, 0, 0, self.orig_len - 1)

    def min(self):
        return self.range_min_query()

    def __getitem__(self, idx):
        idx = operator.index(idx)
        pos = idx + self.orig_len if idx < 0 else idx
        if not 0 <= pos < self.orig_len:
            raise InvalidRangeError(idx, idx)
        return self.range_min_query(pos, pos)

    def __len__(self):
        return self.orig_len
