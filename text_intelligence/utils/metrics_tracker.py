# metrics_tracker.py

from collections import defaultdict


class Metrics:
    """Running sum/count per key, kept in memory for the session."""

    def __init__(self):
        self.m = defaultdict(float)
        self.n = defaultdict(int)

    def record(self, key, val):
        self.m[key] += val
        self.n[key] += 1

    def avg(self, key):
        if self.n.get(key, 0) == 0:
            return 0.0
        return self.m[key] / self.n[key]

    def count(self, key):
        return self.n.get(key, 0)

    def as_dict(self):
        return {k: {"avg": self.avg(k), "count": self.n[k]} for k in self.m}
