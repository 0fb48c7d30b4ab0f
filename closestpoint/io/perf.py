import csv
import time
from contextlib import contextmanager
from typing import Dict, List, Tuple


class Perf:
    """
    Nested wall-clock sections keyed by label.

    Exclusive time excludes time spent in sections opened inside a section.
    Not thread-safe: give each worker its own instance.
    """

    def __init__(self):
        self.exclusive: Dict[str, float] = {}
        self.inclusive: Dict[str, float] = {}
        self.counts: Dict[str, int] = {}
        self.meta: Dict[str, str] = {}
        self._stack = []

    @contextmanager
    def section(self, label: str):
        frame = {"start": time.perf_counter(), "child": 0.0}
        self._stack.append(frame)
        try:
            yield
        finally:
            dt = time.perf_counter() - frame["start"]
            self.exclusive[label] = self.exclusive.get(label, 0.0) + max(0.0, dt - frame["child"])
            self.inclusive[label] = self.inclusive.get(label, 0.0) + dt
            self.counts[label] = self.counts.get(label, 0) + 1
            self._stack.pop()
            if self._stack:
                self._stack[-1]["child"] += dt

    def set_meta(self, **kwargs):
        for k, v in kwargs.items():
            self.meta[k] = str(v)

    def reset(self):
        self.exclusive.clear()
        self.inclusive.clear()
        self.counts.clear()
        self.meta.clear()
        self._stack.clear()

    def rows(self) -> List[Tuple[str, float, float, int, float, float]]:
        """(label, exclusive_sec, inclusive_sec, count, avg_us, exclusive_percent) sorted by label."""
        total = sum(self.exclusive.values())
        out = []
        for label in sorted(self.exclusive):
            exc = self.exclusive[label]
            cnt = self.counts.get(label, 0)
            avg_us = exc / cnt * 1e6 if cnt > 0 else 0.0
            pct = exc / total * 100.0 if total > 0 else 0.0
            out.append((label, exc, self.inclusive.get(label, 0.0), cnt, avg_us, pct))
        return out

    def write_csv(self, path: str):
        meta_keys = sorted(self.meta)
        with open(path, "w", newline="") as f:
            w = csv.writer(f)
            w.writerow(["key", "exclusive_sec", "inclusive_sec", "count", "avg_us", "percent", *meta_keys])
            meta_vals = [self.meta[k] for k in meta_keys]
            for label, exc, inc, cnt, avg_us, pct in self.rows():
                w.writerow([label, f"{exc:.9f}", f"{inc:.9f}", cnt, f"{avg_us:.3f}", f"{pct:.4f}", *meta_vals])
