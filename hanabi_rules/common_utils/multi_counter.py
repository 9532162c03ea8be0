import logging
from collections import Counter
from datetime import datetime

logger = logging.getLogger(__name__)


class ValueStats:
    def __init__(self, name=None):
        self.name = name
        self.reset()

    def feed(self, v):
        self.summation += v
        if v > self.max_value:
            self.max_value = v
            self.max_idx = self.counter
        if v < self.min_value:
            self.min_value = v
            self.min_idx = self.counter

        self.counter += 1

    def mean(self):
        if self.counter == 0:
            raise ZeroDivisionError(f"Counter {self.name} is 0")
        return self.summation / self.counter

    def summary(self, info=None):
        info = "" if info is None else info
        name = "" if self.name is None else self.name
        if self.counter > 0:
            return f"{info}{name}[{self.counter:4d}]: avg: {self.mean():8.4f}, min: {self.min_value:8.4f}[{self.min_idx:4d}], max: {self.max_value:8.4f}[{self.max_idx:4d}]"
        else:
            return f"{info}{name}[0]"

    def reset(self):
        self.counter = 0
        self.summation = 0.0
        self.max_value = -1e38
        self.min_value = 1e38
        self.max_idx = None
        self.min_idx = None


class MultiCounter:
    """Named event counts plus named running value statistics."""

    def __init__(self, verbose=False):
        self.last_time = datetime.now()
        self.verbose = verbose
        self.counts = Counter()
        self.stats = {}
        self.total_count = 0
        self.max_key_len = 0

    def __getitem__(self, key):
        if len(key) > self.max_key_len:
            self.max_key_len = len(key)

        if key in self.counts:
            return self.counts[key]

        if key in self.stats:
            return self.stats[key]

        raise KeyError(key)

    def feed(self, key, v):
        if len(key) > self.max_key_len:
            self.max_key_len = len(key)
        if key not in self.stats:
            self.stats[key] = ValueStats(key)
        self.stats[key].feed(v)

    def inc(self, key):
        if self.verbose:
            logger.debug("[MultiCounter]: %s", key)
        self.counts[key] += 1
        self.total_count += 1

    def reset(self):
        for k in self.stats.keys():
            self.stats[k].reset()

        self.counts = Counter()
        self.total_count = 0
        self.last_time = datetime.now()

    def time_elapsed(self):
        return (datetime.now() - self.last_time).total_seconds()

    def summary(self, global_counter):
        logger.info("[%s] Time spent = %.2f s", global_counter, self.time_elapsed())

        for key, count in self.counts.items():
            logger.info("%s: %d/%d", key, count, self.total_count)

        for k in sorted(self.stats.keys()):
            v = self.stats[k]
            info = f"{global_counter}:"
            logger.info(v.summary(info=info.ljust(self.max_key_len + 4)))
