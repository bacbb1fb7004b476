"""
Optional timing of the VRF operations.

Install a :py:class:`Profiler` as the default context to collect the
running time of every ``@profiled`` call made inside it.
"""

import functools
import time
import statistics as stats

from collections import defaultdict

from defaultcontext import with_default_context


@with_default_context
class Profiler(object):
    def __init__(self, prefix=''):
        self.data = defaultdict(list)
        self._prefix = prefix

    def record(self, name, elapsed):
        self.data[name].append(elapsed)

    def compute_stats(self):
        result = {}
        for func_name, data_points in self.data.items():
            key = self._prefix + func_name
            result[key] = {
                'avg': stats.mean(data_points),
                'min': min(data_points),
                'max': max(data_points),
                'num': len(data_points)
            }
            if len(data_points) >= 2:
                result[key]['std'] = stats.stdev(data_points)

        return result

    def __repr__(self):
        return 'Profiler(%r)' % self.compute_stats()


def profiled(func):
    @functools.wraps(func)
    def wrapped(*args, **kwargs):
        profiler = Profiler.get_default()
        if profiler is None:
            return func(*args, **kwargs)

        t0 = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            profiler.record(func.__name__, time.perf_counter() - t0)

    return wrapped
