import functools
import logging
import time
from typing import Callable

logger = logging.getLogger(__name__)


def log_func_time(func: Callable):
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        timer = Timer()
        res = func(*args, **kwargs)
        logger.debug(f"{func.__qualname__} took {round(timer.elapsed_ms(), 2)} ms")
        return res

    return wrapper


class Timer:
    def __init__(self):
        self.reset()

    def reset(self):
        self._time = time.perf_counter_ns()

    def elapsed_ms(self):
        elapsed = time.perf_counter_ns() - self._time
        elapsed = elapsed / 1e6
        return elapsed

    def elapsed_sec(self):
        elapsed = time.perf_counter_ns() - self._time
        elapsed = elapsed / 1e9
        return elapsed
