"""Indented, timed log messages for long-running algebra.

Important functions:
 - task: a context manager around a self-contained computation (a division,
   a GCD, a solver call); nested tasks indent their messages
 - event: print a log message at the current indentation
 - dump_profile: write accumulated task durations to a file

Each thread nests its own tasks; durations from all threads are summed.
"""

from collections import defaultdict
from contextlib import contextmanager
import datetime
import threading

from polydiv.opts import Option

verbose = Option("verbose", bool, False, description="Log every division and GCD step")
profile_path = Option("profile-path", str, "/tmp/polydiv.profile", metavar="PATH")

_times = defaultdict(float)
_times_lock = threading.Lock()
_local = threading.local()
_begin = datetime.datetime.now()

def _task_stack():
    stack = getattr(_local, "stack", None)
    if stack is None:
        stack = _local.stack = []
    return stack

def log(string):
    if verbose.value:
        print(string)

def _format_kwargs(kwargs):
    if not kwargs:
        return ""
    return " [" + ", ".join("{}={}".format(k, v) for k, v in kwargs.items()) + "]"

def task_begin(name, **kwargs):
    stack = _task_stack()
    stack.append((name, datetime.datetime.now()))
    if verbose.value:
        log("{}{}{}...".format("  " * (len(stack) - 1), name, _format_kwargs(kwargs)))

def task_end():
    stack = _task_stack()
    path = tuple(name for name, start in stack)
    name, start = stack.pop()
    duration = (datetime.datetime.now() - start).total_seconds()
    with _times_lock:
        _times[path] += duration
    if verbose.value:
        log("{}Finished {} [duration={:.3}s]".format("  " * len(stack), name, duration))

@contextmanager
def task(name, **kwargs):
    try:
        yield task_begin(name, **kwargs)
    finally:
        task_end()

def event(name):
    if verbose.value:
        log("{}{}".format("  " * len(_task_stack()), name))

def dump_profile(path=None):
    """Write the total time spent under each task path, longest first."""
    if path is None:
        path = profile_path.value
    with _times_lock:
        times = dict(_times)
    duration = (datetime.datetime.now() - _begin).total_seconds()
    with open(path, "w") as f:
        f.write("Total duration: {:.3} seconds\n".format(duration))
        f.write("Currently in: {}\n\n".format(", ".join(name for name, start in _task_stack())))
        for k in sorted(times, key=times.get, reverse=True):
            f.write("{:16.3} {}\n".format(times[k], ", ".join(k)))
