"""A small logging framework that supports timing and indented log messages.

Messages go to standard error and are only printed when the `verbose` option
is set.  Timing is recorded either way.

Important functions:
 - task: a context manager to wrap self-contained tasks; it yields a
   TaskRecord whose `duration` is filled in when the task ends
 - event: print a log message (indented based on active tasks)
 - task_durations: total seconds spent in each task path so far
"""

from collections import defaultdict
from contextlib import contextmanager
import datetime
import sys

from lagrange.opts import Option

verbose = Option("verbose", bool, False, description="Log each step of the computation to stderr")

_times = defaultdict(float)
_task_stack = []

class TaskRecord(object):
    __slots__ = ("name", "start", "duration")
    def __init__(self, name):
        self.name = name
        self.start = datetime.datetime.now()
        self.duration = None

def log(string):
    if verbose.value:
        print(string, file=sys.stderr)

def _indent(depth):
    return "  " * depth

def task_begin(name, **kwargs):
    record = TaskRecord(name)
    _task_stack.append(record)
    if verbose.value:
        details = ", ".join("{}={}".format(k, v) for k, v in kwargs.items())
        log("{}{}{}...".format(_indent(len(_task_stack) - 1), name, " [" + details + "]" if details else ""))
    return record

def task_end():
    key = tuple(r.name for r in _task_stack)
    record = _task_stack.pop()
    record.duration = (datetime.datetime.now() - record.start).total_seconds()
    _times[key] += record.duration
    log("{}Finished {} [duration={:.3}s]".format(_indent(len(_task_stack)), record.name, record.duration))
    return record

@contextmanager
def task(name, **kwargs):
    try:
        yield task_begin(name, **kwargs)
    finally:
        task_end()

def event(message):
    log(_indent(len(_task_stack)) + message)

def task_durations():
    return dict(_times)
