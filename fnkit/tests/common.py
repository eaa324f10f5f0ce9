#
# Copyright (C) 2026 fnkit developers
#
# pylint: disable=missing-docstring
import os.path
import os
import sched
import shutil
import tempfile
import unittest


def selfdir():
    """
    >>> os.path.exists(selfdir())
    True
    """
    return os.path.dirname(__file__)


def setup_workdir():
    """
    >>> workdir = setup_workdir()
    >>> assert workdir != '.'
    >>> assert workdir != '/'
    >>> os.path.exists(workdir)
    True
    >>> os.rmdir(workdir)
    """
    return tempfile.mkdtemp(prefix="python-fnkit-tests-")


def cleanup_workdir(workdir):
    """
    >>> workdir = setup_workdir()
    >>> os.path.exists(workdir)
    True
    >>> cleanup_workdir(workdir)
    >>> os.path.exists(workdir)
    False
    """
    assert workdir != '/'
    assert workdir != '.'

    shutil.rmtree(workdir)


class Recorder(object):
    """Callable records calls.
    """
    def __init__(self, fnc=None):
        self.fnc = fnc
        self.calls = []

    def __call__(self, *args, **kwargs):
        self.calls.append((args, kwargs))
        if self.fnc is not None:
            return self.fnc(*args, **kwargs)

    @property
    def count(self):
        return len(self.calls)


class VirtualClock(object):
    """Clock advanced only by hand, for :class:`sched.scheduler`.

    >>> clock = VirtualClock()
    >>> clock.advance(1500)
    >>> clock.time()
    1.5
    """
    def __init__(self):
        self.msecs = 0

    def time(self):
        return self.msecs / 1000.0

    def sleep(self, secs):
        self.msecs += int(round(secs * 1000))

    def advance(self, msecs):
        self.msecs += msecs


def virtual_scheduler(clock):
    return sched.scheduler(clock.time, clock.sleep)


class TestsWithWorkdir(unittest.TestCase):

    def setUp(self):
        self.workdir = setup_workdir()

    def tearDown(self):
        cleanup_workdir(self.workdir)

# vim:sw=4:ts=4:et:
