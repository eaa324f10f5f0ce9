#
# Copyright (C) 2026 fnkit developers
# License: GPLv3+
#
"""Deferred execution of functions.

Calls of deferred functions return immediately, and the original function
is called later by a scheduler. Scheduled calls cannot be canceled.

Any object having the `enter` method compatible with
:meth:`sched.scheduler.enter` can be used as a scheduler. The default one,
:class:`TimerScheduler`, runs each call in a :class:`threading.Timer` thread
and exceptions raised there are reported by :func:`threading.excepthook`.
"""
import logging
import numbers
import threading

import fnkit.base
import fnkit.globals
import fnkit.utils


LOG = logging.getLogger(__name__)


class TimerScheduler(object):
    """Scheduler starts a timer thread for each call.
    """
    def enter(self, delay, priority, action, argument=(), kwargs=None):
        """
        :param delay: Delay in seconds
        :param priority: Not used; timers run independently
        :param action: Function to call
        :param argument: Positional arguments to pass to `action`
        :param kwargs: Keyword arguments to pass to `action`

        :return: A started :class:`threading.Timer` object
        """
        timer = threading.Timer(delay, action, args=argument, kwargs=kwargs)
        timer.start()

        return timer


def _to_seconds(delay):
    """
    :param delay: Delay in milliseconds

    >>> _to_seconds(1500)
    1.5
    >>> _to_seconds(-1)
    Traceback (most recent call last):
    ValueError: Delay must be a non-negative number: -1
    """
    if isinstance(delay, bool) or not isinstance(delay, numbers.Real) \
            or delay < 0:
        raise ValueError("Delay must be a non-negative number: %r" % delay)

    return delay / 1000.0


class DeferredInvoker(fnkit.base.Base):
    """
    Function called after some delay.
    """
    def __init__(self, fnc, delay, scheduler=None):
        """
        :param fnc: Function to call later
        :param delay: Delay in milliseconds
        :param scheduler:
            Scheduler object, :class:`TimerScheduler` object will be used if
            None
        """
        super(DeferredInvoker, self).__init__(fnc)
        self.delay = delay
        self._delay_s = _to_seconds(delay)
        self.scheduler = TimerScheduler() if scheduler is None else scheduler

    def call(self, receiver, *args, **kwargs):
        """
        Schedule a call of the function with `receiver` and arguments and
        return None immediately.
        """
        LOG.debug("Scheduling a call of %s in %r ms",
                  fnkit.utils.fnc_name(self.fnc), self.delay)
        self.scheduler.enter(self._delay_s, fnkit.globals.DEFER_PRIORITY,
                             self.bound(receiver), argument=args,
                             kwargs=kwargs)


def defer_invoke(fnc, delay, scheduler=None):
    """
    Make a function to call `fnc` after `delay` milliseconds.

    :param fnc: Function to call later
    :param delay: Delay in milliseconds, non-negative
    :param scheduler: See :class:`DeferredInvoker`

    :return: A :class:`DeferredInvoker` object
    """
    return DeferredInvoker(fnc, delay, scheduler=scheduler)

# vim:sw=4:ts=4:et:
