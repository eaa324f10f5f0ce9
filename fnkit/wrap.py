#
# Copyright (C) 2026 fnkit developers
# License: GPLv3+
#
"""Wrap functions with additional behavior (middlewares).

A wrapper takes a continuation calling the original function, the receiver
of the call and the arguments, and decides what to do with them:

>>> def double_args(nxt, _receiver, *args):
...     return nxt(*(arg * 2 for arg in args))
>>> add = wrap_function(lambda a, b: a + b, double_args)
>>> add(1, 2)
6
"""
import logging

import fnkit.base
import fnkit.utils


LOG = logging.getLogger(__name__)


def passthrough(nxt, _receiver, *args, **kwargs):
    """
    A wrapper does nothing but calls the original function.

    >>> wrap_function(abs, passthrough)(-1)
    1
    """
    return nxt(*args, **kwargs)


class FunctionWrapper(fnkit.base.Base):
    """
    Function wrapped with a wrapper function.
    """
    def __init__(self, fnc, wrapper):
        """
        :param fnc: Function to wrap
        :param wrapper:
            Wrapper function takes a continuation, a receiver and arguments,
            wrapper(nxt, receiver, *args, **kwargs). The continuation,
            nxt(*args, **kwargs), calls `fnc` bound to the receiver.
        """
        super(FunctionWrapper, self).__init__(fnc)
        self.wrapper = fnkit.utils.ensure_callable(wrapper)

    def continuation(self, receiver=None):
        """
        :param receiver: Object the call was bound to, or None
        :return: A function to call the wrapped function
        """
        fnc = self.bound(receiver)

        def nxt(*args, **kwargs):
            """Call the original function."""
            return fnc(*args, **kwargs)

        return nxt

    def call(self, receiver, *args, **kwargs):
        """
        Call the wrapper with the continuation, `receiver` and arguments.
        """
        return self.wrapper(self.continuation(receiver), receiver, *args,
                            **kwargs)


def wrap_function(fnc, wrapper):
    """
    Make a function wrapping `fnc` with `wrapper`.

    :param fnc: Function to wrap
    :param wrapper:
        Function takes a continuation, a receiver and arguments. See
        :class:`FunctionWrapper`.

    :return: A :class:`FunctionWrapper` object
    """
    return FunctionWrapper(fnc, wrapper)

# vim:sw=4:ts=4:et:
