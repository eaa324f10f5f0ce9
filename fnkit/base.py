#
# Copyright (C) 2026 fnkit developers
# License: GPLv3+
#
"""Base class of callables forwarding their receiver.
"""
import functools
import inspect
import logging

import fnkit.utils


LOG = logging.getLogger(__name__)


def bind(fnc, receiver=None):
    """
    Bind `fnc` to `receiver` if `fnc` is a plain function, or pass `receiver`
    to `fnc` through its `call` method if `fnc` is a :class:`Base` object
    such as a nested wrapper.

    Other callables, bound methods, builtins, partials and callable objects,
    are returned as they are.

    :param fnc: Callable to bind
    :param receiver: Object to bind `fnc` to, or None (not bound)

    >>> class A(object):
    ...     val = 1
    >>> bind(lambda self: self.val, A())()
    1
    >>> bind(len) is len
    True
    """
    if receiver is None:
        return fnc

    if isinstance(fnc, Base):
        return functools.partial(fnc.call, receiver)

    if not inspect.isfunction(fnc):
        return fnc

    return fnc.__get__(receiver, type(receiver))


class Base(object):
    """
    Callable wrapping a function, which keeps the receiver (the object the
    call was bound to) of each call and passes it to :meth:`call`.

    - obj(*args, **kwargs) -> call(None, *args, **kwargs)
    - instance.attr(*args, **kwargs) -> call(instance, *args, **kwargs) if obj
      is a class attribute `attr`
    - obj.call(receiver, *args, **kwargs)
    """
    def __init__(self, fnc):
        """
        :param fnc: Function to wrap
        """
        fnkit.utils.ensure_callable(fnc)
        functools.update_wrapper(self, fnc)  # It may override self.__dict__.
        self.fnc = fnc

    def __call__(self, *args, **kwargs):
        return self.call(None, *args, **kwargs)

    def __get__(self, obj, objtype=None):
        if obj is None:
            return self

        return functools.partial(self.call, obj)

    def __repr__(self):
        return "<%s %s>" % (type(self).__name__,
                            fnkit.utils.fnc_name(self.fnc))

    def bound(self, receiver=None):
        """
        :return: The wrapped function bound to `receiver`
        """
        return bind(self.fnc, receiver)

    def call(self, receiver, *args, **kwargs):
        """
        Call with the receiver `receiver`.
        """
        raise NotImplementedError("Inherited class must implement this!")

# vim:sw=4:ts=4:et:
