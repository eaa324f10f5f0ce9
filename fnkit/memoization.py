#
# Copyright (C) 2026 fnkit developers
# License: GPLv3+
#
"""Memoize module.

Results are cached per memoized function, keyed by the structural
serialization of call arguments. Arguments which serialize in the same way
share a cache entry even if they are different objects; tuples and lists of
the same items collide, for example, and so do `{1: "a"}` and `{"1": "a"}` as
JSON keys are strings. Dicts with keys of mixed types, `{1: "a", "b": 2}` for
example, cannot be sorted and are serialized in insertion order, so such
dicts with the same items but in different order get different keys.
Arguments which cannot be serialized in JSON need a key function:

>>> calls = []
>>> @memoize(keyfn=lambda fnc: fnkit.utils.fnc_name(fnc))
... def name_of(fnc):
...     calls.append(fnc)
...     return fnc.__name__
>>> (name_of(len), name_of(len), len(calls))
('len', 'len', 1)
"""
import functools
import json
import logging

import fnkit.utils


LOG = logging.getLogger(__name__)


class KeyDerivationError(ValueError):
    """Exception to be raised if a cache key cannot be made from arguments.
    """
    pass


def make_key(args, kwargs=None):
    """
    Make a cache key from arguments.

    :param args: Positional arguments, a tuple or list
    :param kwargs: Keyword arguments, a dict or None
    :return: A string represents arguments in canonical JSON

    >>> make_key((1, "a"))
    '[[1,"a"],{}]'
    >>> make_key((), dict(b=2, a=[1]))
    '[[],{"a":[1],"b":2}]'
    >>> make_key((1, )) == make_key((1.0, ))
    False
    >>> make_key(({1: "a", "b": 2}, ))
    '[[{"1":"a","b":2}],{}]'
    """
    key = [list(args), kwargs or {}]
    try:
        try:
            return json.dumps(key, sort_keys=True, separators=(',', ':'))
        except TypeError:
            # Dict keys of different types cannot be sorted.
            return json.dumps(key, separators=(',', ':'))
    except (TypeError, ValueError) as exc:
        raise KeyDerivationError("Cannot make a cache key from arguments: "
                                 "%r, %r: %s" % (args, kwargs, exc))


def memoize(fnc=None, keyfn=None):
    """memoization decorator.

    :param fnc: Function to memoize
    :param keyfn:
        Function to make cache keys, takes the same arguments as `fnc` and
        returns any hashable object. :func:`make_key` is used if None.

    :return: Memoized function, or a decorator if `fnc` is None
    """
    if fnc is None:
        return functools.partial(memoize, keyfn=keyfn)

    fnkit.utils.ensure_callable(fnc)
    if keyfn is not None:
        fnkit.utils.ensure_callable(keyfn)

    name = fnkit.utils.fnc_name(fnc)
    cache = {}

    @functools.wraps(fnc)
    def memoized(*args, **kwargs):
        """Memoized one"""
        if keyfn is None:
            key = make_key(args, kwargs)
        else:
            key = keyfn(*args, **kwargs)

        if key in cache:
            LOG.debug("Cache hit: %s %s", name, key)
            return cache[key]

        LOG.debug("Cache miss: %s %s", name, key)
        val = fnc(*args, **kwargs)  # Not cached if it raised.
        cache[key] = val

        return val

    memoized.cache = cache
    return memoized

# vim:sw=4:ts=4:et:
