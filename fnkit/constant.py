#
# Copyright (C) 2026 fnkit developers
# License: GPLv3+
#
"""Constant functions.
"""


def constant_of(value):
    """
    Make a function always returns `value`. Any arguments are ignored.

    :param value: Value to return

    >>> five = constant_of(5)
    >>> (five(), five(), five("ignored"))
    (5, 5, 5)
    """
    def constant(*_args, **_kwargs):
        """Returns the fixed value."""
        return value

    return constant

# vim:sw=4:ts=4:et:
