#
# Copyright (C) 2026 fnkit developers
#
# This software is licensed to you under the GNU General Public License,
# version 3 (GPLv3). There is NO WARRANTY for this software, express or
# implied, including the implied warranties of MERCHANTABILITY or FITNESS FOR A
# PARTICULAR PURPOSE. You should have received a copy of GPLv3 along with this
# software; if not, see http://www.gnu.org/licenses/gpl.html
#
"""
Misc utility routines for fnkit.
"""
import functools
import logging


LOG = logging.getLogger(__name__)


def ensure_callable(fnc):
    """
    Raise ValueError if `fnc` is not callable, and return it as it is.

    >>> ensure_callable(len) is len
    True
    >>> ensure_callable(None)
    Traceback (most recent call last):
    ValueError: Given object is not callable!: None
    """
    if not callable(fnc):
        raise ValueError("Given object is not callable!: %r" % fnc)

    return fnc


def fnc_name(fnc):
    """
    :return: A name of callable `fnc` for log messages

    >>> fnc_name(len)
    'len'
    >>> fnc_name(functools.partial(len))
    'len'
    >>> class A(object):
    ...     def __call__(self):
    ...         pass
    >>> fnc_name(A())
    'A'
    """
    if isinstance(fnc, functools.partial):
        return fnc_name(fnc.func)

    name = getattr(fnc, "__qualname__", None) or getattr(fnc, "__name__", None)
    return name if name else type(fnc).__name__

# vim:sw=4:ts=4:et:
