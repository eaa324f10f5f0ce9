#
# Copyright (C) 2026 fnkit developers
# License: GPLv3+
#
"""Higher-order function utilities: functions from templates, function
wrappers, memoization, deferred calls and constant functions.
"""
from fnkit.constant import constant_of
from fnkit.defer import defer_invoke
from fnkit.memoization import memoize
from fnkit.template import build_template_function
from fnkit.wrap import wrap_function

# Short aliases.
gen_fn = build_template_function
wrap_fn = wrap_function
cache_fn = memoize
delay_fn = defer_invoke
constant_fn = constant_of

__version__ = "0.1.0"

__all__ = ["build_template_function", "wrap_function", "memoize",
           "defer_invoke", "constant_of", "gen_fn", "wrap_fn", "cache_fn",
           "delay_fn", "constant_fn"]

# vim:sw=4:ts=4:et:
