#
# Copyright (C) 2026 fnkit developers
# License: GPLv3+
#
# pylint: disable=missing-docstring
import functools
import unittest

import fnkit.utils as TT


class Test00(unittest.TestCase):

    def test_10_ensure_callable(self):
        self.assertTrue(TT.ensure_callable(len) is len)
        for obj in (None, 1, "a", []):
            self.assertRaises(ValueError, TT.ensure_callable, obj)

    def test_20_fnc_name(self):
        def fnc():
            pass

        self.assertTrue(TT.fnc_name(fnc).endswith("fnc"))
        self.assertEqual(TT.fnc_name(functools.partial(max, 1)), "max")
        self.assertEqual(TT.fnc_name(lambda: None).split('.')[-1],
                         "<lambda>")

# vim:sw=4:ts=4:et:
