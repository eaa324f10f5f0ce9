#
# Copyright (C) 2026 fnkit developers
# License: GPLv3+
#
# pylint: disable=invalid-name
"""Make functions from string templates.

A template is a python expression and evaluated with variables in the given
context. It's parsed with :mod:`ast` and evaluated by a small interpreter
supports a safe subset of expressions: literals, variables, arithmetic,
comparison and boolean operators, conditional expressions, containers,
subscripts, attribute access and function calls.

.. note::
   The context is referenced, not copied. Changes of the context made after
   the function was made are visible in later calls.

>>> fnc = build_template_function("a + b", dict(a=2, b=3))
>>> fnc()
5
>>> fnc.context["a"] = 10
>>> fnc()
13
"""
import ast
import collections.abc
import logging
import operator


LOG = logging.getLogger(__name__)

BUILTINS = dict(abs=abs, all=all, any=any, bool=bool, dict=dict,
                float=float, int=int, len=len, list=list, max=max, min=min,
                round=round, sorted=sorted, str=str, sum=sum, tuple=tuple)

BIN_OPS = {ast.Add: operator.add,
           ast.Sub: operator.sub,
           ast.Mult: operator.mul,
           ast.Div: operator.truediv,
           ast.FloorDiv: operator.floordiv,
           ast.Mod: operator.mod,
           ast.Pow: operator.pow,
           ast.LShift: operator.lshift,
           ast.RShift: operator.rshift,
           ast.BitOr: operator.or_,
           ast.BitXor: operator.xor,
           ast.BitAnd: operator.and_}

UNARY_OPS = {ast.UAdd: operator.pos,
             ast.USub: operator.neg,
             ast.Invert: operator.invert,
             ast.Not: operator.not_}

CMP_OPS = {ast.Eq: operator.eq,
           ast.NotEq: operator.ne,
           ast.Lt: operator.lt,
           ast.LtE: operator.le,
           ast.Gt: operator.gt,
           ast.GtE: operator.ge,
           ast.Is: operator.is_,
           ast.IsNot: operator.is_not,
           ast.In: lambda a, b: a in b,
           ast.NotIn: lambda a, b: a not in b}

NODES = (ast.Expression, ast.Constant, ast.Name, ast.Load, ast.BinOp,
         ast.UnaryOp, ast.BoolOp, ast.And, ast.Or, ast.Compare, ast.IfExp,
         ast.Tuple, ast.List, ast.Set, ast.Dict, ast.Subscript, ast.Slice,
         ast.Attribute, ast.Call, ast.keyword) + \
    tuple(BIN_OPS) + tuple(UNARY_OPS) + tuple(CMP_OPS)


class TemplateError(Exception):
    """Base class of errors in templates.
    """
    pass


class TemplateSyntaxError(TemplateError):
    """Exception to be raised if a template is malformed or uses expressions
    not supported.
    """
    pass


class UndefinedNameError(TemplateError, NameError):
    """Exception to be raised if a variable is not found in the context nor
    builtins.
    """
    pass


def _check_node(node, template):
    """
    :param node: :class:`ast.AST` object
    :param template: Template string for error messages
    """
    if not isinstance(node, NODES):
        raise TemplateSyntaxError("Not supported: %s in %r"
                                  % (type(node).__name__, template))

    if isinstance(node, ast.Attribute) and node.attr.startswith('_'):
        raise TemplateSyntaxError("Access to private attribute '%s' is not "
                                  "allowed: %r" % (node.attr, template))

    if isinstance(node, ast.keyword) and node.arg is None:
        raise TemplateSyntaxError("Keyword arguments unpacking is not "
                                  "supported: %r" % template)

    if isinstance(node, ast.Dict) and None in node.keys:
        raise TemplateSyntaxError("Dict unpacking is not supported: %r"
                                  % template)


def compile_template(template):
    """
    Parse and check template.

    :param template: Template string, an expression
    :return: :class:`ast.Expression` object

    >>> isinstance(compile_template("a + 1"), ast.Expression)
    True
    >>> compile_template("a +")  # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
    TemplateSyntaxError: ...
    """
    try:
        tree = ast.parse(template.strip(), mode="eval")
    except SyntaxError as exc:
        raise TemplateSyntaxError("Invalid template %r: %s"
                                  % (template, exc.msg))

    for node in ast.walk(tree):
        _check_node(node, template)

    LOG.debug("Compiled template: %r", template)
    return tree


class Evaluator(object):
    """Evaluate template expressions in a context.
    """
    def __init__(self, context):
        """
        :param context: A mapping object, {variable_name: value}
        """
        self.context = context

    def evaluate(self, node):
        """
        :param node: :class:`ast.AST` object compiled by
            :func:`compile_template`
        :return: The value of the expression
        """
        return getattr(self, "eval_" + type(node).__name__)(node)

    def eval_Expression(self, node):
        return self.evaluate(node.body)

    def eval_Constant(self, node):
        return node.value

    def eval_Name(self, node):
        if node.id in self.context:
            return self.context[node.id]

        if node.id in BUILTINS:
            return BUILTINS[node.id]

        raise UndefinedNameError("name '%s' is not defined" % node.id)

    def eval_BinOp(self, node):
        return BIN_OPS[type(node.op)](self.evaluate(node.left),
                                      self.evaluate(node.right))

    def eval_UnaryOp(self, node):
        return UNARY_OPS[type(node.op)](self.evaluate(node.operand))

    def eval_BoolOp(self, node):
        is_and = isinstance(node.op, ast.And)
        for value in node.values:
            val = self.evaluate(value)
            if bool(val) != is_and:  # Short-circuit.
                return val

        return val

    def eval_Compare(self, node):
        left = self.evaluate(node.left)
        for op, comparator in zip(node.ops, node.comparators):
            right = self.evaluate(comparator)
            res = CMP_OPS[type(op)](left, right)
            if not res:
                return res

            left = right

        return res

    def eval_IfExp(self, node):
        if self.evaluate(node.test):
            return self.evaluate(node.body)

        return self.evaluate(node.orelse)

    def eval_Tuple(self, node):
        return tuple(self.evaluate(elt) for elt in node.elts)

    def eval_List(self, node):
        return [self.evaluate(elt) for elt in node.elts]

    def eval_Set(self, node):
        return set(self.evaluate(elt) for elt in node.elts)

    def eval_Dict(self, node):
        return dict((self.evaluate(key), self.evaluate(val)) for key, val
                    in zip(node.keys, node.values))

    def eval_Subscript(self, node):
        return self.evaluate(node.value)[self.evaluate(node.slice)]

    def eval_Slice(self, node):
        return slice(*(None if part is None else self.evaluate(part)
                       for part in (node.lower, node.upper, node.step)))

    def eval_Attribute(self, node):
        obj = self.evaluate(node.value)
        if isinstance(obj, collections.abc.Mapping) and node.attr in obj:
            return obj[node.attr]

        return getattr(obj, node.attr)

    def eval_Call(self, node):
        fnc = self.evaluate(node.func)
        args = [self.evaluate(arg) for arg in node.args]
        kwargs = dict((kwd.arg, self.evaluate(kwd.value)) for kwd
                      in node.keywords)

        return fnc(*args, **kwargs)


class TemplateFunction(object):
    """
    Function evaluates a template in a context.
    """
    def __init__(self, template, context=None):
        """
        :param template: Template string, an expression
        :param context: A mapping object, {variable_name: value}
        """
        self.template = template
        self.context = {} if context is None else context
        self._tree = compile_template(template)

    def __repr__(self):
        return "<%s %r>" % (type(self).__name__, self.template)

    def __call__(self):
        return Evaluator(self.context).evaluate(self._tree)


def build_template_function(template, context=None):
    """
    Make a function evaluates `template` with variables in `context`.

    :param template: Template string, an expression
    :param context: A mapping object, {variable_name: value}

    :return: A :class:`TemplateFunction` object takes no arguments
    """
    return TemplateFunction(template, context)

# vim:sw=4:ts=4:et:
