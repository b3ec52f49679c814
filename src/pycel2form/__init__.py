"""pycel2form - Generate model-binding form input names from CEL access chains."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pycel2form")
except PackageNotFoundError:  # running from a source checkout
    __version__ = "0.0.0.dev0"

from collections.abc import Callable, Mapping
from typing import Any

from celpy.celparser import CELParseError, CELParser

from pycel2form._constants import DEFAULT_MAX_RECURSION_DEPTH, DEFAULT_PARAMETER_NAME
from pycel2form._errors import (
    ERR_MSG_SYNTAX,
    BindingError,
    ExpressionSyntaxError,
    InvalidIndexError,
    MaxDepthExceededError,
    UnresolvedReferenceError,
    UnsupportedExpressionError,
)
from pycel2form._evaluator import IndexEvaluator
from pycel2form._translator import Translator
from pycel2form.html import attribute, checked, disabled, readonly, selected, ternary
from pycel2form.path import Index, InputName, Member

__all__ = [
    "bind",
    "bind_to",
    "translate",
    "InputName",
    "Member",
    "Index",
    "attribute",
    "checked",
    "disabled",
    "readonly",
    "selected",
    "ternary",
    "BindingError",
    "ExpressionSyntaxError",
    "InvalidIndexError",
    "MaxDepthExceededError",
    "UnresolvedReferenceError",
    "UnsupportedExpressionError",
]

_parser = CELParser()


def bind(
    obj: Any,
    expression: str,
    *,
    variables: Mapping[str, Any] | None = None,
    conversions: Mapping[str, Callable[[Any], Any]] | None = None,
    parameter: str = DEFAULT_PARAMETER_NAME,
    max_depth: int | None = None,
) -> InputName:
    """Generate an input name for the member reached by a CEL access chain.

    A high-level interface to name binding, similar to how MVC works. Inside
    a repeater, ``bind(model, "m.Attendance[i].Name", variables={"i": 2})``
    gives ``Attendance[2].Name``, which binds back to that row on post.

    Args:
        obj: The object being bound. Only read when an index argument reads
            through the parameter.
        expression: Member and index accesses rooted at ``parameter``.
        variables: Captured values available to index arguments.
        conversions: Named one-argument functions index arguments may call,
            in addition to ``int()`` and ``uint()``.
        parameter: Identifier standing for ``obj``. Defaults to ``m``.
        max_depth: Maximum recursion depth. Defaults to 100.

    Returns:
        The InputName, ready to render or extend.

    Raises:
        ExpressionSyntaxError: If the expression does not parse.
        UnsupportedExpressionError: If the expression has a shape other than
            member access, indexing and the supported index arguments.
        InvalidIndexError: If an index argument is not an integer.
        UnresolvedReferenceError: If an index argument reads a missing name.
    """
    if max_depth is None:
        max_depth = DEFAULT_MAX_RECURSION_DEPTH

    try:
        tree = _parser.parse(expression)
    except CELParseError as e:
        raise ExpressionSyntaxError(
            ERR_MSG_SYNTAX,
            f"cannot parse {expression!r}: {e}",
            wrapped=e,
        ) from e

    activation: dict[str, Any] = dict(variables or {})
    activation[parameter] = obj

    evaluator = IndexEvaluator(activation, conversions, max_depth=max_depth)
    translator = Translator(evaluator, parameter, max_depth=max_depth)
    return translator.translate(tree)


bind_to = bind


def translate(
    obj: Any,
    expression: str,
    *,
    variables: Mapping[str, Any] | None = None,
    conversions: Mapping[str, Callable[[Any], Any]] | None = None,
    parameter: str = DEFAULT_PARAMETER_NAME,
    max_depth: int | None = None,
) -> str:
    """Render the input name for a CEL access chain.

    Same as ``bind(...).render()``; see :func:`bind` for the arguments.
    """
    return bind(
        obj,
        expression,
        variables=variables,
        conversions=conversions,
        parameter=parameter,
        max_depth=max_depth,
    ).render()
