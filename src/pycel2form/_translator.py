"""Translator - Lark Interpreter turning CEL access chains into input names."""

from __future__ import annotations

import logging

from lark import Tree

from pycel2form._constants import DEFAULT_MAX_RECURSION_DEPTH, DEFAULT_PARAMETER_NAME
from pycel2form._errors import (
    ERR_MSG_UNSUPPORTED_CALL,
    ERR_MSG_UNSUPPORTED_EXPRESSION,
    ERR_MSG_UNSUPPORTED_ROOT,
    BindingError,
    UnsupportedExpressionError,
)
from pycel2form._evaluator import IndexEvaluator
from pycel2form._walker import Walker
from pycel2form.path import InputName

logger = logging.getLogger(__name__)


class Translator(Walker):
    """Converts the parse tree of an access chain into an ``InputName``.

    The chain is unwound outside-in: each member or index step first
    translates the object it is applied to, then appends itself. The
    recursion bottoms out at the parameter identifier, which contributes
    nothing to the name.
    """

    def __init__(
        self,
        evaluator: IndexEvaluator,
        parameter: str = DEFAULT_PARAMETER_NAME,
        max_depth: int = DEFAULT_MAX_RECURSION_DEPTH,
    ) -> None:
        super().__init__(max_depth)
        self._evaluator = evaluator
        self._parameter = parameter

    def translate(self, tree: Tree) -> InputName:
        """Translate a whole expression."""
        try:
            name = self._visit_child(tree)
        except BindingError as e:
            logger.debug("access chain rejected: %s", e.internal())
            raise
        logger.debug("translated access chain to %r", name.render())
        return name

    def ident(self, tree: Tree) -> InputName:
        name = str(tree.children[0])
        if name != self._parameter:
            raise UnsupportedExpressionError(
                ERR_MSG_UNSUPPORTED_ROOT,
                f"identifier '{name}' is not the parameter '{self._parameter}'",
            )
        return InputName()

    def member_dot(self, tree: Tree) -> InputName:
        """Member access: a.b"""
        return self._visit_child(tree.children[0]).append_member(str(tree.children[1]))

    def member_index(self, tree: Tree) -> InputName:
        """Index access: a[i]"""
        prefix = self._visit_child(tree.children[0])
        # the index argument shares the depth budget of the chain around it
        index = self._evaluator.evaluate_index(tree.children[1], self._depth)
        return prefix.append_index(index)

    def member_dot_arg(self, tree: Tree) -> InputName:
        raise UnsupportedExpressionError(
            ERR_MSG_UNSUPPORTED_CALL,
            f"unrecognized expression type (member_dot_arg): method {tree.children[1]}()",
        )

    def ident_arg(self, tree: Tree) -> InputName:
        raise UnsupportedExpressionError(
            ERR_MSG_UNSUPPORTED_CALL,
            f"unrecognized expression type (ident_arg): function {tree.children[0]}()",
        )

    def literal(self, tree: Tree) -> InputName:
        raise UnsupportedExpressionError(
            ERR_MSG_UNSUPPORTED_EXPRESSION,
            f"unrecognized expression type (literal): {tree.children[0]}",
        )
