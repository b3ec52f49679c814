"""Shared lark Interpreter plumbing for walking CEL parse trees."""

from __future__ import annotations

from typing import Any

from lark import Token, Tree
from lark.visitors import Interpreter

from pycel2form._constants import DEFAULT_MAX_RECURSION_DEPTH
from pycel2form._errors import (
    ERR_MSG_MAX_DEPTH,
    ERR_MSG_UNSUPPORTED_EXPRESSION,
    ERR_MSG_UNSUPPORTED_OPERATOR,
    MaxDepthExceededError,
    UnsupportedExpressionError,
)


def describe(node: Tree | Token) -> str:
    """Short description of a node for diagnostics."""
    if isinstance(node, Token):
        return f"{node.type} {str(node)!r}"
    return node.data


class Walker(Interpreter):
    """Base interpreter: depth limit, transparent wrappers, strict default.

    The CEL grammar nests every expression in a precedence chain
    (``expr`` > ``conditionalor`` > ... > ``member`` > ``primary``). A level
    with one child is a plain wrapper; a level with more carries an operator,
    which no access chain contains.
    """

    def __init__(self, max_depth: int = DEFAULT_MAX_RECURSION_DEPTH) -> None:
        self._max_depth = max_depth
        self._depth = 0

    def _visit_child(self, tree: Tree | Token) -> Any:
        """Visit a child node, incrementing depth."""
        self._depth += 1
        try:
            if self._depth > self._max_depth:
                raise MaxDepthExceededError(
                    ERR_MSG_MAX_DEPTH,
                    f"depth {self._depth} exceeds limit {self._max_depth}",
                )
            return self.visit(tree)
        finally:
            self._depth -= 1

    def visit(self, tree: Tree | Token) -> Any:
        if isinstance(tree, Token):
            raise UnsupportedExpressionError(
                ERR_MSG_UNSUPPORTED_EXPRESSION,
                f"unexpected bare token: {describe(tree)}",
            )
        return super().visit(tree)

    def __default__(self, tree: Tree) -> Any:
        raise UnsupportedExpressionError(
            ERR_MSG_UNSUPPORTED_EXPRESSION,
            f"unrecognized expression type ({tree.data})",
        )

    def _passthrough(self, tree: Tree) -> Any:
        if len(tree.children) == 1:
            return self._visit_child(tree.children[0])
        kind = tree.children[0].data if isinstance(tree.children[0], Tree) else tree.data
        raise UnsupportedExpressionError(
            ERR_MSG_UNSUPPORTED_OPERATOR,
            f"unrecognized expression type ({kind}) in {tree.data}",
        )

    # ---- Precedence chain wrappers ----

    expr = _passthrough
    conditionalor = _passthrough
    conditionaland = _passthrough
    relation = _passthrough
    addition = _passthrough
    multiplication = _passthrough
    unary = _passthrough
    member = _passthrough
    primary = _passthrough

    def paren_expr(self, tree: Tree) -> Any:
        return self._visit_child(tree.children[0])
