"""Resolve index arguments of an access chain to concrete values."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from lark import Token, Tree

from pycel2form._constants import DEFAULT_MAX_RECURSION_DEPTH
from pycel2form._errors import (
    ERR_MSG_CONVERSION_FAILED,
    ERR_MSG_INVALID_INDEX,
    ERR_MSG_UNRESOLVED_REFERENCE,
    ERR_MSG_UNSUPPORTED_CALL,
    ERR_MSG_UNSUPPORTED_EXPRESSION,
    ERR_MSG_UNSUPPORTED_OPERATOR,
    InvalidIndexError,
    UnresolvedReferenceError,
    UnsupportedExpressionError,
)
from pycel2form._walker import Walker, describe

# Functions treated as generic integer coercion
INTEGER_CONVERSIONS = frozenset({"int", "uint"})


def _strip_quotes(s: str) -> str:
    """Strip surrounding quotes from a CEL string literal token."""
    if s.startswith(('r"', "r'", 'R"', "R'")):
        s = s[1:]
    if s.startswith('"""') or s.startswith("'''"):
        return s[3:-3]
    if s.startswith('"') or s.startswith("'"):
        return s[1:-1]
    return s


def _parse_int(text: str) -> int:
    """Parse a CEL integer literal; decimal digits may carry leading zeros."""
    digits = text.lstrip("-")
    base = 16 if digits[:2] in ("0x", "0X") else 10
    return int(text, base)


def literal_value(token: Token) -> Any:
    """Python value of a CEL literal token."""
    text = str(token)
    if token.type == "INT_LIT":
        return _parse_int(text)
    if token.type == "UINT_LIT":
        return _parse_int(text.rstrip("uU"))
    if token.type == "FLOAT_LIT":
        return float(text)
    if token.type in ("STRING_LIT", "MLSTRING_LIT"):
        return _strip_quotes(text)
    if token.type == "BOOL_LIT":
        return text == "true"
    if token.type == "NULL_LIT":
        return None
    raise UnsupportedExpressionError(
        "unsupported literal type",
        f"unknown token type: {token.type}",
    )


def _literal_token(tree: Tree | Token) -> Token | None:
    """Find the literal token under a chain of single-child wrappers."""
    node = tree
    while isinstance(node, Tree):
        if node.data == "literal":
            tok = node.children[0] if node.children else None
            return tok if isinstance(tok, Token) else None
        if len(node.children) != 1:
            return None
        node = node.children[0]
    return None


class IndexEvaluator(Walker):
    """Evaluates index arguments: constants, field and property reads, conversions.

    Reads are made against live objects at translation time, so any getter
    reachable from the expression may run. Identifiers resolve against the
    activation, which holds the captured variables and the bound object under
    the parameter name.
    """

    def __init__(
        self,
        activation: Mapping[str, Any],
        conversions: Mapping[str, Callable[[Any], Any]] | None = None,
        max_depth: int = DEFAULT_MAX_RECURSION_DEPTH,
    ) -> None:
        super().__init__(max_depth)
        self._activation = activation
        self._conversions = conversions or {}

    def evaluate(self, tree: Tree, depth: int = 0) -> Any:
        """Evaluate ``tree``, counting depth on from ``depth``."""
        self._depth = depth
        try:
            return self._visit_child(tree)
        finally:
            self._depth = 0

    def evaluate_index(self, tree: Tree, depth: int = 0) -> int:
        """Evaluate an index argument and require an integer result."""
        value = self.evaluate(tree, depth)
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidIndexError(
                ERR_MSG_INVALID_INDEX,
                f"index resolved to {type(value).__name__}: {value!r}",
            )
        return value

    # ---- Constants ----

    def literal(self, tree: Tree) -> Any:
        token = tree.children[0]
        if not isinstance(token, Token):
            raise UnsupportedExpressionError("unexpected literal structure")
        return literal_value(token)

    def unary(self, tree: Tree) -> Any:
        children = tree.children
        if len(children) == 1:
            return self._visit_child(children[0])

        op_node = children[0]
        # A negated numeric literal is still a constant
        if len(children) == 2 and isinstance(op_node, Tree) and op_node.data == "unary_neg":
            token = _literal_token(children[1])
            if token is not None and token.type in ("INT_LIT", "FLOAT_LIT"):
                return -literal_value(token)

        raise UnsupportedExpressionError(
            ERR_MSG_UNSUPPORTED_OPERATOR,
            f"unrecognized expression type ({describe(op_node)}) in unary",
        )

    # ---- Field and property reads ----

    def ident(self, tree: Tree) -> Any:
        name = str(tree.children[0])
        try:
            return self._activation[name]
        except KeyError:
            raise UnresolvedReferenceError(
                ERR_MSG_UNRESOLVED_REFERENCE,
                f"name '{name}' is not a captured variable",
            ) from None

    def member_dot(self, tree: Tree) -> Any:
        """Read ``a.b``: a key of a mapping, otherwise an attribute."""
        target = self._visit_child(tree.children[0])
        name = str(tree.children[1])
        if isinstance(target, Mapping):
            try:
                return target[name]
            except KeyError:
                raise UnresolvedReferenceError(
                    ERR_MSG_UNRESOLVED_REFERENCE,
                    f"mapping has no field '{name}'",
                ) from None
        try:
            return getattr(target, name)
        except AttributeError as e:
            raise UnresolvedReferenceError(
                ERR_MSG_UNRESOLVED_REFERENCE,
                f"{type(target).__name__} object has no property '{name}'",
                wrapped=e,
            ) from e

    # ---- Numeric conversions ----

    def ident_arg(self, tree: Tree) -> Any:
        """Conversion call: ``int(x)``, ``uint(x)`` or a registered conversion."""
        func_name = str(tree.children[0])
        args_node = tree.children[1] if len(tree.children) > 1 else None
        args = args_node.children if args_node is not None else []

        convert = self._conversions.get(func_name)
        if convert is None and func_name not in INTEGER_CONVERSIONS:
            raise UnsupportedExpressionError(
                ERR_MSG_UNSUPPORTED_CALL,
                f"unknown function: {func_name}",
            )
        if len(args) != 1:
            raise UnsupportedExpressionError(
                ERR_MSG_UNSUPPORTED_CALL,
                f"{func_name}() takes exactly one argument, got {len(args)}",
            )

        value = self._visit_child(args[0])
        if convert is not None:
            return convert(value)
        return self._coerce_integer(func_name, value)

    def _coerce_integer(self, func_name: str, value: Any) -> int:
        try:
            result = int(value)
        except (TypeError, ValueError) as e:
            raise InvalidIndexError(
                ERR_MSG_CONVERSION_FAILED,
                f"{func_name}() cannot convert {type(value).__name__}: {value!r}",
                wrapped=e,
            ) from e
        if func_name == "uint" and result < 0:
            raise InvalidIndexError(
                ERR_MSG_CONVERSION_FAILED,
                f"uint() of negative value {result}",
            )
        return result

    # ---- Rejected shapes ----

    def member_index(self, tree: Tree) -> Any:
        raise UnsupportedExpressionError(
            ERR_MSG_UNSUPPORTED_EXPRESSION,
            "unrecognized expression type (member_index) in index argument",
        )

    def member_dot_arg(self, tree: Tree) -> Any:
        raise UnsupportedExpressionError(
            ERR_MSG_UNSUPPORTED_CALL,
            f"unknown method: {tree.children[1]}",
        )
