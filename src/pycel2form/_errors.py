"""Exception hierarchy for form-name binding."""


class BindingError(Exception):
    """Base exception for form-name binding errors.

    Provides dual messaging: a sanitized user-facing message and
    internal details for logging.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped

    def internal(self) -> str:
        return self.internal_details


class UnsupportedExpressionError(BindingError):
    """Raised when an expression shape cannot be turned into a name."""


class InvalidIndexError(BindingError):
    """Raised when an index argument does not resolve to an integer."""


class UnresolvedReferenceError(BindingError):
    """Raised when an index argument reads a name that does not exist."""


class ExpressionSyntaxError(BindingError):
    """Raised when the access expression cannot be parsed."""


class MaxDepthExceededError(BindingError):
    """Raised when recursion depth limit is exceeded."""


# Sanitized user-facing error message constants
ERR_MSG_UNSUPPORTED_EXPRESSION = "unsupported expression type"
ERR_MSG_UNSUPPORTED_ROOT = "expression must be rooted at the parameter"
ERR_MSG_UNSUPPORTED_CALL = "unsupported function call"
ERR_MSG_UNSUPPORTED_OPERATOR = "unsupported operator"
ERR_MSG_INVALID_INDEX = "index must be an integer"
ERR_MSG_CONVERSION_FAILED = "index conversion failed"
ERR_MSG_UNRESOLVED_REFERENCE = "unresolved reference"
ERR_MSG_SYNTAX = "invalid access expression"
ERR_MSG_MAX_DEPTH = "maximum recursion depth exceeded"
