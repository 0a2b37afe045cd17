"""
Exception classes for jsonlookup path evaluation.

This module defines specific exception types for the different error
conditions that can occur while tokenizing, parsing and evaluating a path
or a filter predicate.
"""


class JSONLookupError(Exception):
    """Base exception for all jsonlookup errors."""

    pass


class PathSyntaxError(JSONLookupError):
    """Raised when a path string cannot be tokenized or parsed."""

    def __init__(self, path: str, reason: str, position: int | None = None):
        """
        Initialize the exception.

        Params:
            path: The path (or path token) that failed to parse
            reason: Why the path is invalid
            position: Optional character offset of the offending character
        """
        self.path = path
        self.reason = reason
        self.position = position

        message = f"Invalid path '{path}': {reason}"
        if position is not None:
            message = f"{message} (at position {position})"
        super().__init__(message)

    def format_pointer(self) -> str:
        """
        Format the path with a caret under the offending position.

        Returns:
            Two-line string (path, then caret line), or just the path when
            no position is known
        """
        if self.position is None:
            return self.path
        return f"{self.path}\n{' ' * self.position}^"


class PathEvaluationError(JSONLookupError):
    """Base exception for errors raised while walking a document."""

    pass


class KeyNotFoundError(PathEvaluationError):
    """Raised when an object has no member with the requested key."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"key error: {key} not found in object")


class NullTraversalError(PathEvaluationError):
    """
    Raised when a key is looked up on a null value.

    Kept apart from KeyNotFoundError so callers can tell a missing ancestor
    from a missing leaf.
    """

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"get attribute from null object: {key}")


class ValueTypeError(PathEvaluationError):
    """Raised when an operation is applied to a value of the wrong kind."""

    def __init__(self, expected: str, actual: str, message: str | None = None):
        """
        Initialize the exception.

        Params:
            expected: What the operation needed (e.g. "object", "array")
            actual: The kind of value that was found
            message: Optional replacement for the default message
        """
        self.expected = expected
        self.actual = actual
        super().__init__(message or f"object is not {expected}: {actual}")


class DocumentTypeError(ValueTypeError):
    """Raised when a document holds a value outside the JSON value model."""

    def __init__(self, value: object, detail: str | None = None):
        self.value = value
        actual = type(value).__name__
        message = f"unsupported document value of type {actual}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__("a JSON value", actual, message)


class IndexOutOfRangeError(PathEvaluationError):
    """Raised when an index or range bound falls outside an array."""

    def __init__(self, index: int | None, length: int, bound: str = "idx"):
        """
        Initialize the exception.

        Params:
            index: The requested index or range bound, as written in the path
            length: Actual length of the array
            bound: Which bound failed ("idx", "from" or "to")
        """
        self.index = index
        self.length = length
        self.bound = bound
        if bound == "idx":
            prefix = "index out of range"
        else:
            prefix = f"index [{bound}] out of range"
        super().__init__(f"{prefix}: len: {length}, {bound}: {index}")


class EmptyIndexError(PathEvaluationError):
    """Raised when an index segment carries no positions."""

    def __init__(self):
        super().__init__("cannot index on empty list")


class FilterError(JSONLookupError):
    """Base exception for filter predicate errors."""

    pass


class FilterSyntaxError(FilterError):
    """Raised when a filter predicate or one of its operand paths is malformed."""

    def __init__(self, predicate: str, reason: str, position: int | None = None):
        self.predicate = predicate
        self.reason = reason
        self.position = position

        message = f"Invalid filter '{predicate}': {reason}"
        if position is not None:
            message = f"{message} (at position {position})"
        super().__init__(message)


class UnsupportedOperatorError(FilterError):
    """Raised when a comparison uses an operator outside <, <=, ==, >= and >."""

    def __init__(self, operator: str):
        self.operator = operator
        super().__init__(f"op should only be <, <=, ==, >= and >, got '{operator}'")


class OperatorNotImplementedError(FilterError):
    """Raised when a recognized operator has no implementation available."""

    def __init__(self, operator: str, hint: str | None = None):
        self.operator = operator
        message = f"filter operator '{operator}' is not implemented"
        if hint:
            message = f"{message}; {hint}"
        super().__init__(message)
