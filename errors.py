"""URL manager error types.

Every error carries a short code and an ordered list of detail lines.

Codes:
    0xx - construction errors
        001: bad constructor arguments
        002: malformed query pair (strict parsing)
    1xx - method errors
        101: argument has the wrong type
        102: method called with no arguments
        103: value passed where a URLParameter was expected
    2xx - generic / bounds errors
        201: occurrence out of range
"""
from typing import List


UNFORMATTABLE = "format_error could not format the passed in error."


class URLManagerError(Exception):
    """Base error with a code and supplementary detail lines."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message
        self.lines: List[str] = []

    def add_line(self, line: str) -> "URLManagerError":
        """Append an extra line of information. Returns self for chaining."""
        self.lines.append(line)
        return self

    @staticmethod
    def format(error: BaseException) -> str:
        return format_error(error)

    def __str__(self) -> str:
        return self.message


class ConstructionError(URLManagerError, TypeError):
    """Raised when constructor arguments fail their type check."""

    def __init__(self, message: str = "Constructor error - unacceptable parameters passed to the constructor."):
        super().__init__("001", message)


class QueryParseError(URLManagerError, ValueError):
    """Raised in strict mode when a query pair has no '='."""

    def __init__(self, pair: str):
        super().__init__("002", "Query parse error - pair is missing '='.")
        self.pair = pair
        self.add_line(f"pair: {pair!r}")


class ArgumentTypeError(URLManagerError, TypeError):
    """Raised when a method argument has the wrong type."""

    def __init__(self, message: str, code: str = "101"):
        super().__init__(code, message)


class ArityError(URLManagerError, TypeError):
    """Raised when a variadic method gets no arguments."""

    def __init__(self, method: str):
        super().__init__("102", f"{method}() expects at least one argument.")


class InvalidArgumentError(ArgumentTypeError):
    """Raised when a non-URLParameter is passed to add_param."""

    def __init__(self, value: object, position: int):
        super().__init__("add_param() only accepts URLParameter instances.", code="103")
        self.value = value
        self.position = position
        self.add_line(f"argument {position}: {value!r} <{type(value).__name__}>")


class OccurrenceRangeError(URLManagerError, ValueError):
    """Raised when an occurrence index is below 1."""

    def __init__(self, occurrence: int):
        super().__init__("201", "occurrence is 1-indexed and must be at least 1.")
        self.add_line(f"occurrence: {occurrence}")


def type_line(name: str, value: object) -> str:
    """Render 'name: value <type>' for diagnostics."""
    return f"{name}: {value!r} <{type(value).__name__}>"


def format_error(error: BaseException) -> str:
    """
    Format a URLManagerError into a single multi-line string.

    Args:
        error: Caught exception (ideally a URLManagerError)

    Returns:
        "<code>: <message>" followed by one line per detail line
    """
    if not isinstance(error, URLManagerError):
        return UNFORMATTABLE

    out = f"{error.code}: {error.message}\n"
    for line in error.lines:
        out += f"{line}\n"
    return out
