"""Error taxonomy shared by the domain and parsing layers.

Recoverable errors (bad user input) derive from ``EduLogError`` and carry a
message that callers show to the user verbatim. Contract violations
(``None`` arguments, mutating a read-only view) derive from ``TypeError``.
"""
from typing import Any


class EduLogError(Exception):
    """Base class for recoverable EduLog errors."""


class ParseError(EduLogError):
    """Raised when raw user input cannot be turned into a domain object.

    Attributes:
        message: Human-readable description of the constraint that failed
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class InvalidFormatError(ParseError):
    """A single value does not satisfy its format rule."""


class InvalidRelationError(ParseError):
    """Individually valid values break a constraint that spans them."""


class NullArgumentError(TypeError):
    """A required argument was None."""


class UnsupportedMutationError(TypeError):
    """Attempted to modify a read-only collection."""


def require_non_null(obj: Any, name: str = "argument") -> Any:
    """Return ``obj`` unchanged, or raise if it is None.

    Args:
        obj: Value to check
        name: Argument name used in the error message

    Raises:
        NullArgumentError: If ``obj`` is None
    """
    if obj is None:
        raise NullArgumentError(f"{name} must not be None")
    return obj


def require_all_non_null(*objs: Any) -> None:
    """Raise if any of ``objs`` is None."""
    for position, obj in enumerate(objs):
        if obj is None:
            raise NullArgumentError(f"argument {position} must not be None")
