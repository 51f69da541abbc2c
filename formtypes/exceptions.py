"""Exception hierarchy for formtypes.

All errors raised by the registry and the factory derive from FormError.
They are raised synchronously and are never recovered internally: a
misconfigured type is always surfaced to the caller.
"""

from typing import Any, Iterable, List, Optional


def _quote_all(names: Iterable[str]) -> str:
    return ", ".join(f'"{n}"' for n in names)


class FormError(Exception):
    """Base class for every formtypes error."""


class UnknownTypeError(FormError):
    """Raised when no provider owns the requested type name.

    Attributes:
        name: The type name that could not be resolved
    """

    def __init__(self, name: str):
        self.name = name
        super().__init__(f'Could not load type "{name}"')


class InvalidArgumentError(FormError, TypeError):
    """Raised when an argument has an unexpected shape.

    Attributes:
        value: The offending value
        expected: Human-readable description of the accepted forms

    Examples:
        >>> str(InvalidArgumentError(object(), "str or FormTypeInterface"))
        'Expected argument of type "str or FormTypeInterface", "object" given'
    """

    def __init__(self, value: Any, expected: str):
        self.value = value
        self.expected = expected
        super().__init__(
            f'Expected argument of type "{expected}", "{type(value).__name__}" given'
        )


class TypeDefinitionError(FormError):
    """Raised when a type definition violates its contract.

    Examples are a type hierarchy that misses one of the foundational
    options, a type whose builder hook returns no builder, or a type that
    names itself as its parent.

    Attributes:
        type_name: Name of the offending type
    """

    def __init__(self, type_name: str, message: str):
        self.type_name = type_name
        super().__init__(message)


class InvalidOptionError(FormError):
    """Raised for unknown option keys or disallowed option values.

    Attributes:
        options: Offending option names, sorted
        known_options: Every recognized option name, sorted (empty when the
            error is about a value rather than a key)
    """

    def __init__(
        self,
        message: str,
        options: Iterable[str],
        known_options: Optional[Iterable[str]] = None,
    ):
        self.options: List[str] = sorted(options)
        self.known_options: List[str] = sorted(known_options or [])
        super().__init__(message)

    @classmethod
    def unknown(cls, options: Iterable[str], known_options: Iterable[str]) -> "InvalidOptionError":
        """Build the error for option keys no type in the hierarchy declares."""
        unknown = sorted(options)
        known = sorted(known_options)
        if len(unknown) == 1:
            head = f'The option "{unknown[0]}" does not exist.'
        else:
            head = f"The options {_quote_all(unknown)} do not exist."
        return cls(f"{head} Known options are: {_quote_all(known)}", unknown, known)

    @classmethod
    def disallowed(cls, option: str, value: Any, allowed: Iterable[Any]) -> "InvalidOptionError":
        """Build the error for a recognized option holding a value outside its allowed set."""
        return cls(
            f'The option "{option}" has the value "{value}", but is expected to be '
            f"one of {_quote_all(str(v) for v in allowed)}",
            [option],
        )


__all__ = [
    "FormError",
    "UnknownTypeError",
    "InvalidArgumentError",
    "TypeDefinitionError",
    "InvalidOptionError",
]
