"""Type guesser reading Python type annotations.

Guesses come from the class annotations of the target and, for
dataclasses, from the ``max_length`` / ``min_length`` keys of a field's
metadata::

    @dataclass
    class Author:
        first_name: str = field(default="", metadata={"max_length": 50})
        nickname: Optional[str] = None
        active: bool = True
"""

import dataclasses
import inspect
import logging
import types
from typing import Any, Dict, Optional, Tuple, Union, get_args, get_origin, get_type_hints

from formtypes.guess import AbstractTypeGuesser, TypeGuess, ValueGuess
from formtypes.types import Confidence

logger = logging.getLogger(__name__)

NoneType = type(None)


class AnnotationTypeGuesser(AbstractTypeGuesser):
    """Guesses form types and options from class annotations.

    Examples:
        >>> class Author:
        ...     name: str
        ...     active: bool
        >>> AnnotationTypeGuesser().guess_type(Author, "active")
        TypeGuess(type='checkbox', options={}, confidence=<Confidence.HIGH: 2>)
    """

    TYPE_MAP: Dict[Any, Tuple[str, Confidence]] = {
        bool: ("checkbox", Confidence.HIGH),
        int: ("integer", Confidence.MEDIUM),
        str: ("text", Confidence.LOW),
    }

    def guess_type(self, cls: Any, property: str) -> Optional[TypeGuess]:
        annotation = self._annotation(cls, property)
        if annotation is None:
            return None
        inner, _ = self._unwrap_optional(annotation)
        if inner not in self.TYPE_MAP:
            return None
        type_name, confidence = self.TYPE_MAP[inner]
        return TypeGuess(type_name, {}, confidence)

    def guess_required(self, cls: Any, property: str) -> Optional[ValueGuess]:
        annotation = self._annotation(cls, property)
        if annotation is None:
            return None
        _, optional = self._unwrap_optional(annotation)
        if optional:
            return ValueGuess(False, Confidence.HIGH)
        return ValueGuess(True, Confidence.LOW)

    def guess_max_length(self, cls: Any, property: str) -> Optional[ValueGuess]:
        return self._metadata_guess(cls, property, "max_length")

    def guess_min_length(self, cls: Any, property: str) -> Optional[ValueGuess]:
        return self._metadata_guess(cls, property, "min_length")

    def _annotation(self, cls: Any, property: str) -> Any:
        if not inspect.isclass(cls):
            return None
        try:
            hints = get_type_hints(cls)
        except (NameError, TypeError, SyntaxError) as e:
            logger.debug("Cannot resolve annotations of %r: %s", cls, e)
            return None
        return hints.get(property)

    @staticmethod
    def _unwrap_optional(annotation: Any) -> Tuple[Any, bool]:
        """Split ``Optional[X]`` / ``X | None`` into ``(X, True)``."""
        if get_origin(annotation) in (Union, types.UnionType):
            args = [a for a in get_args(annotation) if a is not NoneType]
            optional = len(args) < len(get_args(annotation))
            if len(args) == 1:
                return args[0], optional
            return annotation, optional
        return annotation, False

    @staticmethod
    def _metadata_guess(cls: Any, property: str, key: str) -> Optional[ValueGuess]:
        if not (inspect.isclass(cls) and dataclasses.is_dataclass(cls)):
            return None
        for f in dataclasses.fields(cls):
            if f.name == property and key in f.metadata:
                return ValueGuess(f.metadata[key], Confidence.HIGH)
        return None


__all__ = [
    "AnnotationTypeGuesser",
]
