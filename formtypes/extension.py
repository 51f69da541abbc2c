"""Providers of form types, type extensions and type guessers.

A provider (called an *extension* throughout the library) contributes a
batch of types, type extensions and guessers. The registry and the factory
consult providers in the order they were given and rely only on the three
enumeration methods of FormExtensionInterface.
"""

from typing import Dict, Iterable, List, Optional, Sequence

from typing_extensions import Protocol, runtime_checkable

from formtypes.exceptions import InvalidArgumentError, UnknownTypeError
from formtypes.form_type import FormTypeExtensionInterface, FormTypeInterface
from formtypes.guess import FormTypeGuesserInterface


@runtime_checkable
class FormExtensionInterface(Protocol):
    """Enumeration contract consumed by the registry and the factory."""

    def load_types(self) -> Sequence[FormTypeInterface]:
        ...

    def load_type_extensions(self) -> Sequence[FormTypeExtensionInterface]:
        ...

    def load_type_guessers(self) -> Sequence[FormTypeGuesserInterface]:
        ...


class AbstractExtension:
    """Base provider that loads its contents once, on first use.

    Subclasses override _load_types(), _load_type_extensions() and
    _load_type_guessers(). Types are indexed by name and extensions by the
    name of the type they extend, keeping their declaration order.
    """

    def __init__(self) -> None:
        self._types: Optional[Dict[str, FormTypeInterface]] = None
        self._type_extensions: Optional[Dict[str, List[FormTypeExtensionInterface]]] = None
        self._type_guessers: Optional[List[FormTypeGuesserInterface]] = None

    def _load_types(self) -> Iterable[FormTypeInterface]:
        return []

    def _load_type_extensions(self) -> Iterable[FormTypeExtensionInterface]:
        return []

    def _load_type_guessers(self) -> Iterable[FormTypeGuesserInterface]:
        return []

    def _init_types(self) -> Dict[str, FormTypeInterface]:
        if self._types is None:
            types: Dict[str, FormTypeInterface] = {}
            for type_ in self._load_types():
                if not isinstance(type_, FormTypeInterface):
                    raise InvalidArgumentError(type_, "FormTypeInterface")
                types[type_.get_name()] = type_
            self._types = types
        return self._types

    def _init_type_extensions(self) -> Dict[str, List[FormTypeExtensionInterface]]:
        if self._type_extensions is None:
            extensions: Dict[str, List[FormTypeExtensionInterface]] = {}
            for extension in self._load_type_extensions():
                if not isinstance(extension, FormTypeExtensionInterface):
                    raise InvalidArgumentError(extension, "FormTypeExtensionInterface")
                extensions.setdefault(extension.get_extended_type(), []).append(extension)
            self._type_extensions = extensions
        return self._type_extensions

    def load_types(self) -> List[FormTypeInterface]:
        return list(self._init_types().values())

    def load_type_extensions(self) -> List[FormTypeExtensionInterface]:
        return [e for exts in self._init_type_extensions().values() for e in exts]

    def load_type_guessers(self) -> List[FormTypeGuesserInterface]:
        if self._type_guessers is None:
            self._type_guessers = list(self._load_type_guessers())
        return list(self._type_guessers)

    def has_type(self, name: str) -> bool:
        return name in self._init_types()

    def get_type(self, name: str) -> FormTypeInterface:
        """Return the type with the given name.

        Raises:
            UnknownTypeError: If this provider does not own the name
        """
        types = self._init_types()
        if name not in types:
            raise UnknownTypeError(name)
        return types[name]

    def has_type_extensions(self, name: str) -> bool:
        return bool(self._init_type_extensions().get(name))

    def get_type_extensions(self, name: str) -> List[FormTypeExtensionInterface]:
        return list(self._init_type_extensions().get(name, []))


class PreloadedExtension(AbstractExtension):
    """Provider assembled from ready-made instances.

    Examples:
        >>> from formtypes.core import TextType
        >>> extension = PreloadedExtension(types=[TextType()])
        >>> extension.has_type("text")
        True
    """

    def __init__(
        self,
        types: Iterable[FormTypeInterface] = (),
        type_extensions: Iterable[FormTypeExtensionInterface] = (),
        type_guessers: Iterable[FormTypeGuesserInterface] = (),
    ):
        super().__init__()
        self._preloaded_types = list(types)
        self._preloaded_type_extensions = list(type_extensions)
        self._preloaded_type_guessers = list(type_guessers)

    def _load_types(self):
        return self._preloaded_types

    def _load_type_extensions(self):
        return self._preloaded_type_extensions

    def _load_type_guessers(self):
        return self._preloaded_type_guessers


__all__ = [
    "FormExtensionInterface",
    "AbstractExtension",
    "PreloadedExtension",
]
