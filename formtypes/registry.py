"""Type registry resolving type names through an ordered list of providers.

Usage:
    >>> from formtypes.core import CoreExtension
    >>> registry = TypeRegistry([CoreExtension()])
    >>> registry.has_type("text")
    True
    >>> registry.get_type("text") is registry.get_type("text")
    True
"""

import logging
import re
from typing import Dict, List, Sequence

from formtypes.exceptions import InvalidArgumentError, TypeDefinitionError, UnknownTypeError
from formtypes.extension import FormExtensionInterface
from formtypes.form_type import FormTypeExtensionInterface, FormTypeInterface

logger = logging.getLogger(__name__)

TYPE_NAME_PATTERN = re.compile(r"[a-z0-9_]+", re.IGNORECASE)


class TypeRegistry:
    """Caches resolved types and attaches their extensions.

    Providers are consulted in the order given. When looking up a name, the
    first provider that owns it wins. Extensions for a type are collected from
    every provider, in provider order and then in declaration order within
    each provider.

    Attributes:
        extensions: The ordered provider sequence
    """

    def __init__(self, extensions: Sequence[FormExtensionInterface]):
        for extension in extensions:
            if not isinstance(extension, FormExtensionInterface):
                raise InvalidArgumentError(extension, "FormExtensionInterface")
        self.extensions: List[FormExtensionInterface] = list(extensions)
        self._types: Dict[str, FormTypeInterface] = {}

    def get_extensions(self) -> List[FormExtensionInterface]:
        return list(self.extensions)

    def has_type(self, name: str) -> bool:
        """Check whether a type is registered or can be loaded from a provider."""
        if name in self._types:
            return True
        try:
            self.get_type(name)
        except UnknownTypeError:
            return False
        return True

    def is_registered(self, type_: FormTypeInterface) -> bool:
        """Check whether this exact instance is cached under its name."""
        return self._types.get(type_.get_name()) is type_

    def add_type(self, type_: FormTypeInterface) -> None:
        """Register a type, attaching every provider's extensions for it.

        Raises:
            TypeDefinitionError: If the type name contains invalid characters
        """
        self._validate_type_name(type_)
        self._load_type_extensions(type_)
        self._types[type_.get_name()] = type_
        logger.debug("Registered form type %r", type_.get_name())

    def get_type(self, name: str) -> FormTypeInterface:
        """Return the type with the given name, loading it on first use.

        Raises:
            InvalidArgumentError: If name is not a string
            UnknownTypeError: If no provider owns the name
        """
        if not isinstance(name, str):
            raise InvalidArgumentError(name, "str")
        if name not in self._types:
            self._load_type(name)
        return self._types[name]

    def _load_type(self, name: str) -> None:
        for extension in self.extensions:
            for type_ in extension.load_types():
                if type_.get_name() == name:
                    logger.debug("Loaded form type %r from %s", name, type(extension).__name__)
                    self.add_type(type_)
                    return
        logger.debug("No provider owns form type %r", name)
        raise UnknownTypeError(name)

    def _load_type_extensions(self, type_: FormTypeInterface) -> None:
        name = type_.get_name()
        type_extensions: List[FormTypeExtensionInterface] = []
        for extension in self.extensions:
            type_extensions.extend(
                e for e in extension.load_type_extensions() if e.get_extended_type() == name
            )
        type_.set_extensions(type_extensions)

    def _validate_type_name(self, type_: FormTypeInterface) -> None:
        name = type_.get_name()
        if not isinstance(name, str) or not TYPE_NAME_PATTERN.fullmatch(name):
            raise TypeDefinitionError(
                str(name),
                f'The "{type(type_).__name__}" form type name ("{name}") is not valid. '
                f'Names must only contain letters, numbers, and "_".',
            )


__all__ = [
    "TypeRegistry",
]
