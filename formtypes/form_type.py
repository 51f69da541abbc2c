"""Form type and type extension definitions.

A form type is a named, reusable blueprint for a field. It declares the
options it understands together with their defaults, optionally restricts
the values some options may take, may name a parent type whose options and
build hook it inherits, and configures builders in its build hook.

A type extension attaches to exactly one type name. It can declare extra
options, widen the allowed values of existing ones, and run its own build
hook after the extended type's.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from formtypes.exceptions import InvalidArgumentError

if TYPE_CHECKING:
    from formtypes.builder import FormBuilder
    from formtypes.factory import FormFactory

OptionValues = Dict[str, List[Any]]


class FormTypeExtensionInterface(ABC):
    """Contract for extensions of a single form type."""

    @abstractmethod
    def get_extended_type(self) -> str:
        """Name of the type this extension attaches to."""

    @abstractmethod
    def build_form(self, builder: "FormBuilder", options: Dict[str, Any]) -> None:
        """Configure the builder after the extended type has done so."""

    @abstractmethod
    def get_default_options(self, options: Dict[str, Any]) -> Dict[str, Any]:
        """Additional options, and defaults overriding the extended type's."""

    @abstractmethod
    def get_allowed_option_values(self, options: Dict[str, Any]) -> OptionValues:
        """Values to add to the allowed sets of the extended type's options."""


class FormTypeInterface(ABC):
    """Contract for form types."""

    @abstractmethod
    def get_name(self) -> str:
        """Unique name of this type."""

    @abstractmethod
    def get_parent(self, options: Dict[str, Any]) -> Optional[str]:
        """Name of the parent type, or None for a root type."""

    @abstractmethod
    def get_default_options(self, options: Dict[str, Any]) -> Dict[str, Any]:
        """Options understood by this type mapped to their defaults."""

    @abstractmethod
    def get_allowed_option_values(self, options: Dict[str, Any]) -> OptionValues:
        """Option names mapped to the only values they may take."""

    @abstractmethod
    def create_builder(
        self, name: str, factory: "FormFactory", options: Dict[str, Any]
    ) -> Optional["FormBuilder"]:
        """Return a new builder, or None to let a parent type create it."""

    @abstractmethod
    def build_form(self, builder: "FormBuilder", options: Dict[str, Any]) -> None:
        """Configure the builder with the resolved options."""

    @abstractmethod
    def get_extensions(self) -> List[FormTypeExtensionInterface]:
        """Extensions attached by the registry, in attachment order."""

    @abstractmethod
    def set_extensions(self, extensions: List[FormTypeExtensionInterface]) -> None:
        """Replace the attached extensions."""


class AbstractType(FormTypeInterface):
    """Convenience base class with no-op hooks.

    Subclasses usually override get_name(), get_parent() and
    get_default_options(). The default parent is the core ``field`` type.
    """

    def __init__(self) -> None:
        self._extensions: List[FormTypeExtensionInterface] = []

    def get_parent(self, options: Dict[str, Any]) -> Optional[str]:
        return "field"

    def get_default_options(self, options: Dict[str, Any]) -> Dict[str, Any]:
        return {}

    def get_allowed_option_values(self, options: Dict[str, Any]) -> OptionValues:
        return {}

    def create_builder(self, name, factory, options):
        return None

    def build_form(self, builder, options):
        pass

    def get_extensions(self) -> List[FormTypeExtensionInterface]:
        return list(self._extensions)

    def set_extensions(self, extensions: List[FormTypeExtensionInterface]) -> None:
        for extension in extensions:
            if not isinstance(extension, FormTypeExtensionInterface):
                raise InvalidArgumentError(extension, "FormTypeExtensionInterface")
        self._extensions = list(extensions)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={self.get_name()!r}>"


class AbstractTypeExtension(FormTypeExtensionInterface):
    """Convenience base class for type extensions with no-op hooks."""

    def build_form(self, builder, options):
        pass

    def get_default_options(self, options: Dict[str, Any]) -> Dict[str, Any]:
        return {}

    def get_allowed_option_values(self, options: Dict[str, Any]) -> OptionValues:
        return {}


__all__ = [
    "OptionValues",
    "FormTypeInterface",
    "FormTypeExtensionInterface",
    "AbstractType",
    "AbstractTypeExtension",
]
