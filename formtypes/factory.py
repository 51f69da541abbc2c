"""FormFactory: turns type names and instances into configured builders.

The factory resolves the requested type and its parents through the
TypeRegistry, merges option defaults down the hierarchy, rejects unknown
options and disallowed values, lets the first type able to do so create the
builder, and finally runs every build hook from the root type to the leaf.

Usage:
    >>> from formtypes.factory import create_form_factory
    >>> factory = create_form_factory()
    >>> builder = factory.create_named_builder("text", "first_name", "John")
    >>> builder.get_name()
    'first_name'
    >>> builder.data
    'John'
"""

import logging
from typing import Any, Dict, List, Optional, Sequence, Set, Union

from formtypes.builder import FormBuilder
from formtypes.core import CoreExtension
from formtypes.exceptions import InvalidArgumentError, InvalidOptionError, TypeDefinitionError
from formtypes.extension import FormExtensionInterface
from formtypes.form_type import FormTypeInterface, OptionValues
from formtypes.guess import TypeGuesserChain
from formtypes.registry import TypeRegistry
from formtypes.types import DEFAULT_GUESSED_TYPE, FOUNDATIONAL_OPTIONS
from formtypes.validation import OptionValueValidator, merge_option_values

logger = logging.getLogger(__name__)

TypeArgument = Union[str, FormTypeInterface]


class FormFactory:
    """Creates form builders from registered types.

    Attributes:
        registry: The TypeRegistry resolving type names

    Examples:
        >>> from formtypes.core import CoreExtension
        >>> factory = FormFactory([CoreExtension()])
        >>> factory.create_builder("password").get_name()
        'password'
    """

    def __init__(self, extensions: Sequence[FormExtensionInterface]):
        self.registry = TypeRegistry(extensions)
        self._guesser: Optional[TypeGuesserChain] = None

    def get_extensions(self) -> List[FormExtensionInterface]:
        return self.registry.get_extensions()

    def has_type(self, name: str) -> bool:
        return self.registry.has_type(name)

    def add_type(self, type_: FormTypeInterface) -> None:
        self.registry.add_type(type_)

    def get_type(self, name: str) -> FormTypeInterface:
        return self.registry.get_type(name)

    def get_type_guesser(self) -> TypeGuesserChain:
        """Chain of every provider's guessers, in provider order."""
        if self._guesser is None:
            self._guesser = TypeGuesserChain(
                guesser
                for extension in self.registry.extensions
                for guesser in extension.load_type_guessers()
            )
        return self._guesser

    def create_builder(
        self,
        type: TypeArgument,
        data: Any = None,
        options: Optional[Dict[str, Any]] = None,
        parent: Optional[FormBuilder] = None,
    ) -> FormBuilder:
        """Create a builder named after its type."""
        if isinstance(type, FormTypeInterface):
            name = type.get_name()
        elif isinstance(type, str):
            name = type
        else:
            raise InvalidArgumentError(type, "str or FormTypeInterface")
        return self.create_named_builder(type, name, data, options, parent)

    def create_named_builder(
        self,
        type: TypeArgument,
        name: str,
        data: Any = None,
        options: Optional[Dict[str, Any]] = None,
        parent: Optional[FormBuilder] = None,
    ) -> FormBuilder:
        """Create a configured builder for a type.

        Args:
            type: A type name or a type instance; unregistered instances are
                registered on the fly
            name: Name of the builder
            data: Initial data, used unless options contain a "data" key
            options: Caller options overriding the defaults of every type
            parent: Builder the new builder belongs to

        Returns:
            The configured FormBuilder

        Raises:
            InvalidArgumentError: If type is neither a name nor a type instance
            UnknownTypeError: If a type name in the hierarchy cannot be resolved
            TypeDefinitionError: If the hierarchy misses a foundational option,
                creates no builder, or refers to itself
            InvalidOptionError: If an option is unknown or holds a disallowed value
        """
        if parent is not None and not isinstance(parent, FormBuilder):
            raise InvalidArgumentError(parent, "FormBuilder or None")

        passed_options = dict(options or {})
        options = dict(passed_options)
        if data is not None and "data" not in options:
            options["data"] = data

        types: List[FormTypeInterface] = []
        known_options: Set[str] = set()
        allowed_values: List[OptionValues] = []
        seen: Set[str] = set()

        # Walk from the requested type up to the root; ``types`` ends up
        # root first and leaf last.
        current: Any = type
        while current is not None:
            current = self._resolve(current)
            type_name = current.get_name()
            parent_name = current.get_parent(options)
            if parent_name == type_name:
                raise TypeDefinitionError(
                    type_name,
                    f'The form type name "{type_name}" for class "{current.__class__.__name__}" '
                    f"cannot be the same as the parent type.",
                )
            if type_name in seen:
                raise TypeDefinitionError(
                    type_name, f'The form type "{type_name}" appears twice in its own hierarchy.'
                )
            seen.add(type_name)

            default_options = dict(current.get_default_options(options))
            type_allowed = [current.get_allowed_option_values(options)]
            for type_extension in current.get_extensions():
                default_options.update(type_extension.get_default_options(options))
                type_allowed.append(type_extension.get_allowed_option_values(options))

            # Defaults of children and caller options override parent defaults
            options = {**default_options, **options}
            known_options.update(default_options)
            allowed_values[:0] = type_allowed
            types.insert(0, current)
            current = parent_name

        leaf = types[-1]
        missing = [o for o in FOUNDATIONAL_OPTIONS if o not in known_options]
        if missing:
            logger.debug("Form type %r misses foundational options %s", leaf.get_name(), missing)
            raise TypeDefinitionError(
                leaf.get_name(),
                f'Type "{leaf.get_name()}" should support the option(s) '
                + ", ".join(f'"{o}"' for o in missing),
            )

        unknown = set(passed_options) - known_options
        if unknown:
            logger.debug("Rejected unknown options %s for %r", sorted(unknown), leaf.get_name())
            raise InvalidOptionError.unknown(unknown, known_options)

        OptionValueValidator(merge_option_values(*allowed_values)).validate(options)

        builder = None
        for type_ in types:
            builder = type_.create_builder(name, self, options)
            if builder is not None:
                break
        if not isinstance(builder, FormBuilder):
            raise TypeDefinitionError(
                leaf.get_name(),
                f'Type "{leaf.get_name()}" or any of its parents should return a '
                f"FormBuilder instance from create_builder()",
            )

        builder.set_types(types)
        builder.set_parent(parent)

        for type_ in types:
            type_.build_form(builder, options)
            for type_extension in type_.get_extensions():
                type_extension.build_form(builder, options)

        logger.debug(
            "Created builder %r from %s", name, " > ".join(t.get_name() for t in types)
        )
        return builder

    def create_builder_for_property(
        self,
        cls: Any,
        property: str,
        data: Any = None,
        options: Optional[Dict[str, Any]] = None,
        parent: Optional[FormBuilder] = None,
    ) -> FormBuilder:
        """Create a builder for an attribute of a class, guessing its type and options.

        Each guess (type, max length, min length, required) goes to the most
        confident guesser independently. Guessed values never override options
        passed by the caller. Without a type guess, the ``text`` type is used.
        """
        guesser = self.get_type_guesser()
        type_guess = guesser.guess_type(cls, property)
        max_length_guess = guesser.guess_max_length(cls, property)
        min_length_guess = guesser.guess_min_length(cls, property)
        required_guess = guesser.guess_required(cls, property)

        type_ = type_guess.type if type_guess is not None else DEFAULT_GUESSED_TYPE

        guessed: Dict[str, Any] = dict(type_guess.options) if type_guess is not None else {}
        if max_length_guess is not None:
            guessed["max_length"] = max_length_guess.value
        if min_length_guess is not None:
            guessed["pattern"] = ".{%d,}" % min_length_guess.value
        if required_guess is not None:
            guessed["required"] = required_guess.value

        merged = {**guessed, **(options or {})}
        logger.debug("Guessed type %r for %r.%s", type_, cls, property)
        return self.create_named_builder(type_, property, data, merged, parent)

    def _resolve(self, type_: Any) -> FormTypeInterface:
        if isinstance(type_, FormTypeInterface):
            if not self.registry.is_registered(type_):
                self.registry.add_type(type_)
            return type_
        if isinstance(type_, str):
            return self.registry.get_type(type_)
        raise InvalidArgumentError(type_, "str or FormTypeInterface")


def create_form_factory(*extensions: FormExtensionInterface) -> FormFactory:
    """Create a factory with the core extension followed by the given ones."""
    return FormFactory([CoreExtension(), *extensions])


__all__ = [
    "FormFactory",
    "create_form_factory",
]
