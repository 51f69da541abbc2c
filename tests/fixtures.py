"""Shared test doubles: a minimal standalone type, two extensions for it,
and a provider whose contents can be changed after the factory is built."""

from dataclasses import dataclass, field
from typing import Optional

from formtypes.builder import FormBuilder
from formtypes.form_type import AbstractType, AbstractTypeExtension


class FooType(AbstractType):
    def get_name(self):
        return "foo"

    def get_parent(self, options):
        return None

    def create_builder(self, name, factory, options):
        return FormBuilder(name, factory)

    def build_form(self, builder, options):
        builder.set_attribute("foo", "x")
        builder.set_attribute("data_option", options["data"])

    def get_default_options(self, options):
        return {
            "data": None,
            "required": False,
            "max_length": None,
            "a_or_b": "a",
        }

    def get_allowed_option_values(self, options):
        return {"a_or_b": ["a", "b"]}


class FooTypeBarExtension(AbstractTypeExtension):
    def get_extended_type(self):
        return "foo"

    def build_form(self, builder, options):
        builder.set_attribute("bar", "x")

    def get_allowed_option_values(self, options):
        return {"a_or_b": ["c"]}


class FooTypeBazExtension(AbstractTypeExtension):
    def get_extended_type(self):
        return "foo"

    def build_form(self, builder, options):
        builder.set_attribute("baz", "x")


class StubExtension:
    """Provider whose types and extensions can be added after construction."""

    def __init__(self, guesser=None):
        self.types = []
        self.type_extensions = []
        self.guessers = [guesser] if guesser is not None else []

    def add_type(self, type_):
        self.types.append(type_)

    def add_type_extension(self, extension):
        self.type_extensions.append(extension)

    def remove_type_extension(self, extension):
        self.type_extensions.remove(extension)

    def load_types(self):
        return list(self.types)

    def load_type_extensions(self):
        return list(self.type_extensions)

    def load_type_guessers(self):
        return list(self.guessers)


@dataclass
class Author:
    first_name: str = field(default="", metadata={"max_length": 50, "min_length": 2})
    nickname: Optional[str] = None
    active: bool = True
    age: int = 0
    tags: list = field(default_factory=list)
