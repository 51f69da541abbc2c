"""Unit tests for the type registry.

Tests cover:
- Direct registration and lookups through providers
- Extension attachment order across providers
- Idempotent lookups and unknown names
- Type name validation
"""

import pytest

from formtypes.exceptions import InvalidArgumentError, TypeDefinitionError, UnknownTypeError
from formtypes.registry import TypeRegistry

from tests.fixtures import FooType, FooTypeBarExtension, FooTypeBazExtension, StubExtension


class TestTypeRegistration:
    """Test adding and looking up types."""

    def setup_method(self):
        self.extension1 = StubExtension()
        self.extension2 = StubExtension()
        self.registry = TypeRegistry([self.extension1, self.extension2])

    def test_add_type(self):
        """Should know a type once it is added directly."""
        assert self.registry.has_type("foo") is False

        type_ = FooType()
        self.registry.add_type(type_)

        assert self.registry.has_type("foo") is True
        assert self.registry.get_type("foo") is type_

    def test_add_type_attaches_extensions_in_provider_order(self):
        """Should attach extensions of every provider, first provider first."""
        type_ = FooType()
        ext1 = FooTypeBarExtension()
        ext2 = FooTypeBazExtension()
        self.extension1.add_type_extension(ext1)
        self.extension2.add_type_extension(ext2)

        self.registry.add_type(type_)

        assert type_.get_extensions() == [ext1, ext2]

    def test_add_type_keeps_order_within_provider(self):
        """Should keep declaration order for extensions of the same provider."""
        type_ = FooType()
        ext1 = FooTypeBazExtension()
        ext2 = FooTypeBarExtension()
        self.extension2.add_type_extension(ext1)
        self.extension2.add_type_extension(ext2)

        self.registry.add_type(type_)

        assert type_.get_extensions() == [ext1, ext2]

    def test_add_type_ignores_extensions_of_other_types(self):
        """Should only attach extensions that extend the registered name."""

        class OtherExtension(FooTypeBarExtension):
            def get_extended_type(self):
                return "other"

        type_ = FooType()
        self.extension1.add_type_extension(OtherExtension())

        self.registry.add_type(type_)

        assert type_.get_extensions() == []

    def test_get_type_from_provider(self):
        """Should load a type owned by a later provider."""
        type_ = FooType()
        self.extension2.add_type(type_)

        assert self.registry.get_type("foo") is type_
        assert self.registry.has_type("foo") is True

    def test_get_type_first_provider_wins(self):
        """Should prefer the first provider owning a name."""
        first = FooType()
        second = FooType()
        self.extension1.add_type(first)
        self.extension2.add_type(second)

        assert self.registry.get_type("foo") is first

    def test_get_type_adds_extensions(self):
        """Should attach extensions of every provider to a loaded type."""
        type_ = FooType()
        ext1 = FooTypeBarExtension()
        ext2 = FooTypeBazExtension()
        self.extension1.add_type_extension(ext1)
        self.extension2.add_type_extension(ext2)
        self.extension2.add_type(type_)

        assert self.registry.get_type("foo").get_extensions() == [ext1, ext2]

    def test_get_type_is_idempotent(self):
        """Should return the same instance with the same extensions on every call."""
        type_ = FooType()
        ext = FooTypeBarExtension()
        self.extension1.add_type(type_)
        self.extension1.add_type_extension(ext)

        first = self.registry.get_type("foo")
        second = self.registry.get_type("foo")

        assert first is second
        assert second.get_extensions() == [ext]

    def test_get_type_caches_resolved_type(self):
        """Should not consult providers again once a type is resolved."""
        type_ = FooType()
        self.extension1.add_type(type_)
        self.registry.get_type("foo")

        self.extension1.types.clear()

        assert self.registry.get_type("foo") is type_


class TestUnknownTypes:
    """Test lookups of names no provider owns."""

    def test_get_type_expects_existing_type(self):
        """Should raise UnknownTypeError for unknown names."""
        registry = TypeRegistry([StubExtension()])

        with pytest.raises(UnknownTypeError) as exc_info:
            registry.get_type("bar")

        assert exc_info.value.name == "bar"
        assert '"bar"' in str(exc_info.value)

    def test_has_type_is_false_for_unknown_names(self):
        """Should report unknown names as missing instead of raising."""
        registry = TypeRegistry([])
        assert registry.has_type("bar") is False

    def test_get_type_expects_string(self):
        """Should reject non-string names."""
        registry = TypeRegistry([])
        with pytest.raises(InvalidArgumentError):
            registry.get_type(42)


class TestValidation:
    """Test validation of providers and type names."""

    def test_rejects_invalid_provider(self):
        """Should reject providers without the enumeration methods."""
        with pytest.raises(InvalidArgumentError):
            TypeRegistry([object()])

    def test_rejects_invalid_type_name(self):
        """Should reject names with characters other than letters, digits and '_'."""

        class DashedType(FooType):
            def get_name(self):
                return "foo-bar"

        registry = TypeRegistry([])
        with pytest.raises(TypeDefinitionError) as exc_info:
            registry.add_type(DashedType())

        assert exc_info.value.type_name == "foo-bar"
        assert registry.has_type("foo-bar") is False

    @pytest.mark.parametrize("name", ["foo\n", ""])
    def test_rejects_trailing_newline_and_empty_name(self, name):
        """Should reject names that are empty or end with a newline."""

        class BadlyNamedType(FooType):
            def get_name(self):
                return name

        registry = TypeRegistry([])
        with pytest.raises(TypeDefinitionError) as exc_info:
            registry.add_type(BadlyNamedType())

        assert exc_info.value.type_name == name
