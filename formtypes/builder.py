"""Form builder: the mutable configuration accumulated for one field.

Builders are produced by FormFactory and configured by the build hooks of
every type in the resolved hierarchy and of their extensions. A builder keeps
a weak reference to its parent; the parent owns its children, not the other
way around.
"""

import logging
import weakref
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Union

from formtypes.exceptions import InvalidArgumentError

if TYPE_CHECKING:
    from formtypes.factory import FormFactory
    from formtypes.form_type import FormTypeInterface

logger = logging.getLogger(__name__)


class FormBuilder:
    """Configuration accumulator for a single field or form.

    Attributes are an open-ended bag that build hooks use to record
    settings. Children may be added as ready builders or as names resolved
    through the factory when all() or get() is first called for them.

    Examples:
        >>> builder = FormBuilder("author", factory=None)
        >>> builder.set_attribute("label", "Author")
        >>> builder.get_attribute("label")
        'Author'
        >>> builder.get_parent() is None
        True
    """

    def __init__(self, name: str, factory: Optional["FormFactory"], data: Any = None):
        self._name = name
        self._factory = factory
        self._parent: Optional["weakref.ReferenceType[FormBuilder]"] = None
        self._attributes: Dict[str, Any] = {}
        self._types: List["FormTypeInterface"] = []
        self._children: Dict[str, Union["FormBuilder", Dict[str, Any]]] = {}
        self.data = data
        self.data_class: Optional[type] = None
        self.required = True
        self.disabled = False
        self.read_only = False

    def get_name(self) -> str:
        return self._name

    def get_form_factory(self) -> Optional["FormFactory"]:
        return self._factory

    # Parent

    def set_parent(self, parent: Optional["FormBuilder"]) -> None:
        self._parent = weakref.ref(parent) if parent is not None else None

    def get_parent(self) -> Optional["FormBuilder"]:
        """Return the parent builder, or None if top-level or already collected."""
        return self._parent() if self._parent is not None else None

    def has_parent(self) -> bool:
        return self.get_parent() is not None

    # Attributes

    def set_attribute(self, name: str, value: Any) -> None:
        self._attributes[name] = value

    def has_attribute(self, name: str) -> bool:
        return name in self._attributes

    def get_attribute(self, name: str, default: Any = None) -> Any:
        return self._attributes.get(name, default)

    def get_attributes(self) -> Dict[str, Any]:
        return dict(self._attributes)

    # Types

    def set_types(self, types: List["FormTypeInterface"]) -> None:
        self._types = list(types)

    def get_types(self) -> List["FormTypeInterface"]:
        """Resolved type hierarchy, root first."""
        return list(self._types)

    # Children

    def add(
        self,
        child: Union["FormBuilder", str],
        type: Union[str, "FormTypeInterface", None] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> "FormBuilder":
        """Add a child builder, or a child name to be built on first access.

        Args:
            child: A ready builder, or the name of the child to create
            type: Type of the child when a name is given; None lets the
                builder pick one (see create())
            options: Options for the child when a name is given

        Returns:
            This builder, to allow chaining

        Raises:
            InvalidArgumentError: If child is neither a name nor a builder
        """
        if isinstance(child, FormBuilder):
            child.set_parent(self)
            self._children[child.get_name()] = child
            return self
        if not isinstance(child, str):
            raise InvalidArgumentError(child, "str or FormBuilder")
        self._children[child] = {"type": type, "options": dict(options or {})}
        return self

    def create(
        self,
        name: str,
        type: Union[str, "FormTypeInterface", None] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> "FormBuilder":
        """Create a builder whose parent is this builder.

        Without a type, the child type is guessed from ``data_class`` when one
        is set, and is ``text`` otherwise.
        """
        factory = self._require_factory()
        if type is None and self.data_class is None:
            type = "text"
        if type is not None:
            return factory.create_named_builder(type, name, None, options, self)
        return factory.create_builder_for_property(self.data_class, name, None, options, self)

    def has(self, name: str) -> bool:
        return name in self._children

    def get(self, name: str) -> "FormBuilder":
        """Return the named child, building it if it was added by name.

        Raises:
            InvalidArgumentError: If no child with that name exists
        """
        if name not in self._children:
            raise InvalidArgumentError(name, "name of an existing child")
        child = self._children[name]
        if isinstance(child, dict):
            logger.debug("Building deferred child %r of %r", name, self._name)
            child = self.create(name, child["type"], child["options"])
            self._children[name] = child
        return child

    def remove(self, name: str) -> "FormBuilder":
        child = self._children.pop(name, None)
        if isinstance(child, FormBuilder):
            child.set_parent(None)
        return self

    def all(self) -> Dict[str, "FormBuilder"]:
        """Return every child, building children that were added by name."""
        return {name: self.get(name) for name in list(self._children)}

    def _require_factory(self) -> "FormFactory":
        if self._factory is None:
            raise InvalidArgumentError(self._factory, "FormFactory")
        return self._factory

    def __repr__(self) -> str:
        return f"<FormBuilder name={self._name!r}>"


__all__ = [
    "FormBuilder",
]
