"""Core form types.

The ``field`` type is the root of every core hierarchy. It declares the
options all fields share and creates the FormBuilder; the other types only
add their own options on top of it.
"""

import re
from typing import Any, Dict, Optional

from formtypes.builder import FormBuilder
from formtypes.extension import AbstractExtension
from formtypes.form_type import AbstractType
from formtypes.guesser import AnnotationTypeGuesser


def humanize(text: str) -> str:
    """Turn a field name into a label.

    Examples:
        >>> humanize("firstName")
        'First name'
        >>> humanize("date_of_birth")
        'Date of birth'
    """
    text = re.sub(r"([A-Z])", r"_\1", text)
    text = re.sub(r"[_\s]+", " ", text).strip().lower()
    return text[:1].upper() + text[1:]


class FieldType(AbstractType):
    def get_name(self) -> str:
        return "field"

    def get_parent(self, options: Dict[str, Any]) -> Optional[str]:
        return None

    def get_default_options(self, options: Dict[str, Any]) -> Dict[str, Any]:
        data_class = options.get("data_class")
        return {
            "attr": {},
            "by_reference": True,
            "data": None,
            "data_class": None,
            "disabled": False,
            # A data class is its own empty-data factory
            "empty_data": data_class if data_class is not None else "",
            "error_bubbling": False,
            "error_mapping": {},
            "invalid_message": "This value is not valid.",
            "invalid_message_parameters": {},
            "label": None,
            "max_length": None,
            "pattern": None,
            "property_path": None,
            "read_only": False,
            "required": True,
            "translation_domain": "messages",
            "trim": True,
        }

    def create_builder(self, name, factory, options):
        return FormBuilder(name, factory)

    def build_form(self, builder, options):
        builder.required = options["required"]
        builder.disabled = options["disabled"]
        builder.read_only = options["read_only"]
        builder.data_class = options["data_class"]
        builder.data = options["data"]

        builder.set_attribute("label", options["label"] or humanize(builder.get_name()))
        builder.set_attribute("property_path", options["property_path"] or builder.get_name())
        for option in (
            "attr",
            "by_reference",
            "empty_data",
            "error_bubbling",
            "error_mapping",
            "invalid_message",
            "invalid_message_parameters",
            "max_length",
            "pattern",
            "translation_domain",
            "trim",
        ):
            builder.set_attribute(option, options[option])


class TextType(AbstractType):
    def get_name(self) -> str:
        return "text"


class TextareaType(AbstractType):
    def get_name(self) -> str:
        return "textarea"


class PasswordType(AbstractType):
    """Text field whose value is not echoed back unless asked to."""

    def get_name(self) -> str:
        return "password"

    def get_parent(self, options):
        return "text"

    def get_default_options(self, options):
        return {"always_empty": True}

    def get_allowed_option_values(self, options):
        return {"always_empty": [True, False]}

    def build_form(self, builder, options):
        builder.set_attribute("always_empty", options["always_empty"])


class HiddenType(AbstractType):
    def get_name(self) -> str:
        return "hidden"

    def get_default_options(self, options):
        # Errors of hidden fields cannot be shown next to them
        return {"required": False, "error_bubbling": True}


class CheckboxType(AbstractType):
    def get_name(self) -> str:
        return "checkbox"

    def get_default_options(self, options):
        return {"value": "1"}

    def build_form(self, builder, options):
        builder.set_attribute("value", options["value"])


class IntegerType(AbstractType):
    ROUNDING_MODES = ["down", "floor", "up", "ceiling", "half_even", "half_up", "half_down"]

    def get_name(self) -> str:
        return "integer"

    def get_default_options(self, options):
        return {"precision": None, "grouping": False, "rounding_mode": "down"}

    def get_allowed_option_values(self, options):
        return {"rounding_mode": list(self.ROUNDING_MODES)}

    def build_form(self, builder, options):
        for option in ("precision", "grouping", "rounding_mode"):
            builder.set_attribute(option, options[option])


class CoreExtension(AbstractExtension):
    """Provides the core types and the annotation-based guesser."""

    def _load_types(self):
        return [
            FieldType(),
            TextType(),
            TextareaType(),
            PasswordType(),
            HiddenType(),
            CheckboxType(),
            IntegerType(),
        ]

    def _load_type_guessers(self):
        return [AnnotationTypeGuesser()]


__all__ = [
    "humanize",
    "FieldType",
    "TextType",
    "TextareaType",
    "PasswordType",
    "HiddenType",
    "CheckboxType",
    "IntegerType",
    "CoreExtension",
]
