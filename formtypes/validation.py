"""Option value validation backed by JSON Schema.

The allowed values collected from a type hierarchy and its extensions are
compiled into a Draft 7 schema where every constrained option becomes an
``enum`` property. Resolved options are then validated against that schema
and the first violation, in option name order, is reported as an
InvalidOptionError.
"""

from typing import Any, Dict, Iterable, List

import jsonschema
from jsonschema import Draft7Validator

from formtypes.exceptions import InvalidOptionError
from formtypes.form_type import OptionValues


def merge_option_values(*sources: OptionValues) -> OptionValues:
    """Concatenate allowed-value lists option by option.

    Examples:
        >>> merge_option_values({"a_or_b": ["a", "b"]}, {"a_or_b": ["c"]})
        {'a_or_b': ['a', 'b', 'c']}
    """
    merged: Dict[str, List[Any]] = {}
    for source in sources:
        for option, values in source.items():
            merged.setdefault(option, []).extend(values)
    return merged


class OptionValueValidator:
    """Checks resolved options against their allowed values.

    Attributes:
        allowed_values: Option names mapped to their allowed values
        schema: The generated JSON Schema
        validator: The underlying jsonschema validator instance

    Examples:
        >>> validator = OptionValueValidator({"a_or_b": ["a", "b"]})
        >>> validator.validate({"a_or_b": "a", "other": 1})
        >>> validator.validate({"a_or_b": "c"})
        Traceback (most recent call last):
        ...
        formtypes.exceptions.InvalidOptionError: The option "a_or_b" has the value "c", but is expected to be one of "a", "b"
    """

    def __init__(self, allowed_values: OptionValues) -> None:
        self.allowed_values = {k: list(v) for k, v in allowed_values.items()}
        self.schema: Dict[str, Any] = {
            "type": "object",
            "properties": {
                option: {"enum": values} for option, values in self.allowed_values.items()
            },
        }
        Draft7Validator.check_schema(self.schema)
        self.validator = Draft7Validator(self.schema)

    def iter_violations(self, options: Dict[str, Any]) -> Iterable[jsonschema.ValidationError]:
        """Yield one schema error per option holding a disallowed value, sorted by option."""
        errors = [e for e in self.validator.iter_errors(options) if e.validator == "enum"]
        return sorted(errors, key=lambda e: str(e.path[0]) if e.path else "")

    def validate(self, options: Dict[str, Any]) -> None:
        """Validate resolved options.

        Raises:
            InvalidOptionError: If an option holds a value outside its allowed set
        """
        for error in self.iter_violations(options):
            option = str(error.path[0])
            raise InvalidOptionError.disallowed(option, error.instance, error.validator_value)


__all__ = [
    "merge_option_values",
    "OptionValueValidator",
]
