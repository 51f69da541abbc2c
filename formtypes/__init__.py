"""formtypes: form type registry and builder factory.

formtypes resolves named form types into configured form builders:
- Type hierarchies with option defaults merged from the root type to the leaf
- Type extensions contributed by ordered providers
- Strict option validation with deterministic, sorted error messages
- Type and option guessing from class annotations, arbitrated by confidence

Basic usage:
    >>> from formtypes import create_form_factory
    >>> factory = create_form_factory()
    >>> builder = factory.create_named_builder("text", "first_name", options={"max_length": 20})
    >>> builder.get_attribute("max_length")
    20
    >>> builder.get_attribute("label")
    'First name'
"""

__version__ = "0.1.0"

# Version info
VERSION = (0, 1, 0)

# Core exports
from formtypes.builder import FormBuilder
from formtypes.exceptions import (
    FormError,
    InvalidArgumentError,
    InvalidOptionError,
    TypeDefinitionError,
    UnknownTypeError,
)
from formtypes.extension import AbstractExtension, FormExtensionInterface, PreloadedExtension
from formtypes.factory import FormFactory, create_form_factory
from formtypes.form_type import (
    AbstractType,
    AbstractTypeExtension,
    FormTypeExtensionInterface,
    FormTypeInterface,
)
from formtypes.guess import (
    AbstractTypeGuesser,
    FormTypeGuesserInterface,
    Guess,
    TypeGuess,
    ValueGuess,
)
from formtypes.registry import TypeRegistry
from formtypes.types import Confidence

# Package metadata
__all__ = [
    "__version__",
    "VERSION",
    "FormBuilder",
    "FormFactory",
    "create_form_factory",
    "TypeRegistry",
    "AbstractType",
    "AbstractTypeExtension",
    "FormTypeInterface",
    "FormTypeExtensionInterface",
    "AbstractExtension",
    "FormExtensionInterface",
    "PreloadedExtension",
    "AbstractTypeGuesser",
    "FormTypeGuesserInterface",
    "Guess",
    "TypeGuess",
    "ValueGuess",
    "Confidence",
    "FormError",
    "UnknownTypeError",
    "InvalidArgumentError",
    "TypeDefinitionError",
    "InvalidOptionError",
]
