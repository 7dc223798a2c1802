"""
fluentgen code generation module.

Generates fluent validator classes in several languages from rule
definitions.
"""

from typing import Any, Dict, Iterable, Optional, Union

from .registry import (
    GeneratorRegistry,
    RegistryError,
    get_generator,
    get_language_info,
    list_all_language_info,
    list_supported_languages,
    is_language_supported,
)
from .core.errors import (
    GeneratorError,
    UnsupportedValidatorError,
    MissingParameterError,
    InvalidParameterError,
    DefinitionError,
    DefinitionFormatError,
    DefinitionValidationError,
)
from .core.generator import CodeGenerator, GenerationResult, generate_code
from .core.schema import ValidationDefinition, definition_from_dict
from .core.validation import validate_definition
from .core.config import GeneratorConfig, ConfigManager, ConfigError, load_config

__all__ = [
    "GeneratorRegistry",
    "RegistryError",
    "get_generator",
    "get_language_info",
    "list_all_language_info",
    "list_supported_languages",
    "is_language_supported",
    "GeneratorError",
    "UnsupportedValidatorError",
    "MissingParameterError",
    "InvalidParameterError",
    "DefinitionError",
    "DefinitionFormatError",
    "DefinitionValidationError",
    "CodeGenerator",
    "GenerationResult",
    "generate_code",
    "ValidationDefinition",
    "definition_from_dict",
    "validate_definition",
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    "generate_validators",
    "quick_generate",
]


# Convenience functions
def generate_validators(
    definition: ValidationDefinition,
    languages: Optional[Iterable[str]] = None,
    config: Optional[Union[Dict[str, Any], str]] = None,
) -> Dict[str, GenerationResult]:
    """
    Generate validators for a definition in several languages.

    Args:
        definition: Validated definition
        languages: Language names or aliases (default: all supported)
        config: Configuration dict or path applied to every language

    Returns:
        Mapping of primary language name to GenerationResult
    """
    results = {}
    for language in languages or list_supported_languages():
        generator = get_generator(language, config)
        results[generator.language_name] = generate_code(generator, definition)
    return results


def quick_generate(rule_data, language: str = "csharp", **options) -> str:
    """
    Quick validator generation from raw rule data.

    Args:
        rule_data: Rule definition as a dict or JSON string
        language: Target language
        **options: Generator options

    Returns:
        Generated code string

    Raises:
        DefinitionError: If the definition is malformed or invalid
        GeneratorError: If code generation fails
    """
    if isinstance(rule_data, str):
        import json

        rule_data = json.loads(rule_data)

    definition = definition_from_dict(rule_data)
    violations = validate_definition(definition)
    if violations:
        raise DefinitionValidationError("<input>", violations)

    generator = get_generator(language, options or None)
    result = generate_code(generator, definition)

    if not result.success:
        raise result.exception or GeneratorError(result.error_message)

    return result.code
