"""
Core code generation components.

Provides the definition model, schema validation, mapping tables and base
classes used by all language generators.
"""

from .errors import (
    GeneratorError,
    MappingError,
    UnsupportedValidatorError,
    MissingParameterError,
    InvalidParameterError,
    DefinitionError,
    DefinitionFormatError,
    DefinitionValidationError,
)
from .generator import CodeGenerator, GenerationResult, RuleChain, generate_code
from .schema import (
    ValidationDefinition,
    PropertyDefinition,
    RuleDefinition,
    Parameter,
    ParamKind,
    PropertyType,
    ValidatorKind,
    VALIDATOR_ALIASES,
    definition_from_dict,
)
from .validation import (
    SchemaViolation,
    SchemaError,
    PropertySchemaError,
    RuleSchemaError,
    validate_definition,
)
from .mapping import ValidatorMappingTable, ValidatorShape, VALIDATOR_SHAPES
from .naming import IdentifierPolicy, NamingCase, lower_first
from .config import GeneratorConfig, ConfigManager, ConfigError, load_config
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Errors
    "GeneratorError",
    "MappingError",
    "UnsupportedValidatorError",
    "MissingParameterError",
    "InvalidParameterError",
    "DefinitionError",
    "DefinitionFormatError",
    "DefinitionValidationError",
    # Base generator interface
    "CodeGenerator",
    "GenerationResult",
    "RuleChain",
    "generate_code",
    # Definition model
    "ValidationDefinition",
    "PropertyDefinition",
    "RuleDefinition",
    "Parameter",
    "ParamKind",
    "PropertyType",
    "ValidatorKind",
    "VALIDATOR_ALIASES",
    "definition_from_dict",
    # Schema validation
    "SchemaViolation",
    "SchemaError",
    "PropertySchemaError",
    "RuleSchemaError",
    "validate_definition",
    # Mapping tables
    "ValidatorMappingTable",
    "ValidatorShape",
    "VALIDATOR_SHAPES",
    # Naming utilities
    "IdentifierPolicy",
    "NamingCase",
    "lower_first",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
