"""
Exceptions raised while loading rule definitions and emitting validators.

Schema violations are not exceptions; see validation.py. The classes here
cover the fail-fast paths: malformed input, aggregated validation failures
and rendering errors from the mapping tables.
"""

from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from .validation import SchemaViolation


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class MappingError(GeneratorError):
    """Raised when a rule cannot be rendered into a call fragment."""

    def __init__(self, kind: str, message: str):
        self.kind = kind
        super().__init__(message)


class UnsupportedValidatorError(MappingError):
    """Validator kind is not recognized by a mapping table."""

    def __init__(self, kind: str, language: Optional[str] = None):
        target = f" for {language}" if language else ""
        super().__init__(kind, f"Validator '{kind}' is not supported{target}")


class MissingParameterError(MappingError):
    """A recognized validator kind is missing a required parameter."""

    def __init__(self, kind: str, parameter: str):
        self.parameter = parameter
        super().__init__(
            kind, f"Validator '{kind}' requires parameter '{parameter}'"
        )


class InvalidParameterError(MappingError):
    """A parameter is present but holds a value of the wrong kind."""

    def __init__(self, kind: str, parameter: str, expected: str):
        self.parameter = parameter
        self.expected = expected
        super().__init__(
            kind,
            f"Validator '{kind}' requires parameter '{parameter}' to be a {expected}",
        )


class DefinitionError(Exception):
    """Base exception for rule definition input problems."""

    def __init__(self, message: str, source: Optional[str] = None):
        self.source = source
        super().__init__(message)


class DefinitionFormatError(DefinitionError):
    """The input does not have the shape of a validation definition."""

    pass


class DefinitionValidationError(DefinitionError):
    """
    A definition failed structural validation.

    Carries every violation found so the whole report can be shown at once.
    """

    def __init__(self, source: str, violations: List["SchemaViolation"]):
        self.violations = list(violations)
        lines = "\n  - ".join(str(v) for v in self.violations)
        super().__init__(f"Validation errors in {source}:\n  - {lines}", source)
