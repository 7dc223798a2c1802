"""
Structural validation of rule definitions.

Checks a parsed definition against the invariants every generator relies
on. All violations are collected in a single pass so a malformed file can
be fixed in one go.
"""

from dataclasses import dataclass
from typing import List, Optional

from .schema import ValidationDefinition


@dataclass(frozen=True)
class SchemaViolation:
    """Base class for structural defects found in a definition."""

    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class SchemaError(SchemaViolation):
    """Entity-level required field missing."""

    pass


@dataclass(frozen=True)
class PropertySchemaError(SchemaViolation):
    """Property-level required field missing."""

    property_index: int = 0
    property_name: Optional[str] = None

    @property
    def location(self) -> str:
        location = f"Property[{self.property_index}]"
        if self.property_name:
            location += f" ({self.property_name})"
        return location

    def __str__(self) -> str:
        return f"{self.location}: {self.message}"


@dataclass(frozen=True)
class RuleSchemaError(PropertySchemaError):
    """Rule-level required field missing."""

    rule_index: int = 0

    def __str__(self) -> str:
        return f"{self.location}, Rule[{self.rule_index}]: {self.message}"


def _is_blank(value: Optional[str]) -> bool:
    return not value or not value.strip()


def validate_definition(definition: ValidationDefinition) -> List[SchemaViolation]:
    """
    Validate a definition for structural issues.

    Args:
        definition: Parsed definition

    Returns:
        List of violations (empty if the definition is well formed)
    """
    violations: List[SchemaViolation] = []

    if _is_blank(definition.entity_name):
        violations.append(SchemaError("Entity name is required"))

    if _is_blank(definition.namespace):
        violations.append(SchemaError("Namespace is required"))

    if not definition.properties:
        violations.append(SchemaError("At least one property must be defined"))

    for i, prop in enumerate(definition.properties):
        name = None if _is_blank(prop.name) else prop.name

        if name is None:
            violations.append(PropertySchemaError("Name is required", i))

        if _is_blank(prop.type):
            violations.append(PropertySchemaError("Type is required", i, name))

        if not prop.rules:
            violations.append(
                PropertySchemaError(
                    "At least one validation rule is required", i, name
                )
            )

        for j, rule in enumerate(prop.rules):
            if _is_blank(rule.validator_kind):
                violations.append(
                    RuleSchemaError("Validator name is required", i, name, j)
                )

    return violations
