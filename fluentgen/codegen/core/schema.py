"""
Core schema representation for rule definitions.

Converts the JSON rule-definition format into a normalized, read-only
internal model that the schema validator and generators work with.
"""

import math
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from .errors import DefinitionFormatError


class PropertyType(Enum):
    """Property types understood by every target language."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DATE = "date"
    UNKNOWN = "unknown"  # Anything else; mapped to the fallback type

    @classmethod
    def from_tag(cls, tag: str) -> "PropertyType":
        """Map a raw type tag (case-insensitive) to a PropertyType."""
        try:
            return cls(tag.strip().lower())
        except ValueError:
            return cls.UNKNOWN


class ValidatorKind(Enum):
    """Closed set of validator kinds. Values are the canonical wire tags."""

    NOT_NULL = "NotNull"
    NOT_EMPTY = "NotEmpty"
    EMPTY = "Empty"
    NULL = "Null"
    EQUAL = "Equal"
    NOT_EQUAL = "NotEqual"
    LENGTH = "Length"
    MIN_LENGTH = "MinLength"
    MAX_LENGTH = "MaxLength"
    EMAIL_ADDRESS = "EmailAddress"
    MATCHES = "Matches"
    LESS_THAN = "LessThan"
    LESS_THAN_OR_EQUAL = "LessThanOrEqualTo"
    GREATER_THAN = "GreaterThan"
    GREATER_THAN_OR_EQUAL = "GreaterThanOrEqualTo"
    INCLUSIVE_BETWEEN = "InclusiveBetween"
    EXCLUSIVE_BETWEEN = "ExclusiveBetween"
    CREDIT_CARD = "CreditCard"
    IS_IN_ENUM = "IsInEnum"

    @classmethod
    def resolve(cls, tag: str) -> Optional["ValidatorKind"]:
        """
        Resolve a wire tag or descriptive alias to a ValidatorKind.

        Args:
            tag: Tag as written in the definition (e.g. "InclusiveBetween",
                "inclusive-range")

        Returns:
            The matching kind, or None for unknown tags
        """
        if not isinstance(tag, str):
            return None
        return _KIND_LOOKUP.get(tag.strip().lower())


# Descriptive aliases accepted alongside the canonical tags
VALIDATOR_ALIASES: Dict[str, ValidatorKind] = {
    "not-null": ValidatorKind.NOT_NULL,
    "not-empty": ValidatorKind.NOT_EMPTY,
    "empty": ValidatorKind.EMPTY,
    "null": ValidatorKind.NULL,
    "equal": ValidatorKind.EQUAL,
    "not-equal": ValidatorKind.NOT_EQUAL,
    "length": ValidatorKind.LENGTH,
    "min-length": ValidatorKind.MIN_LENGTH,
    "max-length": ValidatorKind.MAX_LENGTH,
    "email-format": ValidatorKind.EMAIL_ADDRESS,
    "pattern-match": ValidatorKind.MATCHES,
    "less-than": ValidatorKind.LESS_THAN,
    "less-or-equal": ValidatorKind.LESS_THAN_OR_EQUAL,
    "greater-than": ValidatorKind.GREATER_THAN,
    "greater-or-equal": ValidatorKind.GREATER_THAN_OR_EQUAL,
    "inclusive-range": ValidatorKind.INCLUSIVE_BETWEEN,
    "exclusive-range": ValidatorKind.EXCLUSIVE_BETWEEN,
    "credit-card-like": ValidatorKind.CREDIT_CARD,
    "enum-membership": ValidatorKind.IS_IN_ENUM,
}

_KIND_LOOKUP: Dict[str, ValidatorKind] = {
    **{kind.value.lower(): kind for kind in ValidatorKind},
    **VALIDATOR_ALIASES,
}


class ParamKind(Enum):
    """Tag of a rule parameter value."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"


@dataclass(frozen=True)
class Parameter:
    """A scalar rule parameter tagged with its kind."""

    kind: ParamKind
    value: Union[str, int, float, bool]

    @classmethod
    def of(cls, value: Any) -> "Parameter":
        """
        Tag a raw JSON scalar.

        Raises:
            ValueError: If the value is not a finite string, number or boolean
        """
        # bool is a subclass of int, so it has to be checked first
        if isinstance(value, bool):
            return cls(ParamKind.BOOLEAN, value)
        if isinstance(value, (int, float)):
            if isinstance(value, float) and not math.isfinite(value):
                raise ValueError(f"non-finite number {value!r}")
            return cls(ParamKind.NUMBER, value)
        if isinstance(value, str):
            return cls(ParamKind.STRING, value)
        raise ValueError(f"expected a string, number or boolean, got {type(value).__name__}")


@dataclass(frozen=True)
class RuleDefinition:
    """A single validation check applied to a property."""

    validator_kind: str
    parameters: Mapping[str, Parameter] = field(default_factory=dict)
    message: Optional[str] = None
    when: Optional[str] = None  # Reserved; has no effect on emission

    @property
    def kind(self) -> Optional[ValidatorKind]:
        """Resolved validator kind, or None when the tag is unknown."""
        return ValidatorKind.resolve(self.validator_kind)

    @property
    def has_message(self) -> bool:
        return bool(self.message and self.message.strip())


@dataclass(frozen=True)
class PropertyDefinition:
    """A validated field of an entity."""

    name: str
    type: str
    rules: Tuple[RuleDefinition, ...] = ()

    @property
    def property_type(self) -> PropertyType:
        return PropertyType.from_tag(self.type or "")


@dataclass(frozen=True)
class ValidationDefinition:
    """Root record describing all validated properties of one entity."""

    entity_name: str
    namespace: str
    properties: Tuple[PropertyDefinition, ...] = ()

    @property
    def validator_class_name(self) -> str:
        return f"{self.entity_name}Validator"

    @property
    def rule_count(self) -> int:
        return sum(len(prop.rules) for prop in self.properties)

    def with_namespace(self, namespace: str) -> "ValidationDefinition":
        """Return a copy of this definition using another namespace."""
        return replace(self, namespace=namespace)


def definition_from_dict(
    data: Any, source: Optional[str] = None
) -> ValidationDefinition:
    """
    Convert a parsed JSON document into a ValidationDefinition.

    Keys are matched case-insensitively. Missing scalar fields become empty
    strings so the schema validator can report them; values of the wrong
    JSON shape are rejected here.

    Args:
        data: Parsed JSON (expected to be an object)
        source: Name of the input, used in error messages

    Returns:
        ValidationDefinition

    Raises:
        DefinitionFormatError: If the document has the wrong shape
    """

    def fail(location: str, problem: str) -> DefinitionFormatError:
        where = f"{source}: " if source else ""
        return DefinitionFormatError(f"{where}{location}: {problem}", source)

    def lookup(node: Dict[str, Any], *keys: str) -> Any:
        lowered = {k.lower(): v for k, v in node.items() if isinstance(k, str)}
        for key in keys:
            if key.lower() in lowered:
                return lowered[key.lower()]
        return None

    def as_text(value: Any, location: str, optional: bool = False) -> Optional[str]:
        if value is None:
            return None if optional else ""
        if not isinstance(value, str):
            raise fail(location, f"expected a string, got {type(value).__name__}")
        return value

    def as_list(value: Any, location: str) -> List[Any]:
        if value is None:
            return []
        if not isinstance(value, list):
            raise fail(location, f"expected an array, got {type(value).__name__}")
        return value

    def as_object(value: Any, location: str) -> Dict[str, Any]:
        if not isinstance(value, dict):
            raise fail(location, f"expected an object, got {type(value).__name__}")
        return value

    def convert_parameters(value: Any, location: str) -> Dict[str, Parameter]:
        if value is None:
            return {}
        raw = as_object(value, location)
        parameters = {}
        for name, raw_value in raw.items():
            # null counts as an absent parameter
            if raw_value is None:
                continue
            try:
                parameters[name] = Parameter.of(raw_value)
            except ValueError as e:
                raise fail(f"{location}.{name}", str(e)) from e
        return parameters

    def convert_rule(node: Any, location: str) -> RuleDefinition:
        node = as_object(node, location)
        return RuleDefinition(
            validator_kind=as_text(
                lookup(node, "validator", "validatorKind"), f"{location}.validator"
            ),
            parameters=convert_parameters(
                lookup(node, "parameters"), f"{location}.parameters"
            ),
            message=as_text(lookup(node, "message"), f"{location}.message", True),
            when=as_text(lookup(node, "when"), f"{location}.when", True),
        )

    def convert_property(node: Any, location: str) -> PropertyDefinition:
        node = as_object(node, location)
        rules = as_list(lookup(node, "rules"), f"{location}.rules")
        return PropertyDefinition(
            name=as_text(lookup(node, "name"), f"{location}.name"),
            type=as_text(lookup(node, "type"), f"{location}.type"),
            rules=tuple(
                convert_rule(rule, f"{location}.rules[{j}]")
                for j, rule in enumerate(rules)
            ),
        )

    root = as_object(data, "definition")
    properties = as_list(lookup(root, "properties"), "properties")

    return ValidationDefinition(
        entity_name=as_text(lookup(root, "entity", "entityName"), "entity"),
        namespace=as_text(lookup(root, "namespace"), "namespace"),
        properties=tuple(
            convert_property(prop, f"properties[{i}]")
            for i, prop in enumerate(properties)
        ),
    )
