"""
Validator mapping tables.

A mapping table translates a rule's validator kind and parameters into a
call fragment of a target fluent validation API. Each language supplies its
method names and literal syntax; parameter handling is shared so every
target accepts exactly the same parameters.
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, FrozenSet, Mapping, Optional, Tuple, Union

from .errors import (
    InvalidParameterError,
    MissingParameterError,
    UnsupportedValidatorError,
)
from .schema import Parameter, ParamKind, ValidatorKind


class ValidatorShape(Enum):
    """Argument shapes of validator calls."""

    PARAMETERLESS = "parameterless"  # NotEmpty()
    SINGLE_VALUE = "single_value"  # Equal(value)
    SINGLE_BOUND = "single_bound"  # MaximumLength(length)
    TWO_BOUND = "two_bound"  # InclusiveBetween(min, max)
    PATTERN = "pattern"  # Matches(pattern)


VALIDATOR_SHAPES: Dict[ValidatorKind, ValidatorShape] = {
    ValidatorKind.NOT_NULL: ValidatorShape.PARAMETERLESS,
    ValidatorKind.NOT_EMPTY: ValidatorShape.PARAMETERLESS,
    ValidatorKind.EMPTY: ValidatorShape.PARAMETERLESS,
    ValidatorKind.NULL: ValidatorShape.PARAMETERLESS,
    ValidatorKind.EMAIL_ADDRESS: ValidatorShape.PARAMETERLESS,
    ValidatorKind.CREDIT_CARD: ValidatorShape.PARAMETERLESS,
    ValidatorKind.IS_IN_ENUM: ValidatorShape.PARAMETERLESS,
    ValidatorKind.EQUAL: ValidatorShape.SINGLE_VALUE,
    ValidatorKind.NOT_EQUAL: ValidatorShape.SINGLE_VALUE,
    ValidatorKind.LESS_THAN: ValidatorShape.SINGLE_VALUE,
    ValidatorKind.LESS_THAN_OR_EQUAL: ValidatorShape.SINGLE_VALUE,
    ValidatorKind.GREATER_THAN: ValidatorShape.SINGLE_VALUE,
    ValidatorKind.GREATER_THAN_OR_EQUAL: ValidatorShape.SINGLE_VALUE,
    ValidatorKind.MIN_LENGTH: ValidatorShape.SINGLE_BOUND,
    ValidatorKind.MAX_LENGTH: ValidatorShape.SINGLE_BOUND,
    ValidatorKind.LENGTH: ValidatorShape.TWO_BOUND,
    ValidatorKind.INCLUSIVE_BETWEEN: ValidatorShape.TWO_BOUND,
    ValidatorKind.EXCLUSIVE_BETWEEN: ValidatorShape.TWO_BOUND,
    ValidatorKind.MATCHES: ValidatorShape.PATTERN,
}

# Required parameters per shape, in the order they are checked and rendered
SHAPE_PARAMETERS: Dict[ValidatorShape, Tuple[str, ...]] = {
    ValidatorShape.PARAMETERLESS: (),
    ValidatorShape.SINGLE_VALUE: ("value",),
    ValidatorShape.SINGLE_BOUND: ("length",),
    ValidatorShape.TWO_BOUND: ("min", "max"),
    ValidatorShape.PATTERN: ("pattern",),
}


def format_number(value: Union[int, float]) -> str:
    """
    Render a number the same way in every target.

    Integral values have no decimal point; other values keep their
    fractional digits and never use exponent notation.
    """
    if isinstance(value, int):
        return str(value)
    if value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")


def escape_string(text: str, quote: str) -> str:
    """Escape text for a string literal delimited by `quote`."""
    return (
        text.replace("\\", "\\\\")
        .replace(quote, "\\" + quote)
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
    )


class ValidatorMappingTable(ABC):
    """Base class for per-language validator mapping tables."""

    #: Language this table renders for, used in error messages
    language: str = ""

    #: Method name for every supported kind
    method_names: Dict[ValidatorKind, str] = {}

    quote_char: str = '"'
    true_literal: str = "true"
    false_literal: str = "false"

    def supported_kinds(self) -> FrozenSet[ValidatorKind]:
        return frozenset(self.method_names)

    def render(
        self,
        validator_kind: str,
        parameters: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """
        Render a rule into a call fragment.

        Args:
            validator_kind: Validator tag from the definition
            parameters: Rule parameters (tagged or raw scalars)

        Returns:
            Call fragment without a leading dot, e.g. "Length(2, 100)"

        Raises:
            UnsupportedValidatorError: Unknown validator kind
            MissingParameterError: A required parameter is absent
            InvalidParameterError: A pattern parameter is not a string
        """
        kind = ValidatorKind.resolve(validator_kind)
        if kind is None or kind not in self.method_names:
            raise UnsupportedValidatorError(validator_kind, self.language)

        shape = VALIDATOR_SHAPES[kind]
        values = [
            self._require(validator_kind, parameters, name)
            for name in SHAPE_PARAMETERS[shape]
        ]

        if shape == ValidatorShape.PATTERN:
            pattern = values[0]
            if pattern.kind != ParamKind.STRING:
                raise InvalidParameterError(validator_kind, "pattern", "string")
            arguments = self.render_pattern(pattern.value)
        else:
            arguments = ", ".join(self.render_literal(value) for value in values)

        return f"{self.method_names[kind]}({arguments})"

    def _require(
        self,
        validator_kind: str,
        parameters: Optional[Mapping[str, Any]],
        name: str,
    ) -> Parameter:
        """Fetch a required parameter, tagging raw values on the way."""
        if not parameters or parameters.get(name) is None:
            raise MissingParameterError(validator_kind, name)

        value = parameters[name]
        if isinstance(value, Parameter):
            return value
        try:
            return Parameter.of(value)
        except ValueError as e:
            raise InvalidParameterError(
                validator_kind, name, "string, number or boolean"
            ) from e

    def render_literal(self, parameter: Parameter) -> str:
        """Render a scalar parameter as a literal of the target language."""
        if parameter.kind == ParamKind.STRING:
            return self.quote(parameter.value)
        if parameter.kind == ParamKind.BOOLEAN:
            return self.true_literal if parameter.value else self.false_literal
        return format_number(parameter.value)

    def quote(self, text: str) -> str:
        """Render text as an escaped string literal."""
        return f"{self.quote_char}{escape_string(text, self.quote_char)}{self.quote_char}"

    @abstractmethod
    def render_pattern(self, pattern: str) -> str:
        """Render the argument list of a pattern-match call."""
        pass
