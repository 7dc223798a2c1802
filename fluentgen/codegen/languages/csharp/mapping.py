"""
FluentValidation (C#) validator mapping table.
"""

from ...core.mapping import ValidatorMappingTable
from ...core.schema import ValidatorKind


class CSharpMappingTable(ValidatorMappingTable):
    """Maps validator kinds to FluentValidation rule methods."""

    language = "csharp"

    method_names = {
        ValidatorKind.NOT_NULL: "NotNull",
        ValidatorKind.NOT_EMPTY: "NotEmpty",
        ValidatorKind.EMPTY: "Empty",
        ValidatorKind.NULL: "Null",
        ValidatorKind.EQUAL: "Equal",
        ValidatorKind.NOT_EQUAL: "NotEqual",
        ValidatorKind.LENGTH: "Length",
        ValidatorKind.MIN_LENGTH: "MinimumLength",
        ValidatorKind.MAX_LENGTH: "MaximumLength",
        ValidatorKind.EMAIL_ADDRESS: "EmailAddress",
        ValidatorKind.MATCHES: "Matches",
        ValidatorKind.LESS_THAN: "LessThan",
        ValidatorKind.LESS_THAN_OR_EQUAL: "LessThanOrEqualTo",
        ValidatorKind.GREATER_THAN: "GreaterThan",
        ValidatorKind.GREATER_THAN_OR_EQUAL: "GreaterThanOrEqualTo",
        ValidatorKind.INCLUSIVE_BETWEEN: "InclusiveBetween",
        ValidatorKind.EXCLUSIVE_BETWEEN: "ExclusiveBetween",
        ValidatorKind.CREDIT_CARD: "CreditCard",
        ValidatorKind.IS_IN_ENUM: "IsInEnum",
    }

    quote_char = '"'

    def render_pattern(self, pattern: str) -> str:
        # Regular string literal: backslashes and quotes only
        escaped = pattern.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'
