"""
fluentvalidation-ts (TypeScript) validator mapping table.
"""

from ...core.mapping import ValidatorMappingTable
from ...core.schema import ValidatorKind


class TypeScriptMappingTable(ValidatorMappingTable):
    """Maps validator kinds to fluentvalidation-ts rule methods."""

    language = "typescript"

    method_names = {
        ValidatorKind.NOT_NULL: "notNull",
        ValidatorKind.NOT_EMPTY: "notEmpty",
        ValidatorKind.EMPTY: "empty",
        ValidatorKind.NULL: "null",
        ValidatorKind.EQUAL: "equal",
        ValidatorKind.NOT_EQUAL: "notEqual",
        ValidatorKind.LENGTH: "length",
        ValidatorKind.MIN_LENGTH: "minLength",
        ValidatorKind.MAX_LENGTH: "maxLength",
        ValidatorKind.EMAIL_ADDRESS: "emailAddress",
        ValidatorKind.MATCHES: "matches",
        ValidatorKind.LESS_THAN: "lessThan",
        ValidatorKind.LESS_THAN_OR_EQUAL: "lessThanOrEqualTo",
        ValidatorKind.GREATER_THAN: "greaterThan",
        ValidatorKind.GREATER_THAN_OR_EQUAL: "greaterThanOrEqualTo",
        ValidatorKind.INCLUSIVE_BETWEEN: "inclusiveBetween",
        ValidatorKind.EXCLUSIVE_BETWEEN: "exclusiveBetween",
        ValidatorKind.CREDIT_CARD: "creditCard",
        ValidatorKind.IS_IN_ENUM: "isInEnum",
    }

    quote_char = "'"

    def render_pattern(self, pattern: str) -> str:
        # Only backslashes are doubled; quotes pass through unchanged
        escaped = pattern.replace("\\", "\\\\")
        return f"new RegExp('{escaped}')"
