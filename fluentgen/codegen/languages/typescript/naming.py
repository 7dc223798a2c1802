"""
TypeScript-specific naming utilities.

Property names are converted by lowercasing their first character, which is
how the entity's fields are named on the TypeScript side.
"""

from ...core.naming import IdentifierPolicy, NamingCase


# Reserved words that cannot be used as bare identifiers
TYPESCRIPT_RESERVED_WORDS = {
    "break",
    "case",
    "catch",
    "class",
    "const",
    "continue",
    "debugger",
    "default",
    "delete",
    "do",
    "else",
    "enum",
    "export",
    "extends",
    "false",
    "finally",
    "for",
    "function",
    "if",
    "import",
    "in",
    "instanceof",
    "new",
    "null",
    "return",
    "super",
    "switch",
    "this",
    "throw",
    "true",
    "try",
    "typeof",
    "var",
    "void",
    "while",
    "with",
}


def create_typescript_policy() -> IdentifierPolicy:
    """Create an identifier policy for TypeScript property names."""
    return IdentifierPolicy(
        case=NamingCase.LOWER_FIRST,
        reserved_words=TYPESCRIPT_RESERVED_WORDS,
    )
