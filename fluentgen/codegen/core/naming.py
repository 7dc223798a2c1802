"""
Naming utilities for code generation.

Handles identifier casing per target convention and reserved-word checks.
"""

from enum import Enum
from typing import Iterable, List, Set


class NamingCase(Enum):
    """Identifier casing applied to property accessors."""

    ORIGINAL = "original"  # UserName -> UserName
    LOWER_FIRST = "lower_first"  # UserName -> userName, URLPath -> uRLPath


def lower_first(identifier: str) -> str:
    """
    Lowercase the first character only.

    This is deliberately not a camelCase conversion: "URLPath" becomes
    "uRLPath" and "user_name" stays "user_name".
    """
    return identifier[:1].lower() + identifier[1:]


def to_target_casing(identifier: str, case: NamingCase) -> str:
    """Convert an identifier to the casing of a target convention."""
    if case == NamingCase.LOWER_FIRST:
        return lower_first(identifier)
    return identifier


class IdentifierPolicy:
    """Applies a convention's casing and knows its reserved words."""

    def __init__(self, case: NamingCase, reserved_words: Set[str] = None):
        """
        Initialize identifier policy.

        Args:
            case: Casing applied to property identifiers
            reserved_words: Words that cannot be used as bare identifiers
        """
        self.case = case
        self.reserved_words = reserved_words or set()

    def transform(self, name: str) -> str:
        return to_target_casing(name, self.case)

    def is_reserved(self, name: str) -> bool:
        """Check whether the transformed name collides with a reserved word."""
        return self.transform(name) in self.reserved_words

    def find_reserved(self, names: Iterable[str]) -> List[str]:
        """Return the names whose transformed form is reserved, in input order."""
        return [name for name in names if self.is_reserved(name)]
