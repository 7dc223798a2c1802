"""
TypeScript code generator module.

Generates fluentvalidation-ts validator classes from rule definitions.
"""

from typing import Any, Dict, Optional

from ...core.config import load_config
from .generator import TypeScriptGenerator, TYPESCRIPT_TYPES
from .mapping import TypeScriptMappingTable
from .naming import TYPESCRIPT_RESERVED_WORDS, create_typescript_policy

__all__ = [
    "TypeScriptGenerator",
    "TypeScriptMappingTable",
    "TYPESCRIPT_TYPES",
    "TYPESCRIPT_RESERVED_WORDS",
    "create_typescript_policy",
    "create_typescript_generator",
]


def create_typescript_generator(
    config: Optional[Dict[str, Any]] = None,
) -> TypeScriptGenerator:
    """
    Create a TypeScript generator from a plain configuration dict.

    Args:
        config: Overrides applied on top of the TypeScript defaults

    Returns:
        Configured TypeScriptGenerator instance
    """
    return TypeScriptGenerator(load_config("typescript", config))
