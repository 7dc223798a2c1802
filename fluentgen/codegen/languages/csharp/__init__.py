"""
C# code generator module.

Generates FluentValidation validator classes from rule definitions.
"""

from typing import Any, Dict, Optional

from ...core.config import load_config
from .generator import CSharpGenerator
from .mapping import CSharpMappingTable
from .naming import CSHARP_RESERVED_WORDS, create_csharp_policy
from .types import CSharpTypeConfig

__all__ = [
    "CSharpGenerator",
    "CSharpMappingTable",
    "CSharpTypeConfig",
    "CSHARP_RESERVED_WORDS",
    "create_csharp_policy",
    "create_csharp_generator",
]


def create_csharp_generator(config: Optional[Dict[str, Any]] = None) -> CSharpGenerator:
    """
    Create a C# generator from a plain configuration dict.

    Args:
        config: Overrides applied on top of the C# defaults

    Returns:
        Configured CSharpGenerator instance
    """
    return CSharpGenerator(load_config("csharp", config))
