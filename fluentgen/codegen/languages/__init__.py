"""
Language-specific code generators.

This module contains generators for the supported validation libraries.
"""

from .csharp import CSharpGenerator, create_csharp_generator
from .typescript import TypeScriptGenerator, create_typescript_generator

__all__ = [
    "CSharpGenerator",
    "create_csharp_generator",
    "TypeScriptGenerator",
    "create_typescript_generator",
]
