"""
C# code generator implementation.

Generates FluentValidation AbstractValidator classes from rule definitions.
"""

from pathlib import Path
from typing import Dict, Optional

from ...core.config import GeneratorConfig
from ...core.generator import CodeGenerator
from ...core.mapping import ValidatorMappingTable
from ...core.naming import IdentifierPolicy
from ...core.schema import PropertyType
from .mapping import CSharpMappingTable
from .naming import create_csharp_policy
from .types import CSharpTypeConfig


class CSharpGenerator(CodeGenerator):
    """Code generator for FluentValidation validators."""

    template_name = "validator.cs.j2"
    message_method = "WithMessage"

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize C# generator with configuration."""
        super().__init__(config)

        self._mapping_table = CSharpMappingTable()
        self._naming = create_csharp_policy()
        self.type_config = CSharpTypeConfig.from_config(self.config)

    def get_template_directory(self) -> Optional[Path]:
        """Return the C# templates directory."""
        template_dir = Path(__file__).parent / "templates"
        return template_dir if template_dir.exists() else None

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "csharp"

    @property
    def file_extension(self) -> str:
        """Return C# file extension."""
        return ".cs"

    @property
    def mapping_table(self) -> ValidatorMappingTable:
        return self._mapping_table

    @property
    def naming(self) -> IdentifierPolicy:
        return self._naming

    @property
    def type_map(self) -> Dict[PropertyType, str]:
        return self.type_config.type_map()

    def render_accessor(self, identifier: str) -> str:
        return f"RuleFor(x => x.{identifier})"
