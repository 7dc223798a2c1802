"""
TypeScript code generator implementation.

Generates fluentvalidation-ts Validator classes, preceded by the entity's
type declaration, from rule definitions.
"""

from pathlib import Path
from typing import Dict, Optional

from ...core.config import GeneratorConfig
from ...core.generator import CodeGenerator
from ...core.mapping import ValidatorMappingTable
from ...core.naming import IdentifierPolicy
from ...core.schema import PropertyType
from .mapping import TypeScriptMappingTable
from .naming import create_typescript_policy


TYPESCRIPT_TYPES = {
    PropertyType.STRING: "string",
    PropertyType.NUMBER: "number",
    PropertyType.BOOLEAN: "boolean",
    PropertyType.DATE: "Date",
    PropertyType.UNKNOWN: "any",
}


class TypeScriptGenerator(CodeGenerator):
    """Code generator for fluentvalidation-ts validators."""

    template_name = "validator.ts.j2"
    message_method = "withMessage"

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize TypeScript generator with configuration."""
        super().__init__(config)

        self._mapping_table = TypeScriptMappingTable()
        self._naming = create_typescript_policy()

    def get_template_directory(self) -> Optional[Path]:
        """Return the TypeScript templates directory."""
        template_dir = Path(__file__).parent / "templates"
        return template_dir if template_dir.exists() else None

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "typescript"

    @property
    def file_extension(self) -> str:
        """Return TypeScript file extension."""
        return ".ts"

    @property
    def mapping_table(self) -> ValidatorMappingTable:
        return self._mapping_table

    @property
    def naming(self) -> IdentifierPolicy:
        return self._naming

    @property
    def type_map(self) -> Dict[PropertyType, str]:
        return TYPESCRIPT_TYPES

    def render_accessor(self, identifier: str) -> str:
        return f"this.ruleFor({self.mapping_table.quote(identifier)})"
