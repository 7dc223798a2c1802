"""
C# type mapping for model classes.
"""

from dataclasses import dataclass
from typing import Dict

from ...core.config import GeneratorConfig
from ...core.schema import PropertyType


@dataclass(frozen=True)
class CSharpTypeConfig:
    """Target types for each property type."""

    string_type: str = "string"
    number_type: str = "decimal"
    boolean_type: str = "bool"
    date_type: str = "DateTime"
    unknown_type: str = "object"

    @classmethod
    def from_config(cls, config: GeneratorConfig) -> "CSharpTypeConfig":
        """Read type settings from a generator config's custom section."""
        custom = config.custom
        return cls(
            number_type=custom.get("number_type", cls.number_type),
            date_type=custom.get("date_type", cls.date_type),
        )

    def type_map(self) -> Dict[PropertyType, str]:
        return {
            PropertyType.STRING: self.string_type,
            PropertyType.NUMBER: self.number_type,
            PropertyType.BOOLEAN: self.boolean_type,
            PropertyType.DATE: self.date_type,
            PropertyType.UNKNOWN: self.unknown_type,
        }
