"""
Generator settings.

Settings are layered: per-language defaults, then an optional JSON config
file, then explicit overrides (CLI flags or a dict passed by the caller).
"""

import copy
import json
from pathlib import Path
from typing import Dict, Any, Optional, Union
from dataclasses import dataclass, field, fields

from .schema import PropertyType


class ConfigError(Exception):
    """Unreadable or malformed configuration file."""

    pass


@dataclass
class GeneratorConfig:
    """Settings shared by every validator generator."""

    # Emit the entity shape (TypeScript type / C# model class)
    emit_model_type: bool = True

    # Prefix files with an auto-generated notice
    add_comments: bool = False

    # Code style settings
    line_ending: str = "\n"

    # Source type tag -> target type name, e.g. {"number": "int"}
    type_overrides: Dict[str, str] = field(default_factory=dict)

    # Language-specific settings, e.g. C# number_type
    custom: Dict[str, Any] = field(default_factory=dict)


class ConfigManager:
    """Builds GeneratorConfig objects from defaults, files and overrides."""

    def __init__(self):
        self._configs: Dict[str, Dict[str, Any]] = {}
        self._load_defaults()

    def _load_defaults(self):
        """Register the built-in per-language defaults."""
        # C# defaults: the host application owns its model classes
        self._configs["csharp"] = {
            "emit_model_type": False,
            "add_comments": False,
            "custom": {
                "number_type": "decimal",
                "date_type": "DateTime",
            },
        }

        # TypeScript defaults
        self._configs["typescript"] = {
            "emit_model_type": True,
            "add_comments": False,
            "custom": {},
        }

    def get_config(
        self,
        language: Optional[str] = None,
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> GeneratorConfig:
        """
        Build the effective configuration of one language.

        Args:
            language: Target language name
            custom_config: Overrides applied last
            config_file: JSON file applied between defaults and overrides

        Raises:
            ConfigError: If the config file cannot be used
        """
        base_config = copy.deepcopy(self._configs.get(language, {}))

        if config_file:
            file_config = self._load_config_file(config_file)
            self._merge(base_config, self._select_language(file_config, language))

        if custom_config:
            self._merge(base_config, self._select_language(custom_config, language))

        return self._dict_to_config(base_config)

    def _select_language(
        self, config: Dict[str, Any], language: Optional[str]
    ) -> Dict[str, Any]:
        """
        Flatten a config dict for one language.

        Top-level keys apply to every language; a nested object keyed by a
        language name applies only to that language and wins over top-level
        keys.
        """
        selected = {
            key: copy.deepcopy(value)
            for key, value in config.items()
            if not (key in self._configs and isinstance(value, dict))
        }
        section = config.get(language) if language else None
        if isinstance(section, dict):
            self._merge(selected, copy.deepcopy(section))
        return selected

    def _merge(self, target: Dict[str, Any], overrides: Dict[str, Any]):
        """Merge overrides into target, combining nested dict settings."""
        for key, value in overrides.items():
            if key in ("custom", "type_overrides") and isinstance(value, dict):
                target.setdefault(key, {}).update(value)
            else:
                target[key] = value

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Read a config file, which must hold a JSON object."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if not path.suffix.lower() == ".json":
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {str(e)}")
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {str(e)}")

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> GeneratorConfig:
        """Split a flat settings dict into GeneratorConfig fields and custom settings."""
        known_fields = {f.name for f in fields(GeneratorConfig)}

        config_args = {}
        custom_args = {}

        for key, value in config_dict.items():
            if key in known_fields:
                config_args[key] = value
            else:
                custom_args[key] = value

        if custom_args:
            existing_custom = config_args.get("custom", {})
            existing_custom.update(custom_args)
            config_args["custom"] = existing_custom

        return GeneratorConfig(**config_args)

    def list_languages(self) -> list[str]:
        """Languages that have built-in defaults."""
        return list(self._configs.keys())

    def validate_config(self, config: GeneratorConfig, language: str) -> list[str]:
        """
        Check a configuration for settings that will not work as intended.

        Returns:
            Warning messages (empty when the configuration is fine)
        """
        warnings = []

        if config.line_ending not in ("\n", "\r\n"):
            warnings.append(f"Invalid line_ending: {config.line_ending!r}")

        known_types = {t.value for t in PropertyType if t != PropertyType.UNKNOWN}
        for source_type, target_type in config.type_overrides.items():
            if source_type != source_type.strip().lower():
                warnings.append(
                    f"type_overrides key must be lowercase: {source_type!r}"
                )
            if not isinstance(target_type, str) or not target_type.strip():
                warnings.append(f"type_overrides[{source_type!r}] has no target type")
            elif source_type not in known_types:
                # Custom tags are allowed; they are only reported for visibility
                warnings.append(
                    f"type_overrides maps custom source type: {source_type}"
                )

        if language == "csharp":
            number_type = config.custom.get("number_type", "decimal")
            valid_numbers = {"decimal", "double", "float", "int", "long"}
            if number_type not in valid_numbers:
                warnings.append(f"Invalid C# number_type: {number_type}")

        return warnings


_config_manager = None


def get_config_manager() -> ConfigManager:
    """Return the shared ConfigManager."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(
    language: Optional[str] = None,
    custom_config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> GeneratorConfig:
    """
    Build a language configuration with the shared ConfigManager.

    See ConfigManager.get_config.
    """
    manager = get_config_manager()
    return manager.get_config(language, custom_config, config_file)


# Sample config file: shared settings plus per-language sections
EXAMPLE_CONFIG = {
    "add_comments": True,
    "csharp": {
        "emit_model_type": True,
        "number_type": "double",
    },
    "typescript": {
        "type_overrides": {"date": "string"},
    },
}
