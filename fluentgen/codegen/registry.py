"""
Language registry for validator generators.

Maps language names and aliases (``cs``, ``c#``, ``ts``) to generator classes
and builds generators configured with their language defaults.
"""

from dataclasses import dataclass, field
from typing import Dict, Type, Optional, Any, List, Union
from pathlib import Path

from .core.generator import CodeGenerator
from .core.config import ConfigError, GeneratorConfig, load_config
from .core.templates import TemplateError

ConfigSource = Union[GeneratorConfig, Dict[str, Any], str, Path, None]


class RegistryError(Exception):
    """Unknown language, alias clash or failed generator construction."""

    pass


@dataclass
class LanguageEntry:
    """A registered language and the names it answers to."""

    name: str
    generator_class: Type[CodeGenerator]
    aliases: List[str] = field(default_factory=list)


class GeneratorRegistry:
    """Lookup table from language names and aliases to generators."""

    def __init__(self):
        self._entries: Dict[str, LanguageEntry] = {}
        self._alias_index: Dict[str, str] = {}

    def register(
        self,
        language: str,
        generator_class: Type[CodeGenerator],
        aliases: Optional[List[str]] = None,
    ):
        """
        Add a language.

        Registering a language twice keeps the first registration.

        Args:
            language: Primary name, e.g. 'csharp'
            generator_class: CodeGenerator subclass rendering the language
            aliases: Extra names accepted on the command line

        Raises:
            RegistryError: If the class is not a generator or an alias is taken
        """
        if not (isinstance(generator_class, type) and issubclass(generator_class, CodeGenerator)):
            raise RegistryError(f"{generator_class!r} is not a CodeGenerator subclass")

        name = language.lower()
        if name in self._entries:
            return

        alias_keys = []
        for alias in aliases or []:
            key = alias.lower()
            if key == name or key in alias_keys:
                continue
            if key in self._entries:
                raise RegistryError(
                    f"Alias '{alias}' conflicts with existing primary language"
                )
            owner = self._alias_index.get(key)
            if owner is not None:
                raise RegistryError(f"Alias '{alias}' already points to '{owner}'")
            alias_keys.append(key)

        self._entries[name] = LanguageEntry(name, generator_class, sorted(alias_keys))
        for key in alias_keys:
            self._alias_index[key] = name

    def unregister(self, language: str):
        """Remove a language together with its aliases."""
        entry = self._entries.pop(language.lower(), None)
        if entry:
            for key in entry.aliases:
                self._alias_index.pop(key, None)

    def resolve_language(self, language: str) -> str:
        """
        Return the primary name for a language name or alias.

        Raises:
            RegistryError: If nothing is registered under that name
        """
        key = language.strip().lower()
        if key in self._entries:
            return key
        if key in self._alias_index:
            return self._alias_index[key]

        raise RegistryError(
            f"No generator registered for language: {language}. "
            f"Available: {', '.join(self.list_languages())}"
        )

    def get_generator_class(self, language: str) -> Type[CodeGenerator]:
        return self._entries[self.resolve_language(language)].generator_class

    def create_generator(self, language: str, config: ConfigSource = None) -> CodeGenerator:
        """
        Build a generator for a language.

        Dicts and config files are layered over the language defaults, so
        they only need the settings they change; a GeneratorConfig is used
        as given.

        Args:
            language: Language name or alias
            config: GeneratorConfig, override dict, or JSON config file path

        Raises:
            RegistryError: If the language is unknown or the config is unusable
        """
        name = self.resolve_language(language)
        generator_class = self._entries[name].generator_class

        if isinstance(config, GeneratorConfig):
            return generator_class(config)
        if config is not None and not isinstance(config, (dict, str, Path)):
            raise RegistryError(f"Invalid config type: {type(config)}")

        try:
            if isinstance(config, dict):
                final_config = load_config(name, custom_config=config)
            else:
                final_config = load_config(name, config_file=config)
            return generator_class(final_config)
        except (ConfigError, TemplateError, TypeError) as e:
            raise RegistryError(f"Failed to create {language} generator: {e}") from e

    def list_languages(self) -> List[str]:
        """Primary names, sorted."""
        return sorted(self._entries)

    def get_aliases_for_language(self, language: str) -> List[str]:
        entry = self._entries.get(language.lower())
        return list(entry.aliases) if entry else []

    def list_all_names(self) -> Dict[str, List[str]]:
        """Primary name -> every accepted name, primary first."""
        return {
            name: [name] + list(entry.aliases) for name, entry in self._entries.items()
        }

    def is_supported(self, language: str) -> bool:
        key = language.strip().lower()
        return key in self._entries or key in self._alias_index

    def get_language_info(self, language: str) -> Dict[str, Any]:
        """
        Describe a language using a generator built with its defaults.

        Raises:
            RegistryError: If the language is unknown
        """
        name = self.resolve_language(language)
        generator = self.create_generator(name)

        return {
            "name": generator.language_name,
            "class": type(generator).__name__,
            "file_extension": generator.file_extension,
            "aliases": self.get_aliases_for_language(name),
            "module": type(generator).__module__,
            "validator_count": len(generator.mapping_table.supported_kinds()),
            "emit_model_type": generator.config.emit_model_type,
            "type_map": {
                source.value: target for source, target in generator.type_map.items()
            },
        }


_registry: Optional[GeneratorRegistry] = None


def get_registry() -> GeneratorRegistry:
    """Return the shared registry holding the built-in languages."""
    global _registry
    if _registry is None:
        _registry = GeneratorRegistry()
        _register_builtin_languages(_registry)
    return _registry


def _register_builtin_languages(registry: GeneratorRegistry):
    from .languages.csharp import CSharpGenerator
    from .languages.typescript import TypeScriptGenerator

    registry.register("csharp", CSharpGenerator, aliases=["cs", "c#"])
    registry.register("typescript", TypeScriptGenerator, aliases=["ts"])


# Module-level shortcuts over the shared registry


def register_generator(
    language: str,
    generator_class: Type[CodeGenerator],
    aliases: Optional[List[str]] = None,
):
    get_registry().register(language, generator_class, aliases)


def get_generator(language: str, config: ConfigSource = None) -> CodeGenerator:
    """Build a configured generator for a language name or alias."""
    return get_registry().create_generator(language, config)


def list_supported_languages() -> List[str]:
    return get_registry().list_languages()


def is_language_supported(language: str) -> bool:
    return get_registry().is_supported(language)


def get_language_info(language: str) -> Dict[str, Any]:
    return get_registry().get_language_info(language)


def list_all_language_info() -> Dict[str, Dict[str, Any]]:
    """Language info for every registered language, keyed by primary name."""
    return {name: get_language_info(name) for name in list_supported_languages()}
