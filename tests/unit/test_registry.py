"""Generator registry tests."""

import json
from pathlib import Path

import pytest

from fluentgen.codegen.core.config import GeneratorConfig
from fluentgen.codegen.languages.csharp import CSharpGenerator
from fluentgen.codegen.languages.typescript import TypeScriptGenerator
from fluentgen.codegen.registry import (
    GeneratorRegistry,
    RegistryError,
    get_generator,
    get_language_info,
    is_language_supported,
    list_all_language_info,
    list_supported_languages,
)


@pytest.fixture
def registry() -> GeneratorRegistry:
    registry = GeneratorRegistry()
    registry.register("csharp", CSharpGenerator, aliases=["cs", "c#"])
    registry.register("typescript", TypeScriptGenerator, aliases=["ts"])
    return registry


class TestRegistration:
    def test_lookup_by_name_and_alias(self, registry: GeneratorRegistry) -> None:
        assert registry.get_generator_class("CSharp") is CSharpGenerator
        assert registry.get_generator_class("c#") is CSharpGenerator
        assert registry.get_generator_class("TS") is TypeScriptGenerator

    def test_unknown_language(self, registry: GeneratorRegistry) -> None:
        with pytest.raises(RegistryError, match="Available: csharp, typescript"):
            registry.get_generator_class("cobol")

    def test_rejects_non_generators(self, registry: GeneratorRegistry) -> None:
        with pytest.raises(RegistryError):
            registry.register("bogus", dict)

    def test_alias_conflicts(self, registry: GeneratorRegistry) -> None:
        with pytest.raises(RegistryError, match="already points to 'csharp'"):
            registry.register("tsx", TypeScriptGenerator, aliases=["cs"])

        with pytest.raises(RegistryError, match="conflicts with existing primary"):
            registry.register("other", TypeScriptGenerator, aliases=["csharp"])

    def test_unregister_removes_aliases(self, registry: GeneratorRegistry) -> None:
        registry.unregister("typescript")

        assert registry.list_languages() == ["csharp"]
        assert not registry.is_supported("ts")

    def test_list_all_names(self, registry: GeneratorRegistry) -> None:
        assert registry.list_all_names() == {
            "csharp": ["csharp", "c#", "cs"],
            "typescript": ["typescript", "ts"],
        }


class TestCreateGenerator:
    def test_applies_language_defaults(self, registry: GeneratorRegistry) -> None:
        generator = registry.create_generator("cs")

        assert isinstance(generator, CSharpGenerator)
        assert generator.config.emit_model_type is False

    def test_dict_config_is_merged_with_defaults(self, registry: GeneratorRegistry) -> None:
        generator = registry.create_generator("csharp", {"add_comments": True})

        assert generator.config.add_comments is True
        assert generator.config.custom["number_type"] == "decimal"

    def test_config_file(self, registry: GeneratorRegistry, tmp_path: Path) -> None:
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"typescript": {"emit_model_type": False}}))

        generator = registry.create_generator("ts", config_file)

        assert generator.config.emit_model_type is False

    def test_generator_config_is_used_as_is(self, registry: GeneratorRegistry) -> None:
        config = GeneratorConfig(add_comments=True)

        assert registry.create_generator("typescript", config).config is config

    def test_bad_config_file(self, registry: GeneratorRegistry, tmp_path: Path) -> None:
        with pytest.raises(RegistryError, match="Failed to create"):
            registry.create_generator("csharp", tmp_path / "missing.json")

    def test_invalid_config_type(self, registry: GeneratorRegistry) -> None:
        with pytest.raises(RegistryError, match="Invalid config type"):
            registry.create_generator("csharp", 42)


class TestGlobalRegistry:
    def test_builtin_languages(self) -> None:
        assert list_supported_languages() == ["csharp", "typescript"]
        assert is_language_supported("c#")
        assert not is_language_supported("go")

    def test_get_generator(self) -> None:
        assert isinstance(get_generator("ts"), TypeScriptGenerator)

    def test_language_info(self) -> None:
        info = get_language_info("cs")

        assert info["name"] == "csharp"
        assert info["file_extension"] == ".cs"
        assert info["aliases"] == ["c#", "cs"]
        assert info["validator_count"] == 19
        assert info["type_map"]["date"] == "DateTime"

    def test_all_language_info(self) -> None:
        assert set(list_all_language_info()) == {"csharp", "typescript"}
