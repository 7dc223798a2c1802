"""Shared test fixtures."""

import json
from pathlib import Path

import pytest

from fluentgen.codegen.core.config import load_config
from fluentgen.codegen.core.schema import ValidationDefinition, definition_from_dict
from fluentgen.codegen.languages.csharp import CSharpGenerator
from fluentgen.codegen.languages.typescript import TypeScriptGenerator


@pytest.fixture
def user_age_data() -> dict:
    """Single property, single rule with a message."""
    return {
        "entity": "User",
        "namespace": "App",
        "properties": [
            {
                "name": "Age",
                "type": "number",
                "rules": [
                    {
                        "validatorKind": "inclusive-range",
                        "parameters": {"min": 18, "max": 120},
                        "message": "Age must be between 18 and 120",
                    }
                ],
            }
        ],
    }


@pytest.fixture
def user_age_definition(user_age_data: dict) -> ValidationDefinition:
    return definition_from_dict(user_age_data)


@pytest.fixture
def product_data() -> dict:
    """Several properties and types, canonical validator tags."""
    return {
        "entity": "Product",
        "namespace": "Shop.Models",
        "properties": [
            {
                "name": "Name",
                "type": "string",
                "rules": [
                    {"validator": "NotEmpty", "message": "Name is required"},
                    {"validator": "MaxLength", "parameters": {"length": 100}},
                ],
            },
            {
                "name": "Sku",
                "type": "string",
                "rules": [
                    {
                        "validator": "Matches",
                        "parameters": {"pattern": "^[A-Z]{3}-\\d{4}$"},
                        "message": "SKU must look like ABC-1234",
                    }
                ],
            },
            {
                "name": "Price",
                "type": "number",
                "rules": [
                    {"validator": "GreaterThan", "parameters": {"value": 0}},
                    {"validator": "LessThanOrEqualTo", "parameters": {"value": 9999.99}},
                ],
            },
            {
                "name": "InStock",
                "type": "boolean",
                "rules": [{"validator": "NotNull"}],
            },
            {
                "name": "ReleasedOn",
                "type": "date",
                "rules": [{"validator": "NotEmpty"}],
            },
        ],
    }


@pytest.fixture
def product_definition(product_data: dict) -> ValidationDefinition:
    return definition_from_dict(product_data)


@pytest.fixture
def csharp_generator() -> CSharpGenerator:
    return CSharpGenerator(load_config("csharp"))


@pytest.fixture
def typescript_generator() -> TypeScriptGenerator:
    return TypeScriptGenerator(load_config("typescript"))


def _write_definition(directory: Path, file_name: str, data) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / file_name
    text = data if isinstance(data, str) else json.dumps(data, indent=2)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def rules_dir(tmp_path: Path, user_age_data: dict, product_data: dict) -> Path:
    """Input directory holding two valid definitions."""
    directory = tmp_path / "rules"
    _write_definition(directory, "product.json", product_data)
    _write_definition(directory, "user.json", user_age_data)
    return directory


@pytest.fixture
def write_definition():
    """Write a definition (or raw text) into a directory."""
    return _write_definition
