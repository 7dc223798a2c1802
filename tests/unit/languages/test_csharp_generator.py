"""C# generator tests."""

import pytest

from fluentgen.codegen.core.config import load_config
from fluentgen.codegen.core.errors import (
    MissingParameterError,
    UnsupportedValidatorError,
)
from fluentgen.codegen.core.generator import generate_code
from fluentgen.codegen.core.schema import definition_from_dict
from fluentgen.codegen.languages.csharp import CSharpGenerator, create_csharp_generator


USER_VALIDATOR_CS = """\
using FluentValidation;

namespace App
{
    public class UserValidator : AbstractValidator<User>
    {
        public UserValidator()
        {

            RuleFor(x => x.Age)
                .InclusiveBetween(18, 120)
                .WithMessage("Age must be between 18 and 120");
        }
    }
}
"""


def _single_rule(rule: dict, prop_type: str = "string") -> dict:
    return {
        "entity": "Thing",
        "namespace": "App",
        "properties": [{"name": "Value", "type": prop_type, "rules": [rule]}],
    }


class TestUserAgeExample:
    def test_exact_output(self, csharp_generator: CSharpGenerator, user_age_definition) -> None:
        result = generate_code(csharp_generator, user_age_definition)

        assert result.success
        assert result.code == USER_VALIDATOR_CS

    def test_metadata(self, csharp_generator: CSharpGenerator, user_age_definition) -> None:
        result = generate_code(csharp_generator, user_age_definition)

        assert result.metadata["file_name"] == "UserValidator.cs"
        assert result.metadata["language"] == "csharp"
        assert result.metadata["rule_count"] == 1
        assert result.warnings == []

    def test_regeneration_is_byte_identical(
        self, csharp_generator: CSharpGenerator, user_age_definition
    ) -> None:
        first = generate_code(csharp_generator, user_age_definition).code
        second = generate_code(CSharpGenerator(load_config("csharp")), user_age_definition).code

        assert first == second


class TestRuleChains:
    def test_rules_and_messages_keep_declared_order(
        self, csharp_generator: CSharpGenerator, product_definition
    ) -> None:
        code = generate_code(csharp_generator, product_definition).code

        expected_chain = (
            "            RuleFor(x => x.Name)\n"
            "                .NotEmpty()\n"
            '                .WithMessage("Name is required")\n'
            "                .MaximumLength(100);\n"
        )
        assert expected_chain in code

    def test_properties_are_emitted_in_order(
        self, csharp_generator: CSharpGenerator, product_definition
    ) -> None:
        code = generate_code(csharp_generator, product_definition).code

        positions = [
            code.index(f"RuleFor(x => x.{name})")
            for name in ("Name", "Sku", "Price", "InStock", "ReleasedOn")
        ]
        assert positions == sorted(positions)

    def test_sku_pattern(self, csharp_generator: CSharpGenerator, product_definition) -> None:
        code = generate_code(csharp_generator, product_definition).code

        assert '.Matches("^[A-Z]{3}-\\\\d{4}$")' in code

    def test_numbers(self, csharp_generator: CSharpGenerator, product_definition) -> None:
        code = generate_code(csharp_generator, product_definition).code

        assert ".GreaterThan(0)\n" in code
        assert ".LessThanOrEqualTo(9999.99);" in code

    def test_message_is_escaped(self, csharp_generator: CSharpGenerator) -> None:
        definition = definition_from_dict(
            _single_rule({"validator": "NotEmpty", "message": 'Say "hi"\n\tC:\\path'})
        )

        code = generate_code(csharp_generator, definition).code

        assert '.WithMessage("Say \\"hi\\"\\n\\tC:\\\\path");' in code

    def test_blank_message_is_not_emitted(self, csharp_generator: CSharpGenerator) -> None:
        definition = definition_from_dict(_single_rule({"validator": "NotEmpty", "message": "  "}))

        code = generate_code(csharp_generator, definition).code

        assert "WithMessage" not in code
        assert ".NotEmpty();" in code

    def test_property_without_rules_is_skipped(self, csharp_generator: CSharpGenerator) -> None:
        definition = definition_from_dict(
            {
                "entity": "Thing",
                "namespace": "App",
                "properties": [
                    {"name": "Notes", "type": "string", "rules": []},
                    {"name": "Id", "type": "number", "rules": [{"validator": "NotNull"}]},
                ],
            }
        )

        code = generate_code(csharp_generator, definition).code

        assert "x.Notes" not in code
        assert "RuleFor(x => x.Id)" in code


class TestModelClass:
    def test_not_emitted_by_default(self, csharp_generator: CSharpGenerator, product_definition) -> None:
        code = generate_code(csharp_generator, product_definition).code

        assert "public class Product\n" not in code

    def test_emitted_when_enabled(self, product_definition) -> None:
        generator = create_csharp_generator({"emit_model_type": True})

        code = generate_code(generator, product_definition).code

        assert (
            "    public class Product\n"
            "    {\n"
            "        public string Name { get; set; }\n"
            "        public string Sku { get; set; }\n"
            "        public decimal Price { get; set; }\n"
            "        public bool InStock { get; set; }\n"
            "        public DateTime ReleasedOn { get; set; }\n"
            "    }\n"
            "\n"
            "    public class ProductValidator : AbstractValidator<Product>\n"
        ) in code

    def test_lists_properties_without_rules(self) -> None:
        generator = create_csharp_generator({"emit_model_type": True})
        definition = definition_from_dict(
            {
                "entity": "Thing",
                "namespace": "App",
                "properties": [
                    {"name": "Notes", "type": "guid", "rules": []},
                    {"name": "Id", "type": "number", "rules": [{"validator": "NotNull"}]},
                ],
            }
        )

        code = generate_code(generator, definition).code

        assert "public object Notes { get; set; }" in code

    def test_number_type_and_overrides(self) -> None:
        generator = create_csharp_generator(
            {"emit_model_type": True, "number_type": "int", "type_overrides": {"guid": "Guid"}}
        )
        definition = definition_from_dict(
            {
                "entity": "Thing",
                "namespace": "App",
                "properties": [
                    {"name": "Count", "type": "number", "rules": [{"validator": "NotNull"}]},
                    {"name": "Key", "type": "Guid", "rules": [{"validator": "NotEmpty"}]},
                ],
            }
        )

        result = generate_code(generator, definition)

        assert "public int Count { get; set; }" in result.code
        assert "public Guid Key { get; set; }" in result.code
        assert result.warnings == []


class TestFormatting:
    def test_header_comment(self, user_age_definition) -> None:
        generator = create_csharp_generator({"add_comments": True})

        code = generate_code(generator, user_age_definition).code

        assert code.startswith("// <auto-generated>\n")
        assert "\n// </auto-generated>\n\nusing FluentValidation;\n" in code

    def test_crlf_line_endings(self, user_age_definition) -> None:
        generator = create_csharp_generator({"line_ending": "\r\n"})

        code = generate_code(generator, user_age_definition).code

        assert code == USER_VALIDATOR_CS.replace("\n", "\r\n")


class TestFailures:
    def test_unknown_validator_fails_the_definition(self, csharp_generator: CSharpGenerator) -> None:
        definition = definition_from_dict(_single_rule({"validator": "frobnicate"}))

        result = generate_code(csharp_generator, definition)

        assert not result.success
        assert result.code == ""
        assert isinstance(result.exception, UnsupportedValidatorError)
        assert result.exception.kind == "frobnicate"

    def test_length_without_bounds(self, csharp_generator: CSharpGenerator) -> None:
        definition = definition_from_dict(_single_rule({"validatorKind": "length"}))

        with pytest.raises(MissingParameterError) as exc_info:
            csharp_generator.generate(definition)

        assert (exc_info.value.kind, exc_info.value.parameter) == ("length", "min")


class TestWarnings:
    def test_reserved_word_and_when_clause(self, csharp_generator: CSharpGenerator) -> None:
        definition = definition_from_dict(
            {
                "entity": "Thing",
                "namespace": "App",
                "properties": [
                    {
                        "name": "event",
                        "type": "string",
                        "rules": [{"validator": "NotEmpty", "when": "x => x.Enabled"}],
                    }
                ],
            }
        )

        warnings = csharp_generator.validate_definition(definition)

        assert warnings == [
            "Property Thing.event maps to reserved csharp identifier 'event'",
            "Rule Thing.event[0] has a 'when' condition, which is not supported and is ignored",
        ]

    def test_unknown_type(self, csharp_generator: CSharpGenerator) -> None:
        definition = definition_from_dict(_single_rule({"validator": "NotNull"}, "money"))

        warnings = csharp_generator.validate_definition(definition)

        assert warnings == ["Property Thing.Value has unrecognized type 'money' - using object"]
