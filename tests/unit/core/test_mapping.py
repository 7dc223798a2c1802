"""Validator mapping table tests for both targets."""

import pytest

from fluentgen.codegen.core.errors import (
    InvalidParameterError,
    MissingParameterError,
    UnsupportedValidatorError,
)
from fluentgen.codegen.core.mapping import (
    SHAPE_PARAMETERS,
    VALIDATOR_SHAPES,
    escape_string,
    format_number,
)
from fluentgen.codegen.core.schema import Parameter, ValidatorKind
from fluentgen.codegen.languages.csharp import CSharpMappingTable
from fluentgen.codegen.languages.typescript import TypeScriptMappingTable


@pytest.fixture
def csharp_table() -> CSharpMappingTable:
    return CSharpMappingTable()


@pytest.fixture
def typescript_table() -> TypeScriptMappingTable:
    return TypeScriptMappingTable()


SAMPLE_PARAMETERS = {
    "value": 5,
    "length": 10,
    "min": 1,
    "max": 9,
    "pattern": "^a$",
}


def _parameters_for(kind: ValidatorKind) -> dict:
    return {name: SAMPLE_PARAMETERS[name] for name in SHAPE_PARAMETERS[VALIDATOR_SHAPES[kind]]}


class TestParity:
    def test_every_kind_has_a_shape(self) -> None:
        assert set(VALIDATOR_SHAPES) == set(ValidatorKind)

    def test_both_tables_support_the_same_kinds(self, csharp_table, typescript_table) -> None:
        assert csharp_table.supported_kinds() == typescript_table.supported_kinds()
        assert csharp_table.supported_kinds() == frozenset(ValidatorKind)

    @pytest.mark.parametrize("kind", list(ValidatorKind))
    def test_every_kind_renders_in_both_tables(
        self, kind: ValidatorKind, csharp_table, typescript_table
    ) -> None:
        parameters = _parameters_for(kind)

        assert csharp_table.render(kind.value, parameters)
        assert typescript_table.render(kind.value, parameters)


class TestCSharpTable:
    @pytest.mark.parametrize(
        "tag, parameters, expected",
        [
            ("not-null", None, "NotNull()"),
            ("NotEmpty", {}, "NotEmpty()"),
            ("email-format", None, "EmailAddress()"),
            ("credit-card-like", None, "CreditCard()"),
            ("enum-membership", None, "IsInEnum()"),
            ("null", None, "Null()"),
            ("equal", {"value": "admin"}, 'Equal("admin")'),
            ("not-equal", {"value": True}, "NotEqual(true)"),
            ("length", {"min": 2, "max": 100}, "Length(2, 100)"),
            ("min-length", {"length": 3}, "MinimumLength(3)"),
            ("max-length", {"length": 50}, "MaximumLength(50)"),
            ("less-or-equal", {"value": 10.5}, "LessThanOrEqualTo(10.5)"),
            ("greater-than", {"value": 0}, "GreaterThan(0)"),
            ("exclusive-range", {"min": 0, "max": 1}, "ExclusiveBetween(0, 1)"),
            ("inclusive-range", {"min": 18, "max": 120}, "InclusiveBetween(18, 120)"),
        ],
    )
    def test_renders_call_fragments(self, csharp_table, tag, parameters, expected) -> None:
        assert csharp_table.render(tag, parameters) == expected

    def test_pattern_doubles_backslashes_and_escapes_quotes(self, csharp_table) -> None:
        fragment = csharp_table.render("pattern-match", {"pattern": '^[A-Z]{3}-\\d{4}"$'})

        assert fragment == 'Matches("^[A-Z]{3}-\\\\d{4}\\"$")'


class TestTypeScriptTable:
    @pytest.mark.parametrize(
        "tag, parameters, expected",
        [
            ("not-null", None, "notNull()"),
            ("not-empty", None, "notEmpty()"),
            ("null", None, "null()"),
            ("credit-card-like", None, "creditCard()"),
            ("enum-membership", None, "isInEnum()"),
            ("equal", {"value": "it's"}, "equal('it\\'s')"),
            ("length", {"min": 5, "max": 200}, "length(5, 200)"),
            ("min-length", {"length": 3}, "minLength(3)"),
            ("max-length", {"length": 100}, "maxLength(100)"),
            ("greater-or-equal", {"value": False}, "greaterThanOrEqualTo(false)"),
            ("inclusive-range", {"min": 18, "max": 120}, "inclusiveBetween(18, 120)"),
        ],
    )
    def test_renders_call_fragments(self, typescript_table, tag, parameters, expected) -> None:
        assert typescript_table.render(tag, parameters) == expected

    def test_pattern_only_doubles_backslashes(self, typescript_table) -> None:
        fragment = typescript_table.render("pattern-match", {"pattern": "^\\d+'x$"})

        assert fragment == "matches(new RegExp('^\\\\d+'x$'))"


class TestSkuPattern:
    PATTERN = "^[A-Z]{3}-\\d{4}$"

    def test_csharp(self, csharp_table) -> None:
        fragment = csharp_table.render("Matches", {"pattern": self.PATTERN})
        assert fragment == 'Matches("^[A-Z]{3}-\\\\d{4}$")'

    def test_typescript(self, typescript_table) -> None:
        fragment = typescript_table.render("Matches", {"pattern": self.PATTERN})
        assert fragment == "matches(new RegExp('^[A-Z]{3}-\\\\d{4}$'))"


class TestErrors:
    @pytest.mark.parametrize("table_class", [CSharpMappingTable, TypeScriptMappingTable])
    def test_unknown_kind(self, table_class) -> None:
        with pytest.raises(UnsupportedValidatorError) as exc_info:
            table_class().render("frobnicate", {})

        assert exc_info.value.kind == "frobnicate"
        assert "frobnicate" in str(exc_info.value)

    @pytest.mark.parametrize("table_class", [CSharpMappingTable, TypeScriptMappingTable])
    def test_length_without_bounds_reports_min_first(self, table_class) -> None:
        with pytest.raises(MissingParameterError) as exc_info:
            table_class().render("length", {})

        assert exc_info.value.kind == "length"
        assert exc_info.value.parameter == "min"

    def test_missing_max_is_reported(self, csharp_table) -> None:
        with pytest.raises(MissingParameterError) as exc_info:
            csharp_table.render("inclusive-range", {"min": 1})

        assert exc_info.value.parameter == "max"

    def test_null_parameter_counts_as_missing(self, csharp_table) -> None:
        with pytest.raises(MissingParameterError):
            csharp_table.render("equal", {"value": None})

    def test_pattern_must_be_a_string(self, typescript_table) -> None:
        with pytest.raises(InvalidParameterError) as exc_info:
            typescript_table.render("Matches", {"pattern": 42})

        assert exc_info.value.parameter == "pattern"

    def test_non_scalar_raw_parameter_is_invalid(self, csharp_table) -> None:
        with pytest.raises(InvalidParameterError):
            csharp_table.render("Equal", {"value": [1, 2]})

    def test_accepts_tagged_parameters(self, csharp_table) -> None:
        assert csharp_table.render("Equal", {"value": Parameter.of(3)}) == "Equal(3)"


class TestLiterals:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (18, "18"),
            (-4, "-4"),
            (120.0, "120"),
            (0.5, "0.5"),
            (9999.99, "9999.99"),
            (1e-7, "0.0000001"),
            (1.5e20, "150000000000000000000"),
        ],
    )
    def test_numbers_have_no_exponent(self, value, expected: str) -> None:
        assert format_number(value) == expected

    def test_escape_order_backslash_first(self) -> None:
        assert escape_string('a\\"b', '"') == 'a\\\\\\"b'

    def test_escapes_control_characters(self) -> None:
        assert escape_string("line1\nline2\r\tend", "'") == "line1\\nline2\\r\\tend"

    def test_other_quote_is_left_alone(self) -> None:
        assert escape_string("it's \"fine\"", "'") == "it\\'s \"fine\""
