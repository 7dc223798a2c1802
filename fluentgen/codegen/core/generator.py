"""
Validator generator base class.

A language subclass supplies its mapping table, naming policy, type map and
accessor syntax; the base class turns a definition into a template context
and renders the language's validator template.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, List, Any, Optional
from pathlib import Path

from ...logging_config import get_logger
from .config import GeneratorConfig
from .errors import GeneratorError
from .mapping import ValidatorMappingTable
from .naming import IdentifierPolicy
from .schema import PropertyDefinition, PropertyType, ValidationDefinition
from .templates import TemplateEngine, TemplateError, create_template_engine

logger = get_logger(__name__)


@dataclass
class RuleChain:
    """Rendered rule chain for one property."""

    property_name: str
    accessor: str
    calls: List[str] = field(default_factory=list)


class CodeGenerator(ABC):
    """Renders validator source for one target language."""

    #: Template rendering a complete validator file
    template_name: str = ""

    #: Method attaching a custom message to the preceding rule
    message_method: str = ""

    statement_terminator: str = ";"

    def __init__(self, config: Optional[GeneratorConfig] = None):
        self.config = config or GeneratorConfig()
        self._template_engine = None
        self._setup_templates()

    def _setup_templates(self):
        """Create the template engine over the language's template directory."""
        template_dir = self.get_template_directory()
        if template_dir:
            self._template_engine = create_template_engine(template_dir)
        else:
            self._template_engine = create_template_engine()

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'csharp')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.cs')."""
        pass

    @property
    @abstractmethod
    def mapping_table(self) -> ValidatorMappingTable:
        """Return the validator mapping table of the target API."""
        pass

    @property
    @abstractmethod
    def naming(self) -> IdentifierPolicy:
        """Return the identifier policy applied to property names."""
        pass

    @property
    @abstractmethod
    def type_map(self) -> Dict[PropertyType, str]:
        """Return the target type for every PropertyType (UNKNOWN is the fallback)."""
        pass

    @abstractmethod
    def render_accessor(self, identifier: str) -> str:
        """Render the call selecting a property, e.g. RuleFor(x => x.Age)."""
        pass

    def get_template_directory(self) -> Optional[Path]:
        """
        Directory holding this language's validator template.

        None leaves the engine without templates, so rendering fails with
        TemplateError.
        """
        return None

    @property
    def template_engine(self) -> TemplateEngine:
        """Template engine, created on first use if needed."""
        if self._template_engine is None:
            self._setup_templates()
        return self._template_engine

    def generate(self, definition: ValidationDefinition) -> str:
        """
        Generate the validator source for one definition.

        Any mapping error aborts the whole definition; no partial text is
        returned.

        Args:
            definition: Validated definition

        Returns:
            Generated code as a string

        Raises:
            GeneratorError: If a rule cannot be rendered
            TemplateError: If the template is missing or fails
        """
        context = self.build_context(definition)
        return self.render_template(self.template_name, context)

    def build_context(self, definition: ValidationDefinition) -> Dict[str, Any]:
        """Build the template context for a definition."""
        return {
            "namespace": definition.namespace,
            "entity_name": definition.entity_name,
            "class_name": definition.validator_class_name,
            "header_comment": (
                self._header_comment(definition) if self.config.add_comments else None
            ),
            "model_fields": (
                self.build_model_fields(definition)
                if self.config.emit_model_type
                else []
            ),
            "chains": self.build_rule_chains(definition),
        }

    def build_model_fields(self, definition: ValidationDefinition) -> List[Dict[str, str]]:
        """List every property with its target name and type, rules or not."""
        return [
            {
                "name": self.naming.transform(prop.name),
                "type": self.map_property_type(prop),
            }
            for prop in definition.properties
        ]

    def map_property_type(self, prop: PropertyDefinition) -> str:
        """Map a property's source type to the target type."""
        override = self.config.type_overrides.get((prop.type or "").strip().lower())
        if override:
            return override
        return self.type_map[prop.property_type]

    def build_rule_chains(self, definition: ValidationDefinition) -> List[RuleChain]:
        """Render one rule chain per property that has rules, in declaration order."""
        chains = []

        for prop in definition.properties:
            if not prop.rules:
                continue

            calls = []
            for rule in prop.rules:
                fragment = self.mapping_table.render(rule.validator_kind, rule.parameters)
                logger.debug(
                    "%s: %s.%s -> %s",
                    self.language_name,
                    definition.entity_name,
                    prop.name,
                    fragment,
                )
                calls.append(f".{fragment}")

                if rule.has_message:
                    calls.append(f".{self.render_message_call(rule.message)}")

            calls[-1] += self.statement_terminator

            chains.append(
                RuleChain(
                    property_name=prop.name,
                    accessor=self.render_accessor(self.naming.transform(prop.name)),
                    calls=calls,
                )
            )

        return chains

    def render_message_call(self, message: str) -> str:
        """Render the call attaching a custom message."""
        return f"{self.message_method}({self.mapping_table.quote(message)})"

    def _header_comment(self, definition: ValidationDefinition) -> str:
        return (
            "<auto-generated>\n"
            f"Generated by fluentgen from the {definition.entity_name} rule definition.\n"
            "Changes to this file will be lost when the code is regenerated.\n"
            "</auto-generated>"
        )

    def get_output_filename(self, definition: ValidationDefinition) -> str:
        """Return the file name for a definition's validator."""
        return f"{definition.validator_class_name}{self.file_extension}"

    def validate_definition(self, definition: ValidationDefinition) -> List[str]:
        """
        Check a definition for target-specific issues.

        Structural problems are the schema validator's job; these are
        non-fatal warnings about how the definition will be rendered.

        Args:
            definition: Definition to check

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []
        entity = definition.entity_name

        for prop in definition.properties:
            has_override = (prop.type or "").strip().lower() in self.config.type_overrides
            if prop.property_type == PropertyType.UNKNOWN and not has_override:
                warnings.append(
                    f"Property {entity}.{prop.name} has unrecognized type "
                    f"'{prop.type}' - using {self.type_map[PropertyType.UNKNOWN]}"
                )

            if self.naming.is_reserved(prop.name):
                warnings.append(
                    f"Property {entity}.{prop.name} maps to reserved "
                    f"{self.language_name} identifier '{self.naming.transform(prop.name)}'"
                )

            for j, rule in enumerate(prop.rules):
                if rule.when:
                    warnings.append(
                        f"Rule {entity}.{prop.name}[{j}] has a 'when' condition, "
                        f"which is not supported and is ignored"
                    )

        return warnings

    def format_code(self, code: str) -> str:
        """
        Apply formatting to generated code.

        Args:
            code: Raw generated code

        Returns:
            Formatted code ending with exactly one line ending
        """
        lines = code.split("\n")
        formatted_lines = []
        blank_count = 0

        for line in lines:
            stripped = line.rstrip()
            if not stripped:
                blank_count += 1
                if blank_count <= 2:
                    formatted_lines.append("")
            else:
                blank_count = 0
                formatted_lines.append(stripped)

        while formatted_lines and not formatted_lines[-1]:
            formatted_lines.pop()

        line_ending = self.config.line_ending
        return line_ending.join(formatted_lines) + line_ending

    # Template helper methods

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render one of this language's templates.

        Raises:
            TemplateError: If the template is missing or fails
        """
        return self.template_engine.render_template(template_name, context)


class GenerationResult:
    """Outcome of rendering one definition for one language."""

    def __init__(
        self, code: str, warnings: List[str] = None, metadata: Dict[str, Any] = None
    ):
        self.code = code
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message = None
        self.exception = None

    @classmethod
    def error(cls, message: str, exception: Exception = None) -> "GenerationResult":
        """Failed result carrying the message and the causing exception."""
        result = cls(code="")
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def generate_code(
    generator: CodeGenerator, definition: ValidationDefinition
) -> GenerationResult:
    """
    Render a definition and package the outcome.

    Generator and template errors are turned into a failed result rather
    than raised; the text of a failed definition is discarded.
    """
    try:
        warnings = generator.validate_definition(definition)

        code = generator.generate(definition)
        formatted_code = generator.format_code(code)

        metadata = {
            "language": generator.language_name,
            "file_extension": generator.file_extension,
            "entity": definition.entity_name,
            "file_name": generator.get_output_filename(definition),
            "property_count": len(definition.properties),
            "rule_count": definition.rule_count,
        }

        return GenerationResult(formatted_code, warnings, metadata)

    except (GeneratorError, TemplateError) as e:
        logger.error(
            "%s generation failed for %s: %s",
            generator.language_name,
            definition.entity_name,
            e,
        )
        return GenerationResult.error(f"Code generation failed: {str(e)}", exception=e)
