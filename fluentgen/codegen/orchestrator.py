"""
Generation orchestrator.

Drives a run: loads each definition, validates it, renders every selected
language in memory and only then hands the texts to the file writer. A
failing definition therefore produces no output in any language; files
written for earlier definitions are kept.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Union

from ..logging_config import get_logger
from ..utils import (
    JSONLoaderError,
    discover_definition_files,
    load_json,
    parse_definition,
)
from ..writer import FileWriter
from .core.errors import DefinitionError
from .core.generator import CodeGenerator, generate_code
from .core.schema import ValidationDefinition

logger = get_logger(__name__)


class GenerationAbortedError(Exception):
    """Raised when a run stops at a failing definition."""

    def __init__(self, source: str, cause: Exception):
        self.source = source
        self.cause = cause
        super().__init__(f"Generation aborted at {source}: {cause}")


@dataclass
class GeneratedFile:
    """One rendered validator."""

    language: str
    entity: str
    file_name: str
    code: str
    source: str
    path: Optional[Path] = None
    warnings: List[str] = field(default_factory=list)


@dataclass
class GenerationReport:
    """Outcome of a run."""

    sources: List[str] = field(default_factory=list)
    files: List[GeneratedFile] = field(default_factory=list)

    @property
    def definition_count(self) -> int:
        return len(self.sources)

    @property
    def warnings(self) -> List[str]:
        return [warning for item in self.files for warning in item.warnings]

    def files_for(self, language: str) -> List[GeneratedFile]:
        return [item for item in self.files if item.language == language]


class GenerationOrchestrator:
    """Loads definitions and renders them with a set of generators."""

    def __init__(
        self,
        generators: Iterable[CodeGenerator],
        output_dirs: Optional[Dict[str, Union[str, Path]]] = None,
        namespace_override: Optional[str] = None,
        writer: Optional[FileWriter] = None,
        dry_run: bool = False,
        on_progress: Optional[Callable[[str], None]] = None,
    ):
        """
        Initialize the orchestrator.

        Args:
            generators: One generator per target language
            output_dirs: Output directory per language name; required unless
                dry_run is set
            namespace_override: Namespace replacing every definition's own
            writer: File writer (a new FileWriter by default)
            dry_run: Render without writing any files
            on_progress: Called with a short description of each step
        """
        self.generators = list(generators)
        self.output_dirs = {
            language: Path(directory)
            for language, directory in (output_dirs or {}).items()
        }
        self.namespace_override = namespace_override
        self.writer = writer or FileWriter()
        self.dry_run = dry_run
        self.on_progress = on_progress

        if not dry_run:
            missing = [
                generator.language_name
                for generator in self.generators
                if generator.language_name not in self.output_dirs
            ]
            if missing:
                raise ValueError(f"No output directory for: {', '.join(missing)}")

    def _progress(self, message: str):
        if self.on_progress:
            self.on_progress(message)

    # Loading

    def load_data(self, data, source: str) -> ValidationDefinition:
        """Validate already-parsed JSON, wrapping failures."""
        try:
            return parse_definition(data, source, self.namespace_override)
        except DefinitionError as e:
            raise GenerationAbortedError(source, e) from e

    def load(
        self, file_path: Union[str, Path, None] = None, url: Optional[str] = None
    ) -> tuple[str, ValidationDefinition]:
        """
        Load and validate one definition from a file or URL.

        Returns:
            Tuple of (source description, definition)

        Raises:
            GenerationAbortedError: If loading or validation fails
        """
        source = str(file_path) if file_path else str(url)
        self._progress(f"Parsing {Path(source).name if file_path else source}")

        try:
            source, data = load_json(file_path=file_path, url=url)
        except (FileNotFoundError, JSONLoaderError) as e:
            raise GenerationAbortedError(source, e) from e

        definition = self.load_data(data, source)
        logger.info(f"Parsed {definition.entity_name} from {source}")
        return source, definition

    # Rendering

    def render(
        self, definition: ValidationDefinition, source: str
    ) -> List[GeneratedFile]:
        """
        Render a definition with every generator, in memory.

        Raises:
            GenerationAbortedError: If any generator fails
        """
        rendered = []

        for generator in self.generators:
            self._progress(
                f"Generating {generator.language_name} {definition.validator_class_name}"
            )
            result = generate_code(generator, definition)

            if not result.success:
                cause = result.exception or RuntimeError(result.error_message)
                raise GenerationAbortedError(source, cause) from cause

            for warning in result.warnings:
                logger.warning(warning)

            rendered.append(
                GeneratedFile(
                    language=generator.language_name,
                    entity=definition.entity_name,
                    file_name=result.metadata["file_name"],
                    code=result.code,
                    source=source,
                    warnings=result.warnings,
                )
            )

        return rendered

    def write(self, rendered: List[GeneratedFile]) -> List[GeneratedFile]:
        """
        Write rendered files to their language's output directory.

        If any write fails, files already written in this call are removed
        before the error propagates.

        Raises:
            GenerationAbortedError: If a file cannot be written
        """
        if self.dry_run:
            return rendered

        written: List[Path] = []
        try:
            for item in rendered:
                item.path = self.writer.write_file(
                    self.output_dirs[item.language], item.file_name, item.code
                )
                written.append(item.path)
        except OSError as e:
            for path in written:
                logger.warning(f"Removing partial output {path}")
                path.unlink(missing_ok=True)
                if path in self.writer.written:
                    self.writer.written.remove(path)
            for item in rendered:
                item.path = None
            source = rendered[0].source if rendered else "output"
            raise GenerationAbortedError(source, e) from e
        return rendered

    # Runs

    def process_definition(
        self, definition: ValidationDefinition, source: str, report: GenerationReport
    ):
        """Render and write one validated definition into a report."""
        rendered = self.render(definition, source)
        report.files.extend(self.write(rendered))
        report.sources.append(source)

    def run_files(self, paths: Iterable[Union[str, Path]]) -> GenerationReport:
        """
        Process definition files in the given order.

        Stops at the first failing file.

        Raises:
            GenerationAbortedError: If a file fails to load or render
        """
        report = GenerationReport()

        for path in paths:
            source, definition = self.load(file_path=path)
            self.process_definition(definition, source, report)

        logger.info(
            f"Generated {len(report.files)} file(s) "
            f"from {report.definition_count} definition(s)"
        )
        return report

    def run_directory(self, input_dir: Union[str, Path]) -> GenerationReport:
        """
        Process every definition file of a directory, in file-name order.

        Raises:
            GenerationAbortedError: If the directory is missing or a file fails
        """
        try:
            paths = discover_definition_files(input_dir)
        except FileNotFoundError as e:
            raise GenerationAbortedError(str(input_dir), e) from e

        return self.run_files(paths)

    def run_url(self, url: str) -> GenerationReport:
        """Process a single definition fetched from a URL."""
        report = GenerationReport()
        source, definition = self.load(url=url)
        self.process_definition(definition, source, report)
        return report
