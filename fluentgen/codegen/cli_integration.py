"""
CLI integration for validator generation.

Provides the ``generate`` subcommand of the command-line interface.
"""

import argparse
from pathlib import Path
from typing import Dict, List

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.syntax import Syntax
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich import box
from rich.markup import escape

from . import (
    list_supported_languages,
    is_language_supported,
    get_generator,
    get_language_info,
    list_all_language_info,
    GeneratorConfig,
    ConfigError,
    RegistryError,
    load_config,
)
from .core.config import get_config_manager
from .registry import get_registry
from .core.generator import CodeGenerator
from .orchestrator import GenerationAbortedError, GenerationOrchestrator, GenerationReport
from ..logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_INPUT_DIR = "./rules"
DEFAULT_OUTPUT_DIR = "./generated"


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


# Initialize rich console
console = Console()


def create_generate_subparser(subparsers) -> argparse.ArgumentParser:
    """
    Create the ``generate`` subcommand parser.

    For use with: fluentgen generate [options]

    Args:
        subparsers: Subparser group from main parser

    Returns:
        Configured subparser for the generate command
    """
    parser = subparsers.add_parser(
        "generate",
        help="Generate validator classes from JSON rule definitions",
        description="Generate FluentValidation (C#) and fluentvalidation-ts "
        "(TypeScript) validators from JSON rule definitions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  fluentgen generate -i ./rules -o ./generated
  fluentgen generate --file rules/user.json -l ts --dry-run
  fluentgen generate -i ./rules -n MyApp.Validation --output-csharp ./Validators
  fluentgen generate --list-languages
        """.strip(),
    )

    # Input options (mutually exclusive)
    input_group = parser.add_mutually_exclusive_group(required=False)
    input_group.add_argument(
        "--input",
        "-i",
        metavar="DIR",
        help=f"Directory of JSON rule definitions (default: {DEFAULT_INPUT_DIR})",
    )
    input_group.add_argument("--file", metavar="FILE", help="Single rule definition file")
    input_group.add_argument("--url", help="URL to fetch a rule definition from")

    # Output options
    parser.add_argument(
        "--output",
        "-o",
        metavar="DIR",
        default=DEFAULT_OUTPUT_DIR,
        help="Output root; each language writes to <output>/<language> "
        f"(default: {DEFAULT_OUTPUT_DIR})",
    )
    parser.add_argument(
        "--output-csharp", metavar="DIR", help="Output directory for C# validators"
    )
    parser.add_argument(
        "--output-typescript",
        metavar="DIR",
        help="Output directory for TypeScript validators",
    )

    # Core generation options
    parser.add_argument(
        "--language",
        "-l",
        action="append",
        metavar="LANGUAGE",
        help="Target language (repeatable; default: all supported)",
    )
    parser.add_argument(
        "--namespace",
        "-n",
        help="Override the namespace of every definition",
    )
    parser.add_argument("--config", metavar="FILE", help="Configuration file path (JSON)")

    model_group = parser.add_mutually_exclusive_group()
    model_group.add_argument(
        "--model",
        dest="model",
        action="store_true",
        default=None,
        help="Emit the entity type/class alongside the validator",
    )
    model_group.add_argument(
        "--no-model",
        dest="model",
        action="store_false",
        help="Don't emit the entity type/class",
    )
    parser.add_argument(
        "--add-comments",
        action="store_true",
        help="Prefix generated files with an auto-generated notice",
    )

    # Run modes
    mode_group = parser.add_mutually_exclusive_group()
    mode_group.add_argument(
        "--check",
        action="store_true",
        help="Validate and render definitions without writing files",
    )
    mode_group.add_argument(
        "--dry-run",
        action="store_true",
        help="Print generated code instead of writing files",
    )

    # Informational commands
    info_group = parser.add_argument_group("information")
    info_group.add_argument(
        "--list-languages",
        action="store_true",
        help="List supported languages and exit",
    )
    info_group.add_argument(
        "--language-info",
        metavar="LANGUAGE",
        help="Show detailed info about a language and exit",
    )

    parser.set_defaults(func=handle_generate_command)
    return parser


def handle_generate_command(args: argparse.Namespace) -> int:
    """
    Handle the generate subcommand.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code (0 for success, 1 for any failure)
    """
    try:
        if args.list_languages:
            return _list_languages()

        if args.language_info:
            return _show_language_info(args.language_info)

        generators = _create_generators(args)
        dry_run = args.dry_run or args.check

        orchestrator = GenerationOrchestrator(
            generators,
            output_dirs=None if dry_run else _build_output_dirs(args, generators),
            namespace_override=args.namespace,
            dry_run=dry_run,
        )

        report = _run_with_progress(orchestrator, args)

        if args.check:
            _display_check(report)
        elif args.dry_run:
            _display_code(report)
        else:
            _display_summary(report)

        _display_warnings(report.warnings)
        return 0

    except GenerationAbortedError as e:
        logger.error(str(e))
        console.print(f"[red]✗ Error in {escape(e.source)}:[/red]")
        console.print(f"  {e.cause}", markup=False)
        return 1
    except (CLIError, RegistryError, ConfigError) as e:
        console.print(f"[red]✗ Error:[/red] {escape(str(e))}")
        return 1
    except OSError as e:
        console.print(f"[red]✗ Failed to write output:[/red] {e}")
        return 1


def _create_generators(args: argparse.Namespace) -> List[CodeGenerator]:
    """Create one configured generator per requested language."""
    languages = args.language or list_supported_languages()

    generators = []
    seen = set()
    for language in languages:
        if not _validate_language(language, silent=True):
            raise CLIError(
                f"Unsupported language '{language}'. "
                f"Supported languages: {', '.join(list_supported_languages())}"
            )

        config = _build_config(args, language)
        generator = get_generator(language, config)

        if generator.language_name in seen:
            continue
        seen.add(generator.language_name)

        for warning in get_config_manager().validate_config(
            config, generator.language_name
        ):
            console.print(f"[yellow]⚠️  {generator.language_name}: {warning}[/yellow]")

        generators.append(generator)

    return generators


def _build_config(args: argparse.Namespace, language: str) -> GeneratorConfig:
    """Build a language's configuration from defaults, file and CLI flags."""
    overrides = {}

    if args.model is not None:
        overrides["emit_model_type"] = args.model

    if args.add_comments:
        overrides["add_comments"] = True

    primary = get_registry().resolve_language(language)
    return load_config(primary, overrides, args.config)


def _build_output_dirs(
    args: argparse.Namespace, generators: List[CodeGenerator]
) -> Dict[str, Path]:
    """Resolve the output directory of each language."""
    output_dirs = {}
    for generator in generators:
        language = generator.language_name
        explicit = getattr(args, f"output_{language}", None)
        output_dirs[language] = (
            Path(explicit) if explicit else Path(args.output) / language
        )
    return output_dirs


def _run_with_progress(
    orchestrator: GenerationOrchestrator, args: argparse.Namespace
) -> GenerationReport:
    """Run the orchestrator on the selected input behind a spinner."""
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        task = progress.add_task("[cyan]Loading rule definitions...", total=None)
        orchestrator.on_progress = lambda message: progress.update(
            task, description=f"[cyan]{message}..."
        )

        if args.file:
            return orchestrator.run_files([args.file])
        if args.url:
            return orchestrator.run_url(args.url)
        return orchestrator.run_directory(args.input or DEFAULT_INPUT_DIR)


def _list_languages() -> int:
    """List supported languages with details."""
    language_info = list_all_language_info()

    table = Table(
        title="📋 Supported Languages", box=box.ROUNDED, title_style="bold cyan"
    )

    table.add_column("Language", style="bold green", no_wrap=True)
    table.add_column("Extension", style="cyan")
    table.add_column("Generator Class", style="dim")
    table.add_column("Aliases", style="blue")
    table.add_column("Validators", justify="right")

    for lang_name, info in sorted(language_info.items()):
        aliases = ", ".join(info["aliases"]) if info["aliases"] else "[dim]none[/dim]"
        table.add_row(
            f"🔧 {lang_name}",
            info["file_extension"],
            info["class"],
            aliases,
            str(info["validator_count"]),
        )

    console.print()
    console.print(table)
    console.print()

    console.print(
        Panel(
            "[bold]Usage:[/bold] fluentgen generate -i [dim]rules/[/dim] -l [cyan]LANGUAGE[/cyan]\n"
            "[bold]Info:[/bold] fluentgen generate --language-info [cyan]LANGUAGE[/cyan]",
            title="💡 Quick Start",
            border_style="blue",
        )
    )

    return 0


def _show_language_info(language: str) -> int:
    """Show detailed information about a specific language."""
    if not _validate_language(language, silent=True):
        console.print(f"[red]✗ Language '{language}' is not supported[/red]")
        console.print("[dim]Use --list-languages to see available options[/dim]")
        return 1

    info = get_language_info(language)

    info_text = f"""[bold]Language:[/bold] {info['name']}
[bold]File Extension:[/bold] {info['file_extension']}
[bold]Generator Class:[/bold] {info['class']}
[bold]Module:[/bold] {info['module']}
[bold]Validators:[/bold] {info['validator_count']}"""

    if info["aliases"]:
        info_text += f"\n[bold]Aliases:[/bold] {', '.join(info['aliases'])}"

    console.print()
    console.print(
        Panel(
            info_text,
            title=f"🔧 {info['name'].title()} Generator",
            border_style="green",
        )
    )

    config_table = Table(
        title="⚙️  Default Configuration",
        box=box.SIMPLE,
        show_header=True,
        header_style="bold cyan",
    )
    config_table.add_column("Setting", style="bold")
    config_table.add_column("Value", style="green")
    config_table.add_row("Emit Model Type", str(info["emit_model_type"]))
    for source_type, target_type in info["type_map"].items():
        config_table.add_row(f"Type: {source_type}", target_type)

    console.print()
    console.print(config_table)

    examples_text = f"""Generate from a rules directory:
[cyan]fluentgen generate -i rules -l {info['name']}[/cyan]

Preview a single file:
[cyan]fluentgen generate --file rules/user.json -l {info['name']} --dry-run[/cyan]"""

    console.print()
    console.print(Panel(examples_text, title="💡 Usage Examples", border_style="blue"))

    return 0


def _validate_language(language: str, silent: bool = False) -> bool:
    """Validate that a language (or alias) is supported."""
    if not is_language_supported(language):
        if not silent:
            supported = list_supported_languages()
            console.print(f"[red]✗ Unsupported language '{escape(language)}'[/red]")
            console.print(f"[dim]Supported languages: {', '.join(supported)}[/dim]")
        return False
    return True


def _display_summary(report: GenerationReport):
    """Show the files written by a run."""
    if not report.files:
        console.print("[yellow]⚠️  No validation definitions found[/yellow]")
        return

    table = Table(
        title="📊 Generated Validators",
        box=box.SIMPLE,
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("Entity", style="bold")
    table.add_column("Language", style="blue")
    table.add_column("File", style="green")

    for item in report.files:
        table.add_row(
            escape(item.entity), item.language, escape(str(item.path or item.file_name))
        )

    console.print()
    console.print(table)
    console.print(
        f"[green]✓[/green] Successfully generated {len(report.files)} validator(s) "
        f"from {report.definition_count} definition(s)"
    )


def _display_check(report: GenerationReport):
    """Show the definitions accepted by a check run."""
    if not report.sources:
        console.print("[yellow]⚠️  No validation definitions found[/yellow]")
        return

    for source in report.sources:
        console.print(f"[green]✓[/green] {escape(source)}")
    console.print(
        f"[green]✓[/green] {report.definition_count} definition(s) are valid"
    )


def _display_code(report: GenerationReport):
    """Print generated code with syntax highlighting."""
    if not report.files:
        console.print("[yellow]⚠️  No validation definitions found[/yellow]")
        return

    for item in report.files:
        console.print()
        console.print(
            Panel(
                Syntax(item.code, item.language, theme="monokai"),
                title=f"📄 {item.file_name}",
                border_style="green",
            )
        )


def _display_warnings(warnings: List[str]):
    if warnings:
        console.print("\n[yellow]⚠️  Warnings:[/yellow]")
        for warning in warnings:
            console.print(f"  [yellow]•[/yellow] {escape(warning)}")
        console.print()
