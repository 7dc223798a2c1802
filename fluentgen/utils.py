"""Loading rule definitions from disk or over HTTP.

Raw JSON is read here, turned into a :class:`ValidationDefinition` and
checked by the schema validator before any generator sees it.
"""

import json
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

import requests

from .codegen.core.errors import DefinitionValidationError
from .codegen.core.schema import ValidationDefinition, definition_from_dict
from .codegen.core.validation import validate_definition
from .logging_config import get_logger

logger = get_logger(__name__)


class JSONLoaderError(Exception):
    """A definition document could not be read or is not JSON."""

    pass


def load_json_from_file(file_path: str | Path) -> tuple[str, Any]:
    """Parse a JSON document from disk.

    Returns:
        ``(path as text, parsed document)``.

    Raises:
        FileNotFoundError: No file at ``file_path``.
        JSONLoaderError: The file is unreadable or not valid JSON.
    """
    path = Path(file_path)
    logger.debug(f"Reading {path}")

    if not path.is_file():
        logger.error(f"File not found: {path}")
        raise FileNotFoundError(f"JSON file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Cannot read {path}: {e}", exc_info=True)
        raise JSONLoaderError(f"Cannot read {path}: {e}") from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in {path}: {e}")
        raise JSONLoaderError(f"Invalid JSON in {path}: {e}") from e

    return str(path), data


def load_json_from_url(url: str, timeout: int = 30) -> tuple[str, Any]:
    """Fetch and parse a JSON document.

    Args:
        url: ``http(s)`` address of the document.
        timeout: Seconds to wait for the server.

    Returns:
        ``(url, parsed document)``.

    Raises:
        JSONLoaderError: Malformed URL, transport or HTTP failure, or a body
            that is not JSON.
    """
    parts = urlparse(url)
    if not (parts.scheme and parts.netloc):
        logger.error(f"Invalid URL: {url}")
        raise JSONLoaderError(f"Invalid URL: {url}")

    logger.debug(f"Fetching {url}")
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
        data = response.json()
    except requests.exceptions.Timeout as e:
        logger.error(f"Request timeout for URL: {url}")
        raise JSONLoaderError(f"Request timeout for URL: {url}") from e
    except requests.exceptions.HTTPError as e:
        status = e.response.status_code if e.response is not None else "?"
        logger.error(f"HTTP {status} from {url}")
        raise JSONLoaderError(f"HTTP error {status} for URL: {url}") from e
    except requests.exceptions.RequestException as e:
        logger.error(f"Request to {url} failed: {e}", exc_info=True)
        raise JSONLoaderError(f"Request to {url} failed: {e}") from e
    except ValueError as e:
        # requests raises a ValueError subclass for undecodable bodies
        logger.error(f"Invalid JSON response from {url}: {e}")
        raise JSONLoaderError(f"Invalid JSON response from URL {url}: {e}") from e

    return url, data


def load_json(
    file_path: str | Path | None = None,
    url: str | None = None,
    timeout: int = 30,
) -> tuple[str, Any]:
    """Load a JSON document from exactly one of ``file_path`` or ``url``.

    Raises:
        JSONLoaderError: Both or neither source given, or loading failed.
        FileNotFoundError: ``file_path`` does not exist.
    """
    if bool(file_path) == bool(url):
        raise JSONLoaderError("Exactly one of file_path or url must be given")

    if file_path:
        return load_json_from_file(file_path)
    return load_json_from_url(url, timeout)


def discover_definition_files(directory: str | Path) -> list[Path]:
    """Find the rule definition files of a directory.

    Only ``*.json`` files at the top level are considered; the result is
    sorted by file name so runs are reproducible.

    Args:
        directory: Directory to scan.

    Returns:
        Sorted list of definition file paths (may be empty).

    Raises:
        FileNotFoundError: If the directory doesn't exist.
    """
    directory = Path(directory)

    if not directory.is_dir():
        logger.error(f"Input directory not found: {directory}")
        raise FileNotFoundError(f"Input directory not found: {directory}")

    files = sorted(
        (path for path in directory.glob("*.json") if path.is_file()),
        key=lambda path: path.name,
    )

    if not files:
        logger.warning(f"No JSON files found in {directory}")

    return files


def parse_definition(
    data: Any,
    source: str,
    namespace_override: str | None = None,
) -> ValidationDefinition:
    """Convert parsed JSON into a validated definition.

    Args:
        data: Parsed JSON document.
        source: Name of the input, used in error messages.
        namespace_override: Namespace replacing the definition's own; applied
            before validation, so the document may omit its namespace.

    Returns:
        The validated definition.

    Raises:
        DefinitionFormatError: If the document has the wrong shape.
        DefinitionValidationError: If the definition violates the schema.
    """
    definition = definition_from_dict(data, source)

    if namespace_override and namespace_override.strip():
        definition = definition.with_namespace(namespace_override)

    violations = validate_definition(definition)
    if violations:
        logger.error(f"{len(violations)} schema violation(s) in {source}")
        raise DefinitionValidationError(source, violations)

    return definition


def load_definition(
    file_path: str | Path | None = None,
    url: str | None = None,
    namespace_override: str | None = None,
    timeout: int = 30,
) -> ValidationDefinition:
    """Load and validate a single rule definition from a file or URL.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        JSONLoaderError: If the JSON cannot be loaded.
        DefinitionError: If the definition is malformed or invalid.
    """
    source, data = load_json(file_path=file_path, url=url, timeout=timeout)
    definition = parse_definition(data, source, namespace_override)
    logger.info(f"Parsed {definition.entity_name} from {source}")
    return definition
