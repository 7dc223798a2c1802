"""
Jinja2 rendering of validator source files.

Each language package ships its file templates in a ``templates/``
directory; this module wraps the Jinja2 environment they are rendered with.
"""

from typing import Dict, Any, List, Optional
from pathlib import Path

from jinja2 import (
    DictLoader,
    Environment,
    FileSystemLoader,
    TemplateNotFound,
    select_autoescape,
)


class TemplateError(Exception):
    """A template is missing or failed to render."""

    pass


class TemplateEngine:
    """Jinja2 environment configured for whitespace-exact source output."""

    def __init__(self, template_dir: Optional[Path] = None):
        """
        Args:
            template_dir: Directory of ``*.j2`` files; when missing, the
                engine starts without templates
        """
        self.template_dir = template_dir
        self._env = self._create_environment()

    def _create_environment(self) -> Environment:
        if self.template_dir and self.template_dir.exists():
            loader = FileSystemLoader(str(self.template_dir))
        else:
            loader = DictLoader({})

        # Block tags own their lines; the file's final newline is kept
        env = Environment(
            loader=loader,
            autoescape=select_autoescape(["html", "xml"], default=False),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        env.filters["comment"] = line_comment
        return env

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a named template.

        Raises:
            TemplateError: If the template is missing or raises while rendering
        """
        try:
            return self._env.get_template(template_name).render(**context)
        except Exception as e:
            raise TemplateError(
                f"Failed to render template {template_name}: {str(e)}"
            ) from e

    def template_exists(self, template_name: str) -> bool:
        try:
            self._env.get_template(template_name)
        except TemplateNotFound:
            return False
        return True

    def list_templates(self) -> List[str]:
        return sorted(self._env.list_templates())


def line_comment(value: str, style: str = "//") -> str:
    """Turn text into line comments; blank lines keep a bare marker."""
    return "\n".join(
        f"{style} {line}" if line.strip() else style for line in str(value).split("\n")
    )


def create_template_engine(template_dir: Optional[Path] = None) -> TemplateEngine:
    return TemplateEngine(template_dir)
