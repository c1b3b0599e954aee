"""
Resume Template Registry

Loads and caches the Jinja2 templates behind each resume template choice.
Templates are stored as {template_name}.jinja under the templates directory
(FOLIO_TEMPLATES_PATH, defaulting to the package's own templates/ folder).
"""

import os
from pathlib import Path
from typing import Dict

from dotenv import load_dotenv
from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateNotFound

from folio.contexts.normalization.defaults import RESUME_TEMPLATES

load_dotenv()
TEMPLATES_PATH = Path(os.getenv("FOLIO_TEMPLATES_PATH", Path(__file__).parent / "templates"))


class TemplateRegistry:
    """
    Registry for loading and caching resume text templates.

    Only identifiers listed in RESUME_TEMPLATES can be loaded.
    """

    def __init__(self, templates_path: Path = None):
        """
        Initialize the template registry.

        Args:
            templates_path: Directory with {name}.jinja files. Defaults to
                           FOLIO_TEMPLATES_PATH from environment
        """
        if templates_path is None:
            templates_path = TEMPLATES_PATH

        self.templates_path = Path(templates_path)
        self._cache: Dict[str, Template] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_path)),
            # Catches silent failures
            undefined=StrictUndefined,
            # Block tags on their own line leave no blank lines behind
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    def get_template(self, name: str) -> Template:
        """
        Get a template by name, loading and caching it if necessary.

        Args:
            name: Template identifier (e.g., 'classic')

        Returns:
            Jinja2 Template object

        Raises:
            TemplateNotFound: If name is not a known template or its file is missing
            TemplateSyntaxError: If the template has Jinja2 syntax errors
        """
        if name in self._cache:
            return self._cache[name]

        if name not in RESUME_TEMPLATES:
            raise TemplateNotFound(
                f"Unknown resume template '{name}'. Available templates: {list(RESUME_TEMPLATES)}"
            )

        try:
            template = self.env.get_template(f"{name}.jinja")
        except TemplateNotFound as e:
            raise TemplateNotFound(
                f"Template file missing for '{name}' at {self.get_template_path(name)}"
            ) from e

        self._cache[name] = template
        return template

    def get_template_path(self, name: str) -> Path:
        return self.templates_path / f"{name}.jinja"

    def clear_cache(self):
        """Clear the template cache."""
        self._cache.clear()

    def is_cached(self, name: str) -> bool:
        return name in self._cache
