"""
Digest rendering using themes and module renderers.

``DigestRenderer.render`` never raises: a module that fails to render is
replaced by an error box, and anything else that goes wrong turns the
whole output into a themed error message.
"""

from collections.abc import Callable, Mapping
from datetime import datetime
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape

from digest_renderer.config import get_settings
from digest_renderer.currency import CurrencyFormatter
from digest_renderer.errors import DigestValidationError
from digest_renderer.escaping import trusted
from digest_renderer.logging_config import get_logger
from digest_renderer.models import DigestMeta
from digest_renderer.renderers import RendererFactory
from digest_renderer.themes import Theme, get_theme

logger = get_logger("renderer")

ERROR_TITLE = "Digest Rendering Error"


class DigestRenderer:
    """Renders digest data to a complete HTML document."""

    def __init__(
        self,
        theme: Theme | str | None = None,
        factory: RendererFactory | None = None,
        formatter: CurrencyFormatter | None = None,
        custom_css: str | None = None,
        template_path: str | Path | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        settings = get_settings()

        self.formatter = formatter or CurrencyFormatter(
            currency=settings.currency,
            decimal_separator=settings.decimal_separator,
            thousands_separator=settings.thousands_separator,
        )
        self.factory = factory or RendererFactory(formatter=self.formatter)

        theme = theme if theme is not None else settings.theme
        self.theme = get_theme(theme) if isinstance(theme, str) else theme

        self.custom_css = custom_css if custom_css is not None else settings.custom_css
        template_path = template_path if template_path is not None else settings.template_path
        self.template_path = Path(template_path) if template_path else None
        self.clock = clock or datetime.now

    def set_theme(self, name: str) -> None:
        """
        Switch to a built-in theme.

        Raises:
            ThemeNotFoundError: If the name is unknown; the current theme stays.
        """
        self.theme = get_theme(name)
        logger.info(f"Using theme '{self.theme.get_name()}'")

    def set_custom_css(self, css: str) -> None:
        self.custom_css = css

    def set_template(self, path: str | Path | None) -> None:
        """Use a Jinja2 template file for the whole document. Checked at render time."""
        self.template_path = Path(path) if path else None

    def render(self, digest_data: Any) -> str:
        """
        Render digest data to HTML.

        Args:
            digest_data: Mapping with ``digest`` metadata, ``modules`` and
                optional ``benchmarks``

        Returns:
            The HTML document, or a themed error box if rendering failed
        """
        try:
            digest, modules = self.validate(digest_data)

            variables = {
                "digest": digest,
                "modules": modules,
                "benchmarks": digest_data.get("benchmarks") or {},
                "rendered_modules": self.render_modules(modules),
                "custom_css": self.custom_css,
                "theme": self.theme,
                "now": self.clock(),
            }

            template_path = self.template_path
            if template_path is not None and not template_path.is_file():
                logger.warning(f"Template not found: {template_path}, using theme layout")
                template_path = None

            if template_path is not None:
                html = self.render_template(template_path, variables)
            else:
                html = self.theme.render_document(variables)

            logger.debug(f"Rendered digest: {len(modules)} modules, {len(html)} chars")
            return html

        except Exception as e:
            logger.error(f"Digest rendering failed: {e}")
            return self.theme.render_error(ERROR_TITLE, str(e))

    def validate(self, digest_data: Any) -> tuple[DigestMeta, Mapping[str, Any]]:
        """
        Check the top-level shape of the digest data.

        Raises:
            DigestValidationError: If metadata or modules are missing or not mappings.
        """
        if not isinstance(digest_data, Mapping):
            raise DigestValidationError("Digest data must be a mapping")

        if not isinstance(digest_data.get("digest"), Mapping):
            raise DigestValidationError("Missing or invalid digest metadata")

        if not isinstance(digest_data.get("modules"), Mapping):
            raise DigestValidationError("Missing or invalid modules data")

        digest = DigestMeta.model_validate(dict(digest_data["digest"]))
        return digest, digest_data["modules"]

    def render_modules(self, modules: Mapping[str, Any]) -> dict[str, str]:
        """Render every module in input order; failures stay local to their module."""
        rendered: dict[str, str] = {}

        for key, module_data in modules.items():
            heading = None
            try:
                if not isinstance(module_data, Mapping):
                    raise TypeError(f"Module data must be a mapping, got {type(module_data).__name__}")

                heading = module_data.get("heading")
                renderer = self.factory.create_renderer(
                    str(module_data.get("module_name") or key), self.theme
                )
                rendered[key] = renderer.render(module_data)

            except Exception as e:
                logger.warning(f"Module '{key}' failed to render: {e}")
                rendered[key] = self.theme.render_error(str(heading or key), str(e))

        return rendered

    def render_template(self, template_path: Path, variables: Mapping[str, Any]) -> str:
        """Render a caller-supplied document template with the theme's variables."""
        env = Environment(
            loader=FileSystemLoader(str(template_path.parent)),
            autoescape=select_autoescape(["html", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        template = env.get_template(template_path.name)

        context = {
            **variables,
            "rendered_modules": {
                key: trusted(html) for key, html in variables["rendered_modules"].items()
            },
            "custom_css": trusted(variables["custom_css"] or ""),
            "stylesheet": trusted(self.theme.get_stylesheet()),
        }
        return template.render(context)
