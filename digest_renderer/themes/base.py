"""
Theme base class.

A theme owns every piece of markup in the output: the document shell and
the primitives (table, card, summary box, error box) that module renderers
build their fragments from. Markup lives in Jinja2 templates under
``templates/<theme name>/`` with ``templates/common/`` as the fallback.
"""

from collections.abc import Mapping, Sequence
from datetime import datetime
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape

from digest_renderer.escaping import display_value, humanize, trusted
from digest_renderer.models import DigestMeta

# Template directory
TEMPLATE_DIR = Path(__file__).parent / "templates"

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class Theme:
    """Renders page chrome and markup primitives for one visual style."""

    name: str = ""
    table_class: str = "table"
    card_class: str = "card"

    def __init__(self, template_dir: Path | None = None):
        self.template_dir = template_dir or TEMPLATE_DIR

        self.env = Environment(
            loader=FileSystemLoader(
                [str(self.template_dir / self.get_name()), str(self.template_dir / "common")]
            ),
            autoescape=select_autoescape(["html", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.get_name()!r})"

    def get_name(self) -> str:
        """Theme name; derived from the class name when not set explicitly."""
        return self.name or type(self).__name__.removesuffix("Theme").lower()

    def get_stylesheet(self) -> str:
        """Static CSS embedded in the document head."""
        return self.env.get_template("style.css").render()

    def render_document(self, variables: Mapping[str, Any]) -> str:
        """
        Render the complete HTML document.

        Args:
            variables: ``digest`` (metadata), ``rendered_modules`` (key -> HTML
                fragment, in display order), ``custom_css`` and optionally
                ``now``, the time used when the digest carries no timestamp.

        Returns:
            Rendered HTML string
        """
        digest = variables.get("digest")
        if not isinstance(digest, DigestMeta):
            digest = DigestMeta.model_validate(digest or {})

        rendered_modules = {
            str(key): trusted(html)
            for key, html in (variables.get("rendered_modules") or {}).items()
        }
        now = variables.get("now") or datetime.now()

        return self._render(
            "document.html",
            digest=digest,
            rendered_modules=rendered_modules,
            stylesheet=trusted(self.get_stylesheet()),
            custom_css=trusted(variables.get("custom_css") or ""),
            generated_on=self.format_timestamp(digest.timestamp, now),
            theme=self,
        )

    def render_table(
        self,
        headers: Sequence[Any],
        rows: Sequence[Sequence[Any]],
        *,
        css_class: str | None = None,
    ) -> str:
        """
        Render a data table. Every header and cell is escaped.

        Rows are fitted to the header count: short rows are padded with
        empty cells and long rows are cut. Without headers rows render as-is.
        """
        headers = [display_value(header) for header in headers]
        fitted = [self._fit_row(row, len(headers)) for row in rows]

        return self._render(
            "table.html",
            headers=headers,
            rows=fitted,
            css_class=css_class or self.table_class,
        )

    def render_card(
        self,
        title: str,
        content_html: str,
        *,
        error: bool = False,
        css_class: str | None = None,
        element_id: str | None = None,
    ) -> str:
        """Wrap pre-rendered markup in a titled container. Content is not escaped."""
        return self._render(
            "card.html",
            title=title,
            content=trusted(content_html),
            error=error,
            css_class=css_class or self.card_class,
            element_id=element_id,
        )

    def render_summary(self, title: str, data: Mapping[str, Any]) -> str:
        """Render a key/value summary box, one item per key in mapping order."""
        items = [(humanize(key), display_value(value)) for key, value in data.items()]
        return self._render("summary.html", title=title, items=items)

    def render_error(self, title: str, message: str) -> str:
        """Render an error box. Title and message are escaped."""
        content = self._render("error.html", message=message)
        return self.render_card(title, content, error=True)

    def render_heading(self, text: str) -> str:
        """Section heading inside a card."""
        return self._render("heading.html", text=text)

    def render_field(self, label: str, value: Any) -> str:
        """A single ``label: value`` line."""
        return self._render("field.html", label=label, value=display_value(value))

    def render_note(self, text: str) -> str:
        """A short explanatory paragraph, e.g. for empty sections."""
        return self._render("note.html", text=text)

    @staticmethod
    def format_timestamp(timestamp: str | None, now: datetime) -> str:
        """Footer timestamp; unparseable values are shown verbatim."""
        if not timestamp:
            return now.strftime(TIMESTAMP_FORMAT)
        try:
            return datetime.fromisoformat(timestamp).strftime(TIMESTAMP_FORMAT)
        except ValueError:
            return timestamp

    @staticmethod
    def _fit_row(row: Sequence[Any], width: int) -> list[str]:
        cells = [display_value(cell) for cell in row]
        if not width:
            return cells
        return (cells + [""] * width)[:width]

    def _render(self, template_name: str, **context: Any) -> str:
        return self.env.get_template(template_name).render(**context)
