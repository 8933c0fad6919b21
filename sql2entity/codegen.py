"""Render the entity template and write the generated class.

Takes a parsed Table, builds the template context and produces
<entity name>.cs wrapped in the prefix/suffix boilerplate.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import jinja2

from .context_builder import build_context
from .schema_parser import Table

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"
TEMPLATE_NAME = "entity.cs.j2"
OUTPUT_SUFFIX = ".cs"


def _environment() -> jinja2.Environment:
    return jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=jinja2.StrictUndefined,
    )


def _render_context(context: dict[str, Any]) -> str:
    template = _environment().get_template(TEMPLATE_NAME)
    return template.render(**context)


def render(table: Table, entity_name: str) -> str:
    """Render the entity class text for a table."""
    return _render_context(build_context(table, entity_name))


def compose(code: str, prefix: str = "", suffix: str = "") -> str:
    """Wrap generated code in the boilerplate, prefix on its own line."""
    return f"{prefix}\n{code}{suffix}"


def generate(
    table: Table,
    entity_name: str,
    prefix: str = "",
    suffix: str = "",
    output_dir: Path | None = None,
) -> Path:
    """Render the entity and write it to <output_dir>/<entity_name>.cs."""
    context = build_context(table, entity_name)
    code = _render_context(context)
    print("Generate code succeed")

    output_dir = output_dir or Path.cwd()
    output_dir.mkdir(parents=True, exist_ok=True)
    output_path = output_dir / f"{entity_name}{OUTPUT_SUFFIX}"
    output_path.write_text(compose(code, prefix, suffix), encoding="utf-8")

    logger.debug("Wrote %s (%d properties)", output_path, context["property_count"])
    return output_path
