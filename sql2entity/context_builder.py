"""Build Jinja2 template context from a parsed table.

Maps each column to a property entry and assembles the full context dict
for entity.cs.j2.
"""

from __future__ import annotations

from typing import Any

from .naming import format_name
from .schema_parser import Column, Table

# Marker interface implemented by every generated entity
ENTITY_INTERFACE = "IEntity"

# Only bounded strings carry a [StringLength] annotation
_LENGTH_TYPES = {"string"}


def build_property(column: Column) -> dict[str, Any]:
    """Build the template entry for one column."""
    return {
        "name": format_name(column.name),
        "column": column.name,
        "type": column.type,
        "comment": column.comment,
        "is_key": column.is_primary_key,
        "required": not column.nullable,
        "length": column.length if column.type in _LENGTH_TYPES else None,
    }


def build_context(table: Table, entity_name: str) -> dict[str, Any]:
    """Build the full template context for one entity class."""
    properties = [build_property(c) for c in table.columns]
    return {
        "table_name": table.table_name,
        "entity_name": entity_name,
        "entity_interface": ENTITY_INTERFACE,
        # The class-level summary is always left blank.
        "summary": "",
        "properties": properties,
        "property_count": len(properties),
    }
