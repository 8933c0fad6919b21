"""Convert snake_case column names to PascalCase property names.

Examples:
  user_id   -> UserId
  name      -> Name
  a_b_c     -> ABC
  createdAt -> CreatedAt   (only the first letter of a segment changes)
"""

from __future__ import annotations


def _capitalize_first(segment: str) -> str:
    """Uppercase the first character, keep the rest as is."""
    return segment[0].upper() + segment[1:]


def format_name(raw: str) -> str:
    """Build a property name from a raw column identifier.

    Raises ValueError when the identifier has an empty segment, i.e. it is
    empty or has leading, trailing or doubled underscores.
    """
    segments = raw.split("_")
    if not all(segments):
        raise ValueError(f"Cannot format {raw!r}: empty segment between underscores")
    return "".join(_capitalize_first(s) for s in segments)
