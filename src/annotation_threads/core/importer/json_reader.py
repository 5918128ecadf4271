"""Parse annotation records from JSON into domain models."""

import json
from pathlib import Path
from typing import Any

from annotation_threads.models.annotation import Annotation


def _string_field(data: dict[str, Any], key: str) -> str:
    """Return a string field, treating a missing key or null as empty."""
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        msg = f"Annotation field {key!r} must be a string, got {type(value).__name__}"
        raise ValueError(msg)
    return value


def parse_annotation(data: dict[str, Any]) -> Annotation:
    """Parse a single annotation record.

    Unsaved annotations have no `id` and are identified by their local
    `$tag` instead.

    Raises:
        ValueError: If the record is not an object, has neither `id` nor `$tag`,
            or has a non-string `created` or `text`.
    """
    if not isinstance(data, dict):
        msg = f"Annotation record must be an object, got {type(data).__name__}"
        raise ValueError(msg)
    if not data.get("id") and not data.get("$tag"):
        msg = f"Annotation record has neither 'id' nor '$tag': {data!r}"
        raise ValueError(msg)

    return Annotation(
        id=data.get("id"),
        tag=data.get("$tag"),
        references=tuple(data.get("references") or ()),
        created=_string_field(data, "created"),
        updated=data.get("updated"),
        user=data.get("user"),
        text=_string_field(data, "text"),
    )


def parse_annotations(data: Any) -> list[Annotation]:
    """Parse a list of annotation records.

    Accepts either a bare list or an API search response with the records
    under `rows`.
    """
    if isinstance(data, dict):
        data = data.get("rows", [])
    if not isinstance(data, list):
        msg = f"Expected a list of annotations, got {type(data).__name__}"
        raise ValueError(msg)
    return [parse_annotation(row) for row in data]


def read_annotations(path: Path) -> list[Annotation]:
    """Read annotation records from a JSON file."""
    if not path.exists():
        msg = f"Annotations file not found: {path}"
        raise FileNotFoundError(msg)
    return parse_annotations(json.loads(path.read_text(encoding="utf-8")))
