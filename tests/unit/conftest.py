"""Shared test fixtures."""

import json
from pathlib import Path

import pytest

from annotation_threads.models.annotation import Annotation
from tests.unit.factories import make_annotation

# A small discussion: two top-level annotations, nested replies, and a reply
# whose parent has been deleted.
SAMPLE_RECORDS = [
    {
        "id": "a1",
        "references": [],
        "created": "2020-01-03T10:00:00",
        "user": "acct:alice@example.com",
        "text": "Interesting claim here",
    },
    {
        "id": "a1r1",
        "references": ["a1"],
        "created": "2020-01-04T10:00:00",
        "user": "acct:bob@example.com",
        "text": "I disagree",
    },
    {
        "id": "a1r2",
        "references": ["a1"],
        "created": "2020-01-03T12:00:00",
        "user": "acct:carol@example.com",
        "text": "Source?",
    },
    {
        "id": "a1r1r1",
        "references": ["a1", "a1r1"],
        "created": "2020-01-05T10:00:00",
        "user": "acct:alice@example.com",
        "text": "Fair point",
    },
    {
        "id": "a2",
        "references": [],
        "created": "2020-01-01T10:00:00",
        "user": "acct:bob@example.com",
        "text": "Typo in this paragraph",
    },
    {
        "$tag": "t1",
        "references": ["deleted"],
        "created": "2020-01-06T10:00:00",
        "user": "acct:carol@example.com",
        "text": "Reply to a deleted annotation",
    },
]


@pytest.fixture
def sample_annotations() -> list[Annotation]:
    """Return the sample discussion as annotation models."""
    return [
        make_annotation(
            r.get("id"),
            *r["references"],
            created=r["created"],
            user=r["user"],
            text=r["text"],
            tag=r.get("$tag"),
        )
        for r in SAMPLE_RECORDS
    ]


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    """Write the sample discussion to a JSON file and return its path."""
    path = tmp_path / "annotations.json"
    path.write_text(json.dumps(SAMPLE_RECORDS))
    return path
