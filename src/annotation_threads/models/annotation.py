"""Annotation records consumed by the threading pipeline."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Annotation:
    """An annotation or reply, as supplied by the annotation store.

    `references` lists ancestor ids from the furthest to the nearest ancestor.
    It may be incomplete and may name annotations that no longer exist.
    """

    id: str | None
    references: tuple[str, ...] = ()
    created: str = ""
    tag: str | None = None
    user: str | None = None
    text: str = ""
    updated: str | None = None


def annotation_id(annotation: Annotation) -> str:
    """Return the persistent id, falling back to the local-only tag.

    Annotations that have not been saved yet have no server id.
    """
    return annotation.id or annotation.tag or ""
