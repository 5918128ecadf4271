"""The thread tree node."""

from dataclasses import dataclass
from typing import Literal

from annotation_threads.models.annotation import Annotation

HighlightState = Literal["dim", "highlight"]


@dataclass(frozen=True)
class Thread:
    """A node in a thread tree.

    `annotation` is None for the synthetic root and for placeholders standing
    in for ancestors that are referenced but missing from the input.
    """

    id: str
    annotation: Annotation | None = None
    parent: str | None = None
    children: tuple["Thread", ...] = ()
    visible: bool = True
    collapsed: bool = False
    total_children: int = 0
    highlight_state: HighlightState | None = None
    reply_count: int = 0
    depth: int = 0
