"""Configuration constants for annotation threading."""

from typing import Final

# Id of the synthetic thread whose children are the top-level annotations.
ROOT_THREAD_ID: str = "root"

# Depth assigned to the root thread. Top-level annotations are at depth 0.
ROOT_DEPTH: int = -1

HIGHLIGHT: Final = "highlight"
DIM: Final = "dim"

# Sort orders selectable from the CLI, by name.
DEFAULT_SORT: str = "id"
DEFAULT_REPLY_SORT: str = "oldest"
