"""Options controlling how a thread is projected for display."""

from collections.abc import Callable, Collection, Mapping
from dataclasses import dataclass, field

from annotation_threads.core.tree.sorting import LessThan, by_created, by_id
from annotation_threads.models.annotation import Annotation
from annotation_threads.models.thread import Thread


@dataclass(frozen=True)
class ThreadOptions:
    """Filters, sort order and UI state applied by `build_thread`.

    Attributes:
        selected: Ids of top-level threads to keep. Empty keeps all of them.
        force_visible: Ids shown even when `filter_fn` rejects them.
        filter_fn: Returns True if an annotation matches the active filters.
        thread_filter_fn: Returns True if a top-level thread should be kept.
        expanded: Explicit expand (True) or collapse (False) state by id.
        highlighted: Ids to emphasize. When non-empty all others are dimmed.
        sort_compare_fn: Less-than comparison for top-level annotations.
        reply_sort_compare_fn: Less-than comparison for replies.
    """

    selected: Collection[str] = ()
    force_visible: Collection[str] = ()
    filter_fn: Callable[[Annotation], bool] | None = None
    thread_filter_fn: Callable[[Thread], bool] | None = None
    expanded: Mapping[str, bool] = field(default_factory=dict)
    highlighted: Collection[str] = ()
    sort_compare_fn: LessThan = by_id
    reply_sort_compare_fn: LessThan = by_created
