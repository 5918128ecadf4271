"""Project, filter and sort annotations into a thread for display."""

from collections.abc import Iterable
from dataclasses import replace

from loguru import logger

from annotation_threads.config import DIM, HIGHLIGHT, ROOT_DEPTH
from annotation_threads.core.tree.builder import thread_annotations
from annotation_threads.core.tree.counting import count_replies_and_depth
from annotation_threads.core.tree.sorting import sort_thread
from annotation_threads.core.tree.traversal import has_visible_children, map_thread
from annotation_threads.models.annotation import Annotation, annotation_id
from annotation_threads.models.options import ThreadOptions
from annotation_threads.models.thread import Thread


def build_thread(
    annotations: Iterable[Annotation],
    options: ThreadOptions | None = None,
) -> Thread:
    """Build the thread structure that should be rendered.

    Takes a flat list of annotations plus the current filters, sort order and
    UI state, and returns a new tree. Neither the input annotations nor any
    previously returned tree are modified.

    The order of the steps matters: `selected` and `thread_filter_fn` prune
    top-level threads before visibility is computed.

    Args:
        annotations: Annotations and replies to thread.
        options: Filters, sort order and UI state. Defaults apply when None.

    Returns:
        The root thread, whose children are the top-level annotations to display.
    """
    opts = options or ThreadOptions()

    annotations_filtered = opts.filter_fn is not None
    selected = set(opts.selected)
    force_visible = set(opts.force_visible)
    highlighted = set(opts.highlighted)

    thread = thread_annotations(annotations)

    if selected:
        thread = replace(
            thread, children=tuple(child for child in thread.children if child.id in selected)
        )

    if opts.thread_filter_fn is not None:
        thread = replace(
            thread, children=tuple(filter(opts.thread_filter_fn, thread.children))
        )

    def is_visible(node: Thread) -> bool:
        if not node.visible or node.annotation is None:
            return False
        if annotation_id(node.annotation) in force_visible:
            return True
        if opts.filter_fn is not None and not opts.filter_fn(node.annotation):
            return False
        return True

    thread = map_thread(thread, lambda node: replace(node, visible=is_visible(node)))

    # Drop top-level threads with nothing left to show
    thread = replace(
        thread,
        children=tuple(
            child for child in thread.children if child.visible or has_visible_children(child)
        ),
    )

    def apply_ui_state(node: Thread) -> Thread:
        highlight_state = None
        if highlighted:
            if node.annotation is not None and node.id in highlighted:
                highlight_state = HIGHLIGHT
            else:
                highlight_state = DIM

        if node.id in opts.expanded:
            collapsed = not opts.expanded[node.id]
        else:
            # Open threads where filtering left matching replies
            collapsed = node.collapsed and not (
                annotations_filtered and has_visible_children(node)
            )
        return replace(node, highlight_state=highlight_state, collapsed=collapsed)

    thread = map_thread(thread, apply_ui_state)

    thread = sort_thread(thread, opts.sort_compare_fn, opts.reply_sort_compare_fn)

    thread = count_replies_and_depth(thread, ROOT_DEPTH)

    logger.debug(
        "Projected thread: {} top-level threads, {} nodes",
        len(thread.children), thread.reply_count,
    )
    return thread
