"""Reply counts and nesting depth."""

from dataclasses import replace

from annotation_threads.core.tree.traversal import rebuild_thread
from annotation_threads.models.thread import Thread


def count_replies_and_depth(thread: Thread, depth: int) -> Thread:
    """Return a copy of `thread` with `reply_count` and `depth` filled in.

    `reply_count` counts all descendants, not only direct children.
    """

    def count(node: Thread, children: tuple[Thread, ...], level: int) -> Thread:
        reply_count = sum(1 + child.reply_count for child in children)
        return replace(node, children=children, depth=depth + level, reply_count=reply_count)

    return rebuild_thread(thread, count)
