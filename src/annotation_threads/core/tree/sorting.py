"""Ordering of sibling threads."""

import functools
from collections.abc import Callable, Sequence
from dataclasses import replace

from annotation_threads.core.tree.traversal import rebuild_thread
from annotation_threads.models.annotation import Annotation
from annotation_threads.models.thread import Thread

LessThan = Callable[[Annotation, Annotation], bool]


def by_id(a: Annotation, b: Annotation) -> bool:
    """Order annotations lexicographically by id."""
    return (a.id or "") < (b.id or "")


def by_created(a: Annotation, b: Annotation) -> bool:
    """Order annotations oldest first."""
    return a.created < b.created


def newest_first(a: Annotation, b: Annotation) -> bool:
    """Order annotations newest first."""
    return a.created > b.created


SORT_ORDERS: dict[str, LessThan] = {
    "id": by_id,
    "oldest": by_created,
    "newest": newest_first,
}


def sort_threads(threads: Sequence[Thread], compare_fn: LessThan) -> tuple[Thread, ...]:
    """Return a sorted copy of `threads`.

    Threads without an annotation always sort first. Ties keep their
    original relative order.
    """

    def cmp(a: Thread, b: Thread) -> int:
        if a.annotation is None or b.annotation is None:
            if a.annotation is None and b.annotation is None:
                return 0
            return -1 if a.annotation is None else 1
        if compare_fn(a.annotation, b.annotation):
            return -1
        if compare_fn(b.annotation, a.annotation):
            return 1
        return 0

    return tuple(sorted(threads, key=functools.cmp_to_key(cmp)))


def sort_thread(thread: Thread, compare_fn: LessThan, reply_compare_fn: LessThan) -> Thread:
    """Return a copy of `thread` with every `children` tuple sorted.

    The children of `thread` are ordered with `compare_fn`, all deeper levels
    with `reply_compare_fn`.
    """

    def sort_children(node: Thread, children: tuple[Thread, ...], level: int) -> Thread:
        order = compare_fn if level == 0 else reply_compare_fn
        return replace(node, children=sort_threads(children, order))

    return rebuild_thread(thread, sort_children)
