"""Generic walks over thread trees.

All walks use explicit work lists rather than recursion.
"""

from collections.abc import Callable, Iterator
from dataclasses import replace
from itertools import islice

from annotation_threads.models.thread import Thread

BuildFn = Callable[[Thread, tuple[Thread, ...], int], Thread]


def rebuild_thread(thread: Thread, build_fn: BuildFn) -> Thread:
    """Return a copy of `thread` rebuilt bottom-up.

    `build_fn(node, children, level)` is called once per node after all of
    its children have been rebuilt. `children` are the rebuilt children in
    their original order and `level` is the distance below `thread`.
    """
    # One list of finished children per node whose children are in progress
    finished: list[list[Thread]] = [[]]
    todo: list[tuple[Thread, int, bool]] = [(thread, 0, False)]
    while todo:
        node, level, children_done = todo.pop()
        if not children_done:
            todo.append((node, level, True))
            finished.append([])
            todo.extend((child, level + 1, False) for child in reversed(node.children))
            continue
        children = tuple(finished.pop())
        finished[-1].append(build_fn(node, children, level))
    return finished[0][0]


def map_thread(thread: Thread, map_fn: Callable[[Thread], Thread]) -> Thread:
    """Return a copy of `thread` with it and every descendant transformed by `map_fn`.

    Children of the copy are built from the children of the original node,
    so `map_fn` may not add or remove children.
    """
    return rebuild_thread(
        thread, lambda node, children, _level: replace(map_fn(node), children=children)
    )


def has_visible_children(thread: Thread) -> bool:
    """Return True if any descendant of `thread` is visible."""
    return any(node.visible for node in islice(iter_threads(thread), 1, None))


def iter_threads(thread: Thread) -> Iterator[Thread]:
    """Yield `thread` and its descendants, depth-first in children order."""
    stack = [thread]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.children))
