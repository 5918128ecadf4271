"""Render projected threads as markdown."""

import io

from annotation_threads.config import HIGHLIGHT
from annotation_threads.models.thread import Thread


def _write_node(out: io.StringIO, node: Thread, indent: str) -> None:
    annotation = node.annotation
    if annotation is None:
        out.write(f"{indent}- (missing annotation, id={node.id})\n")
        return
    if not node.visible:
        out.write(f"{indent}- (hidden, id={node.id})\n")
        return

    lines = annotation.text.split("\n")
    first = lines[0]
    if node.highlight_state == HIGHLIGHT:
        first = f"**{first}**"
    author = f"{annotation.user}: " if annotation.user else ""
    out.write(f"{indent}- {author}{first}\n")
    for line in lines[1:]:
        out.write(f"{indent}  {line}\n")


def render_thread_as_markdown(
    thread: Thread,
    *,
    max_depth: int | None = None,
    show_collapsed: bool = False,
) -> str:
    """Render the children of a projected thread as an indented bullet list.

    Args:
        thread: A thread returned by `build_thread`, usually the root.
        max_depth: Levels to include, top-level threads being the first (None = unlimited).
        show_collapsed: Render replies of collapsed threads too.

    Returns:
        Markdown string with bullet-list hierarchy.
    """
    if max_depth is not None and max_depth < 1:
        return ""

    out = io.StringIO()
    # (node, relative depth) pairs, children pushed in reverse to keep order
    todo = [(child, 0) for child in reversed(thread.children)]
    while todo:
        node, depth = todo.pop()
        indent = "    " * depth
        _write_node(out, node, indent)

        if not node.children:
            continue

        # Truncation indicator when replies are hidden by collapse or max_depth
        hidden_by_depth = max_depth is not None and depth + 1 >= max_depth
        if hidden_by_depth or (node.collapsed and not show_collapsed):
            noun = "reply" if node.reply_count == 1 else "replies"
            out.write(f"{indent}    - ... ({node.reply_count} more {noun}, id={node.id})\n")
            continue

        todo.extend((child, depth + 1) for child in reversed(node.children))

    return out.getvalue()
