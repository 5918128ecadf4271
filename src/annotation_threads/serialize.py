"""Convert projected threads to JSON-compatible data."""

from typing import Any

from annotation_threads.models.thread import Thread


def thread_to_dict(thread: Thread) -> dict[str, Any]:
    """Return `thread` and its descendants as nested dicts."""
    annotation = thread.annotation
    return {
        "id": thread.id,
        "parent": thread.parent,
        "annotation": None
        if annotation is None
        else {
            "id": annotation.id,
            "$tag": annotation.tag,
            "references": list(annotation.references),
            "created": annotation.created,
            "user": annotation.user,
            "text": annotation.text,
            "updated": annotation.updated,
        },
        "visible": thread.visible,
        "collapsed": thread.collapsed,
        "totalChildren": thread.total_children,
        "highlightState": thread.highlight_state,
        "replyCount": thread.reply_count,
        "depth": thread.depth,
        "children": [thread_to_dict(child) for child in thread.children],
    }
