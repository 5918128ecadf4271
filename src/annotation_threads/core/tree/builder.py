"""Thread a flat list of annotations into a reply tree."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from loguru import logger

from annotation_threads.config import ROOT_THREAD_ID
from annotation_threads.models.annotation import Annotation, annotation_id
from annotation_threads.models.thread import Thread


@dataclass
class _Draft:
    """Mutable node used while links are being established."""

    id: str
    annotation: Annotation | None = None
    parent: str | None = None
    children: list[str] = field(default_factory=list)


def _has_path_to_root(drafts: dict[str, _Draft], thread_id: str, ancestor_id: str) -> bool:
    """Can `thread_id` be attached below `ancestor_id` without forming a cycle?

    Walks up from `ancestor_id`. Fails closed if an ancestor is missing, if
    the walk comes back to `thread_id`, or if it does not reach the top
    within as many steps as there are nodes.
    """
    for _ in range(len(drafts)):
        if ancestor_id == thread_id:
            return False
        ancestor = drafts.get(ancestor_id)
        if ancestor is None or ancestor.parent == thread_id:
            return False
        if ancestor.parent is None:
            return True
        ancestor_id = ancestor.parent
    return False


def _link(drafts: dict[str, _Draft], child_id: str, parent_id: str) -> None:
    if not _has_path_to_root(drafts, child_id, parent_id):
        logger.debug("Refusing to attach {} below {}: circular reference", child_id, parent_id)
        return
    drafts[child_id].parent = parent_id
    drafts[parent_id].children.append(child_id)


def _set_parent(drafts: dict[str, _Draft], thread_id: str, references: Sequence[str]) -> None:
    """Attach a thread to its nearest ancestor from `references`.

    A missing ancestor is replaced with a placeholder, which is in turn
    attached using the rest of the reference chain. Links are made from the
    top of the chain down.
    """
    chain = list(references)
    child_id = thread_id
    links: list[tuple[str, str]] = []
    while chain and drafts[child_id].parent is None:
        parent_id = chain.pop()
        links.append((child_id, parent_id))
        if parent_id in drafts:
            break
        # Probably a reply to a deleted annotation.
        logger.debug("Creating placeholder for missing annotation {}", parent_id)
        drafts[parent_id] = _Draft(id=parent_id)
        child_id = parent_id

    for child_id, parent_id in reversed(links):
        _link(drafts, child_id, parent_id)


def _freeze(drafts: dict[str, _Draft], root: _Draft) -> Thread:
    """Convert `root` and its descendants into frozen threads, bottom-up.

    Children of `root` are the top-level threads and start collapsed.
    """
    finished: list[list[Thread]] = [[]]
    todo: list[tuple[_Draft, int, bool]] = [(root, 0, False)]
    while todo:
        draft, level, children_done = todo.pop()
        if not children_done:
            todo.append((draft, level, True))
            finished.append([])
            todo.extend(
                (drafts[child_id], level + 1, False) for child_id in reversed(draft.children)
            )
            continue
        finished[-1].append(
            Thread(
                id=draft.id,
                annotation=draft.annotation,
                parent=draft.parent,
                children=tuple(finished.pop()),
                collapsed=level == 1,
                total_children=len(draft.children),
            )
        )
    return finished[0][0]


def thread_annotations(annotations: Iterable[Annotation]) -> Thread:
    """Build a thread tree from a flat list of annotations and replies.

    Replies are linked to their parents through the `references` field.
    Inconsistent references never raise: missing ancestors become
    placeholder threads and links that would form a cycle are skipped.

    Args:
        annotations: Annotations and replies, in any order.

    Returns:
        The synthetic root thread. Its children are the threads without a
        parent, collapsed by default.
    """
    annotations = list(annotations)
    drafts: dict[str, _Draft] = {}

    for annotation in annotations:
        thread_id = annotation_id(annotation)
        drafts[thread_id] = _Draft(id=thread_id, annotation=annotation)

    for annotation in annotations:
        _set_parent(drafts, annotation_id(annotation), annotation.references)

    top_level = [thread_id for thread_id, draft in drafts.items() if draft.parent is None]
    logger.debug(
        "Threaded {} annotations into {} nodes ({} top-level)",
        len(annotations), len(drafts), len(top_level),
    )
    return _freeze(drafts, _Draft(id=ROOT_THREAD_ID, children=top_level))
