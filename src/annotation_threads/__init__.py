"""Thread annotations and replies into a display-ready tree."""

from annotation_threads.core.projector import build_thread
from annotation_threads.core.tree.builder import thread_annotations
from annotation_threads.models.annotation import Annotation, annotation_id
from annotation_threads.models.options import ThreadOptions
from annotation_threads.models.thread import Thread

__all__ = [
    "Annotation",
    "Thread",
    "ThreadOptions",
    "annotation_id",
    "build_thread",
    "thread_annotations",
]
