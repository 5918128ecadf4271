"""CLI for threading annotation exports."""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Annotated

import typer
from loguru import logger

from annotation_threads.config import DEFAULT_REPLY_SORT, DEFAULT_SORT
from annotation_threads.core.importer.json_reader import read_annotations
from annotation_threads.core.projector import build_thread
from annotation_threads.core.tree.builder import thread_annotations
from annotation_threads.core.tree.markdown import render_thread_as_markdown
from annotation_threads.core.tree.sorting import SORT_ORDERS, LessThan
from annotation_threads.core.tree.traversal import iter_threads
from annotation_threads.logging_config import configure_logging
from annotation_threads.models.annotation import Annotation
from annotation_threads.models.options import ThreadOptions
from annotation_threads.serialize import thread_to_dict

app = typer.Typer(help="Annotation threads: build and inspect reply trees.")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    configure_logging(verbose=verbose)


def _load(path: Path) -> list[Annotation]:
    """Read annotations, exiting with an error on a missing or malformed file."""
    try:
        return read_annotations(path)
    except (OSError, ValueError) as e:
        logger.error("Cannot read annotations from {}: {}", path, e)
        raise typer.Exit(1) from e


def _resolve_sort(name: str) -> LessThan:
    try:
        return SORT_ORDERS[name]
    except KeyError:
        logger.error("Unknown sort order {!r}, expected one of {}", name, ", ".join(SORT_ORDERS))
        raise typer.Exit(1) from None


def _make_filter(user: str | None, query: str | None) -> Callable[[Annotation], bool] | None:
    """Build an annotation filter from the CLI filter flags."""
    if user is None and query is None:
        return None
    needle = query.lower() if query else None

    def matches(annotation: Annotation) -> bool:
        if user is not None and annotation.user != user:
            return False
        if needle is not None and needle not in annotation.text.lower():
            return False
        return True

    return matches


@app.command()
def show(
    path: Path = typer.Argument(..., help="JSON file with annotation records"),
    selected: Annotated[
        list[str] | None,
        typer.Option("--selected", "-s", help="Only show these top-level threads"),
    ] = None,
    force_visible: Annotated[
        list[str] | None,
        typer.Option("--force-visible", "-f", help="Show these even if filtered out"),
    ] = None,
    highlight: Annotated[
        list[str] | None,
        typer.Option("--highlight", "-H", help="Highlight these, dim the rest"),
    ] = None,
    expand: Annotated[
        list[str] | None,
        typer.Option("--expand", "-e", help="Expand these threads"),
    ] = None,
    collapse: Annotated[
        list[str] | None,
        typer.Option("--collapse", "-c", help="Collapse these threads"),
    ] = None,
    user: Annotated[
        str | None,
        typer.Option("--user", "-u", help="Only show annotations by this user"),
    ] = None,
    query: Annotated[
        str | None,
        typer.Option("--query", "-q", help="Only show annotations containing this text"),
    ] = None,
    sort: str = typer.Option(DEFAULT_SORT, "--sort", help="Top-level order: id, oldest, newest"),
    reply_sort: str = typer.Option(
        DEFAULT_REPLY_SORT, "--reply-sort", help="Reply order: id, oldest, newest"
    ),
    max_depth: Annotated[
        int | None,
        typer.Option("--max-depth", "-m", min=1, help="Max depth levels to render"),
    ] = None,
    all_replies: bool = typer.Option(
        False, "--all", "-a", help="Render replies of collapsed threads"
    ),
    output_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """Show the projected thread tree for an annotations file."""
    annotations = _load(path)

    expanded = {thread_id: True for thread_id in expand or ()}
    expanded.update({thread_id: False for thread_id in collapse or ()})

    options = ThreadOptions(
        selected=tuple(selected or ()),
        force_visible=tuple(force_visible or ()),
        filter_fn=_make_filter(user, query),
        expanded=expanded,
        highlighted=tuple(highlight or ()),
        sort_compare_fn=_resolve_sort(sort),
        reply_sort_compare_fn=_resolve_sort(reply_sort),
    )
    thread = build_thread(annotations, options)

    if output_json:
        typer.echo(json.dumps(thread_to_dict(thread), indent=2))
        return

    md = render_thread_as_markdown(thread, max_depth=max_depth, show_collapsed=all_replies)
    if md:
        typer.echo(md, nl=False)
    else:
        typer.echo("No matching annotations.")


@app.command()
def stats(
    path: Path = typer.Argument(..., help="JSON file with annotation records"),
) -> None:
    """Summarize the reply structure of an annotations file."""
    annotations = _load(path)
    root = thread_annotations(annotations)

    nodes = list(iter_threads(root))[1:]
    placeholders = sum(1 for node in nodes if node.annotation is None)
    replies = sum(1 for node in nodes if node.parent is not None and node.annotation is not None)

    typer.echo(f"{len(annotations)} annotations")
    typer.echo(f"  {root.total_children} top-level threads")
    typer.echo(f"  {replies} replies")
    typer.echo(f"  {placeholders} missing ancestors")
