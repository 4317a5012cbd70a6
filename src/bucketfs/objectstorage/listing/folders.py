"""Discover every folder in a bucket and arrange them as a tree."""

from typing import Optional

from bucketfs.core import get_logger
from bucketfs.core.events import EventSink, LogLevel, default_sink
from bucketfs.objectstorage.store import Lister
from bucketfs.path.keys import ancestor_prefixes
from bucketfs.path.tree import ProjectTreeNode, build_project_tree

from .pager import PaginatedLister

logger = get_logger(__name__)


async def list_folder_paths(
    store: Lister, prefix: str = "", sink: Optional[EventSink] = None
) -> list[str]:
    """All folder prefixes implied by the keys under ``prefix``, sorted.

    Folders are not stored, so every key is walked and each of its ancestor
    prefixes recorded: ``"a/b/c.txt"`` contributes ``"a/"`` and ``"a/b/"``.
    """
    sink = default_sink(sink)
    lister = PaginatedLister(store, sink=sink)
    folders: set[str] = set()

    async for page in lister.iter_pages(prefix):
        for entry in page.objects:
            folders.update(ancestor_prefixes(entry.key))

    paths = sorted(folders)
    sink.emit(LogLevel.INFO, "Folder paths discovered", prefix=prefix, count=len(paths))
    return paths


async def fetch_project_tree(
    store: Lister, prefix: str = "", sink: Optional[EventSink] = None
) -> list[ProjectTreeNode]:
    """Folder tree for the bucket, rebuilt from a fresh listing."""
    paths = await list_folder_paths(store, prefix, sink=sink)
    tree = build_project_tree(paths)
    logger.info("Project tree built", folder_count=len(paths), root_count=len(tree))
    return tree
