"""Object storage listing operations."""

from .browse import browse_folder
from .folders import fetch_project_tree, list_folder_paths
from .pager import PaginatedLister
from .resolver import PrefixResolver, resolve_prefixes

__all__ = [
    "PaginatedLister",
    "PrefixResolver",
    "browse_folder",
    "fetch_project_tree",
    "list_folder_paths",
    "resolve_prefixes",
]
