from .keys import (
    DELIMITER,
    ancestor_prefixes,
    folder_name,
    partition_selection,
    split_key,
    validate_key,
    validate_prefix,
)
from .tree import ProjectTreeNode, build_project_tree, render_tree

__all__ = [
    "DELIMITER",
    "ProjectTreeNode",
    "ancestor_prefixes",
    "build_project_tree",
    "folder_name",
    "partition_selection",
    "render_tree",
    "split_key",
    "validate_key",
    "validate_prefix",
]
