"""Bucket operations addressed by binding name."""

from .storage_operations import (
    browse,
    delete_items,
    export_selection_urls,
    list_bindings,
    list_folders,
    project_tree,
    upload_file,
)

__all__ = [
    "browse",
    "delete_items",
    "export_selection_urls",
    "list_bindings",
    "list_folders",
    "project_tree",
    "upload_file",
]
