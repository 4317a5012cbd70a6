"""Build a navigable folder tree from a flat list of folder prefixes."""

from dataclasses import dataclass, field
from typing import Iterable

from .keys import DELIMITER


@dataclass
class ProjectTreeNode:
    """A folder in the tree.

    Attributes:
        name: Folder name, e.g. ``"trip"``
        path: Full prefix from the root, e.g. ``"photos/trip/"``
        depth: 0 for direct children of the root
        children: Sub-folders, sorted by name
    """

    name: str
    path: str
    depth: int
    children: list["ProjectTreeNode"] = field(default_factory=list)

    def walk(self) -> Iterable["ProjectTreeNode"]:
        """Yield this node and its descendants depth-first."""
        yield self
        for child in self.children:
            yield from child.walk()


def _sort_key(node: ProjectTreeNode) -> tuple[str, str]:
    return (node.name.casefold(), node.name)


def build_project_tree(paths: Iterable[str]) -> list[ProjectTreeNode]:
    """Build the folder tree for ``paths`` and return the root's children.

    Input order and duplicates do not matter. Missing ancestors are created,
    so ``["a/b/c/"]`` alone yields ``a`` -> ``b`` -> ``c``. Children at every
    level are sorted by name.
    """
    roots: list[ProjectTreeNode] = []
    index: dict[str, ProjectTreeNode] = {}

    for path in paths:
        if not path:
            continue
        parent_children = roots
        current = ""
        segments = path[:-1].split(DELIMITER) if path.endswith(DELIMITER) else path.split(DELIMITER)
        for depth, segment in enumerate(segments):
            current += segment + DELIMITER
            node = index.get(current)
            if node is None:
                node = ProjectTreeNode(name=segment, path=current, depth=depth)
                index[current] = node
                parent_children.append(node)
            parent_children = node.children

    roots.sort(key=_sort_key)
    for node in index.values():
        node.children.sort(key=_sort_key)

    return roots


def render_tree(nodes: list[ProjectTreeNode], indent: str = "  ") -> list[str]:
    """Render a tree as indented lines, one folder per line."""
    lines = []
    for root in nodes:
        for node in root.walk():
            lines.append(f"{indent * node.depth}{node.name}/")
    return lines
