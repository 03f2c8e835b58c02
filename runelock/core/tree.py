"""
AssumptionTree: an arena of nodes addressed by integer handle.

Nodes are never removed. Going back means pointing somewhere else, so a
dead branch stays around to be inspected and explained.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from .errors import UnknownNodeError


ROOT = 0


@dataclass
class TreeNode:
    data: Any
    parent: Optional[int] = None
    children: list = field(default_factory=list)


class AssumptionTree:
    def __init__(self, root_data):
        self.nodes = [TreeNode(root_data)]

    def insert_child(self, parent: int, data) -> int:
        self.nodes.append(TreeNode(data, parent=parent))
        handle = len(self.nodes) - 1
        self.nodes[parent].children.append(handle)
        return handle

    def get_handle(self, node_id: int) -> int:
        if not isinstance(node_id, int) or not 0 <= node_id < len(self.nodes):
            raise UnknownNodeError(node_id)
        return node_id

    def parent_of(self, handle: int) -> Optional[int]:
        return self.nodes[handle].parent

    def children_of(self, handle: int) -> list:
        return list(self.nodes[handle].children)

    def path_to(self, handle: int) -> list:
        """Handles from the root down to `handle`, inclusive."""
        path = []
        node = handle
        while node is not None:
            path.append(node)
            node = self.nodes[node].parent
        path.reverse()
        return path

    def __getitem__(self, handle: int):
        return self.nodes[handle].data

    def __len__(self):
        return len(self.nodes)

    def format(self, describe: Callable = str, marker: Optional[int] = None) -> str:
        """Indented outline, two spaces per level; `marker` flags one node."""
        lines = []

        def walk(handle, indent):
            flag = " <" if handle == marker else ""
            lines.append(f"{' ' * indent} - ({handle}) {describe(self[handle])}{flag}")
            for child in self.nodes[handle].children:
                walk(child, indent + 2)

        walk(ROOT, 0)
        return "\n".join(lines)
