"""Resource containment tree.

Each node owns its children and carries two permission maps keyed by
action: ``explicit`` (roles granted directly at this node) and
``effective`` (role-closed grants propagated from the nearest boundary
above).  ``access_parent`` and ``access_children`` are shortcut links
between permission-bearing nodes; only the access engine writes them.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING

from rrbac.config import settings
from rrbac.exceptions import HierarchyError

if TYPE_CHECKING:
    from rrbac.core.role import RoleNode

logger = logging.getLogger("rrbac.core.resource")


class ResourceNode:
    """A protectable resource in the containment tree."""

    def __init__(self, id: str) -> None:  # noqa: A002
        self.id = id
        self.parent: ResourceNode | None = None
        self.children: list[ResourceNode] = []

        self.explicit: dict[str, set[RoleNode]] = {}
        self.effective: dict[str, set[RoleNode]] = {}

        self.access_parent: ResourceNode | None = None
        self.access_children: set[ResourceNode] = set()

    def __repr__(self) -> str:
        return f"ResourceNode({self.id!r})"

    @property
    def is_boundary(self) -> bool:
        """True once any action has been granted directly at this node."""
        return bool(self.explicit)

    def add_child(self, child: ResourceNode) -> ResourceNode:
        """Attach *child* under this node and return it."""
        if settings.strict_hierarchy:
            self._check_attach(child)
        child.parent = self
        self.children.append(child)
        return child

    def _check_attach(self, child: ResourceNode) -> None:
        if child.parent is not None:
            msg = f"Resource '{child.id}' already has parent '{child.parent.id}'"
        elif child is self or any(a is child for a in self.ancestors()):
            msg = f"Attaching '{child.id}' under '{self.id}' would create a cycle"
        else:
            return
        logger.warning(msg, extra={"resource_id": child.id})
        raise HierarchyError(msg)

    def ancestors(self) -> Iterator[ResourceNode]:
        """Yield strict ancestors, nearest first."""
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    def walk(self) -> Iterator[ResourceNode]:
        """Breadth-first walk of this node and all of its descendants."""
        queue: deque[ResourceNode] = deque([self])
        while queue:
            node = queue.popleft()
            yield node
            queue.extend(node.children)

    def traverse_subtree(self, visitor: Callable[[ResourceNode], object]) -> None:
        """Call *visitor* on every node of the subtree rooted here."""
        for node in self.walk():
            visitor(node)

    def find(self, resource_id: str) -> ResourceNode | None:
        """Return the first node in this subtree with *resource_id*."""
        for node in self.walk():
            if node.id == resource_id:
                return node
        return None


def new_resource(resource_id: str) -> ResourceNode:
    return ResourceNode(resource_id)


def attach_child(parent: ResourceNode, child: ResourceNode) -> ResourceNode:
    """Attach *child* under *parent*; see :meth:`ResourceNode.add_child`."""
    return parent.add_child(child)
