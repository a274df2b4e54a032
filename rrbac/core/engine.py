"""RRBAC access engine.

Implements the permission assignment and validation algorithms of
"Resource and Role Hierarchy Based Access Control for Resourceful
Systems" (Solanki, Huang, Yen, Bastani, COMPSAC 2018), with permissions
scoped per action.

Assignment turns a node into an access boundary on its first grant of
any action, rewires the shortcut links of the subtree below it, and
pushes the role-closed grant down ``access_children``.  Checks climb
``access_parent`` links only, so they never visit permission-free nodes
and never consult the role hierarchy.

Role seniority is folded into ``effective`` at assignment time; seniors
added to a role afterwards do not see grants made before the edge
existed.
"""

from __future__ import annotations

import logging
from collections import deque

from rrbac.core.models import PolicySnapshot, ResourceState, RoleState
from rrbac.core.resource import ResourceNode
from rrbac.core.role import RoleNode
from rrbac.exceptions import NotFoundError

logger = logging.getLogger("rrbac.core.engine")


class AccessEngine:
    """Assigns permissions and answers access checks over two hierarchies."""

    def __init__(self, resource_root: ResourceNode, roles: dict[str, RoleNode]) -> None:
        self.resource_root = resource_root
        self.roles = roles

    # --- Lookup ---

    def get_role(self, role_id: str) -> RoleNode:
        role = self.roles.get(role_id)
        if role is None:
            raise NotFoundError(f"Role '{role_id}' not found")
        return role

    def get_resource(self, resource_id: str) -> ResourceNode:
        node = self.resource_root.find(resource_id)
        if node is None:
            raise NotFoundError(f"Resource '{resource_id}' not found")
        return node

    # --- Assignment ---

    def assign(self, resource: ResourceNode, role: RoleNode, action: str) -> None:
        """Grant *action* on *resource* (and its subtree) to *role* and its seniors."""
        log_extra = {"resource_id": resource.id, "role_id": role.id, "action": action}

        if role in resource.explicit.get(action, ()):
            logger.debug("Permission already assigned, skipping", extra=log_extra)
            return

        if not resource.explicit:
            self._make_boundary(resource)

        resource.explicit.setdefault(action, set()).add(role)

        closure = {role} | role.ancestor_closure()
        self._propagate(resource, closure, action)
        logger.debug("Assigned permission to %d role(s)", len(closure), extra=log_extra)

    def _make_boundary(self, resource: ResourceNode) -> None:
        """Rewire shortcuts around a node receiving its first explicit grant."""
        old_boundary = resource.access_parent
        resource.access_parent = None

        if old_boundary is not None:
            old_boundary.access_children.add(resource)

        # Existing boundaries below keep access_parent None and are re-homed
        # under this node; the nodes beneath them already point at them.
        rewired = 0
        queue = deque(resource.children)
        while queue:
            node = queue.popleft()
            if node.is_boundary:
                if old_boundary is not None:
                    old_boundary.access_children.discard(node)
                resource.access_children.add(node)
                continue
            if node.access_parent is old_boundary:
                node.access_parent = resource
                rewired += 1
            queue.extend(node.children)

        logger.debug(
            "Resource became an access boundary (previous boundary: %s, rewired %d, linked %d)",
            old_boundary.id if old_boundary is not None else None,
            rewired,
            len(resource.access_children),
            extra={"resource_id": resource.id},
        )

    def _propagate(self, resource: ResourceNode, closure: set[RoleNode], action: str) -> None:
        """Union *closure* into ``effective[action]`` down the access_children links.

        A node whose set did not grow stops the descent below it.
        """
        stack = [resource]
        while stack:
            node = stack.pop()
            granted = node.effective.setdefault(action, set())
            before = len(granted)
            granted |= closure
            if len(granted) > before:
                stack.extend(node.access_children)

    # --- Validation ---

    def can_access(self, role: RoleNode, resource: ResourceNode, action: str) -> bool:
        """Return True if *role* may perform *action* on *resource*."""
        node: ResourceNode | None = resource
        while node is not None:
            if role in node.effective.get(action, ()):
                return True
            node = node.access_parent
        return False

    # --- Id-addressed helpers ---

    def grant(self, resource_id: str, role_id: str, action: str) -> None:
        self.assign(self.get_resource(resource_id), self.get_role(role_id), action)

    def check(self, role_id: str, resource_id: str, action: str) -> bool:
        return self.can_access(self.get_role(role_id), self.get_resource(resource_id), action)

    # --- State export ---

    def snapshot(self) -> PolicySnapshot:
        """Frozen view of every resource and role the engine knows about."""
        return PolicySnapshot(
            resources=[ResourceState.from_node(n) for n in self.resource_root.walk()],
            roles=[
                RoleState.from_node(r) for r in sorted(self.roles.values(), key=lambda r: r.id)
            ],
        )
