"""Role seniority hierarchy.

Senior roles inherit every permission granted to their juniors.  The
relation is meant to be a DAG but cycles are tolerated: closures use a
visited set, so mutually senior roles collapse into one equivalence
class instead of looping.
"""

from __future__ import annotations

from collections import deque


class RoleNode:
    """A role with mutual links to its senior and junior roles."""

    def __init__(self, id: str) -> None:  # noqa: A002
        self.id = id
        self.seniors: set[RoleNode] = set()
        self.juniors: set[RoleNode] = set()

    def __repr__(self) -> str:
        return f"RoleNode({self.id!r})"

    def add_senior(self, senior: RoleNode) -> None:
        """Make *senior* a direct senior of this role."""
        self.seniors.add(senior)
        senior.juniors.add(self)

    def ancestor_closure(self) -> set[RoleNode]:
        """All roles reachable by following senior edges transitively.

        Contains this role itself only when it sits on a cycle.
        """
        return _closure(self, "seniors")

    def descendant_closure(self) -> set[RoleNode]:
        """All roles reachable by following junior edges transitively."""
        return _closure(self, "juniors")


def _closure(start: RoleNode, edge: str) -> set[RoleNode]:
    visited: set[RoleNode] = set()
    queue: deque[RoleNode] = deque(getattr(start, edge))
    while queue:
        role = queue.popleft()
        if role in visited:
            continue
        visited.add(role)
        queue.extend(getattr(role, edge))
    return visited


def new_role(role_id: str) -> RoleNode:
    return RoleNode(role_id)


def add_senior(role: RoleNode, senior: RoleNode) -> None:
    role.add_senior(senior)
