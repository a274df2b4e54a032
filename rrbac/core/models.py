"""Read-only snapshots of access control state.

The engine's node graph is mutable and full of back-references; these
frozen models flatten it to plain ids so callers can render or compare
state without touching the live hierarchy.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from rrbac.core.resource import ResourceNode
    from rrbac.core.role import RoleNode


def _role_ids(roles: set[RoleNode]) -> list[str]:
    return sorted(r.id for r in roles)


def _permission_map(perms: dict[str, set[RoleNode]]) -> dict[str, list[str]]:
    return {action: _role_ids(roles) for action, roles in sorted(perms.items())}


class RoleState(BaseModel):
    """A role and its direct seniority links."""

    model_config = ConfigDict(frozen=True)

    id: str
    seniors: list[str] = Field(default_factory=list)
    juniors: list[str] = Field(default_factory=list)

    @classmethod
    def from_node(cls, role: RoleNode) -> RoleState:
        return cls(id=role.id, seniors=_role_ids(role.seniors), juniors=_role_ids(role.juniors))


class ResourceState(BaseModel):
    """A resource node with its permission maps and shortcut links."""

    model_config = ConfigDict(frozen=True)

    id: str
    parent: str | None = None
    children: list[str] = Field(default_factory=list)
    explicit: dict[str, list[str]] = Field(default_factory=dict)
    effective: dict[str, list[str]] = Field(default_factory=dict)
    access_parent: str | None = None
    access_children: list[str] = Field(default_factory=list)

    @classmethod
    def from_node(cls, node: ResourceNode) -> ResourceState:
        return cls(
            id=node.id,
            parent=node.parent.id if node.parent is not None else None,
            children=[c.id for c in node.children],
            explicit=_permission_map(node.explicit),
            effective=_permission_map(node.effective),
            access_parent=node.access_parent.id if node.access_parent is not None else None,
            access_children=sorted(c.id for c in node.access_children),
        )


class PolicySnapshot(BaseModel):
    """Whole-policy view: resources in breadth-first order, roles by id."""

    model_config = ConfigDict(frozen=True)

    resources: list[ResourceState] = Field(default_factory=list)
    roles: list[RoleState] = Field(default_factory=list)

    def resource(self, resource_id: str) -> ResourceState | None:
        for state in self.resources:
            if state.id == resource_id:
                return state
        return None
