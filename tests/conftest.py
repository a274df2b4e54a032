"""Shared fixtures for rrbac tests."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from rrbac.core.engine import AccessEngine
from rrbac.core.resource import ResourceNode, attach_child, new_resource
from rrbac.core.role import RoleNode, add_senior, new_role


@dataclass
class Chain:
    """root -> a -> b -> c -> d with a single role."""

    engine: AccessEngine
    root: ResourceNode
    a: ResourceNode
    b: ResourceNode
    c: ResourceNode
    d: ResourceNode
    role: RoleNode


@dataclass
class FileSystem:
    """root -> folder -> file, with user junior to admin."""

    engine: AccessEngine
    root: ResourceNode
    folder: ResourceNode
    file: ResourceNode
    user: RoleNode
    admin: RoleNode


def build_roles(*ids: str) -> dict[str, RoleNode]:
    return {role_id: new_role(role_id) for role_id in ids}


@pytest.fixture
def chain() -> Chain:
    root = new_resource("root")
    parent = root
    nodes = []
    for resource_id in ("a", "b", "c", "d"):
        node = attach_child(parent, new_resource(resource_id))
        nodes.append(node)
        parent = node
    roles = build_roles("role")
    engine = AccessEngine(root, roles)
    return Chain(engine, root, *nodes, role=roles["role"])


@pytest.fixture
def fs() -> FileSystem:
    root = new_resource("root")
    folder = attach_child(root, new_resource("folder"))
    file = attach_child(folder, new_resource("file"))
    roles = build_roles("user", "admin")
    add_senior(roles["user"], roles["admin"])
    engine = AccessEngine(root, roles)
    return FileSystem(engine, root, folder, file, roles["user"], roles["admin"])
