"""Resource and Role Hierarchy Based Access Control (RRBAC)."""

from rrbac.config import settings
from rrbac.core.engine import AccessEngine
from rrbac.core.models import PolicySnapshot, ResourceState, RoleState
from rrbac.core.resource import ResourceNode, attach_child, new_resource
from rrbac.core.role import RoleNode, add_senior, new_role
from rrbac.exceptions import HierarchyError, NotFoundError, RRBACError
from rrbac.logging_config import setup_logging

__version__ = "0.1.0"

__all__ = [
    "AccessEngine",
    "HierarchyError",
    "NotFoundError",
    "PolicySnapshot",
    "RRBACError",
    "ResourceNode",
    "ResourceState",
    "RoleNode",
    "RoleState",
    "add_senior",
    "attach_child",
    "new_resource",
    "new_role",
    "settings",
    "setup_logging",
]
