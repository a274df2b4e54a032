"""Exception hierarchy for rrbac.

Permission assignment and access checks are total over well-formed
hierarchies; these errors only signal structural misuse or unknown ids.
"""

from __future__ import annotations


class RRBACError(Exception):
    """Base exception for all rrbac errors."""

    error_type: str = "rrbac_error"

    def __init__(self, message: str = "An access control error occurred") -> None:
        self.message = message
        super().__init__(message)


class HierarchyError(RRBACError):
    """Resource tree structural violation (re-parenting or a cycle)."""

    error_type = "hierarchy_error"


class NotFoundError(RRBACError):
    """No role or resource with the requested id."""

    error_type = "not_found"
