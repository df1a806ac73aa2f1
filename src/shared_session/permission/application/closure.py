"""Permission closure resolution.

The closure of a permission is the permission itself plus every ancestor the
hierarchy knowledge base reports for it. Closures are computed only on the
read path (authorization checks); grants and revocations never expand them.
"""

import logging
from typing import Iterable, List

from ..core.protocols import PermissionHierarchy
from ..core.value_objects import Permission

logger = logging.getLogger(__name__)


def _distinct(permissions: Iterable[Permission]) -> List[Permission]:
    """Deduplicate by semantic equality, keeping first-seen order."""
    return list(dict.fromkeys(permissions))


class PermissionClosureResolver:
    """Expands permissions into their ancestor closure.

    Pure with respect to the injected hierarchy: no caching, no mutable state,
    safe to share between concurrent callers.
    """

    def __init__(self, hierarchy: PermissionHierarchy):
        if hierarchy is None:
            raise ValueError("Permission hierarchy is required")
        self.hierarchy = hierarchy

    def ancestors_of(self, permission: Permission) -> List[Permission]:
        """Ancestors of a single permission, deduplicated."""
        return _distinct(self.hierarchy.ancestors_of(permission) or ())

    def ancestors_of_many(self, permissions: Iterable[Permission]) -> List[Permission]:
        """Union of the ancestors of every permission, without the inputs themselves."""
        ancestors: List[Permission] = []
        for permission in permissions:
            ancestors.extend(self.ancestors_of(permission))
        return _distinct(ancestors)

    def closure_of(self, permission: Permission) -> List[Permission]:
        """Permission followed by its ancestors.

        Args:
            permission: Requested permission

        Returns:
            Deduplicated closure; always starts with the requested permission
        """
        return _distinct([permission, *self.ancestors_of(permission)])

    def closure_of_many(self, permissions: Iterable[Permission]) -> List[Permission]:
        """Union of closures, always containing every requested permission.

        Args:
            permissions: Requested permissions

        Returns:
            Requested permissions first (input order), then their ancestors
        """
        requested = list(permissions)
        closure = _distinct([*requested, *self.ancestors_of_many(requested)])
        logger.debug(f"Resolved closure of {len(requested)} permissions to {len(closure)} entries")
        return closure
