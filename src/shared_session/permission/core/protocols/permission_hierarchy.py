"""Permission hierarchy protocol contract."""

from typing import AbstractSet, Protocol, runtime_checkable

from ..value_objects import Permission


@runtime_checkable
class PermissionHierarchy(Protocol):
    """Read-only knowledge base of coarser permissions implying finer ones.
    
    The hierarchy is a DAG: permissions are leaves and coarser rights are
    ancestors. Lookups must be pure and deterministic.
    """
    
    def ancestors_of(self, permission: Permission) -> AbstractSet[Permission]:
        """Return every ancestor of the permission, possibly empty."""
        ...
