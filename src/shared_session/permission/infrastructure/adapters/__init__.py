"""Permission infrastructure adapters."""

from .mapping_hierarchy_adapter import MappingPermissionHierarchy

__all__ = [
    "MappingPermissionHierarchy",
]
