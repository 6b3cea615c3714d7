"""Users document package."""

from .RoleRecord import RoleRecord, parse_role

__all__ = ["RoleRecord", "parse_role"]
