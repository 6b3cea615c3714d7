"""Documents package initialization."""

from .products import Product
from .users import RoleRecord

__all__ = ["Product", "RoleRecord"]
