"""GraphQL interface."""

from .context import Context, get_context
from .schema import schema

__all__ = ["Context", "get_context", "schema"]
