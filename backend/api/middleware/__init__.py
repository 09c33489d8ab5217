"""Request authentication dependencies."""

from .session import OptionalCaller, RequireCaller, get_caller, require_caller

__all__ = ["OptionalCaller", "RequireCaller", "get_caller", "require_caller"]
