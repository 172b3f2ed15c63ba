from .path_context import MissingCapabilityError, PathContext
from .path_value import PathValue

__all__ = [
    "PathValue",
    "PathContext",
    "MissingCapabilityError",
]
