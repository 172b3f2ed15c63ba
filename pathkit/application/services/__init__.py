from .path_factory import PathFactory

__all__ = [
    "PathFactory",
]
