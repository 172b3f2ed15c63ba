from .config import (
    ContainerConfig,
    FileSystemConfig,
    QueryBackend,
    QueryConfig,
)
from .main import Container, create_container

__all__ = [
    "Container",
    "create_container",
    "ContainerConfig",
    "FileSystemConfig",
    "QueryConfig",
    "QueryBackend",
]
