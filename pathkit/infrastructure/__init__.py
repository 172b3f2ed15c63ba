from .container import Container, ContainerConfig, create_container
from .file_system import InMemoryPathQuery, LocalPathQuery, PosixFileSystemInfo

__all__ = [
    "Container",
    "ContainerConfig",
    "create_container",
    "InMemoryPathQuery",
    "LocalPathQuery",
    "PosixFileSystemInfo",
]
