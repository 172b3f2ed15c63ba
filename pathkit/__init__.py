from .application.services.path_factory import PathFactory
from .domain.ports.path_query_port import FileSystemError, FileSystemErrorKind
from .domain.value_objects.path_context import MissingCapabilityError, PathContext
from .domain.value_objects.path_value import PathValue
from .infrastructure.container import Container, ContainerConfig, create_container

__all__ = [
    "PathValue",
    "PathContext",
    "PathFactory",
    "FileSystemError",
    "FileSystemErrorKind",
    "MissingCapabilityError",
    "Container",
    "ContainerConfig",
    "create_container",
]

__version__ = "0.1.0"
