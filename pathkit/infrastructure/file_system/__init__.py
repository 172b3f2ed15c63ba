from .in_memory_path_query import InMemoryPathQuery
from .local_path_query import LocalPathQuery
from .posix_file_system_info import PosixFileSystemInfo

__all__ = [
    "InMemoryPathQuery",
    "LocalPathQuery",
    "PosixFileSystemInfo",
]
