from .file_system_info_port import FileSystemInfoPort, PathArg
from .path_query_port import FileSystemError, FileSystemErrorKind, PathQueryPort

__all__ = [
    "FileSystemInfoPort",
    "PathQueryPort",
    "FileSystemError",
    "FileSystemErrorKind",
    "PathArg",
]
