from __future__ import annotations

import errno
from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict, Optional

from .file_system_info_port import PathArg

class FileSystemErrorKind(Enum):

    NOT_FOUND = "not_found"
    NOT_A_SYMLINK = "not_a_symlink"
    PERMISSION_DENIED = "permission_denied"
    IO_ERROR = "io_error"

_ERRNO_KINDS: Dict[int, FileSystemErrorKind] = {
    errno.ENOENT: FileSystemErrorKind.NOT_FOUND,
    errno.ENOTDIR: FileSystemErrorKind.NOT_FOUND,
    errno.EINVAL: FileSystemErrorKind.NOT_A_SYMLINK,
    errno.EACCES: FileSystemErrorKind.PERMISSION_DENIED,
    errno.EPERM: FileSystemErrorKind.PERMISSION_DENIED,
}

class FileSystemError(Exception):

    def __init__(
        self,
        kind: FileSystemErrorKind,
        path: str,
        message: Optional[str] = None,
    ) -> None:
        self.kind = kind
        self.path = path
        self.message = message or f"{kind.value.replace('_', ' ')}: {path}"
        super().__init__(self.message)

    @classmethod
    def from_os_error(cls, path: str, err: OSError) -> FileSystemError:
        kind = _ERRNO_KINDS.get(err.errno, FileSystemErrorKind.IO_ERROR)
        detail = err.strerror or str(err)
        return cls(kind, path, f"{detail}: {path}")

class PathQueryPort(ABC):

    @abstractmethod
    def exists(self, path: PathArg) -> bool:
        ...

    @abstractmethod
    def is_directory(self, path: PathArg) -> bool:
        ...

    @abstractmethod
    def is_file(self, path: PathArg) -> bool:
        ...

    @abstractmethod
    def current_directory(self) -> str:
        ...

    @abstractmethod
    def home_directory(self) -> str:
        ...

    @abstractmethod
    def symlink_target(self, path: PathArg) -> str:
        """Return the raw, unresolved link target.

        Raises:
            FileSystemError: ``path`` is missing, not a link, or unreadable.
        """
        ...
