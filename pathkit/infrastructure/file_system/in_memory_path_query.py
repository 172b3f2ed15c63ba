import os
from typing import Dict, Iterable, Optional, Set

from ...domain.ports.file_system_info_port import PathArg
from ...domain.ports.path_query_port import (
    FileSystemError,
    FileSystemErrorKind,
    PathQueryPort,
)

class InMemoryPathQuery(PathQueryPort):
    """Dictionary-backed filesystem view.

    Entries are matched on their exact spelling; callers normalize paths
    before registering or querying them. Registering an entry also
    registers its parent directories.
    """

    def __init__(
        self,
        current_directory: str = "/",
        home_directory: str = "/home/user",
        files: Iterable[str] = (),
        directories: Iterable[str] = (),
        symlinks: Optional[Dict[str, str]] = None,
        separator: str = "/",
    ) -> None:
        self._separator = separator
        self._current_directory = current_directory
        self._home_directory = home_directory
        self._files: Set[str] = set()
        self._directories: Set[str] = set()
        self._symlinks: Dict[str, str] = {}
        self._unreadable: Set[str] = set()

        for directory in directories:
            self.add_directory(directory)
        for file_path in files:
            self.add_file(file_path)
        for link, target in (symlinks or {}).items():
            self.add_symlink(link, target)

    def add_file(self, path: str) -> None:
        self._files.add(path)
        self._register_parents(path)

    def add_directory(self, path: str) -> None:
        self._directories.add(path)
        self._register_parents(path)

    def add_symlink(self, path: str, target: str) -> None:
        self._symlinks[path] = target
        self._register_parents(path)

    def deny_access(self, path: str) -> None:
        self._unreadable.add(path)

    def change_directory(self, path: str) -> None:
        if path not in self._directories:
            raise FileSystemError(FileSystemErrorKind.NOT_FOUND, path)
        self._current_directory = path

    def exists(self, path: PathArg) -> bool:
        key = os.fspath(path)
        return (
            key in self._files
            or key in self._directories
            or key in self._symlinks
        )

    def is_directory(self, path: PathArg) -> bool:
        return os.fspath(path) in self._directories

    def is_file(self, path: PathArg) -> bool:
        return os.fspath(path) in self._files

    def current_directory(self) -> str:
        return self._current_directory

    def home_directory(self) -> str:
        return self._home_directory

    def symlink_target(self, path: PathArg) -> str:
        key = os.fspath(path)
        if key in self._unreadable:
            raise FileSystemError(FileSystemErrorKind.PERMISSION_DENIED, key)
        if key in self._symlinks:
            return self._symlinks[key]
        if self.exists(key):
            raise FileSystemError(FileSystemErrorKind.NOT_A_SYMLINK, key)
        raise FileSystemError(FileSystemErrorKind.NOT_FOUND, key)

    def _register_parents(self, path: str) -> None:
        sep = self._separator
        head = path.rstrip(sep)
        while sep in head:
            head = head.rpartition(sep)[0]
            if not head:
                if path.startswith(sep):
                    self._directories.add(sep)
                return
            self._directories.add(head)
