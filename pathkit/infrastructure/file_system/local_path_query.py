import logging
import os
from typing import Optional

from ...domain.ports.file_system_info_port import PathArg
from ...domain.ports.path_query_port import FileSystemError, PathQueryPort

logger = logging.getLogger(__name__)

class LocalPathQuery(PathQueryPort):

    def __init__(self, home_directory: Optional[str] = None) -> None:
        self._home_directory = home_directory

    def exists(self, path: PathArg) -> bool:
        return os.path.exists(path)

    def is_directory(self, path: PathArg) -> bool:
        return os.path.isdir(path)

    def is_file(self, path: PathArg) -> bool:
        return os.path.isfile(path)

    def current_directory(self) -> str:
        return os.getcwd()

    def home_directory(self) -> str:
        if self._home_directory is not None:
            return self._home_directory
        return os.path.expanduser("~")

    def symlink_target(self, path: PathArg) -> str:
        raw_path = os.fspath(path)
        try:
            return os.readlink(raw_path)
        except OSError as err:
            logger.debug("readlink failed for %s: %s", raw_path, err)
            raise FileSystemError.from_os_error(raw_path, err) from err
