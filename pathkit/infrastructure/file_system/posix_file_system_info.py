import logging
import os
import platform
from typing import Optional

from ...domain.ports.file_system_info_port import FileSystemInfoPort, PathArg

logger = logging.getLogger(__name__)

class PosixFileSystemInfo(FileSystemInfoPort):

    def __init__(
        self,
        separator: str = "/",
        case_sensitive: Optional[bool] = None,
        system: Optional[str] = None,
    ) -> None:
        if len(separator) != 1:
            raise ValueError("Path separator must be a single character")
        self._separator = separator
        self._case_sensitive = case_sensitive
        self._system = system or platform.system()

    @property
    def path_separator(self) -> str:
        return self._separator

    def is_case_sensitive(self, path: PathArg) -> bool:
        if self._case_sensitive is not None:
            return self._case_sensitive

        # Only Darwin volumes are commonly case-insensitive.
        if self._system != "Darwin":
            return True

        return self._probe_case_sensitivity(os.fspath(path))

    def _probe_case_sensitivity(self, raw_path: str) -> bool:
        candidate = os.path.abspath(raw_path)
        if not os.path.exists(candidate):
            logger.debug(
                "Cannot probe case sensitivity of missing path %s", candidate
            )
            return False

        swapped = candidate.swapcase()
        if swapped == candidate:
            return False

        try:
            return not os.path.samefile(candidate, swapped)
        except OSError:
            return True
