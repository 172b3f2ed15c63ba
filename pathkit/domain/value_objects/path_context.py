from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from ..ports.file_system_info_port import FileSystemInfoPort
from ..ports.path_query_port import PathQueryPort

class MissingCapabilityError(RuntimeError):
    pass

@dataclass(frozen=True)
class PathContext:

    file_system_info: FileSystemInfoPort
    query: Optional[PathQueryPort] = None

    @property
    def separator(self) -> str:
        return self.file_system_info.path_separator

    def require_query(self, operation: str) -> PathQueryPort:
        if self.query is None:
            raise MissingCapabilityError(
                f"{operation} requires a path query capability"
            )
        return self.query

    def with_query(self, query: Optional[PathQueryPort]) -> PathContext:
        return replace(self, query=query)

    def with_file_system_info(
        self,
        file_system_info: FileSystemInfoPort,
    ) -> PathContext:
        return replace(self, file_system_info=file_system_info)
