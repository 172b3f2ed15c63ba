from dataclasses import dataclass
from enum import Enum
from typing import Optional

class QueryBackend(Enum):

    LOCAL = "local"
    IN_MEMORY = "in_memory"

@dataclass
class FileSystemConfig:

    separator: str = "/"
    case_sensitive: Optional[bool] = None

@dataclass
class QueryConfig:

    backend: QueryBackend = QueryBackend.LOCAL
    home_directory: Optional[str] = None
    current_directory: str = "/"

@dataclass
class ContainerConfig:

    file_system: FileSystemConfig = None
    query: QueryConfig = None

    def __post_init__(self) -> None:
        if self.file_system is None:
            self.file_system = FileSystemConfig()
        if self.query is None:
            self.query = QueryConfig()

    @classmethod
    def default(cls) -> "ContainerConfig":
        return cls()

    @classmethod
    def in_memory(
        cls,
        current_directory: str = "/",
        home_directory: str = "/home/user",
    ) -> "ContainerConfig":
        return cls(
            query=QueryConfig(
                backend=QueryBackend.IN_MEMORY,
                home_directory=home_directory,
                current_directory=current_directory,
            ),
        )
