import logging
from typing import Optional

from ...application.services.path_factory import PathFactory
from ...domain.ports.file_system_info_port import FileSystemInfoPort
from ...domain.ports.path_query_port import PathQueryPort
from ...domain.value_objects.path_context import PathContext
from ..file_system import InMemoryPathQuery, LocalPathQuery, PosixFileSystemInfo
from .config import ContainerConfig, QueryBackend

logger = logging.getLogger(__name__)

class Container:

    def __init__(self, config: Optional[ContainerConfig] = None) -> None:
        self._config = config or ContainerConfig()

        self._file_system_info: Optional[FileSystemInfoPort] = None
        self._path_query: Optional[PathQueryPort] = None
        self._path_context: Optional[PathContext] = None
        self._path_factory: Optional[PathFactory] = None

    @property
    def config(self) -> ContainerConfig:
        return self._config

    @property
    def file_system_info(self) -> FileSystemInfoPort:
        if self._file_system_info is None:
            fs_cfg = self._config.file_system
            self._file_system_info = PosixFileSystemInfo(
                separator=fs_cfg.separator,
                case_sensitive=fs_cfg.case_sensitive,
            )
            logger.debug("Initialized file system info")
        return self._file_system_info

    @property
    def path_query(self) -> PathQueryPort:
        if self._path_query is None:
            query_cfg = self._config.query
            if query_cfg.backend == QueryBackend.IN_MEMORY:
                self._path_query = InMemoryPathQuery(
                    current_directory=query_cfg.current_directory,
                    home_directory=query_cfg.home_directory or "/home/user",
                    separator=self._config.file_system.separator,
                )
            else:
                self._path_query = LocalPathQuery(
                    home_directory=query_cfg.home_directory,
                )
            logger.debug("Initialized %s path query", query_cfg.backend.value)
        return self._path_query

    @property
    def path_context(self) -> PathContext:
        if self._path_context is None:
            self._path_context = PathContext(
                file_system_info=self.file_system_info,
                query=self.path_query,
            )
            logger.debug("Initialized path context")
        return self._path_context

    @property
    def path_factory(self) -> PathFactory:
        if self._path_factory is None:
            self._path_factory = PathFactory(self.path_context)
            logger.debug("Initialized path factory")
        return self._path_factory

    def close(self) -> None:
        self._path_factory = None
        self._path_context = None
        self._path_query = None
        self._file_system_info = None

        logger.info("Container resources closed")

    def __enter__(self) -> "Container":
        return self

    def __exit__(self, exc_type, exc_val, _exc_tb) -> bool:
        self.close()
        return False

def create_container(
    separator: str = "/",
    case_sensitive: Optional[bool] = None,
    home_directory: Optional[str] = None,
    in_memory: bool = False,
    current_directory: str = "/",
) -> Container:
    from .config import FileSystemConfig, QueryConfig

    config = ContainerConfig(
        file_system=FileSystemConfig(
            separator=separator,
            case_sensitive=case_sensitive,
        ),
        query=QueryConfig(
            backend=QueryBackend.IN_MEMORY if in_memory else QueryBackend.LOCAL,
            home_directory=home_directory,
            current_directory=current_directory,
        ),
    )

    return Container(config)
