from typing import Optional

from injector import Injector, Module, provider, singleton

from ..application.services.path_factory import PathFactory
from ..domain.value_objects.path_context import PathContext
from .container import Container, ContainerConfig


class PathModule(Module):

    def __init__(self, config: Optional[ContainerConfig] = None) -> None:
        self._config = config or ContainerConfig()

    @singleton
    @provider
    def provide_container(self) -> Container:
        return Container(self._config)

    @singleton
    @provider
    def provide_path_context(self, container: Container) -> PathContext:
        return container.path_context

    @singleton
    @provider
    def provide_path_factory(self, container: Container) -> PathFactory:
        return container.path_factory


class AppInjector:

    _instance: "AppInjector | None" = None

    def __init__(self, config: Optional[ContainerConfig] = None) -> None:
        self._module = PathModule(config=config)
        self._injector = Injector([self._module])
        self._container: Container | None = None

    @classmethod
    def get_instance(
        cls,
        config: Optional[ContainerConfig] = None,
    ) -> "AppInjector":
        if cls._instance is None:
            cls._instance = cls(config=config)
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        if cls._instance is not None:
            cls._instance.close()
            cls._instance = None

    def get(self, cls: type) -> object:
        return self._injector.get(cls)

    def get_container(self) -> Container:
        if self._container is None:
            self._container = self._injector.get(Container)
        return self._container

    def get_path_factory(self) -> PathFactory:
        self.get_container()
        return self._injector.get(PathFactory)

    def close(self) -> None:
        if self._container is not None:
            self._container.close()
            self._container = None


__all__ = ["AppInjector", "PathModule"]
