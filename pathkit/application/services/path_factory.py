import logging
from typing import Iterable, Optional

from ...domain.value_objects.path_context import PathContext
from ...domain.value_objects.path_value import PathValue

logger = logging.getLogger(__name__)

class PathFactory:

    def __init__(self, context: PathContext) -> None:
        self._context = context

    @property
    def context(self) -> PathContext:
        return self._context

    def from_string(self, path: str) -> PathValue:
        return PathValue.from_string(path, self._context)

    def from_optional(self, path: Optional[str]) -> PathValue:
        return PathValue.from_optional(path, self._context)

    def from_components(self, components: Iterable[str]) -> PathValue:
        return PathValue.from_components(components, self._context)

    def current(self) -> PathValue:
        query = self._context.require_query("current")
        return self.from_string(query.current_directory())

    def home(self) -> PathValue:
        query = self._context.require_query("home")
        return self.from_string(query.home_directory())

    def rebind(self, path: PathValue) -> PathValue:
        if path.context is self._context:
            return path
        logger.debug("Rebinding path %r to factory context", path.path)
        return PathValue(path=path.path, context=self._context)
