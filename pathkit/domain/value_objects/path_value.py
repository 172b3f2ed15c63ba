from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Union
from urllib.parse import quote

from ..ports.path_query_port import PathQueryPort
from ..services.path_normalizer import DEFAULT_SEPARATOR, TILDE, PARENT_SEGMENT, PathNormalizer
from .path_context import MissingCapabilityError, PathContext

PathLike = Union[str, "PathValue"]

@dataclass
class PathValue:
    """A filesystem path held as its raw string.

    Equality and hashing use the raw string only, so ``"a/./b"`` and
    ``"a/b"`` are different values until one of them is normalized.
    Transformations return new instances that share this instance's
    context. ``normalize()`` is the one in-place operation.
    """

    path: str = ""
    context: Optional[PathContext] = field(default=None, compare=False, repr=False)

    @classmethod
    def from_string(
        cls,
        path: str,
        context: Optional[PathContext] = None,
    ) -> PathValue:
        return cls(path=path, context=context)

    @classmethod
    def from_optional(
        cls,
        path: Optional[str],
        context: Optional[PathContext] = None,
    ) -> PathValue:
        return cls(path=path if path is not None else "", context=context)

    @classmethod
    def from_components(
        cls,
        components: Iterable[str],
        context: Optional[PathContext] = None,
    ) -> PathValue:
        separator = context.separator if context is not None else DEFAULT_SEPARATOR
        joined = PathNormalizer(separator).join_components(list(components))
        return cls(path=joined, context=context)

    @property
    def string(self) -> str:
        return self.path

    @property
    def separator(self) -> str:
        if self.context is None:
            return DEFAULT_SEPARATOR
        return self.context.separator

    @property
    def is_absolute(self) -> bool:
        return self.path.startswith(self.separator)

    @property
    def is_relative(self) -> bool:
        return not self.is_absolute

    @property
    def normalized(self) -> PathValue:
        normalizer = self._normalizer()
        home = None
        if normalizer.needs_home(self.path):
            home = self._home_directory()
        return self._derive(normalizer.normalize(self.path, home))

    def normalize(self) -> None:
        self.path = self.normalized.path

    @property
    def absolute(self) -> PathValue:
        normalized = self.normalized
        if normalized.is_absolute:
            return normalized

        current = self._derive(self._query("absolute").current_directory())
        return current.joined(normalized).normalized

    @property
    def abbreviated(self) -> PathValue:
        home = self._query("abbreviated").home_directory()
        if not home:
            return self

        prefix = self.path[:len(home)]
        if self.context.file_system_info.is_case_sensitive(self):
            matched = prefix == home
        else:
            matched = prefix.lower() == home.lower()
        if not matched:
            return self

        remainder = self.path[len(home):]
        if not remainder or remainder == self.separator:
            return self._derive(TILDE)
        if remainder.startswith(self.separator):
            return self._derive(TILDE + remainder)
        return self._derive(TILDE).joined(remainder)

    @property
    def components(self) -> List[str]:
        return self._normalizer().split(self.path)

    @property
    def last_component(self) -> Optional[str]:
        components = self.components
        if not components:
            return None
        return components[-1]

    @property
    def last_component_without_extension(self) -> Optional[str]:
        return self.deleting_extension(self.last_component)

    @property
    def extension(self) -> Optional[str]:
        return self._normalizer().extension(self.path)

    @property
    def deleting_path_extension(self) -> str:
        return self._normalizer().delete_extension(self.path)

    def deleting_extension(self, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return self._normalizer().delete_extension(value)

    @property
    def parent(self) -> PathValue:
        return self._derive(self._normalizer().parent(self.path))

    def joined(self, *others: PathLike) -> PathValue:
        normalizer = self._normalizer()
        result = self.path
        for other in others:
            result = normalizer.join(result, _raw(other))
        return self._derive(result)

    def symlink_destination(self) -> PathValue:
        target = self._derive(self._query("symlink_destination").symlink_target(self))
        if target.is_relative:
            return self.parent.joined(PARENT_SEGMENT, target)
        return target

    @property
    def exists(self) -> bool:
        return self._query("exists").exists(self)

    @property
    def is_directory(self) -> bool:
        return self._query("is_directory").is_directory(self)

    @property
    def is_file(self) -> bool:
        return self._query("is_file").is_file(self)

    @property
    def url(self) -> str:
        absolute = self.absolute
        url = "file://" + quote(absolute.path)
        if not url.endswith("/") and absolute.is_directory:
            url += "/"
        return url

    def _normalizer(self) -> PathNormalizer:
        return PathNormalizer(self.separator)

    def _query(self, operation: str) -> PathQueryPort:
        if self.context is None:
            raise MissingCapabilityError(
                f"{operation} requires a path bound to a PathContext"
            )
        return self.context.require_query(operation)

    def _home_directory(self) -> Optional[str]:
        if self.context is None or self.context.query is None:
            return None
        return self.context.query.home_directory()

    def _derive(self, path: str) -> PathValue:
        return PathValue(path=path, context=self.context)

    def __add__(self, other: PathLike) -> PathValue:
        if not isinstance(other, (str, PathValue)):
            return NotImplemented
        return self.joined(other)

    def __radd__(self, other: str) -> PathValue:
        if not isinstance(other, str):
            return NotImplemented
        return self._derive(other).joined(self)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PathValue):
            return self.path == other.path
        if isinstance(other, str):
            return self.path == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.path)

    def __fspath__(self) -> str:
        return self.path

    def __str__(self) -> str:
        return self.path

def _raw(value: PathLike) -> str:
    if isinstance(value, PathValue):
        return value.path
    return value
