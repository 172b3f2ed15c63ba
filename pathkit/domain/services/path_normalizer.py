from __future__ import annotations

import re
from typing import List, Optional

DEFAULT_SEPARATOR = "/"

TILDE = "~"
CURRENT_SEGMENT = "."
PARENT_SEGMENT = ".."

_EXTENSION_PATTERN = re.compile(r"\.[a-zA-Z0-9_-]+$")

class PathNormalizer:
    """Pure string algebra over separator-delimited paths.

    Nothing here touches the filesystem. Callers that want tilde expansion
    look up the home directory themselves and pass it in; without one a
    leading ``~`` is kept as an ordinary segment.

    A relative path whose segments all cancel collapses to ``"."`` rather
    than to the empty string, so the result is always a usable path. Only
    the empty path itself normalizes to ``""``.
    """

    def __init__(self, separator: str = DEFAULT_SEPARATOR) -> None:
        if not separator:
            raise ValueError("Path separator cannot be empty")
        self._separator = separator

    @property
    def separator(self) -> str:
        return self._separator

    def has_leading_tilde(self, path: str) -> bool:
        return path == TILDE or path.startswith(TILDE + self._separator)

    def expand_tilde(self, path: str, home: str) -> str:
        if not self.has_leading_tilde(path):
            return path
        return home + path[len(TILDE):]

    def collapse(self, path: str) -> str:
        if not path:
            return ""

        sep = self._separator
        absolute = path.startswith(sep)
        stack: List[str] = []

        for segment in path.split(sep):
            if segment in ("", CURRENT_SEGMENT):
                continue
            if segment == PARENT_SEGMENT:
                if stack and stack[-1] != PARENT_SEGMENT:
                    stack.pop()
                elif not absolute:
                    stack.append(segment)
                # ".." directly under the root stays at the root
                continue
            stack.append(segment)

        body = sep.join(stack)
        if absolute:
            return sep + body
        return body or CURRENT_SEGMENT

    def needs_home(self, path: str) -> bool:
        return (
            self.has_leading_tilde(path)
            or self.has_leading_tilde(self.collapse(path))
        )

    def normalize(self, path: str, home: Optional[str] = None) -> str:
        if home is None:
            return self.collapse(path)

        collapsed = self.collapse(self.expand_tilde(path, home))
        # "./~/x" and "a/../~" only expose their tilde after collapsing
        if self.has_leading_tilde(collapsed):
            collapsed = self.collapse(self.expand_tilde(collapsed, home))
        return collapsed

    def split(self, path: str) -> List[str]:
        if not path:
            return []

        sep = self._separator
        components: List[str] = []
        if path.startswith(sep):
            components.append(sep)
        # absolute paths keep the empty segment in front of the first separator
        components.extend(path.split(sep))
        return components

    def join_components(self, components: List[str]) -> str:
        sep = self._separator
        if not components:
            return ""

        joined = sep.join(components)
        if components[0] == sep and len(components) > 1:
            return joined[:len(sep)] + joined[2 * len(sep):]
        return joined

    def join(self, left: str, right: str) -> str:
        sep = self._separator
        if not left:
            return right
        if not right:
            return left
        if right.startswith(sep):
            return right
        if left.endswith(sep):
            return left + right
        return left + sep + right

    def parent(self, path: str) -> str:
        sep = self._separator
        trimmed = path.rstrip(sep)
        if not trimmed:
            return sep if path.startswith(sep) else CURRENT_SEGMENT

        head, found, _ = trimmed.rpartition(sep)
        if not found:
            return CURRENT_SEGMENT
        return head.rstrip(sep) or sep

    def extension(self, path: str) -> Optional[str]:
        last = path.rstrip(self._separator).rpartition(self._separator)[2]
        _, dot, suffix = last.rpartition(".")
        if not dot or not suffix:
            return None
        return suffix

    def delete_extension(self, value: str) -> str:
        if value == PARENT_SEGMENT:
            return CURRENT_SEGMENT
        match = _EXTENSION_PATTERN.search(value)
        if match is None:
            return value
        return value[:match.start()]
