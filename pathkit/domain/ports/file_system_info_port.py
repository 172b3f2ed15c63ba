from __future__ import annotations

import os
from abc import ABC, abstractmethod
from typing import Union

PathArg = Union[str, "os.PathLike[str]"]

class FileSystemInfoPort(ABC):

    @property
    @abstractmethod
    def path_separator(self) -> str:
        ...

    @abstractmethod
    def is_case_sensitive(self, path: PathArg) -> bool:
        """Best effort; only reliable when ``path`` exists."""
        ...
