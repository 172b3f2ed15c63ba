import os
import tempfile
from typing import Generator

import pytest

from pathkit.application.services.path_factory import PathFactory
from pathkit.domain.value_objects.path_context import PathContext
from pathkit.infrastructure.file_system import InMemoryPathQuery, PosixFileSystemInfo

@pytest.fixture
def temp_dir() -> Generator[str, None, None]:
    with tempfile.TemporaryDirectory() as tmpdir:
        yield os.path.realpath(tmpdir)

@pytest.fixture
def file_system_info() -> PosixFileSystemInfo:
    return PosixFileSystemInfo(case_sensitive=True)

@pytest.fixture
def memory_query() -> InMemoryPathQuery:
    return InMemoryPathQuery(
        current_directory="/work/project",
        home_directory="/Users/alice",
        files=["/Users/alice/docs/report.txt", "/a/b/target"],
        directories=["/work/project", "/Users/alice/docs"],
        symlinks={
            "/a/b/link": "../target",
            "/a/b/absolute_link": "/etc/hosts",
        },
    )

@pytest.fixture
def path_context(
    file_system_info: PosixFileSystemInfo,
    memory_query: InMemoryPathQuery,
) -> PathContext:
    return PathContext(file_system_info=file_system_info, query=memory_query)

@pytest.fixture
def path_factory(path_context: PathContext) -> PathFactory:
    return PathFactory(path_context)
