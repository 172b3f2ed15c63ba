from unittest.mock import MagicMock

import pytest

from pathkit.application.services.path_factory import PathFactory
from pathkit.domain.ports.file_system_info_port import FileSystemInfoPort
from pathkit.domain.ports.path_query_port import PathQueryPort
from pathkit.domain.value_objects.path_context import MissingCapabilityError, PathContext
from pathkit.domain.value_objects.path_value import PathValue

class TestPathFactory:

    def test_from_string_binds_context(self, path_factory, path_context):
        p = path_factory.from_string("a/b")
        assert p.path == "a/b"
        assert p.context is path_context

    def test_from_optional(self, path_factory):
        assert path_factory.from_optional(None).path == ""
        assert path_factory.from_optional("x").path == "x"

    def test_from_components(self, path_factory):
        assert path_factory.from_components(["/", "etc", "hosts"]).path == "/etc/hosts"

    def test_current(self, path_factory):
        assert path_factory.current().path == "/work/project"

    def test_home(self, path_factory):
        assert path_factory.home().path == "/Users/alice"

    def test_current_uses_query(self, file_system_info):
        query = MagicMock(spec=PathQueryPort)
        query.current_directory.return_value = "/srv"
        factory = PathFactory(PathContext(file_system_info, query))

        assert factory.current().path == "/srv"
        query.current_directory.assert_called_once_with()

    def test_home_without_query_raises(self, file_system_info):
        factory = PathFactory(PathContext(file_system_info))
        with pytest.raises(MissingCapabilityError, match="home"):
            factory.home()

    def test_rebind(self, path_factory, path_context):
        unbound = PathValue("~/x")
        bound = path_factory.rebind(unbound)
        assert bound == unbound
        assert bound.context is path_context
        assert bound.normalized.path == "/Users/alice/x"

    def test_rebind_same_context_is_noop(self, path_factory):
        p = path_factory.from_string("a")
        assert path_factory.rebind(p) is p

class TestPathContext:

    def test_with_file_system_info_returns_copy(self, path_context):
        replacement = MagicMock(spec=FileSystemInfoPort)
        replacement.path_separator = ":"
        updated = path_context.with_file_system_info(replacement)

        assert updated.separator == ":"
        assert updated.query is path_context.query
        assert path_context.separator == "/"

    def test_with_query_returns_copy(self, path_context):
        replacement = MagicMock(spec=PathQueryPort)
        updated = path_context.with_query(replacement)
        assert updated.query is replacement
        assert path_context.query is not replacement
        assert updated.file_system_info is path_context.file_system_info

    def test_separator(self, path_context):
        assert path_context.separator == "/"

    def test_immutability(self, path_context):
        with pytest.raises(AttributeError):
            path_context.query = None
