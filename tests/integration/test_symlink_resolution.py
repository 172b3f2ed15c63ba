import os

import pytest

from pathkit import FileSystemError, FileSystemErrorKind, create_container

class TestSymlinkResolution:

    @pytest.fixture
    def factory(self):
        return create_container().path_factory

    def test_relative_link_joins_containing_directory_and_parent(self, factory, temp_dir):
        os.makedirs(os.path.join(temp_dir, "a", "b"))
        link = os.path.join(temp_dir, "a", "b", "link")
        os.symlink("../target", link)

        # containing directory, "..", then the raw target; this is not the
        # location the OS follows, which would be temp_dir/a/target
        destination = factory.from_string(link).symlink_destination()

        assert destination.path == os.path.join(temp_dir, "a", "b", "..", "..", "target")
        assert destination.normalized.path == os.path.join(temp_dir, "target")

    def test_absolute_link(self, factory, temp_dir):
        target = os.path.join(temp_dir, "real.txt")
        open(target, "w").close()
        link = os.path.join(temp_dir, "alias")
        os.symlink(target, link)

        destination = factory.from_string(link).symlink_destination()

        assert destination.path == target
        assert destination.is_file is True

    def test_not_a_link(self, factory, temp_dir):
        with pytest.raises(FileSystemError) as exc_info:
            factory.from_string(temp_dir).symlink_destination()
        assert exc_info.value.kind == FileSystemErrorKind.NOT_A_SYMLINK

    def test_dangling_link_still_resolves(self, factory, temp_dir):
        link = os.path.join(temp_dir, "dangling")
        os.symlink("missing", link)

        destination = factory.from_string(link).symlink_destination()

        assert destination.exists is False
        assert destination.last_component == "missing"
