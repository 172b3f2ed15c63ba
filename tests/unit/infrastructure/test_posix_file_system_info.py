import os

import pytest

from pathkit.domain.value_objects.path_value import PathValue
from pathkit.infrastructure.file_system import PosixFileSystemInfo

class TestPosixFileSystemInfo:

    def test_default_separator(self):
        assert PosixFileSystemInfo().path_separator == "/"

    def test_custom_separator(self):
        assert PosixFileSystemInfo(separator=":").path_separator == ":"

    def test_rejects_multi_character_separator(self):
        with pytest.raises(ValueError, match="single character"):
            PosixFileSystemInfo(separator="//")

    def test_override_wins(self):
        info = PosixFileSystemInfo(case_sensitive=False, system="Linux")
        assert info.is_case_sensitive("/tmp") is False

    def test_linux_assumed_case_sensitive(self):
        info = PosixFileSystemInfo(system="Linux")
        assert info.is_case_sensitive(PathValue("/does/not/exist")) is True

    def test_darwin_missing_path_defaults_insensitive(self):
        info = PosixFileSystemInfo(system="Darwin")
        assert info.is_case_sensitive("/definitely/missing/path") is False

    def test_darwin_probe_on_real_directory(self, temp_dir):
        target = os.path.join(temp_dir, "Probe")
        os.mkdir(target)
        info = PosixFileSystemInfo(system="Darwin")

        swapped_exists = os.path.exists(target.swapcase())
        assert info.is_case_sensitive(target) is (not swapped_exists)
