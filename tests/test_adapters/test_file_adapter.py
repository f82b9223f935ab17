"""Tests for FileSystemAdapter implementation."""

from pathlib import Path
from unittest.mock import patch

import pytest

from droidship.adapters.file_adapter import FileSystemAdapter, create_file_adapter
from droidship.core.errors import DroidshipError, FileSystemError
from droidship.protocols import FileAdapterProtocol


class TestFileSystemAdapter:
    """Test FileSystemAdapter class."""

    def setup_method(self):
        self.adapter = FileSystemAdapter()

    def test_create_file_adapter(self):
        adapter = create_file_adapter()
        assert isinstance(adapter, FileSystemAdapter)
        assert isinstance(adapter, FileAdapterProtocol)

    def test_is_file_is_dir(self, tmp_path: Path):
        file_path = tmp_path / "file.txt"
        file_path.write_text("x")

        assert self.adapter.is_file(file_path)
        assert not self.adapter.is_dir(file_path)
        assert self.adapter.is_dir(tmp_path)
        assert not self.adapter.is_dir(tmp_path / "missing")

    def test_mkdir_creates_parents(self, tmp_path: Path):
        target = tmp_path / "a" / "b" / "c"

        self.adapter.mkdir(target)

        assert target.is_dir()

    def test_mkdir_permission_error(self, tmp_path: Path):
        with (
            patch("pathlib.Path.mkdir", side_effect=PermissionError("Permission denied")),
            pytest.raises(FileSystemError, match="File operation 'mkdir' failed"),
        ):
            self.adapter.mkdir(tmp_path / "denied")

    def test_list_directory(self, tmp_path: Path):
        (tmp_path / "a.txt").write_text("a")
        (tmp_path / "sub").mkdir()

        items = self.adapter.list_directory(tmp_path)

        assert sorted(p.name for p in items) == ["a.txt", "sub"]

    def test_list_directory_not_a_directory(self, tmp_path: Path):
        file_path = tmp_path / "file.txt"
        file_path.write_text("x")

        with pytest.raises(FileSystemError) as exc_info:
            self.adapter.list_directory(file_path)

        assert exc_info.value.operation == "list_directory"
        assert "Not a directory" in str(exc_info.value)

    def test_copy_file(self, tmp_path: Path):
        src = tmp_path / "src.aar"
        src.write_bytes(b"zipdata")
        dst = tmp_path / "nested" / "dst.zip"

        self.adapter.copy_file(src, dst)

        assert dst.read_bytes() == b"zipdata"
        assert src.exists()

    def test_copy_file_missing_source(self, tmp_path: Path):
        src = tmp_path / "missing.aar"

        with pytest.raises(FileSystemError) as exc_info:
            self.adapter.copy_file(src, tmp_path / "dst.zip")

        error = exc_info.value
        assert isinstance(error, DroidshipError)
        assert error.path == src
        assert isinstance(error.original, FileNotFoundError)
        assert isinstance(error.__cause__, FileNotFoundError)
        assert error.context["destination"] == str(tmp_path / "dst.zip")

    def test_copy_file_permission_error(self, tmp_path: Path):
        src = tmp_path / "src.aar"
        src.write_bytes(b"x")

        with (
            patch("shutil.copy2", side_effect=PermissionError("Permission denied")),
            pytest.raises(
                FileSystemError,
                match="File operation 'copy_file' failed on .*: Permission denied",
            ),
        ):
            self.adapter.copy_file(src, tmp_path / "dst.zip")
