"""Tests for files module."""

from __future__ import annotations

import os
import stat
from pathlib import Path

import pytest

from fskit.errors import NotDirectoryError, NotFoundError, NotRegularFileError
from fskit.files import (
    append_to_file,
    copy,
    create_file,
    file_exists,
    file_size,
    move_file,
    read_file,
    touch,
)
from fskit.types import CopyOutcome


class TestCreateFile:
    """Tests for create_file."""

    def test_creates_new_file(self, tmp_path: Path) -> None:
        """Test a missing file is created empty."""
        file_path = tmp_path / "new.txt"

        create_file(file_path)

        assert file_path.is_file()
        assert file_path.read_bytes() == b""

    def test_truncates_existing_file(self, tmp_path: Path) -> None:
        """Test an existing file is emptied."""
        file_path = tmp_path / "existing.txt"
        file_path.write_text("This is some initial content.")

        create_file(file_path, 0o644)

        assert file_path.read_bytes() == b""

    def test_applies_perms(self, tmp_path: Path) -> None:
        """Test a new file gets the requested permission bits."""
        file_path = tmp_path / "private.txt"

        create_file(file_path, 0o600)

        assert stat.S_IMODE(file_path.stat().st_mode) == 0o600


class TestTouch:
    """Tests for touch."""

    def test_creates_missing_file_and_parents(self, tmp_path: Path) -> None:
        """Test touch creates the file and any missing parent directories."""
        file_path = tmp_path / "a" / "b" / "new.txt"

        created = touch(file_path)

        assert created is True
        assert file_path.is_file()

    def test_updates_times_of_existing_file(self, tmp_path: Path) -> None:
        """Test touch refreshes timestamps without changing content."""
        file_path = tmp_path / "old.txt"
        file_path.write_text("keep")
        os.utime(file_path, (1_000_000, 1_000_000))

        created = touch(file_path)

        assert created is False
        assert file_path.stat().st_mtime > 1_000_000
        assert file_path.read_text() == "keep"


class TestAppendToFile:
    """Tests for append_to_file."""

    def test_appends_bytes(self, tmp_path: Path) -> None:
        """Test appending to existing content."""
        file_path = tmp_path / "append.txt"
        file_path.write_text("Initial content.\n")

        append_to_file(file_path, b"Appended content.\n")

        assert file_path.read_text() == "Initial content.\nAppended content.\n"

    def test_appends_text(self, tmp_path: Path) -> None:
        """Test text is encoded as UTF-8."""
        file_path = tmp_path / "append.txt"

        append_to_file(file_path, "héllo")

        assert file_path.read_bytes() == "héllo".encode("utf-8")


class TestReadAndSize:
    """Tests for read_file and file_size."""

    def test_read_file(self, tmp_path: Path) -> None:
        """Test reading the full content."""
        file_path = tmp_path / "read.txt"
        file_path.write_bytes(b"This is test content.\n")

        assert read_file(file_path) == b"This is test content.\n"

    def test_read_file_missing(self, tmp_path: Path) -> None:
        """Test reading a missing file raises NotFoundError."""
        with pytest.raises(NotFoundError):
            read_file(tmp_path / "missing.txt")

    def test_read_file_directory(self, tmp_path: Path) -> None:
        """Test reading a directory raises NotRegularFileError."""
        with pytest.raises(NotRegularFileError):
            read_file(tmp_path)

    def test_file_size(self, tmp_path: Path) -> None:
        """Test the size matches the written content."""
        file_path = tmp_path / "size.txt"
        content = b"This is test content.\n"
        file_path.write_bytes(content)

        assert file_size(file_path) == len(content)

    def test_file_size_missing(self, tmp_path: Path) -> None:
        """Test sizing a missing file raises NotFoundError."""
        with pytest.raises(NotFoundError):
            file_size(tmp_path / "missing.txt")


class TestFileExists:
    """Tests for file_exists."""

    def test_missing(self, tmp_path: Path) -> None:
        """Test a missing file does not exist."""
        assert file_exists(tmp_path / "test_exists.txt") is False

    def test_present(self, tmp_path: Path) -> None:
        """Test an existing file exists."""
        file_path = tmp_path / "test_exists.txt"
        file_path.touch()

        assert file_exists(file_path) is True

    def test_directory_is_not_a_file(self, tmp_path: Path) -> None:
        """Test a directory doesn't count as a file."""
        assert file_exists(tmp_path) is False


class TestMoveFile:
    """Tests for move_file."""

    def test_moves_file(self, tmp_path: Path) -> None:
        """Test the source disappears and the destination has its content."""
        src = tmp_path / "test_move_src.txt"
        src.write_text("This is test content.\n")
        dst = tmp_path / "test_move_dst.txt"

        move_file(src, dst)

        assert not src.exists()
        assert dst.read_text() == "This is test content.\n"

    def test_missing_source(self, tmp_path: Path) -> None:
        """Test moving a missing file raises NotFoundError."""
        with pytest.raises(NotFoundError):
            move_file(tmp_path / "missing.txt", tmp_path / "dst.txt")


class TestCopy:
    """Tests for the cp-like copy helper."""

    def test_copy_file_to_file(self, source_file: Path, tmp_path: Path) -> None:
        """Test copying onto an existing destination file."""
        dst = tmp_path / "destination_file.txt"
        dst.write_text("")

        target, outcome = copy(source_file, dst)

        assert target == dst
        assert outcome is CopyOutcome.STREAMED
        assert dst.read_text() == "This is the source file content."

    def test_copy_file_to_directory(self, source_file: Path, tmp_path: Path) -> None:
        """Test copying into a directory keeps the file name."""
        dst_dir = tmp_path / "destination_dir"
        dst_dir.mkdir()

        target, _ = copy(source_file, dst_dir)

        assert target == dst_dir / source_file.name
        assert target.read_text() == "This is the source file content."

    def test_copy_into_symlinked_directory(self, source_file: Path, tmp_path: Path) -> None:
        """Test a destination that links to a directory is copied into."""
        real = tmp_path / "real"
        real.mkdir()
        link = tmp_path / "link"
        link.symlink_to(real)

        target, _ = copy(source_file, link)

        assert target == link / source_file.name
        assert link.is_symlink()
        assert (real / source_file.name).read_text() == "This is the source file content."

    def test_copy_under_symlinked_parent(self, source_file: Path, tmp_path: Path) -> None:
        """Test a destination file whose parent is a link to a directory."""
        real = tmp_path / "real"
        real.mkdir()
        (tmp_path / "link").symlink_to(real)

        target, _ = copy(source_file, tmp_path / "link" / "renamed.txt")

        assert target == tmp_path / "link" / "renamed.txt"
        assert (real / "renamed.txt").read_text() == "This is the source file content."

    def test_copy_without_link(self, source_file: Path, tmp_path: Path) -> None:
        """Test link=False always streams."""
        _, outcome = copy(source_file, tmp_path / "copy.txt", link=False)

        assert outcome is CopyOutcome.STREAMED

    def test_source_missing(self, tmp_path: Path) -> None:
        """Test a missing source raises NotFoundError."""
        with pytest.raises(NotFoundError):
            copy(tmp_path / "nonexistent_file.txt", tmp_path / "destination.txt")

    def test_destination_directory_missing(self, source_file: Path, tmp_path: Path) -> None:
        """Test a missing destination parent raises NotFoundError."""
        dst = tmp_path / "nonexistent" / "destination" / "file.txt"

        with pytest.raises(NotFoundError) as exc_info:
            copy(source_file, dst)

        assert exc_info.value.path == dst.parent

    def test_destination_parent_is_file(self, source_file: Path, tmp_path: Path) -> None:
        """Test a regular file as the destination parent raises NotDirectoryError."""
        blocker = tmp_path / "blocker"
        blocker.touch()

        with pytest.raises(NotDirectoryError):
            copy(source_file, blocker / "file.txt")
