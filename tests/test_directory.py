"""Tests for the directory state probe (infra/directory.py).

Uses ``tmp_path`` only; permission failures are simulated by mocking
:func:`os.listdir`.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

from create_compute.core.models import DirectoryStatus
from create_compute.infra.directory import get_directory_status


class TestGetDirectoryStatus:
    def test_missing_path_is_available(self, tmp_path: Path) -> None:
        assert get_directory_status(str(tmp_path / "new-app")) is DirectoryStatus.AVAILABLE

    def test_empty_directory(self, tmp_path: Path) -> None:
        target = tmp_path / "app"
        target.mkdir()
        assert get_directory_status(str(target)) is DirectoryStatus.EMPTY

    def test_regular_file_is_not_directory(self, tmp_path: Path) -> None:
        target = tmp_path / "fastly.toml"
        target.write_text("name = 'x'\n")
        assert get_directory_status(str(target)) is DirectoryStatus.NOT_DIRECTORY

    def test_directory_with_file_is_not_empty(self, tmp_path: Path) -> None:
        (tmp_path / "package.json").write_text("{}")
        assert get_directory_status(str(tmp_path)) is DirectoryStatus.NOT_EMPTY

    @patch("create_compute.infra.directory.os.listdir", side_effect=PermissionError("denied"))
    def test_permission_error_is_other_error(self, _mock_listdir: object) -> None:
        assert get_directory_status("/root/secret") is DirectoryStatus.OTHER_ERROR
