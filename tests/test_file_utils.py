"""Tests for file utilities."""

from pathlib import Path

from seqkit.core.config import SearchConfig
from seqkit.io.file_utils import FileUtils


def _touch(root: Path, *names: str) -> None:
    for name in names:
        path = root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.touch()


class TestFileUtils:
    """Tests for FileUtils."""

    def test_find_files_recursive(self, tmp_path: Path) -> None:
        """Test recursive search returns sorted absolute file paths."""
        _touch(tmp_path, "b.0001.exr", "a.0001.exr", "sub/c.0001.exr")

        files = FileUtils.find_files(SearchConfig(root=str(tmp_path)))

        assert files == [
            str(tmp_path / "a.0001.exr"),
            str(tmp_path / "b.0001.exr"),
            str(tmp_path / "sub" / "c.0001.exr"),
        ]

    def test_find_files_not_recursive(self, tmp_path: Path) -> None:
        _touch(tmp_path, "a.0001.exr", "sub/c.0001.exr")

        files = FileUtils.find_files(SearchConfig(root=str(tmp_path), recurse=False))

        assert files == [str(tmp_path / "a.0001.exr")]

    def test_include_and_exclude(self, tmp_path: Path) -> None:
        _touch(tmp_path, "a.0001.exr", "a.0001.png", "a_tmp.0001.exr")

        config = SearchConfig(root=str(tmp_path), include=["*.exr"], exclude=["*_tmp*"])
        files = FileUtils.find_files(config)

        assert files == [str(tmp_path / "a.0001.exr")]

    def test_directories_are_skipped(self, tmp_path: Path) -> None:
        (tmp_path / "dir.0001.exr").mkdir()

        assert FileUtils.find_files(SearchConfig(root=str(tmp_path))) == []

    def test_missing_root(self, tmp_path: Path) -> None:
        assert FileUtils.find_files(SearchConfig(root=str(tmp_path / "missing"))) == []

    def test_ensure_directory(self, tmp_path: Path) -> None:
        """Test directory creation."""
        new_dir = tmp_path / "new" / "nested" / "directory"
        FileUtils.ensure_directory(new_dir)

        assert new_dir.exists()
        assert new_dir.is_dir()

    def test_validate_output_path(self, tmp_path: Path) -> None:
        """Test output path validation."""
        output_file = tmp_path / "output" / "test.mp4"

        # Should create directory and return True
        assert FileUtils.validate_output_path(output_file, overwrite=False) is True
        assert output_file.parent.exists()

        # Create file and test overwrite
        output_file.write_text("test")
        assert FileUtils.validate_output_path(output_file, overwrite=True) is True
        assert FileUtils.validate_output_path(output_file, overwrite=False) is False
