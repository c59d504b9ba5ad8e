"""Tests for source context extraction."""

from debugbar.exceptions import read_surrounding_lines


class TestReadSurroundingLines:
    """Tests for read_surrounding_lines()."""

    def test_centered_window(self, source_file):
        """Test 3 lines before and after the failing line."""
        path = source_file(100)
        lines = read_surrounding_lines(str(path), 50)

        assert lines == [f"line {i}\n" for i in range(47, 54)]

    def test_clipped_at_file_start(self, source_file):
        """Test a failing line near the top of a short file."""
        path = source_file(4)
        lines = read_surrounding_lines(str(path), 2)

        assert lines == ["line 1\n", "line 2\n", "line 3\n", "line 4\n"]

    def test_window_start_clipped_keeps_seven_lines(self, source_file):
        """Test that clipping the start does not shrink the 7-line window."""
        path = source_file(20)
        lines = read_surrounding_lines(str(path), 2)

        assert lines == [f"line {i}\n" for i in range(1, 8)]

    def test_clipped_at_file_end(self, source_file):
        """Test a failing line near the bottom."""
        path = source_file(100)
        lines = read_surrounding_lines(str(path), 99)

        assert lines == [f"line {i}\n" for i in range(96, 101)]

    def test_first_line(self, source_file):
        """Test a failing first line."""
        path = source_file(3)
        assert read_surrounding_lines(str(path), 1)[0] == "line 1\n"

    def test_missing_file(self, tmp_path):
        """Test the fallback for a file that does not exist."""
        path = tmp_path / "gone.py"
        lines = read_surrounding_lines(str(path), 10)

        assert lines == [f"Cannot open the file ({path}) in which the exception occurred"]

    def test_empty_path(self):
        """Test the fallback for an exception without a file."""
        assert read_surrounding_lines("", 0) == [
            "Cannot open the file () in which the exception occurred"
        ]

    def test_directory_path(self, tmp_path):
        """Test the fallback when the path is not a regular file."""
        lines = read_surrounding_lines(str(tmp_path), 1)
        assert lines[0].startswith("Cannot open the file")

    def test_undecodable_bytes_replaced(self, tmp_path):
        """Test that invalid UTF-8 does not abort extraction."""
        path = tmp_path / "latin.py"
        path.write_bytes(b"ok\ncaf\xe9\nend\n")

        lines = read_surrounding_lines(str(path), 2)
        assert lines[0] == "ok\n"
        assert lines[1] == "caf\ufffd\n"
