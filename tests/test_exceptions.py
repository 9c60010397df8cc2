"""Tests for custom exceptions."""

from foldertree.exceptions import FolderTreeError, InvalidOptionError, RootNotADirectoryError


class TestRootNotADirectoryError:
    """Test RootNotADirectoryError exception."""

    def test_creation(self):
        error = RootNotADirectoryError("/path/to/file.txt")

        assert error.path == "/path/to/file.txt"
        assert str(error) == "Path is not a directory: /path/to/file.txt"

    def test_hierarchy(self):
        error = RootNotADirectoryError("/path/to/file.txt")

        assert isinstance(error, FolderTreeError)
        assert isinstance(error, NotADirectoryError)
        assert isinstance(error, OSError)


class TestInvalidOptionError:
    """Test InvalidOptionError exception."""

    def test_message(self):
        error = InvalidOptionError("indent must be a non-empty string")
        assert str(error) == "indent must be a non-empty string"

    def test_hierarchy(self):
        error = InvalidOptionError("bad")
        assert isinstance(error, FolderTreeError)
        assert isinstance(error, ValueError)
