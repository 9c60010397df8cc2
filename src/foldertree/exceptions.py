class FolderTreeError(Exception):
    """
    Base class for errors raised by foldertree itself.

    Filesystem errors (permission denied, entries vanishing during the walk) are not
    wrapped; they propagate as the original ``OSError`` subclasses.
    """

    pass


class RootNotADirectoryError(FolderTreeError, NotADirectoryError):
    """
    Exception raised when the root of a build does not refer to a directory.

    Being a subclass of the built-in ``NotADirectoryError``, it can be caught either as
    a foldertree error or as a regular ``OSError``.

    Attributes:
        path (str): The absolute path that was given as the root.

    Example:
        >>> error = RootNotADirectoryError("/etc/hostname")
        >>> str(error)
        'Path is not a directory: /etc/hostname'
        >>> isinstance(error, NotADirectoryError)
        True
    """

    def __init__(self, path: str) -> None:
        """
        Initialize the exception with the offending root path.

        Args:
            path (str): Absolute path of the root that is not a directory.
        """
        self.path = path
        self.message = f"Path is not a directory: {path}"
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class InvalidOptionError(FolderTreeError, ValueError):
    """
    Exception raised when build or format options hold an unusable value.

    Example:
        >>> error = InvalidOptionError("max_depth must be a non-negative integer, got -1")
        >>> str(error)
        'max_depth must be a non-negative integer, got -1'
    """

    pass
