"""Build and format options for folder trees.

Both option sets are plain dataclasses validated on construction, so an invalid value
is reported where it is created rather than halfway through a directory walk.
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple, Union

from foldertree.exceptions import InvalidOptionError
from foldertree.types import SortOrder

# Applied only when the caller does not supply an ignore list of its own
DEFAULT_IGNORES: Tuple[str, ...] = (
    "**/node_modules/**",
    "**/.git/**",
    "**/dist/**",
    "**/build/**",
    "**/.next/**",
    "**/.turbo/**",
    "**/.cache/**",
)


@dataclass
class BuildOptions:
    """Options controlling how a directory is walked.

    Attributes:
        max_depth: Directories at this depth or deeper are included but not expanded.
            The root is depth 0. None means unbounded.
        include_hidden: Include entries whose name starts with a dot.
        follow_symlinks: Traverse symbolic links instead of showing them as terminal entries.
        include_sizes: Record the byte size of regular files.
        ignore: Glob patterns matched against whole root-relative paths, so a pattern
            without an inner slash only matches top-level entries. None selects
            DEFAULT_IGNORES; an empty sequence disables ignoring.
        sort: Ordering policy for the entries of each directory.

    Example:
        >>> BuildOptions(max_depth=2, sort="name").sort
        <SortOrder.NAME: 'name'>
        >>> BuildOptions().ignore == DEFAULT_IGNORES
        True
    """

    max_depth: Optional[int] = None
    include_hidden: bool = False
    follow_symlinks: bool = False
    include_sizes: bool = False
    ignore: Optional[Sequence[str]] = None
    sort: Union[SortOrder, str] = SortOrder.DIRS_FIRST

    def __post_init__(self) -> None:
        if self.max_depth is not None:
            if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int) or self.max_depth < 0:
                raise InvalidOptionError(f"max_depth must be a non-negative integer, got {self.max_depth!r}")

        if self.ignore is None:
            self.ignore = DEFAULT_IGNORES
        elif isinstance(self.ignore, str):
            raise InvalidOptionError("ignore must be a sequence of patterns, not a single string")
        else:
            self.ignore = tuple(self.ignore)

        try:
            self.sort = SortOrder(self.sort)
        except ValueError:
            choices = ", ".join(order.value for order in SortOrder)
            raise InvalidOptionError(f"Unknown sort order {self.sort!r} (expected one of: {choices})") from None


@dataclass
class FormatOptions:
    """Options controlling how a built tree is rendered as text.

    Attributes:
        show_full_path: Label nodes with their absolute path instead of their name.
        show_sizes: Append a human-readable size to file nodes that carry one.
        indent: String used to extend the prefix at each nesting level.
    """

    show_full_path: bool = False
    show_sizes: bool = False
    indent: str = "    "

    def __post_init__(self) -> None:
        if not self.indent:
            raise InvalidOptionError("indent must be a non-empty string")
