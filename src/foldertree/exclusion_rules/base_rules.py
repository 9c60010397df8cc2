from abc import ABC, abstractmethod
from typing import Sequence, Union

from foldertree.types import PathType


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for path exclusion rules.

    The folder tree builder consults an exclusion rules object for every directory entry
    it lists, passing the entry's path relative to the build root with forward slashes as
    separators. Entries for which ``exclude`` returns True are dropped before the builder
    descends into them, so nothing below an excluded directory is ever visited.

    Loading rules from files and adding individual rules are optional capabilities;
    the default implementations raise NotImplementedError.

    Example:
        >>> class TmpExclusionRules(BaseExclusionRules):
        ...     def exclude(self, path: str) -> bool:
        ...         return path.endswith('.tmp')
        >>> rules = TmpExclusionRules()
        >>> rules.exclude("build/temp.tmp")
        True
        >>> rules.exclude("main.py")
        False
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Determine if a given path should be excluded.

        Args:
            path (str): Root-relative path using forward slashes, e.g. ``"src/app.py"``.

        Returns:
            bool: True if the path should be excluded, False if it should be included.
        """
        pass

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """
        Load exclusion rules from one or more files.

        Args:
            rules_files: Path to a file or sequence of paths containing exclusion rules.

        Raises:
            NotImplementedError: If this rule type doesn't support loading from files.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support loading rules from files.")

    def add_rule(self, rule: str) -> None:
        """
        Add a single exclusion rule directly.

        Args:
            rule (str): The exclusion rule to add, e.g. a glob pattern like ``"*.pyc"``.

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")
