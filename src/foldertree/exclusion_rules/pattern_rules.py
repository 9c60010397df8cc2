"""Glob pattern exclusion rules backed by pathspec."""

from functools import lru_cache
from os import PathLike
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from pathspec import GitIgnoreSpec

from foldertree.types import PathType

from .base_rules import BaseExclusionRules


def read_rules_file(rules_file: PathType) -> List[str]:
    """Read the patterns of an ignore file, one per line.

    Blank lines and ``#`` comments are kept; pathspec skips them when compiling.

    Raises:
        FileNotFoundError: If the rules file does not exist.
    """
    path = Path(rules_file)
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        return f.read().splitlines()


def _split_negation(pattern: str) -> Tuple[str, str]:
    if pattern.startswith("!"):
        return "!", pattern[1:]
    return "", pattern


def _is_pattern_line(pattern: str) -> bool:
    return bool(pattern.strip()) and not pattern.startswith("#")


def anchor_to_root(pattern: str) -> str:
    """Rewrite a glob so that it matches the whole root-relative path.

    A glob without an inner slash only matches top-level entries, so ``*.log`` excludes
    ``app.log`` but not ``logs/app.log``. Globs containing a slash are already matched
    from the root and are returned unchanged.

    Example:
        >>> anchor_to_root("*.log"), anchor_to_root("!keep.log"), anchor_to_root("dist/**")
        ('/*.log', '!/keep.log', 'dist/**')
    """
    if not _is_pattern_line(pattern):
        return pattern
    negation, body = _split_negation(pattern)
    if "/" not in body.rstrip("/"):
        body = "/" + body
    return negation + body


def match_at_any_depth(pattern: str) -> str:
    """Rewrite an ignore-file line as an equivalent glob for :func:`anchor_to_root`.

    In ignore files a pattern without an inner slash matches at any depth. Prefixing it
    with ``**/`` keeps that meaning once the line is used as a glob.

    Example:
        >>> match_at_any_depth("*.pyc"), match_at_any_depth("build/"), match_at_any_depth("/out")
        ('**/*.pyc', '**/build/', '/out')
    """
    if not _is_pattern_line(pattern):
        return pattern
    negation, body = _split_negation(pattern)
    if not body.startswith("/") and "/" not in body.rstrip("/"):
        body = "**/" + body
    return negation + body


class PatternExclusionRules(BaseExclusionRules):
    """Exclusion rules made of shell-style glob patterns.

    Patterns are compiled with pathspec's gitignore syntax:

    - ``*``, ``?`` and ``[abc]`` match within a single path segment
    - ``**`` matches any number of segments, so ``**/dist/**`` applies at any depth
    - names starting with a dot are matched like any other name
    - matching is case-sensitive
    - a leading ``!`` re-includes paths excluded by an earlier pattern

    Globs given to the constructor are matched against the whole root-relative path (see
    :func:`anchor_to_root`), so ``*.log`` only excludes top-level log files. Lines added
    with :meth:`load_rules` or :meth:`add_rule` keep their ignore-file meaning, where
    ``*.log`` applies at any depth.

    A path is excluded when either the path itself or the path with a trailing slash
    matches. This makes a pattern like ``build/**`` exclude the ``build`` entry itself and
    not only its contents, so an excluded directory disappears from the tree entirely.

    Attributes:
        patterns (List[str]): The compiled patterns, in the order they were added.
        spec (GitIgnoreSpec): Compiled matcher for ``patterns``.

    Example:
        >>> rules = PatternExclusionRules(["**/node_modules/**", "*.log"])
        >>> rules.exclude("node_modules")
        True
        >>> rules.exclude("web/node_modules/react/index.js")
        True
        >>> rules.exclude("app.log")
        True
        >>> rules.exclude("logs/app.log")
        False

    Note:
        Paths must use forward slashes as separators, even on Windows.
    """

    def __init__(self, patterns: Optional[Iterable[str]] = None):
        self.patterns: List[str] = []
        self.spec = GitIgnoreSpec.from_lines([])

        if patterns is not None:
            self.patterns.extend(anchor_to_root(pattern) for pattern in patterns)
            self._compile()

    def _compile(self) -> None:
        self.spec = GitIgnoreSpec.from_lines(self.patterns)

    def exclude(self, path: str) -> bool:
        """Check if a path matches the loaded patterns.

        Args:
            path: Root-relative path with forward slashes.

        Returns:
            bool: True if the path, or the path treated as a directory, is matched by the
                last applicable pattern.
        """
        if not self.patterns:
            return False
        if self.spec.match_file(path):
            return True
        return not path.endswith("/") and self.spec.match_file(path + "/")

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Append the patterns of one or more ignore files.

        Args:
            rules_files: Path(s) to file(s) with one pattern per line.

        Raises:
            FileNotFoundError: If any rules file does not exist.

        Example:
            >>> import os, tempfile
            >>> with tempfile.NamedTemporaryFile(mode='w', delete=False) as f:
            ...     _ = f.write('*.txt\\n!keep.txt\\n')
            >>> rules = PatternExclusionRules()
            >>> rules.load_rules(f.name)
            >>> rules.exclude("notes.txt"), rules.exclude("keep.txt")
            (True, False)
            >>> os.unlink(f.name)
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            self.patterns.extend(read_rules_file(rules_file))
        self._compile()

    def add_rule(self, rule: str) -> None:
        """Append a single ignore-file line, matched at any depth when it has no inner slash.

        Example:
            >>> rules = PatternExclusionRules()
            >>> rules.add_rule("*.pyc")
            >>> rules.exclude("pkg/mod.pyc")
            True
        """
        self.patterns.append(rule)
        self._compile()


def should_ignore(path: str, patterns: Sequence[str]) -> bool:
    """Tell whether a root-relative path is excluded by a list of glob patterns.

    Backslashes are converted to forward slashes before matching.

    Example:
        >>> should_ignore("pkg\\\\.git\\\\HEAD", ["**/.git/**"])
        True
        >>> should_ignore("src/main.py", ["**/.git/**"])
        False
        >>> should_ignore("app.log", ["*.log"]), should_ignore("logs/app.log", ["*.log"])
        (True, False)
    """
    return _compiled_rules(tuple(patterns)).exclude(path.replace("\\", "/"))


@lru_cache(maxsize=32)
def _compiled_rules(patterns: Tuple[str, ...]) -> PatternExclusionRules:
    return PatternExclusionRules(patterns)
