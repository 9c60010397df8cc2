"""Tests for build and format options."""

import pytest

from foldertree.exceptions import InvalidOptionError
from foldertree.options import DEFAULT_IGNORES, BuildOptions, FormatOptions
from foldertree.types import SortOrder


def test_build_option_defaults():
    options = BuildOptions()
    assert options.max_depth is None
    assert options.include_hidden is False
    assert options.follow_symlinks is False
    assert options.include_sizes is False
    assert options.ignore == DEFAULT_IGNORES
    assert options.sort is SortOrder.DIRS_FIRST


def test_default_ignores_cover_common_directories():
    for name in ("node_modules", ".git", "dist", "build", ".next", ".turbo", ".cache"):
        assert f"**/{name}/**" in DEFAULT_IGNORES


def test_explicit_ignore_list_is_copied():
    patterns = ["*.log"]
    options = BuildOptions(ignore=patterns)
    patterns.append("*.tmp")
    assert options.ignore == ("*.log",)


def test_empty_ignore_list_is_kept():
    assert BuildOptions(ignore=[]).ignore == ()


def test_single_string_ignore_rejected():
    with pytest.raises(InvalidOptionError):
        BuildOptions(ignore="*.log")


@pytest.mark.parametrize("value", ["dirs-first", SortOrder.DIRS_FIRST])
def test_sort_accepts_strings_and_enum(value):
    assert BuildOptions(sort=value).sort is SortOrder.DIRS_FIRST


def test_unknown_sort_rejected():
    with pytest.raises(InvalidOptionError, match="Unknown sort order 'size'"):
        BuildOptions(sort="size")


@pytest.mark.parametrize("value", [-1, 1.5, "2", True])
def test_invalid_max_depth_rejected(value):
    with pytest.raises(InvalidOptionError):
        BuildOptions(max_depth=value)


def test_invalid_options_are_value_errors():
    with pytest.raises(ValueError):
        BuildOptions(max_depth=-3)


def test_format_option_defaults():
    options = FormatOptions()
    assert options.show_full_path is False
    assert options.show_sizes is False
    assert options.indent == "    "
