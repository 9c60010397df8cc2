"""Unit tests for the argument parser module in the foldertree CLI."""

import argparse
from pathlib import Path

import pytest

from foldertree.cli.argparser import (
    IgnorePatternsAction,
    create_parser,
    non_negative_int,
    split_patterns,
    validate_args,
)


@pytest.fixture
def parser():
    return create_parser()


def test_defaults(parser):
    args = parser.parse_args([])
    assert args.directory == Path(".")
    assert args.max_depth is None
    assert args.hidden is False
    assert args.follow_symlinks is False
    assert args.sizes is False
    assert args.ignore is None
    assert args.sort == "dirs-first"
    assert args.full_path is False
    assert args.indent == 4
    assert args.output is None
    assert args.summary is False
    assert args.verbose is False


def test_all_flags(parser, tmp_path):
    args = parser.parse_args(
        [
            str(tmp_path),
            "-d",
            "2",
            "-a",
            "-L",
            "-s",
            "--sort",
            "name",
            "-f",
            "--indent",
            "2",
            "-o",
            str(tmp_path / "out.txt"),
            "--summary",
            "-v",
        ]
    )
    assert args.directory == tmp_path
    assert args.max_depth == 2
    assert args.hidden and args.follow_symlinks and args.sizes and args.full_path
    assert args.sort == "name"
    assert args.indent == 2
    assert args.output == tmp_path / "out.txt"
    assert args.summary and args.verbose


def test_ignore_patterns_are_split_and_accumulated(parser):
    args = parser.parse_args(["-i", "*.log, dist/**", "--ignore", "*.tmp"])
    assert args.ignore == ["*.log", "dist/**", "*.tmp"]


def test_empty_ignore_disables_defaults(parser):
    args = parser.parse_args(["-i", ""])
    assert args.ignore == []


def test_exclude_file_and_patterns_keep_order(parser, tmp_path):
    ignore_file = tmp_path / ".treeignore"
    ignore_file.write_text("*.pyc\nbuild/\n")

    args = parser.parse_args(["-i", "*.log", "-e", str(ignore_file), "-i", "!keep.log"])
    assert args.ignore == ["*.log", "**/*.pyc", "**/build/", "!keep.log"]


def test_missing_exclude_file_is_argument_error(parser, tmp_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        parser.parse_args(["-e", str(tmp_path / "missing")])
    assert excinfo.value.code == 2
    assert "Rules file not found" in capsys.readouterr().err


def test_ignore_action_on_fresh_namespace():
    action = IgnorePatternsAction(option_strings=["-i", "--ignore"], dest="ignore")
    namespace = argparse.Namespace()
    action(argparse.ArgumentParser(), namespace, "a,b", "-i")
    assert namespace.ignore == ["a", "b"]


@pytest.mark.parametrize("value", ["-1", "abc"])
def test_invalid_max_depth(parser, value):
    with pytest.raises(SystemExit) as excinfo:
        parser.parse_args(["-d", value])
    assert excinfo.value.code == 2


def test_invalid_sort(parser):
    with pytest.raises(SystemExit):
        parser.parse_args(["--sort", "size"])


def test_non_negative_int():
    assert non_negative_int("0") == 0
    assert non_negative_int("7") == 7
    with pytest.raises(argparse.ArgumentTypeError):
        non_negative_int("-2")


def test_split_patterns():
    assert split_patterns(" a , ,b,") == ["a", "b"]
    assert split_patterns("") == []


def test_validate_args_rejects_zero_indent(parser):
    args = parser.parse_args(["--indent", "0"])
    with pytest.raises(ValueError, match="--indent"):
        validate_args(args)


def test_version(parser, capsys):
    with pytest.raises(SystemExit) as excinfo:
        parser.parse_args(["--version"])
    assert excinfo.value.code == 0
    assert capsys.readouterr().out.startswith("foldertree ")
