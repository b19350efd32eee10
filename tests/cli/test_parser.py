"""Tests for the argument parser."""

import pytest

from nodestyle.cli import build_parser
from nodestyle.cli.colors import colors
from nodestyle.cli.style import show_style


def test_colors_parses_types():
    args = build_parser().parse_args(["colors", "Number", "Text", "--json"])
    assert args.func is colors
    assert args.types == ["Number", "Text"]
    assert args.json is True
    assert args.style is None


def test_colors_needs_a_type():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["colors"])


def test_style_with_file():
    args = build_parser().parse_args(["style", "--style", "custom.json", "-v"])
    assert args.func is show_style
    assert args.style == "custom.json"
    assert args.verbose is True


def test_no_noun_has_no_handler():
    args = build_parser().parse_args([])
    assert not hasattr(args, "func")


def test_options_before_noun():
    args = build_parser().parse_args(["--style", "custom.json", "--json", "colors", "A"])
    assert args.style == "custom.json"
    assert args.json is True
    assert args.types == ["A"]


def test_json_before_style_noun():
    args = build_parser().parse_args(["--json", "-v", "style"])
    assert args.func is show_style
    assert args.json is True
    assert args.verbose is True


def test_options_after_noun_win():
    args = build_parser().parse_args(["--style", "outer.json", "style", "--style", "inner.json"])
    assert args.style == "inner.json"


def test_defaults_without_options():
    args = build_parser().parse_args(["style"])
    assert args.style is None
    assert args.json is False
    assert args.verbose is False
