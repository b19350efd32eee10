"""Shared helpers for CLI command handlers."""

import json
import sys
from pathlib import Path

from rich.console import Console
from rich.text import Text
from textual.color import Color

from nodestyle.style import ConnectionStyle


def load_style_or_die(path: str | None, json_mode: bool) -> ConnectionStyle:
    """Default style, overlaid with the file at path if given. Exit 1 if it's missing."""
    style = ConnectionStyle()
    if path is None:
        return style
    style_path = Path(path)
    if not style_path.is_file():
        error(f"Style file '{path}' not found.", json_mode)
    style.load_json_file(style_path)
    return style


def output_json(data: dict | list) -> None:
    """Write JSON to stdout."""
    print(json.dumps(data, indent=2))


def error(message: str, json_mode: bool) -> None:
    """Print error to stderr and exit 1."""
    if json_mode:
        print(json.dumps({"error": message}), file=sys.stderr)
    else:
        print(f"error: {message}", file=sys.stderr)
    sys.exit(1)


def swatch_line(label: str, color: Color, suffix: str = "") -> Text:
    """A color block followed by the label and hex value."""
    return Text.assemble(("  ", f"on {color.hex}"), f" {label:<24} {color.hex}{suffix}")


def print_lines(lines: list[Text]) -> None:
    console = Console(highlight=False)
    for line in lines:
        console.print(line, soft_wrap=True)
