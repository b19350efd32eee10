"""Handler for 'nodestyle style'."""

from nodestyle.cli._common import load_style_or_die, output_json, print_lines, swatch_line
from nodestyle.style import BOOL_FIELDS, COLOR_FIELDS, FLOAT_FIELDS


def show_style(args) -> int:
    """Print the resolved connection style."""
    style = load_style_or_die(args.style, args.json)

    if args.json:
        output_json(style.to_dict())
        return 0

    lines = [swatch_line(key, getattr(style, attr)) for key, attr in COLOR_FIELDS.items()]
    print_lines(lines)
    for key, attr in {**FLOAT_FIELDS, **BOOL_FIELDS}.items():
        print(f"   {key:<24} {getattr(style, attr)}")

    return 0
