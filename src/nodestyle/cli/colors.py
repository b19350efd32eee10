"""Handler for 'nodestyle colors'."""

from nodestyle.cli._common import load_style_or_die, output_json, print_lines, swatch_line


def colors(args) -> int:
    """Assign colors to the given types, in order, and print them."""
    style = load_style_or_die(args.style, args.json)
    assigner = style.type_colors

    assigned = [(type_id, style.color_for(type_id)) for type_id in args.types]

    if args.json:
        output_json(
            [
                {
                    "type": type_id,
                    "color": color.hex,
                    "exhausted": type_id in assigner.exhausted,
                }
                for type_id, color in assigned
            ]
        )
    else:
        lines = []
        for type_id, color in assigned:
            suffix = "  (collides)" if type_id in assigner.exhausted else ""
            lines.append(swatch_line(type_id, color, suffix))
        print_lines(lines)

    return 0
