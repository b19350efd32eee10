"""CLI argument parser and dispatch for nodestyle."""

import argparse

from nodestyle.cli.colors import colors
from nodestyle.cli.style import show_style


def _common_options(suppress: bool) -> argparse.ArgumentParser:
    """Options accepted both before and after the noun.

    The copy attached to subcommands suppresses its defaults so it doesn't
    overwrite values given before the noun.
    """

    def default(value):
        return argparse.SUPPRESS if suppress else value

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--style", default=default(None), help="JSON style file to apply over the defaults")
    common.add_argument("--json", action="store_true", default=default(False), help="Machine-readable JSON output")
    common.add_argument(
        "-v", "--verbose", action="store_true", default=default(False), help="Log debug messages to stderr"
    )
    return common


def build_parser() -> argparse.ArgumentParser:
    """Build the full CLI argument parser."""
    sub_common = _common_options(suppress=True)

    parser = argparse.ArgumentParser(
        prog="nodestyle",
        description="Connection styles for node-graph editors",
        parents=[_common_options(suppress=False)],
    )

    nouns = parser.add_subparsers(dest="noun")

    # --- colors ---
    colors_p = nouns.add_parser("colors", help="Assign colors to connection types", parents=[sub_common])
    colors_p.add_argument("types", nargs="+", metavar="TYPE", help="Connection type names, in assignment order")
    colors_p.set_defaults(func=colors)

    # --- style ---
    style_p = nouns.add_parser("style", help="Show the resolved connection style", parents=[sub_common])
    style_p.set_defaults(func=show_style)

    return parser
