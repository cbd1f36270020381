"""Command-line helper for simlog configuration strings.

Commands:
  simlog tokens            List level tokens and their bit values
  simlog check [CONFIG]    Parse CONFIG (default: $SIMLOG) and show the
                           directives it produces; exit 1 on bad tokens

Useful for checking a SIMLOG value before a long simulation run rather
than finding a typo in the diagnostics afterwards.
"""

import argparse
import sys

from simlog._version import BASE_VERSION, PIP_VERSION
from simlog.config import ENV_VAR, resolve_config
from simlog.directives import format_token_list, parse_config
from simlog.levels import level_label


def _run_tokens(args):
    print(format_token_list())
    return 0


def _run_check(args):
    text = resolve_config(args.config)
    parsed = parse_config(text)
    source = "argument" if args.config is not None else f"${ENV_VAR}"

    if not parsed.directives and not parsed.issues and not parsed.print_list:
        print(f"No directives in {source}.")
        return 0

    for d in parsed.directives:
        print(f"  {d.selector:<20} 0x{d.level:08x}  {level_label(d.level)}")
    if parsed.print_list:
        print("  (print-list requested)")
    for issue in parsed.issues:
        print(f"  ERROR: {issue}", file=sys.stderr)
    return 1 if parsed.issues else 0


def _build_parser():
    """Build the argparse parser with subcommand dispatch."""
    parser = argparse.ArgumentParser(
        prog="simlog",
        description="simlog — inspect per-component logging configuration",
        epilog=f"Configuration is read from ${ENV_VAR} unless given explicitly.",
    )
    parser.add_argument(
        "--version", "-V",
        action="version",
        version=f"simlog {BASE_VERSION} ({PIP_VERSION})",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        metavar="<command>",
    )

    tokens = subparsers.add_parser("tokens", help="List level tokens")
    tokens.set_defaults(func=_run_tokens)

    check = subparsers.add_parser("check", help="Parse a configuration string")
    check.add_argument("config", nargs="?", default=None,
                       help=f"Configuration string (default: ${ENV_VAR})")
    check.set_defaults(func=_run_check)

    return parser


def main(argv=None):
    """Main entry point for the simlog CLI.

    Args:
        argv: Command-line arguments. None means sys.argv[1:].

    Returns:
        Exit code (0 = success).
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = _build_parser()
    if not argv:
        parser.print_help()
        return 0

    args = parser.parse_args(argv)
    if not hasattr(args, "func"):
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
