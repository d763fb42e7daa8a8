"""prettyurl CLI — resolve paths, list rule tables, and check config files.

Entry point registered as ``prettyurl`` in ``pyproject.toml``::

    [project.scripts]
    prettyurl = "prettyurl.cli:main"
"""

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``prettyurl`` command."""
    parser = argparse.ArgumentParser(
        prog="prettyurl",
        description="prettyurl — rewrite pretty paths into catalogue query strings.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["debug", "info", "warning", "error", "critical"],
        help="Logging level (default: warning, or log_level from --config)",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- prettyurl resolve ------------------------------------------------
    resolve_parser = subparsers.add_parser("resolve", help="Resolve request paths")
    resolve_parser.add_argument("paths", nargs="+", metavar="PATH", help="Request path(s)")
    resolve_parser.add_argument("--config", default=None, help="TOML config file")
    resolve_parser.add_argument(
        "--json",
        action="store_true",
        help="Print one JSON object per path",
    )

    # -- prettyurl rules --------------------------------------------------
    rules_parser = subparsers.add_parser("rules", help="List rules in priority order")
    rules_parser.add_argument("--config", default=None, help="TOML config file")

    # -- prettyurl check --------------------------------------------------
    check_parser = subparsers.add_parser("check", help="Validate a config file")
    check_parser.add_argument("--config", required=True, help="TOML config file")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(
        level=(args.log_level or "warning").upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.log_level is not None:
        logging.getLogger("prettyurl").setLevel(args.log_level.upper())

    if args.command == "resolve":
        from prettyurl.cli._resolve import run_resolve

        run_resolve(args)
    elif args.command == "rules":
        from prettyurl.cli._rules import run_rules

        run_rules(args)
    elif args.command == "check":
        from prettyurl.cli._check import run_check

        run_check(args)
