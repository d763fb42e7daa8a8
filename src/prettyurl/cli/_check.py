"""``prettyurl check`` — config file validation command.

Loads the file and compiles its rules. Exits with code 1 if anything is
invalid.
"""

import argparse

from prettyurl.cli._load import load_table


def run_check(args: argparse.Namespace) -> None:
    table = load_table(args.config, args.log_level)
    print(f"OK: {len(table)} rule(s) in {args.config}")
