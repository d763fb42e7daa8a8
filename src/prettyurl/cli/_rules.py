"""``prettyurl rules`` — list rules in priority order."""

import argparse

from prettyurl.cli._load import load_table


def run_rules(args: argparse.Namespace) -> None:
    """Print a table of PRIORITY, PATTERN, TARGET, and NAME.

    The implicit catch-all is listed last.
    """
    table = load_table(args.config, args.log_level)

    rows: list[tuple[str, str, str, str]] = [
        (str(i), rule.pattern, rule.target, rule.name or "")
        for i, rule in enumerate(table.rules, start=1)
    ]
    rows.append((str(len(rows) + 1), "*", "p=<path>", "fallback"))

    # Column widths
    max_pattern = max(max(len(r[1]) for r in rows), 7)  # "PATTERN" header
    max_target = max(max(len(r[2]) for r in rows), 6)  # "TARGET" header

    fmt = f"{{:<8}}  {{:<{max_pattern}}}  {{:<{max_target}}}  {{}}"
    print(fmt.format("PRIORITY", "PATTERN", "TARGET", "NAME"))
    sep_len = 8 + max_pattern + max_target + 6 + max(len(r[3]) for r in rows)
    print("-" * min(sep_len, 80))
    for row in rows:
        print(fmt.format(*row))
