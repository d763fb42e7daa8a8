"""``prettyurl resolve`` — print the resolved query for each path."""

import argparse
import json

from prettyurl.cli._load import load_table


def run_resolve(args: argparse.Namespace) -> None:
    table = load_table(args.config, args.log_level)
    for path in args.paths:
        result = table.resolve(path)
        if args.json:
            print(
                json.dumps(
                    {
                        "path": path,
                        "query": result.to_query_string(),
                        "params": result.as_dict(),
                        "rule": result.rule.pattern if result.rule else None,
                        "fallback": result.fallback,
                    }
                )
            )
        else:
            suffix = "  (unmatched)" if result.fallback else ""
            print(f"{path} -> {result.to_query_string()}{suffix}")
