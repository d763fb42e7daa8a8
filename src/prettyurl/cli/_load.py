"""Table loading shared by ``prettyurl resolve``, ``rules``, and ``check``."""

import logging
import sys

from prettyurl.config import RewriteConfig, load_config
from prettyurl.errors import ConfigurationError
from prettyurl.rules.table import RuleTable

logger = logging.getLogger("prettyurl.cli")


def load_table(config_path: str | None, cli_log_level: str | None = None) -> RuleTable:
    """Build the rule table from *config_path*, or the defaults when None.

    The config's ``log_level`` applies to the ``prettyurl`` loggers only
    when no ``--log-level`` was given. Prints the error and exits 1 when
    the config is invalid.
    """
    if config_path is None:
        return RewriteConfig().build_table()
    try:
        config = load_config(config_path)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    if cli_log_level is None:
        logging.getLogger("prettyurl").setLevel(config.log_level.upper())
    logger.info("Loaded %d custom rule(s) from %s", len(config.custom_rules), config_path)
    return config.build_table()
