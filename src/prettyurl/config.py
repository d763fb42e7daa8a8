"""Rewrite configuration.

RewriteConfig is a frozen dataclass — immutable after creation,
IDE-autocompletable, no string-key dict lookups. ``load_config`` reads the
same fields from the ``[prettyurl]`` table of a TOML file.
"""

import tomllib
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

from prettyurl.errors import ConfigurationError
from prettyurl.rules.rule import Rule
from prettyurl.rules.table import RuleTable, default_rules


@dataclass(frozen=True, slots=True)
class RuleSpec:
    """A custom rule as written in configuration, before parsing."""

    pattern: str
    target: str
    name: str | None = None

    def build(self) -> Rule:
        return Rule.from_strings(self.pattern, self.target, self.name)


@dataclass(frozen=True, slots=True)
class RewriteConfig:
    """Rewrite configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RewriteConfig(
            base_path="/catalog",
            passthrough_prefixes=("/static", "/admin"),
            custom_rules=(RuleSpec("search/{type}", "p=search&type={type}"),),
        )
    """

    # Mount point: only paths under it are rewritten, relative to it
    base_path: str = "/"
    # Path the wrapped app receives for every rewritten request
    entry_path: str = "/"
    # Never rewritten (static assets, the entry script, admin area)
    passthrough_prefixes: tuple[str, ...] = ()

    # Apply the catch-all result instead of passing unmatched paths through
    rewrite_unmatched: bool = False
    # Keep the request's own query string after the rewritten params
    append_query_string: bool = True

    # Rules
    custom_rules: tuple[RuleSpec, ...] = ()
    include_default_rules: bool = True

    # Logging
    log_level: str = "warning"

    def build_table(self) -> RuleTable:
        """Compile custom rules, then (optionally) the defaults.

        Raises ``PatternError`` if a custom rule is malformed.
        """
        table = RuleTable(spec.build() for spec in self.custom_rules)
        if self.include_default_rules:
            table.extend(default_rules())
        table.compile()
        return table


_FIELD_TYPES: dict[str, type | tuple[type, ...]] = {
    "base_path": str,
    "entry_path": str,
    "passthrough_prefixes": list,
    "rewrite_unmatched": bool,
    "append_query_string": bool,
    "include_default_rules": bool,
    "log_level": str,
}

_LOG_LEVELS = frozenset({"debug", "info", "warning", "error", "critical"})


def load_config(path: str | Path) -> RewriteConfig:
    """Load a RewriteConfig from the ``[prettyurl]`` table of a TOML file.

    Example file::

        [prettyurl]
        base_path = "/catalog"
        passthrough_prefixes = ["/static", "/index.php"]

        [[prettyurl.rules]]
        pattern = "search/{type}"
        target = "p=search&type={type}"

    Raises ``ConfigurationError`` for unreadable files, unknown keys,
    wrongly typed values, and rules that do not compile.
    """
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except OSError as exc:
        msg = f"Cannot read config file {str(path)!r}: {exc}"
        raise ConfigurationError(msg) from exc
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {str(path)!r}: {exc}"
        raise ConfigurationError(msg) from exc

    config = config_from_mapping(data.get("prettyurl", {}))
    # Surface bad rules at load time, not on the first request
    config.build_table()
    return config


def config_from_mapping(table: dict[str, Any]) -> RewriteConfig:
    """Build a RewriteConfig from an already-parsed mapping."""
    if not isinstance(table, dict):
        msg = "[prettyurl] must be a table"
        raise ConfigurationError(msg)

    known = {f.name for f in fields(RewriteConfig)} - {"custom_rules"}
    kwargs: dict[str, Any] = {}
    for key, value in table.items():
        if key == "rules":
            if not isinstance(value, list):
                msg = "rules must be an array of tables"
                raise ConfigurationError(msg)
            kwargs["custom_rules"] = tuple(_rule_spec(i, entry) for i, entry in enumerate(value))
            continue
        if key not in known:
            msg = f"Unknown config key {key!r}"
            raise ConfigurationError(msg)
        expected = _FIELD_TYPES[key]
        if not isinstance(value, expected):
            msg = f"Config key {key!r} has the wrong type: {type(value).__name__}"
            raise ConfigurationError(msg)
        kwargs[key] = value

    if "passthrough_prefixes" in kwargs:
        prefixes = kwargs["passthrough_prefixes"]
        if not all(isinstance(p, str) for p in prefixes):
            msg = "passthrough_prefixes must be a list of strings"
            raise ConfigurationError(msg)
        kwargs["passthrough_prefixes"] = tuple(prefixes)

    level = kwargs.get("log_level")
    if level is not None and level.lower() not in _LOG_LEVELS:
        msg = f"Unknown log_level {level!r}"
        raise ConfigurationError(msg)

    return RewriteConfig(**kwargs)


def _rule_spec(index: int, entry: object) -> RuleSpec:
    if not isinstance(entry, dict):
        msg = f"rules[{index}] must be a table"
        raise ConfigurationError(msg)
    extra = set(entry) - {"pattern", "target", "name"}
    if extra:
        msg = f"rules[{index}] has unknown key {sorted(extra)[0]!r}"
        raise ConfigurationError(msg)
    pattern = entry.get("pattern")
    target = entry.get("target")
    name = entry.get("name")
    if not isinstance(pattern, str) or not isinstance(target, str):
        msg = f"rules[{index}] needs string 'pattern' and 'target'"
        raise ConfigurationError(msg)
    if name is not None and not isinstance(name, str):
        msg = f"rules[{index}] 'name' must be a string"
        raise ConfigurationError(msg)
    return RuleSpec(pattern=pattern, target=target, name=name)
