"""prettyurl — pretty-URL rewriting for library catalogue applications.

Turns request paths such as ``/member/profile/123`` into the query string
the catalogue understands (``p=member&action=profile&id=123``).

Basic usage::

    from prettyurl import default_table

    table = default_table()
    table.resolve("/sd=12345").to_query_string()  # "p=show_detail&id=12345"

In front of an ASGI app::

    from prettyurl import RewriteMiddleware

    app = RewriteMiddleware(catalogue_app)
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "EchoApp",
    "PatternError",
    "PrettyURLError",
    "ResolvedQuery",
    "RewriteConfig",
    "RewriteMiddleware",
    "Rule",
    "RuleSpec",
    "RuleTable",
    "default_table",
    "load_config",
    "resolve",
]

# name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "ConfigurationError": "prettyurl.errors",
    "EchoApp": "prettyurl.diagnostics",
    "PatternError": "prettyurl.errors",
    "PrettyURLError": "prettyurl.errors",
    "ResolvedQuery": "prettyurl.rules.rule",
    "RewriteConfig": "prettyurl.config",
    "RewriteMiddleware": "prettyurl.middleware.rewrite",
    "Rule": "prettyurl.rules.rule",
    "RuleSpec": "prettyurl.config",
    "RuleTable": "prettyurl.rules.table",
    "default_table": "prettyurl.rules.table",
    "load_config": "prettyurl.config",
    "resolve": "prettyurl.rules.resolver",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import prettyurl`` fast while providing a clean top-level API.
    """
    module_path = _LAZY_IMPORTS.get(name)
    if module_path is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_path), name)
