"""prettyurl exception hierarchy.

Shared across the rule table, config loader, middleware, and CLI so every
module raises and catches the same types. Matching itself never raises:
malformed input falls through to the catch-all rule.
"""


class PrettyURLError(Exception):
    """Base for all prettyurl-specific errors."""


class ConfigurationError(PrettyURLError):
    """Raised when a rule table or config file is invalid.

    Always raised while the table is being built, never per request.
    """


class PatternError(ConfigurationError):
    """A rule pattern or target template could not be parsed.

    Carries the offending text so CLI output can point at it.
    """

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"{reason}: {text!r}")
