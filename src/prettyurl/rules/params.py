"""Capture converters for rule patterns.

Built-in converters for captures like ``{id:digits}``.
"""

# regex fragment for each supported converter
CONVERTERS: dict[str, str] = {
    "seg": r"[^/]+",
    "digits": r"[0-9]+",
    "path": r".+",
}

DEFAULT_CONVERTER = "seg"


def converter_regex(name: str) -> str:
    """Return the regex fragment for converter *name*.

    Raises ``KeyError`` if *name* is not a registered converter.
    """
    return CONVERTERS[name]
