import re

_MARKUP = re.compile(r"[<>]")
_SCHEMES = re.compile(r"javascript:|data:", re.IGNORECASE)


def sanitize_input(value: str) -> str:
    """Trim free text and drop angle brackets and script/data URL schemes."""
    return _SCHEMES.sub("", _MARKUP.sub("", value.strip()))
