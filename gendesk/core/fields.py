"""Value extraction for single PKGBUILD lines of the form key=value.

Quoted values win over unquoted ones; an unquoted value is only taken
when the line holds exactly one "=".
"""

from __future__ import annotations

QUOTES = ('"', "'")


def starts_with(line: str, word: str) -> bool:
    """Check if the trimmed line starts with word."""
    return line.strip().startswith(word)


def between(text: str, a: str, b: str) -> str:
    """Return what is between the first a and the last b, or an empty string."""
    if a not in text or b not in text:
        return ""
    start = text.index(a) + len(a)
    end = text.rindex(b)
    if end < start:
        return ""
    return text[start:end]


def between_quotes(text: str) -> str:
    """Return the contents between "" or '' (double quotes first)."""
    for quote in QUOTES:
        value = between(text, quote, quote)
        if value:
            return value
    return ""


def extract_value(line: str) -> str:
    """Return the quoted value, or the trimmed text after a single '='."""
    value = between_quotes(line)
    if not value and line.count("=") == 1:
        value = line.split("=", 1)[1].strip()
        if not value.strip("()\"' "):
            # Empty quotes or an empty array
            value = ""
    return value


def extract_field(line: str, prefix: str) -> str | None:
    """Return the value of line if it is a `prefix` assignment, else None."""
    if not starts_with(line, prefix):
        return None
    return extract_value(line)


def split_list(value: str, sep: str = ";") -> list[str]:
    """Split a ';'-separated value into its non-empty, trimmed items."""
    return [item.strip() for item in value.split(sep) if item.strip()]
