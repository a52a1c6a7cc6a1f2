"""Wildcard and path-variable translation for route matcher patterns."""

import re
from functools import lru_cache
from re import Pattern

from ..common.utils import DEFAULT_SEPARATOR
from .escaping import escape_special_characters

PATH_VARIABLE = re.compile(r"\{[^}]+\}")
DOUBLE_WILDCARD = re.compile(r"\*\*")
SINGLE_WILDCARD = re.compile(r"\*")
CHARACTER_WILDCARD = re.compile(r"\?")

# Stands in for the "*" of ".*" until single wildcards are translated,
# so the fragment written for "**" is not picked up as a "*" wildcard.
SENTINEL = '"'


def to_matcher_fragment(
    resolved_path: str,
    separator: str = DEFAULT_SEPARATOR,
    optional_leading: bool = True,
    optional_trailing: bool = True,
) -> str:
    """Translate a resolved route path into a regex source string.

    ``{name}`` matches one non-empty segment, ``*`` zero or more characters
    within a segment, ``**`` anything including separators and ``?`` exactly
    one character. Every other regex special character is escaped.

    Args:
        resolved_path: Path with placeholders already substituted
        separator: Path segment separator
        optional_leading: Make the leading separator optional
        optional_trailing: Make a trailing separator optional, unless the
            path already ends with one

    Returns:
        Regex source meant for a full match

    Examples::

        "/ant/{aaa}/**/*/a+b-c?.json"
            -> r"/?ant/[^/]+/.*/[^/]*/a\\+b\\-c.\\.json/?"
    """
    segment = re.escape(separator)
    fragment = escape_special_characters(
        resolved_path,
        PATH_VARIABLE,
        DOUBLE_WILDCARD,
        SINGLE_WILDCARD,
        CHARACTER_WILDCARD,
    )

    fragment = PATH_VARIABLE.sub(lambda _: f"[^{segment}]+", fragment)
    fragment = DOUBLE_WILDCARD.sub(lambda _: "." + SENTINEL, fragment)
    fragment = SINGLE_WILDCARD.sub(lambda _: f"[^{segment}]*", fragment)
    fragment = CHARACTER_WILDCARD.sub(lambda _: ".", fragment)
    fragment = fragment.replace(SENTINEL, "*")

    if optional_leading:
        if fragment.startswith(separator):
            fragment = fragment[len(separator):]
        fragment = f"{segment}?{fragment}"
    if optional_trailing and not fragment.endswith(separator):
        fragment = f"{fragment}{segment}?"

    return fragment


# Route tables are rebuilt per compilation pass from the same templates;
# 256 distinct resolved paths covers large applications.
@lru_cache(maxsize=256)
def compile_matcher(
    resolved_path: str,
    separator: str = DEFAULT_SEPARATOR,
    optional_leading: bool = True,
    optional_trailing: bool = True,
) -> Pattern[str]:
    """Compile a resolved route path into a matcher pattern with caching."""
    return re.compile(
        to_matcher_fragment(
            resolved_path, separator, optional_leading, optional_trailing
        )
    )


def has_wildcards(path: str) -> bool:
    """Check if a path contains path variables or wildcards"""
    return bool(
        PATH_VARIABLE.search(path)
        or SINGLE_WILDCARD.search(path)
        or CHARACTER_WILDCARD.search(path)
    )
