"""Regex special-character escaping with protected spans.

``re.escape`` escapes everything; route templates need the opposite for
the tokens that are later rewritten into regex fragments (path variables
and wildcards). ``escape_special_characters`` escapes every special
character except those falling inside a match of one of the protected
patterns.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from re import Match, Pattern

SPECIAL_CHARACTERS = frozenset("\\[.]{}()*+-?^$|")


@dataclass(slots=True)
class _MatchCursor:
    """Lazily advanced position in the matches of one protected pattern."""

    matches: Iterator[Match[str]]
    span: tuple[int, int] | None = None

    def advance(self) -> bool:
        """Move to the next match. Returns False once exhausted."""
        match = next(self.matches, None)
        self.span = match.span() if match is not None else None
        return match is not None

    def is_behind(self, position: int) -> bool:
        return self.span is not None and self.span[1] <= position

    def covers(self, position: int) -> bool:
        # Zero-length spans never cover anything
        return self.span is not None and self.span[0] <= position < self.span[1]


def _open_cursors(text: str, patterns: tuple[Pattern[str], ...]) -> list[_MatchCursor]:
    cursors = []
    for pattern in patterns:
        cursor = _MatchCursor(pattern.finditer(text))
        cursor.advance()
        cursors.append(cursor)
    return cursors


def _is_protected(position: int, cursors: list[_MatchCursor]) -> bool:
    """Check whether ``position`` lies inside any protected span.

    Positions must be queried in increasing order: cursors only move
    forward, so a whole scan visits each match of each pattern once.
    """
    while True:
        advanced = False
        for cursor in cursors:
            if cursor.is_behind(position) and cursor.advance():
                advanced = True
            if cursor.covers(position):
                return True
        if not advanced:
            return False


def escape_special_characters(text: str, *protected: Pattern[str]) -> str:
    """Escape regex special characters outside protected spans.

    Args:
        text: Any string
        *protected: Compiled patterns whose matches are copied verbatim

    Returns:
        ``text`` with a backslash inserted before every unprotected
        special character

    Examples::

        escape_special_characters("a+b-c?.json")  -> r"a\\+b\\-c\\?\\.json"
        escape_special_characters("{id}.json", PATH_VARIABLE)
                                                   -> r"{id}\\.json"
    """
    cursors = _open_cursors(text, protected)
    escaped: list[str] = []

    for position, char in enumerate(text):
        if char in SPECIAL_CHARACTERS and not _is_protected(position, cursors):
            escaped.append("\\")
        escaped.append(char)

    return "".join(escaped)
