"""Configuration placeholder resolution for route templates.

Templates may embed ``${key}`` or ``${key:default}`` tokens whose values
come from the application's configuration. The resolver only knows the
``lookup(key, default)`` callable; where values live is up to the caller.
"""

import os
import re
from collections.abc import Callable, Mapping

Lookup = Callable[[str, str], str]

PLACEHOLDER = re.compile(r"\$\{([^}]+)\}")


def split_placeholder(token_body: str) -> tuple[str, str]:
    """Split ``key:default`` into its parts; the default may contain colons."""
    key, _, default = token_body.partition(":")
    return key, default


def default_lookup(key: str, default: str) -> str:
    """Lookup used when no configuration is supplied"""
    return default


def resolve_placeholders(template: str, lookup: Lookup = default_lookup) -> str:
    """Substitute every placeholder in ``template``.

    Placeholders are replaced left to right in a single pass; text produced
    by ``lookup`` is never scanned for further placeholders.

    Args:
        template: Raw route template
        lookup: Callable returning the value for ``(key, default)``

    Returns:
        Template with all placeholders substituted
    """

    def _substitute(match: re.Match[str]) -> str:
        key, default = split_placeholder(match.group(1))
        return lookup(key, default)

    return PLACEHOLDER.sub(_substitute, template)


class PropertyLookup:
    """Ordered chain of property sources; the first source holding a key wins.

    Usage::

        lookup = PropertyLookup({"api.version": "v2"}, os.environ)
        resolve_placeholders("/api/${api.version}", lookup)  # "/api/v2"
    """

    def __init__(self, *sources: Mapping[str, str]) -> None:
        self._sources = sources

    @classmethod
    def from_environ(
        cls, prefix: str = "", environ: Mapping[str, str] | None = None
    ) -> "PropertyLookup":
        """Build a lookup over environment variables.

        With a prefix, ``${server.base}`` reads ``<PREFIX>SERVER_BASE``: dots
        and dashes become underscores and the key is upper-cased.
        """
        environ = os.environ if environ is None else environ
        if not prefix:
            return cls(environ)

        translated = {}
        for name, value in environ.items():
            if name.startswith(prefix):
                key = name[len(prefix):].lower()
                translated[key] = value
                translated[key.replace("_", ".")] = value
                translated[key.replace("_", "-")] = value
        return cls(translated)

    @property
    def sources(self) -> tuple[Mapping[str, str], ...]:
        return self._sources

    def get(self, key: str) -> str | None:
        """Get the raw value for key, or None when no source holds it."""
        for source in self._sources:
            if key in source:
                return str(source[key])
        return None

    def __call__(self, key: str, default: str) -> str:
        value = self.get(key)
        return default if value is None else value

    def __repr__(self) -> str:
        return f"PropertyLookup(sources={len(self._sources)})"
