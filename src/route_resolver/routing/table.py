"""Routing table over compiled route entries."""

from collections.abc import Iterator
from typing import Any

from ..common.logging import get_logger
from .models import HttpMethod, RouteEntry, Tag

logger = get_logger(__name__)


class RoutingTable:
    """Insertion-ordered, deduplicated collection of compiled routes.

    The table is filled once by the route compiler and only queried
    afterwards. Lookups by path try every literal path before any matcher
    pattern, so a literal ``/home/index`` wins over ``/home/{page}``.

    Usage::

        table = RouteCompiler(lookup).build_table(declarations)
        entry = table.find_exact("/home/index", HttpMethod.GET)
        admin_routes = table.find_by_tag("admin")
    """

    __slots__ = ("_entries",)

    def __init__(self) -> None:
        # dict keys keep insertion order and deduplicate by RouteEntry equality
        self._entries: dict[RouteEntry, None] = {}

    def insert(self, entry: RouteEntry) -> bool:
        """Add entry unless an equal entry is already present.

        Args:
            entry: Compiled route entry

        Returns:
            True if the entry was added, False if it was a duplicate
        """
        if entry in self._entries:
            logger.debug("Skipped duplicate route", route=str(entry))
            return False

        self._entries[entry] = None
        return True

    def all(self) -> list[RouteEntry]:
        """Get all entries in insertion order"""
        return list(self._entries)

    def find_exact(
        self, path: str, method: HttpMethod | str
    ) -> RouteEntry | None:
        """Find the route serving a request path and method.

        Args:
            path: Request path
            method: HTTP method

        Returns:
            First entry whose resolved path equals ``path``, else the first
            entry whose pattern matches it; None if neither exists
        """
        method = HttpMethod.parse(method)

        for entry in self._entries:
            if entry.resolved_path == path and entry.method == method:
                return entry

        for entry in self._entries:
            if entry.method == method and entry.matches(path):
                return entry

        return None

    def find_by_path(self, path: str) -> list[RouteEntry]:
        """Find all routes serving a request path, for any method.

        Args:
            path: Request path

        Returns:
            Entries whose resolved path equals ``path``, followed by the
            remaining entries whose pattern matches it, each in table order
        """
        exact = [entry for entry in self._entries if entry.resolved_path == path]
        matched = [
            entry
            for entry in self._entries
            if entry.resolved_path != path and entry.matches(path)
        ]
        return exact + matched

    def find_by_tag(self, tag: Tag) -> list[RouteEntry]:
        """Find routes tagged at the grouping or route level"""
        return [entry for entry in self._entries if entry.has_tag(tag)]

    def find_by_group_tag(self, tag: Tag) -> list[RouteEntry]:
        """Find routes tagged at the grouping level"""
        return [entry for entry in self._entries if tag in entry.group_tags]

    def find_by_route_tag(self, tag: Tag) -> list[RouteEntry]:
        """Find routes tagged at the route level"""
        return [entry for entry in self._entries if tag in entry.route_tags]

    def find_by_parameter_tag(self, tag: Tag) -> list[RouteEntry]:
        """Find routes with a parameter carrying tag"""
        return [entry for entry in self._entries if entry.has_parameter_tag(tag)]

    def to_dict(self) -> dict[str, Any]:
        """Serialize table to dictionary.

        Returns:
            Dictionary representation of the table
        """
        return {"routes": [entry.to_dict() for entry in self._entries]}

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[RouteEntry]:
        return iter(self._entries)

    def __contains__(self, entry: object) -> bool:
        return entry in self._entries

    def __repr__(self) -> str:
        return f"RoutingTable(routes={len(self._entries)})"
