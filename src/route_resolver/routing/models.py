"""Route models.

This module defines the HTTP method enumeration, the declarations handed
over by route sources and the immutable compiled route entries.
"""

from collections.abc import Hashable
from enum import Enum
from re import Pattern
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .patterns import has_wildcards

# Opaque metadata attached to a route: a string, an enum member or any
# other hashable value compared by equality.
Tag = Hashable


class HttpMethod(str, Enum):
    """HTTP method enumeration."""

    GET = "GET"
    HEAD = "HEAD"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    OPTIONS = "OPTIONS"
    TRACE = "TRACE"

    @classmethod
    def parse(cls, value: "str | HttpMethod") -> "HttpMethod":
        """Parse a method name case-insensitively."""
        if isinstance(value, cls):
            return value
        return cls(str(value).strip().upper())


def _reject_unordered(value: Any) -> None:
    # Declaration order decides table order, which decides lookup precedence
    if isinstance(value, set | frozenset):
        raise ValueError("must be an ordered sequence, not a set")


def _to_methods(value: Any) -> Any:
    _reject_unordered(value)
    if isinstance(value, str | HttpMethod):
        value = [value]
    if isinstance(value, list | tuple):
        return tuple(
            HttpMethod.parse(item) if isinstance(item, str) else item
            for item in value
        )
    return value


def _to_templates(value: Any) -> Any:
    _reject_unordered(value)
    if isinstance(value, str):
        return (value,)
    return value


class RouteDeclaration(BaseModel):
    """A declared route as extracted by a route source.

    Empty template tuples stand for a single empty template; an empty
    method tuple stands for every HTTP method.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    group_templates: tuple[str, ...] = Field(
        default=(), description="Templates declared at the grouping level"
    )
    route_templates: tuple[str, ...] = Field(
        default=(), description="Templates declared on the route itself"
    )
    methods: tuple[HttpMethod, ...] = Field(
        default=(), description="Declared HTTP methods (empty means all)"
    )
    group_tags: tuple[Tag, ...] = Field(default=(), description="Grouping tags")
    route_tags: tuple[Tag, ...] = Field(default=(), description="Route tags")
    parameter_tags: tuple[tuple[Tag, ...], ...] = Field(
        default=(), description="Tags per declared parameter position"
    )
    origin: str = Field(
        default="", description="Dotted name of the code declaring the route"
    )

    @field_validator("group_templates", "route_templates", mode="before")
    @classmethod
    def validate_templates(cls, v: Any) -> Any:
        """Accept a single template string."""
        return _to_templates(v)

    @field_validator("methods", mode="before")
    @classmethod
    def validate_methods(cls, v: Any) -> Any:
        """Accept method names in any case."""
        return _to_methods(v)


class RouteEntry(BaseModel):
    """A compiled route.

    Equality and hashing ignore ``parameter_tags``: two entries differing
    only in parameter tags are the same route.
    """

    model_config = ConfigDict(
        frozen=True, extra="forbid", arbitrary_types_allowed=True
    )

    method: HttpMethod = Field(description="HTTP method of this route")
    raw_template: str = Field(description="Template before placeholder resolution")
    resolved_path: str = Field(description="Template with placeholders resolved")
    matcher_pattern: Pattern[str] = Field(
        description="Pattern matching every request path the template denotes"
    )
    group_tags: tuple[Tag, ...] = Field(default=(), description="Grouping tags")
    route_tags: tuple[Tag, ...] = Field(default=(), description="Route tags")
    parameter_tags: tuple[tuple[Tag, ...], ...] = Field(
        default=(), description="Tags per declared parameter position"
    )

    @field_validator("method", mode="before")
    @classmethod
    def validate_method(cls, v: Any) -> Any:
        """Accept method names in any case."""
        if isinstance(v, str):
            return HttpMethod.parse(v)
        return v

    def _identity(self) -> tuple[Any, ...]:
        return (
            self.method,
            self.raw_template,
            self.resolved_path,
            self.matcher_pattern.pattern,
            self.group_tags,
            self.route_tags,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RouteEntry):
            return NotImplemented
        return self._identity() == other._identity()

    def __hash__(self) -> int:
        return hash(self._identity())

    @property
    def is_pattern(self) -> bool:
        """Whether the resolved path holds path variables or wildcards"""
        return has_wildcards(self.resolved_path)

    def matches(self, path: str) -> bool:
        """Check if a request path fully matches this route's pattern"""
        return self.matcher_pattern.fullmatch(path) is not None

    def has_tag(self, tag: Tag) -> bool:
        """Check if tag is attached at the grouping or route level"""
        return tag in self.group_tags or tag in self.route_tags

    def has_parameter_tag(self, tag: Tag) -> bool:
        """Check if tag is attached to any declared parameter"""
        return any(tag in tags for tags in self.parameter_tags)

    def to_dict(self) -> dict[str, Any]:
        """Serialize entry to a plain dictionary.

        Returns:
            Dictionary representation with the pattern as its source text
        """
        return {
            "method": self.method.value,
            "raw_template": self.raw_template,
            "resolved_path": self.resolved_path,
            "matcher_pattern": self.matcher_pattern.pattern,
            "group_tags": list(self.group_tags),
            "route_tags": list(self.route_tags),
            "parameter_tags": [list(tags) for tags in self.parameter_tags],
        }

    def __str__(self) -> str:
        return f"{self.method.value} {self.raw_template}"

    def __repr__(self) -> str:
        return (
            f"RouteEntry(method={self.method.value!r}, "
            f"raw_template={self.raw_template!r}, "
            f"resolved_path={self.resolved_path!r}, "
            f"matcher_pattern={self.matcher_pattern.pattern!r})"
        )
