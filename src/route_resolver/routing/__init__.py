"""Route template compilation and routing table module."""

from .compiler import RouteCompiler
from .config import CompilerConfig
from .escaping import SPECIAL_CHARACTERS, escape_special_characters
from .exceptions import MalformedTemplateError
from .models import HttpMethod, RouteDeclaration, RouteEntry, Tag
from .patterns import compile_matcher, to_matcher_fragment
from .placeholders import Lookup, PropertyLookup, resolve_placeholders
from .sources import RouteSource, StaticRouteSource, retain_by_packages
from .table import RoutingTable
from .validator import TemplateValidator

__all__ = [
    # Models
    "HttpMethod",
    "RouteDeclaration",
    "RouteEntry",
    "Tag",
    # Compilation
    "RouteCompiler",
    "CompilerConfig",
    "TemplateValidator",
    "MalformedTemplateError",
    # Pattern building
    "SPECIAL_CHARACTERS",
    "escape_special_characters",
    "to_matcher_fragment",
    "compile_matcher",
    # Placeholders
    "Lookup",
    "PropertyLookup",
    "resolve_placeholders",
    # Sources
    "RouteSource",
    "StaticRouteSource",
    "retain_by_packages",
    # Table
    "RoutingTable",
]
