"""Route resolver - compile route templates into a queryable routing table."""

from . import routing

# Common utilities
from .common.exceptions import ConfigurationError, RouteResolverError, TemplateError
from .common.logging import get_logger, setup_logging
from .common.utils import join_paths

# Routing
from .routing import (
    CompilerConfig,
    HttpMethod,
    Lookup,
    MalformedTemplateError,
    PropertyLookup,
    RouteCompiler,
    RouteDeclaration,
    RouteEntry,
    RouteSource,
    RoutingTable,
    StaticRouteSource,
    Tag,
    compile_matcher,
    escape_special_characters,
    resolve_placeholders,
    retain_by_packages,
    to_matcher_fragment,
)

# Package level logger
logger = get_logger(__name__)

__version__ = "0.1.0"


__all__ = [
    # Compilation
    "RouteCompiler",
    "CompilerConfig",
    "RouteDeclaration",
    "RouteEntry",
    "RoutingTable",
    "HttpMethod",
    "Tag",
    # Sources and configuration lookup
    "RouteSource",
    "StaticRouteSource",
    "retain_by_packages",
    "Lookup",
    "PropertyLookup",
    # Pattern building
    "escape_special_characters",
    "to_matcher_fragment",
    "compile_matcher",
    "resolve_placeholders",
    "join_paths",
    # Exceptions
    "RouteResolverError",
    "ConfigurationError",
    "TemplateError",
    "MalformedTemplateError",
    # Logging
    "get_logger",
    "setup_logging",
    "routing",
]
