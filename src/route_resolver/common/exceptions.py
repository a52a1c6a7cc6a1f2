"""Custom exceptions for route resolver."""


class RouteResolverError(Exception):
    """Base exception for all route resolver errors."""
    pass


class ConfigurationError(RouteResolverError):
    """Raised when compiler configuration is invalid."""
    pass


class TemplateError(RouteResolverError):
    """Raised when a route template cannot be compiled."""
    pass
