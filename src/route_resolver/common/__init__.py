"""Common utilities and shared functionality."""

from .exceptions import ConfigurationError, RouteResolverError, TemplateError
from .logging import get_logger, setup_logging
from .utils import join_paths, unique_in_order

__all__ = [
    # Exceptions
    "RouteResolverError",
    "ConfigurationError",
    "TemplateError",
    # Logging
    "get_logger",
    "setup_logging",
    # Utils
    "join_paths",
    "unique_in_order",
]
