"""Route compiler turning route declarations into routing table entries."""

from collections.abc import Iterable
from itertools import product
from re import Pattern
from typing import Any

from pydantic import ValidationError

from ..common.exceptions import ConfigurationError
from ..common.logging import get_logger
from ..common.utils import join_paths, unique_in_order
from .config import CompilerConfig
from .exceptions import MalformedTemplateError
from .models import HttpMethod, RouteDeclaration, RouteEntry
from .patterns import compile_matcher
from .placeholders import Lookup, default_lookup, resolve_placeholders
from .sources import RouteSource, retain_by_packages
from .table import RoutingTable
from .validator import TemplateValidator

logger = get_logger(__name__)


class RouteCompiler:
    """Compiles route declarations into a routing table.

    Each declaration expands to the cartesian product of its grouping
    templates, route templates and methods, in that nesting order. The
    order decides insertion order in the table, which in turn decides
    which pattern wins a lookup.
    """

    def __init__(
        self,
        lookup: Lookup | None = None,
        config: CompilerConfig | dict[str, Any] | None = None,
    ) -> None:
        """Initialize route compiler.

        Args:
            lookup: Resolves ``${key:default}`` placeholders; without one,
                every placeholder resolves to its default
            config: Compiler configuration, or a dictionary of its fields

        Raises:
            ConfigurationError: If a configuration dictionary is invalid
        """
        self.lookup = lookup if lookup is not None else default_lookup

        if isinstance(config, dict):
            try:
                config = CompilerConfig(**config)
            except ValidationError as e:
                raise ConfigurationError(f"Invalid compiler configuration: {e}") from e
        self.config = config or CompilerConfig()

    def compile_template(self, raw_template: str) -> tuple[str, Pattern[str]]:
        """Resolve and validate a joined template.

        Args:
            raw_template: Joined route template

        Returns:
            Tuple of (resolved path, matcher pattern)

        Raises:
            MalformedTemplateError: If the template cannot be compiled
        """
        try:
            TemplateValidator.validate_template(raw_template)
            resolved_path = resolve_placeholders(raw_template, self.lookup)
            TemplateValidator.validate_resolved_path(resolved_path)
        except MalformedTemplateError as e:
            logger.error(
                "Rejected route template",
                template=raw_template,
                position=e.position,
                reason=e.reason,
            )
            raise

        matcher = compile_matcher(
            resolved_path,
            self.config.separator,
            self.config.optional_leading_separator,
            self.config.optional_trailing_separator,
        )
        return resolved_path, matcher

    def compile_declaration(self, declaration: RouteDeclaration) -> list[RouteEntry]:
        """Expand one declaration into compiled route entries.

        Args:
            declaration: Declared route

        Returns:
            Entries in group, route, method order; duplicates removed

        Raises:
            MalformedTemplateError: If any expanded template is malformed
        """
        group_templates = unique_in_order(declaration.group_templates) or [""]
        route_templates = unique_in_order(declaration.route_templates) or [""]
        methods = unique_in_order(declaration.methods) or list(HttpMethod)

        entries: list[RouteEntry] = []
        for group_template, route_template in product(
            group_templates, route_templates
        ):
            raw_template = join_paths(
                group_template, route_template, separator=self.config.separator
            )
            resolved_path, matcher = self.compile_template(raw_template)

            for method in methods:
                entry = RouteEntry(
                    method=method,
                    raw_template=raw_template,
                    resolved_path=resolved_path,
                    matcher_pattern=matcher,
                    group_tags=declaration.group_tags,
                    route_tags=declaration.route_tags,
                    parameter_tags=declaration.parameter_tags,
                )
                logger.debug(
                    "Compiled route",
                    method=method.value,
                    template=raw_template,
                    pattern=matcher.pattern,
                )
                entries.append(entry)

        return unique_in_order(entries)

    def build_table(
        self,
        declarations: Iterable[RouteDeclaration],
        table: RoutingTable | None = None,
    ) -> RoutingTable:
        """Compile declarations into a routing table.

        A declaration is compiled in full before any of its entries is
        inserted, so a malformed template leaves no partial declaration
        behind.

        Args:
            declarations: Declared routes in registration order
            table: Existing table to extend; a new one is created if omitted

        Returns:
            The populated routing table
        """
        table = table if table is not None else RoutingTable()
        declared = 0
        inserted = 0

        for declaration in declarations:
            declared += 1
            for entry in self.compile_declaration(declaration):
                if table.insert(entry):
                    inserted += 1

        logger.info(
            "Built routing table",
            declarations=declared,
            inserted=inserted,
            routes=len(table),
        )
        return table

    def build_table_from(
        self, source: RouteSource, *base_packages: str
    ) -> RoutingTable:
        """Compile the declarations of a route source.

        Args:
            source: Provider of route declarations
            *base_packages: Keep only declarations originating from these
                packages; all declarations are kept if none are given

        Returns:
            The populated routing table
        """
        declarations = source.declarations()
        if base_packages:
            declarations = retain_by_packages(declarations, *base_packages)
        return self.build_table(declarations)
