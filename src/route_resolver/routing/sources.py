"""Route declaration sources.

Discovering routes (decorator registries, framework introspection, config
files) happens outside the compiler. A route source only has to hand over
``RouteDeclaration`` values in registration order.
"""

from collections.abc import Iterable, Iterator
from typing import Protocol, runtime_checkable

from .models import RouteDeclaration


@runtime_checkable
class RouteSource(Protocol):
    """Provider of already-extracted route declarations."""

    def declarations(self) -> Iterable[RouteDeclaration]:
        """Yield declarations in registration order."""
        ...


class StaticRouteSource:
    """Route source over a fixed list of declarations."""

    def __init__(self, declarations: Iterable[RouteDeclaration] = ()) -> None:
        self._declarations = list(declarations)

    def add(self, declaration: RouteDeclaration) -> None:
        """Append a declaration"""
        self._declarations.append(declaration)

    def declarations(self) -> list[RouteDeclaration]:
        return list(self._declarations)

    def __len__(self) -> int:
        return len(self._declarations)


def is_within_package(origin: str, base_package: str) -> bool:
    """Check if a dotted origin equals base_package or lives under it.

    Examples::

        is_within_package("app.web.views", "app.web")  -> True
        is_within_package("app.webhooks", "app.web")   -> False
    """
    return origin == base_package or origin.startswith(base_package + ".")


def retain_by_packages(
    declarations: Iterable[RouteDeclaration], *base_packages: str
) -> Iterator[RouteDeclaration]:
    """Keep declarations originating from any of the base packages.

    Args:
        declarations: Declarations to filter
        *base_packages: Dotted package names

    Yields:
        Retained declarations, order preserved
    """
    for declaration in declarations:
        if any(is_within_package(declaration.origin, p) for p in base_packages):
            yield declaration
