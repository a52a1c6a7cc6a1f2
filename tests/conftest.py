"""Shared pytest fixtures for route resolver tests."""

from enum import Enum

import pytest

from route_resolver import (
    HttpMethod,
    PropertyLookup,
    RouteCompiler,
    RouteDeclaration,
)


class Marker(str, Enum):
    """Tags used by the sample declarations"""

    ADMIN = "admin"
    PUBLIC = "public"
    SECURED = "secured"
    BODY = "body"
    PATH_PARAM = "path_param"


@pytest.fixture
def properties():
    """Configuration values available to placeholders.

    Returns:
        dict: Property name to value
    """
    return {"test.var": "home", "api.version": "v2"}


@pytest.fixture
def lookup(properties):
    """Property lookup over the sample configuration.

    Returns:
        PropertyLookup: Lookup backed by ``properties``
    """
    return PropertyLookup(properties)


@pytest.fixture
def compiler(lookup):
    """Route compiler with default configuration.

    Returns:
        RouteCompiler: Compiler resolving placeholders through ``lookup``
    """
    return RouteCompiler(lookup)


@pytest.fixture
def declarations():
    """Declarations resembling a small web application.

    Returns:
        list[RouteDeclaration]: Declarations in registration order
    """
    return [
        RouteDeclaration(
            group_templates=("/home",),
            route_templates=("/index",),
            methods=(HttpMethod.GET,),
            group_tags=(Marker.PUBLIC,),
            origin="app.controllers.home",
        ),
        RouteDeclaration(
            group_templates=("/home",),
            route_templates=("/{page}",),
            methods=(HttpMethod.GET, HttpMethod.POST),
            group_tags=(Marker.PUBLIC,),
            parameter_tags=((Marker.PATH_PARAM,), ()),
            origin="app.controllers.home",
        ),
        RouteDeclaration(
            group_templates=("/${api.version}/admin",),
            route_templates=("/users/**",),
            route_tags=(Marker.ADMIN, Marker.SECURED),
            parameter_tags=((Marker.BODY,),),
            origin="app.admin.views",
        ),
        RouteDeclaration(
            route_templates=("/ant/{aaa}/**/*/a+b-c?.json",),
            methods=(HttpMethod.GET,),
            origin="vendor.ant",
        ),
    ]


@pytest.fixture
def table(compiler, declarations):
    """Routing table built from the sample declarations.

    Returns:
        RoutingTable: Populated table
    """
    return compiler.build_table(declarations)
