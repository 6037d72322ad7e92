"""
Core data models for the REST plugin.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, List


class HTTPMethod(Enum):
    """Enumeration of HTTP methods used by resource routes."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


@dataclass(frozen=True)
class FormatSpec:
    """A format token bound to its content type and serializer."""

    token: str
    content_type: str
    serializer_id: str


@dataclass(frozen=True)
class RouteDescriptor:
    """Represents one route generated from a resource declaration.

    The path pattern is written with an optional format suffix, e.g.
    ``/user/<id>[.<format>]``; ``rules()`` expands it into the concrete
    URL rules handed to the host router.
    """

    method: HTTPMethod
    path: str
    handler: Callable
    action: str

    FORMAT_SUFFIX = "[.<format>]"

    @property
    def base_path(self) -> str:
        """The path without its optional format suffix."""
        return self.path[: -len(self.FORMAT_SUFFIX)]

    def rules(self) -> List[str]:
        """Return the URL rules for this route, with and without the format suffix."""
        return [f"{self.base_path}.<format>", self.base_path]
