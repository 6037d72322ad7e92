"""
REST conventions for Flask applications.

This module provides format-based response serialization driven by a URL
suffix (``/user/42.json``, ``/user/42.yml``, ``/user/42.dump``), a
``resource`` helper expanding CRUD actions into routes, and one response
helper per HTTP status code (``status_ok``, ``status_not_found``, ...).
"""

from http import HTTPStatus

from .config import RestSettings
from .exceptions import (
    ConfigurationError,
    EntityParsingError,
    RestPluginError,
    UnsupportedFormatError,
)
from .formats import DEFAULT_CONTENT_TYPES, DEFAULT_SERIALIZERS, FormatTable
from .models import FormatSpec, HTTPMethod, RouteDescriptor
from .plugin import REST, current_format, get_extension, request_entity
from .provider import FormatJSONProvider
from .resource import expand_resource
from .serializers import (
    DumperSerializer,
    JSONSerializer,
    Serializer,
    YAMLSerializer,
)
from .status import (
    STATUS_CODES,
    STATUS_HELPERS,
    StatusHelper,
    send_entity,
    status_helper,
)

__version__ = "0.1.0"
__author__ = "flask-rest-plugin Contributors"
__license__ = "MIT"

__all__ = [
    "REST",
    "RestSettings",
    "FormatTable",
    "FormatSpec",
    "FormatJSONProvider",
    "HTTPMethod",
    "HTTPStatus",
    "RouteDescriptor",
    "Serializer",
    "JSONSerializer",
    "YAMLSerializer",
    "DumperSerializer",
    "StatusHelper",
    "RestPluginError",
    "ConfigurationError",
    "UnsupportedFormatError",
    "EntityParsingError",
    "DEFAULT_CONTENT_TYPES",
    "DEFAULT_SERIALIZERS",
    "STATUS_CODES",
    "STATUS_HELPERS",
    "current_format",
    "get_extension",
    "request_entity",
    "expand_resource",
    "send_entity",
    "status_helper",
]

# One name per status helper: status_ok, status_404, status_error, ...
__all__.extend(sorted(STATUS_HELPERS))


def __getattr__(name: str) -> StatusHelper:
    if name in STATUS_HELPERS:
        return STATUS_HELPERS[name]
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
