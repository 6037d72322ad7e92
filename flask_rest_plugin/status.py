"""
HTTP status helpers.

Every code of :data:`STATUS_CODES` gets a helper named after its reason
phrase and one named after the number::

    status_ok({"users": users})          # 200, payload unchanged
    status_201(user)                     # 201
    status_not_found("no such user")     # 404, {"error": "no such user"}

For error codes (4xx and 5xx) a scalar payload (a string, a number or
``None``) is wrapped as ``{"error": payload}``; dicts, lists, models and
response objects pass through. The status is recorded on the current request
and applied to the outgoing response by the hook ``REST.init_app`` installs.
"""

import numbers
import re
from typing import Any, Dict, List, Optional

from flask import g

STATUS_ATTR = "rest_status"

STATUS_CODES: Dict[int, str] = {
    100: "Continue",
    101: "Switching Protocols",
    102: "Processing",
    200: "OK",
    201: "Created",
    202: "Accepted",
    203: "Non-Authoritative Information",
    204: "No Content",
    205: "Reset Content",
    206: "Partial Content",
    207: "Multi-Status",
    208: "Already Reported",
    301: "Moved Permanently",
    302: "Found",
    303: "See Other",
    304: "Not Modified",
    305: "Use Proxy",
    306: "Switch Proxy",
    307: "Temporary Redirect",
    400: "Bad Request",
    401: "Unauthorized",
    402: "Payment Required",
    403: "Forbidden",
    404: "Not Found",
    405: "Method Not Allowed",
    406: "Not Acceptable",
    407: "Proxy Authentication Required",
    408: "Request Timeout",
    409: "Conflict",
    410: "Gone",
    411: "Length Required",
    412: "Precondition Failed",
    413: "Request Entity Too Large",
    414: "Request-URI Too Long",
    415: "Unsupported Media Type",
    416: "Requested Range Not Satisfiable",
    417: "Expectation Failed",
    418: "I'm a teapot",
    420: "Enhance Your Calm",
    422: "Unprocessable Entity",
    423: "Locked",
    424: "Failed Dependency",
    425: "Unordered Collection",
    426: "Upgrade Required",
    428: "Precondition Required",
    429: "Too Many Requests",
    431: "Request Header Fields Too Large",
    444: "No Response",
    449: "Retry With",
    450: "Blocked by Windows Parental Controls",
    451: "Redirect",
    494: "Request Header Too Large",
    495: "Cert Error",
    496: "No Cert",
    497: "HTTP to HTTPS",
    499: "Client Closed Request",
    500: "Internal Server Error",
    501: "Not Implemented",
    502: "Bad Gateway",
    503: "Service Unavailable",
    504: "Gateway Timeout",
    505: "HTTP Version Not Supported",
    506: "Variant Also Negotiates",
    507: "Insufficient Storage",
    508: "Loop Detected",
    509: "Bandwidth Limit Exceeded",
    510: "Not Extended",
    511: "Network Authentication Required",
    598: "Network read timeout error",
    599: "Network connect timeout error",
}

# Extra helper names on top of the ones derived from the reason phrase.
STATUS_ALIASES: Dict[str, int] = {
    "error": 500,
}


def send_entity(entity: Any = None, code: Optional[int] = None) -> Any:
    """Set the response status for the current request and return ``entity``.

    ``None`` is returned as an empty body, since Flask views cannot return None.
    """
    setattr(g, STATUS_ATTR, code or 200)
    return "" if entity is None else entity


def is_scalar(entity: Any) -> bool:
    """True for values wrapped as ``{"error": entity}`` by error helpers: strings, numbers and None."""
    return entity is None or isinstance(entity, (str, numbers.Number))


def current_status() -> Optional[int]:
    """Status recorded for the current request by a helper, if any."""
    return g.get(STATUS_ATTR)


def helper_name(reason: str) -> str:
    """Derive a helper suffix from a reason phrase (``I'm a teapot`` -> ``i_m_a_teapot``)."""
    return re.sub(r"[^a-z0-9]+", "_", reason.lower()).strip("_")


class StatusHelper:
    """Callable that answers with a fixed status code."""

    def __init__(self, name: str, code: int):
        self.name = name
        self.code = code
        self.__name__ = name
        self.__qualname__ = name
        self.__doc__ = f"Send ``entity`` with status {code} {STATUS_CODES.get(code, '')}".rstrip()

    @property
    def is_error(self) -> bool:
        return self.code >= 400

    def prepare(self, entity: Any = None, code: Optional[int] = None) -> Any:
        """Return the payload as it will be served, without touching the request."""
        effective = code or self.code
        if effective >= 400 and is_scalar(entity):
            return {"error": entity}
        return entity

    def __call__(self, entity: Any = None, code: Optional[int] = None) -> Any:
        return send_entity(self.prepare(entity, code), code or self.code)

    def __repr__(self):
        return f"<StatusHelper {self.name} ({self.code})>"


def _build_helpers() -> Dict[str, StatusHelper]:
    helpers: Dict[str, StatusHelper] = {}
    for code, reason in STATUS_CODES.items():
        for suffix in (str(code), helper_name(reason)):
            name = f"status_{suffix}"
            helpers[name] = StatusHelper(name, code)
    for alias, code in STATUS_ALIASES.items():
        name = f"status_{alias}"
        helpers[name] = StatusHelper(name, code)
    return helpers


STATUS_HELPERS: Dict[str, StatusHelper] = _build_helpers()


def status_helper(name: str) -> StatusHelper:
    """Look up a helper by name, with or without the ``status_`` prefix."""
    if not name.startswith("status_"):
        name = f"status_{name}"
    try:
        return STATUS_HELPERS[name]
    except KeyError:
        raise AttributeError(f"no status helper named '{name}'") from None


def __getattr__(name: str) -> StatusHelper:
    if name.startswith("status_") and name in STATUS_HELPERS:
        return STATUS_HELPERS[name]
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__() -> List[str]:
    return sorted(list(globals()) + list(STATUS_HELPERS))
