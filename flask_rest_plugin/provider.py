"""
JSON provider that serializes view results in the format picked from the URL.
"""

from typing import Any

from flask import g
from flask.json.provider import DefaultJSONProvider
from flask.wrappers import Response

from .serializers import JSONSerializer

FORMAT_ATTR = "rest_format"
SERIALIZER_ATTR = "rest_serializer"


class FormatJSONProvider(DefaultJSONProvider):
    """Serializes dict and list results with the serializer of the active format.

    Flask hands every dict or list returned by a view to ``app.json.response``.
    When a format suffix was resolved for the request, the body is produced by
    that format's serializer and the Content-Type is set to the format's
    content type exactly. Without a format, the default JSON behaviour is kept.

    The JSON serializer goes through this provider's own ``dumps``, so
    ``/user/1`` and ``/user/1.json`` produce the same body, honouring
    ``default``, ``sort_keys`` and ``ensure_ascii``.
    """

    def response(self, *args: Any, **kwargs: Any) -> Response:
        spec = g.get(FORMAT_ATTR) if g else None
        if spec is None:
            return super().response(*args, **kwargs)

        if args and kwargs:
            raise TypeError("app.json.response() takes either args or kwargs, not both")
        if not args and not kwargs:
            data = None
        elif len(args) == 1:
            data = args[0]
        else:
            data = args or kwargs

        serializer = g.get(SERIALIZER_ATTR)
        if isinstance(serializer, JSONSerializer):
            response = super().response(serializer.to_primitive(data))
        else:
            response = self._app.response_class(serializer.serialize(data))
        # Assigned on headers directly so Werkzeug does not append a charset.
        response.headers["Content-Type"] = spec.content_type
        return response
