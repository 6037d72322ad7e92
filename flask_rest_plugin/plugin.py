"""
Flask extension wiring the REST conventions into an application.
"""

import logging
from typing import Any, Callable, List, Optional

from flask import Flask, current_app, g, request
from flask.json.provider import DefaultJSONProvider
from flask.wrappers import Response

from .config import RestSettings
from .exceptions import ConfigurationError, EntityParsingError, UnsupportedFormatError
from .formats import FormatTable
from .models import FormatSpec, RouteDescriptor
from .provider import FORMAT_ATTR, SERIALIZER_ATTR, FormatJSONProvider
from .resource import expand_resource
from .status import STATUS_ATTR, STATUS_HELPERS, StatusHelper, send_entity

# Set up logger for this module
logger = logging.getLogger(__name__)

EXTENSION_NAME = "rest"
TOKEN_ATTR = "rest_format_token"


class REST:
    """REST conventions for a Flask application.

    Usage::

        app = Flask(__name__)
        rest = REST(app)
        rest.prepare_serializer_for_format()

        @app.get("/user/<id>.<format>")
        def get_user(id):
            return User.find(id).to_dict()

        # GET /user/42.json -> application/json
        # GET /user/42.yml  -> text/x-yaml

    The extension can also be created first and bound later with
    :meth:`init_app`.
    """

    def __init__(self, app: Optional[Flask] = None, prepare_serializer: bool = False):
        self.app: Optional[Flask] = None
        self.settings: Optional[RestSettings] = None
        self.formats: Optional[FormatTable] = None
        self._prepare_serializer = prepare_serializer
        if app is not None:
            self.init_app(app)

    def init_app(self, app: Flask) -> None:
        """Register the extension's hooks on ``app``."""
        self.app = app
        self.settings = RestSettings.from_mapping(app.config)
        app.extensions[EXTENSION_NAME] = self

        app.url_value_preprocessor(self._pop_format_token)
        app.after_request(self._apply_status)
        app.register_error_handler(UnsupportedFormatError, self._handle_unsupported_format)
        app.register_error_handler(EntityParsingError, self._handle_entity_parsing_error)

        if self._prepare_serializer:
            self.prepare_serializer_for_format()

    def _require_app(self) -> Flask:
        if self.app is None:
            raise ConfigurationError("REST extension is not bound to an application, call init_app() first")
        return self.app

    # Format-based serialization

    def prepare_serializer_for_format(self) -> FormatTable:
        """Select the response serializer from the ``format`` route parameter.

        Installs a before-request hook that looks the format token up in the
        format table. Known tokens switch the serializer and Content-Type of
        dict/list results; unknown tokens answer with the configured error
        status without running the view.
        """
        app = self._require_app()
        if self.formats is not None:
            if not isinstance(app.json, FormatJSONProvider):
                self._install_provider(app)
            else:
                logger.debug("format serialization already prepared")
            return self.formats

        # Config may have changed between init_app() and now.
        self.settings = RestSettings.from_mapping(app.config)
        self.formats = FormatTable.from_settings(self.settings)

        self._install_provider(app)
        app.before_request(self._select_format)
        return self.formats

    def _install_provider(self, app: Flask) -> None:
        if type(app.json) is not DefaultJSONProvider:
            logger.warning(
                f"JSON provider '{type(app.json).__name__}' set on the application, "
                f"overridden by {FormatJSONProvider.__name__}"
            )
        app.json = FormatJSONProvider(app)

    @property
    def format_table(self) -> FormatTable:
        """The active format table, or the configured one if serialization is not prepared."""
        if self.formats is not None:
            return self.formats
        settings = self.settings or RestSettings.from_mapping(self._require_app().config)
        return FormatTable.from_settings(settings)

    def _pop_format_token(self, endpoint: Optional[str], values: Optional[dict]) -> None:
        if values and "format" in values:
            setattr(g, TOKEN_ATTR, values.pop("format"))

    def _select_format(self) -> None:
        token = g.get(TOKEN_ATTR) or request.args.get("format")
        spec = self.formats.resolve(token, self.settings.unsupported_format_status)
        if spec is None:
            return
        logger.debug(f"format '{spec.token}' selected for {request.path}")
        setattr(g, FORMAT_ATTR, spec)
        setattr(g, SERIALIZER_ATTR, self.formats.serializer_for(spec.token))

    def _handle_unsupported_format(self, error: UnsupportedFormatError) -> Response:
        logger.debug(f"unsupported format '{error.token}' requested for {request.path}")
        response = current_app.json.response({"error": error.message})
        response.status_code = error.status_code
        return response

    def _handle_entity_parsing_error(self, error: EntityParsingError) -> Response:
        logger.debug(f"unreadable request body for {request.path}: {error.original_exception}")
        response = current_app.json.response({"error": error.message})
        response.status_code = error.code
        return response

    # Status

    def _apply_status(self, response: Response) -> Response:
        status = g.pop(STATUS_ATTR, None)
        # Only the view's own return is rewritten; error pages and explicit
        # statuses keep theirs.
        if status is not None and response.status_code == 200:
            response.status_code = status
        return response

    def send_entity(self, entity: Any = None, code: Optional[int] = None) -> Any:
        return send_entity(entity, code)

    def __getattr__(self, name: str) -> StatusHelper:
        if name.startswith("status_") and name in STATUS_HELPERS:
            return STATUS_HELPERS[name]
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    # Resources

    def resource(self, name: str, **actions: Optional[Callable]) -> List[RouteDescriptor]:
        """Declare a resource handled by the application.

        Example::

            rest.resource(
                "user",
                get=get_user,        # GET    /user/<id>, /user/<id>.<format>
                create=create_user,  # POST   /user,      /user.<format>
                update=update_user,  # PUT    /user/<id>, /user/<id>.<format>
                delete=delete_user,  # DELETE /user/<id>, /user/<id>.<format>
            )

        Returns the generated route descriptors.
        """
        app = self._require_app()
        routes = expand_resource(name, **actions)
        prefix = name.strip("/").replace("/", "_")
        for route in routes:
            endpoint = f"{prefix}_{route.action}"
            for rule in route.rules():
                app.add_url_rule(rule, endpoint=endpoint, view_func=route.handler, methods=[route.method.value])
        logger.info(f"resource '{name}' registered with actions {[route.action for route in routes]}")
        return routes


def get_extension() -> REST:
    """Return the REST extension of the current application."""
    try:
        return current_app.extensions[EXTENSION_NAME]
    except KeyError:
        raise ConfigurationError("REST extension is not registered on the current application") from None


def current_format() -> Optional[FormatSpec]:
    """The format resolved for the current request, if any."""
    return g.get(FORMAT_ATTR)


def request_entity() -> Any:
    """Decode the request body.

    Uses the serializer of the format resolved from the URL, else the one
    whose content type matches the request's Content-Type, else Flask's own
    JSON parsing.
    """
    table = get_extension().format_table
    spec = current_format() or table.for_content_type(request.content_type)
    if spec is None:
        return request.get_json(silent=True)

    text = request.get_data(as_text=True)
    if not text:
        return None
    serializer = table.serializer_for(spec.token)
    try:
        return serializer.deserialize(text)
    except serializer.decode_errors as e:
        raise EntityParsingError(f"Failed to parse request body as {spec.content_type}", original_exception=e) from e
