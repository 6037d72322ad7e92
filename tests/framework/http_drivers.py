"""
HTTP server test driver for multi-driver testing framework.

Serves the application with Werkzeug's WSGI server in a background thread and
makes real HTTP requests to it, validating behaviour over the wire.
"""

import threading

import requests
from flask import Flask
from werkzeug.serving import make_server

from tests.framework.dsl import HttpRequest, HttpResponse
from tests.framework.drivers import DriverInterface


class WerkzeugHttpDriver(DriverInterface):
    """
    Driver that runs the application behind a real HTTP server.

    Use as a context manager so the server is started and stopped around the tests.
    """

    def __init__(self, app: Flask, host: str = "127.0.0.1", port: int = 0):
        """
        Initialize HTTP server driver.

        Args:
            app: Flask application to test
            host: Host to bind to
            port: Port to bind to (0 for auto-assignment)
        """
        self.app = app
        self.host = host
        self.port = port
        self.server = None
        self.server_thread = None
        self.session = None

    @property
    def base_url(self) -> str:
        return f"http://{self.host}:{self.server.server_port}"

    def start_server(self):
        """Start the HTTP server in a background thread."""
        self.server = make_server(self.host, self.port, self.app, threaded=True)
        self.server_thread = threading.Thread(target=self.server.serve_forever, daemon=True)
        self.server_thread.start()
        self.session = requests.Session()

    def stop_server(self):
        """Stop the HTTP server."""
        if self.session is not None:
            self.session.close()
            self.session = None
        if self.server is not None:
            self.server.shutdown()
            self.server_thread.join(timeout=5)
            self.server = None

    def __enter__(self):
        self.start_server()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.stop_server()

    def execute(self, request: HttpRequest) -> HttpResponse:
        """Execute request over HTTP."""
        if self.server is None:
            raise RuntimeError("Server not started, use the driver as a context manager")

        body = request.encoded_body()
        response = self.session.request(
            request.method,
            f"{self.base_url}{request.path}",
            headers=request.headers,
            params=request.query_params or None,
            data=body.encode("utf-8") if body is not None else None,
            timeout=5,
        )

        return HttpResponse(
            status_code=response.status_code,
            headers=dict(response.headers),
            body=response.text,
            content_type=response.headers.get("Content-Type"),
        )
