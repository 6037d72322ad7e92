"""
Test framework for RESTful API testing using 4-layer architecture.
"""

from .dsl import RestApiDsl, HttpRequest, HttpResponse
from .drivers import DriverInterface, FlaskClientDriver
from .multi_driver_base import MultiDriverTestBase, multi_driver_test_class

__all__ = [
    'RestApiDsl',
    'HttpRequest',
    'HttpResponse',
    'DriverInterface',
    'FlaskClientDriver',
    'MultiDriverTestBase',
    'multi_driver_test_class',
]
