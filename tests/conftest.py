import pytest
from bottle import Bottle
from webtest import TestApp

from bottle_http_swagger import SwaggerUIPlugin
from bottle_http_swagger_ui import registry

PETSTORE_DOC = """{
    "swagger": "2.0",
    "info": {
        "description": "This is a sample server Petstore server.",
        "title": "Swagger Example API",
        "termsOfService": "http://swagger.io/terms/",
        "contact": {
            "name": "API Support",
            "url": "http://www.swagger.io/support",
            "email": "support@swagger.io"
        },
        "license": {
            "name": "Apache 2.0",
            "url": "http://www.apache.org/licenses/LICENSE-2.0.html"
        },
        "version": "1.0"
    },
    "host": "petstore.swagger.io",
    "basePath": "/v2",
    "paths": {}
}"""


@pytest.fixture(autouse=True)
def clean_registry():
    """Every test starts and ends with an empty document registry."""
    yield
    for name in registry.registered_names():
        registry.unregister(name)


@pytest.fixture
def petstore_doc():
    return PETSTORE_DOC


@pytest.fixture
def make_client():
    """Build a WebTest client for a Bottle app with the Swagger UI plugin installed."""
    def make(*options, **kwargs):
        app = Bottle()
        app.install(SwaggerUIPlugin(*options, **kwargs))
        return TestApp(app)
    return make
