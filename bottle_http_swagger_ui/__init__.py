import os
from bottle import SimpleTemplate, json_dumps
from swagger_ui_bundle import swagger_ui_path

from bottle_http_swagger_ui.config import (
    Config, new_config, BASE_LAYOUT, STANDALONE_LAYOUT, SHOW_MODEL, HIDE_MODEL
)
from bottle_http_swagger_ui.registry import (
    DEFAULT_INSTANCE_NAME, DocumentNotFound, InvalidDocument, SwaggerSpec, register, unregister, read_doc
)

SWAGGER_UI_DIR = swagger_ui_path
TEMPLATES_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'templates')
SWAGGER_UI_INDEX_TEMPLATE_PATH = os.path.join(TEMPLATES_DIR, 'index.html.st')
SWAGGER_UI_INDEX_JS_TEMPLATE_PATH = os.path.join(TEMPLATES_DIR, 'index.js.st')

with open(SWAGGER_UI_INDEX_TEMPLATE_PATH, 'r') as f:
    SWAGGER_UI_INDEX_TEMPLATE = f.read()

with open(SWAGGER_UI_INDEX_JS_TEMPLATE_PATH, 'r') as f:
    SWAGGER_UI_INDEX_JS_TEMPLATE = f.read()

# Characters that could close a surrounding <script> element or start an HTML entity.
_JS_STRING_ESCAPES = (('<', '\\u003c'), ('>', '\\u003e'), ('&', '\\u0026'))


def js_string(value):
    """Render ``value`` as a JavaScript string literal that is also safe inside HTML."""
    literal = json_dumps(str(value))
    for char, escaped in _JS_STRING_ESCAPES:
        literal = literal.replace(char, escaped)
    return literal


def js_bool(value):
    return 'true' if value else 'false'


def render_index_html(config):
    return SimpleTemplate(SWAGGER_UI_INDEX_TEMPLATE).render(dom_id=config.dom_id)


def render_index_js(config):
    return SimpleTemplate(SWAGGER_UI_INDEX_JS_TEMPLATE).render(
        js_string=js_string, js_bool=js_bool, **config.as_dict())
