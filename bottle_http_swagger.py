import logging
import os

import yaml
from bottle import Bottle, request, response, redirect, static_file, json_loads

from bottle_http_swagger_ui import (
    SWAGGER_UI_DIR, new_config, render_index_html, render_index_js, read_doc, DocumentNotFound
)

logger = logging.getLogger(__name__)

CONTENT_TYPES = {
    '.html': 'text/html; charset=utf-8',
    '.css': 'text/css; charset=utf-8',
    '.js': 'application/javascript',
    '.png': 'image/png',
    '.json': 'application/json; charset=utf-8',
    '.yaml': 'application/yaml; charset=utf-8',
}

# Files served as-is from the Swagger UI bundle.
STATIC_ASSETS = frozenset([
    'swagger-ui.css',
    'swagger-ui-bundle.js',
    'swagger-ui-standalone-preset.js',
    'favicon-16x16.png',
    'favicon-32x32.png',
    'oauth2-redirect.html',
])


class MethodNotAllowed(Exception):
    pass


class AssetNotFound(LookupError):
    pass


def _error_response(status, e):
    response.status = status
    return {"code": status, "message": str(e)}


def default_server_error_handler(e):
    return _error_response(500, e)


def default_not_found_handler(e):
    return _error_response(404, e)


def default_method_not_allowed_handler(e):
    response.set_header('Allow', 'GET')
    return _error_response(405, e)


def content_type_for(filename):
    return CONTENT_TYPES.get(os.path.splitext(filename)[1])


class SwaggerUIPlugin(object):
    DEFAULT_PREFIX = '/swagger/'

    name = 'swagger_ui'
    api = 2

    def __init__(self, *options,
                 prefix=DEFAULT_PREFIX,
                 not_found_handler=default_not_found_handler,
                 method_not_allowed_handler=default_method_not_allowed_handler,
                 doc_not_found_handler=default_server_error_handler,
                 **config_fields):
        """
        Serve Swagger UI, configured for your API documents, from your Bottle application.

        :param options: Configuration options, as returned by the functions in bottle_http_swagger_ui.config.
        :type options: Config -> None
        :param prefix: The path the UI is served under. A trailing slash is added if missing.
        :type prefix: str
        :param not_found_handler: This handler is triggered for paths under the prefix that are not part of the UI.
        :type not_found_handler: Exception -> HTTP Response
        :param method_not_allowed_handler: This handler is triggered for any request that is not a GET.
        :type method_not_allowed_handler: Exception -> HTTP Response
        :param doc_not_found_handler: This handler is triggered when the configured document isn't registered,
            or can't be converted for doc.yaml.
        :type doc_not_found_handler: Exception -> HTTP Response
        :param config_fields: Any Config field (url, doc_expansion, dom_id, instance_name, deep_linking,
            persist_authorization, layout, default_models_expand_depth, show_extensions, plugins, ui_config,
            before_script, after_script), applied before the options.
        """
        self.prefix = '/' + prefix.strip('/') + '/' if prefix.strip('/') else '/'
        self.not_found_handler = not_found_handler
        self.method_not_allowed_handler = method_not_allowed_handler
        self.doc_not_found_handler = doc_not_found_handler
        self.config = new_config(*options, **config_fields)

    def apply(self, callback, route):
        return callback

    def setup(self, app):
        app.route(self.prefix, method='ANY', callback=self.handle)
        if self.prefix != '/':
            app.route(self.prefix.rstrip('/'), method='ANY', callback=self.handle)
        app.route(self.prefix + '<filename:path>', method='ANY', callback=self.handle)

    def handle(self, filename=''):
        if request.method != 'GET':
            return self.method_not_allowed_handler(
                MethodNotAllowed('%s is not allowed on %s' % (request.method, request.path)))

        if not filename:
            # Bottle raises the redirect as an HTTPResponse.
            redirect(request.fullpath.rstrip('/') + '/index.html', 301)

        content_type = content_type_for(filename)

        if filename == 'index.html':
            response.content_type = content_type
            return render_index_html(self.config)
        elif filename == 'index.js':
            response.content_type = content_type
            return render_index_js(self.config)
        elif filename == 'doc.json':
            return self._serve_doc(content_type)
        elif filename == 'doc.yaml':
            return self._serve_doc(content_type, to_yaml=True)
        elif filename in STATIC_ASSETS:
            if os.path.isfile(os.path.join(SWAGGER_UI_DIR, filename)):
                return static_file(filename, root=SWAGGER_UI_DIR, mimetype=content_type, charset=None)
            return self.not_found_handler(AssetNotFound('%s is missing from the Swagger UI bundle' % filename))

        return self.not_found_handler(AssetNotFound('%s is not part of Swagger UI' % filename))

    def _serve_doc(self, content_type, to_yaml=False):
        try:
            doc = read_doc(self.config.instance_name)
        except DocumentNotFound as e:
            logger.warning('Swagger UI document %r requested but not registered', self.config.instance_name)
            return self.doc_not_found_handler(e)

        if to_yaml:
            try:
                doc = yaml.safe_dump(json_loads(doc), sort_keys=False)
            except ValueError as e:
                return self.doc_not_found_handler(e)

        response.content_type = content_type
        return doc


def swagger_app(*options, **kwargs):
    """A Bottle application serving Swagger UI at its root, for ``app.mount(prefix, swagger_app(...))``."""
    kwargs.setdefault('prefix', '/')
    app = Bottle()
    app.install(SwaggerUIPlugin(*options, **kwargs))
    return app
