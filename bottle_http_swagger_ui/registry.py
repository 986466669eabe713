"""
Registry of API documents served by the Swagger UI handler, keyed by instance name.

A document is anything with a ``read_doc()`` method returning the document text.
"""
import logging
import threading

from bottle import json_dumps
from bravado_core.spec import Spec
from swagger_spec_validator.common import SwaggerValidationError

logger = logging.getLogger(__name__)

DEFAULT_INSTANCE_NAME = 'swagger'

_lock = threading.RLock()
_documents = {}


class DocumentNotFound(LookupError):
    pass


class InvalidDocument(ValueError):
    pass


class StaticDocument(object):
    """A document whose text is served verbatim."""

    def __init__(self, text):
        self.text = text

    def read_doc(self):
        return self.text


class SwaggerSpec(object):

    def __init__(self, template,
                 version='',
                 host='',
                 base_path='',
                 schemes=None,
                 title='',
                 description='',
                 validate=False):
        """
        A Swagger document built from a dictionary, with optional overrides for the fields that usually
        differ between deployments.

        :param template: The raw Swagger (or OpenAPI) document, as a Python dictionary.
        :type template: dict
        :param version: Overrides info.version when non-empty.
        :type version: str
        :param host: Overrides host when non-empty.
        :type host: str
        :param base_path: Overrides basePath when non-empty.
        :type base_path: str
        :param schemes: Overrides schemes when non-empty.
        :type schemes: list
        :param title: Overrides info.title when non-empty.
        :type title: str
        :param description: Overrides info.description when non-empty.
        :type description: str
        :param validate: Should the resulting document be validated as Swagger 2.0?
        :type validate: bool
        """
        self.template = dict(template)
        self.version = version
        self.host = host
        self.base_path = base_path
        self.schemes = list(schemes or [])
        self.title = title
        self.description = description

        if validate:
            self.validate()

    def spec_dict(self):
        spec_dict = dict(self.template)
        info = dict(spec_dict.get('info') or {})
        for key, value in (('version', self.version), ('title', self.title), ('description', self.description)):
            if value:
                info[key] = value
        if info:
            spec_dict['info'] = info
        if self.host:
            spec_dict['host'] = self.host
        if self.base_path:
            spec_dict['basePath'] = self.base_path
        if self.schemes:
            spec_dict['schemes'] = self.schemes
        return spec_dict

    def validate(self):
        try:
            Spec.from_dict(self.spec_dict(), config={
                'validate_swagger_spec': True,
                'validate_requests': False,
                'validate_responses': False,
                'use_models': False,
            })
        except SwaggerValidationError as e:
            raise InvalidDocument(str(e))

    def read_doc(self):
        return json_dumps(self.spec_dict(), indent=4)


def _as_document(doc):
    if isinstance(doc, str):
        return StaticDocument(doc)
    if isinstance(doc, dict):
        return SwaggerSpec(doc)
    if not callable(getattr(doc, 'read_doc', None)):
        raise TypeError('documents must be a str, a dict or have a read_doc() method, got %r' % (doc,))
    return doc


def register(name, doc):
    doc = _as_document(doc)
    with _lock:
        if name in _documents:
            raise ValueError('a document is already registered as %r' % (name,))
        _documents[name] = doc
    logger.debug('Registered API document %r', name)


def unregister(name):
    with _lock:
        try:
            del _documents[name]
        except KeyError:
            raise DocumentNotFound('no document registered as %r' % (name,))
    logger.debug('Unregistered API document %r', name)


def get_instance(name=DEFAULT_INSTANCE_NAME):
    with _lock:
        try:
            return _documents[name]
        except KeyError:
            raise DocumentNotFound('no document registered as %r' % (name,))


def read_doc(name=DEFAULT_INSTANCE_NAME):
    return get_instance(name).read_doc()


def registered_names():
    with _lock:
        return sorted(_documents)
