from bottle_http_swagger_ui.registry import DEFAULT_INSTANCE_NAME

BASE_LAYOUT = 'BaseLayout'
STANDALONE_LAYOUT = 'StandaloneLayout'
LAYOUTS = (BASE_LAYOUT, STANDALONE_LAYOUT)

SHOW_MODEL = 1
HIDE_MODEL = -1


class Config(object):
    """
    Rendering options for the Swagger UI bootstrap page and script.

    ``plugins``, ``ui_config``, ``before_script`` and ``after_script`` are
    trusted JavaScript and are rendered as-is.
    """

    FIELDS = (
        'url', 'doc_expansion', 'dom_id', 'instance_name', 'deep_linking',
        'persist_authorization', 'layout', 'default_models_expand_depth',
        'show_extensions', 'plugins', 'ui_config', 'before_script', 'after_script',
    )

    def __init__(self, url='doc.json',
                 doc_expansion='list',
                 dom_id='swagger-ui',
                 instance_name=DEFAULT_INSTANCE_NAME,
                 deep_linking=True,
                 persist_authorization=False,
                 layout=STANDALONE_LAYOUT,
                 default_models_expand_depth=SHOW_MODEL,
                 show_extensions=False,
                 plugins=None,
                 ui_config=None,
                 before_script='',
                 after_script=''):
        self.url = url
        self.doc_expansion = doc_expansion
        self.dom_id = dom_id
        self.instance_name = instance_name or DEFAULT_INSTANCE_NAME
        self.deep_linking = deep_linking
        self.persist_authorization = persist_authorization
        self.layout = _check_layout(layout)
        self.default_models_expand_depth = default_models_expand_depth
        self.show_extensions = show_extensions
        self.plugins = list(plugins or [])
        self.ui_config = dict(ui_config or {})
        self.before_script = before_script
        self.after_script = after_script

    def as_dict(self):
        return {name: getattr(self, name) for name in self.FIELDS}

    def __eq__(self, other):
        if not isinstance(other, Config):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    def __repr__(self):
        return 'Config(%s)' % ', '.join('%s=%r' % item for item in self.as_dict().items())


def _check_layout(value):
    if value not in LAYOUTS:
        raise ValueError('unknown Swagger UI layout: %r' % (value,))
    return value


def new_config(*options, **fields):
    """Build a Config from the defaults, then ``fields``, then each option in order."""
    config = Config(**fields)
    for option in options:
        option(config)
    return config


def url(value):
    """URL of the API document the UI loads, relative to the UI page."""
    def option(config):
        config.url = value
    return option


def deep_linking(value):
    def option(config):
        config.deep_linking = value
    return option


def doc_expansion(value):
    """Default expansion of operations and tags: "list", "full" or "none"."""
    def option(config):
        config.doc_expansion = value
    return option


def dom_id(value):
    """Id of the element the UI mounts into, without the leading "#"."""
    def option(config):
        config.dom_id = value
    return option


def instance_name(value):
    """Registry name of the document served as doc.json."""
    def option(config):
        config.instance_name = value or DEFAULT_INSTANCE_NAME
    return option


def persist_authorization(value):
    """Keep authorization data in the browser across reloads."""
    def option(config):
        config.persist_authorization = value
    return option


def layout(value):
    def option(config):
        config.layout = _check_layout(value)
    return option


def default_models_expand_depth(value):
    """SHOW_MODEL expands the models section one level, HIDE_MODEL hides it."""
    def option(config):
        config.default_models_expand_depth = value
    return option


def show_extensions(value):
    def option(config):
        config.show_extensions = value
    return option


def plugins(values):
    """JavaScript expressions appended to the UI's plugin list."""
    def option(config):
        config.plugins = list(values)
    return option


def ui_config(values):
    """Extra ``key: value`` pairs, both JavaScript, passed to SwaggerUIBundle."""
    def option(config):
        config.ui_config = dict(values)
    return option


def before_script(value):
    """JavaScript run before the UI is built."""
    def option(config):
        config.before_script = value
    return option


def after_script(value):
    """JavaScript run after the UI is built."""
    def option(config):
        config.after_script = value
    return option
