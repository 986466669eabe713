"""Tests for rendering the Swagger UI page and bootstrap script."""

from bottle_http_swagger_ui import js_string, render_index_html, render_index_js
from bottle_http_swagger_ui.config import Config, HIDE_MODEL

DEFAULT_INDEX_JS = """window.onload = function() {
  // Build a system
  const ui = SwaggerUIBundle({
    url: "doc.json",
    deepLinking: true,
    docExpansion: "list",
    dom_id: "#swagger-ui",
    persistAuthorization: false,
    validatorUrl: null,
    presets: [
      SwaggerUIBundle.presets.apis,
      SwaggerUIStandalonePreset
    ],
    plugins: [
      SwaggerUIBundle.plugins.DownloadUrl
    ],
    layout: "StandaloneLayout",
    defaultModelsExpandDepth: 1,
    showExtensions: false
  })

  window.ui = ui
}
"""

SCRIPTED_INDEX_JS = """window.onload = function() {
  const SomePlugin = (system) => ({
    // Some plugin
  });

  // Build a system
  const ui = SwaggerUIBundle({
    url: "swagger.json",
    deepLinking: false,
    docExpansion: "none",
    dom_id: "#swagger-ui-id",
    persistAuthorization: true,
    validatorUrl: null,
    presets: [
      SwaggerUIBundle.presets.apis,
      SwaggerUIStandalonePreset
    ],
    plugins: [
      SwaggerUIBundle.plugins.DownloadUrl,
      SomePlugin,
      AnotherPlugin
    ],
    defaultModelRendering: "model",
    onComplete: () => { window.ui.setBasePath('v3'); },
    showExtensions: true,
    layout: "StandaloneLayout",
    defaultModelsExpandDepth: -1,
    showExtensions: false
  })

  window.ui = ui
  const someOtherCode = function(){
    // Do something
  };
  someOtherCode();
}
"""


class TestIndexJs:
    def test_default_configuration(self) :
        assert render_index_js(Config()) == DEFAULT_INDEX_JS

    def test_script_configuration(self) :
        config = Config(
            url="swagger.json",
            deep_linking=False,
            persist_authorization=True,
            doc_expansion="none",
            dom_id="swagger-ui-id",
            before_script="const SomePlugin = (system) => ({\n    // Some plugin\n  });\n",
            after_script="const someOtherCode = function(){\n    // Do something\n  };\n  someOtherCode();",
            plugins=["SomePlugin", "AnotherPlugin"],
            ui_config={
                "showExtensions": "true",
                "onComplete": "() => { window.ui.setBasePath('v3'); }",
                "defaultModelRendering": '"model"',
            },
            default_models_expand_depth=HIDE_MODEL,
        )
        assert render_index_js(config) == SCRIPTED_INDEX_JS

    def test_single_plugin_has_no_trailing_comma(self) :
        out = render_index_js(Config(plugins=["OnlyPlugin"]))
        assert "SwaggerUIBundle.plugins.DownloadUrl,\n      OnlyPlugin\n    ],\n" in out

    def test_string_options_cannot_escape_their_literal(self) :
        out = render_index_js(Config(url='doc.json"</script><script>alert(1)//&'))
        assert "</script>" not in out
        assert 'url: "doc.json\\"\\u003c/script\\u003e\\u003cscript\\u003ealert(1)//\\u0026",' in out

    def test_base_layout(self) :
        assert 'layout: "BaseLayout",' in render_index_js(Config(layout="BaseLayout"))


class TestIndexHtml:
    def test_renders_mount_element(self) :
        out = render_index_html(Config(dom_id="api-docs"))
        assert '<div id="api-docs"></div>' in out
        assert '<link rel="stylesheet" type="text/css" href="./swagger-ui.css" >' in out

    def test_mount_element_is_html_escaped(self) :
        out = render_index_html(Config(dom_id='x"><script>alert(1)</script>'))
        assert "<script>alert(1)" not in out
        assert "&lt;script&gt;" in out


class TestJsString:
    def test_plain(self) :
        assert js_string("doc.json") == '"doc.json"'

    def test_line_separators_are_escaped(self) :
        assert js_string("a\u2028b") == '"a\\u2028b"'

    def test_non_strings_are_converted(self) :
        assert js_string(3) == '"3"'
