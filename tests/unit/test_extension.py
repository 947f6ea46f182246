"""Former Flask 扩展的单元测试。"""

from pathlib import Path

import pytest
from flask import render_template_string

from former.errors import CatalogLoadError, ConfigurationError, ExtensionNotInitializedError
from former.extension import EXTENSION_KEY, Former, current_helpers
from former.fields.registry import FieldRegistry
from former.helpers import Helpers


@pytest.mark.unit
def test_init_app_registers_helpers(app, translator) -> None:
    former = Former(translator=translator)

    helpers = former.init_app(app)

    assert isinstance(helpers, Helpers)
    assert app.extensions[EXTENSION_KEY] is helpers
    assert helpers.translator is translator
    assert app.config["FORMER_TRANSLATE_FROM"] == "validation.attributes"
    with app.app_context():
        assert current_helpers() is helpers


@pytest.mark.unit
def test_init_app_reads_app_config(app, translator) -> None:
    app.config["FORMER_TRANSLATE_FROM"] = "forms"

    Former(app, translator=translator)

    with app.app_context():
        assert current_helpers().translate("email") == "Email address"


@pytest.mark.unit
def test_init_app_loads_catalog_directory(app, tmp_path: Path) -> None:
    (tmp_path / "validation.yaml").write_text("attributes:\n  email: Courriel\n", encoding="utf-8")
    app.config["FORMER_CATALOG_PATH"] = str(tmp_path)

    Former(app)

    with app.app_context():
        assert current_helpers().translate("email") == "Courriel"


@pytest.mark.unit
def test_init_app_rejects_missing_catalog_directory(app, tmp_path: Path) -> None:
    app.config["FORMER_CATALOG_PATH"] = str(tmp_path / "missing")

    with pytest.raises(CatalogLoadError):
        Former(app)


@pytest.mark.unit
def test_init_app_rejects_invalid_namespace(app) -> None:
    app.config["FORMER_TRANSLATE_FROM"] = "."

    with pytest.raises(ConfigurationError):
        Former(app)


@pytest.mark.unit
def test_init_app_uses_injected_registry(app) -> None:
    Former(app, registry=FieldRegistry(["Slider"]))

    with app.app_context():
        assert current_helpers().get_class_from_method("slider") == "Slider"


@pytest.mark.unit
def test_current_helpers_requires_init_app(app) -> None:
    with app.app_context(), pytest.raises(ExtensionNotInitializedError):
        current_helpers()


@pytest.mark.unit
def test_template_filters(app, translator) -> None:
    Former(app, translator=translator)

    with app.test_request_context():
        rendered = render_template_string(
            '<input{{ attrs|former_add_class("form-control")|former_attributes }}>'
            "<input{{ {}|former_attributes }}>"
            "<label>{{ former_translate('name') }}</label>"
            "<p>{{ '<b>'|former_entities }}</p>",
            attrs={"name": "email", "required": None, "placeholder": 'say "hi"'},
        )

    assert rendered == (
        '<input name="email" placeholder="say &quot;hi&quot;" class="form-control">'
        "<input>"
        "<label>Full name</label>"
        "<p>&lt;b&gt;</p>"
    )
