# tests/unit/conftest.py
"""单元测试专用 fixtures.

提供翻译目录、Helpers 与 Flask 应用等通用 fixtures。
"""

import pytest
from flask import Flask

from former.helpers import Helpers
from former.settings import Settings
from former.utils.translation import CatalogTranslator


@pytest.fixture(autouse=True)
def _unit_test_env(monkeypatch):
    """为 unit tests 强制注入隔离环境变量.

    避免开发者本机 FORMER_* 环境变量影响测试稳定性。
    """
    monkeypatch.setenv("FORMER_TRANSLATE_FROM", "validation.attributes")
    monkeypatch.delenv("FORMER_CATALOG_PATH", raising=False)
    monkeypatch.setenv("FORMER_ENABLE_DEBUG_LOG", "false")


@pytest.fixture
def catalog():
    return {
        "forms": {"email": "email address"},
        "validation": {
            "attributes": {
                "name": "full name",
                "password": "mot de passe",
            },
            "custom": {"email": {"required": "required"}},
        },
        "options": {"colors": {"red": "Rouge", "blue": "Bleu"}},
    }


@pytest.fixture
def translator(catalog):
    return CatalogTranslator(catalog)


@pytest.fixture
def helpers(translator):
    return Helpers(translator, settings=Settings.load())


@pytest.fixture
def app():
    flask_app = Flask(__name__)
    flask_app.config["TESTING"] = True
    return flask_app
