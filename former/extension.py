"""Former 的 Flask 扩展入口.

Example:
    >>> app = Flask(__name__)
    >>> former = Former(app)
    >>> with app.app_context():
    ...     current_helpers().get_class_from_method("submit")
    'Button'

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from flask import Flask, current_app
from markupsafe import Markup

from former.errors import ExtensionNotInitializedError
from former.helpers import Helpers
from former.settings import Settings
from former.utils.structlog_config import EXTENSION_KEY, configure_structlog, get_logger
from former.utils.translation import CatalogTranslator

if TYPE_CHECKING:
    from former.types import AttributeMap, FieldClassRegistry, Translatable

logger = get_logger("former.extension")


class Former:
    """Former Flask 扩展.

    支持直接传入 app,也支持工厂模式下延迟调用 ``init_app``.
    """

    def __init__(
        self,
        app: Flask | None = None,
        *,
        translator: Translatable | None = None,
        registry: FieldClassRegistry | None = None,
    ) -> None:
        self.translator = translator
        self.registry = registry
        if app is not None:
            self.init_app(app)

    def init_app(self, app: Flask) -> Helpers:
        """在应用上初始化 Former.

        Args:
            app: Flask 应用实例.

        Returns:
            绑定到该应用的 Helpers.

        Raises:
            ConfigurationError: FORMER_* 配置非法时抛出.
            CatalogLoadError: 配置了 FORMER_CATALOG_PATH 但目录无法加载时抛出.

        """
        settings = Settings.from_flask_config(app.config)
        for key, value in settings.to_flask_config().items():
            app.config.setdefault(key, value)

        configure_structlog(app)

        translator = self.translator
        if translator is None and settings.catalog_path is not None:
            translator = CatalogTranslator.from_directory(settings.catalog_path)

        helpers = Helpers(translator, settings=settings, registry=self.registry)
        app.extensions[EXTENSION_KEY] = helpers
        configure_template_filters(app, helpers)

        logger.info(
            "Former 初始化完成",
            module="extension",
            translate_from=settings.translate_from,
            catalog_path=str(settings.catalog_path) if settings.catalog_path else None,
        )
        return helpers


def current_helpers() -> Helpers:
    """返回当前应用上的 Helpers.

    Raises:
        ExtensionNotInitializedError: 当前应用未调用 ``Former.init_app``.

    """
    helpers = current_app.extensions.get(EXTENSION_KEY)
    if helpers is None:
        raise ExtensionNotInitializedError(extra={"app": current_app.name})
    return helpers


def configure_template_filters(app: Flask, helpers: Helpers) -> None:
    """注册表单相关的模板过滤器与全局函数."""

    @app.template_filter("former_attributes")
    def attributes_filter(attributes: AttributeMap | None) -> Markup:
        """渲染属性字符串,无属性时输出空串."""
        return Markup(helpers.attributes(attributes) or "")

    @app.template_filter("former_add_class")
    def add_class_filter(attributes: AttributeMap | None, class_name: str) -> dict[str, object]:
        return helpers.add_class(attributes, class_name)

    @app.template_filter("former_entities")
    def entities_filter(value: object) -> Markup:
        return Markup(helpers.entities(value))

    @app.template_filter("former_decode")
    def decode_filter(value: object) -> str:
        return helpers.decode(value)

    @app.template_global("former_translate")
    def translate_global(key: str | None, fallback: str | None = None) -> object:
        return helpers.translate(key, fallback)


__all__ = ["EXTENSION_KEY", "Former", "configure_template_filters", "current_helpers"]
