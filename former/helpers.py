"""Former 各字段类共用的辅助对象.

Helpers 把无状态的工具函数绑定到注入的协作方(翻译目录、配置、字段注册表).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from former.fields.registry import FieldRegistry, get_class_from_method
from former.settings import Settings
from former.utils import html_utils
from former.utils.query_utils import query_to_array
from former.utils.structlog_config import debug_logging, log_debug
from former.utils.translation import CatalogTranslator, LazyTranslation, translate

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from former.types import AttributeMap, FieldClassRegistry, OptionMap, Translatable


class Helpers:
    """表单构建辅助方法集合.

    Attributes:
        translator: 翻译目录.
        settings: Former 配置.
        registry: 字段类注册表.

    Example:
        >>> helpers = Helpers(CatalogTranslator({"validation": {"attributes": {"email": "邮箱"}}}))
        >>> helpers.translate("email")
        '邮箱'

    """

    def __init__(
        self,
        translator: Translatable | None = None,
        *,
        settings: Settings | None = None,
        registry: FieldClassRegistry | None = None,
    ) -> None:
        self.translator = translator if translator is not None else CatalogTranslator()
        self.settings = settings if settings is not None else Settings.load()
        self.registry = registry if registry is not None else FieldRegistry.default()

    # HTML

    @staticmethod
    def add_class(attributes: Mapping[str, object] | None, class_name: str) -> dict[str, object]:
        return html_utils.add_class(attributes, class_name)

    @staticmethod
    def entities(value: object) -> str:
        return html_utils.entities(value)

    @staticmethod
    def decode(value: object) -> str:
        return html_utils.decode(value)

    @staticmethod
    def attributes(attributes: AttributeMap | Sequence[object] | None) -> str | None:
        return html_utils.attributes(attributes)

    # 翻译

    def translate(self, key: str | LazyTranslation | None, fallback: str | None = None) -> object:
        """使用当前目录与 ``translate_from`` 命名空间翻译键."""
        with debug_logging(enabled=self.settings.enable_debug_log):
            return translate(
                key,
                fallback,
                translator=self.translator,
                translate_from=self.settings.translate_from,
            )

    def lazy(self, key: str) -> LazyTranslation:
        """创建绑定当前目录的延迟翻译句柄."""
        return LazyTranslation(self.translator, key)

    # 数据

    def query_to_array(self, query: object, value: str | None = None, key: str | None = None) -> OptionMap | object:
        with debug_logging(enabled=self.settings.enable_debug_log):
            return query_to_array(query, value, key)

    # 字段

    def get_class_from_method(self, method: str) -> str:
        class_name = get_class_from_method(method, self.registry)
        with debug_logging(enabled=self.settings.enable_debug_log):
            log_debug("字段方法解析完成", module="fields", method=method, field_class=class_name)
        return class_name
