"""Former - 表单构建辅助库.

提供 HTML 属性渲染、翻译回退、查询结果转 options 与字段类解析等辅助方法,
并以 Flask 扩展的形式接入应用.
"""

from former.errors import CatalogLoadError, ConfigurationError, ExtensionNotInitializedError, FormerError
from former.extension import Former, current_helpers
from former.fields.registry import FieldClass, FieldRegistry, get_class_from_method
from former.helpers import Helpers
from former.settings import Settings
from former.utils.html_utils import add_class, attributes, decode, entities
from former.utils.query_utils import query_to_array
from former.utils.translation import CatalogTranslator, LazyTranslation, translate

__version__ = "3.0.0"

__all__ = [
    "CatalogLoadError",
    "CatalogTranslator",
    "ConfigurationError",
    "ExtensionNotInitializedError",
    "FieldClass",
    "FieldRegistry",
    "Former",
    "FormerError",
    "Helpers",
    "LazyTranslation",
    "Settings",
    "add_class",
    "attributes",
    "current_helpers",
    "decode",
    "entities",
    "get_class_from_method",
    "query_to_array",
    "translate",
]
