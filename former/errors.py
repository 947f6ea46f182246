"""Former - 统一异常定义.

集中维护集成层(配置、翻译目录加载、扩展查找)使用的异常类型.
辅助函数本身不抛异常,只会退回到约定的默认值.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping


class ErrorCategory(Enum):
    """错误分类枚举."""

    CONFIGURATION = "configuration"
    TRANSLATION = "translation"
    SYSTEM = "system"


class ErrorMessages:
    """错误消息常量."""

    INTERNAL_ERROR = "Former 内部错误"
    INVALID_CONFIGURATION = "Former 配置无效"
    CATALOG_LOAD_FAILED = "翻译目录加载失败"
    EXTENSION_NOT_INITIALIZED = "Former 扩展尚未在当前应用上初始化"


@dataclass(slots=True)
class ExceptionMetadata:
    """异常的元信息."""

    category: ErrorCategory
    default_message_key: str

    @property
    def default_message(self) -> str:
        """根据 message key 获取默认文案."""
        return getattr(ErrorMessages, self.default_message_key, ErrorMessages.INTERNAL_ERROR)


class FormerError(Exception):
    """统一的基础异常.

    Args:
        message: 自定义错误文案,若为空则根据 ``message_key`` 推导.
        message_key: ``ErrorMessages`` 中的键名,缺省使用元数据配置.
        extra: 附加到日志里的上下文.

    """

    metadata = ExceptionMetadata(
        category=ErrorCategory.SYSTEM,
        default_message_key="INTERNAL_ERROR",
    )

    def __init__(
        self,
        message: str | None = None,
        *,
        message_key: str | None = None,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        self.message_key = message_key or self.metadata.default_message_key
        if message:
            self.message = message
        elif message_key:
            self.message = getattr(ErrorMessages, message_key, ErrorMessages.INTERNAL_ERROR)
        else:
            self.message = self.metadata.default_message
        self.extra = dict(extra or {})
        super().__init__(self.message)

    @property
    def category(self) -> ErrorCategory:
        """返回异常所属的分类."""
        return self.metadata.category


class ConfigurationError(FormerError):
    """表示 Former 配置项缺失或取值非法."""

    metadata = ExceptionMetadata(
        category=ErrorCategory.CONFIGURATION,
        default_message_key="INVALID_CONFIGURATION",
    )


class CatalogLoadError(FormerError):
    """表示翻译目录文件无法读取或解析.

    常见于 YAML 语法错误、文件不存在或顶层结构不是映射.
    """

    metadata = ExceptionMetadata(
        category=ErrorCategory.TRANSLATION,
        default_message_key="CATALOG_LOAD_FAILED",
    )


class ExtensionNotInitializedError(FormerError):
    """表示在未调用 ``Former.init_app`` 的应用上访问辅助对象."""

    metadata = ExceptionMetadata(
        category=ErrorCategory.SYSTEM,
        default_message_key="EXTENSION_NOT_INITIALIZED",
    )


__all__ = [
    "CatalogLoadError",
    "ConfigurationError",
    "ErrorCategory",
    "ErrorMessages",
    "ExtensionNotInitializedError",
    "FormerError",
]
