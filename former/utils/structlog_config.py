"""Former 的结构化日志配置与辅助函数.

导入本模块不会改动 structlog 的全局配置,只有 ``Former.init_app`` 会在宿主
尚未配置 structlog 时安装默认处理器链.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING, Any, cast

import structlog
from flask import Flask, current_app, has_app_context

if TYPE_CHECKING:
    from structlog.typing import BindableLogger, Processor

StructlogEventDict = dict[str, Any]
LOGGER_NAMESPACE = "former"
EXTENSION_KEY = "former"

# Helpers 调用期间生效的 DEBUG 开关,None 表示未设置
debug_log_enabled_var: ContextVar[bool | None] = ContextVar("former_debug_log_enabled", default=None)


@contextmanager
def debug_logging(*, enabled: bool) -> Iterator[None]:
    """在当前上下文内临时设置 DEBUG 日志开关."""
    token = debug_log_enabled_var.set(enabled)
    try:
        yield
    finally:
        debug_log_enabled_var.reset(token)


def should_log_debug() -> bool:
    """检查是否应该记录调试日志.

    优先级: Helpers 设置的上下文开关 -> 当前应用上 Former 的配置 -> 关闭.
    """
    enabled = debug_log_enabled_var.get()
    if enabled is not None:
        return enabled
    if has_app_context():
        helpers = current_app.extensions.get(EXTENSION_KEY)
        settings = getattr(helpers, "settings", None)
        if settings is not None:
            return bool(settings.enable_debug_log)
    return False


class DebugFilter:
    """根据配置决定是否丢弃 DEBUG 日志的处理器.

    Attributes:
        enabled: 固定开关;为 None 时按 ``should_log_debug`` 逐条判断.

    """

    def __init__(self, *, enabled: bool | None = None) -> None:
        self.enabled = enabled

    def __call__(
        self,
        _logger: BindableLogger,
        method_name: str,
        event_dict: StructlogEventDict,
    ) -> StructlogEventDict:
        """处理日志事件,未启用时丢弃 DEBUG 日志.

        Raises:
            structlog.DropEvent: 当前事件为 DEBUG 且未启用时抛出.

        """
        if method_name != "debug":
            return event_dict
        enabled = should_log_debug() if self.enabled is None else self.enabled
        if not enabled:
            raise structlog.DropEvent
        return event_dict


class StructlogConfig:
    """structlog 配置核心类.

    宿主已经配置过 structlog 时不做任何改动,否则安装默认处理器链(只安装一次).

    Example:
        >>> config = StructlogConfig()
        >>> config.configure()
        >>> logger = get_logger('former.helpers')

    """

    def __init__(self) -> None:
        self.debug_filter = DebugFilter()
        self.configured = False

    def configure(self) -> bool:
        """安装默认处理器链.

        Returns:
            本次调用是否实际改动了 structlog 配置.

        """
        if self.configured or structlog.is_configured():
            return False

        processors = [
            self.debug_filter,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.stdlib.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            self._add_module_context,
            self._get_console_renderer(),
        ]
        structlog.configure(
            processors=cast("list[structlog.types.Processor]", processors),
            context_class=dict,
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        self.configured = True
        return True

    @staticmethod
    def _add_module_context(
        _logger: BindableLogger,
        _method_name: str,
        event_dict: StructlogEventDict,
    ) -> StructlogEventDict:
        """缺少 module 字段时用 logger 名补齐."""
        if "module" not in event_dict:
            logger_name = getattr(_logger, "name", LOGGER_NAMESPACE)
            event_dict["module"] = str(logger_name).rsplit(".", 1)[-1]
        return event_dict

    @staticmethod
    def _get_console_renderer() -> Processor:
        """根据终端能力返回渲染器."""
        return structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())


structlog_config = StructlogConfig()


def get_logger(name: str) -> Any:
    """获取结构化日志记录器,不触发任何全局配置.

    Example:
        >>> logger = get_logger('former.utils.query_utils')
        >>> logger.info('选项构建完成', count=3)

    """
    return structlog.get_logger(name)


def configure_structlog(app: Flask) -> bool:
    """在 ``Former.init_app`` 中调用,宿主未配置 structlog 时安装默认处理器链.

    DEBUG 开关不写入全局状态,由各应用自己的 Settings 决定.
    """
    configured = structlog_config.configure()
    if configured:
        get_logger("former.extension").info("已安装默认 structlog 处理器链", module="extension", app=app.name)
    return configured


def log_debug(message: str, module: str = "former", **kwargs: object) -> None:
    """记录调试级别日志,仅在启用调试日志时记录.

    Example:
        >>> log_debug('翻译回退', module='translation', key='email')

    """
    if not should_log_debug():
        return
    get_logger(LOGGER_NAMESPACE).debug(message, module=module, **kwargs)


__all__ = [
    "DebugFilter",
    "StructlogConfig",
    "configure_structlog",
    "debug_log_enabled_var",
    "debug_logging",
    "get_logger",
    "log_debug",
    "should_log_debug",
    "structlog_config",
]
