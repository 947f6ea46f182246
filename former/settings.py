"""Former - 统一配置读取与校验.

说明:
- Settings 使用 `pydantic-settings` 的 `BaseSettings` 从环境变量读取配置.
- `Former.init_app` 优先读取 `app.config` 中的同名键,缺省时回落到这里的默认值.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from former.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Mapping

DEFAULT_TRANSLATE_FROM = "validation.attributes"
DEFAULT_ENABLE_DEBUG_LOG = False

# app.config 键名与环境变量同名
FLASK_CONFIG_KEYS = ("FORMER_TRANSLATE_FROM", "FORMER_CATALOG_PATH", "FORMER_ENABLE_DEBUG_LOG")


class Settings(BaseSettings):
    """Former 运行时设置集合."""

    model_config = SettingsConfigDict(
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
        str_strip_whitespace=True,
    )

    # 翻译兜底命名空间,例如 "validation.attributes" + ".email"
    translate_from: str = Field(default=DEFAULT_TRANSLATE_FROM, validation_alias="FORMER_TRANSLATE_FROM")
    catalog_path: Path | None = Field(default=None, validation_alias="FORMER_CATALOG_PATH")
    enable_debug_log: bool = Field(default=DEFAULT_ENABLE_DEBUG_LOG, validation_alias="FORMER_ENABLE_DEBUG_LOG")

    @field_validator("translate_from")
    @classmethod
    def _normalize_translate_from(cls, value: str) -> str:
        normalized = value.strip().strip(".")
        if not normalized:
            msg = "FORMER_TRANSLATE_FROM 不能为空"
            raise ValueError(msg)
        return normalized

    @field_validator("catalog_path", mode="before")
    @classmethod
    def _strip_blank_to_none(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @classmethod
    def load(cls, **overrides: object) -> Settings:
        """从环境变量加载 Settings 并执行必要校验.

        Args:
            **overrides: 显式覆盖的字段,通常来自 Flask app.config.

        Returns:
            Settings: 校验通过的配置对象.

        Raises:
            ConfigurationError: 配置取值非法时抛出.

        """
        try:
            return cls(**overrides)
        except ValidationError as exc:
            raise ConfigurationError(extra={"errors": exc.errors(include_url=False)}) from exc

    @classmethod
    def from_flask_config(cls, config: Mapping[str, object]) -> Settings:
        """从 Flask app.config 中提取 FORMER_* 配置并构造 Settings."""
        overrides = {key: config[key] for key in FLASK_CONFIG_KEYS if config.get(key) is not None}
        return cls.load(**overrides)

    def to_flask_config(self) -> dict[str, object]:
        """转换为 Flask app.config 可写入的配置字典."""
        return {
            "FORMER_TRANSLATE_FROM": self.translate_from,
            "FORMER_CATALOG_PATH": str(self.catalog_path) if self.catalog_path else None,
            "FORMER_ENABLE_DEBUG_LOG": self.enable_debug_log,
        }
