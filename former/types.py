"""Former 协作方协议类型.

宿主框架对象(翻译器、ORM 查询、模型记录)只通过这里定义的窄协议进入辅助函数.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol, TypeVar, runtime_checkable

T_co = TypeVar("T_co", covariant=True)

AttributeKey = str | int
AttributeMap = Mapping[AttributeKey, object]
OptionMap = dict[object, str]


@runtime_checkable
class Translatable(Protocol):
    """翻译目录协议: 判断键是否存在并读取对应值."""

    def has(self, key: str) -> bool:
        """协议方法: 键是否存在于目录中."""
        ...

    def get(self, key: str) -> object:
        """协议方法: 读取键对应的值,可能是字符串或结构化集合."""
        ...


@runtime_checkable
class RecordSource(Protocol[T_co]):
    """可物化为记录列表的数据源,例如 SQLAlchemy Query 或 Result."""

    def all(self) -> list[T_co]:
        """协议方法: 返回全部记录."""
        ...


@runtime_checkable
class Identifiable(Protocol):
    """能自行给出主键的记录."""

    def get_key(self) -> object:
        """协议方法: 返回记录主键."""
        ...


@runtime_checkable
class FieldClassRegistry(Protocol):
    """字段类注册表协议: 判断某个字段类名是否已注册."""

    def has(self, name: str) -> bool:
        """协议方法: 字段类是否存在."""
        ...


__all__ = [
    "AttributeKey",
    "AttributeMap",
    "FieldClassRegistry",
    "Identifiable",
    "OptionMap",
    "RecordSource",
    "Translatable",
]
