"""查询结果到下拉 options 映射的转换工具.

约束:
- 仅保留纯函数/格式化逻辑
- 只物化调用方传入的查询对象,不自行构造查询
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import inspect as sa_inspect
from sqlalchemy.orm import InstanceState

from former.types import Identifiable, RecordSource
from former.utils.structlog_config import log_debug
from former.utils.translation import LazyTranslation

if TYPE_CHECKING:
    from former.types import OptionMap

# 自身即可作为显示文本的标量类型
_SCALAR_TYPES = (str, int, float, Decimal)


def _read_field(record: object, name: str | None) -> object:
    """读取字段,字段不存在或为 None 时返回 None."""
    if not name:
        return None
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def _is_stringable(record: object) -> bool:
    """记录类型是否自定义了 ``__str__``."""
    return type(record).__str__ is not object.__str__


def _mapped_identity(record: object) -> object:
    """返回 SQLAlchemy 映射实例的单列主键,其他情况返回 None."""
    state = sa_inspect(record, raiseerr=False)
    if not isinstance(state, InstanceState):
        return None
    identity = state.identity
    if identity is None or len(identity) != 1:
        return None
    return identity[0]


def _resolve_value(record: object, value_field: str | None) -> object:
    field_value = _read_field(record, value_field)
    if field_value is not None:
        return field_value
    if isinstance(record, _SCALAR_TYPES) and not isinstance(record, bool):
        return record
    if _is_stringable(record):
        return str(record)
    return None


def _resolve_key(record: object, key_field: str | None, record_value: object) -> object:
    field_key = _read_field(record, key_field)
    if field_key is not None:
        return field_key
    if isinstance(record, Identifiable) and callable(record.get_key):
        return record.get_key()
    identity = _mapped_identity(record)
    if identity is not None:
        return identity
    record_id = _read_field(record, "id")
    if record_id is not None:
        return record_id
    return record_value


def _normalize_records(query: object) -> Sequence[object]:
    """把输入统一为记录序列.

    - 带 ``all()`` 的数据源(Query/Result)先物化
    - list/tuple 原样使用
    - 字符串、映射等单个值包装为单元素列表
    """
    if query is None:
        return []
    if isinstance(query, RecordSource) and not isinstance(query, Mapping):
        return query.all()
    if isinstance(query, (list, tuple)):
        return query
    if isinstance(query, (str, bytes, Mapping)) or not isinstance(query, Iterable):
        return [query]
    return list(query)


def _translated_options(options: Mapping[object, object]) -> OptionMap:
    return {
        option_key: str(label)
        for option_key, label in options.items()
        if label and not isinstance(label, (Mapping, list, tuple))
    }


def query_to_array(
    query: object,
    value: str | None = None,
    key: str | None = None,
) -> OptionMap | object:
    """将查询结果转换为 ``{key: label}`` 形式的 options.

    Args:
        query: SQLAlchemy Query/Result、记录列表、单条记录或 LazyTranslation.
        value: 作为显示文本的字段名,缺失时使用记录自身的字符串形式.
        key: 作为选项值的字段名,缺失时依次尝试 ``get_key()``、映射主键、``id`` 字段.

    Returns:
        非空时返回 options 字典;没有任何可用记录时原样返回归一化后的输入.

    """
    if isinstance(query, LazyTranslation):
        query = query.get()
        if isinstance(query, Mapping):
            return _translated_options(query) or query

    records = _normalize_records(query)

    options: OptionMap = {}
    for record in records:
        record_value = _resolve_value(record, value)
        if not record_value:
            continue
        record_key = _resolve_key(record, key, record_value)
        options[record_key] = str(record_value)

    if not options:
        log_debug(
            "没有可用的选项记录,原样返回输入",
            module="query_utils",
            record_count=len(records),
            value_field=value,
            key_field=key,
        )
        return records
    return options


__all__ = ["query_to_array"]
