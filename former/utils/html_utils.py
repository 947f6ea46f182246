"""HTML 属性与实体处理工具.

约束:
- 仅保留纯函数/格式化逻辑
- 禁止在此模块内访问 Flask app_context
"""

from __future__ import annotations

import html
import re
from collections.abc import Mapping
from html.entities import codepoint2name, html5
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from former.types import AttributeKey, AttributeMap

# 已经编码过的实体不再二次编码
_ENTITY_PATTERN = re.compile(r"&(?:#[0-9]+|#[xX][0-9a-fA-F]+|[A-Za-z][A-Za-z0-9]*);")
_NUMERIC_KEY_PATTERN = re.compile(r"^-?[0-9]+$")

_ENTITY_TABLE: dict[str, str] = {chr(codepoint): f"&{name};" for codepoint, name in codepoint2name.items()}
_ENTITY_TABLE["'"] = "&#039;"


def ucfirst(value: str) -> str:
    """首字母大写,其余字符保持原样."""
    return value[:1].upper() + value[1:]


def add_class(attributes: Mapping[str, object] | None, class_name: str) -> dict[str, object]:
    """向属性字典追加 CSS class,已包含时不重复追加.

    Args:
        attributes: 原始属性字典,不会被修改.
        class_name: 需要追加的 class.

    Returns:
        新的属性字典副本.

    """
    updated: dict[str, object] = dict(attributes or {})
    current = updated.get("class")
    current_text = "" if current is None else str(current)

    if class_name not in current_text:
        updated["class"] = f"{current_text} {class_name}".strip()
    else:
        updated["class"] = current_text
    return updated


def _encode_chunk(text: str) -> str:
    return "".join(_ENTITY_TABLE.get(char, char) for char in text)


def _is_known_entity(entity: str) -> bool:
    if entity.startswith("&#"):
        return True
    return entity[1:] in html5


def entities(value: object) -> str:
    """将 HTML 特殊字符转换为实体.

    单双引号都会被编码,已有的合法实体保持原样.

    Example:
        >>> entities('<a href="x">café</a>')
        '&lt;a href=&quot;x&quot;&gt;caf&eacute;&lt;/a&gt;'

    """
    if value is None:
        return ""
    text = str(value)

    parts: list[str] = []
    position = 0
    for match in _ENTITY_PATTERN.finditer(text):
        if not _is_known_entity(match.group(0)):
            continue
        parts.append(_encode_chunk(text[position : match.start()]))
        parts.append(match.group(0))
        position = match.end()
    parts.append(_encode_chunk(text[position:]))
    return "".join(parts)


def _decode_entity(match: re.Match[str]) -> str:
    entity = match.group(0)
    if entity.startswith("&#"):
        return html.unescape(entity)
    return html5.get(entity[1:], entity)


def decode(value: object) -> str:
    """将 HTML 实体还原为字符.

    只还原以分号结尾的命名实体与数字实体,`&lt` 这类缺少分号的写法保持原样.
    """
    if value is None:
        return ""
    return _ENTITY_PATTERN.sub(_decode_entity, str(value))


def _iter_attribute_items(attributes: AttributeMap | Sequence[object]) -> Iterator[tuple[AttributeKey, object]]:
    if isinstance(attributes, Mapping):
        yield from attributes.items()
    else:
        yield from enumerate(attributes)


def _is_numeric_key(key: object) -> bool:
    if isinstance(key, bool):
        return False
    if isinstance(key, int):
        return True
    return isinstance(key, str) and bool(_NUMERIC_KEY_PATTERN.match(key))


def attributes(attributes: AttributeMap | Sequence[object] | None) -> str | None:
    """将属性字典渲染为 HTML 属性字符串.

    - 值为 None/False 的属性会被跳过
    - 数字键使用值本身作为属性名(`required="required"`)
    - True 渲染为同名布尔属性

    Returns:
        以空格开头的属性字符串;没有任何属性时返回 None,而不是空串.

    """
    rendered: list[str] = []
    for key, value in _iter_attribute_items(attributes or {}):
        if value is None or value is False:
            continue
        name = value if _is_numeric_key(key) else key
        if value is True:
            value = name
        rendered.append(f'{name}="{entities(value)}"')

    if not rendered:
        return None
    return " " + " ".join(rendered)


__all__ = ["add_class", "attributes", "decode", "entities", "ucfirst"]
