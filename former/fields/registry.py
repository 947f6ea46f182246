"""字段类注册表与字段方法到字段类的映射.

表单构建器通过方法名创建字段(``submit``、``multiselect`` 等),
这里负责把方法名解析为实际渲染该字段的类名.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import TYPE_CHECKING

from former.utils.html_utils import ucfirst

if TYPE_CHECKING:
    from collections.abc import Iterable

    from former.types import FieldClassRegistry


class FieldClass(str, Enum):
    """内置字段类."""

    BUTTON = "Button"
    CHECKBOX = "Checkbox"
    FILE = "File"
    HIDDEN = "Hidden"
    INPUT = "Input"
    RADIO = "Radio"
    SELECT = "Select"
    TEXTAREA = "Textarea"
    UNEDITABLE = "Uneditable"


# 方法名与字段类不同名时的固定映射
METHOD_ALIASES: dict[str, FieldClass] = {
    "submit": FieldClass.BUTTON,
    "reset": FieldClass.BUTTON,
    "multiselect": FieldClass.SELECT,
    "checkboxes": FieldClass.CHECKBOX,
    "radios": FieldClass.RADIO,
    "files": FieldClass.FILE,
}

DEFAULT_FIELD_CLASS = FieldClass.INPUT


class FieldRegistry:
    """已知字段类的注册表.

    注册项可以只登记类名,也可以同时登记实现类,供渲染层取用.

    Example:
        >>> registry = FieldRegistry.default()
        >>> registry.register("Datepicker")
        >>> registry.has("Datepicker")
        True

    """

    def __init__(self, fields: Mapping[str, type | None] | Iterable[str] | None = None) -> None:
        self._fields: dict[str, type | None] = {}
        if fields is None:
            return
        if isinstance(fields, Mapping):
            for name, field_class in fields.items():
                self.register(name, field_class)
        else:
            for name in fields:
                self.register(name)

    @classmethod
    def default(cls) -> FieldRegistry:
        """返回登记了全部内置字段类的注册表."""
        return cls(field_class.value for field_class in FieldClass)

    def register(self, name: str, field_class: type | None = None) -> None:
        """登记字段类,同名登记会覆盖实现类."""
        self._fields[name] = field_class

    def has(self, name: str) -> bool:
        return name in self._fields

    def get(self, name: str) -> type | None:
        """返回登记的实现类,只登记了类名时返回 None."""
        return self._fields.get(name)

    def names(self) -> list[str]:
        return sorted(self._fields)

    def __contains__(self, name: object) -> bool:
        return name in self._fields

    def __len__(self) -> int:
        return len(self._fields)


def get_class_from_method(method: str, registry: FieldClassRegistry | None = None) -> str:
    """根据字段方法名解析字段类名.

    先查注册表中是否存在与方法名同名(首字母大写)的字段类,
    再查固定映射,都未命中时回落到 ``Input``.

    Args:
        method: 字段方法名,例如 ``submit``、``textarea``.
        registry: 字段类注册表,缺省使用内置注册表.

    Returns:
        字段类名,永远不会抛出异常.

    """
    resolved_registry = registry if registry is not None else FieldRegistry.default()
    class_name = ucfirst(method or "")
    if class_name and resolved_registry.has(class_name):
        return class_name

    return METHOD_ALIASES.get(method, DEFAULT_FIELD_CLASS).value


__all__ = [
    "DEFAULT_FIELD_CLASS",
    "METHOD_ALIASES",
    "FieldClass",
    "FieldRegistry",
    "get_class_from_method",
]
