"""字段类注册表."""

from .registry import DEFAULT_FIELD_CLASS, METHOD_ALIASES, FieldClass, FieldRegistry, get_class_from_method

__all__ = [
    "DEFAULT_FIELD_CLASS",
    "METHOD_ALIASES",
    "FieldClass",
    "FieldRegistry",
    "get_class_from_method",
]
