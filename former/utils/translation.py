"""翻译目录与多级回退的翻译解析.

翻译目录是嵌套映射,使用点号路径寻址,例如 ``validation.attributes.email``.
目录可以由字典直接构造,也可以从 YAML 文件或目录加载(文件名即顶层分组).
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import TYPE_CHECKING

import yaml

from former.errors import CatalogLoadError
from former.utils.html_utils import ucfirst
from former.utils.structlog_config import log_debug

if TYPE_CHECKING:
    from former.types import Translatable

YAML_SUFFIXES = (".yaml", ".yml")
_MISSING = object()


class CatalogTranslator:
    """基于内存字典的翻译目录.

    Attributes:
        catalog: 嵌套的翻译映射.

    Example:
        >>> translator = CatalogTranslator({"validation": {"attributes": {"email": "邮箱"}}})
        >>> translator.get("validation.attributes.email")
        '邮箱'

    """

    def __init__(self, catalog: Mapping[str, object] | None = None) -> None:
        self.catalog: dict[str, object] = dict(catalog or {})

    def _lookup(self, key: str) -> object:
        node: object = self.catalog
        for segment in key.split("."):
            if not isinstance(node, Mapping) or segment not in node:
                return _MISSING
            node = node[segment]
        return node

    def has(self, key: str) -> bool:
        """键是否存在于目录中."""
        if not key:
            return False
        return self._lookup(key) is not _MISSING

    def get(self, key: str) -> object:
        """读取键对应的值,不存在时返回键本身."""
        value = self._lookup(key) if key else _MISSING
        return key if value is _MISSING else value

    def merge(self, group: str, entries: Mapping[str, object]) -> None:
        """把一组翻译挂到顶层分组下,已存在的分组会被整体替换."""
        self.catalog[group] = dict(entries)

    @classmethod
    def from_yaml(cls, path: str | Path) -> CatalogTranslator:
        """从单个 YAML 文件加载目录.

        Raises:
            CatalogLoadError: 文件无法读取、解析失败或顶层不是映射.

        """
        return cls(_read_yaml_mapping(Path(path)))

    @classmethod
    def from_directory(cls, directory: str | Path) -> CatalogTranslator:
        """从目录加载目录,每个 YAML 文件的文件名作为顶层分组.

        例如 ``lang/validation.yaml`` 中的 ``attributes.email`` 对应键
        ``validation.attributes.email``.
        """
        root = Path(directory)
        if not root.is_dir():
            raise CatalogLoadError(f"翻译目录不存在: {root}", extra={"path": str(root)})

        translator = cls()
        for file_path in sorted(root.iterdir()):
            if file_path.suffix.lower() not in YAML_SUFFIXES:
                continue
            translator.merge(file_path.stem, _read_yaml_mapping(file_path))
        return translator


def _read_yaml_mapping(path: Path) -> dict[str, object]:
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise CatalogLoadError(extra={"path": str(path), "error": str(exc)}) from exc

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as exc:
        raise CatalogLoadError(extra={"path": str(path), "error": str(exc)}) from exc

    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise CatalogLoadError(f"翻译文件顶层必须是映射: {path}", extra={"path": str(path)})
    return {str(key): value for key, value in data.items()}


class LazyTranslation:
    """延迟解析的翻译句柄.

    在渲染时才读取目录,可直接作为 ``translate`` 的键或 ``query_to_array`` 的数据源传入.
    """

    def __init__(self, translator: Translatable, key: str) -> None:
        self.translator = translator
        self.key = key

    def get(self) -> object:
        """读取句柄对应的目录值,可能是结构化集合."""
        return self.translator.get(self.key)

    def __str__(self) -> str:
        return str(self.get())

    def __repr__(self) -> str:
        return f"LazyTranslation({self.key!r})"


def _is_structured(value: object) -> bool:
    return isinstance(value, Mapping) or (isinstance(value, Sequence) and not isinstance(value, str))


def translate(
    key: str | LazyTranslation | None,
    fallback: str | None = None,
    *,
    translator: Translatable,
    translate_from: str,
) -> object:
    """按多级回退翻译一个键.

    顺序: 键本身 -> ``translate_from`` 命名空间下的键 -> fallback(缺省为键本身).
    结果为结构化集合时改用 fallback,最终结果首字母大写.

    Args:
        key: 翻译键或已有的 LazyTranslation 句柄,为空时返回 None.
        fallback: 最终兜底文案.
        translator: 翻译目录.
        translate_from: 兜底命名空间,例如 ``validation.attributes``.

    Returns:
        翻译后的字符串;传入句柄时原样返回句柄的值.

    """
    if not key:
        return None

    if isinstance(key, LazyTranslation):
        return key.get()

    if not fallback:
        fallback = key

    namespaced_key = f"{translate_from}.{key}"
    if translator.has(key):
        translation = translator.get(key)
    elif translator.has(namespaced_key):
        translation = translator.get(namespaced_key)
    else:
        log_debug("翻译键不存在,使用回退文案", module="translation", key=key, fallback=fallback)
        translation = fallback

    # 存在但为空(YAML 中的 `email:`)的条目与缺失一致
    if translation is None or _is_structured(translation):
        translation = fallback

    return ucfirst(str(translation))


__all__ = ["CatalogTranslator", "LazyTranslation", "translate"]
