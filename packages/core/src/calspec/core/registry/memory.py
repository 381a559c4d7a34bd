"""InMemorySpecRegistry -- 内存 specification 注册表

启动时加载，运行期间只读。按 kind 字段区分日历与模块。
"""

from collections.abc import Iterable
from pathlib import Path
from typing import Annotated, Any

import structlog
import yaml
from pydantic import Field, TypeAdapter, ValidationError

from ..config import (
    SPEC_FILE_SUFFIXES,
    YAML_FILE_SUFFIXES,
    get_calendars_dir,
    get_modules_dir,
)
from ..models.spec import CalendarSpec, ModuleSpec

log = structlog.get_logger()

SpecDocument = Annotated[CalendarSpec | ModuleSpec, Field(discriminator="kind")]

_document_adapter: TypeAdapter[CalendarSpec | ModuleSpec] = TypeAdapter(SpecDocument)


def _load_spec_file(path: Path) -> CalendarSpec | ModuleSpec:
    """按后缀解析单个 specification 文件"""
    if path.suffix in YAML_FILE_SUFFIXES:
        with path.open(encoding="utf-8") as f:
            return _document_adapter.validate_python(yaml.safe_load(f))
    return _document_adapter.validate_json(path.read_bytes())


class InMemorySpecRegistry:
    """Specification 注册表 -- 按标识索引日历和模块

    同一标识重复注册时后者覆盖前者。
    """

    def __init__(
        self,
        calendars: Iterable[CalendarSpec] = (),
        modules: Iterable[ModuleSpec] = (),
    ) -> None:
        self._calendars: dict[str, CalendarSpec] = {}
        self._modules: dict[str, ModuleSpec] = {}
        for spec in (*calendars, *modules):
            self.register(spec)

    def register(self, spec: CalendarSpec | ModuleSpec) -> None:
        """注册单个日历或模块"""
        if isinstance(spec, CalendarSpec):
            self._calendars[spec.id] = spec
        else:
            self._modules[spec.id] = spec

    def get_calendar(self, calendar_id: str) -> CalendarSpec | None:
        return self._calendars.get(calendar_id)

    def get_module(self, module_id: str) -> ModuleSpec | None:
        return self._modules.get(module_id)

    def list_calendars(self) -> list[CalendarSpec]:
        """列出所有日历（按 id 排序）"""
        return sorted(self._calendars.values(), key=lambda s: s.id)

    def list_modules(self) -> list[ModuleSpec]:
        """列出所有模块（按 id 排序）"""
        return sorted(self._modules.values(), key=lambda s: s.id)

    def load_documents(self, documents: Iterable[dict[str, Any]]) -> int:
        """校验并注册一批原始文档

        Args:
            documents: 已解析的文档字典，按 kind 字段区分类型

        Returns:
            注册的文档数量

        Raises:
            ValidationError: 任一文档不合法
        """
        count = 0
        for document in documents:
            self.register(_document_adapter.validate_python(document))
            count += 1
        return count

    def load_directory(self, directory: str | Path) -> int:
        """递归加载目录下的 JSON / YAML 文档

        目录不存在时返回 0；单个文件不合法时记录 warning 并跳过。

        Returns:
            成功注册的文档数量
        """
        root = Path(directory)
        if not root.is_dir():
            return 0

        count = 0
        for path in sorted(root.rglob("*")):
            if not path.is_file() or path.suffix not in SPEC_FILE_SUFFIXES:
                continue
            try:
                spec = _load_spec_file(path)
            except (OSError, yaml.YAMLError, ValidationError) as e:
                log.warning("spec_file_load_failed", path=str(path), error=str(e))
                continue
            self.register(spec)
            count += 1

        log.info("spec_directory_loaded", directory=str(root), count=count)
        return count

    @classmethod
    def from_directories(
        cls,
        calendars_dir: str | Path | None = None,
        modules_dir: str | Path | None = None,
    ) -> "InMemorySpecRegistry":
        """从日历目录和模块目录构建注册表，缺省使用环境配置目录"""
        registry = cls()
        registry.load_directory(calendars_dir or get_calendars_dir())
        registry.load_directory(modules_dir or get_modules_dir())
        return registry
