"""Specification 数据模型 -- CalendarSpec / ModuleSpec / EventSource / Delta

由 registry 加载后在进程生命周期内只读，所有模型均为 frozen。
"""

from datetime import date
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from .enums import EventType, Weekday


class CalendarMetadata(BaseModel):
    """日历元数据"""

    model_config = ConfigDict(frozen=True)

    name: str = Field(default="", description="展示名称")
    description: str = Field(default="", description="日历说明")
    chronology: str = Field(default="ISO", description="历法标识")


class EventSource(BaseModel):
    """可复用的 occurrence 生成规则

    rule 对本引擎不透明，由 occurrence 生成方解释。
    """

    model_config = ConfigDict(frozen=True)

    key: str = Field(description="同一层内唯一的 source key")
    name: str = Field(default="", description="展示名称")
    rule: Any = Field(default=None, description="生成规则引用（不透明）")
    default_classification: EventType = Field(
        default=EventType.CLOSED,
        description="无覆盖时使用的默认分类",
    )


class AddDelta(BaseModel):
    """在 key+date 上新增一个 occurrence，可携带自身分类"""

    model_config = ConfigDict(frozen=True)

    action: Literal["add"] = "add"
    key: str
    name: str = ""
    date: date
    classification: EventType | None = None


class RemoveDelta(BaseModel):
    """移除 key+date 上的 occurrence"""

    model_config = ConfigDict(frozen=True)

    action: Literal["remove"] = "remove"
    key: str
    date: date


class ReclassifyDelta(BaseModel):
    """修改 key+date 上已有 occurrence 的分类"""

    model_config = ConfigDict(frozen=True)

    action: Literal["reclassify"] = "reclassify"
    key: str
    date: date
    new_classification: EventType


# 按 action 字段区分的 tagged union；新增变体时所有消费方需同步处理
Delta = Annotated[
    AddDelta | RemoveDelta | ReclassifyDelta,
    Field(discriminator="action"),
]


class CalendarSpec(BaseModel):
    """单个日历的声明式定义"""

    model_config = ConfigDict(frozen=True)

    kind: Literal["calendar"] = "calendar"
    id: str = Field(description="日历标识")
    metadata: CalendarMetadata | None = Field(default=None, description="元数据")
    extends: tuple[str, ...] = Field(default=(), description="父日历标识（有序）")
    uses: tuple[str, ...] = Field(default=(), description="引用的模块标识（有序）")
    event_sources: tuple[EventSource, ...] = Field(default=())
    classifications: dict[str, EventType] = Field(
        default_factory=dict,
        description="occurrence key -> 分类",
    )
    deltas: tuple[Delta, ...] = Field(default=())


class ModulePolicies(BaseModel):
    """模块可贡献的策略片段"""

    model_config = ConfigDict(frozen=True)

    weekends: tuple[Weekday, ...] = Field(default=(), description="周末日")


class ModuleSpec(BaseModel):
    """可复用模块 -- 只贡献 event source 和周末策略"""

    model_config = ConfigDict(frozen=True)

    kind: Literal["module"] = "module"
    id: str = Field(description="模块标识")
    policies: ModulePolicies | None = Field(default=None)
    event_sources: tuple[EventSource, ...] = Field(default=())
