"""解析结果模型 -- WeekendPolicy / ResolvedSpec

ResolvedSpec 由 resolver 按需构建、按日历标识缓存，构建后不可变。
"""

from collections.abc import Mapping
from datetime import date
from types import MappingProxyType
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from .enums import EventType, Weekday
from .spec import CalendarMetadata, Delta, EventSource


class WeekendPolicy(BaseModel):
    """视为非营业日的星期集合"""

    model_config = ConfigDict(frozen=True)

    SAT_SUN: ClassVar["WeekendPolicy"]
    NONE: ClassVar["WeekendPolicy"]

    weekend_days: frozenset[Weekday] = Field(default=frozenset())

    def is_weekend(self, day: date | Weekday) -> bool:
        if not isinstance(day, Weekday):
            day = Weekday.of(day)
        return day in self.weekend_days


WeekendPolicy.SAT_SUN = WeekendPolicy(
    weekend_days=frozenset({Weekday.SATURDAY, Weekday.SUNDAY})
)
WeekendPolicy.NONE = WeekendPolicy()


class ResolvedSpec(BaseModel):
    """展平后的日历定义

    event_sources 有序且可能包含重复项（共享祖先被多条路径访问时）；
    classifications 每个 key 至多一项（后写覆盖）；
    resolution_chain 按访问顺序记录每一层（"calendar:<id>" / "module:<id>"）。
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="日历标识")
    metadata: CalendarMetadata | None = Field(default=None)
    weekend_policy: WeekendPolicy = Field(default=WeekendPolicy.SAT_SUN)
    event_sources: tuple[EventSource, ...] = Field(default=())
    classifications: Mapping[str, EventType] = Field(
        default_factory=dict, validate_default=True
    )
    deltas: tuple[Delta, ...] = Field(default=())
    resolution_chain: tuple[str, ...] = Field(default=())

    @field_validator("classifications", mode="after")
    @classmethod
    def _freeze_classifications(
        cls, value: Mapping[str, EventType]
    ) -> Mapping[str, EventType]:
        return MappingProxyType(dict(value))

    @field_serializer("classifications")
    def _serialize_classifications(
        self, value: Mapping[str, EventType]
    ) -> dict[str, str]:
        return {key: str(event_type) for key, event_type in value.items()}

    @property
    def display_name(self) -> str:
        """元数据名称，缺省时回退到日历标识"""
        if self.metadata is not None and self.metadata.name:
            return self.metadata.name
        return self.id
