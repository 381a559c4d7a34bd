"""calspec Core Domain Models -- 公共类型导出

所有公共模型类型从此入口导入。
"""

from .enums import EventType, Weekday
from .event import DateRange, Event, Occurrence
from .resolved import ResolvedSpec, WeekendPolicy
from .spec import (
    AddDelta,
    CalendarMetadata,
    CalendarSpec,
    Delta,
    EventSource,
    ModulePolicies,
    ModuleSpec,
    ReclassifyDelta,
    RemoveDelta,
)

__all__ = [
    # 枚举
    "EventType",
    "Weekday",
    # Specification
    "CalendarSpec",
    "CalendarMetadata",
    "ModuleSpec",
    "ModulePolicies",
    "EventSource",
    # Delta
    "Delta",
    "AddDelta",
    "RemoveDelta",
    "ReclassifyDelta",
    # 解析结果
    "ResolvedSpec",
    "WeekendPolicy",
    # Occurrence / Event
    "Occurrence",
    "Event",
    "DateRange",
]
