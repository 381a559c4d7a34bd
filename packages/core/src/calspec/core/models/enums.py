"""枚举定义

包含事件分类 EventType 和星期 Weekday。
EventType 的声明顺序即其全序，仅用于 Event 排序时的平局裁决，不代表严重程度。
"""

from datetime import date
from enum import StrEnum


class EventType(StrEnum):
    """事件分类 -- CLOSED 是最终兜底分类"""

    CLOSED = "CLOSED"
    EARLY_CLOSE = "EARLY_CLOSE"
    NOTABLE = "NOTABLE"
    PERIOD_MARKER = "PERIOD_MARKER"
    WEEKEND = "WEEKEND"

    @property
    def rank(self) -> int:
        """声明顺序序号（StrEnum 默认按字符串比较，排序需用此值）"""
        return _EVENT_TYPE_ORDER.index(self)


_EVENT_TYPE_ORDER: list[EventType] = list(EventType)


class Weekday(StrEnum):
    """星期 -- 声明顺序与 date.weekday() 对齐（MONDAY=0）"""

    MONDAY = "MONDAY"
    TUESDAY = "TUESDAY"
    WEDNESDAY = "WEDNESDAY"
    THURSDAY = "THURSDAY"
    FRIDAY = "FRIDAY"
    SATURDAY = "SATURDAY"
    SUNDAY = "SUNDAY"

    @classmethod
    def of(cls, day: date) -> "Weekday":
        """返回日期对应的星期"""
        return list(cls)[day.weekday()]

    @property
    def display_name(self) -> str:
        """英文展示名（如 Saturday）"""
        return self.value.capitalize()
