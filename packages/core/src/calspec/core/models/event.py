"""Occurrence / Event / DateRange 模型

Occurrence 与 Event 均为一次分类运行内的临时对象，不被引擎保留。
Event 按 (date, type, description) 排序，仅用于展示，不参与解析逻辑。
"""

from collections.abc import Iterator
from datetime import date, timedelta
from functools import total_ordering
from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .enums import EventType


class Occurrence(BaseModel):
    """某个 event source 在具体日期上的一次实例"""

    model_config = ConfigDict(frozen=True)

    key: str = Field(description="产生该实例的 EventSource key")
    date: date
    name: str = Field(description="展示名称")
    provenance: str = Field(default="", description="来源标记")


@total_ordering
class Event(BaseModel):
    """最终输出的已分类事件"""

    model_config = ConfigDict(frozen=True)

    date: date
    type: EventType
    description: str
    provenance: str = ""

    def sort_key(self) -> tuple[date, int, str, str]:
        # provenance 兜底，使排序与字段相等性一致
        return (self.date, self.type.rank, self.description, self.provenance)

    def __lt__(self, other: "Event") -> bool:
        if not isinstance(other, Event):
            return NotImplemented
        return self.sort_key() < other.sort_key()


class DateRange(BaseModel):
    """闭区间日期范围，要求 start <= end"""

    model_config = ConfigDict(frozen=True)

    start: date
    end: date

    @model_validator(mode="after")
    def _check_order(self) -> Self:
        if self.start > self.end:
            raise ValueError(f"start {self.start} must not be after end {self.end}")
        return self

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end

    def days(self) -> Iterator[date]:
        """按顺序遍历区间内每一天"""
        current = self.start
        while current <= self.end:
            yield current
            current += timedelta(days=1)
