"""CalendarGenerator -- 日历事件生成流水线

流程：
1. 解析日历 specification
2. 由 occurrence 生成方展开每个带规则的 event source
3. 应用 delta（add / remove）
4. 分类为 Event
5. 为范围内没有其他事件的周末日补充 WEEKEND 事件
6. 按 (date, type, description) 排序

解析错误直接向上抛出，不产生部分结果。
"""

from datetime import date
from typing import Protocol

import structlog

from calspec.core.models import (
    DateRange,
    Event,
    EventSource,
    EventType,
    Occurrence,
    ResolvedSpec,
    Weekday,
)

from .classifier import OccurrenceClassifier
from .deltas import apply_deltas
from .resolver import SpecResolver

log = structlog.get_logger()

WEEKEND_PROVENANCE = "weekend_policy"


class OccurrenceSource(Protocol):
    """规则展开接口 -- 决定 event source 在哪些日期上出现"""

    def expand(
        self,
        source: EventSource,
        date_range: DateRange,
        provenance: str,
    ) -> list[Occurrence]:
        """展开 source.rule 为范围内的 occurrence"""
        ...


class CalendarGenerator:
    """组合 resolver、occurrence 生成方与 classifier 的生成流水线"""

    def __init__(
        self,
        resolver: SpecResolver,
        occurrence_source: OccurrenceSource,
        classifier: OccurrenceClassifier | None = None,
    ) -> None:
        self._resolver = resolver
        self._occurrence_source = occurrence_source
        self._classifier = classifier or OccurrenceClassifier()

    def generate(self, calendar_id: str, date_range: DateRange) -> list[Event]:
        """生成日历在指定范围内的全部事件

        Raises:
            SpecNotFoundError: 日历或模块不存在
            CircularDependencyError: 继承图中存在环
        """
        spec = self._resolver.resolve(calendar_id)

        occurrences: list[Occurrence] = []
        for source in spec.event_sources:
            if source.rule is None:
                continue
            occurrences.extend(
                self._occurrence_source.expand(
                    source, date_range, f"{spec.id}:{source.key}"
                )
            )

        occurrences = apply_deltas(occurrences, spec.deltas, date_range)
        events = self._classifier.classify(occurrences, spec)
        events.extend(weekend_events(spec, date_range, {e.date for e in events}))

        log.info(
            "calendar_generated",
            calendar_id=calendar_id,
            range_start=date_range.start.isoformat(),
            range_end=date_range.end.isoformat(),
            event_count=len(events),
        )
        return sorted(events)


def weekend_events(
    spec: ResolvedSpec,
    date_range: DateRange,
    occupied_dates: set[date],
) -> list[Event]:
    """为范围内未被占用的周末日生成 WEEKEND 事件"""
    return [
        Event(
            date=day,
            type=EventType.WEEKEND,
            description=Weekday.of(day).display_name,
            provenance=WEEKEND_PROVENANCE,
        )
        for day in date_range.days()
        if spec.weekend_policy.is_weekend(day) and day not in occupied_dates
    ]
