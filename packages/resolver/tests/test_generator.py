"""CalendarGenerator 单元测试

使用按显式日期列表展开的 occurrence 生成方替身。
"""

from datetime import date

import pytest
from calspec.core.models import (
    AddDelta,
    CalendarSpec,
    DateRange,
    EventSource,
    EventType,
    ModulePolicies,
    ModuleSpec,
    Occurrence,
    RemoveDelta,
    Weekday,
)
from calspec.core.registry import InMemorySpecRegistry
from calspec.resolver import CalendarGenerator, SpecNotFoundError, SpecResolver


class ExplicitDatesSource:
    """rule 为 {"dates": [...]} 时展开为范围内的日期"""

    def __init__(self) -> None:
        self.calls: list[str] = []

    def expand(self, source: EventSource, date_range: DateRange, provenance: str) -> list[Occurrence]:
        self.calls.append(provenance)
        days = [date.fromisoformat(d) for d in source.rule.get("dates", [])]
        return [
            Occurrence(key=source.key, date=d, name=source.name, provenance=provenance)
            for d in days
            if date_range.contains(d)
        ]


DECEMBER_2024 = DateRange(start=date(2024, 12, 23), end=date(2024, 12, 29))


@pytest.fixture
def registry() -> InMemorySpecRegistry:
    return InMemorySpecRegistry(
        calendars=[
            CalendarSpec(
                id="US",
                uses=("weekends",),
                event_sources=(
                    EventSource(key="christmas", name="Christmas Day", rule={"dates": ["2024-12-25"]}),
                    EventSource(key="boxing_day", name="Boxing Day", rule={"dates": ["2024-12-26"]}),
                    EventSource(key="placeholder", name="No Rule"),
                ),
                deltas=(
                    AddDelta(
                        key="christmas_eve",
                        name="Christmas Eve",
                        date=date(2024, 12, 24),
                        classification=EventType.EARLY_CLOSE,
                    ),
                    RemoveDelta(key="boxing_day", date=date(2024, 12, 26)),
                ),
            ),
        ],
        modules=[
            ModuleSpec(
                id="weekends",
                policies=ModulePolicies(weekends=(Weekday.SATURDAY, Weekday.SUNDAY)),
            ),
        ],
    )


class TestGenerate:
    """完整生成流程"""

    def test_generate_week(self, registry):
        """生成一周事件：规则展开、delta、周末补充、排序"""
        source = ExplicitDatesSource()
        generator = CalendarGenerator(SpecResolver(registry), source)
        events = generator.generate("US", DECEMBER_2024)

        assert [(e.date.day, e.type, e.description, e.provenance) for e in events] == [
            (24, EventType.EARLY_CLOSE, "Christmas Eve", "delta:add"),
            (25, EventType.CLOSED, "Christmas Day", "US:christmas"),
            (28, EventType.WEEKEND, "Saturday", "weekend_policy"),
            (29, EventType.WEEKEND, "Sunday", "weekend_policy"),
        ]

    def test_sources_without_rule_skipped(self, registry):
        """无规则的 source 不交给生成方"""
        source = ExplicitDatesSource()
        CalendarGenerator(SpecResolver(registry), source).generate("US", DECEMBER_2024)
        assert source.calls == ["US:christmas", "US:boxing_day"]

    def test_weekend_not_added_on_occupied_date(self):
        """已有事件的周末日不再补充 WEEKEND 事件"""
        registry = InMemorySpecRegistry(
            calendars=[
                CalendarSpec(
                    id="X",
                    event_sources=(
                        EventSource(key="sat_event", name="Festival", rule={"dates": ["2024-12-28"]}),
                    ),
                )
            ]
        )
        events = CalendarGenerator(SpecResolver(registry), ExplicitDatesSource()).generate(
            "X", DECEMBER_2024
        )
        on_saturday = [e for e in events if e.date == date(2024, 12, 28)]
        assert [(e.type, e.description) for e in on_saturday] == [(EventType.CLOSED, "Festival")]

    def test_resolution_error_aborts(self):
        """解析失败时中止，不产生部分结果"""
        generator = CalendarGenerator(SpecResolver(InMemorySpecRegistry()), ExplicitDatesSource())
        with pytest.raises(SpecNotFoundError):
            generator.generate("NONEXISTENT", DECEMBER_2024)
