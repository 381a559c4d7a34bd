"""Resolver 包测试 fixtures"""

from datetime import date

import pytest
from calspec.core.models import (
    CalendarSpec,
    EventSource,
    EventType,
    ModulePolicies,
    ModuleSpec,
    Occurrence,
    ReclassifyDelta,
    Weekday,
)
from calspec.core.registry import InMemorySpecRegistry


@pytest.fixture
def christmas_occurrence() -> Occurrence:
    """2024-12-25 圣诞节 occurrence"""
    return Occurrence(
        key="christmas",
        date=date(2024, 12, 25),
        name="Christmas Day",
        provenance="test",
    )


@pytest.fixture
def market_registry() -> InMemorySpecRegistry:
    """典型市场日历继承结构

    US-MARKET-BASE uses [weekend_sat_sun, us_federal]
    US-NYSE extends [US-MARKET-BASE] uses [nyse_extras]
    """
    return InMemorySpecRegistry(
        calendars=[
            CalendarSpec(
                id="US-MARKET-BASE",
                uses=("weekend_sat_sun", "us_federal"),
                event_sources=(EventSource(key="new_years_day", name="New Year's Day"),),
                classifications={"new_years_day": EventType.CLOSED},
            ),
            CalendarSpec(
                id="US-NYSE",
                extends=("US-MARKET-BASE",),
                uses=("nyse_extras",),
                event_sources=(EventSource(key="mlk_day", name="Martin Luther King Jr. Day"),),
                classifications={"good_friday": EventType.CLOSED},
                deltas=(
                    ReclassifyDelta(
                        key="christmas",
                        date=date(2024, 12, 24),
                        new_classification=EventType.EARLY_CLOSE,
                    ),
                ),
            ),
        ],
        modules=[
            ModuleSpec(
                id="weekend_sat_sun",
                policies=ModulePolicies(weekends=(Weekday.SATURDAY, Weekday.SUNDAY)),
            ),
            ModuleSpec(
                id="us_federal",
                event_sources=(
                    EventSource(key="christmas", name="Christmas Day"),
                    EventSource(key="july_4", name="Independence Day"),
                ),
            ),
            ModuleSpec(
                id="nyse_extras",
                event_sources=(
                    EventSource(
                        key="good_friday",
                        name="Good Friday",
                        default_classification=EventType.NOTABLE,
                    ),
                ),
            ),
        ],
    )
