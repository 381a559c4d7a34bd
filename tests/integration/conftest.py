"""集成测试共享 fixture -- 磁盘上的完整 specification 集合"""

from datetime import date
from pathlib import Path

import pytest
from calspec.core.models import DateRange, EventSource, Occurrence


class ExplicitDatesSource:
    """按 rule["dates"] 展开 occurrence 的生成方替身"""

    def expand(self, source: EventSource, date_range: DateRange, provenance: str) -> list[Occurrence]:
        occurrences = []
        for raw in source.rule.get("dates", []):
            day = date.fromisoformat(raw)
            if date_range.contains(day):
                occurrences.append(
                    Occurrence(key=source.key, date=day, name=source.name, provenance=provenance)
                )
        return occurrences


@pytest.fixture
def occurrence_source() -> ExplicitDatesSource:
    return ExplicitDatesSource()


@pytest.fixture
def market_specs(specs_dir: Path, write_spec) -> Path:
    """写入市场日历集合，返回 specs 根目录

    US-MARKET-BASE uses [weekend_sat_sun, us_federal]
    US-NYSE        extends [US-MARKET-BASE]
    US-CORP        extends [US-MARKET-BASE] uses [india_visibility]
    US-CORP-NYSE   extends [US-NYSE, US-CORP]（菱形）
    """
    write_spec(
        "weekend_sat_sun",
        {"kind": "module", "id": "weekend_sat_sun", "policies": {"weekends": ["SATURDAY", "SUNDAY"]}},
    )
    write_spec(
        "us_federal",
        {
            "kind": "module",
            "id": "us_federal",
            "event_sources": [
                {"key": "new_years_day", "name": "New Year's Day", "rule": {"dates": ["2025-01-01"]}},
                {"key": "christmas", "name": "Christmas Day", "rule": {"dates": ["2024-12-25"]}},
            ],
        },
    )
    write_spec(
        "india_visibility",
        {
            "kind": "module",
            "id": "india_visibility",
            "event_sources": [
                {
                    "key": "diwali",
                    "name": "Diwali",
                    "rule": {"dates": ["2024-11-01"]},
                    "default_classification": "NOTABLE",
                }
            ],
        },
    )
    write_spec(
        "us_market_base",
        {
            "kind": "calendar",
            "id": "US-MARKET-BASE",
            "metadata": {"name": "US Market Base"},
            "uses": ["weekend_sat_sun", "us_federal"],
        },
    )
    write_spec(
        "us_nyse",
        {
            "kind": "calendar",
            "id": "US-NYSE",
            "metadata": {"name": "New York Stock Exchange"},
            "extends": ["US-MARKET-BASE"],
            "deltas": [
                {
                    "action": "add",
                    "key": "christmas_eve",
                    "name": "Christmas Eve",
                    "date": "2024-12-24",
                    "classification": "EARLY_CLOSE",
                }
            ],
        },
    )
    write_spec(
        "us_corp",
        {
            "kind": "calendar",
            "id": "US-CORP",
            "extends": ["US-MARKET-BASE"],
            "uses": ["india_visibility"],
            "classifications": {"christmas": "PERIOD_MARKER"},
        },
    )
    write_spec(
        "us_corp_nyse",
        {
            "kind": "calendar",
            "id": "US-CORP-NYSE",
            "extends": ["US-NYSE", "US-CORP"],
        },
    )
    return specs_dir
