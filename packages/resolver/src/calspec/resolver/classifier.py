"""OccurrenceClassifier -- 将 occurrence 分类为 Event

分类优先级（首个命中即返回，不做混合）：
1. delta 在 (key, date) 上的覆盖
2. ResolvedSpec 中按 key 的显式分类（作用于该 key 的所有日期）
3. event source 的默认分类
4. 兜底 CLOSED

分类永不失败：覆盖数据不完整时回落到兜底分类。
"""

from collections.abc import Iterable, Mapping, Sequence
from datetime import date
from typing import assert_never

import structlog

from calspec.core.models import (
    AddDelta,
    Delta,
    Event,
    EventType,
    Occurrence,
    ReclassifyDelta,
    RemoveDelta,
    ResolvedSpec,
)

log = structlog.get_logger()

FALLBACK_CLASSIFICATION = EventType.CLOSED


def build_delta_overrides(
    deltas: Iterable[Delta],
) -> dict[str, dict[date, EventType]]:
    """由 delta 构建 key -> date -> 分类 的覆盖表

    ReclassifyDelta 与携带分类的 AddDelta 产生覆盖，同一 (key, date) 后者覆盖前者；
    未携带分类的 AddDelta 与 RemoveDelta 不产生覆盖。
    """
    overrides: dict[str, dict[date, EventType]] = {}
    for delta in deltas:
        if isinstance(delta, ReclassifyDelta):
            overrides.setdefault(delta.key, {})[delta.date] = delta.new_classification
        elif isinstance(delta, AddDelta):
            if delta.classification is not None:
                overrides.setdefault(delta.key, {})[delta.date] = delta.classification
        elif isinstance(delta, RemoveDelta):
            continue
        else:
            assert_never(delta)
    return overrides


class OccurrenceClassifier:
    """按覆盖优先级链对 occurrence 分类

    纯函数：不修改输入，输出顺序与输入一致（不排序）。
    """

    def classify(
        self,
        occurrences: Sequence[Occurrence],
        spec: ResolvedSpec,
    ) -> list[Event]:
        overrides = build_delta_overrides(spec.deltas)
        source_defaults = {
            source.key: source.default_classification for source in spec.event_sources
        }

        events = [
            Event(
                date=occ.date,
                type=self._determine_type(
                    occ, spec.classifications, source_defaults, overrides
                ),
                description=occ.name,
                provenance=occ.provenance,
            )
            for occ in occurrences
        ]

        log.debug(
            "occurrences_classified",
            calendar_id=spec.id,
            occurrence_count=len(events),
        )
        return events

    def _determine_type(
        self,
        occ: Occurrence,
        classifications: Mapping[str, EventType],
        source_defaults: dict[str, EventType],
        overrides: dict[str, dict[date, EventType]],
    ) -> EventType:
        by_date = overrides.get(occ.key)
        if by_date is not None and occ.date in by_date:
            return by_date[occ.date]

        if occ.key in classifications:
            return classifications[occ.key]

        if occ.key in source_defaults:
            return source_defaults[occ.key]

        log.debug(
            "occurrence_fallback_classification",
            key=occ.key,
            date=occ.date.isoformat(),
            fallback=str(FALLBACK_CLASSIFICATION),
        )
        return FALLBACK_CLASSIFICATION
