"""Delta 应用 -- 在 occurrence 列表上执行 add / remove

reclassify 在分类阶段处理，此处不改变 occurrence。
"""

from collections.abc import Iterable, Sequence
from datetime import date
from typing import assert_never

from calspec.core.models import (
    AddDelta,
    DateRange,
    Delta,
    Occurrence,
    ReclassifyDelta,
    RemoveDelta,
)

DELTA_ADD_PROVENANCE = "delta:add"


def apply_deltas(
    occurrences: Sequence[Occurrence],
    deltas: Iterable[Delta],
    date_range: DateRange,
) -> list[Occurrence]:
    """将 delta 应用到 occurrence 列表

    - AddDelta：日期在范围内时插入（或替换）该 (key, date) 的 occurrence
    - RemoveDelta：删除该 (key, date) 的 occurrence
    - ReclassifyDelta：忽略

    结果按 key 首次出现顺序分组，组内按插入顺序排列。
    """
    by_key: dict[str, dict[date, Occurrence]] = {}
    for occ in occurrences:
        by_key.setdefault(occ.key, {})[occ.date] = occ

    for delta in deltas:
        if isinstance(delta, AddDelta):
            if date_range.contains(delta.date):
                by_key.setdefault(delta.key, {})[delta.date] = Occurrence(
                    key=delta.key,
                    date=delta.date,
                    name=delta.name,
                    provenance=DELTA_ADD_PROVENANCE,
                )
        elif isinstance(delta, RemoveDelta):
            by_key.get(delta.key, {}).pop(delta.date, None)
        elif isinstance(delta, ReclassifyDelta):
            continue
        else:
            assert_never(delta)

    return [occ for by_date in by_key.values() for occ in by_date.values()]
