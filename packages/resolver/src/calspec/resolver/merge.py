"""合并原语 -- 用于继承图之外的覆盖式组合

例如将基础定义与独立提供的环境覆盖层合并。无递归、无 chain 记录。
"""

from collections.abc import Iterable, Mapping

from calspec.core.models import EventSource, EventType


def merge_event_sources(
    base: Iterable[EventSource],
    overlay: Iterable[EventSource],
) -> list[EventSource]:
    """按 source key 覆盖合并

    overlay 中 key 相同的项替换 base 中的项，但保留其首次出现的位置；
    仅出现在 overlay 中的 key 按 overlay 顺序追加在末尾。
    """
    merged: dict[str, EventSource] = {}
    for source in base:
        merged[source.key] = source
    for source in overlay:
        merged[source.key] = source
    return list(merged.values())


def merge_classifications(
    base: Mapping[str, EventType],
    overlay: Mapping[str, EventType],
) -> dict[str, EventType]:
    """按 key 覆盖合并，overlay 优先"""
    return {**base, **overlay}
