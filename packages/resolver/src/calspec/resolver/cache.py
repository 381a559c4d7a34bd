"""ResolutionCache -- 按日历标识缓存 ResolvedSpec

无淘汰策略，条目在 clear() 或 resolver 实例丢弃前一直存在。
非线程安全：一个 resolver 实例对应一个解析会话。
"""

from calspec.core.models import ResolvedSpec


class ResolutionCache:
    """日历标识 -> ResolvedSpec 映射"""

    def __init__(self) -> None:
        self._entries: dict[str, ResolvedSpec] = {}

    def contains(self, calendar_id: str) -> bool:
        return calendar_id in self._entries

    def get(self, calendar_id: str) -> ResolvedSpec:
        """查询缓存项

        Raises:
            KeyError: 标识未缓存
        """
        return self._entries[calendar_id]

    def put(self, calendar_id: str, spec: ResolvedSpec) -> None:
        self._entries[calendar_id] = spec

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
