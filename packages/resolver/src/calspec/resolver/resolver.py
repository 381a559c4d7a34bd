"""SpecResolver -- 展平日历继承图

合并顺序（深度优先、前序合并）：
1. extends 中的父日历（按声明顺序），后者覆盖前者
2. uses 中的模块（按声明顺序），只贡献 event source 与周末策略
3. 日历自身内容，分类优先级最高

顶层结果按日历标识缓存；内部父日历查询不走缓存。
"""

import time

import structlog

from calspec.core.models import (
    CalendarSpec,
    Delta,
    EventSource,
    EventType,
    ModuleSpec,
    ResolvedSpec,
    Weekday,
    WeekendPolicy,
)
from calspec.core.registry import SpecRegistry

from .cache import ResolutionCache
from .config import ResolverConfig
from .exceptions import CircularDependencyError, SpecNotFoundError
from .graph import InheritanceGraph

log = structlog.get_logger()


class _LayerAccumulator:
    """逐层累积合并结果"""

    def __init__(self) -> None:
        self.sources: list[EventSource] = []
        self.classifications: dict[str, EventType] = {}
        self.deltas: list[Delta] = []
        self.weekend_days: set[Weekday] = set()
        self.chain: list[str] = []

    def add_resolved(self, parent: ResolvedSpec) -> None:
        self.sources.extend(parent.event_sources)
        self.classifications.update(parent.classifications)
        self.deltas.extend(parent.deltas)
        self.weekend_days.update(parent.weekend_policy.weekend_days)
        self.chain.extend(parent.resolution_chain)

    def add_module(self, module: ModuleSpec) -> None:
        # 模块的分类与 delta 不参与合并
        if module.policies is not None:
            self.weekend_days.update(module.policies.weekends)
        self.sources.extend(module.event_sources)
        self.chain.append(f"module:{module.id}")

    def add_calendar(self, spec: CalendarSpec) -> None:
        self.sources.extend(spec.event_sources)
        self.classifications.update(spec.classifications)
        self.deltas.extend(spec.deltas)
        self.chain.append(f"calendar:{spec.id}")

    def build(self, spec: CalendarSpec) -> ResolvedSpec:
        policy = (
            WeekendPolicy(weekend_days=frozenset(self.weekend_days))
            if self.weekend_days
            else WeekendPolicy.SAT_SUN
        )
        return ResolvedSpec(
            id=spec.id,
            metadata=spec.metadata,
            weekend_policy=policy,
            event_sources=tuple(self.sources),
            classifications=self.classifications,
            deltas=tuple(self.deltas),
            resolution_chain=tuple(self.chain),
        )


class SpecResolver:
    """日历 specification 解析器

    对固定的 registry 状态结果确定；同一实例内对同一标识的重复调用
    返回同一个缓存对象，clear_cache() 使所有缓存失效。
    """

    def __init__(
        self,
        registry: SpecRegistry,
        config: ResolverConfig | None = None,
    ) -> None:
        """
        Args:
            registry: specification 查询接口
            config: resolver 配置，None 时使用默认配置（replay 模式）
        """
        self._registry = registry
        self._config = config or ResolverConfig()
        self._cache = ResolutionCache()

    @property
    def config(self) -> ResolverConfig:
        return self._config

    def resolve(self, calendar_id: str) -> ResolvedSpec:
        """解析日历标识为 ResolvedSpec

        Raises:
            SpecNotFoundError: 日历或模块不存在
            CircularDependencyError: 继承图中存在环
        """
        if self._cache.contains(calendar_id):
            log.debug("resolution_cache_hit", calendar_id=calendar_id)
            return self._cache.get(calendar_id)

        start_time = time.monotonic()

        if self._config.ancestor_mode == "memoized":
            resolved = self._resolve_memoized(calendar_id)
        else:
            resolved = self._resolve_replay(calendar_id, ())

        self._cache.put(calendar_id, resolved)

        elapsed_ms = int((time.monotonic() - start_time) * 1000)
        log.info(
            "calendar_resolved",
            calendar_id=calendar_id,
            ancestor_mode=self._config.ancestor_mode,
            chain_length=len(resolved.resolution_chain),
            source_count=len(resolved.event_sources),
            elapsed_ms=elapsed_ms,
        )
        return resolved

    def clear_cache(self) -> None:
        """清空所有缓存的解析结果"""
        self._cache.clear()
        log.debug("resolution_cache_cleared")

    def _resolve_replay(
        self,
        calendar_id: str,
        path: tuple[str, ...],
    ) -> ResolvedSpec:
        """递归解析，path 为当前遍历路径（每个子调用获得独立副本）

        共享祖先经由不同路径到达时会被重新解析并重复合并。
        """
        if calendar_id in path:
            cycle = (*path, calendar_id)
            log.error("circular_dependency_detected", path=list(cycle))
            raise CircularDependencyError(cycle)
        path = (*path, calendar_id)

        spec = self._fetch_calendar(calendar_id)
        acc = _LayerAccumulator()

        for parent_id in spec.extends:
            acc.add_resolved(self._resolve_replay(parent_id, path))

        for module_id in spec.uses:
            acc.add_module(self._fetch_module(module_id))

        acc.add_calendar(spec)
        return acc.build(spec)

    def _resolve_memoized(self, calendar_id: str) -> ResolvedSpec:
        """基于显式继承图解析，每个可达日历只合并一次"""
        graph = InheritanceGraph.build(self._registry, calendar_id)
        acc = _LayerAccumulator()

        for node_id in graph.merge_order:
            spec = graph.nodes[node_id]
            for module_id in spec.uses:
                acc.add_module(self._fetch_module(module_id))
            acc.add_calendar(spec)

        return acc.build(graph.nodes[calendar_id])

    def _fetch_calendar(self, calendar_id: str) -> CalendarSpec:
        spec = self._registry.get_calendar(calendar_id)
        if spec is None:
            log.error("calendar_not_found", calendar_id=calendar_id)
            raise SpecNotFoundError("calendar", calendar_id)
        return spec

    def _fetch_module(self, module_id: str) -> ModuleSpec:
        module = self._registry.get_module(module_id)
        if module is None:
            log.error("module_not_found", module_id=module_id)
            raise SpecNotFoundError("module", module_id)
        return module
