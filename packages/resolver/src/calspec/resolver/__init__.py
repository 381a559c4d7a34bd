"""calspec Resolver -- specification 解析与事件分类引擎

packages/resolver 的公开接口导出。
"""

# 装配入口
from .bootstrap import create_resolver

# 缓存与合并原语
from .cache import ResolutionCache

# 分类
from .classifier import OccurrenceClassifier, build_delta_overrides

# 配置
from .config import ResolverConfig, load_resolver_config
from .deltas import apply_deltas

# 异常
from .exceptions import CircularDependencyError, ResolutionError, SpecNotFoundError
from .generator import CalendarGenerator, OccurrenceSource, weekend_events
from .graph import InheritanceGraph
from .merge import merge_classifications, merge_event_sources

# 核心组件
from .resolver import SpecResolver

__all__ = [
    "create_resolver",
    "SpecResolver",
    "InheritanceGraph",
    "ResolutionCache",
    "merge_event_sources",
    "merge_classifications",
    "OccurrenceClassifier",
    "build_delta_overrides",
    "apply_deltas",
    "CalendarGenerator",
    "OccurrenceSource",
    "weekend_events",
    "ResolverConfig",
    "load_resolver_config",
    "ResolutionError",
    "SpecNotFoundError",
    "CircularDependencyError",
]
