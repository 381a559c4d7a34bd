"""Resolver 装配入口

初始化日志、从配置目录加载 specification，返回可直接使用的 SpecResolver。
"""

from calspec.core.logging_config import LoggingConfig, setup_logging
from calspec.core.registry import InMemorySpecRegistry, SpecRegistry

from .config import ResolverConfig, load_resolver_config
from .resolver import SpecResolver


def create_resolver(
    registry: SpecRegistry | None = None,
    config: ResolverConfig | None = None,
    logging_config: LoggingConfig | None = None,
) -> SpecResolver:
    """创建 SpecResolver 实例

    Args:
        registry: 注册表，缺省从 CALSPEC_CALENDARS_DIR / CALSPEC_MODULES_DIR 加载
        config: Resolver 配置，缺省从环境变量加载
        logging_config: 日志配置，缺省从环境变量加载
    """
    setup_logging(logging_config)

    if registry is None:
        registry = InMemorySpecRegistry.from_directories()
    return SpecResolver(registry, config or load_resolver_config())
