"""ResolverConfig -- Resolver 配置加载

从环境变量加载配置。
"""

import os
from typing import Literal, get_args

import structlog
from pydantic import BaseModel, Field

log = structlog.get_logger()

AncestorMode = Literal["replay", "memoized"]

_ANCESTOR_MODES: tuple[str, ...] = get_args(AncestorMode)


class ResolverConfig(BaseModel):
    """Resolver 配置

    环境变量:
        CALSPEC_ANCESTOR_MODE: 共享祖先处理模式（replay/memoized）
    """

    ancestor_mode: AncestorMode = Field(
        default="replay",
        description=(
            "replay: 每条路径重新解析父日历，共享祖先的 source 与 chain 会重复出现；"
            "memoized: 显式构建继承图，每个节点只合并一次"
        ),
    )


def load_resolver_config() -> ResolverConfig:
    """从环境变量加载 Resolver 配置

    环境变量映射:
        CALSPEC_ANCESTOR_MODE -> ancestor_mode (默认 "replay")

    Returns:
        ResolverConfig 实例
    """
    kwargs: dict = {}

    if val := os.environ.get("CALSPEC_ANCESTOR_MODE"):
        if val in _ANCESTOR_MODES:
            kwargs["ancestor_mode"] = val
        else:
            log.warning(
                "invalid_ancestor_mode_config",
                env_var="CALSPEC_ANCESTOR_MODE",
                value=val,
                fallback="replay",
            )

    return ResolverConfig(**kwargs)
