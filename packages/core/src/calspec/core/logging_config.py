"""日志配置 -- structlog 初始化与环境变量加载

dev 模式：终端彩色可读输出
json 模式：一行一条 JSON，供日志采集使用

structlog 与标准库 logging 共用同一处理器链，第三方库经 logging
输出的日志也按相同格式渲染。
"""

import logging
import os
from typing import Literal, get_args

import structlog
from pydantic import BaseModel, Field

log = structlog.get_logger()

LogFormat = Literal["dev", "json"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingConfig(BaseModel):
    """日志配置

    环境变量:
        CALSPEC_LOG_FORMAT: 渲染模式（dev/json）
        CALSPEC_LOG_LEVEL: 根 logger 级别
    """

    log_format: LogFormat = Field(default="dev", description="dev: 终端可读输出；json: 结构化输出")
    log_level: LogLevel = Field(default="INFO", description="根 logger 级别")


def load_logging_config() -> LoggingConfig:
    """从环境变量加载日志配置

    环境变量映射:
        CALSPEC_LOG_FORMAT -> log_format (默认 "dev")
        CALSPEC_LOG_LEVEL  -> log_level (默认 "INFO"，大小写不敏感)

    非法取值记录 warning 并使用默认值。
    """
    kwargs: dict = {}

    if val := os.environ.get("CALSPEC_LOG_FORMAT"):
        if val in get_args(LogFormat):
            kwargs["log_format"] = val
        else:
            log.warning(
                "invalid_log_format_config",
                env_var="CALSPEC_LOG_FORMAT",
                value=val,
                fallback="dev",
            )

    if val := os.environ.get("CALSPEC_LOG_LEVEL"):
        if val.upper() in get_args(LogLevel):
            kwargs["log_level"] = val.upper()
        else:
            log.warning(
                "invalid_log_level_config",
                env_var="CALSPEC_LOG_LEVEL",
                value=val,
                fallback="INFO",
            )

    return LoggingConfig(**kwargs)


def _shared_processors() -> list[structlog.types.Processor]:
    """structlog 与标准库日志共用的前置处理器"""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _renderer_chain(log_format: LogFormat) -> list[structlog.types.Processor]:
    """按模式选择最终渲染器

    json 模式先把异常展开为结构化字段，ConsoleRenderer 自带异常美化。
    """
    if log_format == "json":
        return [
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ]
    return [structlog.dev.ConsoleRenderer()]


def setup_logging(config: LoggingConfig | None = None) -> LoggingConfig:
    """初始化 structlog 与标准库 logging

    Args:
        config: 日志配置，缺省时从环境变量加载

    Returns:
        实际生效的配置
    """
    if config is None:
        config = load_logging_config()

    shared = _shared_processors()
    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler()
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                *_renderer_chain(config.log_format),
            ],
            foreign_pre_chain=shared,
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(config.log_level)
    return config
