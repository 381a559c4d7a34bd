"""Registry Protocol 接口定义

resolver 通过此接口获取 CalendarSpec / ModuleSpec，
使用 Python Protocol 实现结构化子类型（duck typing）。
"""

from typing import Protocol

from ..models.spec import CalendarSpec, ModuleSpec


class SpecRegistry(Protocol):
    """Specification 存储接口

    返回 None 表示标识不存在；由调用方决定如何处理，不允许静默跳过。
    """

    def get_calendar(self, calendar_id: str) -> CalendarSpec | None:
        """根据标识查询日历定义"""
        ...

    def get_module(self, module_id: str) -> ModuleSpec | None:
        """根据标识查询模块定义"""
        ...
