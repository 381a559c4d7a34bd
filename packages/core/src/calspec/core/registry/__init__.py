"""calspec Core Registry -- specification 查询接口与内存实现"""

from .memory import InMemorySpecRegistry
from .protocols import SpecRegistry

__all__ = [
    "SpecRegistry",
    "InMemorySpecRegistry",
]
