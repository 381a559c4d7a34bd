"""Resolver 异常体系

两类错误均为终止性错误（配置编写缺陷），不重试，调用方应中止整个生成请求。
"""


class ResolutionError(Exception):
    """Resolver 包基础异常"""

    def __init__(self, message: str, recoverable: bool = False) -> None:
        """
        Args:
            message: 错误描述
            recoverable: 是否可通过重试恢复（解析错误恒为 False）
        """
        super().__init__(message)
        self.recoverable = recoverable


class SpecNotFoundError(ResolutionError):
    """引用的日历或模块在 registry 中不存在"""

    def __init__(self, kind: str, spec_id: str) -> None:
        """
        Args:
            kind: "calendar" 或 "module"
            spec_id: 缺失的标识
        """
        super().__init__(f"{kind.capitalize()} not found: {spec_id}")
        self.kind = kind
        self.spec_id = spec_id


class CircularDependencyError(ResolutionError):
    """同一标识在单条遍历路径上重复出现"""

    def __init__(self, path: tuple[str, ...]) -> None:
        """
        Args:
            path: 遍历路径，最后一项为重复出现的标识
        """
        super().__init__(f"Circular dependency detected: {' -> '.join(path)}")
        self.path = path
