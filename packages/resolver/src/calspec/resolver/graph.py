"""InheritanceGraph -- 显式继承图

从根日历出发沿 extends 边收集所有可达节点，每个节点只访问一次；
后序遍历给出合并顺序（父在子前，同级按 extends 声明顺序）。
"""

import structlog

from calspec.core.models import CalendarSpec
from calspec.core.registry import SpecRegistry

from .exceptions import CircularDependencyError, SpecNotFoundError

log = structlog.get_logger()


class InheritanceGraph:
    """节点为日历标识，边为 child -> parent（extends）"""

    def __init__(
        self,
        root_id: str,
        nodes: dict[str, CalendarSpec],
        merge_order: list[str],
    ) -> None:
        self.root_id = root_id
        self.nodes = nodes
        self.merge_order = merge_order

    @property
    def edges(self) -> dict[str, tuple[str, ...]]:
        """child -> parents 邻接表"""
        return {node_id: spec.extends for node_id, spec in self.nodes.items()}

    @classmethod
    def build(cls, registry: SpecRegistry, root_id: str) -> "InheritanceGraph":
        """从 registry 构建以 root_id 为根的继承图

        Raises:
            SpecNotFoundError: 可达日历不存在
            CircularDependencyError: 某条路径上出现环
        """
        nodes: dict[str, CalendarSpec] = {}
        merge_order: list[str] = []

        def visit(calendar_id: str, path: tuple[str, ...]) -> None:
            if calendar_id in path:
                cycle = (*path, calendar_id)
                log.error("circular_dependency_detected", path=list(cycle))
                raise CircularDependencyError(cycle)
            if calendar_id in nodes:
                return

            spec = registry.get_calendar(calendar_id)
            if spec is None:
                log.error("calendar_not_found", calendar_id=calendar_id)
                raise SpecNotFoundError("calendar", calendar_id)
            nodes[calendar_id] = spec

            for parent_id in spec.extends:
                visit(parent_id, (*path, calendar_id))
            merge_order.append(calendar_id)

        visit(root_id, ())
        return cls(root_id=root_id, nodes=nodes, merge_order=merge_order)
