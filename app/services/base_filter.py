"""节点过滤器基类"""
from abc import ABC, abstractmethod
from typing import List

from app.schemas.common import ContainerConfig, Node


class PlacementFilter(ABC):
    """节点过滤器

    每个过滤器接收完整的候选节点列表，返回其中满足条件的子集；
    无法满足时抛出异常，不返回部分结果。
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """过滤器名称"""

    @abstractmethod
    def filter(self, config: ContainerConfig, nodes: List[Node]) -> List[Node]:
        """过滤候选节点

        Args:
            config: 待调度容器的配置
            nodes: 候选节点列表

        Returns:
            List[Node]: 满足条件的节点，保持输入顺序
        """
