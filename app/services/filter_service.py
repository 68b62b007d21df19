"""节点过滤服务"""
from typing import Dict, List, Optional

from loguru import logger

from app.core.config import settings
from app.core.exceptions import NoEligibleNodeError
from app.schemas.common import Node
from app.schemas.filter import FilterRequest, FilterResult
from app.services.base_filter import PlacementFilter
from app.services.port_filter import PortFilter


class FilterService:
    """节点过滤服务类"""

    def __init__(self, port_filter: Optional[PlacementFilter] = None):
        """初始化过滤服务

        Args:
            port_filter: 端口过滤器，默认按配置的host网络模式名创建
        """
        self.port_filter = port_filter or PortFilter(host_mode=settings.HOST_NETWORK_MODE)
        logger.info(f"过滤服务初始化完成，已启用过滤器: {self.port_filter.name}")

    def filter_nodes(self, request: FilterRequest) -> FilterResult:
        """节点端口过滤逻辑

        没有节点满足某个端口需求时，错误写入结果的error字段；
        端口范围格式错误直接抛出，由调用方处理。

        Args:
            request: 过滤请求

        Returns:
            FilterResult: 过滤结果
        """
        filter_result = FilterResult()
        nodes: List[Node] = request.nodes

        try:
            eligible = self.port_filter.filter(request.config, nodes)
        except NoEligibleNodeError as e:
            filter_result.error = e.message
            filter_result.failed_nodes = {self._node_key(node): e.message for node in nodes}
            return filter_result

        eligible_ids = {id(node) for node in eligible}
        failed_nodes: Dict[str, str] = {
            self._node_key(node): f"{self.port_filter.name}过滤器: 请求的端口已被占用"
            for node in nodes if id(node) not in eligible_ids
        }

        filter_result.nodes = eligible
        filter_result.node_names = [node.name for node in eligible]
        filter_result.failed_nodes = failed_nodes
        logger.info(f"端口过滤完成: 输入 {len(nodes)} 个节点，保留 {len(eligible)} 个")
        return filter_result

    @staticmethod
    def _node_key(node: Node) -> str:
        """节点名可能重复，优先使用节点ID"""
        return node.id or node.name
