"""端口过滤器

调度绑定主机端口的容器时，只保留尚未分配相同端口的节点。
"""
from typing import Iterable, List, Set

from loguru import logger

from app.core.exceptions import NoEligibleNodeError
from app.schemas.common import HOST_NETWORK_MODE, ContainerConfig, Node, PortBinding
from app.services.base_filter import PlacementFilter
from app.utils.port_parser import parse_port_range


def binds_all_interfaces(host_ip: str) -> bool:
    """空地址或0.0.0.0表示绑定所有网卡"""
    return host_ip in ("", "0.0.0.0")


class PortFilter(PlacementFilter):
    """端口过滤器类"""

    def __init__(self, host_mode: str = HOST_NETWORK_MODE):
        """
        Args:
            host_mode: 表示共享主机网络命名空间的网络模式名
        """
        self.host_mode = host_mode

    @property
    def name(self) -> str:
        return "port"

    def filter(self, config: ContainerConfig, nodes: List[Node]) -> List[Node]:
        if config.host_config.network_mode == self.host_mode:
            return self._filter_host(config, nodes)
        return self._filter_bridge(config, nodes)

    def _filter_host(self, config: ContainerConfig, nodes: List[Node]) -> List[Node]:
        """host网络模式：其他host模式容器已暴露相同端口的节点被排除"""
        for port in config.exposed_ports:
            candidates = [node for node in nodes if not self._port_already_exposed(node, port)]
            if not candidates:
                logger.warning(f"host模式下没有节点可以提供端口 {port}")
                raise NoEligibleNodeError(port, host_mode=True)
            logger.debug(f"端口 {port}(host) 过滤后剩余 {len(candidates)}/{len(nodes)} 个节点")
            nodes = candidates
        return nodes

    def _filter_bridge(self, config: ContainerConfig, nodes: List[Node]) -> List[Node]:
        """bridge网络模式：逐个检查请求的端口绑定"""
        for container_port, bindings in config.host_config.port_bindings.items():
            for binding in bindings:
                requested_start, requested_end = parse_port_range(binding.host_port)
                candidates = [
                    node for node in nodes
                    if not self._port_already_in_use(node, binding.host_ip, requested_start, requested_end)
                ]
                if not candidates:
                    port = binding.host_port or f"{container_port}(动态分配)"
                    logger.warning(f"没有节点可以提供端口 {port}")
                    raise NoEligibleNodeError(port)
                logger.debug(
                    f"端口 {binding.host_ip or '*'}:{binding.host_port} 过滤后剩余 "
                    f"{len(candidates)}/{len(nodes)} 个节点"
                )
                nodes = candidates
        return nodes

    def _port_already_exposed(self, node: Node, requested_port: str) -> bool:
        for container in node.containers:
            if container.is_host_network(self.host_mode) and requested_port in container.exposed_ports:
                return True
        return False

    def _port_already_in_use(self, node: Node, requested_ip: str,
                             requested_start: int, requested_end: int) -> bool:
        """判断请求的端口范围在节点上是否已被完全占用

        范围中的每个端口都被同一节点上其他容器的单端口绑定占用时，才认为该范围不可用。

        Args:
            node: 节点
            requested_ip: 请求的绑定地址
            requested_start: 请求的起始端口
            requested_end: 请求的结束端口

        Returns:
            bool: 是否已被占用

        Raises:
            PortRangeSyntaxError: 已有容器的端口字符串无法解析
        """
        if requested_start == 0 and requested_end == 0:
            return False

        ports_in_use: Set[int] = set()
        for container in node.containers:
            if self._compare(ports_in_use, requested_ip, requested_start, requested_end,
                             container.effective_bindings()):
                return True
        return False

    @staticmethod
    def _compare(ports_in_use: Set[int], requested_ip: str, requested_start: int, requested_end: int,
                 bindings: Iterable[PortBinding]) -> bool:
        """累计与请求范围冲突的端口，范围被完全覆盖时返回True"""
        for binding in bindings:
            binding_start, binding_end = parse_port_range(binding.host_port)
            # 跳过未指定主机端口的绑定，以及端口范围绑定（这类绑定只依据实际分配的端口判断）
            if (binding_start == 0 and binding_end == 0) or binding_start != binding_end:
                continue

            if not requested_start <= binding_start <= requested_end:
                continue
            if (requested_ip == binding.host_ip
                    or binds_all_interfaces(requested_ip)
                    or binds_all_interfaces(binding.host_ip)):
                ports_in_use.add(binding_start)
                if len(ports_in_use) >= requested_end - requested_start + 1:
                    return True
        return False
