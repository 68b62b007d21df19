"""测试用的数据构造函数"""
from typing import Dict, List, Optional

from app.schemas.common import Container, ContainerConfig, Node


def make_container(
    name: str = "c",
    network_mode: str = "bridge",
    exposed_ports: Optional[List[str]] = None,
    declared: Optional[Dict[str, List[Dict[str, str]]]] = None,
    realized: Optional[Dict[str, Optional[List[Dict[str, str]]]]] = None,
) -> Container:
    """构造节点上已有的容器

    declared/realized 为 {容器端口: [{"HostIp": ..., "HostPort": ...}]}
    """
    return Container.model_validate({
        "Name": name,
        "ExposedPorts": exposed_ports or [],
        "HostConfig": {"NetworkMode": network_mode, "PortBindings": declared or {}},
        "NetworkSettings": {"Ports": realized or {}},
    })


def make_node(name: str, *containers: Container) -> Node:
    return Node(name=name, containers=list(containers))


def bridge_request(*bindings: Dict[str, str], container_port: str = "80/tcp") -> ContainerConfig:
    """构造bridge模式的调度请求，所有绑定挂在同一个容器端口下"""
    return ContainerConfig.model_validate({
        "HostConfig": {"NetworkMode": "bridge", "PortBindings": {container_port: list(bindings)}},
    })


def host_request(*ports: str) -> ContainerConfig:
    return ContainerConfig.model_validate({
        "ExposedPorts": {port: {} for port in ports},
        "HostConfig": {"NetworkMode": "host"},
    })


